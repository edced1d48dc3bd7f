"""
Global Variable Rule — Reports top-level `var` bindings that are not sanctioned.

A binding is allowed when its name is one of the fixed exempt names, or when
its initializer is a `pkg.Member(...)` call or `pkg.Member{...}` literal
found in the allow-list (some rows also require an error-like name).
Everything else is a global variable and gets a diagnostic.
"""

from __future__ import annotations

import logging

from noglobals.core.rules.allow_list import find_rule
from noglobals.core.rules.naming import looks_like_error
from noglobals.models.ast_models import (
    CallExpression,
    CompositeExpression,
    InitializerExpression,
    SourceFile,
)
from noglobals.models.rule_models import Diagnostic


RULE_ID = "global_variable"

# Blank identifier and the conventional build version string
EXEMPT_NAMES = frozenset({"version", "_"})

logger = logging.getLogger("noglobals.rules.global_variable")


def is_allowed(name: str, value: InitializerExpression) -> bool:
    """Decide whether `var <name> = <value>` may stay a global."""
    if name in EXEMPT_NAMES:
        return True

    if isinstance(value, (CallExpression, CompositeExpression)):
        rule = find_rule(value.namespace, value.member)
        if rule is None:
            return False
        if rule.requires_error_name:
            return looks_like_error(name)
        return True

    return False


def check(source_file: SourceFile) -> list[Diagnostic]:
    """Run the rule over one parsed file, in declaration order."""
    diagnostics: list[Diagnostic] = []

    for group in source_file.groups:
        if group.is_malformed:
            # Names cannot be paired with values: report the group once
            first = group.names[0]
            logger.debug(
                "Malformed var spec at %s:%d (%d names, %d values)",
                group.file_path, group.line, len(group.names), len(group.values),
            )
            diagnostics.append(
                Diagnostic(file=group.file_path, line=first.line, name=first.name)
            )
            continue

        for binding in group.bindings():
            if not is_allowed(binding.name, binding.value):
                diagnostics.append(
                    Diagnostic(file=group.file_path, line=binding.line, name=binding.name)
                )

    return diagnostics
