"""
Allow-list — `namespace.member` initializers that may back a global variable.

The table is closed on purpose: allowing a new initializer means adding a
row here, where it shows up in review.
"""

from __future__ import annotations

from noglobals.models.rule_models import AllowRule


ALLOW_RULES: tuple[AllowRule, ...] = (
    AllowRule(namespace="regexp", member="MustCompile", requires_error_name=False),
    AllowRule(namespace="fmt", member="Errorf", requires_error_name=True),
    AllowRule(namespace="errors", member="New", requires_error_name=True),
)


def find_rule(namespace: str | None, member: str | None) -> AllowRule | None:
    """Exact (namespace, member) lookup. No two rows share a pair."""
    if namespace is None or member is None:
        return None
    for rule in ALLOW_RULES:
        if rule.namespace == namespace and rule.member == member:
            return rule
    return None
