"""
AST Parser — Deterministic extraction of top-level `var` declarations.

Walks the tree-sitter Go syntax tree and turns every top-level `var` spec
into a DeclarationGroup. Initializers are reduced to the few shapes the
global variable rule cares about; nothing is evaluated.
"""

from __future__ import annotations

from tree_sitter import Node, Tree

from noglobals.core.parser import GoParser
from noglobals.models.ast_models import (
    CallExpression,
    CompositeExpression,
    DeclarationGroup,
    Identifier,
    InitializerExpression,
    LiteralExpression,
    OtherExpression,
    SourceFile,
)


_LITERAL_TYPES = {
    "int_literal",
    "float_literal",
    "imaginary_literal",
    "rune_literal",
    "interpreted_string_literal",
    "raw_string_literal",
    "true",
    "false",
    "nil",
    "iota",
}


def _node_text(node: Node, source: bytes) -> str:
    """Extract source text for a node."""
    return source[node.start_byte:node.end_byte].decode("utf-8", errors="replace")


def _line(node: Node) -> int:
    return node.start_point[0] + 1


def _selector_parts(node: Node | None, source: bytes) -> tuple[str | None, str | None]:
    """Split `pkg.Member` into ('pkg', 'Member').

    Returns (None, None) unless the operand is a plain identifier, so that
    `a.b.C` or `f().C` never match an allow-list row.
    """
    if node is None:
        return None, None
    if node.type == "selector_expression":
        operand = node.child_by_field_name("operand")
        field = node.child_by_field_name("field")
    elif node.type == "qualified_type":
        operand = node.child_by_field_name("package")
        field = node.child_by_field_name("name")
    else:
        return None, None
    if operand is None or field is None:
        return None, None
    if operand.type not in ("identifier", "package_identifier"):
        return None, None
    return _node_text(operand, source), _node_text(field, source)


def classify_expression(node: Node, source: bytes) -> InitializerExpression:
    """Reduce an initializer node to one of the rule-relevant shapes."""
    if node.type == "call_expression":
        namespace, member = _selector_parts(node.child_by_field_name("function"), source)
        return CallExpression(namespace=namespace, member=member)
    if node.type == "type_conversion_expression":
        # `pkg.T(x)` may come out as a conversion; in Go it is still a call
        namespace, member = _selector_parts(node.child_by_field_name("type"), source)
        return CallExpression(namespace=namespace, member=member)
    if node.type == "composite_literal":
        namespace, member = _selector_parts(node.child_by_field_name("type"), source)
        return CompositeExpression(namespace=namespace, member=member)
    if node.type in _LITERAL_TYPES:
        return LiteralExpression(text=_node_text(node, source))
    return OtherExpression(node_type=node.type)


def _var_specs(declaration: Node) -> list[Node]:
    """Specs of a `var` declaration, with or without parentheses."""
    specs: list[Node] = []
    for child in declaration.named_children:
        if child.type == "var_spec":
            specs.append(child)
        elif child.type == "var_spec_list":
            specs.extend(c for c in child.named_children if c.type == "var_spec")
    return specs


def _build_group(spec: Node, source: bytes, file_path: str) -> DeclarationGroup:
    names = [
        Identifier(name=_node_text(n, source), line=_line(n))
        for n in spec.children_by_field_name("name")
    ]
    values: list[InitializerExpression] = []
    value_list = spec.child_by_field_name("value")
    if value_list is not None:
        values = [
            classify_expression(v, source)
            for v in value_list.named_children
            if v.type != "comment"
        ]
    return DeclarationGroup(
        file_path=file_path,
        line=names[0].line if names else _line(spec),
        names=names,
        values=values,
    )


def extract_declarations(tree: Tree, source: bytes, file_path: str) -> SourceFile:
    """
    Collect the top-level `var` declarations of a parsed Go file.

    Args:
        tree: tree-sitter tree returned by GoParser.parse.
        source: The bytes the tree was parsed from.
        file_path: Path recorded on every group (used in diagnostics).

    Returns:
        SourceFile with one DeclarationGroup per `var` spec, in source order.
    """
    package = ""
    groups: list[DeclarationGroup] = []

    for node in tree.root_node.named_children:
        if node.type == "package_clause" and node.named_children:
            package = _node_text(node.named_children[0], source)
        elif node.type == "var_declaration":
            for spec in _var_specs(node):
                groups.append(_build_group(spec, source, file_path))
        # const, type, func and import declarations are not globals

    return SourceFile(path=file_path, package=package, groups=groups)


def parse_source(
    code: str | bytes, file_path: str = "<unknown>", parser: GoParser | None = None
) -> SourceFile:
    """Parse Go source and extract its declarations. Raises ParseError."""
    parser = parser or GoParser()
    tree, source = parser.parse(code, file_path)
    return extract_declarations(tree, source, file_path)
