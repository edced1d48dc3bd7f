"""
Tests for AST Parser — verify extraction of var specs and initializer shapes.
"""

import pytest

from noglobals.core.ast_parser import parse_source
from noglobals.core.parser import GoParser, ParseError
from noglobals.models.ast_models import (
    CallExpression,
    CompositeExpression,
    LiteralExpression,
    OtherExpression,
)


def _value(expr):
    code = f'package p\n\nvar x = {expr}\n'
    source_file = parse_source(code, "p.go")
    assert len(source_file.groups) == 1
    return source_file.groups[0].values[0]


def test_extracts_package_name(clean_go_code):
    assert parse_source(clean_go_code, "clean.go").package == "clean"


def test_extracts_only_var_declarations(clean_go_code):
    source_file = parse_source(clean_go_code, "clean.go")
    assert [n.name for g in source_file.groups for n in g.names] == ["ErrNotFound"]
    assert source_file.groups[0].line == 5
    assert source_file.groups[0].file_path == "clean.go"


def test_grouped_declarations_keep_order():
    code = """package p

var (
	first  = 1
	second = 2

	third = 3
)
"""
    groups = parse_source(code, "p.go").groups
    assert [(g.names[0].name, g.line) for g in groups] == [
        ("first", 4),
        ("second", 5),
        ("third", 7),
    ]


def test_qualified_call_shape():
    assert _value('errors.New("boom")') == CallExpression(namespace="errors", member="New")


def test_unqualified_call_shape():
    assert _value("newThing()") == CallExpression(namespace=None, member=None)


def test_nested_selector_call_not_qualified():
    assert _value("a.b.C()") == CallExpression(namespace=None, member=None)


def test_qualified_composite_shape():
    assert _value("sync.Mutex{}") == CompositeExpression(namespace="sync", member="Mutex")


def test_unqualified_composite_shape():
    assert _value("[]string{\"a\"}") == CompositeExpression(namespace=None, member=None)


@pytest.mark.parametrize("literal", ["1", "1.5", '"text"', "`raw`", "'r'", "true", "nil"])
def test_literal_shapes(literal):
    value = _value(literal)
    assert isinstance(value, LiteralExpression)
    assert value.text == literal


@pytest.mark.parametrize("expr", ["1 + 2", "&http.Client{}", "func() {}"])
def test_other_shapes(expr):
    assert isinstance(_value(expr), OtherExpression)


def test_mismatched_names_and_values():
    group = parse_source("package p\n\nvar a, b = pair()\n", "p.go").groups[0]
    assert group.is_malformed
    assert [n.name for n in group.names] == ["a", "b"]
    with pytest.raises(ValueError):
        group.bindings()


def test_bindings_pair_names_with_values():
    group = parse_source("package p\n\nvar a, b = 1, f()\n", "p.go").groups[0]
    bindings = group.bindings()
    assert [b.name for b in bindings] == ["a", "b"]
    assert isinstance(bindings[1].value, CallExpression)


def test_handles_syntax_error():
    with pytest.raises(ParseError) as exc_info:
        parse_source("package p\n\nvar x = = 1\n", "broken.go")
    assert exc_info.value.file_path == "broken.go"
    assert exc_info.value.line is not None
    assert str(exc_info.value).startswith("broken.go:")


def test_missing_package_clause_is_an_error():
    with pytest.raises(ParseError, match="package"):
        GoParser().parse("var x = 1\n", "nopkg.go")


def test_parser_accepts_bytes():
    tree, source = GoParser().parse(b"package p\n", "p.go")
    assert source == b"package p\n"
    assert tree.root_node.type == "source_file"


@pytest.mark.parametrize(
    "body,line",
    [
        ("x := 1\nvar y = 2\n", 3),
        ("fmt.Println(1)\n", 3),
        ("for {}\n", 3),
        ("return\n", 3),
        ("package q\n", 3),
    ],
)
def test_statements_outside_functions_rejected(body, line):
    with pytest.raises(ParseError, match="outside function body") as exc_info:
        parse_source("package p\n\n" + body, "stmt.go")
    assert exc_info.value.line == line
