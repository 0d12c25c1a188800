"""Tests for the expression renderer."""

from __future__ import annotations

import pytest

from godecls.render.expressions import collapse_whitespace, render
from godecls.syntax import GoParser
from tests._fixtures.source_tree import type_node, value_node


@pytest.mark.parametrize(
    ("source", "expected"),
    [
        ("*pkg.Name", "*pkg.Name"),
        ("[]string", "[]string"),
        ("[4]byte", "[4]byte"),
        ("map[string][]int", "map[string][]int"),
        ("chan int", "chan int"),
        ("chan<- int", "chan<- int"),
        ("<-chan error", "<-chan error"),
        ("func(a, b int) (int, error)", "func(a int, b int) (int, error)"),
        ("func(format string, args ...any)", "func(format string, args ...any)"),
        ("func() (*Node)", "func() *Node"),
        ("func() (n int)", "func() (n int)"),
        ("map[string]Pair[int, string]", "map[string]Pair[int, string]"),
    ],
)
def test_render_type_expressions(go_parser: GoParser, source: str, expected: str) -> None:
    assert render(type_node(go_parser, source)) == expected


def test_render_empty_struct_and_interface(go_parser: GoParser) -> None:
    assert render(type_node(go_parser, "struct{}")) == "struct{}"
    assert render(type_node(go_parser, "interface{}")) == "interface{}"


def test_render_struct_flattens_fields(go_parser: GoParser) -> None:
    source = """struct {
	Name string `json:"name"`
	// age in years
	Age  int
}"""
    assert render(type_node(go_parser, source)) == "struct { Name string; Age int }"


def test_render_struct_splits_shared_field_names(go_parser: GoParser) -> None:
    source = """struct {
	X, Y, Z float64
}"""
    rendered = render(type_node(go_parser, source))
    assert rendered == "struct { X float64; Y float64; Z float64 }"
    assert rendered.count(";") == 2


def test_render_struct_embedded_and_nested(go_parser: GoParser) -> None:
    source = """struct {
	io.Reader
	*Base
	Inner struct {
		Deep struct {
			V int
		}
	}
}"""
    assert (
        render(type_node(go_parser, source))
        == "struct { io.Reader; *Base; Inner struct { Deep struct { V int } } }"
    )


def test_render_interface_methods_and_embeds(go_parser: GoParser) -> None:
    source = """interface {
	io.Closer
	Read(p []byte) (n int, err error)
	Name() string
	Reset()
}"""
    assert render(type_node(go_parser, source)) == (
        "interface { io.Closer; Read(p []byte) (n int, err error); Name() string; Reset() }"
    )


def test_render_interface_type_union(go_parser: GoParser) -> None:
    source = """interface {
	~int | ~string
}"""
    assert render(type_node(go_parser, source)) == "interface { ~int | ~string }"


@pytest.mark.parametrize(
    ("source", "expected"),
    [
        ('"visible"', '"visible"'),
        ("42", "42"),
        ("[]int{1, 2, 3}", "[]int{1, 2, 3}"),
        ('map[string]int{"a": 1, "b": 2}', 'map[string]int{"a": 1, "b": 2}'),
        ('&Config{Name: "x", Debug: true}', '&Config{Name: "x", Debug: true}'),
        ('errors.New("boom")', 'errors.New("boom")'),
        ("1 << (10 * (iota + 1))", "1 << (10 * (iota + 1))"),
        ("items[0]", "items[0]"),
        ("func(a int) error { return nil }", "func(a int) error {...}"),
    ],
)
def test_render_value_expressions(go_parser: GoParser, source: str, expected: str) -> None:
    assert render(value_node(go_parser, source)) == expected


def test_render_multiline_literal_on_one_line(go_parser: GoParser) -> None:
    source = """[]string{
	"alpha",
	"beta",
}"""
    assert render(value_node(go_parser, source)) == '[]string{"alpha", "beta"}'


def test_render_keeps_spacing_inside_string_and_rune_literals(go_parser: GoParser) -> None:
    assert render(value_node(go_parser, '"a    b"')) == '"a    b"'
    assert render(value_node(go_parser, "' '")) == "' '"
    assert render(value_node(go_parser, '[]string{"x  y"}')) == '[]string{"x  y"}'


def test_render_raw_string_on_one_line(go_parser: GoParser) -> None:
    source = "`first line\n    second line`"
    assert render(value_node(go_parser, source)) == "`first line second line`"


def test_render_missing_node_is_empty() -> None:
    assert render(None) == ""


def test_collapse_whitespace() -> None:
    assert collapse_whitespace("a \n\t  b   c") == "a b c"
