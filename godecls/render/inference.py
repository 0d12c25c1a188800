"""Best-effort type inference for values declared without a type."""

from __future__ import annotations

from typing import Optional

from tree_sitter import Node

from ..syntax import first_named_child, named_children, node_text
from .expressions import render, render_signature

_LITERAL_TYPES = {
    "int_literal": "int",
    "float_literal": "float64",
    "imaginary_literal": "complex128",
    "rune_literal": "rune",
    "interpreted_string_literal": "string",
    "raw_string_literal": "string",
    "true": "bool",
    "false": "bool",
}

_BOOLEAN_OPERATORS = {"==", "!=", "<", "<=", ">", ">=", "&&", "||"}
_PASSTHROUGH_UNARY = {"-", "+", "^", "!"}


def infer_type(node: Optional[Node], group_type: str = "") -> str:
    """Return a type label for ``node``, or ``""`` when nothing can be inferred.

    ``group_type`` is the explicit type last declared in the enclosing
    ``const``/``var`` group; ``iota`` takes that type when present.
    """
    if node is None:
        return ""
    kind = node.type

    if kind in _LITERAL_TYPES:
        return _LITERAL_TYPES[kind]

    if kind in {"iota", "identifier"}:
        name = node_text(node)
        if name == "iota":
            return group_type or "int"
        if name in {"true", "false"}:
            return "bool"
        return ""

    if kind == "selector_expression":
        return render(node)

    if kind == "call_expression":
        return _infer_call(node)

    if kind == "composite_literal":
        return render(node.child_by_field_name("type"))

    if kind == "unary_expression":
        operator = node_text(node.child_by_field_name("operator"))
        operand = node.child_by_field_name("operand")
        if operator == "&":
            inner = infer_type(operand, group_type)
            return "*" + inner if inner else ""
        if operator in _PASSTHROUGH_UNARY:
            return infer_type(operand, group_type)
        return ""

    if kind == "binary_expression":
        operator = node_text(node.child_by_field_name("operator"))
        if operator in _BOOLEAN_OPERATORS:
            return "bool"
        return infer_type(node.child_by_field_name("left"), group_type)

    if kind == "parenthesized_expression":
        return infer_type(first_named_child(node), group_type)

    if kind == "type_conversion_expression":
        return render(node.child_by_field_name("type"))

    if kind == "func_literal":
        return "func" + render_signature(
            node.child_by_field_name("parameters"), node.child_by_field_name("result")
        )

    return ""


def _infer_call(node: Node) -> str:
    function = node_text(node.child_by_field_name("function"))
    if function not in {"make", "new"}:
        return ""
    first_arg = next(named_children(node.child_by_field_name("arguments")), None)
    if first_arg is None:
        return ""
    type_text = render(first_arg)
    return "*" + type_text if function == "new" else type_text


__all__ = ["infer_type"]
