"""Render Go type and value syntax nodes as single-line source text."""

from __future__ import annotations

from typing import Callable, Dict, List, Optional

from tree_sitter import Node

from ..syntax import first_named_child, named_children, node_text

_LITERAL_TYPES = {
    "identifier",
    "type_identifier",
    "field_identifier",
    "package_identifier",
    "int_literal",
    "float_literal",
    "imaginary_literal",
    "raw_string_literal",
    "true",
    "false",
    "nil",
    "iota",
    "blank_identifier",
}

# Never span lines; inner spacing is part of the value.
_VERBATIM_TYPES = {"interpreted_string_literal", "rune_literal"}


def collapse_whitespace(text: str) -> str:
    return " ".join(text.split())


def render(node: Optional[Node]) -> str:
    """Return the canonical one-line text of a type or value node.

    Never raises: node types without a dedicated renderer fall back to their
    source text with whitespace collapsed.
    """
    if node is None:
        return ""
    if node.type in _VERBATIM_TYPES:
        return node_text(node)
    if node.type in _LITERAL_TYPES:
        return collapse_whitespace(node_text(node))
    handler = _RENDERERS.get(node.type)
    if handler is None:
        return collapse_whitespace(node_text(node))
    return handler(node)


# Parameter lists and signatures


def render_parameter_entries(node: Optional[Node]) -> List[str]:
    """Return one ``name Type`` (or bare ``Type``) entry per declared parameter."""
    entries: List[str] = []
    for param in named_children(node):
        if param.type == "parameter_declaration":
            type_text = render(param.child_by_field_name("type"))
            names = param.children_by_field_name("name")
            if names:
                entries.extend(f"{node_text(name)} {type_text}" for name in names)
            else:
                entries.append(type_text)
        elif param.type == "variadic_parameter_declaration":
            type_text = "..." + render(param.child_by_field_name("type"))
            name = param.child_by_field_name("name")
            entries.append(f"{node_text(name)} {type_text}" if name is not None else type_text)
        else:
            entries.append(render(param))
    return entries


def render_results(node: Optional[Node]) -> str:
    """Render a result list.

    A single unnamed result is shown bare, which also drops the redundant
    parentheses of ``(*T)``; several results or any named result are
    parenthesized.
    """
    if node is None:
        return ""
    if node.type != "parameter_list":
        return render(node)
    params = list(named_children(node))
    entries = render_parameter_entries(node)
    if not entries:
        return ""
    named = any(p.child_by_field_name("name") is not None for p in params)
    if len(entries) == 1 and not named:
        return entries[0]
    return "(" + ", ".join(entries) + ")"


def render_signature(parameters: Optional[Node], result: Optional[Node]) -> str:
    """Return ``(params) results`` for a function, method or function type."""
    text = "(" + ", ".join(render_parameter_entries(parameters)) + ")"
    results = render_results(result)
    if results:
        text += " " + results
    return text


# Struct and interface bodies


def render_struct(node: Node) -> str:
    """Flatten a struct type to ``struct { a T; b U }``, one member per field name."""
    members: List[str] = []
    field_list = next(
        (c for c in named_children(node) if c.type == "field_declaration_list"), None
    )
    for field in named_children(field_list):
        if field.type != "field_declaration":
            continue
        type_text = render(field.child_by_field_name("type"))
        names = field.children_by_field_name("name")
        if names:
            members.extend(f"{node_text(name)} {type_text}" for name in names)
        elif any(child.type == "*" for child in field.children):
            members.append("*" + type_text)
        else:
            members.append(type_text)
    if not members:
        return "struct{}"
    return "struct { " + "; ".join(members) + " }"


def render_interface(node: Node) -> str:
    """Flatten an interface type to ``interface { M(x T) R; Embedded }``."""
    members: List[str] = []
    for elem in named_children(node):
        if elem.type in {"method_elem", "method_spec"}:
            name = node_text(elem.child_by_field_name("name"))
            members.append(
                name
                + render_signature(
                    elem.child_by_field_name("parameters"),
                    elem.child_by_field_name("result"),
                )
            )
        else:
            members.append(render(elem))
    if not members:
        return "interface{}"
    return "interface { " + "; ".join(members) + " }"


# Types


def _render_pointer(node: Node) -> str:
    return "*" + render(first_named_child(node))


def _render_slice(node: Node) -> str:
    return "[]" + render(node.child_by_field_name("element"))


def _render_array(node: Node) -> str:
    length = render(node.child_by_field_name("length"))
    return f"[{length}]" + render(node.child_by_field_name("element"))


def _render_implicit_array(node: Node) -> str:
    return "[...]" + render(node.child_by_field_name("element"))


def _render_map(node: Node) -> str:
    key = render(node.child_by_field_name("key"))
    return f"map[{key}]" + render(node.child_by_field_name("value"))


def _render_channel(node: Node) -> str:
    tokens = [child.type for child in node.children if not child.is_named]
    if tokens and tokens[0] == "<-":
        prefix = "<-chan "
    elif "<-" in tokens:
        prefix = "chan<- "
    else:
        prefix = "chan "
    return prefix + render(node.child_by_field_name("value"))


def _render_function_type(node: Node) -> str:
    return "func" + render_signature(
        node.child_by_field_name("parameters"), node.child_by_field_name("result")
    )


def _render_qualified(node: Node) -> str:
    package = node.child_by_field_name("package")
    name = node.child_by_field_name("name")
    if package is None or name is None:
        return collapse_whitespace(node_text(node))
    return f"{node_text(package)}.{node_text(name)}"


def _render_generic(node: Node) -> str:
    return render(node.child_by_field_name("type")) + render(
        node.child_by_field_name("type_arguments")
    )


def _render_type_arguments(node: Node) -> str:
    return "[" + ", ".join(render(child) for child in named_children(node)) + "]"


def _render_union(node: Node) -> str:
    return " | ".join(render(child) for child in named_children(node))


def _render_negated(node: Node) -> str:
    return "~" + render(first_named_child(node))


def _render_parenthesized_type(node: Node) -> str:
    inner = first_named_child(node)
    if inner is not None and inner.type in {"pointer_type", "type_identifier", "qualified_type"}:
        return render(inner)
    return "(" + render(inner) + ")"


# Expressions


def _render_selector(node: Node) -> str:
    operand = render(node.child_by_field_name("operand"))
    return f"{operand}.{node_text(node.child_by_field_name('field'))}"


def _render_call(node: Node) -> str:
    function = render(node.child_by_field_name("function"))
    type_args = node.child_by_field_name("type_arguments")
    if type_args is not None:
        function += render(type_args)
    return function + render(node.child_by_field_name("arguments"))


def _render_arguments(node: Node) -> str:
    return "(" + ", ".join(render(child) for child in named_children(node)) + ")"


def _render_variadic_argument(node: Node) -> str:
    return render(first_named_child(node)) + "..."


def _render_composite(node: Node) -> str:
    return render(node.child_by_field_name("type")) + render(
        node.child_by_field_name("body")
    )


def _render_literal_value(node: Node) -> str:
    return "{" + ", ".join(render(child) for child in named_children(node)) + "}"


def _render_literal_element(node: Node) -> str:
    return render(first_named_child(node))


def _render_keyed_element(node: Node) -> str:
    key = node.child_by_field_name("key")
    value = node.child_by_field_name("value")
    if key is None or value is None:
        parts = list(named_children(node))
        if len(parts) < 2:
            return collapse_whitespace(node_text(node))
        key, value = parts[0], parts[-1]
    return f"{render(key)}: {render(value)}"


def _render_unary(node: Node) -> str:
    operator = node_text(node.child_by_field_name("operator"))
    return operator + render(node.child_by_field_name("operand"))


def _render_binary(node: Node) -> str:
    left = render(node.child_by_field_name("left"))
    right = render(node.child_by_field_name("right"))
    operator = node_text(node.child_by_field_name("operator"))
    return f"{left} {operator} {right}"


def _render_parenthesized(node: Node) -> str:
    return "(" + render(first_named_child(node)) + ")"


def _render_index(node: Node) -> str:
    operand = render(node.child_by_field_name("operand"))
    return f"{operand}[{render(node.child_by_field_name('index'))}]"


def _render_type_assertion(node: Node) -> str:
    operand = render(node.child_by_field_name("operand"))
    return f"{operand}.({render(node.child_by_field_name('type'))})"


def _render_type_conversion(node: Node) -> str:
    type_text = render(node.child_by_field_name("type"))
    return f"{type_text}({render(node.child_by_field_name('operand'))})"


def _render_func_literal(node: Node) -> str:
    return _render_function_type(node) + " {...}"


_RENDERERS: Dict[str, Callable[[Node], str]] = {
    "pointer_type": _render_pointer,
    "slice_type": _render_slice,
    "array_type": _render_array,
    "implicit_length_array_type": _render_implicit_array,
    "map_type": _render_map,
    "channel_type": _render_channel,
    "function_type": _render_function_type,
    "struct_type": render_struct,
    "interface_type": render_interface,
    "qualified_type": _render_qualified,
    "generic_type": _render_generic,
    "type_arguments": _render_type_arguments,
    "type_elem": _render_union,
    "constraint_elem": _render_union,
    "negated_type": _render_negated,
    "parenthesized_type": _render_parenthesized_type,
    "selector_expression": _render_selector,
    "call_expression": _render_call,
    "argument_list": _render_arguments,
    "variadic_argument": _render_variadic_argument,
    "composite_literal": _render_composite,
    "literal_value": _render_literal_value,
    "literal_element": _render_literal_element,
    "element": _render_literal_element,
    "keyed_element": _render_keyed_element,
    "unary_expression": _render_unary,
    "binary_expression": _render_binary,
    "parenthesized_expression": _render_parenthesized,
    "index_expression": _render_index,
    "type_assertion_expression": _render_type_assertion,
    "type_conversion_expression": _render_type_conversion,
    "func_literal": _render_func_literal,
}


__all__ = [
    "collapse_whitespace",
    "render",
    "render_interface",
    "render_parameter_entries",
    "render_results",
    "render_signature",
    "render_struct",
]
