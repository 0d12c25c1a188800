"""Compose one-line signatures for classified declarations."""

from __future__ import annotations

from typing import List, Optional

from tree_sitter import Node

from ..config import FormatConfig
from ..models import Declaration, FunctionDecl, RenderedSignature, TypeDecl, ValueEntry, ValueGroup
from ..syntax import named_children
from .expressions import render, render_signature
from .inference import infer_type

ELLIPSIS = "..."


def truncate_value(text: str, max_length: int) -> str:
    """Cut ``text`` to ``max_length`` characters plus an ellipsis when it is longer."""
    if len(text) <= max_length:
        return text
    return text[:max_length] + ELLIPSIS


def format_function(decl: FunctionDecl) -> str:
    """``func Name(a T, b U) R``; receivers and type parameters are not shown."""
    return f"func {decl.name}" + render_signature(decl.parameters, decl.result)


def format_type(decl: TypeDecl) -> str:
    body = render(decl.type_node)
    if decl.alias:
        return f"type {decl.name} = {body}"
    return f"type {decl.name} {body}".rstrip()


def format_map_literal(node: Node) -> str:
    """Re-render a map composite literal as ``map[K]V{k1: v1, k2: v2}``."""
    map_type = node.child_by_field_name("type")
    key_type = render(map_type.child_by_field_name("key")) if map_type is not None else ""
    value_type = render(map_type.child_by_field_name("value")) if map_type is not None else ""
    elements: List[str] = []
    for element in named_children(node.child_by_field_name("body")):
        if element.type == "keyed_element":
            elements.append(render(element))
    return f"map[{key_type}]{value_type}{{" + ", ".join(elements) + "}"


def _is_map_literal(node: Node) -> bool:
    if node.type != "composite_literal":
        return False
    literal_type = node.child_by_field_name("type")
    return literal_type is not None and literal_type.type == "map_type"


def format_value_text(node: Node, config: FormatConfig) -> str:
    text = format_map_literal(node) if _is_map_literal(node) else render(node)
    return truncate_value(text, config.max_value_length)


def format_value_entry(entry: ValueEntry, keyword: str, config: FormatConfig) -> str:
    """``var Name [Type] [= value]`` for one name of a value group."""
    type_text = _entry_type(entry)
    line = f"var {entry.name}"
    if type_text:
        line += f" {type_text}"
    if config.include_values:
        value = _entry_value(entry, keyword, config)
        if value:
            line += f" = {value}"
    return line


def _entry_type(entry: ValueEntry) -> str:
    if entry.type_node is not None:
        return render(entry.type_node)
    group_type = render(entry.group_type) if entry.group_type is not None else ""
    return infer_type(entry.value_node or entry.carried_value, group_type)


def _entry_value(entry: ValueEntry, keyword: str, config: FormatConfig) -> Optional[str]:
    if entry.value_node is not None:
        return format_value_text(entry.value_node, config)
    # Display aid only: the real constant may differ from its iota offset.
    if keyword == "const" and config.iota_values and entry.after_iota:
        return truncate_value(str(entry.offset), config.max_value_length)
    return None


def format_declaration(decl: Declaration, config: FormatConfig) -> List[RenderedSignature]:
    """Return the rendered lines of one declaration, each tagged with its position."""
    if isinstance(decl, FunctionDecl):
        return [RenderedSignature(decl.position, format_function(decl))]
    if isinstance(decl, TypeDecl):
        return [RenderedSignature(decl.position, format_type(decl))]
    if isinstance(decl, ValueGroup):
        return [
            RenderedSignature(entry.position, format_value_entry(entry, decl.keyword, config))
            for entry in decl.entries
        ]
    raise TypeError(f"Unsupported declaration: {type(decl).__name__}")


__all__ = [
    "ELLIPSIS",
    "format_declaration",
    "format_function",
    "format_map_literal",
    "format_type",
    "format_value_entry",
    "truncate_value",
]
