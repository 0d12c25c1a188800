"""Classify the top-level declarations of a parsed Go file."""

from __future__ import annotations

from typing import Iterator, List, NamedTuple, Optional, Tuple

from tree_sitter import Node

from .config import FormatConfig
from .models import (
    Declaration,
    FunctionDecl,
    TypeDecl,
    ValueEntry,
    ValueGroup,
    is_exported,
)
from .syntax import named_children, node_text

_VALUE_KEYWORDS = {"var_declaration": "var", "const_declaration": "const"}
_SPEC_TYPES = {"var_spec", "const_spec"}
_TYPE_SPEC_TYPES = {"type_spec": False, "type_alias": True, "alias_declaration": True}


class _GroupState(NamedTuple):
    """Cross-name memory of one ``var``/``const`` group traversal."""

    last_type: Optional[Node] = None
    last_values: Tuple[Node, ...] = ()
    seen_iota: bool = False
    offset: int = 0


def classify(root: Node, config: FormatConfig) -> Iterator[Declaration]:
    """Yield the file-scope declarations of ``root`` in source order.

    Only direct children of the file node are considered, so declarations
    inside function bodies never appear. Names hidden by the visibility
    setting are filtered here, per name for value groups.
    """
    for node in named_children(root):
        if node.type in {"function_declaration", "method_declaration"}:
            decl = _function_decl(node)
            if decl is not None and _visible(decl.name, config):
                yield decl
        elif node.type == "type_declaration":
            for decl in _type_decls(node):
                if _visible(decl.name, config):
                    yield decl
        elif node.type in _VALUE_KEYWORDS:
            group = _value_group(node)
            entries = tuple(e for e in group.entries if _visible(e.name, config))
            if entries:
                yield ValueGroup(keyword=group.keyword, position=group.position, entries=entries)


def _visible(name: str, config: FormatConfig) -> bool:
    return config.include_private or is_exported(name)


def _function_decl(node: Node) -> Optional[FunctionDecl]:
    name = node.child_by_field_name("name")
    if name is None:
        return None
    return FunctionDecl(
        name=node_text(name),
        position=node.start_byte,
        has_receiver=node.child_by_field_name("receiver") is not None,
        parameters=node.child_by_field_name("parameters"),
        result=node.child_by_field_name("result"),
    )


def _type_decls(node: Node) -> Iterator[TypeDecl]:
    for spec in named_children(node):
        if spec.type not in _TYPE_SPEC_TYPES:
            continue
        name = spec.child_by_field_name("name")
        if name is None:
            continue
        yield TypeDecl(
            name=node_text(name),
            position=spec.start_byte,
            type_node=spec.child_by_field_name("type"),
            alias=_TYPE_SPEC_TYPES[spec.type],
        )


def _value_specs(node: Node) -> Iterator[Node]:
    for child in named_children(node):
        if child.type in _SPEC_TYPES:
            yield child
        elif child.type.endswith("_spec_list"):
            yield from (s for s in named_children(child) if s.type in _SPEC_TYPES)


def _value_group(node: Node) -> ValueGroup:
    state = _GroupState()
    entries: List[ValueEntry] = []
    for spec in _value_specs(node):
        spec_entries, state = _fold_spec(spec, state)
        entries.extend(spec_entries)
    return ValueGroup(
        keyword=_VALUE_KEYWORDS[node.type], position=node.start_byte, entries=tuple(entries)
    )


def _fold_spec(spec: Node, state: _GroupState) -> Tuple[List[ValueEntry], _GroupState]:
    """Return the entries of one spec and the group state after it.

    A name without its own type and value inherits the nearest preceding
    explicit type and repeats the previous value list (implicit continuation).
    """
    own_type = spec.child_by_field_name("type")
    values: Tuple[Node, ...] = tuple(named_children(spec.child_by_field_name("value")))
    group_type = own_type if own_type is not None else state.last_type

    # const_spec tags the whole comma-separated name list, commas included.
    names = [n for n in spec.children_by_field_name("name") if n.is_named]

    entries: List[ValueEntry] = []
    for index, name in enumerate(names):
        value = values[index] if index < len(values) else None
        type_node = own_type
        carried = None
        if own_type is None and value is None:
            type_node = state.last_type
            if not values and index < len(state.last_values):
                carried = state.last_values[index]
        entries.append(
            ValueEntry(
                name=node_text(name),
                position=name.start_byte,
                offset=state.offset,
                type_node=type_node,
                value_node=value,
                group_type=group_type,
                carried_value=carried,
                after_iota=state.seen_iota,
            )
        )

    next_state = _GroupState(
        last_type=group_type,
        last_values=values if values else state.last_values,
        seen_iota=state.seen_iota or any(_uses_iota(v) for v in values),
        offset=state.offset + 1,
    )
    return entries, next_state


def _uses_iota(node: Node) -> bool:
    if node.type == "iota" or (node.type == "identifier" and node_text(node) == "iota"):
        return True
    return any(_uses_iota(child) for child in node.named_children)


__all__ = ["classify"]
