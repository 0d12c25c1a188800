"""Core data models shared across godecls components."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Tuple, Union

from tree_sitter import Node


def is_exported(name: str) -> bool:
    """Go visibility rule: a name is exported when it starts with an upper-case letter."""
    return name[:1].isupper()


@dataclass(frozen=True)
class FunctionDecl:
    """A top-level function or method."""

    name: str
    position: int
    has_receiver: bool
    parameters: Optional[Node]
    result: Optional[Node]

    @property
    def exported(self) -> bool:
        return is_exported(self.name)


@dataclass(frozen=True)
class TypeDecl:
    """A single ``type`` spec, including aliases."""

    name: str
    position: int
    type_node: Optional[Node]
    alias: bool = False

    @property
    def exported(self) -> bool:
        return is_exported(self.name)


@dataclass(frozen=True)
class ValueEntry:
    """One name bound by a ``var`` or ``const`` group.

    ``type_node`` is the spec's own type or, for implicit continuation, the
    nearest preceding explicit type of the group. ``group_type`` is the most
    recent explicit type seen so far and ``carried_value`` the repeated
    expression of an implicit continuation; both only feed type inference.
    """

    name: str
    position: int
    offset: int
    type_node: Optional[Node] = None
    value_node: Optional[Node] = None
    group_type: Optional[Node] = None
    carried_value: Optional[Node] = None
    after_iota: bool = False

    @property
    def exported(self) -> bool:
        return is_exported(self.name)


@dataclass(frozen=True)
class ValueGroup:
    """A ``var``/``const`` declaration and the names it contributes to output."""

    keyword: str
    position: int
    entries: Tuple[ValueEntry, ...]


Declaration = Union[FunctionDecl, TypeDecl, ValueGroup]


@dataclass(frozen=True, order=True)
class RenderedSignature:
    """A formatted declaration line, sortable by source position."""

    position: int
    text: str


__all__ = [
    "Declaration",
    "FunctionDecl",
    "RenderedSignature",
    "TypeDecl",
    "ValueEntry",
    "ValueGroup",
    "is_exported",
]
