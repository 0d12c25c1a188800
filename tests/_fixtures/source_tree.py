"""Helpers for building throwaway Go source trees and syntax nodes in tests."""

from __future__ import annotations

import textwrap
from pathlib import Path
from typing import Mapping

from tree_sitter import Node

from godecls.syntax import GoParser, named_children


class SourceTree:
    """Utility for writing Go files into a temporary directory."""

    def __init__(self, tmp_path: Path) -> None:
        self.root = tmp_path / "src"
        self.root.mkdir()

    def write(self, files: Mapping[str, str]) -> None:
        """Write `path -> contents` entries below the tree root."""
        for relative, content in files.items():
            path = self.root / relative
            path.parent.mkdir(parents=True, exist_ok=True)
            normalised = textwrap.dedent(content).lstrip("\n")
            path.write_text(normalised, encoding="utf-8")

    def path(self, relative: str = "") -> Path:
        """Return the tree root, or a path below it."""
        return self.root / relative if relative else self.root


def type_node(parser: GoParser, type_source: str) -> Node:
    """Parse ``type T <type_source>`` and return the type expression node."""
    tree = parser.parse(f"package p\n\ntype T {type_source}\n".encode("utf-8"))
    decl = next(c for c in named_children(tree.root_node) if c.type == "type_declaration")
    spec = next(c for c in named_children(decl) if c.type == "type_spec")
    node = spec.child_by_field_name("type")
    assert node is not None
    return node


def value_node(parser: GoParser, expr_source: str) -> Node:
    """Parse ``var x = <expr_source>`` and return the value expression node."""
    tree = parser.parse(f"package p\n\nvar x = {expr_source}\n".encode("utf-8"))
    decl = next(c for c in named_children(tree.root_node) if c.type == "var_declaration")
    spec = next(c for c in named_children(decl) if c.type in {"var_spec", "var_spec_list"})
    if spec.type == "var_spec_list":
        spec = next(c for c in named_children(spec) if c.type == "var_spec")
    values = spec.child_by_field_name("value")
    node = next(named_children(values), None)
    assert node is not None
    return node


__all__ = ["SourceTree", "type_node", "value_node"]
