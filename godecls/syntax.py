"""Tree-sitter powered Go syntax tree provider."""

from __future__ import annotations

from typing import Iterator, Optional

import tree_sitter_go
from tree_sitter import Language, Node, Parser, Tree

from .errors import GoSyntaxError

_EXCERPT_LENGTH = 24


def node_text(node: Optional[Node]) -> str:
    """Return the source text covered by ``node`` (empty for ``None``)."""
    if node is None or node.text is None:
        return ""
    return node.text.decode("utf-8", errors="replace")


def named_children(node: Optional[Node]) -> Iterator[Node]:
    """Yield the named children of ``node``, skipping comments."""
    if node is None:
        return
    for child in node.named_children:
        if child.type != "comment":
            yield child


def first_named_child(node: Optional[Node]) -> Optional[Node]:
    return next(named_children(node), None)


class GoParser:
    """Parses Go source into tree-sitter trees, reporting syntax errors."""

    def __init__(self) -> None:
        self._parser: Optional[Parser] = None

    def _get_parser(self) -> Parser:
        if self._parser is None:
            self._parser = Parser(Language(tree_sitter_go.language()))
        return self._parser

    def parse(self, source: bytes, path: str = "<source>") -> Tree:
        """Parse ``source``; raise :class:`GoSyntaxError` when the tree has errors."""
        tree = self._get_parser().parse(source)
        root = tree.root_node
        if root.has_error:
            bad = _find_error(root) or root
            line, column = bad.start_point[0] + 1, bad.start_point[1] + 1
            raise GoSyntaxError(path, line, column, _excerpt(bad))
        return tree


def _find_error(node: Node) -> Optional[Node]:
    if node.is_error or node.is_missing:
        return node
    for child in node.children:
        if child.has_error or child.is_missing:
            found = _find_error(child)
            if found is not None:
                return found
    return None


def _excerpt(node: Node) -> str:
    if node.is_missing:
        return f"missing {node.type}"
    text = " ".join(node_text(node).split())
    if len(text) > _EXCERPT_LENGTH:
        text = text[:_EXCERPT_LENGTH] + "..."
    return text


__all__ = ["GoParser", "first_named_child", "named_children", "node_text"]
