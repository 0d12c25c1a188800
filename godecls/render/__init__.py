"""Renderers turning syntax nodes and declarations into signature text."""

from .expressions import render
from .inference import infer_type
from .signatures import format_declaration, truncate_value

__all__ = ["format_declaration", "infer_type", "render", "truncate_value"]
