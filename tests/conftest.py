from __future__ import annotations

import logging
import textwrap
from pathlib import Path
from typing import Iterator

import pytest

from godecls.config import FormatConfig
from godecls.processor import FileProcessor
from godecls.syntax import GoParser
from tests._fixtures.source_tree import SourceTree


@pytest.fixture(autouse=True)
def _reset_logging() -> Iterator[None]:
    """Drop handlers installed by configure_logging so streams do not leak between tests."""
    yield
    logger = logging.getLogger("godecls")
    for handler in list(logger.handlers):
        handler.close()
        logger.removeHandler(handler)


@pytest.fixture(scope="session")
def go_parser() -> GoParser:
    """Share one tree-sitter parser across the test session."""
    return GoParser()


@pytest.fixture
def source_tree(tmp_path: Path) -> SourceTree:
    """Provide a Go source tree rooted at the pytest tmp_path."""
    return SourceTree(tmp_path)


@pytest.fixture
def extract(go_parser: GoParser):
    """Return a helper rendering Go source into signature strings."""

    def _extract(source: str, **settings: object) -> list[str]:
        processor = FileProcessor(FormatConfig(**settings), parser=go_parser)
        payload = textwrap.dedent(source).encode("utf-8")
        return [sig.text for sig in processor.extract(payload, "test.go")]

    return _extract
