"""Turn Go source files into ordered ``path: signature`` lines."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, Iterable, List, Optional, Sequence

from .config import FormatConfig
from .declarations import classify
from .errors import GoDeclsError, SourcePathError
from .logging import get_logger
from .models import RenderedSignature
from .render.signatures import format_declaration
from .syntax import GoParser
from .walker import collect_files, display_path

logger = get_logger("processor")


@dataclass
class RunReport:
    """Output lines of a run plus the failures collected along the way."""

    lines: List[str] = field(default_factory=list)
    errors: List[GoDeclsError] = field(default_factory=list)
    files_processed: int = 0

    @property
    def ok(self) -> bool:
        return not self.errors


class FileProcessor:
    """Parses files, classifies their declarations and formats the signatures."""

    def __init__(
        self,
        config: FormatConfig,
        *,
        parser: Optional[GoParser] = None,
        work_dir: Optional[Path] = None,
    ) -> None:
        self._config = config
        self._parser = parser or GoParser()
        self._work_dir = (work_dir or Path.cwd()).absolute()

    @property
    def config(self) -> FormatConfig:
        return self._config

    def extract(self, source: bytes, path: str = "<source>") -> List[RenderedSignature]:
        """Return the signatures of ``source`` in increasing source position.

        Raises :class:`GoSyntaxError` when the source does not parse.
        """
        tree = self._parser.parse(source, path)
        by_position: Dict[int, str] = {}
        for decl in classify(tree.root_node, self._config):
            for signature in format_declaration(decl, self._config):
                by_position[signature.position] = signature.text
        return [RenderedSignature(pos, by_position[pos]) for pos in sorted(by_position)]

    def process_file(self, path: Path) -> List[str]:
        """Return the output lines for one file, prefixed with its display path."""
        shown = display_path(path, self._work_dir)
        try:
            source = path.read_bytes()
        except OSError as exc:
            raise SourcePathError(shown, f"cannot read file: {exc}") from exc
        signatures = self.extract(source, shown)
        logger.debug("%s: %d declaration(s)", shown, len(signatures))
        return [f"{shown}: {signature.text}" for signature in signatures]

    def process_paths(self, raw_paths: Sequence[str]) -> RunReport:
        """Process every file named by ``raw_paths`` in sorted display-path order.

        Failures are logged and collected; the remaining files are still
        processed.
        """
        files, errors = collect_files(raw_paths, self._config)
        report = RunReport(errors=list(errors))
        for error in errors:
            logger.error("%s", error)

        for path in self._ordered(files):
            try:
                report.lines.extend(self.process_file(path))
            except GoDeclsError as exc:
                logger.error("%s", exc)
                report.errors.append(exc)
                continue
            report.files_processed += 1
        return report

    def _ordered(self, files: Iterable[Path]) -> List[Path]:
        unique: Dict[str, Path] = {}
        for path in files:
            unique.setdefault(display_path(path, self._work_dir), path)
        return [unique[key] for key in sorted(unique)]


__all__ = ["FileProcessor", "RunReport"]
