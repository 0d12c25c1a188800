"""Resolve command-line paths to the Go source files they name."""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Iterator, List, Sequence, Tuple

from .config import FormatConfig
from .errors import GoDeclsError, SourcePathError, UnsupportedExtensionError
from .logging import get_logger

logger = get_logger("walker")

RECURSIVE_MARKERS = ("/...", "\\...")

# Directories the go tool ignores when expanding ./...
_EXCLUDED_DIRS = {"testdata", "vendor"}


@dataclass(frozen=True)
class Target:
    """A positional path argument split into its base path and scan mode."""

    raw: str
    path: Path
    recursive: bool


def parse_target(raw: str) -> Target:
    """Interpret ``dir/...`` as a recursive scan of ``dir``."""
    if raw == "...":
        return Target(raw=raw, path=Path("."), recursive=True)
    for marker in RECURSIVE_MARKERS:
        if raw.endswith(marker):
            base = raw[: -len(marker)] or "."
            return Target(raw=raw, path=Path(base), recursive=True)
    return Target(raw=raw, path=Path(raw), recursive=False)


def has_extension(name: str, extensions: Sequence[str]) -> bool:
    lower = name.lower()
    return any(lower.endswith(ext.lower()) for ext in extensions)


def is_excluded(name: str, exclude_suffixes: Sequence[str]) -> bool:
    lower = name.lower()
    return any(lower.endswith(suffix.lower()) for suffix in exclude_suffixes)


def _skip_dir(name: str) -> bool:
    return name.startswith((".", "_")) or name in _EXCLUDED_DIRS


def iter_source_files(
    root: Path,
    *,
    recursive: bool,
    extensions: Sequence[str],
    exclude_suffixes: Sequence[str],
) -> Iterator[Path]:
    """Lazily yield files under ``root`` that match the extension rules."""
    if not recursive:
        for entry in sorted(root.iterdir()):
            if entry.is_file() and _matches(entry.name, extensions, exclude_suffixes):
                yield entry
        return

    def _raise(exc: OSError) -> None:
        raise exc

    for dirpath, dirnames, filenames in os.walk(root, onerror=_raise):
        dirnames[:] = sorted(name for name in dirnames if not _skip_dir(name))
        current_dir = Path(dirpath)
        for filename in sorted(filenames):
            if _matches(filename, extensions, exclude_suffixes):
                yield current_dir / filename


def _matches(name: str, extensions: Sequence[str], exclude_suffixes: Sequence[str]) -> bool:
    return has_extension(name, extensions) and not is_excluded(name, exclude_suffixes)


def collect_files(
    raw_paths: Sequence[str], config: FormatConfig
) -> Tuple[List[Path], List[GoDeclsError]]:
    """Expand every positional path, collecting per-path failures instead of stopping."""
    files: List[Path] = []
    errors: List[GoDeclsError] = []
    for raw in raw_paths:
        target = parse_target(raw)
        try:
            files.extend(_expand(target, config))
        except GoDeclsError as exc:
            errors.append(exc)
    return files, errors


def _expand(target: Target, config: FormatConfig) -> List[Path]:
    path = target.path.expanduser().absolute()
    if not path.exists():
        raise SourcePathError(target.raw, "no such file or directory")

    if path.is_dir():
        try:
            found = list(
                iter_source_files(
                    path,
                    recursive=target.recursive,
                    extensions=config.extensions,
                    exclude_suffixes=config.exclude_suffixes,
                )
            )
        except OSError as exc:
            raise SourcePathError(target.raw, f"cannot read directory: {exc}") from exc
        logger.debug("Found %d source file(s) under %s", len(found), target.raw)
        return found

    if target.recursive:
        raise SourcePathError(target.raw, "recursive scan requires a directory")
    if is_excluded(path.name, config.exclude_suffixes):
        logger.debug("Skipping excluded file %s", target.raw)
        return []
    if not has_extension(path.name, config.extensions):
        raise UnsupportedExtensionError(target.raw, config.extensions)
    return [path]


def display_path(path: Path, work_dir: Path) -> str:
    """Return ``path`` relative to ``work_dir`` in POSIX form, or absolute if impossible."""
    absolute = path.absolute()
    try:
        return Path(os.path.relpath(absolute, work_dir)).as_posix()
    except ValueError:
        return absolute.as_posix()


__all__ = [
    "Target",
    "collect_files",
    "display_path",
    "has_extension",
    "is_excluded",
    "iter_source_files",
    "parse_target",
]
