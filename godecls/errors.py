"""Error kinds reported while extracting declarations."""

from __future__ import annotations


class GoDeclsError(RuntimeError):
    """Base class for failures tied to a single input path."""

    def __init__(self, path: str, message: str) -> None:
        super().__init__(f"{path}: {message}")
        self.path = path
        self.reason = message


class SourcePathError(GoDeclsError):
    """Raised when a path does not exist or cannot be read."""


class UnsupportedExtensionError(GoDeclsError):
    """Raised when an explicitly named file has none of the configured extensions."""

    def __init__(self, path: str, extensions: tuple[str, ...]) -> None:
        allowed = ",".join(extensions) or "<none>"
        super().__init__(path, f"file does not have a supported extension ({allowed})")
        self.extensions = extensions


class GoSyntaxError(GoDeclsError):
    """Raised when a source file cannot be parsed."""

    def __init__(self, path: str, line: int, column: int, excerpt: str = "") -> None:
        message = f"syntax error at line {line}, column {column}"
        if excerpt:
            message += f" near {excerpt!r}"
        super().__init__(path, message)
        self.line = line
        self.column = column


__all__ = [
    "GoDeclsError",
    "GoSyntaxError",
    "SourcePathError",
    "UnsupportedExtensionError",
]
