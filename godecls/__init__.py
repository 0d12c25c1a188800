"""List the top-level declarations of Go source files as one-line signatures."""

from .config import FormatConfig, load_config
from .processor import FileProcessor, RunReport

__all__ = ["FileProcessor", "FormatConfig", "RunReport", "load_config"]
