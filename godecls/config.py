"""Configuration loading for godecls (.godecls.yml plus command-line overrides)."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Iterable, List, Mapping, Optional, Sequence, Tuple

import yaml

CONFIG_FILENAME = ".godecls.yml"

DEFAULT_MAX_VALUE_LENGTH = 30
DEFAULT_EXTENSIONS: Tuple[str, ...] = (".go",)
DEFAULT_EXCLUDE_SUFFIXES: Tuple[str, ...] = ("_test.go",)


class ConfigError(RuntimeError):
    """Raised when the configuration file or an override cannot be used."""


@dataclass(frozen=True)
class FormatConfig:
    """Read-only settings shared by every stage of a run."""

    include_private: bool = False
    include_values: bool = True
    max_value_length: int = DEFAULT_MAX_VALUE_LENGTH
    extensions: Tuple[str, ...] = field(default=DEFAULT_EXTENSIONS)
    exclude_suffixes: Tuple[str, ...] = field(default=DEFAULT_EXCLUDE_SUFFIXES)
    iota_values: bool = False

    def __post_init__(self) -> None:
        if self.max_value_length < 0:
            raise ConfigError(
                f"max_length must be zero or greater, got {self.max_value_length}"
            )
        object.__setattr__(self, "extensions", normalize_extensions(self.extensions))
        object.__setattr__(
            self, "exclude_suffixes", tuple(s.strip() for s in self.exclude_suffixes if s.strip())
        )

    @property
    def skip_values(self) -> bool:
        return not self.include_values


def normalize_extensions(values: Iterable[str]) -> Tuple[str, ...]:
    """Strip blanks and make every extension start with a dot."""
    result: List[str] = []
    for value in values:
        ext = value.strip()
        if not ext:
            continue
        if not ext.startswith("."):
            ext = "." + ext
        result.append(ext)
    return tuple(result)


def split_list(value: str) -> List[str]:
    """Split a comma-separated flag value, dropping empty entries."""
    return [part.strip() for part in value.split(",") if part.strip()]


def load_config(
    config_path: Path | None = None,
    overrides: Mapping[str, Any] | None = None,
    *,
    work_dir: Path | None = None,
) -> FormatConfig:
    """Build the run configuration from defaults, the YAML file and overrides.

    When ``config_path`` is omitted, ``.godecls.yml`` in ``work_dir`` (or the
    current directory) is used if present. Override values of ``None`` are
    ignored so unset command-line flags keep the file's settings.
    """
    explicit = config_path is not None
    if config_path is None:
        config_path = (work_dir or Path.cwd()) / CONFIG_FILENAME
    config_path = config_path.expanduser()
    if config_path.is_dir():
        config_path = config_path / CONFIG_FILENAME

    settings: Dict[str, Any] = {}
    if config_path.exists():
        settings.update(_settings_from_file(config_path))
    elif explicit:
        raise ConfigError(f"Config file not found: {config_path}")

    if overrides:
        settings.update({k: v for k, v in overrides.items() if v is not None})

    return FormatConfig(**settings)


def _settings_from_file(path: Path) -> Dict[str, Any]:
    data = _read_config(path)
    if not isinstance(data, dict):
        raise ConfigError(f"{path.name} must contain a mapping at the root")

    settings: Dict[str, Any] = {}

    private = _as_bool(data.get("private"))
    if private is not None:
        settings["include_private"] = private

    values = _as_bool(data.get("values"))
    if values is not None:
        settings["include_values"] = values

    if "max_length" in data:
        max_length = _as_int(data.get("max_length"))
        if max_length is None:
            raise ConfigError(f"{path.name}: max_length must be an integer")
        settings["max_value_length"] = max_length

    if "extensions" in data:
        settings["extensions"] = tuple(_as_str_list(data.get("extensions")))

    if "exclude" in data:
        settings["exclude_suffixes"] = tuple(_as_str_list(data.get("exclude")))

    iota_values = _as_bool(data.get("iota_values"))
    if iota_values is not None:
        settings["iota_values"] = iota_values

    return settings


def _read_config(path: Path) -> Dict[str, Any]:
    try:
        text = path.read_text(encoding="utf-8")
    except OSError as exc:
        raise ConfigError(f"Failed to read {path}: {exc}") from exc
    if not text.strip():
        return {}
    try:
        loaded = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise ConfigError(f"Failed to parse {path.name}: {exc}") from exc
    return loaded or {}


def _as_int(value: Any) -> Optional[int]:
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, str):
        try:
            return int(value)
        except ValueError:
            return None
    return None


def _as_bool(value: Any) -> Optional[bool]:
    if isinstance(value, bool):
        return value
    if isinstance(value, str):
        lowered = value.strip().lower()
        if lowered in {"true", "yes", "1"}:
            return True
        if lowered in {"false", "no", "0"}:
            return False
    return None


def _as_str_list(value: Any) -> List[str]:
    if value is None:
        return []
    if isinstance(value, str):
        return split_list(value)
    if isinstance(value, Sequence):
        return [str(item).strip() for item in value if isinstance(item, (str, int, float))]
    return []


__all__ = [
    "CONFIG_FILENAME",
    "ConfigError",
    "DEFAULT_EXCLUDE_SUFFIXES",
    "DEFAULT_EXTENSIONS",
    "DEFAULT_MAX_VALUE_LENGTH",
    "FormatConfig",
    "load_config",
    "normalize_extensions",
    "split_list",
]
