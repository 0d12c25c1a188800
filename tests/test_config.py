"""Tests for godecls.config."""

from __future__ import annotations

from pathlib import Path

import pytest

from godecls.config import (
    CONFIG_FILENAME,
    ConfigError,
    FormatConfig,
    load_config,
    normalize_extensions,
    split_list,
)


def test_load_config_returns_defaults_when_missing(tmp_path: Path) -> None:
    config = load_config(work_dir=tmp_path)

    assert config == FormatConfig()
    assert config.include_private is False
    assert config.include_values is True
    assert config.skip_values is False
    assert config.max_value_length == 30
    assert config.extensions == (".go",)
    assert config.exclude_suffixes == ("_test.go",)
    assert config.iota_values is False


def test_load_config_parses_expected_fields(tmp_path: Path) -> None:
    (tmp_path / CONFIG_FILENAME).write_text(
        """
private: true
values: "no"
max_length: 12
extensions: [go, .gno]
exclude:
  - "_test.go"
  - "_gen.go"
iota_values: yes
""",
        encoding="utf-8",
    )

    config = load_config(work_dir=tmp_path)

    assert config.include_private is True
    assert config.include_values is False
    assert config.max_value_length == 12
    assert config.extensions == (".go", ".gno")
    assert config.exclude_suffixes == ("_test.go", "_gen.go")
    assert config.iota_values is True


def test_overrides_take_precedence_over_file(tmp_path: Path) -> None:
    (tmp_path / CONFIG_FILENAME).write_text("private: true\nmax_length: 12\n", encoding="utf-8")

    config = load_config(
        overrides={"include_private": None, "max_value_length": 50}, work_dir=tmp_path
    )

    assert config.include_private is True
    assert config.max_value_length == 50


def test_explicit_config_path_accepts_directory(tmp_path: Path) -> None:
    (tmp_path / CONFIG_FILENAME).write_text("extensions: 'go, gno'\n", encoding="utf-8")

    config = load_config(tmp_path)

    assert config.extensions == (".go", ".gno")


def test_missing_explicit_config_is_an_error(tmp_path: Path) -> None:
    with pytest.raises(ConfigError):
        load_config(tmp_path / "custom.yml")


def test_invalid_yaml_is_an_error(tmp_path: Path) -> None:
    (tmp_path / CONFIG_FILENAME).write_text("private: [unclosed\n", encoding="utf-8")

    with pytest.raises(ConfigError):
        load_config(work_dir=tmp_path)


def test_non_mapping_root_is_an_error(tmp_path: Path) -> None:
    (tmp_path / CONFIG_FILENAME).write_text("- just\n- a list\n", encoding="utf-8")

    with pytest.raises(ConfigError):
        load_config(work_dir=tmp_path)


def test_non_integer_max_length_is_an_error(tmp_path: Path) -> None:
    (tmp_path / CONFIG_FILENAME).write_text("max_length: lots\n", encoding="utf-8")

    with pytest.raises(ConfigError):
        load_config(work_dir=tmp_path)


def test_negative_max_length_is_rejected() -> None:
    with pytest.raises(ConfigError):
        FormatConfig(max_value_length=-1)


def test_zero_max_length_is_allowed() -> None:
    assert FormatConfig(max_value_length=0).max_value_length == 0


def test_empty_config_file_keeps_defaults(tmp_path: Path) -> None:
    (tmp_path / CONFIG_FILENAME).write_text("\n", encoding="utf-8")

    assert load_config(work_dir=tmp_path) == FormatConfig()


def test_list_helpers() -> None:
    assert split_list(" .go, ,gno ") == [".go", "gno"]
    assert normalize_extensions(["go", " .gno ", ""]) == (".go", ".gno")
