# topmark:header:start
#
#   project      : Tailor
#   file         : test_loaders.py
#   file_relpath : tests/config/test_loaders.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tests for TOML loading, typed getters and file-based config discovery."""

from __future__ import annotations

from typing import TYPE_CHECKING

from tailor.config import MutableConfig
from tailor.config.io import (
    get_bool_value_or_none,
    get_string_value_or_none,
    get_table_value,
    load_toml_dict,
)
from tailor.core.formats import OutputFormat

if TYPE_CHECKING:
    from pathlib import Path

    from tailor.config.io import TomlTable


def test_load_toml_dict_missing_file_returns_empty(tmp_path: Path) -> None:
    """A missing file is logged and yields an empty table."""
    assert load_toml_dict(tmp_path / "absent.toml") == {}


def test_load_toml_dict_invalid_toml_returns_empty(tmp_path: Path) -> None:
    """A malformed document is logged and yields an empty table."""
    path: Path = tmp_path / "tailor.toml"
    path.write_text("[xml\nroot_key = ", encoding="utf-8")

    assert load_toml_dict(path) == {}


def test_tailor_toml_is_read_at_top_level(tmp_path: Path) -> None:
    """tailor.toml holds the sections at the document root."""
    path: Path = tmp_path / "tailor.toml"
    path.write_text('[output]\nformat = "xml"\n\n[xml]\nroot_key = "doc"\n', encoding="utf-8")

    layer: MutableConfig | None = MutableConfig.from_toml_file(path)

    assert layer is not None
    assert layer.output_format is OutputFormat.XML
    assert layer.xml_root_key == "doc"
    assert layer.config_files == [path]


def test_pyproject_uses_tool_tailor_section(tmp_path: Path) -> None:
    """pyproject.toml is read from [tool.tailor]."""
    path: Path = tmp_path / "pyproject.toml"
    path.write_text('[tool.tailor.array]\nmeta_key = "_meta"\n', encoding="utf-8")

    layer: MutableConfig | None = MutableConfig.from_toml_file(path)

    assert layer is not None
    assert layer.array_meta_key == "_meta"


def test_pyproject_without_tool_section_is_skipped(tmp_path: Path) -> None:
    """A pyproject.toml without [tool.tailor] contributes nothing."""
    path: Path = tmp_path / "pyproject.toml"
    path.write_text('[project]\nname = "demo"\n', encoding="utf-8")

    assert MutableConfig.from_toml_file(path) is None


def test_load_merged_layers_files_in_order(tmp_path: Path) -> None:
    """Later files override earlier ones; missing files are skipped."""
    first: Path = tmp_path / "pyproject.toml"
    first.write_text('[tool.tailor.xml]\nroot_key = "a"\nitem_key = "row"\n', encoding="utf-8")
    second: Path = tmp_path / "tailor.toml"
    second.write_text('[xml]\nroot_key = "b"\n', encoding="utf-8")

    config = MutableConfig.load_merged([first, tmp_path / "missing.toml", second]).freeze()

    assert config.xml_root_key == "b"
    assert config.xml_item_key == "row"
    assert config.xml_meta_key == "meta"
    assert config.config_files == (first, second)


def test_typed_getters_coerce_or_return_none() -> None:
    """Getters coerce simple scalars and return None for absent or unusable values."""
    table: TomlTable = {"n": 3, "s": "x", "lst": [1], "flag": 0, "sub": {"k": True}}

    assert get_string_value_or_none(table, "n") == "3"
    assert get_string_value_or_none(table, "s") == "x"
    assert get_string_value_or_none(table, "lst") is None
    assert get_bool_value_or_none(table, "flag") is False
    assert get_bool_value_or_none(table, "missing") is None
    assert get_table_value(table, "sub") == {"k": True}
    assert get_table_value(table, "s") == {}


def test_malformed_values_fall_back_to_defaults() -> None:
    """A table with wrongly typed values leaves the runtime defaults in place."""
    config = MutableConfig.from_toml_dict(
        {"xml": {"root_key": ["doc"], "sort_keys": "yes"}, "array": "oops"}
    ).freeze()

    assert config.xml_root_key == "root"
    assert config.xml_sort_keys is True
    assert config.array_meta_key == "meta"


def test_from_directory_prefers_tailor_toml(tmp_path: Path) -> None:
    """tailor.toml overrides [tool.tailor] from pyproject.toml in the same directory."""
    (tmp_path / "pyproject.toml").write_text(
        '[tool.tailor.output]\nformat = "json"\n\n[tool.tailor.xml]\nroot_key = "a"\n',
        encoding="utf-8",
    )
    (tmp_path / "tailor.toml").write_text('[xml]\nroot_key = "b"\n', encoding="utf-8")

    config = MutableConfig.from_directory(tmp_path).freeze()

    assert config.output_format is OutputFormat.JSON
    assert config.xml_root_key == "b"


def test_from_directory_without_files_gives_defaults(tmp_path: Path) -> None:
    """An empty directory yields the runtime defaults."""
    assert MutableConfig.from_directory(tmp_path).freeze() == MutableConfig.from_defaults().freeze()
