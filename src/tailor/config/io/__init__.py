# topmark:header:start
#
#   project      : Tailor
#   file         : __init__.py
#   file_relpath : src/tailor/config/io/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""TOML I/O helpers for the Tailor config layer.

Re-exports the loaders and typed getters so the config model can import them
from a single place.
"""

from __future__ import annotations

from tailor.config.io.getters import (
    get_bool_value_or_none,
    get_string_value_or_none,
    get_table_value,
)
from tailor.config.io.loaders import load_defaults_dict, load_toml_dict
from tailor.config.io.types import TomlTable

__all__ = [
    "TomlTable",
    "get_bool_value_or_none",
    "get_string_value_or_none",
    "get_table_value",
    "load_defaults_dict",
    "load_toml_dict",
]
