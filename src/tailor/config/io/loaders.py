# topmark:header:start
#
#   project      : Tailor
#   file         : loaders.py
#   file_relpath : src/tailor/config/io/loaders.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Load TOML configuration sources.

This module provides helpers for reading Tailor configuration from:
- the runtime defaults defined in code, and
- on-disk TOML files (``tailor.toml`` / ``pyproject.toml``).

Parsing is done with `tomlkit` and returned as plain `dict` structures.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, cast

import tomlkit
from tomlkit.exceptions import ParseError as TomlkitParseError

from tailor.config.keys import Toml
from tailor.config.logging import get_logger
from tailor.constants import (
    DEFAULT_ITEM_KEY,
    DEFAULT_META_KEY,
    DEFAULT_ROOT_KEY,
    DEFAULT_SORT_KEYS,
)
from tailor.core.formats import OutputFormat

if TYPE_CHECKING:
    from pathlib import Path

    from tailor.config.logging import TailorLogger

    from .types import TomlTable

logger: TailorLogger = get_logger(__name__)


def load_defaults_dict() -> TomlTable:
    """Return Tailor's runtime defaults as a Python dict.

    This function performs no I/O.

    Returns:
        A TOML-table-compatible dict containing the runtime defaults.

    Notes:
        The returned value is a new dict so callers can mutate it safely.
        ``[scope].null_default`` is absent by default (TOML has no null).
    """
    return {
        Toml.SECTION_OUTPUT: {
            Toml.KEY_FORMAT: OutputFormat.ARRAY.value,
        },
        Toml.SECTION_XML: {
            Toml.KEY_ROOT_KEY: DEFAULT_ROOT_KEY,
            Toml.KEY_META_KEY: DEFAULT_META_KEY,
            Toml.KEY_ITEM_KEY: DEFAULT_ITEM_KEY,
            Toml.KEY_SORT_KEYS: DEFAULT_SORT_KEYS,
        },
        Toml.SECTION_ARRAY: {
            Toml.KEY_META_KEY: DEFAULT_META_KEY,
        },
        Toml.SECTION_SCOPE: {},
    }


def load_toml_dict(path: Path) -> TomlTable:
    """Load and parse a TOML file from the filesystem.

    Args:
        path: Path to a TOML document (e.g., ``tailor.toml`` or ``pyproject.toml``).

    Returns:
        The parsed TOML content.

    Notes:
        - Errors are logged and an empty dict is returned on failure.
        - Encoding is assumed to be UTF-8.
    """
    try:
        text: str = path.read_text(encoding="utf-8")
        doc: tomlkit.TOMLDocument = tomlkit.parse(text)
        data_any: Any = doc.unwrap()
        return cast("TomlTable", data_any) if isinstance(data_any, dict) else {}
    except OSError as e:
        logger.error("Error loading TOML from %s: %s", path, e)
        return {}
    except TomlkitParseError as e:
        logger.error("Error decoding TOML from %s: %s", path, e)
        return {}
