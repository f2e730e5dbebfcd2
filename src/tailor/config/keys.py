# topmark:header:start
#
#   project      : Tailor
#   file         : keys.py
#   file_relpath : src/tailor/config/keys.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Canonical TOML section and key names for Tailor configuration.

Keys defined here are the external configuration schema as it appears in
``tailor.toml`` and in ``[tool.tailor]`` inside ``pyproject.toml``. Renaming or
removing a key is a breaking change.
"""

from __future__ import annotations

from typing import Final


class Toml:
    """TOML section names and keys used by Tailor configuration."""

    # pyproject.toml nesting
    SECTION_TOOL: Final[str] = "tool"
    SECTION_TOOL_TAILOR: Final[str] = "tailor"

    # [output]
    SECTION_OUTPUT: Final[str] = "output"

    KEY_FORMAT: Final[str] = "format"

    # [xml]
    SECTION_XML: Final[str] = "xml"

    KEY_ROOT_KEY: Final[str] = "root_key"
    KEY_META_KEY: Final[str] = "meta_key"
    KEY_ITEM_KEY: Final[str] = "item_key"
    KEY_SORT_KEYS: Final[str] = "sort_keys"

    # [array] (also used by the JSON encoder)
    SECTION_ARRAY: Final[str] = "array"

    # [scope]
    SECTION_SCOPE: Final[str] = "scope"

    KEY_NULL_DEFAULT: Final[str] = "null_default"
