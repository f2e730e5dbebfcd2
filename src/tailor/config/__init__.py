# topmark:header:start
#
#   project      : Tailor
#   file         : __init__.py
#   file_relpath : src/tailor/config/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Configuration handling for Tailor.

Serializer settings (element names, key ordering, meta keys), the default
output format and the default null value are read from TOML
(``tailor.toml`` or ``[tool.tailor]`` in ``pyproject.toml``) and frozen into an
immutable `Config`.
"""

from __future__ import annotations

from tailor.config.model import Config, MutableConfig

__all__ = [
    "Config",
    "MutableConfig",
]
