# topmark:header:start
#
#   project      : Tailor
#   file         : constants.py
#   file_relpath : src/tailor/constants.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tailor Constants."""

from __future__ import annotations

from importlib.metadata import version as get_version

TAILOR_VERSION: str = get_version("tailor")

# Config file names looked up by `MutableConfig.from_toml_file`:
TAILOR_TOML_NAME: str = "tailor.toml"
PYPROJECT_TOML_NAME: str = "pyproject.toml"

# Resource key reported for bare callback transformers:
DEFAULT_RESOURCE_KEY: str = "data"

# Tree-building (XML) serializer defaults:
DEFAULT_ROOT_KEY: str = "root"
DEFAULT_META_KEY: str = "meta"
DEFAULT_ITEM_KEY: str = "item"
DEFAULT_SORT_KEYS: bool = True

# Meta entry used to attach paging data when rendering:
PAGINATION_META_KEY: str = "pagination"

XML_DECLARATION: str = '<?xml version="1.0"?>'
