# topmark:header:start
#
#   project      : Tailor
#   file         : formats.py
#   file_relpath : src/tailor/core/formats.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Output format definitions shared by the config layer and serializers.

Text formats (JSON, XML) produce a ``str``; the ARRAY format produces the
filtered tree itself (plain dicts and lists).
"""

from __future__ import annotations

from enum import Enum

from tailor.core.errors import UnsupportedFormatError


class OutputFormat(str, Enum):
    """Output encodings a resource can be rendered into.

    Attributes:
        ARRAY: The filtered tree as plain Python mappings and lists (default).
        JSON: A pretty-printed JSON document.
        XML: An XML document built from the filtered tree.
    """

    ARRAY = "array"
    JSON = "json"
    XML = "xml"


def parse_output_format(value: str) -> OutputFormat:
    """Resolve a case-insensitive format token such as ``"xml"``.

    Args:
        value: Format token, e.g. from a config file.

    Returns:
        The matching `OutputFormat`.

    Raises:
        UnsupportedFormatError: If ``value`` names no known format.
    """
    token: str = value.strip().lower()
    for fmt in OutputFormat:
        if fmt.value == token:
            return fmt
    raise UnsupportedFormatError(
        f"Unknown output format '{value}' - valid choices: "
        f"{', '.join(f.value for f in OutputFormat)}"
    )
