# topmark:header:start
#
#   project      : Tailor
#   file         : payloads.py
#   file_relpath : src/tailor/core/payloads.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Payload normalization and shape classification for encoders.

Serializers see the filtered tree as a union of three shapes:

- *mapping*: any `Mapping` (rendered key by key),
- *sequence*: `list`, `tuple`, `set` and `frozenset` (rendered element by element),
- *scalar*: everything else, including `str` and `bytes`.

Normalization rules (JSON encoder):
- `Path` -> `str`
- `Enum` -> `Enum.value`
- objects with `.to_dict()` -> normalize of that mapping
- mappings -> dict with stringified keys and normalized values
- sequences -> lists of normalized values
"""

from __future__ import annotations

import re
from collections.abc import Iterator, Mapping
from enum import Enum
from pathlib import Path
from typing import Any, Literal, cast

Shape = Literal["mapping", "sequence", "scalar"]

# Code points XML 1.0 cannot carry, not even as character references
_XML_ILLEGAL_CHARS: re.Pattern[str] = re.compile(
    r"[\x00-\x08\x0b\x0c\x0e-\x1f\ud800-\udfff\ufffe\uffff]"
)

_SEQUENCE_TYPES: tuple[type, ...] = (list, tuple, set, frozenset)


def classify(contents: object) -> Shape:
    """Return the tree shape of ``contents``.

    Args:
        contents: A node of the filtered tree.

    Returns:
        ``"mapping"``, ``"sequence"`` or ``"scalar"``.
    """
    if isinstance(contents, Mapping):
        return "mapping"
    if isinstance(contents, _SEQUENCE_TYPES):
        return "sequence"
    return "scalar"


def scalar_text(value: object) -> str | None:
    """Return the text form of a scalar tree node.

    Args:
        value: A scalar node.

    Returns:
        None for ``None`` (no text), ``"true"``/``"false"`` for booleans, the
        value of an `Enum`, the decoded text of ``bytes``, else ``str(value)``.
        Code points XML cannot carry are removed from the text.
    """
    if value is None:
        return None
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, Enum):
        return strip_xml_illegal_chars(str(value.value))
    if isinstance(value, bytes):
        return strip_xml_illegal_chars(value.decode("utf-8", errors="replace"))
    return strip_xml_illegal_chars(str(value))


def strip_xml_illegal_chars(text: str) -> str:
    """Remove the code points that XML 1.0 does not allow in character data.

    Tabs, newlines and carriage returns are kept.
    """
    return _XML_ILLEGAL_CHARS.sub("", text)


def normalize_payload(obj: object) -> object:
    """Normalize a payload into JSON-serializable structures.

    Notes:
      - Conservative on purpose: arbitrary objects are returned unchanged, so
        `json.dumps` still fails loudly on values it cannot encode.
      - Mapping keys are stringified to keep JSON object keys valid.

    Args:
        obj: The payload object to normalize.

    Returns:
        A JSON-serializable representation of `obj`.
    """
    if isinstance(obj, Path):
        return str(obj)

    if isinstance(obj, Enum):
        return obj.value

    to_dict: Any | None = getattr(obj, "to_dict", None)
    if callable(to_dict):
        return normalize_payload(to_dict())

    if isinstance(obj, Mapping):
        mapping: Mapping[object, Any] = cast("Mapping[object, Any]", obj)
        return {str(k): normalize_payload(v) for k, v in mapping.items()}

    if isinstance(obj, _SEQUENCE_TYPES):
        seq: Iterator[object] = cast("Iterator[object]", iter(obj))
        return [normalize_payload(v) for v in seq]

    return obj
