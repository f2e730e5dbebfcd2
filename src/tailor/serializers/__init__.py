# topmark:header:start
#
#   project      : Tailor
#   file         : __init__.py
#   file_relpath : src/tailor/serializers/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Output encoders and the factory building them from configuration.

Serializers are constructed explicitly and passed to resources; there is no
process-wide registry.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from tailor.constants import DEFAULT_META_KEY
from tailor.core.errors import UnsupportedFormatError
from tailor.core.formats import OutputFormat
from tailor.serializers.array import ArraySerializer
from tailor.serializers.base import Serializer
from tailor.serializers.json import JsonSerializer
from tailor.serializers.xml import XmlSerializer

if TYPE_CHECKING:
    from tailor.config.model import Config

__all__ = [
    "ArraySerializer",
    "JsonSerializer",
    "Serializer",
    "XmlSerializer",
    "make_serializer",
]


def make_serializer(fmt: OutputFormat | None = None, config: Config | None = None) -> Serializer:
    """Build the serializer for ``fmt`` using the settings in ``config``.

    Args:
        fmt (OutputFormat | None): Requested encoding; defaults to ``config.output_format``
            (or ARRAY without a config).
        config (Config | None): Runtime config; built-in defaults when None.

    Returns:
        Serializer: A new serializer instance.

    Raises:
        UnsupportedFormatError: If ``fmt`` is not a known `OutputFormat`.
    """
    if fmt is None:
        fmt = OutputFormat.ARRAY if config is None else config.output_format

    meta_key: str = DEFAULT_META_KEY if config is None else config.array_meta_key

    if fmt == OutputFormat.ARRAY:
        return ArraySerializer(meta_key=meta_key)
    if fmt == OutputFormat.JSON:
        return JsonSerializer(meta_key=meta_key)
    if fmt == OutputFormat.XML:
        return XmlSerializer() if config is None else XmlSerializer.from_config(config)

    raise UnsupportedFormatError(f"Unsupported output format: {fmt!r}")
