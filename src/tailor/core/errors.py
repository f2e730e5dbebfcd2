# topmark:header:start
#
#   project      : Tailor
#   file         : errors.py
#   file_relpath : src/tailor/core/errors.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Exceptions raised by Tailor.

Usage:
    These exceptions signal programming or configuration errors. Absent items
    and absent transformer output are *not* errors: they resolve to the scope's
    null default. Exceptions raised by transformers or scopes are never wrapped
    and reach the caller unchanged.
"""

from __future__ import annotations


class TailorError(Exception):
    """Base class for all Tailor errors."""


class MethodNotImplementedError(TailorError, NotImplementedError):
    """A resource entry point was called without a concrete implementation."""

    def __init__(self, owner: str, method: str) -> None:
        self.owner: str = owner
        self.method: str = method
        super().__init__(f"{owner}.{method}() must be implemented by a concrete resource")


class UnsupportedFormatError(TailorError, ValueError):
    """No serializer is available for the requested output format."""


class SerializerMissingError(TailorError):
    """A resource was rendered without a serializer."""


class ConfigError(TailorError):
    """Configuration value violates an invariant (e.g. an empty element name)."""


class InvalidElementNameError(TailorError, ValueError):
    """A mapping key or configured key cannot be used as an XML element name."""

    def __init__(self, name: object) -> None:
        self.name: object = name
        super().__init__(f"{name!r} is not a valid XML element name")
