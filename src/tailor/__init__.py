# topmark:header:start
#
#   project      : Tailor
#   file         : __init__.py
#   file_relpath : src/tailor/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tailor package.

Tailor shapes domain data into serializable response trees. A caller wraps an
item (or a collection) together with a transformer in a resource, resolves the
requested includes/excludes in a scope, and renders the filtered tree through
one of the available serializers (flat mapping, JSON text or XML document).
"""

from __future__ import annotations

from tailor.constants import TAILOR_VERSION

__version__: str = TAILOR_VERSION
