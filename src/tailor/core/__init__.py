# topmark:header:start
#
#   project      : Tailor
#   file         : __init__.py
#   file_relpath : src/tailor/core/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Shared primitives (errors, output formats, payload normalization).

Modules in this package must stay free of resource and serializer imports so
they can be used from anywhere without import cycles.
"""

from __future__ import annotations
