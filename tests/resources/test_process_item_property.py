# topmark:header:start
#
#   project      : Tailor
#   file         : test_process_item_property.py
#   file_relpath : tests/resources/test_process_item_property.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

# pyright: strict

"""Property tests for exclude stripping in `Resource.process_item`."""

from __future__ import annotations

from typing import Any

import pytest
from hypothesis import given, settings

from tailor.resources import Item
from tailor.scope import StaticScope
from tests.fakes import identity_callback
from tests.strategies_tailor import s_mapping_and_excludes

pytestmark: pytest.MarkDecorator = pytest.mark.hypothesis_slow


@settings(max_examples=60, deadline=None)
@given(sample=s_mapping_and_excludes())
def test_excluded_keys_never_survive(sample: tuple[dict[str, Any], frozenset[str]]) -> None:
    """No excluded key survives, and every other key keeps its value."""
    mapping, excludes = sample
    scope = StaticScope.of(excludes=excludes)

    result: Any = Item(mapping, identity_callback).process_item(scope, mapping)

    assert set(result).isdisjoint(excludes)
    assert result == {k: v for k, v in mapping.items() if k not in excludes}


@settings(max_examples=40, deadline=None)
@given(sample=s_mapping_and_excludes())
def test_processing_is_idempotent(sample: tuple[dict[str, Any], frozenset[str]]) -> None:
    """Processing a filtered mapping again under the same scope changes nothing."""
    mapping, excludes = sample
    scope = StaticScope.of(excludes=excludes)
    resource = Item(mapping, identity_callback)

    once: Any = resource.process_item(scope, mapping)

    assert resource.process_item(scope, once) == once
