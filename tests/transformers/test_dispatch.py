# topmark:header:start
#
#   project      : Tailor
#   file         : test_dispatch.py
#   file_relpath : tests/transformers/test_dispatch.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tests for transformer capability detection and invocation."""

from __future__ import annotations

from typing import Any

import pytest

from tailor.resources import Item
from tailor.scope import StaticScope
from tailor.transformers import (
    RelationalTransformer,
    invoke_transformer,
    is_relational,
    transformer_resource_key,
)
from tests.fakes import FakeTransformer, identity_callback


class TransformOnly:
    """Has `transform` but not the rest of the relational capability set."""

    def transform(self, *args: Any) -> Any:
        return {"from": "method"}

    def __call__(self, *args: Any) -> Any:
        return {"from": "call"}


class HalfRelational:
    """Not callable, and only part of the relational capability set."""

    def transform(self, *args: Any) -> Any:
        return {}

    def has_includes(self) -> bool:
        return False


def test_structural_detection() -> None:
    """Detection is structural: no base class is required."""
    assert is_relational(FakeTransformer())
    assert isinstance(FakeTransformer(), RelationalTransformer)
    assert not is_relational(identity_callback)
    assert not is_relational(TransformOnly())


def test_partial_implementation_is_called_as_callback() -> None:
    """Objects lacking the full capability set are invoked as plain callables."""
    assert invoke_transformer(TransformOnly(), 1, StaticScope.of()) == {"from": "call"}


def test_incomplete_non_callable_transformer_names_missing_methods() -> None:
    """A non-callable partial implementation fails with the methods it lacks."""
    with pytest.raises(TypeError) as excinfo:
        invoke_transformer(HalfRelational(), 1, StaticScope.of())  # type: ignore[arg-type]

    message: str = str(excinfo.value)
    assert "HalfRelational" in message
    for name in ("get_resource_key", "get_available_includes", "filter_includes"):
        assert name in message
    assert "transform," not in message
    assert "has_includes" not in message


def test_incomplete_transformer_fails_when_item_is_processed() -> None:
    """The same error surfaces from a resource holding such a transformer."""
    resource = Item({"id": 1}, HalfRelational())  # type: ignore[arg-type]

    with pytest.raises(TypeError, match="process_includes"):
        resource.process(StaticScope.of())


def test_relational_transformer_receives_five_arguments() -> None:
    """transform() receives the item followed by the four scope views."""
    transformer = FakeTransformer()
    scope = StaticScope.of(includes={"a"}, excludes={"b"}, all_includes={"a", "a.c"})

    invoke_transformer(transformer, {"id": 1}, scope)

    assert transformer.transform_args == (
        {"id": 1},
        frozenset({"a"}),
        frozenset({"b"}),
        frozenset({"a", "a.c"}),
        frozenset({"b"}),
    )


def test_resource_keys() -> None:
    """Callbacks use the default key "data"."""
    assert transformer_resource_key(identity_callback) == "data"
    assert transformer_resource_key(FakeTransformer(resource_key="books")) == "books"
