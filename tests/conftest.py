# topmark:header:start
#
#   project      : Tailor
#   file         : conftest.py
#   file_relpath : tests/conftest.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Pytest configuration for the Tailor test suite.

Sets up TRACE logging for test runs, typed wrappers around pytest marks, and
a few shared fixtures (default config, empty scope).

Notes:
    Test doubles for transformers and scopes live in `tests.fakes` so test
    modules can import them directly.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any, TypeVar, cast

import pytest

from tailor.config import Config, MutableConfig, logging
from tailor.scope import StaticScope

F = TypeVar("F", bound=Callable[..., object])

DecoratorType = Callable[[F], F]


def as_typed_mark(mark: Any) -> DecoratorType[Any]:
    """Wrap a pytest mark so static type checkers preserve the function type.

    Args:
        mark (Any): A pytest mark decorator such as `pytest.mark.integration`.

    Returns:
        DecoratorType[Any]: A decorator that preserves the wrapped function's type.
    """

    def _decorator(func: F) -> F:
        return cast("F", mark(func))

    return _decorator


mark_resource: DecoratorType[Any] = as_typed_mark(pytest.mark.resource)
mark_serializer: DecoratorType[Any] = as_typed_mark(pytest.mark.serializer)
mark_integration: DecoratorType[Any] = as_typed_mark(pytest.mark.integration)


def hookimpl(*args: Any, **kwargs: Any) -> Callable[[F], F]:
    """Typed wrapper for `pytest.hookimpl`."""
    return as_typed_mark(pytest.hookimpl(*args, **kwargs))


@pytest.fixture(autouse=True)
def silence_tailor_logging(monkeypatch: pytest.MonkeyPatch) -> None:
    """Ensure the runtime log level is not forced via env during tests.

    Args:
        monkeypatch (pytest.MonkeyPatch): Used to remove ``TAILOR_LOG_LEVEL``.
    """
    monkeypatch.delenv(logging.LOG_LEVEL_ENV_VAR, raising=False)


@hookimpl(tryfirst=True)
def pytest_configure(config: pytest.Config) -> None:  # pylint: disable=unused-argument
    """Log at TRACE level for all tests so pipeline decisions show up on failure."""
    logging.setup_logging(level=logging.TRACE_LEVEL)


@pytest.fixture
def default_config() -> Config:
    """Return the frozen runtime defaults."""
    return MutableConfig.from_defaults().freeze()


@pytest.fixture
def empty_scope() -> StaticScope:
    """Return a scope with no includes, no excludes and a None null default."""
    return StaticScope.of()
