# topmark:header:start
#
#   project      : FormPrint
#   file         : conftest.py
#   file_relpath : tests/conftest.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Pytest configuration for the FormPrint test suite.

This file sets up global fixtures and customizes the logging configuration for test runs,
ensuring consistent and verbose logging output during testing.

Notes:
    Every test runs against a fresh process-wide `ConfigStore` whose
    external loader reads nothing, so a developer's ``~/.formprint.toml``
    never leaks into test results. Tests that exercise configuration files
    install their own store (see `install_store`).
"""

from __future__ import annotations

from collections.abc import Callable, Iterator
from typing import TYPE_CHECKING, Any, TypeVar, cast

import pytest

from formprint.config import logging
from formprint.config.model import ResolvedOptions
from formprint.config.store import ConfigSource, ConfigStore, set_default_store

if TYPE_CHECKING:
    from collections.abc import Mapping, Sequence

F = TypeVar("F", bound=Callable[..., object])

# This defines the type for the decorator function itself:
# It takes a Callable (F) and returns the same Callable (F).
DecoratorType = Callable[[F], F]


def as_typed_mark(mark: Any) -> DecoratorType[Any]:
    """Wrap a pytest mark so static type checkers preserve the function type.

    Args:
        mark (Any): A pytest mark decorator such as `pytest.mark.pipeline`.

    Returns:
        DecoratorType[Any]: A decorator that preserves the wrapped function's type.
    """

    def _decorator(func: F) -> F:
        return cast("F", mark(func))

    return _decorator


mark_integration: DecoratorType[Any] = as_typed_mark(pytest.mark.integration)
mark_pipeline: DecoratorType[Any] = as_typed_mark(pytest.mark.pipeline)
mark_cli: DecoratorType[Any] = as_typed_mark(pytest.mark.cli)
mark_hypothesis_slow: DecoratorType[Any] = as_typed_mark(pytest.mark.hypothesis_slow)


def parametrize(*args: Any, **kwargs: Any) -> Callable[[F], F]:
    """Typed wrapper for `pytest.mark.parametrize`.

    Args:
        *args (Any): Positional arguments forwarded to `pytest.mark.parametrize`.
        **kwargs (Any): Keyword arguments forwarded to `pytest.mark.parametrize`.

    Returns:
        Callable[[F], F]: A decorator that preserves the wrapped function's type.
    """
    mark: pytest.MarkDecorator = pytest.mark.parametrize(*args, **kwargs)
    return as_typed_mark(mark)


def hookimpl(*args: Any, **kwargs: Any) -> Callable[[F], F]:
    """Typed wrapper for `pytest.hookimpl`."""
    return as_typed_mark(pytest.hookimpl(*args, **kwargs))


class StaticLoader:
    """Configuration loader that yields fixed sources and counts its calls."""

    def __init__(self, *sources: ConfigSource) -> None:
        self.sources: list[ConfigSource] = list(sources)
        self.calls: int = 0

    def __call__(self) -> list[ConfigSource]:
        self.calls += 1
        return list(self.sources)


def install_store(*sources: ConfigSource) -> ConfigStore:
    """Install a fresh default store whose loader yields ``sources``."""
    store = ConfigStore(loader=StaticLoader(*sources))
    set_default_store(store)
    return store


def resolved(options: Mapping[str, Any] | None = None) -> ResolvedOptions:
    """Return `ResolvedOptions` for ``options`` merged over the defaults."""
    return ResolvedOptions.from_options(options or {})


def texts(tokens: Sequence[Any]) -> list[str]:
    """Return the text of each token."""
    return [t.text for t in tokens]


@pytest.fixture(autouse=True)
def isolated_store(monkeypatch: pytest.MonkeyPatch) -> Iterator[ConfigStore]:
    """Give each test a fresh default store that loads no external configuration.

    Also ensures FormPrint's runtime log level and configuration path are not
    forced via env during tests.

    Args:
        monkeypatch (pytest.MonkeyPatch): Pytest monkeypatch fixture used to manipulate
            environment variables.

    Yields:
        ConfigStore: The store installed for the test.
    """
    monkeypatch.delenv("FORMPRINT_LOG_LEVEL", raising=False)
    monkeypatch.delenv("FORMPRINT_CONFIG", raising=False)
    store = install_store()
    yield store
    set_default_store(None)


@hookimpl(tryfirst=True)
def pytest_configure(config: pytest.Config) -> None:  # pylint: disable=unused-argument
    """Configure pytest settings and customize logging for the test suite.

    This function sets the logging level to TRACE for all tests,
    ensuring detailed output is captured during test execution.

    Args:
        config (pytest.Config): The pytest configuration object.
    """
    logging.setup_logging(level=logging.TRACE_LEVEL)
