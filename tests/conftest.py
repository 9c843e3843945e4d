# topmark:header:start
#
#   project      : TCInspect
#   file         : conftest.py
#   file_relpath : tests/conftest.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Pytest configuration for the TCInspect test suite.

This file sets up global fixtures and customizes the logging configuration for test runs,
ensuring consistent and verbose logging output during testing.

Notes:
    Tests should respect the immutable/mutable settings split:

    - Build settings using `tcinspect.config.MutableSettings` (mutable), then
      `freeze()` into a `tcinspect.config.Settings` for reporter construction.
    - Do **not** mutate a frozen `Settings`. If you need to tweak one,
      call `Settings.thaw()`, edit the returned `MutableSettings`,
      then `freeze()` again.
"""

from __future__ import annotations

import io
from collections.abc import Callable
from typing import TYPE_CHECKING, Any, TypeVar, cast

import pytest

from tcinspect.config import MutableSettings, logging
from tcinspect.teamcity import TeamCityReporter

if TYPE_CHECKING:
    from tcinspect.config import Settings

F = TypeVar("F", bound=Callable[..., object])

# This defines the type for the decorator function itself:
# It takes a Callable (F) and returns the same Callable (F).
DecoratorType = Callable[[F], F]


def as_typed_mark(mark: Any) -> DecoratorType[Any]:
    """Wrap a pytest mark so static type checkers preserve the function type.

    Args:
        mark (Any): A pytest mark decorator such as `pytest.mark.cli`.

    Returns:
        DecoratorType[Any]: A decorator that preserves the wrapped function's type.
    """

    def _decorator(func: F) -> F:
        return cast("F", mark(func))

    return _decorator


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
    """Typed wrapper for `pytest.hookimpl`.

    Args:
        *args (Any): Positional arguments forwarded to `pytest.hookimpl`.
        **kwargs (Any): Keyword arguments forwarded to `pytest.hookimpl`.

    Returns:
        Callable[[F], F]: A decorator that preserves the wrapped function's type.
    """
    return as_typed_mark(pytest.hookimpl(*args, **kwargs))


@pytest.fixture(autouse=True)
def silence_tcinspect_logging(monkeypatch: pytest.MonkeyPatch) -> None:
    """Ensure TCInspect's runtime log level is not forced via env during tests.

    Args:
        monkeypatch (pytest.MonkeyPatch): Pytest monkeypatch fixture used to manipulate
            environment variables.
    """
    monkeypatch.delenv(logging.LOG_LEVEL_ENV_VAR, raising=False)


@hookimpl(tryfirst=True)
def pytest_configure(config: pytest.Config) -> None:  # pylint: disable=unused-argument
    """Configure pytest settings and customize logging for the test suite.

    This function sets the logging level to TRACE for all tests,
    ensuring detailed output is captured during test execution.

    Args:
        config (pytest.Config): The pytest configuration object.
    """
    logging.setup_logging(level=logging.TRACE_LEVEL)


def make_settings(**overrides: Any) -> Settings:
    """Return a frozen `Settings` built from defaults and overrides.

    Args:
        **overrides (Any): Field overrides applied to the mutable builder before freezing.

    Returns:
        Settings: An immutable settings snapshot for use in tests.
    """
    m = MutableSettings()
    for k, v in overrides.items():
        setattr(m, k, v)
    return m.freeze()


def make_reporter(**overrides: Any) -> tuple[TeamCityReporter, io.StringIO]:
    """Return a reporter writing into an in-memory buffer, and the buffer.

    Args:
        **overrides (Any): Settings overrides, see `make_settings`.

    Returns:
        tuple[TeamCityReporter, io.StringIO]: The reporter and its output buffer.
    """
    buffer = io.StringIO()
    return TeamCityReporter(make_settings(**overrides), buffer), buffer


def output_lines(buffer: io.StringIO) -> list[str]:
    """Return the service message lines written to ``buffer``."""
    return buffer.getvalue().splitlines()
