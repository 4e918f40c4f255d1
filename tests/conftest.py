# topmark:header:start
#
#   project      : TsMark
#   file         : conftest.py
#   file_relpath : tests/conftest.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Pytest configuration for the TsMark test suite.

Provides typed wrappers around pytest marks/fixtures, sets up TRACE logging for the
run, and small builders shared by the pipeline, config and CLI tests.

Notes:
    Build configs with `tsmark.config.MutableConfig`, then `freeze()` into a
    `tsmark.config.Config`; never mutate a frozen `Config`.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING, Any, TypeVar, cast

import pytest

from tsmark.config import MutableConfig, logging

if TYPE_CHECKING:
    from pathlib import Path

    from tsmark.config import Config

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


mark_integration: DecoratorType[Any] = as_typed_mark(pytest.mark.integration)
mark_pipeline: DecoratorType[Any] = as_typed_mark(pytest.mark.pipeline)
mark_cli: DecoratorType[Any] = as_typed_mark(pytest.mark.cli)


def parametrize(*args: Any, **kwargs: Any) -> Callable[[F], F]:
    """Typed wrapper for `pytest.mark.parametrize`."""
    mark: pytest.MarkDecorator = pytest.mark.parametrize(*args, **kwargs)
    return as_typed_mark(mark)


def hookimpl(*args: Any, **kwargs: Any) -> Callable[[F], F]:
    """Typed wrapper for `pytest.hookimpl`."""
    return as_typed_mark(pytest.hookimpl(*args, **kwargs))


def fixture(*args: Any, **kwargs: Any) -> Callable[[F], F]:
    """Typed wrapper for `pytest.fixture`."""
    return as_typed_mark(pytest.fixture(*args, **kwargs))


@pytest.fixture(autouse=True)
def silence_tsmark_logging(monkeypatch: pytest.MonkeyPatch) -> None:
    """Ensure the developer's TSMARK_LOG_LEVEL does not leak into test runs."""
    monkeypatch.delenv("TSMARK_LOG_LEVEL", raising=False)


@hookimpl(tryfirst=True)
def pytest_configure(config: pytest.Config) -> None:
    """Log at TRACE level for the whole run (shown by pytest on failures)."""
    logging.setup_logging(level=logging.TRACE_LEVEL)


def make_mutable_config(**overrides: Any) -> MutableConfig:
    """Return a mutable builder with ``overrides`` applied on top of nothing.

    Unset fields fall back to the built-in defaults on `freeze()`.
    """
    return MutableConfig(**overrides)


def make_config(**overrides: Any) -> Config:
    """Return a frozen `Config` built from defaults and ``overrides``."""
    return make_mutable_config(**overrides).freeze()


def write_lines(path: Path, lines: list[str], newline: str = "\n") -> Path:
    """Write ``lines`` joined by ``newline`` (no translation) and return ``path``."""
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_bytes(newline.join(lines).encode("utf-8"))
    return path


def read_lines(path: Path, newline: str = "\n") -> list[str]:
    """Read ``path`` back and split it on ``newline`` (no translation)."""
    return path.read_bytes().decode("utf-8").split(newline)
