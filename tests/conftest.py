# topmark:header:start
#
#   project      : mdtitle
#   file         : conftest.py
#   file_relpath : tests/conftest.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Pytest configuration for the mdtitle test suite.

This file sets up global fixtures and helpers, and customizes the logging
configuration for test runs.
"""

from __future__ import annotations

import re
from collections.abc import Callable
from typing import TYPE_CHECKING, Any, TypeVar, cast

import pytest

from mdtitle.config import logging
from mdtitle.constants import LOG_LEVEL_ENV_VAR

if TYPE_CHECKING:
    from collections.abc import Iterable, Iterator
    from pathlib import Path

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


mark_cli: DecoratorType[Any] = as_typed_mark(pytest.mark.cli)
mark_generator: DecoratorType[Any] = as_typed_mark(pytest.mark.generator)


def parametrize(*args: Any, **kwargs: Any) -> Callable[[F], F]:
    """Typed wrapper for `pytest.mark.parametrize`."""
    mark: pytest.MarkDecorator = pytest.mark.parametrize(*args, **kwargs)
    return as_typed_mark(mark)


def hookimpl(*args: Any, **kwargs: Any) -> Callable[[F], F]:
    """Typed wrapper for `pytest.hookimpl`."""
    return as_typed_mark(pytest.hookimpl(*args, **kwargs))


@pytest.fixture(autouse=True)
def silence_mdtitle_logging(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    """Ensure the runtime log level is not forced via env during tests.

    This avoids accidental DEBUG/TRACE noise when the developer has exported
    MDTITLE_LOG_LEVEL in their shell. CLI runs reconfigure the root logger
    onto Click's captured streams, so logging is reset after each test.

    Args:
        monkeypatch (pytest.MonkeyPatch): Pytest monkeypatch fixture used to manipulate
            environment variables.
    """
    monkeypatch.delenv(LOG_LEVEL_ENV_VAR, raising=False)
    yield
    logging.setup_logging(level=logging.TRACE_LEVEL)


@hookimpl(tryfirst=True)
def pytest_configure(config: pytest.Config) -> None:  # pylint: disable=unused-argument
    """Set the logging level to TRACE for all tests.

    Args:
        config (pytest.Config): The pytest configuration object.
    """
    logging.setup_logging(level=logging.TRACE_LEVEL)


def write_lines(path: Path, lines: Iterable[str]) -> Path:
    """Write ``lines`` to ``path`` as a ``\\n``-terminated UTF-8 document.

    Args:
        path (Path): Target file.
        lines (Iterable[str]): Lines without terminators.

    Returns:
        Path: ``path``, for convenience.
    """
    path.write_text("".join(f"{line}\n" for line in lines), encoding="utf-8")
    return path


def read_lines(path: Path) -> list[str]:
    """Return the lines of ``path`` without terminators."""
    return path.read_text(encoding="utf-8").splitlines()


def staging_leftovers(directory: Path) -> list[Path]:
    """Return files in ``directory`` that look like staging files (``<stem>_<64 hex>``)."""
    staging_re = re.compile(r".+_[0-9a-f]{64}(\..*)?$")
    return sorted(p for p in directory.iterdir() if staging_re.match(p.name))
