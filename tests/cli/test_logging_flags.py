# topmark:header:start
#
#   project      : mdtitle
#   file         : test_logging_flags.py
#   file_relpath : tests/cli/test_logging_flags.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""CLI test: logging verbosity and quietness flags.

Ensures that `-v`/`-vvv` and `-q`/`-qq` parse and resolve to log levels.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

import pytest

from mdtitle.cli.errors import MdtitleUsageError
from mdtitle.cli.options import resolve_log_level
from mdtitle.config.logging import TRACE_LEVEL
from mdtitle.constants import LOG_LEVEL_ENV_VAR
from tests.cli.conftest import assert_SUCCESS, run_cli
from tests.conftest import mark_cli, parametrize, write_lines

if TYPE_CHECKING:
    from pathlib import Path

    from click.testing import Result


@mark_cli
@parametrize("flags", [["-v"], ["-vv"], ["-vvv"], ["-q"], ["-qq"]])
def test_verbose_and_quiet_flags_parse(tmp_path: Path, flags: list[str]) -> None:
    """It should accept verbosity and quietness flags and exit with code 0."""
    doc: Path = write_lines(tmp_path / "README.md", ["# A"])

    result: Result = run_cli([*flags, "--file", str(doc)])

    assert_SUCCESS(result)


@parametrize(
    "verbose, quiet, expected",
    [
        (1, 0, logging.INFO),
        (2, 0, logging.DEBUG),
        (3, 0, TRACE_LEVEL),
        (5, 0, TRACE_LEVEL),
        (0, 1, logging.ERROR),
        (0, 2, logging.ERROR),
        (0, 0, None),
    ],
)
def test_resolve_log_level(verbose: int, quiet: int, expected: int | None) -> None:
    """Flag counts map onto log levels; no flags defer to the environment."""
    assert resolve_log_level(verbose, quiet) == expected


def test_resolve_log_level_defers_to_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    """Without flags MDTITLE_LOG_LEVEL decides."""
    monkeypatch.setenv(LOG_LEVEL_ENV_VAR, "DEBUG")

    assert resolve_log_level(0, 0) == logging.DEBUG


def test_resolve_log_level_rejects_both() -> None:
    """`-v` and `-q` together are a usage error."""
    with pytest.raises(MdtitleUsageError):
        resolve_log_level(1, 1)
