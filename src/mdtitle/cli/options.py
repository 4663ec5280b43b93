# topmark:header:start
#
#   project      : mdtitle
#   file         : options.py
#   file_relpath : src/mdtitle/cli/options.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Common CLI option utilities.

This module centralizes the verbosity options and their resolution into a
logging level, so the command body stays thin.
"""

from __future__ import annotations

import logging
from typing import Callable, ParamSpec, TypeVar

import click

from mdtitle.cli.errors import MdtitleUsageError
from mdtitle.config.logging import TRACE_LEVEL, resolve_env_log_level

P = ParamSpec("P")
R = TypeVar("R")


def resolve_log_level(verbose_count: int, quiet_count: int) -> int | None:
    """Resolve the internal logging level from the verbose and quiet counts.

    Args:
        verbose_count: Number of times the verbose flag (-v) is passed.
        quiet_count: Number of times the quiet flag (-q) is passed.

    Returns:
        The logging level, or None to defer to ``MDTITLE_LOG_LEVEL``.

    Raises:
        MdtitleUsageError: If both verbose and quiet flags are used simultaneously.

    Behavior:
        Three or more -v flags set TRACE level.
        Two -v flags set DEBUG level.
        One -v flag sets INFO level.
        One or more -q flags set ERROR level.
        Without flags the environment decides (default CRITICAL).
    """
    if verbose_count > 0 and quiet_count > 0:
        raise MdtitleUsageError("The '--verbose' and '--quiet' options are mutually exclusive.")

    if verbose_count >= 3:  # -vvv
        return TRACE_LEVEL
    if verbose_count == 2:  # -vv
        return logging.DEBUG
    if verbose_count == 1:  # -v
        return logging.INFO
    if quiet_count >= 1:  # -q
        return logging.ERROR
    return resolve_env_log_level()


def common_verbose_options(f: Callable[P, R]) -> Callable[P, R]:
    """Adds --verbose and --quiet options to a command.

    Args:
        f: The Click command function to decorate.

    Returns:
        The decorated function with verbosity options added.
    """
    f = click.option(
        "-v",
        "--verbose",
        count=True,
        help="Increase log verbosity. Specify up to three times for more detail.",
    )(f)
    f = click.option(
        "-q",
        "--quiet",
        count=True,
        help="Only log errors.",
    )(f)
    return f
