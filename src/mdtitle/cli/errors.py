# topmark:header:start
#
#   project      : mdtitle
#   file         : errors.py
#   file_relpath : src/mdtitle/cli/errors.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Exceptions for the mdtitle CLI.

Usage:
    Domain errors (`mdtitle.errors`) are converted with `from_domain_error`
    into `click.ClickException` subclasses, which Click prints to stderr
    before exiting with the attached exit code.
"""

from __future__ import annotations

from typing import IO, Any

import click

from mdtitle.cli.exit_codes import ExitCode
from mdtitle.errors import FileIOError, MdtitleError, PathError, ReadError


class MdtitleCliError(click.ClickException):
    """Base class for all mdtitle CLI errors."""

    exit_code = ExitCode.FAILURE

    def format_message(self) -> str:  # pragma: no cover - trivial
        """Return the plain error message text."""
        return str(getattr(self, "message", ""))

    def show(self, file: IO[Any] | None = None) -> None:  # pragma: no cover - Click prints errors
        """Display the error in bright red on stderr."""
        if file is None:
            file = click.get_text_stream("stderr")
        click.echo(click.style(f"Error: {self.format_message()}", fg="bright_red"), file=file)


class MdtitleUsageError(MdtitleCliError):
    """Error for command-line invocation errors (invalid flags/args)."""

    exit_code = ExitCode.USAGE_ERROR


class MdtitleFileNotFoundError(MdtitleCliError):
    """Error when an input path does not exist or is a directory."""

    exit_code = ExitCode.FILE_NOT_FOUND


class MdtitlePermissionDeniedError(MdtitleCliError):
    """Error for insufficient permissions (read/write/delete)."""

    exit_code = ExitCode.PERMISSION_DENIED


class MdtitleIOError(MdtitleCliError):
    """Error for I/O errors reading/writing files."""

    exit_code = ExitCode.IO_ERROR


class MdtitleEncodingError(MdtitleCliError):
    """Error for text decoding errors (e.g., UnicodeDecodeError)."""

    exit_code = ExitCode.ENCODING_ERROR


class MdtitleUnexpectedError(MdtitleCliError):
    """Error for unhandled/unknown errors (last-resort)."""

    exit_code = ExitCode.UNEXPECTED_ERROR


def from_domain_error(error: MdtitleError) -> MdtitleCliError:
    """Map a domain error onto the CLI error carrying the matching exit code.

    Mapping:
        PathError -> USAGE_ERROR
        FileIOError (FileNotFoundError / IsADirectoryError) -> FILE_NOT_FOUND
        FileIOError (PermissionError) -> PERMISSION_DENIED
        FileIOError (other OSError) -> IO_ERROR
        ReadError -> ENCODING_ERROR
    """
    message: str = str(error)
    if isinstance(error, PathError):
        return MdtitleUsageError(message)
    if isinstance(error, FileIOError):
        if isinstance(error.cause, (FileNotFoundError, IsADirectoryError)):
            return MdtitleFileNotFoundError(message)
        if isinstance(error.cause, PermissionError):
            return MdtitlePermissionDeniedError(message)
        return MdtitleIOError(message)
    if isinstance(error, ReadError):
        return MdtitleEncodingError(message)
    return MdtitleUnexpectedError(message)
