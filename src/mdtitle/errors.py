# topmark:header:start
#
#   project      : mdtitle
#   file         : errors.py
#   file_relpath : src/mdtitle/errors.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Domain exceptions raised by the title generator.

These exceptions are CLI-agnostic. The CLI layer translates them into
`click.ClickException` subclasses with exit codes (see `mdtitle.cli.errors`).

Every exception keeps the originating exception as ``__cause__`` (raised with
``raise ... from exc``) and, for I/O failures, as the ``cause`` attribute.
"""

from __future__ import annotations

from enum import Enum
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from pathlib import Path


class IOStep(str, Enum):
    """Identifies the file operation that failed."""

    OPEN_SOURCE = "open source file"
    READ = "read source file"
    OPEN_STAGING = "open staging file"
    WRITE = "write staging file"
    COPY = "copy staging file to destination"
    DELETE = "delete staging file"


class MdtitleError(Exception):
    """Base class for all mdtitle domain errors."""


class PathError(MdtitleError):
    """The staging file name could not be derived from the source path."""

    def __init__(self, path: Path, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Cannot derive staging path from {str(path)!r}: {reason}")


class FileIOError(MdtitleError):
    """An open/read/write/copy/delete operation failed."""

    def __init__(self, step: IOStep, path: Path, cause: OSError) -> None:
        self.step = step
        self.path = path
        self.cause = cause
        detail = cause.strerror or str(cause)
        super().__init__(f"Failed to {step.value} {str(path)!r}: {detail}")


class ReadError(MdtitleError):
    """A source line could not be decoded as text."""

    def __init__(self, path: Path, line_number: int, cause: UnicodeDecodeError) -> None:
        self.path = path
        self.line_number = line_number
        self.cause = cause
        super().__init__(
            f"Failed to decode {str(path)!r} as {cause.encoding} near line {line_number}: "
            f"{cause.reason}"
        )
