# topmark:header:start
#
#   project      : mdtitle
#   file         : exit_codes.py
#   file_relpath : src/mdtitle/cli/exit_codes.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Exit codes for the mdtitle CLI.

mdtitle aligns with the BSD `sysexits` convention so that other tooling can
interpret failures consistently.
"""

from enum import IntEnum


class ExitCode(IntEnum):
    """Standardized exit codes for the mdtitle CLI.

    Attributes:
        SUCCESS: Outline generated and written.
        FAILURE: Generic failure. Prefer a more specific code if available.
        USAGE_ERROR: Command-line invocation error (invalid flags/args, or a
            source path without a file name). Mirrors BSD ``EX_USAGE (64)``.
        ENCODING_ERROR: The source is not valid UTF-8 text. Mirrors BSD
            ``EX_DATAERR (65)``.
        FILE_NOT_FOUND: A path does not exist or is a directory. Mirrors BSD
            ``EX_NOINPUT (66)``.
        IO_ERROR: Other I/O error reading/writing a file. Mirrors BSD ``EX_IOERR (74)``.
        PERMISSION_DENIED: Insufficient permissions (read/write/delete). Mirrors
            BSD ``EX_NOPERM (77)``.
        UNEXPECTED_ERROR: Unhandled/unknown error (last-resort).
    """

    SUCCESS = 0
    FAILURE = 1

    USAGE_ERROR = 64  # EX_USAGE
    ENCODING_ERROR = 65  # EX_DATAERR
    FILE_NOT_FOUND = 66  # EX_NOINPUT
    IO_ERROR = 74  # EX_IOERR
    PERMISSION_DENIED = 77  # EX_NOPERM

    UNEXPECTED_ERROR = 255
