# topmark:header:start
#
#   project      : FormPrint
#   file         : exit_codes.py
#   file_relpath : src/formprint/cli/exit_codes.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Exit codes for the FormPrint CLI.

FormPrint aligns with the BSD `sysexits` convention where practical, so that
other tooling can interpret failures consistently.
"""

from enum import IntEnum


class ExitCode(IntEnum):
    """Standardized exit codes for the FormPrint CLI.

    Attributes:
        SUCCESS: Successful execution with no errors.
        FAILURE: Generic failure (non-specific error).
        USAGE_ERROR: Invalid flags or arguments, or input of the wrong kind.
            Mirrors BSD ``EX_USAGE (64)``.
        DATA_ERROR: Input that cannot be parsed or decoded. Mirrors BSD
            ``EX_DATAERR (65)``.
        FILE_NOT_FOUND: Input path or source definition does not exist.
            Mirrors BSD ``EX_NOINPUT (66)``.
        IO_ERROR: I/O error reading/writing a file. Mirrors BSD ``EX_IOERR (74)``.
        PERMISSION_DENIED: Insufficient permissions. Mirrors BSD ``EX_NOPERM (77)``.
        CONFIG_ERROR: Invalid options or configuration files. Mirrors BSD
            ``EX_CONFIG (78)``.
        UNEXPECTED_ERROR: Unhandled/unknown error (last-resort).
    """

    SUCCESS = 0
    FAILURE = 1

    USAGE_ERROR = 64  # EX_USAGE
    DATA_ERROR = 65  # EX_DATAERR
    FILE_NOT_FOUND = 66  # EX_NOINPUT
    IO_ERROR = 74  # EX_IOERR
    PERMISSION_DENIED = 77  # EX_NOPERM
    CONFIG_ERROR = 78  # EX_CONFIG

    UNEXPECTED_ERROR = 255
