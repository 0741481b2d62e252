# topmark:header:start
#
#   project      : Seti Icons
#   file         : exit_codes.py
#   file_relpath : src/seti_icons/cli/exit_codes.py
#   license      : MIT
#   copyright    : (c) 2025 Seti Icons contributors
#
# topmark:header:end

"""Exit codes for the Seti Icons CLI.

Values follow the BSD `sysexits` convention where practical so that other
tooling can interpret failures consistently.
"""

from enum import IntEnum


class ExitCode(IntEnum):
    """Standardized exit codes for the Seti Icons CLI.

    Attributes:
        SUCCESS: Successful execution with no errors.
        FAILURE: Generic failure; also used by ``resolve --strict`` when a file
            name cannot be rendered.
        USAGE_ERROR: Command-line invocation error (invalid flags/args). Mirrors
            BSD ``EX_USAGE (64)``.
        DATA_ERROR: Icon data is missing, malformed or out of lock-step.
            Mirrors BSD ``EX_DATAERR (65)``.
        FILE_NOT_FOUND: Input path does not exist. Mirrors BSD ``EX_NOINPUT (66)``.
        CONFIG_ERROR: Color theme file is unreadable or malformed. Mirrors BSD
            ``EX_CONFIG (78)``.
        UNEXPECTED_ERROR: Unhandled/unknown error (last-resort).
    """

    SUCCESS = 0
    FAILURE = 1

    USAGE_ERROR = 64  # EX_USAGE
    DATA_ERROR = 65  # EX_DATAERR
    FILE_NOT_FOUND = 66  # EX_NOINPUT
    CONFIG_ERROR = 78  # EX_CONFIG

    UNEXPECTED_ERROR = 255
