# topmark:header:start
#
#   file         : exit_codes.py
#   file_relpath : src/optscan/cli/exit_codes.py
#   project      : OptScan
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Exit codes for the OptScan CLI.

OptScan aligns with the BSD `sysexits` convention so that calling scripts can
tell a bad command line from a missing config file.
"""

from enum import IntEnum


class ExitCode(IntEnum):
    """Standardized exit codes for the OptScan CLI.

    Attributes:
        SUCCESS: Successful execution with no errors.
        FAILURE: Generic failure (non-specific error).
        USAGE_ERROR: The parsed tokens do not satisfy the option specs (unknown
            option, missing value, bad number, unexpected arguments). Mirrors BSD
            ``EX_USAGE (64)``.
        FILE_NOT_FOUND: The ``-config`` file cannot be opened. Mirrors BSD
            ``EX_NOINPUT (66)``.
        CONFIG_ERROR: A config file or spec file is malformed. Mirrors BSD
            ``EX_CONFIG (78)``.
    """

    SUCCESS = 0
    FAILURE = 1

    USAGE_ERROR = 64  # EX_USAGE
    FILE_NOT_FOUND = 66  # EX_NOINPUT
    CONFIG_ERROR = 78  # EX_CONFIG
