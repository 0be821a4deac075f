# topmark:header:start
#
#   project      : OptScan
#   file         : errors.py
#   file_relpath : src/optscan/core/errors.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Error taxonomy for option parsing.

Two categories are kept apart:

- **User input errors** derive from `OptionsError`. They describe a command
  line, a config file, or a stored value that does not satisfy the option
  specification. Each carries an `ErrorKind` and structured fields so callers
  (the CLI, tests) can tell them apart without parsing messages.
- **Programming errors** (querying an option that was never registered, a
  malformed spec string, calling the parser out of order) are plain
  `AssertionError` / `ValueError` and are never wrapped into `OptionsError`.

The scanner and the config expander *return* these errors as values; the
`Options` facade and the typed accessors raise them to the immediate caller.
"""

from __future__ import annotations

from enum import Enum


class ErrorKind(str, Enum):
    """Kinds of user input errors reported by the parser."""

    UNKNOWN_OPTION = "unknown_option"
    MISSING_VALUE = "missing_value"
    INVALID_NUMBER = "invalid_number"
    OUT_OF_RANGE = "out_of_range"
    CONFIG_FILE_NOT_FOUND = "config_file_not_found"
    UNEXPECTED_ARGUMENTS = "unexpected_arguments"
    MALFORMED_CONFIG = "malformed_config"


class OptionsError(Exception):
    """Base class for all user input errors raised while parsing or querying options."""

    kind: ErrorKind

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message

    def __str__(self) -> str:
        return self.message


# Parse-time errors, produced while scanning a token sequence or a config file.


class UnknownOptionError(OptionsError):
    """A token names an option that is not in the spec table."""

    kind = ErrorKind.UNKNOWN_OPTION

    def __init__(self, option: str) -> None:
        super().__init__(f"Unknown option -{option}")
        self.option = option


class MissingValueError(OptionsError):
    """A value-taking option is the last token of the sequence."""

    kind = ErrorKind.MISSING_VALUE

    def __init__(self, option: str) -> None:
        super().__init__(f"Option -{option} needs value")
        self.option = option


class ConfigFileNotFoundError(OptionsError):
    """The file named by the `config` option cannot be opened."""

    kind = ErrorKind.CONFIG_FILE_NOT_FOUND

    def __init__(self, path: str, reason: str | None = None) -> None:
        super().__init__(f"File not found: {path}")
        self.path = path
        self.reason = reason


class MalformedConfigError(OptionsError):
    """The contents of a config file cannot be split into tokens (e.g. unbalanced quote)."""

    kind = ErrorKind.MALFORMED_CONFIG

    def __init__(self, path: str, reason: str) -> None:
        super().__init__(f"Malformed config file {path}: {reason}")
        self.path = path
        self.reason = reason


# Query-time errors, produced by the typed accessors.


class InvalidNumberError(OptionsError):
    """A numeric accessor was applied to a value that does not parse as that number type."""

    kind = ErrorKind.INVALID_NUMBER

    def __init__(self, option: str, value: str, type_label: str) -> None:
        super().__init__(f"Option -{option} needs {type_label} value")
        self.option = option
        self.value = value
        self.type_label = type_label


class OutOfRangeError(OptionsError):
    """A numeric value violates the bounds requested by the caller."""

    kind = ErrorKind.OUT_OF_RANGE

    def __init__(
        self,
        option: str,
        value: float,
        min_value: float | None,
        max_value: float | None = None,
    ) -> None:
        if max_value is None:
            message = f"Option -{option} must be at least {min_value}"
        elif min_value is None:
            message = f"Option -{option} must be at most {max_value}"
        else:
            message = f"Option -{option} must be in [{min_value}..{max_value}]"
        super().__init__(message)
        self.option = option
        self.value = value
        self.min_value = min_value
        self.max_value = max_value


class UnexpectedArgumentsError(OptionsError):
    """Positional arguments were given to a command that accepts none."""

    kind = ErrorKind.UNEXPECTED_ARGUMENTS

    def __init__(self, arguments: list[str]) -> None:
        super().__init__("Command does not allow arguments that are not options")
        self.arguments = list(arguments)


ParseError = UnknownOptionError | MissingValueError | ConfigFileNotFoundError | MalformedConfigError
"""Errors a scan or a config expansion can return."""
