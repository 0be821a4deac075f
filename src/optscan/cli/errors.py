# topmark:header:start
#
#   project      : OptScan
#   file         : errors.py
#   file_relpath : src/optscan/cli/errors.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Exceptions for the OptScan CLI.

Usage:
    Commands raise these exceptions (usually through `from_options_error`) to
    stop with a standardized message and exit code.

Styling:
    Exceptions prefer the project console if available (see `show()`); if no console
    is present in the Click context, they fall back to Click's default styling.
"""

from __future__ import annotations

from typing import IO, Any

import click

from optscan.cli.exit_codes import ExitCode
from optscan.core.errors import ErrorKind, OptionsError


class OptscanError(click.ClickException):
    """Base class for all OptScan CLI errors."""

    exit_code = ExitCode.FAILURE

    def format_message(self) -> str:  # pragma: no cover - trivial
        """Return the plain error message text (colorized in `show()`)."""
        return str(getattr(self, "message", ""))

    def show(self, file: IO[Any] | None = None) -> None:  # pragma: no cover - Click prints errors
        """Display the error using the project console if available.

        Falls back to Click’s default error display when no console is present.
        """
        ctx = click.get_current_context(silent=True)
        if ctx is not None and isinstance(getattr(ctx, "obj", None), dict):
            console = ctx.obj.get("console")
            if console is not None:
                console.error(console.styled(self.format_message(), fg="bright_red"))
                return
        super().show(file)


class OptscanUsageError(OptscanError):
    """Error for tokens that do not satisfy the option specs."""

    exit_code = ExitCode.USAGE_ERROR


class OptscanConfigError(OptscanError):
    """Error for malformed config files or spec definition files."""

    exit_code = ExitCode.CONFIG_ERROR


class OptscanFileNotFoundError(OptscanError):
    """Error when the ``-config`` file cannot be opened."""

    exit_code = ExitCode.FILE_NOT_FOUND


_KIND_TO_ERROR: dict[ErrorKind, type[OptscanError]] = {
    ErrorKind.UNKNOWN_OPTION: OptscanUsageError,
    ErrorKind.MISSING_VALUE: OptscanUsageError,
    ErrorKind.INVALID_NUMBER: OptscanUsageError,
    ErrorKind.OUT_OF_RANGE: OptscanUsageError,
    ErrorKind.UNEXPECTED_ARGUMENTS: OptscanUsageError,
    ErrorKind.CONFIG_FILE_NOT_FOUND: OptscanFileNotFoundError,
    ErrorKind.MALFORMED_CONFIG: OptscanConfigError,
}


def from_options_error(exc: OptionsError) -> OptscanError:
    """Map a parser error to the CLI error carrying the matching exit code."""
    return _KIND_TO_ERROR.get(exc.kind, OptscanError)(exc.message)
