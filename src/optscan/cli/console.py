# topmark:header:start
#
#   project      : OptScan
#   file         : console.py
#   file_relpath : src/optscan/cli/console.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Console for user-facing program output.

Use the console for messages meant for end users; `logging` is reserved for
diagnostics of the parser itself.
"""

from __future__ import annotations

import sys
from typing import Any, Protocol, TextIO

import click


class Styler(Protocol):
    """Anything that can style a string for the current output (emitters only need this)."""

    def styled(self, text: str, **style_kwargs: Any) -> str:
        """Return ``text`` styled, or unchanged when styling is off."""
        ...


class ConsoleLike(Styler, Protocol):
    """What commands use to talk to the user: stdout, warnings, errors, styling."""

    def print(self, text: str = "", *, nl: bool = True) -> None:
        """Write program output."""
        ...

    def warn(self, text: str, *, nl: bool = True) -> None:
        """Write a warning for the user."""
        ...

    def error(self, text: str, *, nl: bool = True) -> None:
        """Write an error for the user."""
        ...


class ClickConsole:
    """Program-output console, independent from the logger.

    Args:
        enable_color (bool): If True, enables ANSI color codes in the output.
        out (TextIO | None): Stream for standard output. Defaults to `sys.stdout`.
        err (TextIO | None): Stream for error output. Defaults to `sys.stderr`.
    """

    enable_color: bool
    out: TextIO | None
    err: TextIO | None

    def __init__(
        self,
        *,
        enable_color: bool = True,
        out: TextIO | None = None,
        err: TextIO | None = None,
    ) -> None:
        self.enable_color = enable_color
        self.out = out or sys.stdout
        self.err = err or sys.stderr

    def print(self, text: str = "", *, nl: bool = True) -> None:
        """Write a message to stdout."""
        click.echo(text, nl=nl, file=self.out, color=self.enable_color)

    def warn(self, text: str, *, nl: bool = True) -> None:
        """Write a warning message to stderr."""
        click.secho(text, nl=nl, file=self.err, color=self.enable_color, fg="yellow")

    def error(self, text: str, *, nl: bool = True) -> None:
        """Write an error message to stderr."""
        click.secho(text, nl=nl, file=self.err, color=self.enable_color, fg="bright_red")

    def styled(self, text: str, **style_kwargs: Any) -> str:
        """Return a styled string using click.style (plain text if color is disabled)."""
        if not self.enable_color:
            return text
        return click.style(text, **style_kwargs)


def get_console(ctx: click.Context | None = None) -> ConsoleLike:
    """Return the console stored on the Click context, or a fresh plain one."""
    ctx = ctx or click.get_current_context(silent=True)
    if ctx is not None and isinstance(getattr(ctx, "obj", None), dict) and "console" in ctx.obj:
        console: ConsoleLike = ctx.obj["console"]
        return console
    return ClickConsole(enable_color=False)
