# topmark:header:start
#
#   file         : options.py
#   file_relpath : src/optscan/cli/options.py
#   project      : OptScan
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Common CLI option utilities.

This module centralizes reusable options (verbosity, color, output format, and
the option-spec sources shared by `parse` and `get`) and their resolution
logic, so commands and groups can stay thin.
"""

from __future__ import annotations

import os
import sys
from enum import Enum
from pathlib import Path
from typing import Callable, ParamSpec, TypeVar

import click

from optscan.cli.cli_types import EnumChoiceParam
from optscan.cli.errors import OptscanUsageError

P = ParamSpec("P")
R = TypeVar("R")


class OutputFormat(str, Enum):
    """Output format for CLI rendering.

    Members:
      DEFAULT: Human-friendly text output; may include ANSI color if enabled.
      JSON: A single JSON object (machine-readable, never colored).
      MARKDOWN: Markdown tables and lists.
    """

    DEFAULT = "default"
    JSON = "json"
    MARKDOWN = "markdown"


class ColorMode(Enum):
    """User intent for colorized terminal output."""

    AUTO = "auto"
    ALWAYS = "always"
    NEVER = "never"


def resolve_verbosity(verbose_count: int, quiet_count: int) -> int:
    """Combine the ``-v`` / ``-q`` counts into one signed verbosity level.

    Raises:
        OptscanUsageError: If both ``-v`` and ``-q`` were given.
    """
    if verbose_count and quiet_count:
        raise OptscanUsageError("Use either --verbose or --quiet, not both.")
    return verbose_count - quiet_count


def _color_from_env() -> bool | None:
    # FORCE_COLOR=0 counts as unset
    if os.getenv("FORCE_COLOR", "0") != "0":
        return True
    if "NO_COLOR" in os.environ:
        return False
    return None


def resolve_color_mode(mode: ColorMode, *, stdout_isatty: bool | None = None) -> bool:
    """Return True if program output should carry ANSI styling.

    An explicit ``always`` / ``never`` wins, then ``FORCE_COLOR`` / ``NO_COLOR``,
    then whether stdout is a terminal.
    """
    if mode is not ColorMode.AUTO:
        return mode is ColorMode.ALWAYS
    from_env = _color_from_env()
    if from_env is not None:
        return from_env
    if stdout_isatty is None:
        try:
            stdout_isatty = sys.stdout.isatty()
        except (AttributeError, ValueError):
            stdout_isatty = False
    return bool(stdout_isatty)


def common_verbose_options(f: Callable[P, R]) -> Callable[P, R]:
    """Add the counting ``-v/--verbose`` and ``-q/--quiet`` group options."""
    f = click.option("-v", "--verbose", count=True, help="Show more detail (repeatable).")(f)
    f = click.option("-q", "--quiet", count=True, help="Show less output (repeatable).")(f)
    return f


def common_color_options(f: Callable[P, R]) -> Callable[P, R]:
    """Add the ``--color MODE`` and ``--no-color`` group options."""
    f = click.option(
        "--color",
        "color_mode",
        type=EnumChoiceParam(ColorMode),
        default=None,
        help="When to style output: auto, always or never.",
    )(f)
    f = click.option("--no-color", "no_color", is_flag=True, help="Same as --color never.")(f)
    return f


def output_format_option(f: Callable[P, R]) -> Callable[P, R]:
    """Add the ``--format`` option to a command."""
    return click.option(
        "--format",
        "output_format",
        type=EnumChoiceParam(OutputFormat),
        default=None,
        help=f"Output format ({', '.join(v.value for v in OutputFormat)}).",
    )(f)


def spec_source_options(f: Callable[P, R]) -> Callable[P, R]:
    """Add the option-spec sources and config handling shared by `parse` and `get`.

    Adds ``--spec`` (repeatable), ``--specs-file``, ``--no-config`` and the
    positional ``TOKENS`` to parse (pass them after ``--``).
    """
    f = click.argument("tokens", nargs=-1, type=str)(f)
    f = click.option(
        "--no-config",
        "no_config",
        is_flag=True,
        help="Do not read additional arguments from the file named by '-config'.",
    )(f)
    f = click.option(
        "--specs-file",
        "specs_file",
        type=click.Path(dir_okay=False, path_type=Path),
        default=None,
        help="Read option specs from a TOML file ([optscan] or [tool.optscan] table, key 'specs').",
    )(f)
    f = click.option(
        "--spec",
        "-s",
        "specs",
        multiple=True,
        help="Declare an option: NAME for a flag, NAME: for an option taking a value.",
    )(f)
    return f
