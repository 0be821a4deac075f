# topmark:header:start
#
#   project      : OptScan
#   file         : main.py
#   file_relpath : src/optscan/cli/main.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Click entry point for the OptScan CLI.

The group resolves verbosity and color once and stores them, together with
the program-output console, in ``ctx.obj``:

| key               | value                                      |
|-------------------|--------------------------------------------|
| `verbosity_level` | ``-v`` count minus ``-q`` count            |
| `log_level`       | level from ``OPTSCAN_LOG_LEVEL`` or None   |
| `color_enabled`   | result of `resolve_color_mode`             |
| `console`         | `ClickConsole` used by every subcommand    |
"""

from __future__ import annotations

import click

from optscan.cli.commands.get import get_command
from optscan.cli.commands.parse import parse_command
from optscan.cli.commands.version import version_command
from optscan.cli.console import ClickConsole
from optscan.cli.options import (
    ColorMode,
    common_color_options,
    common_verbose_options,
    resolve_color_mode,
    resolve_verbosity,
)
from optscan.config.logging import get_logger, resolve_env_log_level, setup_logging

logger = get_logger(__name__)

USAGE_HINT = "Hint: use 'optscan parse --spec NAME[:]... -- TOKENS...' to parse tokens."


def init_common_state(
    ctx: click.Context,
    *,
    verbose: int,
    quiet: int,
    color_mode: ColorMode | None,
    no_color: bool,
) -> None:
    """Fill ``ctx.obj`` from the group options.

    Logging follows ``OPTSCAN_LOG_LEVEL`` only; ``-v``/``-q`` change program
    output, not diagnostics.
    """
    obj = ctx.ensure_object(dict)
    obj["verbosity_level"] = resolve_verbosity(verbose, quiet)

    log_level = resolve_env_log_level()
    setup_logging(level=log_level)
    obj["log_level"] = log_level

    mode = ColorMode.NEVER if no_color else (color_mode or ColorMode.AUTO)
    enable_color = resolve_color_mode(mode)
    ctx.color = obj["color_enabled"] = enable_color
    obj["console"] = ClickConsole(enable_color=enable_color)
    logger.debug("CLI state: verbosity=%d color=%s", obj["verbosity_level"], enable_color)


@click.group(
    context_settings={"help_option_names": ["-h", "--help"]},
    invoke_without_command=True,
    help="OptScan: single-dash option parsing with -config file merging.",
)
@common_verbose_options
@common_color_options
@click.pass_context
def cli(
    ctx: click.Context,
    verbose: int,
    quiet: int,
    color_mode: ColorMode | None,
    no_color: bool,
) -> None:
    """Entry point for the OptScan CLI."""
    init_common_state(
        ctx, verbose=verbose, quiet=quiet, color_mode=color_mode, no_color=no_color
    )
    if ctx.invoked_subcommand is None:
        console = ctx.obj["console"]
        console.print(USAGE_HINT)
        console.print()
        console.print(ctx.get_help())


cli.add_command(version_command)
cli.add_command(parse_command)
cli.add_command(get_command)
