# topmark:header:start
#
#   project      : OptScan
#   file         : version.py
#   file_relpath : src/optscan/cli/commands/version.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""OptScan `version` command.

Prints the current OptScan version as installed in the active Python environment.
"""

from __future__ import annotations

import json

import click

from optscan.cli.cmd_common import get_effective_verbosity
from optscan.cli.console import get_console
from optscan.cli.options import OutputFormat, output_format_option
from optscan.constants import OPTSCAN_VERSION


@click.command(
    name="version",
    help="Show the current version of OptScan.",
)
@output_format_option
def version_command(*, output_format: OutputFormat | None = None) -> None:
    """Show the current version of OptScan.

    Args:
        output_format (OutputFormat | None): Optional output format.
    """
    ctx = click.get_current_context()
    console = get_console(ctx)
    vlevel = get_effective_verbosity(ctx)

    fmt: OutputFormat = output_format or OutputFormat.DEFAULT
    if fmt == OutputFormat.JSON:
        console.print(json.dumps({"version": OPTSCAN_VERSION}))
    elif fmt == OutputFormat.MARKDOWN:
        console.print("# OptScan Version\n")
        console.print(f"**OptScan version: {OPTSCAN_VERSION}**")
    elif vlevel > 0:
        console.print(console.styled("OptScan version:\n", bold=True, underline=True))
        console.print(f"    {console.styled(OPTSCAN_VERSION, bold=True)}")
    else:
        console.print(console.styled(OPTSCAN_VERSION, bold=True))
