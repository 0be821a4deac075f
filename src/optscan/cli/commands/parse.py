# topmark:header:start
#
#   project      : OptScan
#   file         : parse.py
#   file_relpath : src/optscan/cli/commands/parse.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""OptScan `parse` command.

Parses a token sequence against the declared option specs and prints the
resolved options and positional arguments. Tokens follow ``--`` so that Click
leaves them alone:

    optscan parse --spec size: --spec quiet -- -size 9 -quiet game.sgf
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from optscan.cli.cmd_common import (
    build_spec_table,
    collect_specs,
    get_effective_verbosity,
    run_parser,
)
from optscan.cli.console import get_console
from optscan.cli.emitters import render_parse_result
from optscan.cli.errors import from_options_error
from optscan.cli.options import OutputFormat, output_format_option, spec_source_options
from optscan.core.errors import UnexpectedArgumentsError

if TYPE_CHECKING:
    from pathlib import Path


@click.command(
    name="parse",
    help="Parse TOKENS against the declared option specs and show the result.",
)
@spec_source_options
@click.option(
    "--no-arguments",
    "no_arguments",
    is_flag=True,
    help="Fail if any positional (non-option) argument remains.",
)
@output_format_option
def parse_command(
    *,
    specs: tuple[str, ...],
    specs_file: Path | None,
    no_config: bool,
    tokens: tuple[str, ...],
    no_arguments: bool,
    output_format: OutputFormat | None,
) -> None:
    """Parse TOKENS and print the resolved options.

    Args:
        specs (tuple[str, ...]): Spec strings from ``--spec``.
        specs_file (Path | None): TOML file declaring more specs.
        no_config (bool): Skip ``-config`` expansion.
        tokens (tuple[str, ...]): Tokens to parse.
        no_arguments (bool): Reject positional arguments.
        output_format (OutputFormat | None): Output format.
    """
    ctx = click.get_current_context()
    console = get_console(ctx)

    table = build_spec_table(collect_specs(specs, specs_file))
    opts = run_parser(table, list(tokens), expand_config=not no_config)

    if no_arguments:
        try:
            opts.check_no_arguments()
        except UnexpectedArgumentsError as exc:
            raise from_options_error(exc) from exc

    fmt: OutputFormat = output_format or OutputFormat.DEFAULT
    text = render_parse_result(
        opts, fmt, console=console, verbosity=get_effective_verbosity(ctx)
    )
    if text:
        console.print(text)
