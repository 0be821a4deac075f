# topmark:header:start
#
#   project      : OptScan
#   file         : get.py
#   file_relpath : src/optscan/cli/commands/get.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""OptScan `get` command.

Parses TOKENS like `parse`, then prints a single option through the typed
accessors, with an optional default and range:

    optscan get size --type integer --default 11 --min 1 --max 19 --spec size: -- -size 9
"""

from __future__ import annotations

from enum import Enum
from typing import TYPE_CHECKING

import click

from optscan.cli.cli_types import EnumChoiceParam
from optscan.cli.cmd_common import build_spec_table, collect_specs, run_parser
from optscan.cli.console import get_console
from optscan.cli.emitters import render_value
from optscan.cli.errors import OptscanUsageError, from_options_error
from optscan.cli.options import OutputFormat, output_format_option, spec_source_options
from optscan.core.errors import OptionsError
from optscan.core.numbers import DOUBLE, INTEGER, LONG

if TYPE_CHECKING:
    from pathlib import Path

    from optscan.core.numbers import NumberType


class ValueType(str, Enum):
    """Accessor used to read the option value."""

    STRING = "string"
    INTEGER = "integer"
    LONG = "long"
    DOUBLE = "double"


_NUMBER_TYPES: dict[ValueType, NumberType[int] | NumberType[float]] = {
    ValueType.INTEGER: INTEGER,
    ValueType.LONG: LONG,
    ValueType.DOUBLE: DOUBLE,
}


def _to_number(
    number_type: NumberType[int] | NumberType[float], param: str, text: str | None
) -> int | float | None:
    if text is None:
        return None
    try:
        return number_type.parse(text)
    except ValueError as exc:
        raise click.BadParameter(
            f"{text!r} is not a valid {number_type.label}", param_hint=param
        ) from exc


@click.command(
    name="get",
    help="Parse TOKENS and print the value of option NAME.",
)
@click.argument("name")
@spec_source_options
@click.option(
    "--type",
    "value_type",
    type=EnumChoiceParam(ValueType),
    default=ValueType.STRING.value,
    show_default=True,
    help=f"Value type ({', '.join(v.value for v in ValueType)}).",
)
@click.option("--default", "default", default=None, help="Value used when NAME is absent.")
@click.option("--min", "min_text", default=None, help="Inclusive lower bound (numeric types).")
@click.option("--max", "max_text", default=None, help="Inclusive upper bound (numeric types).")
@output_format_option
def get_command(
    *,
    name: str,
    specs: tuple[str, ...],
    specs_file: Path | None,
    no_config: bool,
    tokens: tuple[str, ...],
    value_type: ValueType,
    default: str | None,
    min_text: str | None,
    max_text: str | None,
    output_format: OutputFormat | None,
) -> None:
    """Print one option value.

    Args:
        name (str): Option name (without dash).
        specs (tuple[str, ...]): Spec strings from ``--spec``.
        specs_file (Path | None): TOML file declaring more specs.
        no_config (bool): Skip ``-config`` expansion.
        tokens (tuple[str, ...]): Tokens to parse.
        value_type (ValueType): Accessor to use.
        default (str | None): Default value text.
        min_text (str | None): Lower bound text.
        max_text (str | None): Upper bound text.
        output_format (OutputFormat | None): Output format.
    """
    console = get_console()

    table = build_spec_table(collect_specs(specs, specs_file))
    if name not in table:
        raise OptscanUsageError(f"Option -{name} is not declared")
    opts = run_parser(table, list(tokens), expand_config=not no_config)

    value: str | int | float
    number_type = _NUMBER_TYPES.get(value_type)
    if number_type is None:
        if min_text is not None or max_text is not None:
            raise OptscanUsageError("--min/--max require a numeric --type")
        value = opts.get(name, default or "")
    else:
        num_default = _to_number(number_type, "--default", default)
        lo = _to_number(number_type, "--min", min_text)
        hi = _to_number(number_type, "--max", max_text)
        store_default = num_default if num_default is not None else number_type.parse("0")
        try:
            value = opts.get_number(name, number_type, store_default, lo, hi)
        except OptionsError as exc:
            raise from_options_error(exc) from exc

    fmt: OutputFormat = output_format or OutputFormat.DEFAULT
    console.print(
        render_value(name, value_type.value, value, fmt, present=opts.contains(name))
    )
