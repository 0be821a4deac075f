# topmark:header:start
#
#   project      : OptScan
#   file         : cmd_common.py
#   file_relpath : src/optscan/cli/cmd_common.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Common command utilities for Click-based commands.

Small helpers used by `parse` and `get`: collecting the option specs from
``--spec`` / ``--specs-file``, running the parser, and turning parser errors
into CLI errors with the right exit code.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from optscan.cli.console import get_console
from optscan.cli.errors import OptscanConfigError, OptscanUsageError, from_options_error
from optscan.config.logging import get_logger
from optscan.config.specs_file import SpecsFileError, load_specs_file
from optscan.constants import CONFIG_OPTION
from optscan.core.errors import OptionsError
from optscan.core.options import Options
from optscan.core.spec import SpecTable

if TYPE_CHECKING:
    from collections.abc import Sequence
    from pathlib import Path

logger = get_logger(__name__)


def get_effective_verbosity(ctx: click.Context) -> int:
    """Return the program-output verbosity stored on the context (0 if unset)."""
    obj = ctx.obj if isinstance(ctx.obj, dict) else {}
    return int(obj.get("verbosity_level", 0))


def collect_specs(specs: Sequence[str], specs_file: Path | None) -> list[str]:
    """Return the spec strings from ``--specs-file`` followed by ``--spec`` values.

    Warnings found in the specs file are shown on the console.

    Raises:
        OptscanConfigError: If the specs file cannot be loaded.
    """
    out: list[str] = []
    if specs_file is not None:
        try:
            loaded = load_specs_file(specs_file)
        except SpecsFileError as exc:
            raise OptscanConfigError(str(exc)) from exc
        console = get_console()
        for warning in loaded.warnings:
            console.warn(f"{specs_file}: {warning}")
        out.extend(loaded.specs)
    out.extend(specs)
    return out


def build_spec_table(specs: Sequence[str]) -> SpecTable:
    """Build the spec table, reporting malformed specs as usage errors."""
    try:
        return SpecTable.build(specs)
    except ValueError as exc:
        raise OptscanUsageError(str(exc)) from exc


def run_parser(table: SpecTable, tokens: Sequence[str], *, expand_config: bool) -> Options:
    """Parse ``tokens`` and, when requested and declared, expand ``-config``.

    Raises:
        OptscanError: The CLI error matching the parser error.
    """
    try:
        opts = Options(tokens, table)
        config_spec = table.lookup(CONFIG_OPTION)
        if expand_config and config_spec is not None and config_spec.requires_value:
            opts.handle_config_option()
    except OptionsError as exc:
        logger.info("Parse failed: %s", exc)
        raise from_options_error(exc) from exc
    return opts
