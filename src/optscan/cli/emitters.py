# topmark:header:start
#
#   project      : OptScan
#   file         : emitters.py
#   file_relpath : src/optscan/cli/emitters.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Render parse results for the console.

Each renderer returns the full text to print. JSON output is a single object
and never contains ANSI styling; Markdown output uses tables and lists.
"""

from __future__ import annotations

import json
from typing import TYPE_CHECKING, Any

from optscan.cli.options import OutputFormat

if TYPE_CHECKING:
    from optscan.cli.console import Styler
    from optscan.core.options import Options


def _md_code(text: str) -> str:
    return "`" + text.replace("`", "\\`") + "`"


def build_parse_payload(opts: Options) -> dict[str, Any]:
    """Return the machine-readable view of a parsed command line."""
    return {
        "state": opts.state.value,
        "specs": [str(s) for s in opts.spec_table],
        "options": opts.as_dict(),
        "arguments": opts.arguments,
    }


def render_parse_result(
    opts: Options,
    fmt: OutputFormat,
    *,
    console: Styler,
    verbosity: int = 0,
) -> str:
    """Render resolved options and positional arguments in the requested format."""
    payload = build_parse_payload(opts)
    if fmt == OutputFormat.JSON:
        return json.dumps(payload, indent=2)

    options: dict[str, str] = payload["options"]
    arguments: list[str] = payload["arguments"]

    if fmt == OutputFormat.MARKDOWN:
        lines = ["# Parsed options", ""]
        if options:
            lines += ["| Option | Value |", "|---|---|"]
            lines += [f"| {_md_code('-' + k)} | {_md_code(v)} |" for k, v in options.items()]
        else:
            lines.append("_No options._")
        lines += ["", "## Arguments", ""]
        lines += [f"- {_md_code(a)}" for a in arguments] if arguments else ["_No arguments._"]
        return "\n".join(lines)

    lines = []
    if verbosity > 0:
        lines.append(console.styled(f"Specs: {' '.join(payload['specs'])}", dim=True))
        lines.append(console.styled(f"State: {payload['state']}", dim=True))
    for k, v in options.items():
        lines.append(f"{console.styled('-' + k, bold=True)} = {v}")
    if arguments or verbosity > 0:
        lines.append(f"{console.styled('arguments:', bold=True)} {json.dumps(arguments)}")
    return "\n".join(lines)


def render_value(
    name: str,
    type_name: str,
    value: str | int | float,
    fmt: OutputFormat,
    *,
    present: bool,
) -> str:
    """Render a single typed option value."""
    if fmt == OutputFormat.JSON:
        return json.dumps({"option": name, "type": type_name, "present": present, "value": value})
    if fmt == OutputFormat.MARKDOWN:
        origin = "given" if present else "default"
        return f"**-{name}** ({type_name}, {origin}): {_md_code(str(value))}"
    return str(value)
