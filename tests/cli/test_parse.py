# topmark:header:start
#
#   project      : OptScan
#   file         : test_parse.py
#   file_relpath : tests/cli/test_parse.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""CLI tests for `optscan parse`.

Tokens are passed after ``--`` so Click hands them to the parser untouched.
"""

from __future__ import annotations

import json
from typing import TYPE_CHECKING, Any

from optscan.cli.exit_codes import ExitCode
from tests.cli.conftest import (
    assert_CONFIG_ERROR,
    assert_FILE_NOT_FOUND,
    assert_SUCCESS,
    assert_USAGE_ERROR,
    run_cli,
    run_cli_in,
)
from tests.conftest import mark_cli, write_config

if TYPE_CHECKING:
    from pathlib import Path

SPEC_ARGS: list[str] = ["-s", "config:", "-s", "size:", "-s", "quiet"]


def parse_json(output: str) -> dict[str, Any]:
    """Decode the JSON payload printed by `parse --format json`."""
    return json.loads(output)


@mark_cli
def test_parse_default_output() -> None:
    """Default output lists options then arguments."""
    result = run_cli(["--no-color", "parse", *SPEC_ARGS, "--", "-size", "9", "-quiet", "g.sgf"])
    assert_SUCCESS(result)
    lines = result.output.splitlines()
    assert lines == ["-quiet = 1", "-size = 9", 'arguments: ["g.sgf"]']


@mark_cli
def test_parse_default_output_without_arguments() -> None:
    """No arguments line is printed when there are none."""
    result = run_cli(["--no-color", "parse", *SPEC_ARGS, "--", "-size", "9"])
    assert_SUCCESS(result)
    assert result.output.splitlines() == ["-size = 9"]


@mark_cli
def test_parse_verbose_output_shows_specs_and_state() -> None:
    """-v adds the declared specs and the parser state."""
    result = run_cli(["-v", "--no-color", "parse", *SPEC_ARGS, "--", "-quiet"])
    assert_SUCCESS(result)
    assert "Specs: quiet config: size:" in result.output
    assert "State: config_expanded" in result.output
    assert "arguments: []" in result.output


@mark_cli
def test_parse_json_output() -> None:
    """JSON output carries options, arguments, specs and state."""
    result = run_cli(["parse", *SPEC_ARGS, "--format", "json", "--", "-size", "9", "a", "--", "-b"])
    assert_SUCCESS(result)
    payload = parse_json(result.output)
    assert payload["options"] == {"size": "9"}
    assert payload["arguments"] == ["a", "-b"]
    assert payload["state"] == "config_expanded"
    assert payload["specs"] == ["quiet", "config:", "size:"]


@mark_cli
def test_parse_markdown_output() -> None:
    """Markdown output renders a table and an argument list."""
    result = run_cli(["parse", *SPEC_ARGS, "--format", "markdown", "--", "-size", "9", "x"])
    assert_SUCCESS(result)
    assert "# Parsed options" in result.output
    assert "| `-size` | `9` |" in result.output
    assert "- `x`" in result.output


@mark_cli
def test_parse_markdown_output_empty() -> None:
    """Markdown output says so when nothing was parsed."""
    result = run_cli(["parse", *SPEC_ARGS, "--format", "markdown"])
    assert_SUCCESS(result)
    assert "_No options._" in result.output
    assert "_No arguments._" in result.output


@mark_cli
def test_parse_unknown_option_is_usage_error() -> None:
    """Undeclared options exit with USAGE_ERROR."""
    result = run_cli(["parse", *SPEC_ARGS, "--", "-bogus"])
    assert_USAGE_ERROR(result)
    assert "Unknown option -bogus" in result.output


@mark_cli
def test_parse_missing_value_is_usage_error() -> None:
    """A trailing value option exits with USAGE_ERROR."""
    result = run_cli(["parse", *SPEC_ARGS, "--", "-size"])
    assert_USAGE_ERROR(result)
    assert "Option -size needs value" in result.output


@mark_cli
def test_parse_malformed_spec_is_usage_error() -> None:
    """A spec with a leading dash is rejected."""
    result = run_cli(["parse", "-s", "-size:"])
    assert_USAGE_ERROR(result)


@mark_cli
def test_parse_no_arguments_rejects_positionals() -> None:
    """--no-arguments turns leftover positionals into a usage error."""
    result = run_cli(["parse", *SPEC_ARGS, "--no-arguments", "--", "-quiet", "stray"])
    assert_USAGE_ERROR(result)
    assert "does not allow arguments" in result.output

    ok = run_cli(["parse", *SPEC_ARGS, "--no-arguments", "--", "-quiet"])
    assert_SUCCESS(ok)


@mark_cli
def test_parse_merges_config_file(tmp_path: Path) -> None:
    """Config values override argv; config positionals come last."""
    write_config(tmp_path, "-size 13\nfrom-config\n")
    result = run_cli_in(
        tmp_path,
        ["parse", *SPEC_ARGS, "--format", "json", "--", "-config", "opts.cfg", "-size", "9", "a"],
    )
    assert_SUCCESS(result)
    payload = parse_json(result.output)
    assert payload["options"] == {"config": "opts.cfg", "size": "13"}
    assert payload["arguments"] == ["a", "from-config"]


@mark_cli
def test_parse_no_config_skips_expansion(tmp_path: Path) -> None:
    """--no-config leaves the -config value unread."""
    result = run_cli_in(
        tmp_path,
        ["parse", *SPEC_ARGS, "--no-config", "--format", "json", "--", "-config", "missing.cfg"],
    )
    assert_SUCCESS(result)
    payload = parse_json(result.output)
    assert payload["state"] == "argv_parsed"
    assert payload["options"] == {"config": "missing.cfg"}


@mark_cli
def test_parse_missing_config_file(tmp_path: Path) -> None:
    """A config file that cannot be opened exits with FILE_NOT_FOUND."""
    result = run_cli_in(tmp_path, ["parse", *SPEC_ARGS, "--", "-config", "missing.cfg"])
    assert_FILE_NOT_FOUND(result)
    assert "File not found: missing.cfg" in result.output


@mark_cli
def test_parse_malformed_config_file(tmp_path: Path) -> None:
    """An unbalanced quote in the config file exits with CONFIG_ERROR."""
    write_config(tmp_path, '-size "9\n')
    result = run_cli_in(tmp_path, ["parse", *SPEC_ARGS, "--", "-config", "opts.cfg"])
    assert_CONFIG_ERROR(result)


@mark_cli
def test_parse_unknown_option_in_config_file(tmp_path: Path) -> None:
    """Errors inside the config file are usage errors like argv errors."""
    write_config(tmp_path, "-nosuch")
    result = run_cli_in(tmp_path, ["parse", *SPEC_ARGS, "--", "-config", "opts.cfg"])
    assert_USAGE_ERROR(result)
    assert "Unknown option -nosuch" in result.output


@mark_cli
def test_parse_specs_file(tmp_path: Path) -> None:
    """Specs from --specs-file are combined with --spec."""
    (tmp_path / "optscan.toml").write_text('[optscan]\nspecs = ["size:"]\n', encoding="utf-8")
    result = run_cli_in(
        tmp_path,
        ["parse", "--specs-file", "optscan.toml", "-s", "quiet", "--format", "json", "--",
         "-size", "3", "-quiet"],
    )
    assert_SUCCESS(result)
    payload = parse_json(result.output)
    assert payload["options"] == {"quiet": "1", "size": "3"}


@mark_cli
def test_parse_bad_specs_file(tmp_path: Path) -> None:
    """A specs file without a specs table exits with CONFIG_ERROR."""
    (tmp_path / "optscan.toml").write_text("[other]\n", encoding="utf-8")
    result = run_cli_in(tmp_path, ["parse", "--specs-file", "optscan.toml"])
    assert_CONFIG_ERROR(result)
    assert result.exit_code == ExitCode.CONFIG_ERROR


@mark_cli
def test_parse_non_utf8_specs_file(tmp_path: Path) -> None:
    """A specs file that is not UTF-8 exits with CONFIG_ERROR."""
    (tmp_path / "optscan.toml").write_bytes(b'[optscan]\nspecs = ["\xff"]\n')
    result = run_cli_in(tmp_path, ["parse", "--specs-file", "optscan.toml"])
    assert_CONFIG_ERROR(result)
    assert "Cannot load option specs" in result.output
