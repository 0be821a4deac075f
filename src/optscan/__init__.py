# topmark:header:start
#
#   project      : OptScan
#   file         : __init__.py
#   file_relpath : src/optscan/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""OptScan package.

OptScan parses single-dash command line options against a small declarative
specification (``name`` for flags, ``name:`` for options taking a value),
optionally merges additional arguments from a ``-config`` file, and exposes
typed accessors for the resolved values.

Example:
    ```python
    from optscan import parse_options

    opts = parse_options(["-size", "11", "-config", "game.cfg"], ["config:", "size:", "quiet"])
    size = opts.get_integer("size", 11, 1, 19)
    ```
"""

from __future__ import annotations

from optscan.core.errors import (
    ConfigFileNotFoundError,
    ErrorKind,
    InvalidNumberError,
    MalformedConfigError,
    MissingValueError,
    OptionsError,
    OutOfRangeError,
    UnexpectedArgumentsError,
    UnknownOptionError,
)
from optscan.core.options import Options, ParserState, parse_options
from optscan.core.spec import OptionSpec, SpecTable

__all__ = [
    "ConfigFileNotFoundError",
    "ErrorKind",
    "InvalidNumberError",
    "MalformedConfigError",
    "MissingValueError",
    "OptionSpec",
    "Options",
    "OptionsError",
    "OutOfRangeError",
    "ParserState",
    "SpecTable",
    "UnexpectedArgumentsError",
    "UnknownOptionError",
    "parse_options",
]
