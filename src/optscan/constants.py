# topmark:header:start
#
#   project      : OptScan
#   file         : constants.py
#   file_relpath : src/optscan/constants.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""OptScan Constants."""

from __future__ import annotations

from importlib.metadata import version as get_version
from typing import Final

OPTSCAN_VERSION: str = get_version("optscan")

# Token-level grammar
OPTION_PREFIX: Final[str] = "-"
STOP_MARKER: Final[str] = "--"
VALUE_MARKER: Final[str] = ":"

# Value recorded for a flag option that is present on the command line
FLAG_SENTINEL: Final[str] = "1"

# Option name that points at a file with additional arguments
CONFIG_OPTION: Final[str] = "config"

# Table holding spec definitions in a standalone TOML file / in pyproject.toml
SPECS_TABLE: Final[str] = "optscan"
PYPROJECT_SPECS_TABLE: Final[str] = "tool.optscan"
SPECS_KEY: Final[str] = "specs"

LOG_LEVEL_ENV: Final[str] = "OPTSCAN_LOG_LEVEL"
