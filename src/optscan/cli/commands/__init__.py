# topmark:header:start
#
#   project      : OptScan
#   file         : __init__.py
#   file_relpath : src/optscan/cli/commands/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""OptScan CLI subcommands."""

from __future__ import annotations
