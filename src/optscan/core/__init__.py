# topmark:header:start
#
#   project      : OptScan
#   file         : __init__.py
#   file_relpath : src/optscan/core/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Option parsing engine: spec table, scanner, value store, and config expansion."""

from __future__ import annotations
