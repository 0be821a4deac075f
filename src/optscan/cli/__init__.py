# topmark:header:start
#
#   project      : OptScan
#   file         : __init__.py
#   file_relpath : src/optscan/cli/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Click-based command line interface for OptScan."""

from __future__ import annotations
