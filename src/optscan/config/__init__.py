# topmark:header:start
#
#   project      : OptScan
#   file         : __init__.py
#   file_relpath : src/optscan/config/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Ambient configuration for OptScan: logging setup and spec definition files."""

from __future__ import annotations
