# topmark:header:start
#
#   project      : OptScan
#   file         : __main__.py
#   file_relpath : src/optscan/__main__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Module entry point for running OptScan via ``python -m optscan``.

Delegates to :func:`optscan.cli.main.cli`, the same entry point as the
``optscan`` console script.

Examples:
    Parse a command line against two specs::

        python -m optscan parse --spec size: --spec quiet -- -size 9 -quiet
"""

from __future__ import annotations

from optscan.cli.main import cli

if __name__ == "__main__":
    cli()
