# topmark:header:start
#
#   project      : OptScan
#   file         : expander.py
#   file_relpath : src/optscan/core/expander.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Merge arguments from the file named by the ``config`` option.

The file is free-form: line breaks only separate tokens, and quoting follows
[`split_arguments`][optscan.core.tokenize.split_arguments]. Its tokens are
scanned with the same `ArgumentScanner` and into the same store as the
command line, so config values override command-line values of the same
option and config positionals are appended after the command-line ones.

Failing to open the file is an error. A read error after the file was opened
is logged and treated as end of file: the lines read so far are still scanned.
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

from optscan.config.logging import get_logger
from optscan.constants import CONFIG_OPTION
from optscan.core.errors import ConfigFileNotFoundError, MalformedConfigError
from optscan.core.tokenize import split_arguments

if TYPE_CHECKING:
    from optscan.config.logging import OptscanLogger
    from optscan.core.errors import ParseError
    from optscan.core.scanner import ArgumentScanner

logger: OptscanLogger = get_logger(__name__)


def read_config_text(path: Path) -> str:
    """Read ``path`` and join its lines with single spaces.

    Bytes that are not valid UTF-8 are decoded as U+FFFD instead of failing.

    Raises:
        OSError: If the file cannot be opened.
    """
    parts: list[str] = []
    with path.open("r", encoding="utf-8", errors="replace") as fh:
        try:
            for line in fh:
                parts.append(line.rstrip("\r\n"))
        except OSError as exc:
            logger.error("Error reading config file %s: %s", path, exc)
    return " ".join(parts)


class ConfigExpander:
    """Expand the ``config`` option of a scanned store.

    Args:
        scanner (ArgumentScanner): Scanner bound to the store to expand.
        option (str): Name of the option holding the config path.
    """

    def __init__(self, scanner: ArgumentScanner, option: str = CONFIG_OPTION) -> None:
        self.scanner = scanner
        self.option = option

    def expand(self) -> ParseError | None:
        """Scan the config file's tokens into the store, if the option is present.

        Returns:
            ParseError | None: The first error encountered, or None on success
                (including when the option is absent).
        """
        filename = self.scanner.store.get(self.option, None)
        if filename is None:
            return None

        path = Path(filename)
        logger.debug("Reading options from config file %s", path)
        try:
            text = read_config_text(path)
        except OSError as exc:
            logger.debug("Cannot open config file %s: %s", path, exc)
            return ConfigFileNotFoundError(filename, reason=str(exc))

        try:
            tokens = split_arguments(text)
        except ValueError as exc:
            return MalformedConfigError(filename, str(exc))

        logger.debug("Config file %s: %d token(s)", path, len(tokens))
        return self.scanner.scan(tokens, source=filename)
