# topmark:header:start
#
#   project      : OptScan
#   file         : logging.py
#   file_relpath : src/optscan/config/logging.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Diagnostics logging for OptScan, with a TRACE level below DEBUG.

Importing this module registers the ``TRACE`` level name and installs
`OptscanLogger` as the logger class, so every logger obtained through
`get_logger` has a ``trace()`` method. The scanner logs each consumed token at
TRACE; ``OPTSCAN_LOG_LEVEL=TRACE`` shows the full scan on stderr.

Output is colored per level with `yachalk`.
"""

from __future__ import annotations

import logging
import os
import sys
from typing import TYPE_CHECKING, Callable, Final, cast

from yachalk import chalk

from optscan.constants import LOG_LEVEL_ENV

if TYPE_CHECKING:
    from collections.abc import Mapping

TRACE_LEVEL: Final[int] = logging.DEBUG - 5


class OptscanLogger(logging.Logger):
    """Logger with a ``trace()`` method."""

    def trace(
        self,
        msg: object,
        *args: object,
        extra: Mapping[str, object] | None = None,
    ) -> None:
        """Log ``msg % args`` at TRACE level."""
        if self.isEnabledFor(TRACE_LEVEL):
            self._log(TRACE_LEVEL, msg, args, extra=extra, stacklevel=2)


if logging.getLevelName(TRACE_LEVEL) != "TRACE":
    logging.addLevelName(TRACE_LEVEL, "TRACE")

logging.setLoggerClass(OptscanLogger)


LOG_FORMAT = "[%(levelname)s] %(message)s"
DEBUG_LOG_FORMAT = "[%(levelname)s] [%(filename)s:%(lineno)d] [%(funcName)s] %(message)s"

_LEVEL_NAMES: Final[dict[str, int]] = {
    "TRACE": TRACE_LEVEL,
    "DEBUG": logging.DEBUG,
    "INFO": logging.INFO,
    "WARNING": logging.WARNING,
    "WARN": logging.WARNING,
    "ERROR": logging.ERROR,
    "CRITICAL": logging.CRITICAL,
    "FATAL": logging.CRITICAL,
    "NOTSET": logging.NOTSET,
}

# Highest threshold first; a record takes the style of the first threshold it reaches.
_LEVEL_STYLES: Final[tuple[tuple[int, Callable[[str], str]], ...]] = (
    (logging.CRITICAL, chalk.red_bright),
    (logging.ERROR, chalk.red),
    (logging.WARNING, chalk.yellow),
    (logging.INFO, chalk.green),
    (logging.DEBUG, chalk.gray),
    (TRACE_LEVEL, chalk.blue),
)


class ChalkFormatter(logging.Formatter):
    """Formatter that colors the whole formatted record by severity."""

    def format(self, record: logging.LogRecord) -> str:
        """Format ``record`` and wrap it in the color of its level."""
        message = super().format(record)
        for threshold, style in _LEVEL_STYLES:
            if record.levelno >= threshold:
                return style(message)
        return chalk.dim(message)


def resolve_log_level_name(value: str | None) -> int | None:
    """Return the logging level for a level name or number, or None if not recognized.

    Accepts names such as "TRACE", "debug", "Warn" and numeric strings like "10".
    """
    if not value:
        return None
    v = value.strip().upper()
    if v.isdigit():
        return int(v)
    return _LEVEL_NAMES.get(v)


def resolve_env_log_level() -> int | None:
    """Return the level named by ``OPTSCAN_LOG_LEVEL``, or None if unset or unknown."""
    return resolve_log_level_name(os.environ.get(LOG_LEVEL_ENV))


def setup_logging(level: int | None = None) -> None:
    """Send all log records at ``level`` and above to stderr, colored.

    ``level`` defaults to ``OPTSCAN_LOG_LEVEL``, then to CRITICAL. Previously
    installed root handlers are replaced. Records go to stderr so that they
    never mix with JSON written to stdout.
    """
    if level is None:
        level = resolve_env_log_level()
    if level is None:
        level = logging.CRITICAL

    root = logging.getLogger()
    root.setLevel(level)
    for old in root.handlers[:]:
        root.removeHandler(old)

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(ChalkFormatter(LOG_FORMAT if level >= logging.INFO else DEBUG_LOG_FORMAT))
    root.addHandler(handler)


def get_logger(name: str) -> OptscanLogger:
    """Return the `OptscanLogger` called ``name``."""
    return cast("OptscanLogger", logging.getLogger(name))
