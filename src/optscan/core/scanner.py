# topmark:header:start
#
#   project      : OptScan
#   file         : scanner.py
#   file_relpath : src/optscan/core/scanner.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Scan a token sequence against a spec table.

Rules, applied left to right:

- ``--`` stops option parsing for the rest of the sequence and is not stored;
- a token starting with ``-`` (before the stop marker) names an option. A
  flag records ``"1"``; a value option consumes the next token whole, whatever
  its shape;
- any other token is appended to the positional arguments.

The scanner *returns* the first error instead of raising it. Writes made
before the failing token stay in the store: a scan is not atomic.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from optscan.config.logging import get_logger
from optscan.constants import FLAG_SENTINEL, OPTION_PREFIX, STOP_MARKER
from optscan.core.errors import MissingValueError, UnknownOptionError

if TYPE_CHECKING:
    from collections.abc import Sequence

    from optscan.config.logging import OptscanLogger
    from optscan.core.errors import ParseError
    from optscan.core.store import ValueStore

logger: OptscanLogger = get_logger(__name__)


def is_option_token(token: str) -> bool:
    """Return True if ``token`` is shaped like an option (starts with a dash)."""
    return token.startswith(OPTION_PREFIX)


class ArgumentScanner:
    """Consume token sequences into a `ValueStore`.

    The same scanner instance serves the command line and the config file, so
    both sources follow identical rules.
    """

    def __init__(self, store: ValueStore) -> None:
        self.store = store

    def scan(self, tokens: Sequence[str], *, source: str = "argv") -> ParseError | None:
        """Scan ``tokens`` into the store.

        Args:
            tokens (Sequence[str]): Tokens to scan.
            source (str): Label of the token source, for logging only.

        Returns:
            ParseError | None: The first error encountered, or None on success.
        """
        store = self.store
        table = store.table
        stop_parsing = False
        n = 0
        while n < len(tokens):
            token = tokens[n]
            n += 1
            if token == STOP_MARKER:
                logger.trace("[%s] stop marker; remaining tokens are positional", source)
                stop_parsing = True
                continue
            if stop_parsing or not is_option_token(token):
                logger.trace("[%s] positional %r", source, token)
                store.append_positional(token)
                continue

            name = token[len(OPTION_PREFIX) :]
            spec = table.lookup(name)
            if spec is None:
                logger.debug("[%s] unknown option %r", source, token)
                return UnknownOptionError(name)
            if spec.requires_value:
                if n >= len(tokens):
                    logger.debug("[%s] option %r has no value", source, token)
                    return MissingValueError(name)
                value = tokens[n]
                n += 1
                logger.trace("[%s] option -%s = %r", source, spec.name, value)
                store.set(spec.name, value)
            else:
                logger.trace("[%s] flag -%s", source, spec.name)
                store.set(spec.name, FLAG_SENTINEL)
        return None
