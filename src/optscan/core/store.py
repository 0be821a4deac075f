# topmark:header:start
#
#   project      : OptScan
#   file         : store.py
#   file_relpath : src/optscan/core/store.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Resolved option values, positional arguments, and the typed accessors.

Overwrite policy: `ValueStore.set` is last-write-wins. A later occurrence of an
option replaces the earlier value; values are never accumulated. Positional
arguments are append-only and keep their order and duplicates across scans.

Accessors assert that the queried name is registered in the spec table.
Querying an undeclared option is a programming error (`AssertionError`), not
a user error; user errors are raised as `OptionsError` subclasses.
"""

from __future__ import annotations

import math
from typing import TYPE_CHECKING

from optscan.config.logging import get_logger
from optscan.core.errors import InvalidNumberError, OutOfRangeError, UnexpectedArgumentsError
from optscan.core.numbers import DOUBLE, INTEGER, LONG, N, NumberType

if TYPE_CHECKING:
    from optscan.config.logging import OptscanLogger
    from optscan.core.spec import SpecTable

logger: OptscanLogger = get_logger(__name__)


class ValueStore:
    """Per-parser store of resolved option values and positional arguments.

    Args:
        table (SpecTable): The spec table the stored keys belong to.
    """

    def __init__(self, table: SpecTable) -> None:
        self.table = table
        self._values: dict[str, str] = {}
        self._positionals: list[str] = []

    # --- mutation (used by the scanner) ---

    def set(self, name: str, value: str) -> None:
        """Record ``value`` for option ``name``, replacing any earlier value."""
        assert self.table.is_registered(name), f"option {name!r} is not registered"
        previous = self._values.get(name)
        if previous is not None and previous != value:
            logger.debug("Option -%s: %r overrides %r", name, value, previous)
        self._values[name] = value

    def append_positional(self, token: str) -> None:
        """Append a positional argument."""
        self._positionals.append(token)

    # --- queries ---

    def get(self, name: str, default: str | None = "") -> str | None:
        """Return the value of option ``name`` or ``default`` if it is absent."""
        assert self.table.is_registered(name), f"option {name!r} is not registered"
        return self._values.get(name, default)

    def contains(self, name: str) -> bool:
        """Return True if option ``name`` is present (flags included)."""
        return self.get(name, None) is not None

    @property
    def positionals(self) -> list[str]:
        """Return a copy of the positional arguments, in order."""
        return list(self._positionals)

    def as_dict(self) -> dict[str, str]:
        """Return a snapshot of the resolved options, sorted by option name."""
        return dict(sorted(self._values.items()))

    def check_no_arguments(self) -> None:
        """Raise `UnexpectedArgumentsError` if any positional argument was given."""
        if self._positionals:
            raise UnexpectedArgumentsError(self._positionals)

    # --- typed accessors ---

    def get_number(
        self,
        name: str,
        number_type: NumberType[N],
        default: N,
        min_value: N | None = None,
        max_value: N | None = None,
    ) -> N:
        """Parse option ``name`` (or ``default``) with ``number_type`` and check its bounds.

        The default is formatted to text and parsed back, so it follows exactly
        the same path as a value given on the command line. Bounds apply to the
        result whatever its source.

        Args:
            name (str): Option name.
            number_type (NumberType[N]): Grammar used to parse and format.
            default (N): Value used when the option is absent.
            min_value (N | None): Inclusive lower bound, if any.
            max_value (N | None): Inclusive upper bound, if any.

        Returns:
            N: The parsed value.

        Raises:
            InvalidNumberError: If the text does not match the grammar.
            OutOfRangeError: If the value violates a bound.
        """
        raw = self.get(name, number_type.format(default))
        assert raw is not None
        try:
            value = number_type.parse(raw)
        except ValueError as exc:
            logger.debug("Option -%s: %s", name, exc)
            raise InvalidNumberError(name, raw, number_type.label) from exc
        bounded = min_value is not None or max_value is not None
        if (
            (bounded and math.isnan(value))
            or (min_value is not None and value < min_value)
            or (max_value is not None and value > max_value)
        ):
            raise OutOfRangeError(name, value, min_value, max_value)
        return value

    def get_integer(
        self,
        name: str,
        default: int = 0,
        min_value: int | None = None,
        max_value: int | None = None,
    ) -> int:
        """Return option ``name`` as a 32-bit integer."""
        return self.get_number(name, INTEGER, default, min_value, max_value)

    def get_long(
        self,
        name: str,
        default: int = 0,
        min_value: int | None = None,
        max_value: int | None = None,
    ) -> int:
        """Return option ``name`` as a 64-bit integer."""
        return self.get_number(name, LONG, default, min_value, max_value)

    def get_double(
        self,
        name: str,
        default: float = 0.0,
        min_value: float | None = None,
        max_value: float | None = None,
    ) -> float:
        """Return option ``name`` as a float."""
        return self.get_number(name, DOUBLE, default, min_value, max_value)
