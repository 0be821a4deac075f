# topmark:header:start
#
#   project      : OptScan
#   file         : numbers.py
#   file_relpath : src/optscan/core/numbers.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Numeric grammars used by the typed accessors.

Python's own ``int()`` and ``float()`` accept more than an option value should
(surrounding whitespace for ints, digit separators such as ``1_000``, non-ASCII
digits, ``inf``). These helpers implement a narrower, explicit grammar:

- integer / long: optional sign followed by ASCII digits, bounded to a signed
  32-bit / 64-bit range;
- double: optional sign, then ``NaN``, ``Infinity``, a decimal number with
  optional fraction and exponent, or a hex number with a binary exponent
  (``0x1.8p1``); numbers take an optional ``f``/``d`` suffix. Surrounding
  whitespace is ignored.

Every parser raises ``ValueError`` on rejection; the store converts it to
`InvalidNumberError`. Defaults go through the matching ``format_*`` helper and
are parsed back with the same grammar as stored values.
"""

from __future__ import annotations

import math
import re
from dataclasses import dataclass
from typing import Callable, Final, Generic, TypeVar

N = TypeVar("N", int, float)

INT32_MIN: Final[int] = -(2**31)
INT32_MAX: Final[int] = 2**31 - 1
INT64_MIN: Final[int] = -(2**63)
INT64_MAX: Final[int] = 2**63 - 1

_INTEGER_RE: Final[re.Pattern[str]] = re.compile(r"[+-]?[0-9]+")
_DOUBLE_RE: Final[re.Pattern[str]] = re.compile(
    r"""
    (?P<sign>[+-]?)
    (?:
        (?P<nan>NaN)
      | (?P<inf>Infinity)
      | (?P<hex>0[xX](?:[0-9a-fA-F]+\.?[0-9a-fA-F]*|\.[0-9a-fA-F]+)[pP][+-]?[0-9]+)[fFdD]?
      | (?P<num>(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?)[fFdD]?
    )
    """,
    re.VERBOSE,
)


def _parse_bounded_int(text: str, lo: int, hi: int) -> int:
    if not _INTEGER_RE.fullmatch(text):
        raise ValueError(f"not an integer: {text!r}")
    value = int(text)
    if value < lo or value > hi:
        raise ValueError(f"integer out of representable range [{lo}, {hi}]: {text!r}")
    return value


def parse_integer(text: str) -> int:
    """Parse a signed 32-bit integer."""
    return _parse_bounded_int(text, INT32_MIN, INT32_MAX)


def parse_long(text: str) -> int:
    """Parse a signed 64-bit integer."""
    return _parse_bounded_int(text, INT64_MIN, INT64_MAX)


def parse_double(text: str) -> float:
    """Parse a double precision floating point number."""
    m = _DOUBLE_RE.fullmatch(text.strip())
    if m is None:
        raise ValueError(f"not a floating point number: {text!r}")
    negative = m.group("sign") == "-"
    if m.group("nan"):
        return math.nan
    if m.group("inf"):
        return -math.inf if negative else math.inf
    hex_text = m.group("hex")
    if hex_text:
        try:
            value = float.fromhex(hex_text)
        except OverflowError:
            value = math.inf
    else:
        value = float(m.group("num"))
    return -value if negative else value


def format_integer(value: int) -> str:
    """Format an integer default for parsing back."""
    return str(value)


def format_double(value: float) -> str:
    """Format a float default in the spelling accepted by `parse_double`."""
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "-Infinity" if value < 0 else "Infinity"
    return repr(float(value))


@dataclass(frozen=True)
class NumberType(Generic[N]):
    """A numeric grammar: how to parse a stored value and format a default.

    Attributes:
        label (str): Human-readable type name used in error messages.
        parse (Callable[[str], N]): Parser raising ValueError on rejection.
        format (Callable[[N], str]): Formatter for defaults.
    """

    label: str
    parse: Callable[[str], N]
    format: Callable[[N], str]


INTEGER: Final[NumberType[int]] = NumberType("integer", parse_integer, format_integer)
LONG: Final[NumberType[int]] = NumberType("long integer", parse_long, format_integer)
DOUBLE: Final[NumberType[float]] = NumberType("float", parse_double, format_double)
