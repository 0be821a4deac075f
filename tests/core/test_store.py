# topmark:header:start
#
#   project      : OptScan
#   file         : test_store.py
#   file_relpath : tests/core/test_store.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tests for the value store and its typed accessors."""

from __future__ import annotations

import math

import pytest

from optscan.core.errors import (
    ErrorKind,
    InvalidNumberError,
    OutOfRangeError,
    UnexpectedArgumentsError,
)
from optscan.core.spec import SpecTable
from optscan.core.store import ValueStore
from tests.conftest import parametrize


def make_store(values: dict[str, str] | None = None, positionals: list[str] | None = None) -> ValueStore:
    """Return a store over a fixed table, pre-filled with ``values`` and ``positionals``."""
    store = ValueStore(SpecTable.build(["n:", "big:", "ratio:", "name:", "flag"]))
    for k, v in (values or {}).items():
        store.set(k, v)
    for p in positionals or []:
        store.append_positional(p)
    return store


def test_get_returns_default_when_absent() -> None:
    """Absent options return the default ('' unless given)."""
    store = make_store()
    assert store.get("name") == ""
    assert store.get("name", "anon") == "anon"
    assert store.get("name", None) is None
    assert not store.contains("name")


def test_contains_includes_flag_sentinel() -> None:
    """A flag counts as present."""
    store = make_store({"flag": "1"})
    assert store.contains("flag")
    assert store.get("flag") == "1"


def test_accessors_assert_registered_name() -> None:
    """Querying an undeclared option is a programming error."""
    store = make_store()
    with pytest.raises(AssertionError):
        store.get("nosuch")
    with pytest.raises(AssertionError):
        store.contains("nosuch")
    with pytest.raises(AssertionError):
        store.get_integer("nosuch")


def test_set_asserts_registered_name() -> None:
    """Only declared options can be stored."""
    with pytest.raises(AssertionError):
        make_store().set("nosuch", "1")


def test_get_integer_default_and_range() -> None:
    """Absent option returns the default; present values are parsed and range-checked."""
    assert make_store().get_integer("n", 5, 0, 10) == 5
    assert make_store({"n": "7"}).get_integer("n", 5, 0, 10) == 7

    with pytest.raises(OutOfRangeError) as excinfo:
        make_store({"n": "15"}).get_integer("n", 5, 0, 10)
    err = excinfo.value
    assert err.kind is ErrorKind.OUT_OF_RANGE
    assert (err.option, err.value, err.min_value, err.max_value) == ("n", 15, 0, 10)
    assert str(err) == "Option -n must be in [0..10]"

    with pytest.raises(InvalidNumberError) as excinfo2:
        make_store({"n": "abc"}).get_integer("n", 5, 0, 10)
    assert excinfo2.value.kind is ErrorKind.INVALID_NUMBER
    assert excinfo2.value.value == "abc"
    assert str(excinfo2.value) == "Option -n needs integer value"


def test_range_bounds_are_inclusive() -> None:
    """Values equal to a bound are accepted."""
    assert make_store({"n": "0"}).get_integer("n", 5, 0, 10) == 0
    assert make_store({"n": "10"}).get_integer("n", 5, 0, 10) == 10


def test_min_only_bound() -> None:
    """A lower bound alone rejects smaller values only."""
    assert make_store({"n": "1000"}).get_integer("n", 0, 1) == 1000
    with pytest.raises(OutOfRangeError) as excinfo:
        make_store({"n": "0"}).get_integer("n", 5, 1)
    assert excinfo.value.max_value is None
    assert str(excinfo.value) == "Option -n must be at least 1"


def test_max_only_bound() -> None:
    """An upper bound alone rejects larger values only."""
    with pytest.raises(OutOfRangeError) as excinfo:
        make_store({"n": "11"}).get_integer("n", 0, max_value=10)
    assert str(excinfo.value) == "Option -n must be at most 10"


def test_default_is_range_checked_like_a_given_value() -> None:
    """The default goes through the same bound check as a stored value."""
    with pytest.raises(OutOfRangeError):
        make_store().get_integer("n", 50, 0, 10)


def test_flag_value_parses_as_integer_one() -> None:
    """The flag sentinel reads as 1 through the integer accessor."""
    store = ValueStore(SpecTable.build(["verbose"]))
    store.set("verbose", "1")
    assert store.get_integer("verbose") == 1


def test_get_integer_rejects_int32_overflow_but_get_long_accepts() -> None:
    """Integer and long differ only in width."""
    store = make_store({"big": "4294967296"})
    with pytest.raises(InvalidNumberError):
        store.get_integer("big")
    assert store.get_long("big") == 4294967296

    with pytest.raises(InvalidNumberError) as excinfo:
        make_store({"big": "x"}).get_long("big")
    assert str(excinfo.value) == "Option -big needs long integer value"


def test_get_integer_default_outside_int32_is_invalid() -> None:
    """A default that cannot be parsed back by the integer grammar is reported."""
    with pytest.raises(InvalidNumberError) as excinfo:
        make_store().get_integer("n", 2**40)
    assert excinfo.value.value == str(2**40)


@parametrize(
    "stored, expected",
    [("0.5", 0.5), ("-1e2", -100.0), ("3", 3.0), ("2.5f", 2.5), ("Infinity", math.inf)],
)
def test_get_double_values(stored: str, expected: float) -> None:
    """Stored double values are parsed with the double grammar."""
    assert make_store({"ratio": stored}).get_double("ratio") == expected


def test_get_double_default_roundtrips() -> None:
    """Float defaults, including infinities, come back unchanged."""
    store = make_store()
    assert store.get_double("ratio", 0.1) == 0.1
    assert store.get_double("ratio", 5) == 5.0
    assert store.get_double("ratio", -math.inf) == -math.inf
    assert math.isnan(store.get_double("ratio", math.nan))


def test_get_double_range_and_invalid() -> None:
    """Double values support bounds and reject non-numbers."""
    with pytest.raises(OutOfRangeError):
        make_store({"ratio": "1.5"}).get_double("ratio", 0.0, 0.0, 1.0)
    with pytest.raises(InvalidNumberError) as excinfo:
        make_store({"ratio": "half"}).get_double("ratio")
    assert str(excinfo.value) == "Option -ratio needs float value"


def test_check_no_arguments() -> None:
    """Passes on empty positionals; otherwise raises without touching the store."""
    make_store({"n": "1"}).check_no_arguments()

    store = make_store({"n": "1"}, ["a", "b"])
    with pytest.raises(UnexpectedArgumentsError) as excinfo:
        store.check_no_arguments()
    assert excinfo.value.kind is ErrorKind.UNEXPECTED_ARGUMENTS
    assert excinfo.value.arguments == ["a", "b"]
    assert store.positionals == ["a", "b"]
    assert store.as_dict() == {"n": "1"}


def test_positionals_returns_a_copy() -> None:
    """Mutating the returned list does not change the store."""
    store = make_store(positionals=["a"])
    store.positionals.append("b")
    assert store.positionals == ["a"]


def test_as_dict_is_sorted_snapshot() -> None:
    """as_dict returns the resolved options sorted by name."""
    store = make_store({"name": "x", "flag": "1", "n": "2"})
    assert list(store.as_dict()) == ["flag", "n", "name"]


@parametrize(
    "bounds",
    [(0.0, 1.0), (0.0, None), (None, 1.0)],
)
def test_nan_violates_any_bound(bounds: tuple[float | None, float | None]) -> None:
    """NaN compares false against every bound, so it is rejected explicitly."""
    min_value, max_value = bounds
    with pytest.raises(OutOfRangeError) as excinfo:
        make_store({"ratio": "NaN"}).get_double("ratio", 0.5, min_value, max_value)
    assert math.isnan(excinfo.value.value)


def test_nan_default_violates_bounds() -> None:
    """A NaN default is range-checked like a stored NaN."""
    with pytest.raises(OutOfRangeError):
        make_store().get_double("ratio", math.nan, 0.0, 1.0)


def test_nan_without_bounds_is_returned() -> None:
    """Without bounds NaN is a valid double."""
    assert math.isnan(make_store({"ratio": "NaN"}).get_double("ratio"))
