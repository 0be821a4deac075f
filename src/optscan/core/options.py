# topmark:header:start
#
#   project      : OptScan
#   file         : options.py
#   file_relpath : src/optscan/core/options.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Parser for command line options. Options begin with a single ``-`` character.

`Options` ties the pieces together for one command line:

```
UNPARSED --scan argv--> ARGV_PARSED --expand config--> CONFIG_EXPANDED
    \\                        \\
     +--- error ---> FAILED    +--- error ---> FAILED
```

A parser instance is single-use. After an error it stays in ``FAILED`` and
keeps whatever the failing scan wrote before the error.
"""

from __future__ import annotations

from enum import Enum
from typing import TYPE_CHECKING

from optscan.config.logging import get_logger
from optscan.constants import CONFIG_OPTION
from optscan.core.expander import ConfigExpander
from optscan.core.numbers import N
from optscan.core.scanner import ArgumentScanner
from optscan.core.spec import SpecTable
from optscan.core.store import ValueStore

if TYPE_CHECKING:
    from collections.abc import Iterable, Sequence

    from optscan.config.logging import OptscanLogger
    from optscan.core.errors import ParseError
    from optscan.core.numbers import NumberType

logger: OptscanLogger = get_logger(__name__)


class ParserState(str, Enum):
    """Lifecycle state of an `Options` instance."""

    UNPARSED = "unparsed"
    ARGV_PARSED = "argv_parsed"
    CONFIG_EXPANDED = "config_expanded"
    FAILED = "failed"


class Options:
    """Parse options.

    Args:
        args (Sequence[str]): Command line arguments (without the program name).
        specs (Iterable[str] | SpecTable): Allowed options. Names without the
            leading dash; options that need a value have a ``:`` appended. The
            special argument ``--`` stops option parsing: all following
            arguments are positional.

    Raises:
        OptionsError: If ``args`` are not valid according to ``specs``.
        ValueError: If a spec string is malformed.
    """

    def __init__(self, args: Sequence[str], specs: Iterable[str] | SpecTable) -> None:
        table = specs if isinstance(specs, SpecTable) else SpecTable.build(specs)
        self._store = ValueStore(table)
        self._scanner = ArgumentScanner(self._store)
        self._state = ParserState.UNPARSED
        self._advance(self._scanner.scan(args), ParserState.ARGV_PARSED)

    @property
    def state(self) -> ParserState:
        """Return the lifecycle state."""
        return self._state

    @property
    def spec_table(self) -> SpecTable:
        """Return the spec table."""
        return self._store.table

    def _advance(self, error: ParseError | None, next_state: ParserState) -> None:
        if error is not None:
            self._state = ParserState.FAILED
            logger.debug("Parse failed (%s): %s", error.kind.value, error)
            raise error
        self._state = next_state

    def handle_config_option(self) -> None:
        """Read options from the file given with the option ``config``.

        Requires that ``config`` is a declared value option. Does nothing when
        the option is absent.

        Raises:
            OptionsError: If the file cannot be opened or its contents are not
                valid according to the spec table.
        """
        assert self._state is ParserState.ARGV_PARSED, (
            f"handle_config_option() called in state {self._state.value}"
        )
        expander = ConfigExpander(self._scanner, CONFIG_OPTION)
        self._advance(expander.expand(), ParserState.CONFIG_EXPANDED)

    # --- accessors ---

    def contains(self, option: str) -> bool:
        """Check if option is present."""
        return self._store.contains(option)

    def get(self, option: str, default: str = "") -> str:
        """Return the option value, or ``default`` if the option is not present."""
        value = self._store.get(option, default)
        assert value is not None
        return value

    def get_number(
        self,
        option: str,
        number_type: NumberType[N],
        default: N,
        min_value: N | None = None,
        max_value: N | None = None,
    ) -> N:
        """Return a numeric option parsed with ``number_type``; see `ValueStore.get_number`."""
        return self._store.get_number(option, number_type, default, min_value, max_value)

    def get_integer(
        self,
        option: str,
        default: int = 0,
        min_value: int | None = None,
        max_value: int | None = None,
    ) -> int:
        """Return an integer option, with optional inclusive range check.

        Raises:
            InvalidNumberError: If the option value is not an integer.
            OutOfRangeError: If the value is outside ``[min_value, max_value]``.
        """
        return self._store.get_integer(option, default, min_value, max_value)

    def get_long(
        self,
        option: str,
        default: int = 0,
        min_value: int | None = None,
        max_value: int | None = None,
    ) -> int:
        """Return a long integer option, with optional inclusive range check."""
        return self._store.get_long(option, default, min_value, max_value)

    def get_double(
        self,
        option: str,
        default: float = 0.0,
        min_value: float | None = None,
        max_value: float | None = None,
    ) -> float:
        """Return a float option, with optional inclusive range check."""
        return self._store.get_double(option, default, min_value, max_value)

    @property
    def arguments(self) -> list[str]:
        """Return the arguments that are not options, in order."""
        return self._store.positionals

    def check_no_arguments(self) -> None:
        """Check that there are no non-option arguments.

        Raises:
            UnexpectedArgumentsError: If there are any.
        """
        self._store.check_no_arguments()

    def as_dict(self) -> dict[str, str]:
        """Return the resolved options as a name-sorted dict."""
        return self._store.as_dict()

    def __repr__(self) -> str:
        return (
            f"Options(state={self._state.value}, options={self.as_dict()!r}, "
            f"arguments={self.arguments!r})"
        )


def parse_options(args: Sequence[str], specs: Iterable[str] | SpecTable) -> Options:
    """Create an `Options` from a command line and expand its ``config`` option.

    The expansion step runs only when ``config:`` is declared as a value option.

    Args:
        args (Sequence[str]): Command line arguments.
        specs (Iterable[str] | SpecTable): Allowed options, as for `Options`.

    Returns:
        Options: The parsed options.

    Raises:
        OptionsError: If options are not valid according to specs.
    """
    opts = Options(args, specs)
    config_spec = opts.spec_table.lookup(CONFIG_OPTION)
    if config_spec is not None and config_spec.requires_value:
        opts.handle_config_option()
    return opts
