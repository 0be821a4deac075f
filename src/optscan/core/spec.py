# topmark:header:start
#
#   project      : OptScan
#   file         : spec.py
#   file_relpath : src/optscan/core/spec.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Option specifications and the spec table.

A spec string is either ``name`` (a flag) or ``name:`` (an option that
requires a value). The trailing marker is stripped for storage: the *canonical
key* of an option is its bare name, whatever marker it was declared with.

Registration policy for a name declared both as flag and as value option:
both entries are kept and the **flag declaration wins** resolution (the value
declaration is shadowed). A warning is logged when the table is built.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from optscan.config.logging import get_logger
from optscan.constants import OPTION_PREFIX, VALUE_MARKER
from optscan.core.errors import UnknownOptionError

if TYPE_CHECKING:
    from collections.abc import Iterable, Iterator

    from optscan.config.logging import OptscanLogger

logger: OptscanLogger = get_logger(__name__)


@dataclass(frozen=True)
class OptionSpec:
    """Declaration of an allowed option.

    Attributes:
        name (str): Option name without the leading dash.
        requires_value (bool): Whether the option consumes the following token as its value.
    """

    name: str
    requires_value: bool = False

    @classmethod
    def from_string(cls, spec: str) -> OptionSpec:
        """Build an `OptionSpec` from its string form (``name`` or ``name:``).

        Raises:
            ValueError: If the name is empty or starts with a dash. This is a
                programming error in the caller's spec list, not a user error.
        """
        requires_value = spec.endswith(VALUE_MARKER)
        name = spec[: -len(VALUE_MARKER)] if requires_value else spec
        if not name:
            raise ValueError(f"Invalid option spec {spec!r}: empty option name")
        if name.startswith(OPTION_PREFIX):
            raise ValueError(f"Invalid option spec {spec!r}: name must not start with '-'")
        return cls(name=name, requires_value=requires_value)

    def __str__(self) -> str:
        return f"{self.name}{VALUE_MARKER}" if self.requires_value else self.name


class SpecTable:
    """Immutable set of option specifications, keyed by canonical option name."""

    def __init__(self, specs: Iterable[OptionSpec]) -> None:
        flags: dict[str, OptionSpec] = {}
        valued: dict[str, OptionSpec] = {}
        for spec in specs:
            (valued if spec.requires_value else flags)[spec.name] = spec
        self._flags = flags
        self._valued = valued

        for name in sorted(flags.keys() & valued.keys()):
            logger.warning(
                "Option %r is declared both as flag and as value option; the flag wins", name
            )

    @classmethod
    def build(cls, specs: Iterable[str]) -> SpecTable:
        """Build a table from spec strings, ignoring empty strings.

        Args:
            specs (Iterable[str]): Spec strings such as ``"quiet"`` or ``"size:"``.

        Returns:
            SpecTable: The table of declared options.
        """
        table = cls(OptionSpec.from_string(s) for s in specs if s)
        logger.debug("Built spec table: %s", ", ".join(str(s) for s in table))
        return table

    def resolve(self, raw_name: str) -> OptionSpec:
        """Return the spec registered for ``raw_name``.

        Raises:
            UnknownOptionError: If no spec is registered under that name.
        """
        spec = self.lookup(raw_name)
        if spec is None:
            raise UnknownOptionError(raw_name)
        return spec

    def lookup(self, raw_name: str) -> OptionSpec | None:
        """Return the spec registered for ``raw_name`` or None."""
        return self._flags.get(raw_name) or self._valued.get(raw_name)

    def is_registered(self, name: str) -> bool:
        """Return True if ``name`` is declared, as flag or as value option."""
        return name in self._flags or name in self._valued

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and self.is_registered(name)

    def __iter__(self) -> Iterator[OptionSpec]:
        yield from self._flags.values()
        yield from self._valued.values()

    def __len__(self) -> int:
        return len(self._flags) + len(self._valued)

    def __repr__(self) -> str:
        return f"SpecTable([{', '.join(repr(str(s)) for s in self)}])"
