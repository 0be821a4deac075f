# topmark:header:start
#
#   project      : OptScan
#   file         : cli_types.py
#   file_relpath : src/optscan/cli/cli_types.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Custom Click parameter types for the OptScan CLI."""

from __future__ import annotations

from enum import Enum
from typing import TYPE_CHECKING, Generic, Protocol, TypeVar

import click

if TYPE_CHECKING:
    from click.shell_completion import CompletionItem

    class ParamTypeBase(Protocol):
        """Typed base to avoid subclassing Any when Click lacks stubs."""

        name: str

else:
    ParamTypeBase = click.ParamType  # type: ignore[assignment]

E = TypeVar("E", bound=Enum)


class EnumChoiceParam(ParamTypeBase, Generic[E]):
    """Click parameter type mapping a case-insensitive choice to a member of a str-valued Enum.

    Args:
        enum_cls (type[E]): Enum whose member values are the accepted choices.
    """

    def __init__(self, enum_cls: type[E]) -> None:
        self.enum_cls = enum_cls
        self.name = enum_cls.__name__.lower()
        self._by_key: dict[str, E] = {str(m.value).lower(): m for m in enum_cls}
        self.choices: list[str] = [str(m.value) for m in enum_cls]

    def convert(
        self,
        value: str | E | None,
        param: click.Parameter | None,
        ctx: click.Context | None,
    ) -> E | None:
        """Return the enum member for ``value``; members pass through unchanged."""
        if value is None or isinstance(value, self.enum_cls):
            return value
        member = self._by_key.get(str(value).lower())
        if member is None:
            raise click.BadParameter(
                f"Invalid value '{value}'. Must be one of: {', '.join(self.choices)}",
                param=param,
                ctx=ctx,
            )
        return member

    def shell_complete(
        self,
        ctx: click.Context,  # pylint: disable=unused-argument
        param: click.Parameter,  # pylint: disable=unused-argument
        incomplete: str,
    ) -> list[CompletionItem]:
        """Complete choices by prefix (`_OPTSCAN_COMPLETE=bash_source optscan`)."""
        from click.shell_completion import CompletionItem

        prefix = incomplete.lower()
        return [CompletionItem(c) for c in self.choices if c.lower().startswith(prefix)]

    def __repr__(self) -> str:
        return f"EnumChoiceParam({self.enum_cls.__name__})"
