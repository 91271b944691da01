# topmark:header:start
#
#   project      : YamlCraft
#   file         : cli_types.py
#   file_relpath : src/yamlcraft/cli/cli_types.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Click parameter types used by YamlCraft commands."""

from __future__ import annotations

from enum import Enum
from typing import TYPE_CHECKING, Generic, TypeVar

import click
from click.shell_completion import CompletionItem

if TYPE_CHECKING:

    class _ParamType:
        name: str

else:
    _ParamType = click.ParamType

E = TypeVar("E", bound=Enum)


class EnumChoiceParam(_ParamType, Generic[E]):
    """Choice of an `Enum` member by its (case-insensitive) string value.

    Args:
        enum_cls (type[E]): Enum whose member values are the accepted choices.
    """

    def __init__(self, enum_cls: type[E]) -> None:
        self.enum_cls: type[E] = enum_cls
        self.name = enum_cls.__name__.lower()
        self.members: dict[str, E] = {str(member.value).lower(): member for member in enum_cls}

    @property
    def choices(self) -> list[str]:
        """Accepted values, in declaration order."""
        return list(self.members)

    def convert(
        self,
        value: str | E | None,
        param: click.Parameter | None,
        ctx: click.Context | None,
    ) -> E | None:
        """Return the member named by ``value``.

        Raises:
            click.BadParameter: If ``value`` names no member.
        """
        if value is None or isinstance(value, self.enum_cls):
            return value
        member: E | None = self.members.get(str(value).lower())
        if member is None:
            raise click.BadParameter(
                f"Invalid value '{value}'. Must be one of: {', '.join(self.choices)}",
                param=param,
                ctx=ctx,
            )
        return member

    def shell_complete(
        self,
        ctx: click.Context,
        param: click.Parameter,
        incomplete: str,
    ) -> list[CompletionItem]:
        """Complete the choices starting with ``incomplete``."""
        prefix: str = incomplete.lower()
        return [CompletionItem(choice) for choice in self.choices if choice.startswith(prefix)]
