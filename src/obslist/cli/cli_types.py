# topmark:header:start
#
#   project      : ObsList
#   file         : cli_types.py
#   file_relpath : src/obslist/cli/cli_types.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Click parameter type mapping option strings onto enum members."""

from __future__ import annotations

from enum import Enum
from typing import Any, Generic, TypeVar

import click

E = TypeVar("E", bound=Enum)


class EnumChoiceParam(click.ParamType, Generic[E]):
    """Accept the ``value`` of any member of ``enum_cls``, ignoring case.

    Used for ``--format`` and ``--color`` so that commands receive
    `OutputFormat` / `ColorMode` members instead of raw strings.
    """

    def __init__(self, enum_cls: type[E]) -> None:
        self.enum_cls = enum_cls
        self.name = enum_cls.__name__.lower()
        self._by_value: dict[str, E] = {str(m.value).lower(): m for m in enum_cls}

    def convert(
        self,
        value: Any,
        param: click.Parameter | None,
        ctx: click.Context | None,
    ) -> E | None:
        """Return the member whose value matches ``value``; fail on anything else."""
        if value is None or isinstance(value, self.enum_cls):
            return value
        member = self._by_value.get(str(value).lower())
        if member is None:
            self.fail(
                f"Invalid value '{value}'. Must be one of: {', '.join(self._by_value)}",
                param,
                ctx,
            )
        return member
