# topmark:header:start
#
#   project      : ObsList
#   file         : model.py
#   file_relpath : src/obslist/scenario/model.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Immutable scenario model."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any


class Op(str, Enum):
    """Operations a scenario step can perform."""

    ADD = "add"
    REMOVE = "remove"
    CLEAR = "clear"

    @property
    def takes_item(self) -> bool:
        """True if the operation requires an ``item`` argument."""
        return self is not Op.CLEAR


@dataclass(frozen=True)
class Step:
    """A single scenario step.

    Attributes:
        op (Op): The operation to perform.
        item (Any): The operand for ``add`` / ``remove``; None for ``clear``.
    """

    op: Op
    item: Any = None

    def describe(self) -> str:
        """Return a short human-readable form, e.g. ``add(5)`` or ``clear()``."""
        return f"{self.op.value}({self.item!r})" if self.op.takes_item else f"{self.op.value}()"


@dataclass(frozen=True)
class Scenario:
    """A named sequence of steps applied to a list with the given initial content."""

    name: str
    initial: tuple[Any, ...] = ()
    steps: tuple[Step, ...] = field(default_factory=tuple)
