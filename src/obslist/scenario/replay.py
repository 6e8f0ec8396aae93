# topmark:header:start
#
#   project      : ObsList
#   file         : replay.py
#   file_relpath : src/obslist/scenario/replay.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Replay a scenario against an ObservableList and record what happened.

[`replay`][obslist.scenario.replay.replay] subscribes one recorder to all three
channels of a fresh [`ObservableList`][obslist.collection.ObservableList], runs
every step and collects one [`StepRecord`][obslist.scenario.replay.StepRecord]
per step. Events fired while a step runs are attributed to that step.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any

from obslist.collection import ObservableList
from obslist.config.logging import get_logger
from obslist.core.events import EventArgs, ItemEventArgs
from obslist.scenario.model import Op

if TYPE_CHECKING:
    from obslist.config.logging import ObsListLogger
    from obslist.scenario.model import Scenario, Step

logger: ObsListLogger = get_logger(__name__)


@dataclass(frozen=True)
class EventRecord:
    """A notification observed during a step.

    Attributes:
        channel (str): ``item_added``, ``item_removed`` or ``cleared``.
        item (Any): The payload item; None for ``cleared``.
    """

    channel: str
    item: Any = None

    def to_dict(self) -> dict[str, Any]:
        """Return a JSON-friendly mapping."""
        if self.channel == "cleared":
            return {"channel": self.channel}
        return {"channel": self.channel, "item": self.item}


@dataclass(frozen=True)
class StepRecord:
    """Outcome of one scenario step.

    Attributes:
        number (int): 1-based step number.
        step (Step): The step that ran.
        removed (bool | None): Return value of ``remove``; None for other ops.
        events (tuple[EventRecord, ...]): Notifications fired by the step, in order.
        count (int): List count after the step.
    """

    number: int
    step: Step
    removed: bool | None
    events: tuple[EventRecord, ...]
    count: int

    def to_dict(self) -> dict[str, Any]:
        """Return a JSON-friendly mapping."""
        data: dict[str, Any] = {"step": self.number, "op": self.step.op.value}
        if self.step.op.takes_item:
            data["item"] = self.step.item
        if self.removed is not None:
            data["removed"] = self.removed
        data["events"] = [e.to_dict() for e in self.events]
        data["count"] = self.count
        return data


@dataclass(frozen=True)
class ReplayResult:
    """Everything recorded while replaying a scenario."""

    name: str
    initial: tuple[Any, ...]
    steps: tuple[StepRecord, ...] = field(default_factory=tuple)
    final_items: list[Any] = field(default_factory=list)

    @property
    def event_count(self) -> int:
        """Total number of notifications fired across all steps."""
        return sum(len(s.events) for s in self.steps)

    def to_dict(self) -> dict[str, Any]:
        """Return a JSON-friendly mapping."""
        return {
            "name": self.name,
            "initial": list(self.initial),
            "steps": [s.to_dict() for s in self.steps],
            "final": list(self.final_items),
        }


class _Recorder:
    """Collects notifications from all channels of one list."""

    def __init__(self) -> None:
        self.events: list[EventRecord] = []

    def on_added(self, sender: object, args: ItemEventArgs[Any]) -> None:
        self.events.append(EventRecord("item_added", args.item))

    def on_removed(self, sender: object, args: ItemEventArgs[Any]) -> None:
        self.events.append(EventRecord("item_removed", args.item))

    def on_cleared(self, sender: object, args: EventArgs) -> None:
        self.events.append(EventRecord("cleared"))

    def drain(self) -> tuple[EventRecord, ...]:
        out = tuple(self.events)
        self.events.clear()
        return out


def _apply(lst: ObservableList[Any], step: Step) -> bool | None:
    if step.op is Op.ADD:
        lst.add(step.item)
        return None
    if step.op is Op.REMOVE:
        return lst.remove(step.item)
    lst.clear()
    return None


def replay(scenario: Scenario) -> ReplayResult:
    """Run ``scenario`` on a fresh list and return the recorded outcome.

    Args:
        scenario (Scenario): The scenario to replay.

    Returns:
        ReplayResult: Per-step records plus the final list content.
    """
    lst: ObservableList[Any] = ObservableList(scenario.initial)
    recorder = _Recorder()
    lst.item_added.subscribe(recorder.on_added)
    lst.item_removed.subscribe(recorder.on_removed)
    lst.cleared.subscribe(recorder.on_cleared)

    records: list[StepRecord] = []
    for number, step in enumerate(scenario.steps, start=1):
        removed = _apply(lst, step)
        record = StepRecord(
            number=number,
            step=step,
            removed=removed,
            events=recorder.drain(),
            count=lst.count,
        )
        logger.debug("step %d %s -> %d event(s)", number, step.describe(), len(record.events))
        records.append(record)

    return ReplayResult(
        name=scenario.name,
        initial=scenario.initial,
        steps=tuple(records),
        final_items=lst.to_list(),
    )
