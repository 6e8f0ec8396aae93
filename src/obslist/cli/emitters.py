# topmark:header:start
#
#   project      : ObsList
#   file         : emitters.py
#   file_relpath : src/obslist/cli/emitters.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Render replay results in every supported `OutputFormat`.

Each ``render_*`` function returns the complete output as a string; the
command decides where to print it. Machine formats never contain ANSI styling.

NDJSON layout: one ``{"kind": "step", ...}`` object per step followed by a
single ``{"kind": "summary", ...}`` object.
"""

from __future__ import annotations

import json
from typing import TYPE_CHECKING, Any

from obslist.core.formats import OutputFormat

if TYPE_CHECKING:
    from obslist.cli.console import ConsoleLike
    from obslist.scenario.replay import EventRecord, ReplayResult, StepRecord


def _dumps(data: Any) -> str:
    # TOML dates/times are not JSON-native; render them as strings.
    return json.dumps(data, default=str, ensure_ascii=False)


def _event_text(event: EventRecord) -> str:
    if event.channel == "cleared":
        return "cleared"
    return f"{event.channel}({event.item!r})"


def _step_text(record: StepRecord) -> str:
    text = f"{record.number:>3}. {record.step.describe()}"
    if record.removed is not None:
        text += f" -> {record.removed}"
    return text


def render_text(result: ReplayResult, console: ConsoleLike, *, verbosity: int = 0) -> str:
    """Render a human-readable report.

    Verbosity:
        - ``< 0``: final contents only.
        - ``0``: one line per step plus a summary.
        - ``> 0``: additionally lists every fired event under its step.
    """
    if verbosity < 0:
        return _dumps(result.final_items)

    lines: list[str] = []
    lines.append(console.styled(f"Scenario: {result.name}", bold=True))
    lines.append(f"initial: {list(result.initial)!r}")
    for record in result.steps:
        events = ", ".join(_event_text(e) for e in record.events) or "no events"
        line = f"{_step_text(record)}  [{events}]  count={record.count}"
        lines.append(line if record.events else console.styled(line, dim=True))
        if verbosity > 0:
            for event in record.events:
                lines.append(f"       - {_event_text(event)}")
    lines.append(
        console.styled(
            f"{len(result.steps)} step(s), {result.event_count} event(s); "
            f"final: {result.final_items!r}",
            fg="green",
        )
    )
    return "\n".join(lines)


def render_markdown(result: ReplayResult) -> str:
    """Render a Markdown document with a table of steps."""
    lines: list[str] = [
        f"# Scenario `{result.name}`",
        "",
        f"Initial contents: `{list(result.initial)!r}`",
        "",
        "| # | operation | result | events | count |",
        "|---|-----------|--------|--------|-------|",
    ]
    for record in result.steps:
        removed = "" if record.removed is None else str(record.removed)
        events = ", ".join(f"`{_event_text(e)}`" for e in record.events) or "-"
        lines.append(
            f"| {record.number} | `{record.step.describe()}` | {removed} | {events} "
            f"| {record.count} |"
        )
    lines += ["", f"Final contents: `{result.final_items!r}`"]
    return "\n".join(lines)


def render_json(result: ReplayResult) -> str:
    """Render the whole result as a single JSON document."""
    return _dumps(result.to_dict())


def render_ndjson(result: ReplayResult) -> str:
    """Render one JSON object per step followed by a summary object."""
    lines = [_dumps({"kind": "step", **record.to_dict()}) for record in result.steps]
    lines.append(
        _dumps(
            {
                "kind": "summary",
                "name": result.name,
                "steps": len(result.steps),
                "events": result.event_count,
                "final": result.final_items,
            }
        )
    )
    return "\n".join(lines)


def render_replay(
    result: ReplayResult,
    fmt: OutputFormat,
    console: ConsoleLike,
    *,
    verbosity: int = 0,
) -> str:
    """Dispatch to the renderer for ``fmt``."""
    if fmt == OutputFormat.JSON:
        return render_json(result)
    if fmt == OutputFormat.NDJSON:
        return render_ndjson(result)
    if fmt == OutputFormat.MARKDOWN:
        return render_markdown(result)
    return render_text(result, console, verbosity=verbosity)
