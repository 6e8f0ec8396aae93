# topmark:header:start
#
#   project      : ObsList
#   file         : replay.py
#   file_relpath : src/obslist/cli/commands/replay.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""ObsList `replay` command.

Replays a scenario TOML file (or STDIN with ``-``) against a fresh
ObservableList and prints every step with the notifications it fired.
"""

from __future__ import annotations

import sys
from pathlib import Path
from typing import TYPE_CHECKING

import click

from obslist.cli.emitters import render_replay
from obslist.cli.errors import (
    ObsListEncodingError,
    ObsListFileNotFoundError,
    ObsListIOError,
    ObsListScenarioError,
)
from obslist.cli.options import output_format_option
from obslist.config.logging import get_logger
from obslist.core.errors import ScenarioError
from obslist.core.formats import OutputFormat, is_machine_format
from obslist.scenario import load_scenario, load_scenario_text, replay

if TYPE_CHECKING:
    from obslist.cli.console import ConsoleLike
    from obslist.config.logging import ObsListLogger
    from obslist.scenario import Scenario

logger: ObsListLogger = get_logger(__name__)


def _load(source: str) -> Scenario:
    if source == "-":
        try:
            text = sys.stdin.read()
        except UnicodeDecodeError as exc:
            raise ObsListEncodingError(f"Scenario on STDIN is not valid UTF-8: {exc}") from exc
        return load_scenario_text(text, default_name="stdin")

    path = Path(source)
    if not path.exists():
        raise ObsListFileNotFoundError(f"Scenario file not found: {source}")
    try:
        return load_scenario(path)
    except UnicodeDecodeError as exc:
        raise ObsListEncodingError(f"Scenario file {source} is not valid UTF-8: {exc}") from exc
    except OSError as exc:
        raise ObsListIOError(f"Cannot read scenario file {source}: {exc}") from exc


@click.command(
    name="replay",
    help="Replay a scenario file against an ObservableList and show the fired events.",
)
@click.argument("source", metavar="SCENARIO", type=str)
@output_format_option
def replay_command(
    *,
    source: str,
    output_format: OutputFormat | None = None,
) -> None:
    """Replay ``SCENARIO`` (a TOML file, or ``-`` for STDIN).

    Args:
        source (str): Scenario path or ``-``.
        output_format (OutputFormat | None): Output format (text by default).
    """
    ctx = click.get_current_context()
    ctx.ensure_object(dict)
    console: ConsoleLike = ctx.obj["console"]
    vlevel: int = int(ctx.obj.get("verbosity_level", 0))
    fmt: OutputFormat = output_format or OutputFormat.TEXT

    try:
        scenario = _load(source)
    except ScenarioError as exc:
        raise ObsListScenarioError(f"Invalid scenario {source}: {exc}") from exc

    result = replay(scenario)
    logger.info(
        "replayed %r: %d step(s), %d event(s)",
        result.name,
        len(result.steps),
        result.event_count,
    )

    if is_machine_format(fmt):
        # Bypass styling entirely.
        click.echo(render_replay(result, fmt, console), color=False)
    else:
        console.print(render_replay(result, fmt, console, verbosity=vlevel))
