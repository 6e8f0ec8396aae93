# topmark:header:start
#
#   project      : ObsList
#   file         : main.py
#   file_relpath : src/obslist/cli/main.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""ObsList Click CLI.

Group-level options (verbosity, color) are initialized once and placed into
``ctx.obj``; subcommands read the console and verbosity from there.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from obslist.cli.color import ColorMode, resolve_color_mode
from obslist.cli.commands.replay import replay_command
from obslist.cli.commands.version import version_command
from obslist.cli.console import ClickConsole
from obslist.cli.options import common_color_options, common_verbose_options, resolve_verbosity
from obslist.config.logging import get_logger, resolve_env_log_level, setup_logging

if TYPE_CHECKING:
    from obslist.cli.console import ConsoleLike
    from obslist.config.logging import ObsListLogger

logger: ObsListLogger = get_logger(__name__)


def init_common_state(
    ctx: click.Context,
    *,
    verbose: int,
    quiet: int,
    color_mode: ColorMode | None,
    no_color: bool,
) -> None:
    """Initialize shared state (verbosity, logging & color) on the Click context.

    Args:
        ctx (click.Context): Current Click context; will have ``obj`` and ``color`` set.
        verbose (int): Count of ``-v`` flags.
        quiet (int): Count of ``-q`` flags.
        color_mode (ColorMode | None): Explicit color mode from ``--color`` (or ``None``).
        no_color (bool): Whether ``--no-color`` was passed; forces color off.
    """
    ctx.obj = ctx.obj or {}

    ctx.obj["verbosity_level"] = resolve_verbosity(verbose, quiet)

    # Internal logging is configured via env only:
    level_env = resolve_env_log_level()
    ctx.obj["log_level"] = level_env
    setup_logging(level=level_env)

    effective_color_mode = ColorMode.NEVER if no_color else color_mode
    enable_color = resolve_color_mode(
        color_mode_override=effective_color_mode,
        output_format=None,
    )
    ctx.obj["color_enabled"] = enable_color
    ctx.color = enable_color

    ctx.obj["console"] = ClickConsole(enable_color=enable_color)


@click.group(
    cls=click.Group,
    context_settings={"help_option_names": ["-h", "--help"]},
    invoke_without_command=True,
    help="ObsList CLI",
)
@common_verbose_options
@common_color_options
@click.pass_context
def cli(
    ctx: click.Context,
    verbose: int,
    quiet: int,
    color_mode: ColorMode | None,
    no_color: bool,
) -> None:
    """Entry point for the ObsList CLI."""
    init_common_state(
        ctx,
        verbose=verbose,
        quiet=quiet,
        color_mode=color_mode,
        no_color=no_color,
    )
    console: ConsoleLike = ctx.obj["console"]

    if ctx.invoked_subcommand is None:
        console.print("Hint: use 'obslist replay SCENARIO' to replay a scenario file.")
        console.print()
        console.print(ctx.get_help())


cli.add_command(replay_command)

cli.add_command(version_command)

if __name__ == "__main__":
    cli()
