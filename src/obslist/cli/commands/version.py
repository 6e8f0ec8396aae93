# topmark:header:start
#
#   project      : ObsList
#   file         : version.py
#   file_relpath : src/obslist/cli/commands/version.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""ObsList `version` command.

Prints the current ObsList version as installed in the active Python environment.
"""

from __future__ import annotations

import json
from typing import TYPE_CHECKING

import click

from obslist.cli.options import output_format_option
from obslist.constants import OBSLIST_VERSION
from obslist.core.formats import OutputFormat

if TYPE_CHECKING:
    from obslist.cli.console import ConsoleLike


@click.command(
    name="version",
    help="Show the current version of ObsList.",
)
@output_format_option
def version_command(*, output_format: OutputFormat | None = None) -> None:
    """Show the current version of ObsList.

    Args:
        output_format (OutputFormat | None): Optional output format.
    """
    ctx = click.get_current_context()
    ctx.ensure_object(dict)
    console: ConsoleLike = ctx.obj["console"]
    vlevel: int = int(ctx.obj.get("verbosity_level", 0))

    fmt: OutputFormat = output_format or OutputFormat.TEXT
    if fmt in (OutputFormat.JSON, OutputFormat.NDJSON):
        console.print(json.dumps({"version": OBSLIST_VERSION}))
    elif fmt == OutputFormat.MARKDOWN:
        console.print("# ObsList Version\n")
        console.print(f"**ObsList version: {OBSLIST_VERSION}**")
    elif vlevel > 0:
        console.print(console.styled("ObsList version:\n", bold=True, underline=True))
        console.print(f"    {console.styled(OBSLIST_VERSION, bold=True)}")
    else:
        console.print(console.styled(OBSLIST_VERSION, bold=True))
