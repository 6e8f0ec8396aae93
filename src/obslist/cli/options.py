# topmark:header:start
#
#   project      : ObsList
#   file         : options.py
#   file_relpath : src/obslist/cli/options.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Common CLI option utilities for ObsList.

This module centralizes reusable options (verbosity, color, output format) and
their resolution logic, so commands and groups can stay thin.
"""

from __future__ import annotations

from typing import Callable, ParamSpec, TypeVar

import click

from obslist.cli.cli_types import EnumChoiceParam
from obslist.cli.color import ColorMode
from obslist.cli.errors import ObsListUsageError
from obslist.core.formats import OutputFormat

P = ParamSpec("P")
R = TypeVar("R")


def resolve_verbosity(verbose_count: int, quiet_count: int) -> int:
    """Resolve program-output verbosity from ``-v`` / ``-q`` counts.

    Args:
        verbose_count: Number of times ``-v`` was passed.
        quiet_count: Number of times ``-q`` was passed.

    Returns:
        A verbosity level: positive for more detail, negative for less, 0 by default.

    Raises:
        ObsListUsageError: If both verbose and quiet flags are used.
    """
    if verbose_count > 0 and quiet_count > 0:
        raise ObsListUsageError("The '--verbose' and '--quiet' options are mutually exclusive.")
    if verbose_count > 0:
        return min(verbose_count, 2)
    if quiet_count > 0:
        return -min(quiet_count, 2)
    return 0


def common_verbose_options(f: Callable[P, R]) -> Callable[P, R]:
    """Adds --verbose and --quiet options to a command.

    Args:
        f: The Click command function to decorate.

    Returns:
        The decorated function with verbosity options added.
    """
    f = click.option(
        "-v",
        "--verbose",
        count=True,
        help="Increase verbosity. Specify up to twice for more detail.",
    )(f)
    f = click.option(
        "-q",
        "--quiet",
        count=True,
        help="Suppress output. Specify up to twice for even less.",
    )(f)
    return f


def common_color_options(f: Callable[P, R]) -> Callable[P, R]:
    """Adds --color and --no-color options to a command.

    Args:
        f: The Click command function to decorate.

    Returns:
        The decorated function with color options added.
    """
    f = click.option(
        "--color",
        "color_mode",
        type=EnumChoiceParam(ColorMode),
        default=None,
        help="Color output: auto (default), always, or never.",
    )(f)
    f = click.option(
        "--no-color",
        "no_color",
        is_flag=True,
        help="Disable color output (equivalent to --color=never).",
    )(f)
    return f


def output_format_option(f: Callable[P, R]) -> Callable[P, R]:
    """Adds a --format option selecting an `OutputFormat`.

    Args:
        f: The Click command function to decorate.

    Returns:
        The decorated function.
    """
    return click.option(
        "--format",
        "output_format",
        type=EnumChoiceParam(OutputFormat),
        default=None,
        help=f"Output format ({', '.join(v.value for v in OutputFormat)}).",
    )(f)
