# topmark:header:start
#
#   project      : ObsList
#   file         : errors.py
#   file_relpath : src/obslist/cli/errors.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Exceptions for ObsList CLI.

Usage:
    Raise these exceptions in CLI commands to signal errors with standardized
    messages and exit codes.

Styling:
    Exceptions prefer the project console if available (see `show()`); if no console
    is present in the Click context, they fall back to Click's default styling.
"""

from __future__ import annotations

from typing import IO, Any

import click

from obslist.cli.exit_codes import ExitCode


class ObsListCliError(click.ClickException):
    """Base class for all ObsList CLI errors."""

    exit_code = ExitCode.FAILURE

    def format_message(self) -> str:  # pragma: no cover - trivial
        """Return the plain error message text (colorization happens in `show()`)."""
        return str(getattr(self, "message", ""))

    def show(self, file: IO[Any] | None = None) -> None:  # pragma: no cover - Click prints errors
        """Display the error using the project console if available.

        Falls back to Click's default error display when no console is present.
        """
        ctx = click.get_current_context(silent=True)
        if ctx is not None and isinstance(getattr(ctx, "obj", None), dict):
            console = ctx.obj.get("console")
            if console is not None:
                console.error(console.styled(f"Error: {self.format_message()}", fg="bright_red"))
                return
        super().show(file)


class ObsListUsageError(ObsListCliError):
    """Error for command-line invocation errors (invalid flags/args)."""

    exit_code = ExitCode.USAGE_ERROR


class ObsListScenarioError(ObsListCliError):
    """Error for malformed scenario input."""

    exit_code = ExitCode.DATA_ERROR


class ObsListFileNotFoundError(ObsListCliError):
    """Error when input path does not exist."""

    exit_code = ExitCode.FILE_NOT_FOUND


class ObsListIOError(ObsListCliError):
    """Error for I/O errors reading files."""

    exit_code = ExitCode.IO_ERROR


class ObsListEncodingError(ObsListCliError):
    """Error when scenario bytes are not valid UTF-8. Shares the data-error exit code."""

    exit_code = ExitCode.DATA_ERROR
