# topmark:header:start
#
#   project      : ObsList
#   file         : conftest.py
#   file_relpath : tests/cli/conftest.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""CLI test helpers for running ObsList through Click's test runner."""

from __future__ import annotations

from typing import IO, TYPE_CHECKING, Any

from click.testing import CliRunner, Result

from obslist.cli.exit_codes import ExitCode
from obslist.cli.main import cli

if TYPE_CHECKING:
    from collections.abc import Sequence

WALKTHROUGH_TOML = """\
[scenario]
name = "walkthrough"

[[step]]
op = "add"
item = 5

[[step]]
op = "add"
item = 5

[[step]]
op = "remove"
item = 5

[[step]]
op = "remove"
item = 99

[[step]]
op = "clear"
"""


def run_cli(
    argv: str | Sequence[str] | None,
    *,
    input_text: str | bytes | IO[Any] | None = None,
) -> Result:
    """Invoke the CLI in-process.

    Args:
        argv (str | Sequence[str] | None): CLI argument vector, e.g. ``["version"]``.
        input_text (str | bytes | IO[Any] | None): Optional standard input.

    Returns:
        Result: The `click.testing.Result` produced by `CliRunner.invoke`.
    """
    runner = CliRunner()
    return runner.invoke(cli, argv, input=input_text)


def assert_SUCCESS(result: Result) -> None:
    """Assert that the command exited successfully (code 0)."""
    assert result.exit_code == ExitCode.SUCCESS, result.output


def assert_exit(result: Result, code: ExitCode) -> None:
    """Assert that the command exited with ``code``."""
    assert result.exit_code == code, result.output
