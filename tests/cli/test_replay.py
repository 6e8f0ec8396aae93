# topmark:header:start
#
#   project      : ObsList
#   file         : test_replay.py
#   file_relpath : tests/cli/test_replay.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""CLI test: `replay` command."""

from __future__ import annotations

import json
from typing import TYPE_CHECKING, Any

from obslist.cli.exit_codes import ExitCode
from tests.cli.conftest import WALKTHROUGH_TOML, assert_exit, assert_SUCCESS, run_cli
from tests.conftest import mark_cli, parametrize

if TYPE_CHECKING:
    from pathlib import Path


def _write(tmp_path: Path, text: str = WALKTHROUGH_TOML) -> str:
    path = tmp_path / "walkthrough.toml"
    path.write_text(text, encoding="utf-8")
    return str(path)


@mark_cli
def test_replay_text_output(tmp_path: Path) -> None:
    result = run_cli(["--no-color", "replay", _write(tmp_path)])

    assert_SUCCESS(result)
    out = result.output
    assert "Scenario: walkthrough" in out
    assert "add(5)  [item_added(5)]  count=1" in out
    assert "remove(99) -> False  [no events]  count=1" in out
    assert "clear()  [cleared]  count=0" in out
    assert "5 step(s), 4 event(s); final: []" in out


@mark_cli
def test_replay_verbose_lists_events(tmp_path: Path) -> None:
    result = run_cli(["--no-color", "-v", "replay", _write(tmp_path)])

    assert_SUCCESS(result)
    assert "       - item_removed(5)" in result.output


@mark_cli
def test_replay_quiet_prints_final_contents_only(tmp_path: Path) -> None:
    result = run_cli(["-q", "replay", _write(tmp_path, '[[step]]\nop = "add"\nitem = "a"\n')])

    assert_SUCCESS(result)
    assert result.output.strip() == '["a"]'


@mark_cli
def test_replay_json(tmp_path: Path) -> None:
    result = run_cli(["replay", _write(tmp_path), "--format", "json"])

    assert_SUCCESS(result)
    payload: dict[str, Any] = json.loads(result.output)
    assert payload["name"] == "walkthrough"
    assert [s["count"] for s in payload["steps"]] == [1, 2, 1, 1, 0]
    assert payload["steps"][2]["removed"] is True
    assert payload["final"] == []


@mark_cli
def test_replay_ndjson(tmp_path: Path) -> None:
    result = run_cli(["replay", _write(tmp_path), "--format", "ndjson"])

    assert_SUCCESS(result)
    records = [json.loads(line) for line in result.output.splitlines() if line.strip()]
    assert [r["kind"] for r in records] == ["step"] * 5 + ["summary"]
    assert records[-1] == {
        "kind": "summary",
        "name": "walkthrough",
        "steps": 5,
        "events": 4,
        "final": [],
    }


@mark_cli
def test_replay_markdown(tmp_path: Path) -> None:
    result = run_cli(["replay", _write(tmp_path), "--format", "markdown"])

    assert_SUCCESS(result)
    assert "# Scenario `walkthrough`" in result.output
    assert "| 3 | `remove(5)` | True | `item_removed(5)` | 1 |" in result.output


@mark_cli
def test_replay_from_stdin() -> None:
    result = run_cli(["replay", "-", "--format", "json"], input_text=WALKTHROUGH_TOML)

    assert_SUCCESS(result)
    assert json.loads(result.output)["name"] == "walkthrough"


@mark_cli
def test_replay_missing_file(tmp_path: Path) -> None:
    result = run_cli(["replay", str(tmp_path / "nope.toml")])
    assert_exit(result, ExitCode.FILE_NOT_FOUND)


@mark_cli
@parametrize(
    "text",
    [
        "not = [valid",
        '[[step]]\nop = "insert"\nitem = 1\n',
    ],
)
def test_replay_invalid_scenario(tmp_path: Path, text: str) -> None:
    result = run_cli(["replay", _write(tmp_path, text)])
    assert_exit(result, ExitCode.DATA_ERROR)


_NOT_UTF8 = b'[scenario]\nname = "\xff\xfe"\n'


@mark_cli
def test_replay_non_utf8_file_is_a_data_error(tmp_path: Path) -> None:
    path = tmp_path / "latin.toml"
    path.write_bytes(_NOT_UTF8)

    result = run_cli(["replay", str(path)])

    assert_exit(result, ExitCode.DATA_ERROR)
    assert not isinstance(result.exception, UnicodeDecodeError)


@mark_cli
def test_replay_non_utf8_stdin_is_a_data_error() -> None:
    result = run_cli(["replay", "-"], input_text=_NOT_UTF8)

    assert_exit(result, ExitCode.DATA_ERROR)
    assert not isinstance(result.exception, UnicodeDecodeError)


@mark_cli
def test_replay_directory_is_an_io_error(tmp_path: Path) -> None:
    result = run_cli(["replay", str(tmp_path)])
    assert_exit(result, ExitCode.IO_ERROR)


@mark_cli
def test_replay_rejects_unknown_format(tmp_path: Path) -> None:
    result = run_cli(["replay", _write(tmp_path), "--format", "yaml"])
    assert result.exit_code != ExitCode.SUCCESS


@mark_cli
def test_replay_format_is_case_insensitive(tmp_path: Path) -> None:
    result = run_cli(["replay", _write(tmp_path), "--format", "JSON"])

    assert_SUCCESS(result)
    assert json.loads(result.output)["name"] == "walkthrough"
