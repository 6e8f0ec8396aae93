# topmark:header:start
#
#   project      : ObsList
#   file         : loader.py
#   file_relpath : src/obslist/scenario/loader.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Load scenarios from TOML.

Parsing is done with `tomlkit`; the document is unwrapped into plain Python
values before validation. Expected layout:

```toml
[scenario]
name = "duplicates"   # optional, defaults to the file stem
initial = [1, 2]      # optional

[[step]]
op = "add"
item = 5

[[step]]
op = "clear"
```
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

import tomlkit
from tomlkit.exceptions import ParseError as TomlkitParseError

from obslist.config.logging import get_logger
from obslist.constants import SCENARIO_STEP_ARRAY, SCENARIO_TABLE
from obslist.core.errors import ScenarioError
from obslist.scenario.model import Op, Scenario, Step

if TYPE_CHECKING:
    from pathlib import Path

    from obslist.config.logging import ObsListLogger

logger: ObsListLogger = get_logger(__name__)

DEFAULT_SCENARIO_NAME: str = "scenario"

_STEP_KEYS: frozenset[str] = frozenset({"op", "item"})


def _parse_step(number: int, raw: Any) -> Step:
    if not isinstance(raw, dict):
        raise ScenarioError("expected a table", step=number)
    unknown = sorted(set(raw) - _STEP_KEYS)
    if unknown:
        raise ScenarioError(f"unknown key(s): {', '.join(unknown)}", step=number)

    op_name = raw.get("op")
    if not isinstance(op_name, str):
        raise ScenarioError("missing or non-string 'op'", step=number)
    try:
        op = Op(op_name.strip().lower())
    except ValueError:
        choices = ", ".join(o.value for o in Op)
        raise ScenarioError(
            f"unknown op {op_name!r} (expected one of: {choices})", step=number
        ) from None

    if op.takes_item and "item" not in raw:
        raise ScenarioError(f"'{op.value}' requires an 'item'", step=number)
    if not op.takes_item and "item" in raw:
        raise ScenarioError(f"'{op.value}' does not take an 'item'", step=number)
    return Step(op=op, item=raw.get("item"))


def parse_scenario(
    data: dict[str, Any],
    *,
    default_name: str = DEFAULT_SCENARIO_NAME,
) -> Scenario:
    """Validate an unwrapped TOML document and build a `Scenario`.

    Args:
        data (dict[str, Any]): Plain mapping as produced by ``tomlkit`` ``unwrap()``.
        default_name (str): Name used when ``[scenario].name`` is absent.

    Returns:
        Scenario: The validated scenario.

    Raises:
        ScenarioError: If the document does not follow the scenario layout.
    """
    unknown = sorted(set(data) - {SCENARIO_TABLE, SCENARIO_STEP_ARRAY})
    if unknown:
        raise ScenarioError(f"unknown top-level key(s): {', '.join(unknown)}")

    header = data.get(SCENARIO_TABLE, {})
    if not isinstance(header, dict):
        raise ScenarioError(f"'{SCENARIO_TABLE}' must be a table")

    name = header.get("name", default_name)
    if not isinstance(name, str) or not name.strip():
        raise ScenarioError("'scenario.name' must be a non-empty string")

    initial = header.get("initial", [])
    if not isinstance(initial, list):
        raise ScenarioError("'scenario.initial' must be an array")

    raw_steps = data.get(SCENARIO_STEP_ARRAY, [])
    if not isinstance(raw_steps, list):
        raise ScenarioError(f"'{SCENARIO_STEP_ARRAY}' must be an array of tables")

    steps = tuple(_parse_step(number, raw) for number, raw in enumerate(raw_steps, start=1))
    logger.debug(
        "parsed scenario %r: %d initial item(s), %d step(s)", name, len(initial), len(steps)
    )
    return Scenario(name=name.strip(), initial=tuple(initial), steps=steps)


def load_scenario_text(text: str, *, default_name: str = DEFAULT_SCENARIO_NAME) -> Scenario:
    """Parse scenario TOML text.

    Raises:
        ScenarioError: On TOML syntax errors or layout violations.
    """
    try:
        doc: tomlkit.TOMLDocument = tomlkit.parse(text)
    except TomlkitParseError as exc:
        raise ScenarioError(f"invalid TOML: {exc}") from exc
    data: Any = doc.unwrap()
    return parse_scenario(data, default_name=default_name)


def load_scenario(path: Path) -> Scenario:
    """Read and parse a scenario file; the file stem is the default name.

    Raises:
        OSError: If the file cannot be read.
        ScenarioError: On TOML syntax errors or layout violations.
    """
    logger.info("loading scenario from %s", path)
    text: str = path.read_text(encoding="utf-8")
    return load_scenario_text(text, default_name=path.stem)
