# topmark:header:start
#
#   project      : ObsList
#   file         : __init__.py
#   file_relpath : src/obslist/scenario/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Scenarios: scripted operation sequences replayed against an ObservableList.

A scenario is a TOML document describing an optional initial content and a
list of ``add`` / ``remove`` / ``clear`` steps. Replaying it records the
outcome of every step together with the notifications it fired, which makes
it a convenient way to inspect (and regression-test) notification behavior.

Typical usage:
    ```python
    from obslist.scenario import load_scenario_text, replay

    scenario = load_scenario_text('''
    [[step]]
    op = "add"
    item = 5
    ''')
    result = replay(scenario)
    assert result.final_items == [5]
    ```
"""

from __future__ import annotations

from obslist.scenario.loader import load_scenario, load_scenario_text, parse_scenario
from obslist.scenario.model import Op, Scenario, Step
from obslist.scenario.replay import EventRecord, ReplayResult, StepRecord, replay

__all__: list[str] = [
    "EventRecord",
    "Op",
    "ReplayResult",
    "Scenario",
    "Step",
    "StepRecord",
    "load_scenario",
    "load_scenario_text",
    "parse_scenario",
    "replay",
]
