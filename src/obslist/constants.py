# topmark:header:start
#
#   project      : ObsList
#   file         : constants.py
#   file_relpath : src/obslist/constants.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""ObsList Constants."""

from __future__ import annotations

from importlib.metadata import version as get_version

OBSLIST_VERSION: str = get_version("obslist")

# Scenario TOML layout:
SCENARIO_TABLE: str = "scenario"
SCENARIO_STEP_ARRAY: str = "step"
