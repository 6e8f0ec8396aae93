# topmark:header:start
#
#   project      : ObsList
#   file         : __init__.py
#   file_relpath : src/obslist/config/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Runtime configuration for ObsList.

ObsList has no configuration file of its own: the only runtime knob is the
``OBSLIST_LOG_LEVEL`` environment variable, resolved by
[`obslist.config.logging`][]. Scenario files consumed by the CLI are handled
by [`obslist.scenario`][].
"""

from __future__ import annotations
