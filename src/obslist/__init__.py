# topmark:header:start
#
#   project      : ObsList
#   file         : __init__.py
#   file_relpath : src/obslist/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""ObsList package.

ObsList provides [`ObservableList`][obslist.collection.ObservableList], an ordered
collection that synchronously notifies subscribers when items are added,
removed, or the collection is cleared. A small CLI replays TOML scenarios
against it for inspection.
"""

from __future__ import annotations

from obslist.collection import ObservableList
from obslist.core.errors import (
    IndexOutOfRangeError,
    InvalidArgumentError,
    ObsListError,
    ScenarioError,
)
from obslist.core.events import EventArgs, EventChannel, ItemEventArgs, Subscription

__all__: list[str] = [
    "EventArgs",
    "EventChannel",
    "IndexOutOfRangeError",
    "InvalidArgumentError",
    "ItemEventArgs",
    "ObsListError",
    "ObservableList",
    "ScenarioError",
    "Subscription",
]
