# topmark:header:start
#
#   project      : ObsList
#   file         : __init__.py
#   file_relpath : src/obslist/core/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Core, UI-agnostic primitives shared across ObsList.

The ``obslist.core`` package provides the building blocks that the
[`ObservableList`][obslist.collection.ObservableList] and the CLI share, without
pulling in Click or console concerns.

Included modules:

- ``errors``
  The exception hierarchy (``ObsListError`` and its subclasses).

- ``events``
  Notification channels, subscription handles and event payloads.

- ``formats``
  The ``OutputFormat`` vocabulary used by CLI emitters.
"""

from __future__ import annotations
