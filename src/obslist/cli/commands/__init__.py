# topmark:header:start
#
#   project      : ObsList
#   file         : __init__.py
#   file_relpath : src/obslist/cli/commands/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Click subcommands of the ``obslist`` group."""

from __future__ import annotations
