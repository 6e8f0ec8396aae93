# topmark:header:start
#
#   project      : ObsList
#   file         : __main__.py
#   file_relpath : src/obslist/__main__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Module entry point for running ObsList via ``python -m obslist``.

Delegates to [`obslist.cli.main.cli`][], the same group the ``obslist``
console script runs.

Examples:
    Replay a scenario file::

        python -m obslist replay scenario.toml
"""

from __future__ import annotations

from obslist.cli.main import cli

if __name__ == "__main__":
    cli()
