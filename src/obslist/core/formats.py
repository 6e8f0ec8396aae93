# topmark:header:start
#
#   project      : ObsList
#   file         : formats.py
#   file_relpath : src/obslist/core/formats.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Renderings a replay or version report can be printed in.

``json`` and ``ndjson`` output is meant to be parsed by other programs, so it
is never colored and its keys do not change between releases.
"""

from __future__ import annotations

from enum import Enum


class OutputFormat(str, Enum):
    """How the CLI renders its report.

    Attributes:
        TEXT: One line per replay step, colored when the terminal allows it.
        MARKDOWN: A Markdown table of the steps plus the final contents.
        JSON: The whole report as one JSON object.
        NDJSON: One JSON object per step, then a summary object.
    """

    TEXT = "text"
    MARKDOWN = "markdown"
    JSON = "json"
    NDJSON = "ndjson"


_PARSEABLE: frozenset[OutputFormat] = frozenset({OutputFormat.JSON, OutputFormat.NDJSON})


def is_machine_format(fmt: OutputFormat | None) -> bool:
    """True when ``fmt`` is read by programs rather than people (never colored)."""
    return fmt in _PARSEABLE
