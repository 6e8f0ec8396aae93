# topmark:header:start
#
#   project      : ObsList
#   file         : errors.py
#   file_relpath : src/obslist/core/errors.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Exceptions raised by the ObsList core.

The core errors subclass the matching built-in exception so callers can catch
either the ObsList-specific type or the standard one (``ValueError`` /
``IndexError``). The CLI layer maps these onto exit codes separately, see
[`obslist.cli.errors`][].
"""

from __future__ import annotations


class ObsListError(Exception):
    """Base class for all ObsList errors."""


class InvalidArgumentError(ObsListError, ValueError):
    """A required argument is absent or unusable (e.g. a ``None`` source sequence)."""


class IndexOutOfRangeError(ObsListError, IndexError):
    """A positional index falls outside the valid range."""


class ScenarioError(ObsListError):
    """A scenario document is malformed.

    Attributes:
        step (int | None): 1-based step number the error refers to, if any.
    """

    step: int | None

    def __init__(self, message: str, *, step: int | None = None) -> None:
        self.step = step
        if step is not None:
            message = f"step {step}: {message}"
        super().__init__(message)
