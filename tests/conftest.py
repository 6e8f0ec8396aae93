# topmark:header:start
#
#   project      : ObsList
#   file         : conftest.py
#   file_relpath : tests/conftest.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Pytest configuration for the ObsList test suite.

Sets up global fixtures, typed wrappers around pytest decorators, and an
`EventLog` helper that subscribes to all channels of an `ObservableList`.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field
from typing import Any, TypeVar, cast

import pytest

from obslist import EventArgs, ItemEventArgs, ObservableList
from obslist.config import logging

F = TypeVar("F", bound=Callable[..., object])

DecoratorType = Callable[[F], F]


def as_typed_mark(mark: Any) -> DecoratorType[Any]:
    """Wrap a pytest mark so static type checkers preserve the function type.

    Args:
        mark (Any): A pytest mark decorator such as `pytest.mark.cli`.

    Returns:
        DecoratorType[Any]: A decorator that preserves the wrapped function's type.
    """

    def _decorator(func: F) -> F:
        return cast("F", mark(func))

    return _decorator


mark_cli: DecoratorType[Any] = as_typed_mark(pytest.mark.cli)


def parametrize(*args: Any, **kwargs: Any) -> Callable[[F], F]:
    """Typed wrapper for `pytest.mark.parametrize`."""
    mark: pytest.MarkDecorator = pytest.mark.parametrize(*args, **kwargs)
    return as_typed_mark(mark)


def hookimpl(*args: Any, **kwargs: Any) -> Callable[[F], F]:
    """Typed wrapper for `pytest.hookimpl`."""
    return as_typed_mark(pytest.hookimpl(*args, **kwargs))


@pytest.fixture(autouse=True)
def silence_obslist_logging(monkeypatch: pytest.MonkeyPatch) -> None:
    """Ensure ObsList's runtime log level is not forced via env during tests.

    Args:
        monkeypatch (pytest.MonkeyPatch): Pytest monkeypatch fixture.
    """
    monkeypatch.delenv(logging.LOG_LEVEL_ENV_VAR, raising=False)


@hookimpl(tryfirst=True)
def pytest_configure(config: pytest.Config) -> None:  # pylint: disable=unused-argument
    """Log at TRACE level for all tests so failures show the full event flow."""
    logging.setup_logging(level=logging.TRACE_LEVEL)


@dataclass
class EventLog:
    """Records every notification of one `ObservableList`, in firing order.

    Entries are ``(channel, item)`` tuples; ``item`` is None for ``cleared``.
    """

    entries: list[tuple[str, Any]] = field(default_factory=list)
    senders: list[object] = field(default_factory=list)

    def attach(self, lst: ObservableList[Any]) -> EventLog:
        lst.item_added.subscribe(self._on_added)
        lst.item_removed.subscribe(self._on_removed)
        lst.cleared.subscribe(self._on_cleared)
        return self

    def _on_added(self, sender: object, args: ItemEventArgs[Any]) -> None:
        self.senders.append(sender)
        self.entries.append(("item_added", args.item))

    def _on_removed(self, sender: object, args: ItemEventArgs[Any]) -> None:
        self.senders.append(sender)
        self.entries.append(("item_removed", args.item))

    def _on_cleared(self, sender: object, args: EventArgs) -> None:
        assert args is EventArgs.EMPTY
        self.senders.append(sender)
        self.entries.append(("cleared", None))

    def take(self) -> list[tuple[str, Any]]:
        """Return and forget the entries recorded so far."""
        out = list(self.entries)
        self.entries.clear()
        return out


@pytest.fixture
def empty_list() -> ObservableList[Any]:
    """Return a fresh, empty ObservableList."""
    return ObservableList()


@pytest.fixture
def event_log(empty_list: ObservableList[Any]) -> EventLog:
    """Return an EventLog attached to ``empty_list``."""
    return EventLog().attach(empty_list)
