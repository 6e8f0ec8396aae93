# topmark:header:start
#
#   project      : ObsList
#   file         : events.py
#   file_relpath : src/obslist/core/events.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Notification channels and event payloads.

An [`EventChannel`][obslist.core.events.EventChannel] is a small registry of
handlers keyed by [`Subscription`][obslist.core.events.Subscription] handles.
Handlers are called as ``handler(sender, args)``, in subscription order, on the
same call stack as [`EventChannel.emit`][obslist.core.events.EventChannel.emit].

Notes:
    - Unsubscribing works on handles, not on callables: subscribing the same
      callable twice yields two handles and two invocations per emit.
    - The handler set is snapshotted when an emit starts. Handlers that
      subscribe or unsubscribe during an emit affect the *next* emit only.
    - Exceptions raised by a handler propagate to the emitter; handlers that
      come after it are not called for that emit.
"""

from __future__ import annotations

import itertools
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, ClassVar, Generic, TypeVar

from obslist.config.logging import get_logger
from obslist.core.errors import InvalidArgumentError

if TYPE_CHECKING:
    from collections.abc import Callable

    from obslist.config.logging import ObsListLogger

logger: ObsListLogger = get_logger(__name__)

T = TypeVar("T")
A = TypeVar("A")

_subscription_ids = itertools.count(1)


@dataclass(frozen=True)
class EventArgs:
    """Payload for events that carry no data."""

    EMPTY: ClassVar[EventArgs]


EventArgs.EMPTY = EventArgs()


@dataclass(frozen=True)
class ItemEventArgs(Generic[T]):
    """Payload for events about a single item.

    Attributes:
        item (T): The item that was added or removed. May be ``None``.
    """

    item: T


@dataclass(frozen=True)
class Subscription:
    """Opaque handle returned by `EventChannel.subscribe`."""

    channel: str
    id: int = field(default_factory=lambda: next(_subscription_ids))


class EventChannel(Generic[A]):
    """An independent stream of notifications with its own subscribers.

    Args:
        name (str): Channel name, used in log messages and on subscription handles.

    Attributes:
        name (str): Channel name.
    """

    name: str
    _handlers: dict[Subscription, Callable[[Any, A], None]]

    def __init__(self, name: str) -> None:
        self.name = name
        self._handlers = {}

    def __len__(self) -> int:
        return len(self._handlers)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.name!r}, subscribers={len(self._handlers)})"

    def subscribe(self, handler: Callable[[Any, A], None]) -> Subscription:
        """Register ``handler`` and return the handle that unsubscribes it.

        Args:
            handler (Callable[[Any, A], None]): Callable invoked as ``handler(sender, args)``.

        Returns:
            Subscription: A handle unique to this registration.

        Raises:
            InvalidArgumentError: If ``handler`` is not callable.
        """
        if not callable(handler):
            raise InvalidArgumentError(
                f"handler for {self.name!r} must be callable, got {handler!r}"
            )
        subscription = Subscription(channel=self.name)
        self._handlers[subscription] = handler
        logger.debug("subscribed %r to %s (#%d)", handler, self.name, subscription.id)
        return subscription

    def unsubscribe(self, subscription: Subscription) -> bool:
        """Remove the handler registered under ``subscription``.

        Unknown or already-removed handles are ignored.

        Returns:
            bool: True if a handler was removed.
        """
        removed = self._handlers.pop(subscription, None) is not None
        if removed:
            logger.debug("unsubscribed #%d from %s", subscription.id, self.name)
        return removed

    def clear(self) -> None:
        """Drop all subscriptions."""
        self._handlers.clear()

    def emit(self, sender: Any, args: A) -> None:
        """Invoke every subscribed handler with ``(sender, args)``."""
        handlers = tuple(self._handlers.values())
        logger.trace("emit %s to %d handler(s): %r", self.name, len(handlers), args)
        for handler in handlers:
            handler(sender, args)
