"""Notification bus carrying detector phase and sticky-direction changes."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any, TypeVar

from inertia.api.detector import Subscription

TEvent = TypeVar("TEvent")
Listener = Callable[[Any], None]


class RuntimeEventBus:
    """Routes each published value to listeners registered for its type or a base of it.

    Delivery walks the event's MRO, most specific type first, and within one
    type preserves subscription order. Subscribing to `object` receives
    everything.
    """

    def __init__(self) -> None:
        self._last_token = 0
        self._listeners: dict[type[object], dict[int, Listener]] = {}
        self._token_types: dict[int, type[object]] = {}

    @property
    def subscription_count(self) -> int:
        return len(self._token_types)

    def subscribe(
        self,
        event_type: type[TEvent],
        handler: Callable[[TEvent], None],
    ) -> Subscription:
        self._last_token += 1
        token = self._last_token
        self._listeners.setdefault(event_type, {})[token] = handler
        self._token_types[token] = event_type
        return Subscription(token)

    def unsubscribe(self, subscription: Subscription) -> None:
        event_type = self._token_types.pop(subscription.id, None)
        if event_type is None:
            return
        listeners = self._listeners[event_type]
        del listeners[subscription.id]
        if not listeners:
            del self._listeners[event_type]

    def publish(self, event: object) -> int:
        """Deliver `event` and return how many listeners saw it."""
        targets: list[Listener] = []
        for event_type in type(event).__mro__:
            bucket = self._listeners.get(event_type)
            if bucket:
                targets.extend(bucket.values())
        for listener in targets:
            listener(event)
        return len(targets)


EventBus = RuntimeEventBus
