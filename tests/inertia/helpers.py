from __future__ import annotations

from collections.abc import Callable
from typing import Any

from inertia.api.samples import Sample, make_sample


def sample_at(
    left: int = 0,
    top: int = 0,
    timestamp: int = 0,
    *,
    width: int = 1000,
    height: int = 1000,
    viewport_width: int = 100,
    viewport_height: int = 100,
) -> Sample:
    return make_sample(
        left=left,
        top=top,
        timestamp=timestamp,
        width=width,
        height=height,
        viewport_width=viewport_width,
        viewport_height=viewport_height,
    )


def dom_payload(
    event_type: str,
    *,
    left: float = 0,
    top: float = 0,
    timestamp: float = 0,
    width: float = 1000,
    height: float = 1000,
    client_width: float = 100,
    client_height: float = 100,
    **extra: Any,
) -> dict[str, Any]:
    return {
        "type": event_type,
        "timeStamp": timestamp,
        "target": {
            "scrollLeft": left,
            "scrollTop": top,
            "scrollWidth": width,
            "scrollHeight": height,
            "clientWidth": client_width,
            "clientHeight": client_height,
        },
        **extra,
    }


class FakeElement:
    def __init__(self) -> None:
        self.handlers: dict[str, list[Callable[[dict[str, Any]], None]]] = {}
        self.passive: dict[str, bool] = {}

    def add_event_handler(
        self,
        handler: Callable[[dict[str, Any]], None],
        event_type: str,
        *,
        passive: bool = False,
    ) -> None:
        self.handlers.setdefault(event_type, []).append(handler)
        self.passive[event_type] = passive

    def emit(self, event_type: str, **payload: Any) -> None:
        event = dom_payload(event_type, **payload)
        for handler in self.handlers.get(event_type, []):
            handler(event)


