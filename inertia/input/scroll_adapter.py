"""DOM scroll/touch payload decoding and listener wiring."""

from __future__ import annotations

import logging
import math
from collections.abc import Callable, Mapping
from typing import Any

from inertia.api.detector import ScrollDetector
from inertia.api.events import OBSERVED_EVENTS, SCROLL_EVENT_TYPES, ListenerSpec
from inertia.api.samples import AxisSample, Sample

logger = logging.getLogger(__name__)

Payload = Mapping[str, Any]


def _number(value: object) -> int | None:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return None
    if not math.isfinite(value):
        return None
    return int(value)


def decode_sample(payload: Payload) -> Sample | None:
    """Read element scroll metrics and the event timestamp into a sample.

    Metrics come from the payload's `target` mapping when present, otherwise
    from the payload itself. Returns None when any field is missing or not a
    finite number.
    """
    target = payload.get("target")
    metrics: Payload = target if isinstance(target, Mapping) else payload
    left = _number(metrics.get("scrollLeft"))
    top = _number(metrics.get("scrollTop"))
    width = _number(metrics.get("scrollWidth"))
    height = _number(metrics.get("scrollHeight"))
    client_width = _number(metrics.get("clientWidth"))
    client_height = _number(metrics.get("clientHeight"))
    timestamp = _number(payload.get("timeStamp"))
    if (
        left is None
        or top is None
        or width is None
        or height is None
        or client_width is None
        or client_height is None
        or timestamp is None
    ):
        return None
    return Sample(
        x=AxisSample(extent=width, offset=left, viewport=client_width),
        y=AxisSample(extent=height, offset=top, viewport=client_height),
        timestamp=timestamp,
    )


class ScrollEventAdapter:
    """Forward DOM scroll/touch events from one element to a detector."""

    def __init__(
        self,
        detector: ScrollDetector,
        *,
        listeners: tuple[ListenerSpec, ...] = OBSERVED_EVENTS,
    ) -> None:
        self._detector = detector
        self._listeners = listeners
        self._dropped = 0

    @property
    def listeners(self) -> tuple[ListenerSpec, ...]:
        return self._listeners

    @property
    def dropped_count(self) -> int:
        """Number of payloads rejected as malformed."""
        return self._dropped

    def bind(self, element: Any) -> None:
        """Attach one passive listener per observed event to an element."""
        if not hasattr(element, "add_event_handler"):
            raise RuntimeError("Element does not support event handlers.")
        for spec in self._listeners:
            element.add_event_handler(self._handler_for(spec), spec.name, passive=spec.passive)

    def handle(self, event_name: str, payload: Payload) -> bool:
        """Decode one payload and dispatch it. Returns whether it was accepted."""
        event_type = SCROLL_EVENT_TYPES.get(event_name)
        if event_type is None:
            return False
        sample = decode_sample(payload)
        if sample is None:
            self._dropped += 1
            logger.debug("scroll_payload_dropped event=%s keys=%s", event_name, sorted(payload))
            return False
        self._detector.dispatch(event_type(sample))
        return True

    def _handler_for(self, spec: ListenerSpec) -> Callable[[Payload], None]:
        def _on_event(payload: Payload) -> None:
            event_name = payload.get("type", spec.name)
            if event_name != spec.name:
                return
            if spec.stop_propagation:
                stop = payload.get("stopPropagation")
                if callable(stop):
                    stop()
            self.handle(spec.name, payload)

        return _on_event
