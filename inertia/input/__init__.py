"""DOM event capture for the inertial scroll detector."""

from inertia.api.events import OBSERVED_EVENTS, ListenerSpec
from inertia.input.scroll_adapter import ScrollEventAdapter, decode_sample

__all__ = ["ListenerSpec", "OBSERVED_EVENTS", "ScrollEventAdapter", "decode_sample"]
