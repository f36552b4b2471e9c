"""Public detector input events, effects and listener contracts."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TypeAlias

from inertia.api.samples import Sample


@dataclass(frozen=True, slots=True)
class Scroll:
    """Element scrolled."""

    sample: Sample


@dataclass(frozen=True, slots=True)
class ScrollEnd:
    """Browser reported the end of a scroll sequence."""

    sample: Sample


@dataclass(frozen=True, slots=True)
class TouchStart:
    """Finger placed on the surface."""

    sample: Sample


@dataclass(frozen=True, slots=True)
class TouchMove:
    """Finger moved while on the surface."""

    sample: Sample


@dataclass(frozen=True, slots=True)
class TouchEnd:
    """Finger lifted from the surface."""

    sample: Sample


@dataclass(frozen=True, slots=True)
class FallbackCheck:
    """Self-delivered timer tick carrying the timestamp it was armed with."""

    timestamp: int


SampleEvent: TypeAlias = Scroll | ScrollEnd | TouchStart | TouchMove | TouchEnd
DetectorEvent: TypeAlias = SampleEvent | FallbackCheck


@dataclass(frozen=True, slots=True)
class ArmFallbackCheck:
    """Request to deliver `FallbackCheck(correlation_timestamp)` after a delay."""

    duration_ms: int
    correlation_timestamp: int


DetectorEffect: TypeAlias = ArmFallbackCheck


@dataclass(frozen=True, slots=True)
class ListenerSpec:
    """DOM listener registration requirements."""

    name: str
    passive: bool = True
    stop_propagation: bool = True


SCROLL_EVENT_TYPES: dict[str, type[SampleEvent]] = {
    "scroll": Scroll,
    "scrollend": ScrollEnd,
    "touchstart": TouchStart,
    "touchmove": TouchMove,
    "touchend": TouchEnd,
}

OBSERVED_EVENTS: tuple[ListenerSpec, ...] = tuple(ListenerSpec(name) for name in SCROLL_EVENT_TYPES)


__all__ = [
    "ArmFallbackCheck",
    "DetectorEffect",
    "DetectorEvent",
    "FallbackCheck",
    "ListenerSpec",
    "OBSERVED_EVENTS",
    "SCROLL_EVENT_TYPES",
    "SampleEvent",
    "Scroll",
    "ScrollEnd",
    "TouchEnd",
    "TouchMove",
    "TouchStart",
]
