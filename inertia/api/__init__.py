"""Public detector API contracts."""

from inertia.api.detector import (
    DEFAULT_TUNING,
    DetectorSnapshot,
    DetectorTuning,
    EventBus,
    Phase,
    PhaseChanged,
    ScrollDetector,
    StickyDirectionChanged,
    Subscription,
    create_event_bus,
    create_scroll_detector,
)
from inertia.api.events import (
    OBSERVED_EVENTS,
    ArmFallbackCheck,
    DetectorEffect,
    DetectorEvent,
    FallbackCheck,
    ListenerSpec,
    Scroll,
    ScrollEnd,
    TouchEnd,
    TouchMove,
    TouchStart,
)
from inertia.api.logging import LoggerPort, LoggingConfig
from inertia.api.samples import Axis, AxisSample, Direction, Sample, make_sample

__all__ = [
    "ArmFallbackCheck",
    "Axis",
    "AxisSample",
    "DEFAULT_TUNING",
    "DetectorEffect",
    "DetectorEvent",
    "DetectorSnapshot",
    "DetectorTuning",
    "Direction",
    "EventBus",
    "FallbackCheck",
    "ListenerSpec",
    "LoggerPort",
    "LoggingConfig",
    "OBSERVED_EVENTS",
    "Phase",
    "PhaseChanged",
    "Sample",
    "Scroll",
    "ScrollDetector",
    "ScrollEnd",
    "StickyDirectionChanged",
    "Subscription",
    "TouchEnd",
    "TouchMove",
    "TouchStart",
    "create_event_bus",
    "create_scroll_detector",
    "make_sample",
]
