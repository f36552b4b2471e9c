"""Detector runtime modules."""

from inertia.runtime.bootstrap import bootstrap_detector
from inertia.runtime.config import DetectorConfig, load_detector_config
from inertia.runtime.detector import RuntimeScrollDetector
from inertia.runtime.events import EventBus
from inertia.runtime.logging import configure_logging, setup_logging
from inertia.runtime.machine import derive_direction, merge_sticky, transition
from inertia.runtime.scheduler import Scheduler
from inertia.runtime.state import (
    AxisTrack,
    DetectorState,
    Dragging,
    Idle,
    Momentum,
    MomentumStarting,
    Touching,
    create_state,
    phase_name,
)

__all__ = [
    "AxisTrack",
    "DetectorConfig",
    "DetectorState",
    "Dragging",
    "EventBus",
    "Idle",
    "Momentum",
    "MomentumStarting",
    "RuntimeScrollDetector",
    "Scheduler",
    "Touching",
    "bootstrap_detector",
    "configure_logging",
    "create_state",
    "derive_direction",
    "load_detector_config",
    "merge_sticky",
    "phase_name",
    "setup_logging",
    "transition",
]
