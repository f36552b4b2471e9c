"""Public inertial scroll detector API contracts."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from enum import StrEnum
from typing import TYPE_CHECKING, Protocol, TypeVar

from inertia.api.events import DetectorEvent
from inertia.api.samples import Axis, Direction

if TYPE_CHECKING:
    from inertia.runtime.scheduler import Scheduler
    from inertia.runtime.state import DetectorState

TEvent = TypeVar("TEvent")

DEFAULT_FALLBACK_DELAY_MS = 300
DEFAULT_DRAG_RELEASE_THRESHOLD = 5


class Phase(StrEnum):
    """Interaction lifecycle phase."""

    IDLE = "IDLE"
    TOUCHING = "TOUCHING"
    DRAGGING = "DRAGGING"
    MOMENTUM_STARTING = "MOMENTUM_STARTING"
    MOMENTUM = "MOMENTUM"


@dataclass(frozen=True, slots=True)
class DetectorTuning:
    """Empirical thresholds for browser workarounds.

    `fallback_delay_ms` is how long after a momentum scroll sample a scroll
    end is synthesized when the browser never sends `scrollend`.
    `drag_release_threshold` is how many events a drag may see before a
    scroll sample is taken as proof that `touchend` was dropped.
    """

    fallback_delay_ms: int = DEFAULT_FALLBACK_DELAY_MS
    drag_release_threshold: int = DEFAULT_DRAG_RELEASE_THRESHOLD

    def __post_init__(self) -> None:
        if self.fallback_delay_ms < 0:
            raise ValueError("fallback_delay_ms must be >= 0")
        if self.drag_release_threshold < 1:
            raise ValueError("drag_release_threshold must be >= 1")


DEFAULT_TUNING = DetectorTuning()


@dataclass(frozen=True, slots=True)
class DetectorSnapshot:
    """Immutable view of every detector observable."""

    phase: Phase
    scroll_left: int
    scroll_top: int
    inertial_direction_x: Direction
    inertial_direction_y: Direction
    sticky_direction_x: Direction
    sticky_direction_y: Direction
    last_timestamp: int


@dataclass(frozen=True, slots=True)
class PhaseChanged:
    """Published when the lifecycle phase changes."""

    previous: Phase
    current: Phase
    timestamp: int


@dataclass(frozen=True, slots=True)
class StickyDirectionChanged:
    """Published when an axis records a new sticky direction."""

    axis: Axis
    previous: Direction
    current: Direction
    timestamp: int


@dataclass(frozen=True, slots=True)
class Subscription:
    """Opaque subscription token."""

    id: int


class EventBus(Protocol):
    """In-process pub/sub contract for detector notifications."""

    def subscribe(
        self,
        event_type: type[TEvent],
        handler: Callable[[TEvent], None],
    ) -> Subscription:
        """Subscribe handler for event type."""

    def unsubscribe(self, subscription: Subscription) -> None:
        """Unsubscribe token."""

    def publish(self, event: object) -> int:
        """Publish event and return invocation count."""


class ScrollDetector(Protocol):
    """Stateful detector bound to one scrollable surface."""

    @property
    def state(self) -> DetectorState:
        """Return current machine state."""

    @property
    def phase(self) -> Phase:
        """Return current lifecycle phase."""

    @property
    def scroll_left(self) -> int:
        """Return current horizontal offset."""

    @property
    def scroll_top(self) -> int:
        """Return current vertical offset."""

    @property
    def inertial_direction_x(self) -> Direction:
        """Return live horizontal direction, STILL outside momentum."""

    @property
    def inertial_direction_y(self) -> Direction:
        """Return live vertical direction, STILL outside momentum."""

    @property
    def sticky_direction_x(self) -> Direction:
        """Return last non-STILL horizontal direction."""

    @property
    def sticky_direction_y(self) -> Direction:
        """Return last non-STILL vertical direction."""

    def dispatch(self, event: DetectorEvent) -> DetectorState:
        """Feed one event and return the resulting state."""

    def snapshot(self) -> DetectorSnapshot:
        """Return an immutable view of all observables."""

    def teardown(self) -> None:
        """Release pending timers and stop accepting events."""


def create_event_bus() -> EventBus:
    """Create default event bus implementation."""
    from inertia.runtime.events import RuntimeEventBus

    return RuntimeEventBus()


def create_scroll_detector(
    initial_left: int = 0,
    initial_top: int = 0,
    *,
    scheduler: Scheduler | None = None,
    event_bus: EventBus | None = None,
    tuning: DetectorTuning | None = None,
) -> ScrollDetector:
    """Create default detector implementation for one surface."""
    from inertia.runtime.detector import RuntimeScrollDetector

    return RuntimeScrollDetector(
        initial_left,
        initial_top,
        scheduler=scheduler,
        event_bus=event_bus,
        tuning=tuning,
    )


__all__ = [
    "DEFAULT_DRAG_RELEASE_THRESHOLD",
    "DEFAULT_FALLBACK_DELAY_MS",
    "DEFAULT_TUNING",
    "DetectorSnapshot",
    "DetectorTuning",
    "EventBus",
    "Phase",
    "PhaseChanged",
    "ScrollDetector",
    "StickyDirectionChanged",
    "Subscription",
    "create_event_bus",
    "create_scroll_detector",
]
