from __future__ import annotations

from inertia.api.detector import (
    Phase,
    PhaseChanged,
    StickyDirectionChanged,
    create_event_bus,
    create_scroll_detector,
)
from inertia.api.samples import Axis, Direction
from inertia.input.scroll_adapter import ScrollEventAdapter
from inertia.runtime.scheduler import Scheduler
from tests.inertia.helpers import FakeElement


class NavigationBar:
    """Hides while content flings downward, shows again when it flings upward."""

    def __init__(self) -> None:
        self.visible = True
        self.momentum_runs = 0

    def on_sticky(self, event: StickyDirectionChanged) -> None:
        if event.axis is Axis.Y:
            self.visible = event.current is not Direction.POSITIVE

    def on_phase(self, event: PhaseChanged) -> None:
        if event.current is Phase.MOMENTUM:
            self.momentum_runs += 1


def _fling(element: FakeElement, offsets: list[int], start: int) -> int:
    timestamp = start
    element.emit("touchstart", top=offsets[0], timestamp=timestamp)
    for offset in offsets[1:-1]:
        timestamp += 16
        element.emit("touchmove", top=offset, timestamp=timestamp)
    timestamp += 16
    element.emit("touchend", top=offsets[-1], timestamp=timestamp)
    return timestamp


def test_navigation_bar_follows_inertial_scrolling() -> None:
    scheduler = Scheduler()
    bus = create_event_bus()
    detector = create_scroll_detector(0, 200, scheduler=scheduler, event_bus=bus)
    element = FakeElement()
    ScrollEventAdapter(detector).bind(element)
    bar = NavigationBar()
    bus.subscribe(StickyDirectionChanged, bar.on_sticky)
    bus.subscribe(PhaseChanged, bar.on_phase)

    timestamp = _fling(element, [200, 220, 240, 260], start=0)
    assert detector.phase is Phase.MOMENTUM_STARTING
    assert bar.visible is False

    for offset in (300, 340, 370, 385):
        timestamp += 16
        element.emit("scroll", top=offset, timestamp=timestamp)
    assert detector.phase is Phase.MOMENTUM
    assert detector.inertial_direction_y is Direction.POSITIVE
    assert bar.momentum_runs == 1

    # this browser never fires scrollend
    scheduler.advance(300)
    assert detector.phase is Phase.IDLE
    assert detector.scroll_top == 385
    assert detector.sticky_direction_y is Direction.POSITIVE

    timestamp = _fling(element, [385, 360, 330, 300], start=timestamp + 500)
    for offset in (250, 210):
        timestamp += 16
        element.emit("scroll", top=offset, timestamp=timestamp)
    assert detector.inertial_direction_y is Direction.NEGATIVE
    assert bar.visible is True

    timestamp += 16
    element.emit("scrollend", top=205, timestamp=timestamp)
    assert detector.phase is Phase.IDLE
    assert bar.momentum_runs == 2

    scheduler.advance(300)
    assert detector.phase is Phase.IDLE
    assert detector.scroll_top == 205


def test_programmatic_scroll_never_reports_momentum() -> None:
    bus = create_event_bus()
    detector = create_scroll_detector(event_bus=bus)
    element = FakeElement()
    ScrollEventAdapter(detector).bind(element)
    phases: list[PhaseChanged] = []
    bus.subscribe(PhaseChanged, phases.append)

    for step in range(1, 20):
        element.emit("scroll", top=step * 20, timestamp=step * 16)

    assert detector.phase is Phase.IDLE
    assert detector.scroll_top == 380
    assert detector.sticky_direction_y is Direction.STILL
    assert phases == []
