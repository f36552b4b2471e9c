"""Stateful detector host binding the pure machine to timers and listeners."""

from __future__ import annotations

import logging

from inertia.api.detector import (
    DEFAULT_TUNING,
    DetectorSnapshot,
    DetectorTuning,
    EventBus,
    Phase,
    PhaseChanged,
    StickyDirectionChanged,
)
from inertia.api.events import ArmFallbackCheck, DetectorEffect, DetectorEvent, FallbackCheck
from inertia.api.logging import LoggerPort
from inertia.api.samples import Axis, Direction
from inertia.runtime.config import DetectorConfig
from inertia.runtime.machine import transition
from inertia.runtime.scheduler import Scheduler
from inertia.runtime.state import (
    DetectorState,
    create_state,
    live_direction_x,
    live_direction_y,
    phase_name,
    offset_x,
    offset_y,
    sticky_direction_x,
    sticky_direction_y,
)

_DEFAULT_LOGGER = logging.getLogger(__name__)


class RuntimeScrollDetector:
    """Owns one surface's detector state and executes the machine's effects."""

    def __init__(
        self,
        initial_left: int = 0,
        initial_top: int = 0,
        *,
        scheduler: Scheduler | None = None,
        event_bus: EventBus | None = None,
        tuning: DetectorTuning | None = None,
        trace_events: bool = False,
        logger: LoggerPort | None = None,
    ) -> None:
        self._state: DetectorState = create_state(initial_left, initial_top)
        self._scheduler = scheduler or Scheduler()
        self._event_bus = event_bus
        self._tuning = tuning or DEFAULT_TUNING
        self._trace_events = trace_events
        self._logger: LoggerPort = logger or _DEFAULT_LOGGER
        self._pending_checks: set[int] = set()
        self._torn_down = False

    @classmethod
    def from_config(
        cls,
        config: DetectorConfig,
        initial_left: int = 0,
        initial_top: int = 0,
        *,
        scheduler: Scheduler | None = None,
        event_bus: EventBus | None = None,
    ) -> RuntimeScrollDetector:
        """Build a detector using tuning and tracing from loaded configuration."""
        return cls(
            initial_left,
            initial_top,
            scheduler=scheduler,
            event_bus=event_bus,
            tuning=config.tuning,
            trace_events=config.trace_events,
        )

    @property
    def state(self) -> DetectorState:
        return self._state

    @property
    def phase(self) -> Phase:
        return phase_name(self._state)

    @property
    def scheduler(self) -> Scheduler:
        return self._scheduler

    @property
    def tuning(self) -> DetectorTuning:
        return self._tuning

    @property
    def torn_down(self) -> bool:
        return self._torn_down

    @property
    def pending_check_count(self) -> int:
        return len(self._pending_checks)

    @property
    def scroll_left(self) -> int:
        return offset_x(self._state)

    @property
    def scroll_top(self) -> int:
        return offset_y(self._state)

    @property
    def inertial_direction_x(self) -> Direction:
        return live_direction_x(self._state)

    @property
    def inertial_direction_y(self) -> Direction:
        return live_direction_y(self._state)

    @property
    def sticky_direction_x(self) -> Direction:
        return sticky_direction_x(self._state)

    @property
    def sticky_direction_y(self) -> Direction:
        return sticky_direction_y(self._state)

    def dispatch(self, event: DetectorEvent) -> DetectorState:
        """Feed one event through the machine and run any requested effects."""
        if self._torn_down:
            return self._state
        previous = self._state
        current, effects = transition(previous, event, tuning=self._tuning)
        self._state = current
        if self._trace_events:
            self._logger.debug(
                "detector_event type=%s phase=%s left=%d top=%d effects=%d",
                type(event).__name__,
                phase_name(current),
                offset_x(current),
                offset_y(current),
                len(effects),
            )
        for effect in effects:
            self._run_effect(effect)
        self._publish_changes(previous, current)
        return current

    def snapshot(self) -> DetectorSnapshot:
        """Return an immutable view of all observables."""
        state = self._state
        return DetectorSnapshot(
            phase=state.phase,
            scroll_left=offset_x(state),
            scroll_top=offset_y(state),
            inertial_direction_x=live_direction_x(state),
            inertial_direction_y=live_direction_y(state),
            sticky_direction_x=sticky_direction_x(state),
            sticky_direction_y=sticky_direction_y(state),
            last_timestamp=state.last_timestamp,
        )

    def teardown(self) -> None:
        """Cancel pending fallback checks and stop accepting events."""
        if self._torn_down:
            return
        for task_id in self._pending_checks:
            self._scheduler.cancel(task_id)
        self._pending_checks.clear()
        self._torn_down = True
        self._logger.debug("detector_teardown phase=%s", self._state.phase)

    def _run_effect(self, effect: DetectorEffect) -> None:
        if isinstance(effect, ArmFallbackCheck):
            self._arm_fallback_check(effect)

    def _arm_fallback_check(self, effect: ArmFallbackCheck) -> None:
        task_id = 0

        def _deliver() -> None:
            self._pending_checks.discard(task_id)
            self.dispatch(FallbackCheck(effect.correlation_timestamp))

        task_id = self._scheduler.call_later(effect.duration_ms, _deliver)
        self._pending_checks.add(task_id)

    def _publish_changes(self, previous: DetectorState, current: DetectorState) -> None:
        if previous.phase is not current.phase:
            self._logger.debug(
                "detector_phase_changed previous=%s current=%s ts=%d",
                phase_name(previous),
                phase_name(current),
                current.last_timestamp,
            )
            if self._event_bus is not None:
                self._event_bus.publish(
                    PhaseChanged(
                        previous=previous.phase,
                        current=current.phase,
                        timestamp=current.last_timestamp,
                    )
                )
        if self._event_bus is None:
            return
        for axis, before, after in (
            (Axis.X, previous.horizontal.sticky, current.horizontal.sticky),
            (Axis.Y, previous.vertical.sticky, current.vertical.sticky),
        ):
            if before is not after:
                self._event_bus.publish(
                    StickyDirectionChanged(
                        axis=axis,
                        previous=before,
                        current=after,
                        timestamp=current.last_timestamp,
                    )
                )


ScrollDetector = RuntimeScrollDetector
