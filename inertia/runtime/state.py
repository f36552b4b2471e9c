"""Detector state variants and read accessors."""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar

from inertia.api.detector import Phase
from inertia.api.samples import Direction


@dataclass(frozen=True, slots=True)
class AxisTrack:
    """Per-axis offset and direction bookkeeping."""

    offset: int
    direction: Direction = Direction.STILL
    sticky: Direction = Direction.STILL


@dataclass(frozen=True, slots=True)
class _PhaseState:
    horizontal: AxisTrack
    vertical: AxisTrack
    sample_count: int
    last_timestamp: int

    phase: ClassVar[Phase]


@dataclass(frozen=True, slots=True)
class Idle(_PhaseState):
    """No interaction in progress."""

    phase: ClassVar[Phase] = Phase.IDLE


@dataclass(frozen=True, slots=True)
class Touching(_PhaseState):
    """Finger down, not yet moved."""

    phase: ClassVar[Phase] = Phase.TOUCHING


@dataclass(frozen=True, slots=True)
class Dragging(_PhaseState):
    """Finger moving the content."""

    phase: ClassVar[Phase] = Phase.DRAGGING


@dataclass(frozen=True, slots=True)
class MomentumStarting(_PhaseState):
    """Finger released after a drag; momentum not yet confirmed by a scroll."""

    phase: ClassVar[Phase] = Phase.MOMENTUM_STARTING


@dataclass(frozen=True, slots=True)
class Momentum(_PhaseState):
    """Content moving under platform physics."""

    phase: ClassVar[Phase] = Phase.MOMENTUM


DetectorState = Idle | Touching | Dragging | MomentumStarting | Momentum


def create_state(initial_left: int, initial_top: int) -> DetectorState:
    """Build the idle state a surface starts in."""
    return Idle(
        horizontal=AxisTrack(offset=initial_left),
        vertical=AxisTrack(offset=initial_top),
        sample_count=0,
        last_timestamp=-1,
    )


def phase_name(state: DetectorState) -> Phase:
    return state.phase


def offset_x(state: DetectorState) -> int:
    return state.horizontal.offset


def offset_y(state: DetectorState) -> int:
    return state.vertical.offset


def live_direction_x(state: DetectorState) -> Direction:
    """Horizontal direction while momentum is confirmed, else STILL."""
    if isinstance(state, Momentum):
        return state.horizontal.direction
    return Direction.STILL


def live_direction_y(state: DetectorState) -> Direction:
    """Vertical direction while momentum is confirmed, else STILL."""
    if isinstance(state, Momentum):
        return state.vertical.direction
    return Direction.STILL


def sticky_direction_x(state: DetectorState) -> Direction:
    return state.horizontal.sticky


def sticky_direction_y(state: DetectorState) -> Direction:
    return state.vertical.sticky
