"""Inertial scroll lifecycle transition function.

`transition` is pure and total: every (state, event) pair yields a new state
plus a tuple of requested effects, and nothing is ever raised. Timing is
expressed as an `ArmFallbackCheck` effect; the host runs the timer and
feeds the resulting `FallbackCheck` back through `transition`.
"""

from __future__ import annotations

from dataclasses import replace
from typing import TypeAlias

from inertia.api.detector import DEFAULT_TUNING, DetectorTuning
from inertia.api.events import (
    ArmFallbackCheck,
    DetectorEffect,
    DetectorEvent,
    FallbackCheck,
    Scroll,
    ScrollEnd,
    TouchEnd,
    TouchMove,
    TouchStart,
)
from inertia.api.samples import AxisSample, Direction, Sample
from inertia.runtime.state import (
    AxisTrack,
    DetectorState,
    Dragging,
    Idle,
    Momentum,
    MomentumStarting,
    Touching,
)

Transition: TypeAlias = tuple[DetectorState, tuple[DetectorEffect, ...]]

_NO_EFFECTS: tuple[DetectorEffect, ...] = ()


def derive_direction(track: AxisTrack, axis_sample: AxisSample) -> Direction:
    """Direction of travel from the tracked offset to the sampled one.

    At or beyond either scroll bound the previous direction is kept, since
    rubber-band bounce reports oscillating offsets there.
    """
    if axis_sample.offset <= 0 or axis_sample.offset >= axis_sample.upper_bound:
        return track.direction
    delta = axis_sample.offset - track.offset
    if delta < 0:
        return Direction.NEGATIVE
    if delta > 0:
        return Direction.POSITIVE
    return Direction.STILL


def merge_sticky(previous: Direction, current: Direction) -> Direction:
    """Keep the newest non-STILL direction."""
    if previous is Direction.STILL:
        return current
    if current is Direction.STILL:
        return previous
    return current


def transition(
    state: DetectorState,
    event: DetectorEvent,
    *,
    tuning: DetectorTuning = DEFAULT_TUNING,
) -> Transition:
    """Advance the lifecycle by one event."""
    if isinstance(event, FallbackCheck):
        return _on_fallback_check(state, event), _NO_EFFECTS
    sample = event.sample
    if isinstance(event, Scroll) and sample.timestamp == state.last_timestamp:
        return state, _NO_EFFECTS

    if isinstance(state, Idle):
        if isinstance(event, TouchStart):
            return _enter(Touching, state, sample), _NO_EFFECTS
        if isinstance(event, TouchMove):
            return _enter(Dragging, state, sample), _NO_EFFECTS
        return _enter(Idle, state, sample), _NO_EFFECTS

    if isinstance(state, Touching):
        if isinstance(event, TouchMove):
            return _enter(Dragging, state, sample), _NO_EFFECTS
        if isinstance(event, TouchEnd):
            return _enter(Idle, state, sample), _NO_EFFECTS
    elif isinstance(state, Dragging):
        if isinstance(event, TouchEnd):
            return _release(state, sample), _NO_EFFECTS
        if isinstance(event, Scroll) and state.sample_count > tuning.drag_release_threshold:
            # touchend never arrived; this sample is both release and first momentum reading
            return _confirm(_release(state, sample), sample), _arm(sample, tuning)
    elif isinstance(state, MomentumStarting):
        if isinstance(event, Scroll):
            return _confirm(state, sample), _arm(sample, tuning)
        if isinstance(event, TouchStart):
            return _enter(Touching, state, sample), _NO_EFFECTS
    elif isinstance(state, Momentum):
        if isinstance(event, Scroll):
            return _advance_momentum(state, sample), _arm(sample, tuning)
        if isinstance(event, ScrollEnd):
            return _enter(Idle, state, sample), _NO_EFFECTS
        if isinstance(event, TouchStart):
            return _enter(Touching, state, sample), _NO_EFFECTS

    return _refresh(state, sample), _NO_EFFECTS


def _arm(sample: Sample, tuning: DetectorTuning) -> tuple[DetectorEffect, ...]:
    """Every momentum scroll sample restarts the missing-scrollend fallback."""
    return (
        ArmFallbackCheck(
            duration_ms=tuning.fallback_delay_ms,
            correlation_timestamp=sample.timestamp,
        ),
    )


def _on_fallback_check(state: DetectorState, event: FallbackCheck) -> DetectorState:
    if not isinstance(state, Momentum):
        return state
    if event.timestamp < state.last_timestamp:
        return state
    return Idle(
        horizontal=_settle(state.horizontal, state.horizontal.offset),
        vertical=_settle(state.vertical, state.vertical.offset),
        sample_count=1,
        last_timestamp=max(state.last_timestamp, event.timestamp),
    )


def _settle(track: AxisTrack, offset: int) -> AxisTrack:
    return AxisTrack(offset=offset, direction=Direction.STILL, sticky=track.sticky)


def _enter(
    target: type[Idle] | type[Touching] | type[Dragging],
    state: DetectorState,
    sample: Sample,
) -> DetectorState:
    return target(
        horizontal=_settle(state.horizontal, sample.x.offset),
        vertical=_settle(state.vertical, sample.y.offset),
        sample_count=1,
        last_timestamp=sample.timestamp,
    )


def _refresh(state: DetectorState, sample: Sample) -> DetectorState:
    return replace(
        state,
        horizontal=replace(state.horizontal, offset=sample.x.offset),
        vertical=replace(state.vertical, offset=sample.y.offset),
        sample_count=state.sample_count + 1,
        last_timestamp=sample.timestamp,
    )


def _track(track: AxisTrack, axis_sample: AxisSample) -> AxisTrack:
    direction = derive_direction(track, axis_sample)
    return AxisTrack(
        offset=axis_sample.offset,
        direction=direction,
        sticky=merge_sticky(track.sticky, direction),
    )


def _release(state: Dragging, sample: Sample) -> MomentumStarting:
    return MomentumStarting(
        horizontal=_track(state.horizontal, sample.x),
        vertical=_track(state.vertical, sample.y),
        sample_count=1,
        last_timestamp=sample.timestamp,
    )


def _confirm(state: MomentumStarting, sample: Sample) -> Momentum:
    return Momentum(
        horizontal=_track(state.horizontal, sample.x),
        vertical=_track(state.vertical, sample.y),
        sample_count=1,
        last_timestamp=sample.timestamp,
    )


def _advance_momentum(state: Momentum, sample: Sample) -> Momentum:
    return Momentum(
        horizontal=_track(state.horizontal, sample.x),
        vertical=_track(state.vertical, sample.y),
        sample_count=state.sample_count + 1,
        last_timestamp=sample.timestamp,
    )
