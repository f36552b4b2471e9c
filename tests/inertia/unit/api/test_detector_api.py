from __future__ import annotations

import pytest

from inertia.api.detector import (
    DEFAULT_TUNING,
    DetectorTuning,
    Phase,
    PhaseChanged,
    create_event_bus,
)
from inertia.api.samples import AxisSample, make_sample


def test_default_tuning_preserves_empirical_values() -> None:
    assert DEFAULT_TUNING.fallback_delay_ms == 300
    assert DEFAULT_TUNING.drag_release_threshold == 5


def test_tuning_validates_bounds() -> None:
    assert DetectorTuning(fallback_delay_ms=0, drag_release_threshold=1).fallback_delay_ms == 0
    with pytest.raises(ValueError):
        DetectorTuning(fallback_delay_ms=-1)
    with pytest.raises(ValueError):
        DetectorTuning(drag_release_threshold=0)


def test_axis_sample_upper_bound() -> None:
    assert AxisSample(extent=1000, offset=10, viewport=100).upper_bound == 900
    assert AxisSample(extent=50, offset=0, viewport=100).upper_bound == -50


def test_make_sample_maps_element_metrics_to_axes() -> None:
    sample = make_sample(
        left=1, top=2, timestamp=3, width=4, height=5, viewport_width=6, viewport_height=7
    )
    assert sample.x == AxisSample(extent=4, offset=1, viewport=6)
    assert sample.y == AxisSample(extent=5, offset=2, viewport=7)
    assert sample.timestamp == 3


def test_create_event_bus_returns_working_bus() -> None:
    bus = create_event_bus()
    seen: list[PhaseChanged] = []
    subscription = bus.subscribe(PhaseChanged, seen.append)
    event = PhaseChanged(previous=Phase.MOMENTUM, current=Phase.IDLE, timestamp=9)

    assert bus.publish(event) == 1
    bus.unsubscribe(subscription)
    assert bus.publish(event) == 0
    assert seen == [event]
