"""Public scroll sample types."""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum


class Direction(StrEnum):
    """Movement direction along one scroll axis."""

    NEGATIVE = "NEGATIVE"
    POSITIVE = "POSITIVE"
    STILL = "STILL"


class Axis(StrEnum):
    """Scroll axis identifier."""

    X = "X"
    Y = "Y"


@dataclass(frozen=True, slots=True)
class AxisSample:
    """One scroll axis reading taken from the scrollable element."""

    extent: int
    offset: int
    viewport: int

    @property
    def upper_bound(self) -> int:
        """Largest offset reachable without overscroll."""
        return self.extent - self.viewport


@dataclass(frozen=True, slots=True)
class Sample:
    """Both axis readings plus the event timestamp in milliseconds."""

    x: AxisSample
    y: AxisSample
    timestamp: int


def make_sample(
    *,
    left: int = 0,
    top: int = 0,
    timestamp: int = 0,
    width: int = 0,
    height: int = 0,
    viewport_width: int = 0,
    viewport_height: int = 0,
) -> Sample:
    """Build a sample from element-style scroll metrics."""
    return Sample(
        x=AxisSample(extent=width, offset=left, viewport=viewport_width),
        y=AxisSample(extent=height, offset=top, viewport=viewport_height),
        timestamp=timestamp,
    )


__all__ = ["Axis", "AxisSample", "Direction", "Sample", "make_sample"]
