from __future__ import annotations

import pytest

from inertia.runtime.detector import RuntimeScrollDetector
from inertia.runtime.events import RuntimeEventBus
from inertia.runtime.scheduler import Scheduler
from tests.inertia.helpers import FakeElement


@pytest.fixture
def element() -> FakeElement:
    return FakeElement()


@pytest.fixture
def scheduler() -> Scheduler:
    return Scheduler()


@pytest.fixture
def event_bus() -> RuntimeEventBus:
    return RuntimeEventBus()


@pytest.fixture
def detector(scheduler: Scheduler, event_bus: RuntimeEventBus) -> RuntimeScrollDetector:
    return RuntimeScrollDetector(scheduler=scheduler, event_bus=event_bus)
