"""Environment-driven detector composition for embedding applications."""

from __future__ import annotations

import logging

from inertia.api.detector import EventBus
from inertia.runtime.config import DetectorConfig, load_detector_config
from inertia.runtime.detector import RuntimeScrollDetector
from inertia.runtime.logging import configure_logging
from inertia.runtime.scheduler import Scheduler


def bootstrap_detector(
    initial_left: int = 0,
    initial_top: int = 0,
    *,
    scheduler: Scheduler | None = None,
    event_bus: EventBus | None = None,
    config: DetectorConfig | None = None,
) -> RuntimeScrollDetector:
    """Build a detector from `INERTIA_*` settings, installing logging on first use.

    Root handlers already installed by the application are left alone.
    """
    resolved = config or load_detector_config()
    if not logging.getLogger().handlers:
        configure_logging(resolved.logging_config())
    return RuntimeScrollDetector.from_config(
        resolved,
        initial_left,
        initial_top,
        scheduler=scheduler,
        event_bus=event_bus,
    )
