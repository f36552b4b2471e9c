"""Detector configuration sourced from environment."""

from __future__ import annotations

import os
from dataclasses import dataclass, field

from inertia.api.detector import (
    DEFAULT_DRAG_RELEASE_THRESHOLD,
    DEFAULT_FALLBACK_DELAY_MS,
    DetectorTuning,
)
from inertia.api.logging import LoggingConfig


def _flag(name: str, default: bool = False) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    return raw.strip().lower() in {"1", "true", "yes", "on"}


def _int(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None:
        return default
    try:
        return int(raw)
    except ValueError:
        return default


def _choice(name: str, default: str, allowed: set[str]) -> str:
    raw = os.getenv(name)
    if raw is None:
        return default
    value = raw.strip().lower()
    return value if value in allowed else default


@dataclass(frozen=True, slots=True)
class DetectorConfig:
    """Immutable detector configuration."""

    tuning: DetectorTuning = field(default_factory=DetectorTuning)
    trace_events: bool = False
    log_level: str = "INFO"
    log_format: str = "text"
    log_file: str | None = None

    def logging_config(self) -> LoggingConfig:
        return LoggingConfig(
            level_name=self.log_level,
            console_format=self.log_format,
            file_path=self.log_file,
        )


def resolve_log_level_name(default: str = "INFO") -> str:
    """Resolve log level with package-prefixed override."""
    value = os.getenv("INERTIA_LOG_LEVEL")
    if value is None:
        value = os.getenv("LOG_LEVEL", default)
    return value.strip().upper()


def load_detector_config() -> DetectorConfig:
    """Load immutable detector configuration from env vars."""
    log_file = os.getenv("INERTIA_LOG_FILE", "").strip() or None
    return DetectorConfig(
        tuning=DetectorTuning(
            fallback_delay_ms=max(0, _int("INERTIA_FALLBACK_DELAY_MS", DEFAULT_FALLBACK_DELAY_MS)),
            drag_release_threshold=max(
                1, _int("INERTIA_DRAG_RELEASE_THRESHOLD", DEFAULT_DRAG_RELEASE_THRESHOLD)
            ),
        ),
        trace_events=_flag("INERTIA_TRACE_EVENTS", False),
        log_level=resolve_log_level_name(),
        log_format=_choice("INERTIA_LOG_FORMAT", "text", {"text", "json"}),
        log_file=log_file,
    )
