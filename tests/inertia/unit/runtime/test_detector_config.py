from __future__ import annotations

import pytest

from inertia.api.logging import LoggingConfig
from inertia.runtime.config import load_detector_config, resolve_log_level_name

_ENV_NAMES = (
    "INERTIA_FALLBACK_DELAY_MS",
    "INERTIA_DRAG_RELEASE_THRESHOLD",
    "INERTIA_TRACE_EVENTS",
    "INERTIA_LOG_LEVEL",
    "INERTIA_LOG_FORMAT",
    "INERTIA_LOG_FILE",
    "LOG_LEVEL",
)


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch) -> None:
    for name in _ENV_NAMES:
        monkeypatch.delenv(name, raising=False)


def test_load_detector_config_defaults() -> None:
    cfg = load_detector_config()
    assert cfg.tuning.fallback_delay_ms == 300
    assert cfg.tuning.drag_release_threshold == 5
    assert cfg.trace_events is False
    assert cfg.log_level == "INFO"
    assert cfg.log_format == "text"
    assert cfg.log_file is None


def test_load_detector_config_parses_env(monkeypatch) -> None:
    monkeypatch.setenv("INERTIA_FALLBACK_DELAY_MS", "450")
    monkeypatch.setenv("INERTIA_DRAG_RELEASE_THRESHOLD", "8")
    monkeypatch.setenv("INERTIA_TRACE_EVENTS", "yes")
    monkeypatch.setenv("INERTIA_LOG_LEVEL", "debug")
    monkeypatch.setenv("INERTIA_LOG_FORMAT", "JSON")
    monkeypatch.setenv("INERTIA_LOG_FILE", "logs/inertia.log")

    cfg = load_detector_config()
    assert cfg.tuning.fallback_delay_ms == 450
    assert cfg.tuning.drag_release_threshold == 8
    assert cfg.trace_events is True
    assert cfg.log_level == "DEBUG"
    assert cfg.logging_config() == LoggingConfig(
        level_name="DEBUG",
        console_format="json",
        file_path="logs/inertia.log",
    )


def test_load_detector_config_clamps_and_ignores_invalid_values(monkeypatch) -> None:
    monkeypatch.setenv("INERTIA_FALLBACK_DELAY_MS", "-50")
    monkeypatch.setenv("INERTIA_DRAG_RELEASE_THRESHOLD", "zero")
    monkeypatch.setenv("INERTIA_LOG_FORMAT", "xml")

    cfg = load_detector_config()
    assert cfg.tuning.fallback_delay_ms == 0
    assert cfg.tuning.drag_release_threshold == 5
    assert cfg.log_format == "text"

    monkeypatch.setenv("INERTIA_DRAG_RELEASE_THRESHOLD", "0")
    assert load_detector_config().tuning.drag_release_threshold == 1


def test_resolve_log_level_prefers_package_prefix(monkeypatch) -> None:
    monkeypatch.setenv("LOG_LEVEL", "WARNING")
    assert resolve_log_level_name() == "WARNING"
    monkeypatch.setenv("INERTIA_LOG_LEVEL", "error")
    assert resolve_log_level_name() == "ERROR"
