"""Detector logging setup: text console output, optional JSON file stream."""

from __future__ import annotations

import json
import logging
import queue
from datetime import UTC, datetime
from logging.handlers import QueueHandler, QueueListener
from pathlib import Path

from inertia.api.logging import LoggingConfig
from inertia.runtime.config import resolve_log_level_name

_TEXT_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"

# Attributes every LogRecord carries; anything else arrived through `extra=`.
_RECORD_ATTRIBUTES = frozenset(
    vars(logging.LogRecord("", logging.NOTSET, "", 0, "", None, None))
) | {"message", "asctime"}

_listener: QueueListener | None = None


class JsonFormatter(logging.Formatter):
    """One JSON object per record; `extra=` values go under `fields`."""

    def format(self, record: logging.LogRecord) -> str:
        document: dict[str, object] = {
            "ts": datetime.fromtimestamp(record.created, UTC).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "msg": record.getMessage(),
        }
        fields = {
            key: value for key, value in vars(record).items() if key not in _RECORD_ATTRIBUTES
        }
        if fields:
            document["fields"] = fields
        if record.exc_info:
            document["exc_info"] = self.formatException(record.exc_info)
        return json.dumps(document, ensure_ascii=True, default=str)


def configure_logging(config: LoggingConfig) -> None:
    """Replace root handlers according to `config`.

    With a file path the console and file handlers run on a background
    `QueueListener` so file writes never happen on the dispatching thread.
    """
    global _listener

    shutdown_logging()
    sinks = _build_sinks(config)
    root = logging.getLogger()
    root.handlers.clear()
    root.setLevel(getattr(logging, config.level_name.upper(), logging.INFO))

    if len(sinks) == 1:
        root.addHandler(sinks[0])
        return

    records: queue.SimpleQueue[logging.LogRecord] = queue.SimpleQueue()
    root.addHandler(QueueHandler(records))
    _listener = QueueListener(records, *sinks, respect_handler_level=True)
    _listener.start()


def setup_logging() -> None:
    """Install console logging unless the embedding application already did."""
    if logging.getLogger().handlers:
        return
    configure_logging(LoggingConfig(level_name=resolve_log_level_name(default="INFO")))


def shutdown_logging() -> None:
    """Flush and stop the background listener, if one is running."""
    global _listener

    if _listener is not None:
        _listener.stop()
        _listener = None


def _build_sinks(config: LoggingConfig) -> list[logging.Handler]:
    console = logging.StreamHandler()
    console.setFormatter(_formatter(config.console_format))
    sinks: list[logging.Handler] = [console]
    if config.file_path:
        path = Path(config.file_path)
        path.parent.mkdir(parents=True, exist_ok=True)
        file_sink = logging.FileHandler(path, mode="a", encoding="utf-8", delay=True)
        file_sink.setFormatter(_formatter(config.file_format))
        sinks.append(file_sink)
    return sinks


def _formatter(kind: str) -> logging.Formatter:
    if kind.strip().lower() == "json":
        return JsonFormatter()
    return logging.Formatter(_TEXT_FORMAT)
