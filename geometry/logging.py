"""Log formatting and handler setup for geometry diagnostics.

Library modules log through ``logging.getLogger(__name__)`` and attach
structured context (grid dimensions, rejection reasons) via ``extra``. The
formatters here surface those fields: JSON output nests them under
``fields`` and text output appends them as ``key=value`` pairs.
"""

from __future__ import annotations

import logging
import queue
from datetime import UTC, datetime
from logging.handlers import QueueHandler, QueueListener
from pathlib import Path

import numpy as np
import orjson

from geometry.config import GeometryConfig, load_config

_QUEUE_LISTENER: QueueListener | None = None

_RECORD_ATTRIBUTES = frozenset(
    logging.LogRecord("", logging.NOTSET, "", 0, "", None, None).__dict__
) | {"message", "asctime"}


def record_fields(record: logging.LogRecord) -> dict[str, object]:
    """Return the ``extra`` fields attached to a record."""
    return {k: v for k, v in record.__dict__.items() if k not in _RECORD_ATTRIBUTES}


def _json_default(value: object) -> object:
    if isinstance(value, np.generic):
        return value.item()
    return str(value)


class JsonFormatter(logging.Formatter):
    """One JSON object per record; ``extra`` fields land under ``fields``."""

    def format(self, record: logging.LogRecord) -> str:
        payload: dict[str, object] = {
            "ts": datetime.fromtimestamp(record.created, UTC).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "msg": record.getMessage(),
        }
        fields = record_fields(record)
        if fields:
            payload["fields"] = fields
        if record.exc_info:
            payload["exc_info"] = self.formatException(record.exc_info)
        return orjson.dumps(payload, default=_json_default, option=orjson.OPT_SORT_KEYS).decode()


class KeyValueFormatter(logging.Formatter):
    """Plain-text formatter that appends ``extra`` fields as ``key=value``."""

    def __init__(self) -> None:
        super().__init__("%(asctime)s %(levelname)s %(name)s: %(message)s")

    def format(self, record: logging.LogRecord) -> str:
        line = super().format(record)
        fields = record_fields(record)
        if not fields:
            return line
        return line + " | " + " ".join(f"{key}={fields[key]}" for key in sorted(fields))


def _formatter(kind: str) -> logging.Formatter:
    return JsonFormatter() if kind == "json" else KeyValueFormatter()


def configure_logging(config: GeometryConfig) -> None:
    """Install console (and optional queued file) handlers on the root logger."""
    global _QUEUE_LISTENER

    if _QUEUE_LISTENER is not None:
        _QUEUE_LISTENER.stop()
        _QUEUE_LISTENER = None

    console_handler = logging.StreamHandler()
    console_handler.setFormatter(_formatter(config.console_format))
    handlers: list[logging.Handler] = [console_handler]

    if config.file_path:
        file_path = Path(config.file_path)
        file_path.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(file_path, mode="a", encoding="utf-8", delay=True)
        file_handler.setFormatter(_formatter(config.file_format))
        handlers.append(file_handler)

    root = logging.getLogger()
    root.handlers.clear()
    root.setLevel(getattr(logging, config.log_level_name.upper(), logging.INFO))

    if len(handlers) == 1:
        root.addHandler(console_handler)
        return

    # File writes happen on the listener thread.
    log_queue: queue.SimpleQueue[logging.LogRecord] = queue.SimpleQueue()
    root.addHandler(QueueHandler(log_queue))
    _QUEUE_LISTENER = QueueListener(log_queue, *handlers, respect_handler_level=True)
    _QUEUE_LISTENER.start()


def setup_logging() -> None:
    """Configure logging from the environment unless handlers already exist."""
    if logging.getLogger().handlers:
        return
    configure_logging(load_config())


__all__ = ["JsonFormatter", "KeyValueFormatter", "configure_logging", "record_fields", "setup_logging"]
