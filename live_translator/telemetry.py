from __future__ import annotations

import atexit
from datetime import datetime, timezone
import hashlib
import json
import logging
import logging.handlers
import os
from pathlib import Path
import queue
from typing import Final

_LOGGER_NAME: Final[str] = "live_translator.events"
_LOG_DIR_ENV: Final[str] = "LIVE_TRANSLATOR_LOG_DIR"
_LOG_ENABLED_ENV: Final[str] = "LIVE_TRANSLATOR_LOGGING"
_LOG_FILE_NAME: Final[str] = "live_translator.log"
_logger: logging.Logger | None = None
_listener: logging.handlers.QueueListener | None = None
_file_handler: logging.Handler | None = None


class EventFormatter(logging.Formatter):
    """Renders one JSON object per line from ``event``/``fields`` record extras."""

    def format(self, record: logging.LogRecord) -> str:
        payload: dict[str, object] = {
            "ts": datetime.fromtimestamp(record.created, timezone.utc).isoformat(
                timespec="milliseconds"
            ),
            "level": record.levelname.lower(),
            "event": getattr(record, "event", record.getMessage()),
            "pid": record.process,
            "thread": record.thread,
        }
        fields = getattr(record, "fields", None)
        if isinstance(fields, dict):
            payload.update(fields)
        return json.dumps(payload, ensure_ascii=True, separators=(",", ":"))


def log_path() -> Path:
    override = os.environ.get(_LOG_DIR_ENV, "").strip()
    if override:
        return Path(override) / _LOG_FILE_NAME
    return Path.home() / ".live_translator" / "logs" / _LOG_FILE_NAME


def setup(*, reset: bool) -> None:
    global _logger, _listener, _file_handler
    if not is_enabled() or _logger is not None:
        return
    path = log_path()
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(
            path, mode="w" if reset else "a", encoding="utf-8"
        )
    except OSError:
        return
    file_handler.setFormatter(EventFormatter())
    file_handler.setLevel(logging.INFO)
    record_queue: queue.SimpleQueue[logging.LogRecord] = queue.SimpleQueue()
    logger = logging.getLogger(_LOGGER_NAME)
    logger.setLevel(logging.INFO)
    logger.propagate = False
    logger.addHandler(logging.handlers.QueueHandler(record_queue))
    listener = logging.handlers.QueueListener(
        record_queue,
        file_handler,
        respect_handler_level=True,
    )
    listener.start()
    _logger = logger
    _listener = listener
    _file_handler = file_handler
    atexit.register(shutdown)


def shutdown() -> None:
    global _logger, _listener, _file_handler
    if _listener is not None:
        _listener.stop()
        _listener = None
    if _file_handler is not None:
        _file_handler.close()
        _file_handler = None
    if _logger is not None:
        _logger.handlers.clear()
        _logger = None


def log_event(event: str, **fields: object) -> None:
    _emit(logging.INFO, event, fields)


def log_error(event: str, exc: BaseException | None = None, **fields: object) -> None:
    if exc is not None:
        fields["error_type"] = exc.__class__.__name__
        fields["error"] = str(exc)
    _emit(logging.ERROR, event, fields)


def text_meta(value: str | None) -> dict[str, object]:
    """Length and digest of user text; the text itself is never logged."""
    if not value:
        return {"text_len": 0, "text_hash": ""}
    data = value.encode("utf-8", errors="ignore")
    return {"text_len": len(value), "text_hash": hashlib.sha256(data).hexdigest()}


def is_enabled() -> bool:
    return os.environ.get(_LOG_ENABLED_ENV, "1").strip() != "0"


def _emit(level: int, event: str, fields: dict[str, object]) -> None:
    if _logger is None:
        setup(reset=False)
    logger = _logger
    if logger is None or not logger.isEnabledFor(level):
        return
    logger.log(
        level,
        event,
        extra={"event": event, "fields": _sanitize_fields(fields)},
    )


def _sanitize_fields(fields: dict[str, object]) -> dict[str, object]:
    sanitized: dict[str, object] = {}
    for key, value in fields.items():
        if isinstance(value, (str, int, float, bool)) or value is None:
            sanitized[key] = value
        else:
            sanitized[key] = str(value)
    return sanitized
