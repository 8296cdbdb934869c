"""Structured logging for the dispatch engine."""

from __future__ import annotations

import json
import logging
from datetime import datetime
from pathlib import Path
from typing import TYPE_CHECKING, Any

from .constants import (
    EVENT_CASE_OVERRIDDEN,
    EVENT_CASE_RESOLVED,
    EVENT_CASE_UNMATCHED,
    EVENT_TABLE_BUILT,
    LOGGER_NAME,
)

if TYPE_CHECKING:
    from .config import DispatchConfig

logger = logging.getLogger(LOGGER_NAME)


class StructuredTextFormatter(logging.Formatter):
    """Render a log_event payload as an ``=== event ===`` block, one field per line.

    Records that are not JSON payloads are shown under the logger name with
    their text as ``message``.
    """

    EVENT_KEY_ORDER: dict[str, tuple[str, ...]] = {
        EVENT_TABLE_BUILT: ("case_count", "registration_count"),
        EVENT_CASE_OVERRIDDEN: ("case_name", "previous_handler", "handler"),
        EVENT_CASE_RESOLVED: ("case_name", "handler"),
        EVENT_CASE_UNMATCHED: ("case_name", "known_cases"),
    }
    LEADING_KEYS = ("ts", "level")

    def format(self, record: logging.LogRecord) -> str:
        message = record.getMessage()
        try:
            payload = json.loads(message)
        except ValueError:
            payload = None
        if not isinstance(payload, dict):
            payload = {"event": record.name, "message": message}

        fields: dict[str, Any] = {
            "ts": datetime.fromtimestamp(record.created).astimezone().isoformat(),
            "level": record.levelname,
            "logger": record.name,
        }
        fields.update(payload)
        event = str(fields.pop("event"))

        known = self.LEADING_KEYS + self.EVENT_KEY_ORDER.get(event, ())
        keys = [k for k in known if k in fields]
        keys += sorted(k for k in fields if k not in known)

        lines = [f"=== {event} ==="]
        lines += [f"{k}: {_one_line(fields[k])}" for k in keys if fields[k] is not None]
        if record.exc_info:
            lines.append("traceback:")
            lines.append(self.formatException(record.exc_info))
        return "\n".join(lines)


def _one_line(value: Any) -> str:
    return str(value).replace("\n", "\\n")


def _to_log_safe(value: Any) -> Any:
    """Convert values to JSON-serializable, log-safe representations."""
    if value is None or isinstance(value, (str, int, float, bool)):
        return value
    if isinstance(value, Path):
        return str(value)
    if isinstance(value, dict):
        return {str(k): _to_log_safe(v) for k, v in value.items()}
    if isinstance(value, (list, tuple, set, frozenset)):
        return [_to_log_safe(v) for v in value]
    return repr(value)


def describe_callable(fn: Any) -> str:
    """Return a short, stable label for a handler in log output."""
    return getattr(fn, "__qualname__", None) or getattr(fn, "__name__", None) or repr(fn)


def log_event(event: str, level: int = logging.DEBUG, **fields: Any) -> None:
    """Emit a structured log event on the package logger."""
    if not logger.isEnabledFor(level):
        return
    payload: dict[str, Any] = {
        "ts": datetime.now().astimezone().isoformat(),
        "event": event,
    }
    for key, value in fields.items():
        payload[key] = _to_log_safe(value)
    logger.log(level, json.dumps(payload, ensure_ascii=False, separators=(",", ":")))


def _is_installed_handler(handler: logging.Handler) -> bool:
    return isinstance(handler, logging.FileHandler) and isinstance(
        handler.formatter, StructuredTextFormatter
    )


def setup_logging(config: DispatchConfig) -> logging.Handler | None:
    """Point the package logger at the configured log file.

    Replaces the file handler from any earlier call, so calling again with
    ``log_file=None`` turns file logging off. Returns the installed handler,
    or None when no log file is configured.
    """
    for old in [h for h in logger.handlers if _is_installed_handler(h)]:
        logger.removeHandler(old)
        old.close()

    logger.setLevel(config.log_level)
    if config.log_file is None:
        return None

    log_path = Path(config.log_file).expanduser()
    log_path.parent.mkdir(parents=True, exist_ok=True)
    handler = logging.FileHandler(str(log_path), encoding="utf-8")
    # Blank line between entries.
    handler.terminator = "\n\n"
    handler.setFormatter(StructuredTextFormatter())
    logger.addHandler(handler)
    return handler
