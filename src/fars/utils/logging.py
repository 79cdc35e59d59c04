"""Centralized JSON formatter and logging setup for the ``fars`` logger."""

import json
import logging
import sys
from datetime import datetime
from typing import Any, Dict, Optional, Union

_RESERVED_ATTRS = {
    "msg", "args", "levelname", "levelno", "pathname", "filename",
    "module", "exc_info", "exc_text", "stack_info", "lineno",
    "funcName", "created", "msecs", "relativeCreated", "thread",
    "threadName", "processName", "process", "name", "message",
    "taskName",
}

_TEXT_FORMAT = "%(levelname)s %(name)s: %(message)s"

_LOGGER_NAME = "fars"

# Handler installed by configure_logging(), if any
_handler: Optional[logging.Handler] = None


class JsonFormatter(logging.Formatter):
    """Emit log records as single-line JSON objects.

    Merges any `extra=` kwargs directly into the payload.
    """

    def format(self, record: logging.LogRecord) -> str:
        payload: Dict[str, Any] = {
            "ts": datetime.fromtimestamp(record.created).isoformat() + "Z",
            "level": record.levelname,
            "logger": record.name,
            "msg": record.getMessage(),
        }

        if record.exc_info:
            payload["exc"] = self.formatException(record.exc_info)

        # Merge any extra fields passed via log.warning(..., extra={...})
        for key, value in getattr(record, "__dict__", {}).items():
            if key not in _RESERVED_ATTRS:
                payload[key] = value

        return json.dumps(payload, default=str)


def configure_logging(
    level: Union[int, str] = logging.WARNING,
    json_format: bool = False,
) -> logging.Logger:
    """Attach a single stderr handler to the package logger.

    Calling it again replaces the previous handler rather than stacking.
    Propagation to the root logger is switched off while the handler is
    installed, so records are not emitted twice.

    Args:
        level: Logging level name or number.
        json_format: Use ``JsonFormatter`` instead of plain text.

    Returns:
        The configured ``fars`` logger.
    """
    global _handler

    logger = reset_logging()
    if isinstance(level, str):
        level = level.upper()
    logger.setLevel(level)

    _handler = logging.StreamHandler(sys.stderr)
    _handler.setFormatter(
        JsonFormatter() if json_format else logging.Formatter(_TEXT_FORMAT)
    )
    logger.addHandler(_handler)
    logger.propagate = False
    return logger


def reset_logging() -> logging.Logger:
    """Remove the handler installed by ``configure_logging`` and restore
    the package logger's defaults (level NOTSET, propagation on)."""
    global _handler

    logger = logging.getLogger(_LOGGER_NAME)
    if _handler is not None:
        logger.removeHandler(_handler)
        _handler = None
    logger.setLevel(logging.NOTSET)
    logger.propagate = True
    return logger
