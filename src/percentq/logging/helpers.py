from __future__ import annotations

"""Small logging helpers to standardize percentq logger names, configuration and tracing.

This module provides:
    - JsonLogFormatter: JSON log formatter with stable fields and optional context.
    - setup_base_logger: Configuration of the 'percentq' base logger.
    - get_logger: Namespaced logger factory ('percentq.*').
    - trace utilities gated by PERCENTQ_TRACE.

Library modules only obtain loggers here; handlers are installed by the
CLI (or by the embedding application).
"""

import logging
import os
import sys
from typing import TYPE_CHECKING, Optional, TextIO

if TYPE_CHECKING:
    from percentq.core.interfaces.logging import LoggerLikeProtocol

BASE_LOGGER = "percentq"


class JsonLogFormatter(logging.Formatter):
    """Emit logs as compact JSON with a fixed schema.

    Fields:
        - ts: ISO-8601 timestamp in UTC with millisecond precision.
        - level: Log level name.
        - module: Logger name (e.g., 'percentq.render').
        - msg: Formatted message string.
        - version: percentq.__version__ (fixed per formatter instance).
        - ctx: Optional dictionary attached to the record as 'context'.
    """

    def __init__(self) -> None:
        super().__init__()
        self._version = self._resolve_version()

    @staticmethod
    def _resolve_version() -> str:
        try:
            # Imported lazily: percentq/__init__ imports this module.
            from percentq import __version__ as _v
            return str(_v)
        except ImportError:
            return os.getenv("PERCENTQ_VERSION", "unknown")

    def format(self, record: logging.LogRecord) -> str:
        from datetime import datetime, timezone
        import json

        ts = datetime.fromtimestamp(record.created, tz=timezone.utc)
        ts_str = ts.isoformat(timespec="milliseconds").replace("+00:00", "Z")

        payload = {
            "ts": ts_str,
            "level": record.levelname,
            "module": record.name,
            "msg": record.getMessage(),
            "version": self._version,
        }

        ctx = getattr(record, "context", None)
        if isinstance(ctx, dict) and ctx:
            payload["ctx"] = ctx

        return json.dumps(payload, ensure_ascii=False)


_OWN_HANDLER_ATTR = "_percentq_handler"


def setup_base_logger(
    *, json_logs: bool = False, level: int = logging.INFO, stream: Optional[TextIO] = None
) -> logging.Logger:
    """Configure the base 'percentq' logger and return it.

    Handlers installed by an earlier call are replaced, so switching between
    JSON and plain text takes effect. Handlers owned by someone else (the
    embedding application, a test capture) are left alone and only the
    level is updated.

    Args:
        json_logs: If True, configure a JSON formatter, else plain text.
        level: Logging level for the base logger.
        stream: Optional stream (stderr by default).

    Returns:
        The configured base logger.
    """
    base = logging.getLogger(BASE_LOGGER)
    base.setLevel(level)

    own = [h for h in base.handlers if getattr(h, _OWN_HANDLER_ATTR, False)]
    if base.handlers and not own:
        return base
    for h in own:
        base.removeHandler(h)

    base.propagate = False

    handler = logging.StreamHandler(stream or sys.stderr)
    if json_logs:
        handler.setFormatter(JsonLogFormatter())
    else:
        handler.setFormatter(logging.Formatter("%(levelname)s: %(message)s"))
    setattr(handler, _OWN_HANDLER_ATTR, True)
    base.addHandler(handler)

    return base


def get_logger(name: str | None = None) -> logging.Logger:
    """Return a namespaced logger under 'percentq'."""
    if not name or name == BASE_LOGGER:
        return logging.getLogger(BASE_LOGGER)
    if name.startswith(BASE_LOGGER + "."):
        return logging.getLogger(name)
    return logging.getLogger(f"{BASE_LOGGER}.{name}")


def is_trace_enabled() -> bool:
    """Check if tracing is enabled via env flag."""
    return os.getenv("PERCENTQ_TRACE") == "1"


def trace(logger: LoggerLikeProtocol, message: str, **ctx) -> None:
    """Emit debug-verbosity trace messages only when enabled.

    Args:
        logger: Target logger.
        message: Human-readable description.
        **ctx: Structured context, attached to the record as 'context'.
    """
    if not is_trace_enabled() or not logger.isEnabledFor(logging.DEBUG):
        return
    if ctx:
        logger.debug("%s | ctx=%r", message, ctx, extra={"context": ctx})
    else:
        logger.debug("%s", message)
