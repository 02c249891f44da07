# libs/observability/logging.py
from __future__ import annotations

import logging
import structlog

_CONFIGURED = False

# uvicorn only understands these names; anything in between rounds down
_UVICORN_LEVELS = (
    (logging.CRITICAL, "critical"),
    (logging.ERROR, "error"),
    (logging.WARNING, "warning"),
    (logging.INFO, "info"),
)


def level_number(level: str | int) -> int:
    """'INFO' / 'warn' / 20 -> stdlib level number; unknown names fall back to INFO."""
    if isinstance(level, int):
        return level
    lvl = logging.getLevelName(str(level).strip().upper())
    return lvl if isinstance(lvl, int) else logging.INFO


def uvicorn_level(level: str | int) -> str:
    """Map any stdlib-style level (WARN, FATAL, 25, ...) onto a uvicorn log_level name."""
    lvl = level_number(level)
    for threshold, name in _UVICORN_LEVELS:
        if lvl >= threshold:
            return name
    return "debug"


def setup_logging(level: str | int = "INFO", *, json: bool = True) -> None:
    """
    stdlib logging + structlog, configured once per process.

    json=False swaps the JSON renderer for structlog's console renderer
    (local runs); job events carry the same keys either way.
    """
    global _CONFIGURED
    if _CONFIGURED:
        return

    lvl = level_number(level)
    logging.basicConfig(level=lvl, format="%(message)s")

    renderer = structlog.processors.JSONRenderer() if json else structlog.dev.ConsoleRenderer()
    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.processors.TimeStamper(fmt="iso", utc=True),
            structlog.processors.format_exc_info,
            renderer,
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )
    _CONFIGURED = True


def get_logger(name: str | None = None, **initial):
    """structlog logger for `name` (stdlib logger name), bound with initial context."""
    log = structlog.get_logger(name) if name else structlog.get_logger()
    return log.bind(**initial)
