"""
Structured logging setup using structlog.

Debug, info and warning events from ffxl loggers are only emitted in
development mode; errors are always emitted.
"""

import logging
from typing import Any

import structlog
from pydantic import ValidationError

from ffxl.environment import is_development
from ffxl.settings import LogFormat, Settings, get_settings

LOGGER_NAMESPACE = "ffxl"

_DEVELOPMENT_ONLY_METHODS = frozenset({"debug", "info", "warning", "warn"})


def development_only(logger: Any, method_name: str, event_dict: dict[str, Any]) -> dict[str, Any]:
    """Drop non-error ffxl events outside development mode."""
    name = getattr(logger, "name", None) or event_dict.get("logger") or ""
    if not name.startswith(LOGGER_NAMESPACE):
        return event_dict
    if method_name in _DEVELOPMENT_ONLY_METHODS and not is_development():
        raise structlog.DropEvent
    return event_dict


def configure_stdlib_logger(development: bool) -> logging.Logger:
    """Open the ffxl stdlib logger up to debug events in development mode.

    A stderr handler is attached only when the application has not set up
    logging handlers of its own.
    """
    stdlib_logger = logging.getLogger(LOGGER_NAMESPACE)
    if not development:
        return stdlib_logger

    stdlib_logger.setLevel(logging.DEBUG)
    has_handler = any(h.get_name() == LOGGER_NAMESPACE for h in stdlib_logger.handlers)
    if not has_handler and not logging.getLogger().handlers:
        handler = logging.StreamHandler()
        handler.set_name(LOGGER_NAMESPACE)
        handler.setFormatter(logging.Formatter("[ffxl] %(message)s"))
        stdlib_logger.addHandler(handler)
    return stdlib_logger


def setup_logging() -> None:
    """
    Setup structured logging with structlog.

    Uses the renderer selected by FFXL_LOG_FORMAT. Invalid settings fall back
    to console output outside development mode.
    """
    try:
        settings: Settings | None = get_settings()
    except ValidationError:
        settings = None

    log_format = settings.log_format if settings else LogFormat.CONSOLE
    development = settings.is_development if settings else False

    processors: list[Any] = [
        development_only,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
        structlog.processors.UnicodeDecoder(),
    ]

    if log_format == LogFormat.JSON:
        processors.append(structlog.processors.JSONRenderer())
    else:
        processors.append(structlog.dev.ConsoleRenderer())

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.stdlib.BoundLogger,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )
    configure_stdlib_logger(development)


def get_logger(name: str | None = None) -> structlog.stdlib.BoundLogger:
    """
    Get a structured logger.

    Args:
        name: Logger name, defaults to the ffxl namespace

    Returns:
        Configured structured logger
    """
    return structlog.get_logger(name or LOGGER_NAMESPACE)


# Leave an application's own structlog configuration alone
if not structlog.is_configured():
    setup_logging()
