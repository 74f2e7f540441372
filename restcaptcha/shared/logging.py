"""
Logging utilities for the RESTCaptcha client.

Provides:
- get_logger(): Get a structlog logger instance
- configure_structlog(): Opt-in structlog setup for applications that do not
  configure logging themselves (JSON or pretty console output)
- redact_sensitive_fields(): Processor that masks secrets and tokens

The library never configures logging on import; it only emits events through
get_logger() and leaves rendering to the host application.
"""

import logging
import sys

import structlog
from structlog.stdlib import BoundLogger
from structlog.types import EventDict, Processor

# Field names (or fragments of them) that are never written to the log
SENSITIVE_FRAGMENTS = ("token", "secret", "solution", "password", "key")
_STRUCTURAL_KEYS = {"level", "event", "timestamp", "logger"}


def get_logger(name: str) -> BoundLogger:
    """
    Get a configured logger instance.

    Args:
        name: Logger name (typically __name__ of the calling module)

    Returns:
        structlog BoundLogger instance

    Example:
        >>> log = get_logger(__name__)
        >>> log.warning("restcaptcha_retry_scheduled", attempt=1, delay_seconds=2.0)
    """
    return structlog.get_logger(name)


def redact_sensitive_fields(
    logger: logging.Logger, method_name: str, event_dict: EventDict
) -> EventDict:
    """Redact sensitive fields from logs."""
    for key in list(event_dict.keys()):
        if key in _STRUCTURAL_KEYS:
            continue
        if any(fragment in key.lower() for fragment in SENSITIVE_FRAGMENTS):
            event_dict[key] = "***REDACTED***"
    return event_dict


def configure_structlog(log_format: str = "console", log_level: str = "INFO") -> None:
    """
    Configure structlog and stdlib logging for an application using the client.

    json: JSON lines, for production
    console: Pretty console formatting with colors, for development
    """
    logging.basicConfig(
        format="%(message)s",
        stream=sys.stdout,
        level=getattr(logging, log_level.upper()),
    )
    # httpx logs every request at INFO, including the query string
    logging.getLogger("httpx").setLevel(logging.WARNING)
    logging.getLogger("httpcore").setLevel(logging.WARNING)

    shared_processors: list[Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        redact_sensitive_fields,
        structlog.processors.format_exc_info,
    ]

    if log_format == "json":
        renderer: Processor = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer(colors=True, pad_event=15)

    structlog.configure(
        processors=shared_processors + [renderer],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )
