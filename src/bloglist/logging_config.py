"""structlog configuration.

Learn: Log events are dotted names with key/value context
(logger.info("blogs.deleted", blog_id=...)). The request id bound by
RequestIdMiddleware is merged in from contextvars. Anything that looks
like a credential is redacted before rendering, so a careless
logger.info(..., password=...) never reaches the log sink.
"""

import logging

import structlog

REDACTED = "[REDACTED]"
SENSITIVE_KEYS = frozenset(
    {"password", "password_hash", "token", "authorization", "jwt_secret"}
)


def redact_sensitive(_logger, _method_name, event_dict):
    """structlog processor: mask credential-bearing keys."""
    for key in list(event_dict):
        if key.lower() in SENSITIVE_KEYS:
            event_dict[key] = REDACTED
    return event_dict


def configure_logging(level: str = "INFO", json: bool = False) -> None:
    """Configure structlog for the process."""
    processors = [
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="iso", utc=True),
        redact_sensitive,
        structlog.processors.StackInfoRenderer(),
    ]
    if json:
        processors += [structlog.processors.format_exc_info, structlog.processors.JSONRenderer()]
    else:
        processors.append(structlog.dev.ConsoleRenderer(colors=False))

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.make_filtering_bound_logger(
            logging.getLevelName(level.upper())
        ),
        cache_logger_on_first_use=False,
    )
