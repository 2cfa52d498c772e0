import logging
import sys

import structlog

LOG_LEVELS = ("debug", "info", "warning", "error")


def stderr_logger(*args) -> structlog.PrintLogger:
    # Resolved per call; sys.stderr may be swapped after configuration.
    return structlog.PrintLogger(sys.stderr)


def configure_logging(level: str = "warning") -> None:
    """Send structlog output to stderr, dropping events below level."""
    structlog.configure(
        processors=[
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="%H:%M:%S"),
            structlog.dev.ConsoleRenderer(colors=False),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(getattr(logging, level.upper())),
        logger_factory=stderr_logger,
        cache_logger_on_first_use=False,
    )


def ensure_logging() -> None:
    """Apply the default configuration unless logging was configured already."""
    if not structlog.is_configured():
        configure_logging()
