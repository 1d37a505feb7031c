"""Centralized logging configuration."""

import logging
import sys

from loguru import logger as loguru_logger

# Log format configuration
log_format = " | ".join(
    (
        "<lk>{time:YYYY-MM-DD HH:mm:ss.SSS}</>",
        "<lvl>{level:<8}</>",
        "<c>{name}::{function}:{line}</>",
        "{message}",
    )
)


class InterceptHandler(logging.Handler):
    """Route standard-library log records (Django's own) into loguru."""

    def emit(self, record: logging.LogRecord) -> None:
        try:
            level: str | int = loguru_logger.level(record.levelname).name
        except ValueError:
            level = record.levelno

        # Find caller from where originated the logged message
        frame, depth = logging.currentframe(), 2
        while frame and frame.f_code.co_filename == logging.__file__:
            frame = frame.f_back  # type: ignore[assignment]
            depth += 1

        loguru_logger.opt(depth=depth, exception=record.exc_info).log(
            level, record.getMessage()
        )


def configure_logging(level: str = "INFO") -> None:
    """Install the stdout sink and intercept standard logging."""
    loguru_logger.remove()  # Remove default handler to avoid duplicate output
    loguru_logger.add(sys.stdout, format=log_format, level=level.upper())
    logging.basicConfig(handlers=[InterceptHandler()], level=0, force=True)
