"""Structured logging configuration."""

import logging
import sys
from typing import Any

import structlog
from pythonjsonlogger import jsonlogger

from stockpos.config import Settings, get_settings


def setup_logging(settings: Settings | None = None) -> None:
    """Configure structured logging for the application."""
    settings = settings or get_settings()

    # Configure standard library logging
    log_level = getattr(logging, settings.log_level)

    if settings.log_format == "json":
        handler = logging.StreamHandler(sys.stdout)
        formatter = jsonlogger.JsonFormatter(
            fmt="%(timestamp)s %(level)s %(name)s %(message)s",
            rename_fields={"levelname": "level", "asctime": "timestamp"},
        )
        handler.setFormatter(formatter)
    else:
        handler = logging.StreamHandler(sys.stdout)
        formatter = logging.Formatter(
            fmt="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )
        handler.setFormatter(formatter)

    # Configure root logger
    root_logger = logging.getLogger()
    root_logger.setLevel(log_level)
    root_logger.handlers.clear()
    root_logger.addHandler(handler)

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.StackInfoRenderer(),
            structlog.dev.set_exc_info,
            structlog.processors.TimeStamper(fmt="iso", utc=True),
            structlog.processors.JSONRenderer() if settings.log_format == "json"
            else structlog.dev.ConsoleRenderer(),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(log_level),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(),
        cache_logger_on_first_use=True,
    )


def get_logger(name: str) -> structlog.BoundLogger:
    """Get a structured logger instance."""
    return structlog.get_logger(name)


class ActionLogger:
    """Specialized logger for UI-triggered actions."""

    def __init__(self, action_id: str):
        self.action_id = action_id
        self.logger = get_logger(action_id)

    def log_action(
        self,
        action: str,
        duration_ms: float | None = None,
        success: bool = True,
        **kwargs: Any,
    ) -> None:
        """Log an action invocation with structured data."""
        log_data: dict[str, Any] = {
            "action_id": self.action_id,
            "action": action,
            "success": success,
        }

        if duration_ms is not None:
            log_data["duration_ms"] = duration_ms

        log_data.update(kwargs)
        self.logger.info("action_executed", **log_data)

    def log_rejected(self, action: str, reason: str, **kwargs: Any) -> None:
        """Log an action refused by input validation."""
        self.logger.warning(
            "action_rejected",
            action_id=self.action_id,
            action=action,
            reason=reason,
            **kwargs,
        )

    def log_error(self, action: str, error: str, **kwargs: Any) -> None:
        """Log an unexpected failure."""
        self.logger.error(
            "action_error",
            action_id=self.action_id,
            action=action,
            error=error,
            **kwargs,
        )
