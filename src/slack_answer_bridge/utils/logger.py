"""
Logging Utilities

Provides structured logging for the Slack answer bridge.

- Structured JSON logging for production
- Console logging for development
- Per-module loggers
"""

import os
import sys
import json
import logging
from datetime import datetime, timezone
from typing import Any, Mapping, Optional


class JSONFormatter(logging.Formatter):
    """JSON formatter for structured logging."""

    def format(self, record: logging.LogRecord) -> str:
        log_data = {
            "timestamp": datetime.now(timezone.utc).isoformat().replace("+00:00", "Z"),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }

        if hasattr(record, "extra_fields"):
            log_data.update(record.extra_fields)

        if record.exc_info:
            log_data["exception"] = self.formatException(record.exc_info)

        return json.dumps(log_data, default=str)


class ConsoleFormatter(logging.Formatter):
    """Console formatter with colors and structure."""

    COLORS = {
        "DEBUG": "\033[36m",    # Cyan
        "INFO": "\033[32m",     # Green
        "WARNING": "\033[33m",  # Yellow
        "ERROR": "\033[31m",    # Red
        "CRITICAL": "\033[35m", # Magenta
    }
    RESET = "\033[0m"

    def format(self, record: logging.LogRecord) -> str:
        color = self.COLORS.get(record.levelname, "")
        reset = self.RESET if color else ""

        timestamp = datetime.now().strftime("%H:%M:%S")

        msg = f"{color}[{timestamp}] [{record.levelname:7}]{reset} [{record.name}] {record.getMessage()}"

        if hasattr(record, "extra_fields") and record.extra_fields:
            extras = " ".join(f"{k}={v}" for k, v in record.extra_fields.items())
            msg += f" ({extras})"

        if record.exc_info:
            msg += "\n" + self.formatException(record.exc_info)

        return msg


def setup_logging(level: Optional[str] = None, json_logging: Optional[bool] = None) -> None:
    """
    Set up logging for the application.

    Args:
        level: Log level (debug, info, warning, error). Uses LOG_LEVEL env if not provided.
        json_logging: Emit JSON lines. Uses JSON_LOGGING env if not provided.
    """
    level = level or os.getenv("LOG_LEVEL", "info")
    if json_logging is None:
        json_logging = os.getenv("JSON_LOGGING", "false").lower() == "true"

    log_level = getattr(logging, level.upper(), logging.INFO)

    root_logger = logging.getLogger()
    root_logger.setLevel(log_level)

    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    handler = logging.StreamHandler(sys.stdout)
    handler.setLevel(log_level)
    handler.setFormatter(JSONFormatter() if json_logging else ConsoleFormatter())
    root_logger.addHandler(handler)

    # Set level for third-party loggers
    logging.getLogger("slack_bolt").setLevel(logging.WARNING)
    logging.getLogger("slack_sdk").setLevel(logging.WARNING)
    logging.getLogger("httpx").setLevel(logging.WARNING)
    logging.getLogger("openai").setLevel(logging.WARNING)


def get_logger(name: str) -> logging.Logger:
    """
    Get a logger for a module.

    Args:
        name: Module name (usually __name__)

    Returns:
        Logger instance
    """
    return logging.getLogger(name)


def log_answer_posted(
    logger: logging.Logger,
    user_id: str,
    channel_id: str,
    question: str,
    answer: str,
    duration_ms: Optional[float] = None,
) -> None:
    """
    Log a posted answer with structured data.

    Args:
        logger: Logger instance
        user_id: Slack user ID of the asker
        channel_id: Slack channel the reply went to
        question: Question sent to the backend
        answer: Normalized answer text
        duration_ms: Total processing time
    """
    extra_fields = {
        "user_id": user_id,
        "channel_id": channel_id,
        "question_length": len(question),
        "answer_length": len(answer),
    }

    if duration_ms is not None:
        extra_fields["duration_ms"] = round(duration_ms, 1)

    logger.info("Answer posted", extra={"extra_fields": extra_fields})


def log_absorbed_error(
    logger: logging.Logger,
    error: BaseException,
    source: str,
    context: Optional[Mapping[str, Any]] = None,
    with_traceback: bool = False,
) -> None:
    """
    Log an error that is deliberately not surfaced to Slack.

    Args:
        logger: Logger instance
        error: The absorbed exception
        source: Where it was absorbed ("listener", "response_task")
        context: Extra structured fields (event type, user, channel)
        with_traceback: Attach the exception traceback
    """
    extra_fields = {
        "source": source,
        "error_type": type(error).__name__,
    }
    if context:
        extra_fields.update({k: v for k, v in context.items() if v is not None})

    logger.warning(
        f"Absorbed error: {error}",
        exc_info=(type(error), error, error.__traceback__) if with_traceback else None,
        extra={"extra_fields": extra_fields},
    )
