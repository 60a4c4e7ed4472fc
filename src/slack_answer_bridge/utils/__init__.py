"""
Utilities Module

Logging and error types shared across the bridge.
"""

from .logger import (
    setup_logging,
    get_logger,
    log_answer_posted,
    log_absorbed_error,
)

from .errors import (
    BotError,
    ConfigError,
    MalformedEvent,
    MissingContent,
    MissingMention,
    BackendError,
    PostError,
)

__all__ = [
    # Logging
    "setup_logging",
    "get_logger",
    "log_answer_posted",
    "log_absorbed_error",
    # Errors
    "BotError",
    "ConfigError",
    "MalformedEvent",
    "MissingContent",
    "MissingMention",
    "BackendError",
    "PostError",
]
