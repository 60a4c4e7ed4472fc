"""
Error Types

Failure taxonomy for the bridge.

Only ConfigError is fatal (raised at startup). Every other error is
recovered: listener errors are absorbed by the Slack error handler, and
response task errors end that one task.
"""

from typing import Optional


class BotError(Exception):
    """Base exception for bridge errors."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ConfigError(BotError):
    """Missing or invalid configuration value."""

    def __init__(self, config_name: str, message: str):
        self.config_name = config_name
        super().__init__(f"{config_name}: {message}")


class MalformedEvent(BotError):
    """Inbound event payload could not be parsed."""

    def __init__(self, message: str, event_type: Optional[str] = None):
        self.event_type = event_type
        super().__init__(f"Malformed event ({event_type or 'unknown'}): {message}")


class MissingContent(BotError):
    """Mention carried no usable question text."""

    def __init__(self, message: str = "Mention has no text"):
        super().__init__(message)


class MissingMention(BotError):
    """Mention text does not start with the bot's addressing tag."""

    def __init__(self, message: str = "Tag me first, then ask your question"):
        super().__init__(message)


class BackendError(BotError):
    """Answer backend call failed."""

    def __init__(self, message: str):
        super().__init__(f"Answer backend failed: {message}")


class PostError(BotError):
    """Reply could not be posted to Slack."""

    def __init__(self, channel_id: str, message: str):
        self.channel_id = channel_id
        super().__init__(f"Slack chat.postMessage to {channel_id} failed: {message}")
