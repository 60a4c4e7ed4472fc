"""
Bridge Configuration

Loads settings from environment variables (and a .env file, if present).

Required:
- SLACK_APP_TOKEN: app-level token for the Socket Mode connection
- SLACK_BOT_TOKEN: bot token for Web API calls
"""

import os
from dataclasses import dataclass
from typing import Optional

from dotenv import load_dotenv

from .utils.errors import ConfigError

DEFAULT_MODEL = "gpt-4o-mini"

# Backends that JSON-encode their output hand back "\n" as two characters.
DEFAULT_NEWLINE_ESCAPE = "\\n"


@dataclass(frozen=True)
class BridgeConfig:
    """Process configuration, read once at startup."""
    slack_app_token: str
    slack_bot_token: str
    openai_api_key: Optional[str] = None
    model_id: str = DEFAULT_MODEL
    newline_escape: str = DEFAULT_NEWLINE_ESCAPE
    reply_in_thread: bool = False
    max_inflight_responses: int = 0


def require_env(name: str) -> str:
    """Return a required environment variable or raise ConfigError naming it."""
    value = os.getenv(name)
    if not value:
        raise ConfigError(name, "environment variable not set")
    return value


def _env_bool(name: str, default: bool = False) -> bool:
    return os.getenv(name, str(default)).strip().lower() in ("1", "true", "yes")


def _env_int(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        value = int(raw)
    except ValueError:
        raise ConfigError(name, f"expected an integer, got {raw!r}") from None
    if value < 0:
        raise ConfigError(name, f"must be >= 0, got {value}")
    return value


def load_config(dotenv: bool = True) -> BridgeConfig:
    """
    Build the bridge configuration from the environment.

    Args:
        dotenv: Load a .env file first

    Raises:
        ConfigError: a required token is missing or a value is invalid
    """
    if dotenv:
        load_dotenv()

    return BridgeConfig(
        slack_app_token=require_env("SLACK_APP_TOKEN"),
        slack_bot_token=require_env("SLACK_BOT_TOKEN"),
        openai_api_key=os.getenv("OPENAI_API_KEY") or None,
        model_id=os.getenv("DEFAULT_MODEL", DEFAULT_MODEL),
        newline_escape=os.getenv("ANSWER_NEWLINE_ESCAPE") or DEFAULT_NEWLINE_ESCAPE,
        reply_in_thread=_env_bool("REPLY_IN_THREAD"),
        max_inflight_responses=_env_int("MAX_INFLIGHT_RESPONSES", 0),
    )
