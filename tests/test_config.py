"""Tests for environment configuration loading."""

import pytest

from slack_answer_bridge.config import (
    DEFAULT_MODEL,
    DEFAULT_NEWLINE_ESCAPE,
    load_config,
    require_env,
)
from slack_answer_bridge.utils.errors import ConfigError

ENV_VARS = [
    "SLACK_APP_TOKEN",
    "SLACK_BOT_TOKEN",
    "OPENAI_API_KEY",
    "DEFAULT_MODEL",
    "ANSWER_NEWLINE_ESCAPE",
    "REPLY_IN_THREAD",
    "MAX_INFLIGHT_RESPONSES",
]


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)


@pytest.fixture()
def tokens(monkeypatch):
    monkeypatch.setenv("SLACK_APP_TOKEN", "xapp-1-test")
    monkeypatch.setenv("SLACK_BOT_TOKEN", "xoxb-test")


def test_defaults(tokens):
    config = load_config(dotenv=False)

    assert config.slack_app_token == "xapp-1-test"
    assert config.slack_bot_token == "xoxb-test"
    assert config.openai_api_key is None
    assert config.model_id == DEFAULT_MODEL
    assert config.newline_escape == DEFAULT_NEWLINE_ESCAPE == "\\n"
    assert config.reply_in_thread is False
    assert config.max_inflight_responses == 0


def test_overrides(tokens, monkeypatch):
    monkeypatch.setenv("OPENAI_API_KEY", "sk-test")
    monkeypatch.setenv("DEFAULT_MODEL", "gpt-4o")
    monkeypatch.setenv("ANSWER_NEWLINE_ESCAPE", "\\n\\n")
    monkeypatch.setenv("REPLY_IN_THREAD", "true")
    monkeypatch.setenv("MAX_INFLIGHT_RESPONSES", "8")

    config = load_config(dotenv=False)

    assert config.openai_api_key == "sk-test"
    assert config.model_id == "gpt-4o"
    assert config.newline_escape == "\\n\\n"
    assert config.reply_in_thread is True
    assert config.max_inflight_responses == 8


@pytest.mark.parametrize("missing", ["SLACK_APP_TOKEN", "SLACK_BOT_TOKEN"])
def test_missing_token_names_the_variable(tokens, monkeypatch, missing):
    monkeypatch.delenv(missing)

    with pytest.raises(ConfigError) as exc:
        load_config(dotenv=False)

    assert exc.value.config_name == missing
    assert missing in str(exc.value)


def test_empty_token_counts_as_missing(monkeypatch):
    monkeypatch.setenv("SLACK_APP_TOKEN", "")
    with pytest.raises(ConfigError):
        require_env("SLACK_APP_TOKEN")


@pytest.mark.parametrize("value", ["many", "-1", "2.5"])
def test_invalid_concurrency_bound(tokens, monkeypatch, value):
    monkeypatch.setenv("MAX_INFLIGHT_RESPONSES", value)

    with pytest.raises(ConfigError) as exc:
        load_config(dotenv=False)
    assert "MAX_INFLIGHT_RESPONSES" in str(exc.value)


def test_config_is_frozen(tokens):
    config = load_config(dotenv=False)
    with pytest.raises(Exception):
        config.slack_bot_token = "other"
