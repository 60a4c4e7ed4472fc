"""
Inbound Event Models

Typed views over the Slack payloads the bridge receives, plus the
mention-text parsing used to turn a mention into a question.
"""

import re
from dataclasses import dataclass
from typing import Any, Mapping, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from ..utils.errors import MalformedEvent, MissingContent, MissingMention

# <@U123ABC> or <@U123ABC|display-name>, at the very start of the text
MENTION_PREFIX = re.compile(r"^\s*<@(?P<user_id>[A-Za-z0-9_]+)(?:\|[^>]*)?>\s*")


class Mention(BaseModel):
    """An app_mention event: someone tagged the bot in a channel."""

    model_config = ConfigDict(frozen=True, extra="ignore", populate_by_name=True)

    author_id: str = Field(alias="user", min_length=1)
    channel_id: str = Field(alias="channel", min_length=1)
    raw_text: Optional[str] = Field(default=None, alias="text")
    ts: Optional[str] = None
    thread_ts: Optional[str] = None


@dataclass(frozen=True)
class InteractionEvent:
    """Block action (button click) payload."""
    action_id: str
    user_id: Optional[str] = None
    channel_id: Optional[str] = None


@dataclass(frozen=True)
class CommandEvent:
    """Slash command payload."""
    command: str
    user_id: Optional[str] = None
    channel_id: Optional[str] = None
    text: str = ""


@dataclass(frozen=True)
class PushEvent:
    """Events API callback. Only a mention is actionable."""
    event_type: Optional[str]
    mention: Optional[Mention] = None


InboundEvent = Union[InteractionEvent, CommandEvent, PushEvent]


def parse_push_event(body: Any) -> PushEvent:
    """
    Pattern-match an Events API envelope.

    Returns:
        PushEvent with a Mention for app_mention, without one for any other type

    Raises:
        MalformedEvent: the envelope or the mention fields are unusable
    """
    if not isinstance(body, Mapping):
        raise MalformedEvent(f"expected a mapping, got {type(body).__name__}")

    event = body.get("event")
    if not isinstance(event, Mapping):
        raise MalformedEvent("missing 'event' object")

    event_type = event.get("type")
    if event_type != "app_mention":
        return PushEvent(event_type=event_type)

    try:
        mention = Mention.model_validate(event)
    except ValidationError as e:
        fields = ", ".join(".".join(str(p) for p in err["loc"]) for err in e.errors())
        raise MalformedEvent(f"invalid fields: {fields}", event_type=event_type) from e

    return PushEvent(event_type=event_type, mention=mention)


def parse_interaction(body: Mapping[str, Any]) -> InteractionEvent:
    actions = body.get("actions") or [{}]
    return InteractionEvent(
        action_id=actions[0].get("action_id", ""),
        user_id=(body.get("user") or {}).get("id"),
        channel_id=(body.get("channel") or {}).get("id"),
    )


def parse_command(body: Mapping[str, Any]) -> CommandEvent:
    return CommandEvent(
        command=body.get("command", ""),
        user_id=body.get("user_id"),
        channel_id=body.get("channel_id"),
        text=body.get("text", ""),
    )


def extract_question(raw_text: Optional[str]) -> str:
    """
    Strip the leading bot mention and return the question.

    Raises:
        MissingContent: no text, or nothing left after the mention
        MissingMention: text does not start with a mention tag
    """
    if not raw_text or not raw_text.strip():
        raise MissingContent()

    match = MENTION_PREFIX.match(raw_text)
    if not match:
        raise MissingMention()

    question = raw_text[match.end():].strip()
    if not question:
        raise MissingContent("Mention has no question after the tag")
    return question


def normalize_answer(answer: str, escape: str = "\\n") -> str:
    """Replace each literal escape sequence with a real line break."""
    if not escape or escape == "\n":
        return answer
    return answer.replace(escape, "\n")
