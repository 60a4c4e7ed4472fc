"""
Slack Module

Event dispatch and response pipeline for the Socket Mode listener.
"""

from .acknowledge import AckVerdict, decide_verdict, handle_listener_error
from .events import (
    CommandEvent,
    InboundEvent,
    InteractionEvent,
    Mention,
    PushEvent,
    extract_question,
    normalize_answer,
    parse_push_event,
)
from .handlers import handle_command, handle_interaction, handle_push_event
from .processor import process_response
from .router import register_handlers
from .session import SessionHandle, open_session
from .state import ClientState
from .tasks import ResponseTaskSpawner
from .templates import AnswerMessage, FEEDBACK_ACTION_ID

__all__ = [
    # Events
    "InboundEvent",
    "InteractionEvent",
    "CommandEvent",
    "PushEvent",
    "Mention",
    "parse_push_event",
    "extract_question",
    "normalize_answer",
    # Pipeline
    "ClientState",
    "ResponseTaskSpawner",
    "SessionHandle",
    "open_session",
    "process_response",
    "AnswerMessage",
    "FEEDBACK_ACTION_ID",
    # Listeners
    "register_handlers",
    "handle_interaction",
    "handle_command",
    "handle_push_event",
    # Acknowledgement
    "AckVerdict",
    "decide_verdict",
    "handle_listener_error",
]
