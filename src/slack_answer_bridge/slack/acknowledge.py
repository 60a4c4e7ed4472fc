"""
Acknowledgement Verdicts

Slack re-delivers any frame that is not acknowledged with a 200. The
listeners are not safe to run twice for the same event (a retry would mean
a second backend call and a second post), so every listener error is
absorbed into a successful acknowledgement and logged instead.
"""

from enum import Enum
from typing import Any, Mapping, Optional

from slack_bolt.error import BoltUnhandledRequestError
from slack_bolt.response import BoltResponse

from ..utils.errors import BotError
from ..utils.logger import get_logger, log_absorbed_error

logger = get_logger(__name__)


class AckVerdict(Enum):
    """How an inbound frame was acknowledged."""
    ACKNOWLEDGE = "acknowledge"
    SILENT_FAILURE_ACKNOWLEDGE = "silent_failure_acknowledge"

    @property
    def status(self) -> int:
        # Anything but 200 makes Slack retry the frame
        return 200

    def to_response(self) -> BoltResponse:
        return BoltResponse(status=self.status, body="")


def decide_verdict(error: Optional[BaseException]) -> AckVerdict:
    if error is None or isinstance(error, BoltUnhandledRequestError):
        return AckVerdict.ACKNOWLEDGE
    return AckVerdict.SILENT_FAILURE_ACKNOWLEDGE


def describe_body(body: Optional[Mapping[str, Any]]) -> dict[str, Any]:
    """Pull the identifying fields of a Slack payload for logging."""
    if not isinstance(body, Mapping):
        return {}
    event = body.get("event") if isinstance(body.get("event"), Mapping) else {}
    actions = body.get("actions") or [{}]
    return {
        "event_type": event.get("type") or body.get("type"),
        "event_id": body.get("event_id"),
        "command": body.get("command"),
        "action_id": actions[0].get("action_id") if isinstance(actions[0], Mapping) else None,
    }


async def handle_listener_error(error: Exception, body: dict) -> BoltResponse:
    """
    Global error handler for the Bolt app.

    Always acknowledges with 200. Unmatched requests are a plain no-op
    acknowledgement; real failures are logged and acknowledged silently.
    """
    verdict = decide_verdict(error)
    context = describe_body(body)

    if verdict is AckVerdict.ACKNOWLEDGE:
        logger.debug(f"Ignoring unhandled Slack request ({context.get('event_type') or context.get('command')})")
    else:
        log_absorbed_error(
            logger,
            error,
            source="listener",
            context=context,
            with_traceback=not isinstance(error, BotError),
        )

    return verdict.to_response()
