"""
Slack Listeners

One handler per inbound category:

- interaction: feedback button clicks, acknowledged inline
- command: slash commands, acknowledged after an api.test probe
- push: app_mention events, handed to a detached response task

Exceptions raised here go to the app's error handler, which always
acknowledges the frame.
"""

from typing import Any, Mapping

from slack_bolt.context.ack.async_ack import AsyncAck
from slack_sdk.web.async_client import AsyncWebClient

from ..utils.logger import get_logger
from .events import PushEvent, parse_command, parse_interaction, parse_push_event
from .processor import process_response
from .session import open_session
from .state import ClientState

logger = get_logger(__name__)

COMMAND_ACK_TEXT = "Working on it"


async def handle_interaction(body: Mapping[str, Any], ack: AsyncAck) -> None:
    interaction = parse_interaction(body)
    logger.info(f"[Interaction] {interaction.action_id} from {interaction.user_id}")
    await ack()


async def handle_command(
    body: Mapping[str, Any],
    ack: AsyncAck,
    client: AsyncWebClient,
    state: ClientState,
) -> None:
    """Probe Web API connectivity, then acknowledge with a holding reply."""
    command = parse_command(body)
    logger.info(f"[Command] {command.command} from {command.user_id} in {command.channel_id}")

    session = open_session(client, state.bot_token)
    await session.api_test()

    await ack(text=COMMAND_ACK_TEXT)


def handle_push_event(
    body: Mapping[str, Any],
    client: AsyncWebClient,
    state: ClientState,
) -> PushEvent:
    """
    Dispatch a push event without waiting for the answer.

    Slack retries frames that are not acknowledged within a few seconds,
    and the backend call can take longer than that, so the response runs
    as a separate task and this returns immediately.

    Raises:
        MalformedEvent: the payload could not be parsed
    """
    push = parse_push_event(body)
    if push.mention is None:
        logger.debug(f"Ignoring push event of type {push.event_type}")
        return push

    mention = push.mention
    logger.debug(f"[Push] app_mention from {mention.author_id} in {mention.channel_id}")
    state.spawner.spawn(
        process_response(mention, client, state),
        context={
            "user_id": mention.author_id,
            "channel_id": mention.channel_id,
            "event_id": body.get("event_id"),
        },
    )
    return push

