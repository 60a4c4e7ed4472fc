"""
Event Router

Wires the three inbound categories onto a Bolt app. The shared ClientState
is bound into each listener here, so handlers never look it up globally.
"""

import re

from slack_bolt.async_app import AsyncApp
from slack_bolt.context.ack.async_ack import AsyncAck
from slack_sdk.web.async_client import AsyncWebClient

from ..utils.logger import get_logger
from .acknowledge import handle_listener_error
from .handlers import handle_command, handle_interaction, handle_push_event
from .state import ClientState
from .templates import FEEDBACK_ACTION_ID

logger = get_logger(__name__)

# Every slash command routed to this app
ANY_COMMAND = re.compile(r"^/")


def register_handlers(app: AsyncApp, state: ClientState) -> None:
    """Register interaction, command and push listeners plus the error handler."""

    @app.action(FEEDBACK_ACTION_ID)
    async def on_feedback(body: dict, ack: AsyncAck) -> None:
        await handle_interaction(body, ack)

    @app.command(ANY_COMMAND)
    async def on_command(body: dict, ack: AsyncAck, client: AsyncWebClient) -> None:
        await handle_command(body, ack, client, state)

    @app.event("app_mention")
    async def on_app_mention(body: dict, client: AsyncWebClient) -> None:
        handle_push_event(body, client, state)

    app.error(handle_listener_error)
    logger.debug("Slack listeners registered")
