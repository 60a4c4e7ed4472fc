"""
Slack Answer Bridge

Socket Mode listener that answers @mentions with an AI backend.

Startup order matters: the answer client and the shared ClientState are
built before the socket connects, so no listener can run without them.
"""

import asyncio
from typing import Optional

from dotenv import load_dotenv
from slack_bolt.adapter.socket_mode.async_handler import AsyncSocketModeHandler
from slack_bolt.async_app import AsyncApp

from .agent import AnswerClient
from .config import BridgeConfig, load_config
from .slack import ClientState, register_handlers
from .utils import ConfigError, get_logger, setup_logging

logger = get_logger(__name__)


def create_app(config: BridgeConfig) -> AsyncApp:
    """
    Create the Bolt app.

    Unmatched requests raise into the error handler so they are still
    acknowledged with a 200.
    """
    return AsyncApp(
        token=config.slack_bot_token,
        raise_error_for_unhandled_request=True,
    )


async def run_bridge(config: BridgeConfig, answer_client: Optional[AnswerClient] = None) -> None:
    """Build shared state, register listeners and serve until cancelled."""
    answer_client = answer_client or AnswerClient.from_config(config)
    state = ClientState.from_config(config, answer_client)

    app = create_app(config)
    register_handlers(app, state)

    auth = await app.client.auth_test()
    logger.info(f"Bot: @{auth.get('user', 'bot')} (ID: {auth.get('user_id')})")

    handler = AsyncSocketModeHandler(app, config.slack_app_token)
    logger.info("Listening for mentions over Socket Mode")
    try:
        await handler.start_async()
    finally:
        state.spawner.abandon()
        await handler.close_async()


def main() -> int:
    load_dotenv()
    setup_logging()

    try:
        config = load_config(dotenv=False)
        asyncio.run(run_bridge(config))
    except ConfigError as e:
        logger.error(f"Startup failed: {e}")
        return 1
    except KeyboardInterrupt:
        logger.info("Shutting down...")
    return 0
