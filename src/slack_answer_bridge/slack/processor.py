"""
Response Processor

Turns one validated mention into a posted reply:

1. Extract the question (strip the leading bot mention)
2. Ask the answer backend
3. Normalize escaped newlines in the answer
4. Render the Block Kit reply and post it to the mention's channel

Runs as a detached task. Errors end this task only; they are logged by
the spawner and never reach Slack's acknowledgement path.
"""

import time

from slack_sdk.errors import SlackApiError
from slack_sdk.web.async_client import AsyncWebClient

from ..utils.errors import BackendError, PostError
from ..utils.logger import get_logger, log_answer_posted
from .events import Mention, extract_question, normalize_answer
from .session import open_session
from .state import ClientState
from .templates import AnswerMessage

logger = get_logger(__name__)


async def process_response(mention: Mention, client: AsyncWebClient, state: ClientState) -> None:
    """
    Answer a mention and post the reply.

    Raises:
        MissingContent: the mention has no question text
        MissingMention: the text does not start with a mention tag
        BackendError: the answer backend failed or returned nothing
        PostError: Slack rejected or failed the post
    """
    started = time.monotonic()

    question = extract_question(mention.raw_text)
    logger.info(f"[Mention] User {mention.author_id} in {mention.channel_id}: {question[:100]}")

    try:
        raw_answer = await state.answer_client.answer(question)
    except Exception as e:
        raise BackendError(str(e) or type(e).__name__) from e
    # Slack rejects an empty mrkdwn section
    if not raw_answer or not raw_answer.strip():
        raise BackendError("empty answer")

    answer = normalize_answer(raw_answer, state.newline_escape)
    message = AnswerMessage(user_id=mention.author_id, question=question, answer=answer)

    thread_ts = (mention.thread_ts or mention.ts) if state.reply_in_thread else None
    session = open_session(client, state.bot_token)
    try:
        await session.post_message(mention.channel_id, message.render(), thread_ts=thread_ts)
    except SlackApiError as e:
        raise PostError(mention.channel_id, e.response.get("error", str(e))) from e
    except Exception as e:
        raise PostError(mention.channel_id, str(e) or type(e).__name__) from e

    log_answer_posted(
        logger,
        user_id=mention.author_id,
        channel_id=mention.channel_id,
        question=question,
        answer=answer,
        duration_ms=(time.monotonic() - started) * 1000,
    )
