"""
Agent Core

AnswerClient: the single long-lived wrapper around the answer backend.

Built once at startup, before the Socket Mode listener starts, and shared
read-only by every response task. Exposes one operation: answer(question).
"""

from agent_framework.openai import OpenAIChatClient

from ..config import BridgeConfig
from ..utils.errors import ConfigError
from ..utils.logger import get_logger
from .prompts import SYSTEM_PROMPT

logger = get_logger(__name__)


class AnswerClient:
    """
    Answers one question at a time with an OpenAI-backed agent.

    The agent is stateless between calls; no conversation history is kept.
    """

    def __init__(self, model_id: str, api_key: str, instructions: str = SYSTEM_PROMPT):
        if not api_key:
            raise ConfigError("OPENAI_API_KEY", "environment variable not set")

        self.model_id = model_id
        client = OpenAIChatClient(model_id=model_id, api_key=api_key)
        self._agent = client.as_agent(
            name="SlackAnswerAgent",
            instructions=instructions,
        )
        logger.info(f"Answer client ready (model: {model_id})")

    @classmethod
    def from_config(cls, config: BridgeConfig) -> "AnswerClient":
        return cls(model_id=config.model_id, api_key=config.openai_api_key or "")

    async def answer(self, question: str) -> str:
        """Send a question to the backend and return the raw answer text."""
        result = await self._agent.run(question)
        return result.text or ""
