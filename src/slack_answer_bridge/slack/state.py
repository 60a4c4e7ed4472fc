"""
Client State

Process-wide state shared by all Slack listeners and response tasks.

Built once in run_bridge() before the Socket Mode connection opens and
captured by the registered listeners. There is no setter: handlers only
ever read it.
"""

from dataclasses import dataclass, field

from ..agent.core import AnswerClient
from ..config import BridgeConfig, DEFAULT_NEWLINE_ESCAPE
from .tasks import ResponseTaskSpawner


@dataclass(frozen=True)
class ClientState:
    answer_client: AnswerClient
    bot_token: str
    newline_escape: str = DEFAULT_NEWLINE_ESCAPE
    reply_in_thread: bool = False
    spawner: ResponseTaskSpawner = field(default_factory=ResponseTaskSpawner)

    @classmethod
    def from_config(cls, config: BridgeConfig, answer_client: AnswerClient) -> "ClientState":
        return cls(
            answer_client=answer_client,
            bot_token=config.slack_bot_token,
            newline_escape=config.newline_escape,
            reply_in_thread=config.reply_in_thread,
            spawner=ResponseTaskSpawner(config.max_inflight_responses),
        )
