"""Answer message template - renders a question/answer pair into Slack Block Kit."""

from dataclasses import dataclass
from typing import Any

FEEDBACK_ACTION_ID = "simple-message-button"

# Slack rejects blocks whose text exceeds these
HEADER_TEXT_LIMIT = 150
SECTION_TEXT_LIMIT = 3000


def _plain_text(text: str) -> dict:
    return {"type": "plain_text", "text": text, "emoji": True}


def _truncate(text: str, limit: int) -> str:
    if len(text) <= limit:
        return text
    return text[: limit - 1] + "…"


@dataclass(frozen=True)
class AnswerMessage:
    """Reply posted for one answered mention."""
    user_id: str
    question: str
    answer: str

    @property
    def user_tag(self) -> str:
        return f"<@{self.user_id}>"

    def render(self) -> dict[str, Any]:
        """Render to a chat.postMessage payload ({"text", "blocks"})."""
        divider = {"type": "divider"}
        blocks = [
            {
                "type": "section",
                "text": {
                    "type": "mrkdwn",
                    "text": (
                        f"Hey {self.user_tag}. We received your question. "
                        "Let me know your thoughts on my response!"
                    ),
                },
            },
            divider,
            {"type": "header", "text": _plain_text(_truncate(self.question, HEADER_TEXT_LIMIT))},
            divider,
            {"type": "section", "text": {"type": "mrkdwn", "text": _truncate(self.answer, SECTION_TEXT_LIMIT)}},
            divider,
            {
                "type": "actions",
                "elements": [
                    {
                        "type": "button",
                        "action_id": FEEDBACK_ACTION_ID,
                        "text": _plain_text("Give feedback!"),
                    }
                ],
            },
        ]
        return {
            "text": f"Hey {self.user_tag}",  # Fallback for notifications
            "blocks": blocks,
        }
