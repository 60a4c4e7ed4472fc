"""Tests for the answer message template."""

from slack_answer_bridge.slack.templates import (
    FEEDBACK_ACTION_ID,
    HEADER_TEXT_LIMIT,
    SECTION_TEXT_LIMIT,
    AnswerMessage,
)


def test_block_sequence():
    content = AnswerMessage(user_id="U1", question="what is 2+2?", answer="4\n(computed)").render()

    assert content["text"] == "Hey <@U1>"
    assert [b["type"] for b in content["blocks"]] == [
        "section",
        "divider",
        "header",
        "divider",
        "section",
        "divider",
        "actions",
    ]


def test_blocks_carry_user_question_and_answer():
    blocks = AnswerMessage(user_id="U1", question="what is 2+2?", answer="4\n(computed)").render()["blocks"]

    assert blocks[0]["text"]["type"] == "mrkdwn"
    assert blocks[0]["text"]["text"].startswith("Hey <@U1>. We received your question.")
    assert blocks[2]["text"] == {"type": "plain_text", "text": "what is 2+2?", "emoji": True}
    assert blocks[4]["text"] == {"type": "mrkdwn", "text": "4\n(computed)"}


def test_single_feedback_button():
    actions = AnswerMessage(user_id="U1", question="q", answer="a").render()["blocks"][-1]

    assert len(actions["elements"]) == 1
    button = actions["elements"][0]
    assert button["type"] == "button"
    assert button["action_id"] == FEEDBACK_ACTION_ID == "simple-message-button"
    assert button["text"]["text"] == "Give feedback!"


def test_long_question_and_answer_fit_slack_limits():
    message = AnswerMessage(user_id="U1", question="q" * 400, answer="a" * 5000)
    blocks = message.render()["blocks"]

    header = blocks[2]["text"]["text"]
    assert len(header) == HEADER_TEXT_LIMIT
    assert header.endswith("…")
    assert len(blocks[4]["text"]["text"]) == SECTION_TEXT_LIMIT


def test_short_text_is_untouched():
    question = "q" * HEADER_TEXT_LIMIT
    blocks = AnswerMessage(user_id="U1", question=question, answer="ok").render()["blocks"]
    assert blocks[2]["text"]["text"] == question
