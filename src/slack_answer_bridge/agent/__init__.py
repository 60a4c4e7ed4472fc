"""
Agent Module

Answer backend adapter built on Microsoft Agent Framework's OpenAIChatClient.
"""

from .core import AnswerClient
from .prompts import SYSTEM_PROMPT

__all__ = [
    "AnswerClient",
    "SYSTEM_PROMPT",
]
