"""Transports for deepseek_bridge."""

from .base import BaseTransport, ChatStream
from .openai import OpenAIChatStream, OpenAITransport

__all__ = [
    "BaseTransport",
    "ChatStream",
    "OpenAIChatStream",
    "OpenAITransport",
]
