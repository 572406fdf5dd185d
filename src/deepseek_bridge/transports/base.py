"""Transport interface the runner talks to."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import AsyncGenerator
from typing import Any


class ChatStream(ABC):
    """Ordered chunks of one streamed completion plus the transport's aggregate."""

    @abstractmethod
    def __aiter__(self) -> AsyncGenerator[dict[str, Any], None]:
        """Yield raw chunk payloads in arrival order; closing the generator closes the stream."""
        raise NotImplementedError

    @abstractmethod
    async def final_completion(self) -> dict[str, Any]:
        """Return the accumulated completion once iteration has finished."""
        raise NotImplementedError


class BaseTransport(ABC):
    """Abstract base class for chat-completion transports."""

    name: str

    @abstractmethod
    async def create(self, body: dict[str, Any]) -> dict[str, Any]:
        """Execute a one-shot chat completion and return the raw payload."""
        raise NotImplementedError

    @abstractmethod
    def stream(self, body: dict[str, Any]) -> ChatStream:
        """Open a streamed chat completion."""
        raise NotImplementedError

    async def aclose(self) -> None:
        """Release transport resources."""
