"""Transport backed by the OpenAI-compatible ``openai`` SDK."""

from __future__ import annotations

import logging
from collections.abc import AsyncGenerator
from typing import Any

import httpx
from openai import AsyncOpenAI
from openai.lib.streaming.chat import ChatCompletionStreamState

from deepseek_bridge.transports.base import BaseTransport, ChatStream

DEFAULT_BASE_URL = "https://api.deepseek.com"


class OpenAIChatStream(ChatStream):
    """Streams chunks from ``chat.completions.create(stream=True)``.

    Each chunk is also fed to the SDK's ``ChatCompletionStreamState`` which
    builds the final completion.
    """

    _logger = logging.getLogger(__name__)

    def __init__(self, client: AsyncOpenAI, body: dict[str, Any]) -> None:
        self._client = client
        self._body = {**body, "stream": True}
        self._state = ChatCompletionStreamState()
        self._drained = False

    async def __aiter__(self) -> AsyncGenerator[dict[str, Any], None]:
        async with await self._client.chat.completions.create(**self._body) as stream:
            self._logger.debug("Opened chat completion stream for %s", self._body.get("model"))
            async for chunk in stream:
                self._state.handle_chunk(chunk)
                yield chunk.model_dump()
        self._drained = True

    async def final_completion(self) -> dict[str, Any]:
        if not self._drained:
            raise RuntimeError("final_completion() called before the stream was drained")
        # the raw snapshot; get_final_completion() raises on length/content_filter finishes
        return self._state.current_completion_snapshot.model_dump()


class OpenAITransport(BaseTransport):
    """Minimal async wrapper around ``AsyncOpenAI`` chat completions."""

    name = "openai"
    _logger = logging.getLogger(__name__)

    def __init__(
        self,
        *,
        api_key: str | None = None,
        base_url: str | None = None,
        timeout_s: float = 60.0,
        client: AsyncOpenAI | None = None,
    ) -> None:
        if client is None:
            client = AsyncOpenAI(
                api_key=api_key,
                base_url=base_url or DEFAULT_BASE_URL,
                http_client=httpx.AsyncClient(timeout=timeout_s),
            )
        self._client = client

    async def aclose(self) -> None:
        """Close the underlying HTTP client."""
        await self._client.close()

    async def create(self, body: dict[str, Any]) -> dict[str, Any]:
        completion = await self._client.chat.completions.create(**body)
        self._logger.debug("Received chat completion %s", getattr(completion, "id", None))
        return completion.model_dump()

    def stream(self, body: dict[str, Any]) -> OpenAIChatStream:
        return OpenAIChatStream(self._client, body)
