"""Runner the orchestration framework calls to generate with a DeepSeek model.

The runner converts a ``GenerateRequest`` into a chat-completion body, hands it
to a transport and maps the completion back into a ``GenerateResponse``. When a
streaming callback is given, every chunk choice is forwarded to it in arrival
order; the final response still comes from the transport's own accumulation.

DeepSeek API documentation:
    https://api-docs.deepseek.com/api/create-chat-completion
"""

from __future__ import annotations

import inspect
import logging
from collections.abc import Awaitable, Callable, Mapping
from contextlib import aclosing
from typing import Any, Union

from deepseek_bridge.models import get_model
from deepseek_bridge.request import build_request_body
from deepseek_bridge.response import from_chunk_choice, from_completion
from deepseek_bridge.transports.base import BaseTransport
from deepseek_bridge.types import GenerateRequest, GenerateResponse, GenerateResponseChunk, Part

StreamingCallback = Callable[[GenerateResponseChunk], Union[None, Awaitable[None]]]


class DeepSeekRunner:
    """Callable bound to one model and one transport."""

    _logger = logging.getLogger(__name__)

    def __init__(self, model_name: str, transport: BaseTransport) -> None:
        self.model = get_model(model_name)
        self._transport = transport

    async def __call__(
        self,
        request: GenerateRequest | Mapping[str, Any],
        streaming_callback: StreamingCallback | None = None,
    ) -> GenerateResponse:
        if not isinstance(request, GenerateRequest):
            request = GenerateRequest.model_validate(request)
        body = build_request_body(self.model.name, request)

        if streaming_callback is None:
            completion = await self._transport.create(body)
        else:
            completion = await self._stream(body, streaming_callback)

        return from_completion(completion)

    async def _stream(self, body: dict[str, Any], callback: StreamingCallback) -> dict[str, Any]:
        stream = self._transport.stream(
            {**body, "stream": True, "stream_options": {"include_usage": True}}
        )
        async with aclosing(stream.__aiter__()) as chunks:
            async for chunk in chunks:
                choices = chunk.get("choices") or []
                if not choices:
                    self._logger.debug("Skipping chunk without choices")
                    continue
                for choice in choices:
                    candidate = from_chunk_choice(choice)
                    result = callback(
                        GenerateResponseChunk(
                            index=candidate.index,
                            content=[Part(text=candidate.message.text)],
                        )
                    )
                    if inspect.isawaitable(result):
                        await result
        return await stream.final_completion()


def deepseek_runner(model_name: str, transport: BaseTransport) -> DeepSeekRunner:
    """Create the runner for ``model_name`` (e.g. ``"deepseek-chat"``)."""
    return DeepSeekRunner(model_name, transport)
