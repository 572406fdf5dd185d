"""Async client wiring configuration, the model registry and runners together."""

from __future__ import annotations

import os
from collections.abc import Mapping
from typing import Any

from deepseek_bridge.errors import MissingAPIKeyError
from deepseek_bridge.models import SUPPORTED_MODELS, ModelCapabilities, ModelInfo, get_model
from deepseek_bridge.runner import DeepSeekRunner, StreamingCallback, deepseek_runner
from deepseek_bridge.transports.base import BaseTransport
from deepseek_bridge.transports.openai import DEFAULT_BASE_URL, OpenAITransport
from deepseek_bridge.types import GenerateRequest, GenerateResponse

API_KEY_ENV = "DEEPSEEK_API_KEY"
BASE_URL_ENV = "DEEPSEEK_API_URL"


class DeepSeekClient:
    """High-level entry point for generating with DeepSeek models."""

    def __init__(
        self,
        *,
        api_key: str | None = None,
        base_url: str | None = None,
        timeout_s: float = 60.0,
        transport: BaseTransport | None = None,
    ) -> None:
        if transport is None:
            api_key = api_key or os.environ.get(API_KEY_ENV)
            if not api_key:
                raise MissingAPIKeyError(API_KEY_ENV)
            transport = OpenAITransport(
                api_key=api_key,
                base_url=base_url or os.environ.get(BASE_URL_ENV) or DEFAULT_BASE_URL,
                timeout_s=timeout_s,
            )
        self._transport = transport
        self._runners: dict[str, DeepSeekRunner] = {
            name: deepseek_runner(name, transport) for name in SUPPORTED_MODELS
        }

    async def aclose(self) -> None:
        await self._transport.aclose()

    def models(self) -> list[ModelInfo]:
        """Return every registered model."""
        return list(SUPPORTED_MODELS.values())

    def capabilities(self, model: str) -> ModelCapabilities:
        """Return capability flags for a model."""
        return get_model(model).supports

    def runner(self, model: str) -> DeepSeekRunner:
        """Return the runner for a short or plugin-qualified model name."""
        return self._runners[get_model(model).name]

    async def generate(
        self,
        model: str,
        request: GenerateRequest | Mapping[str, Any],
        streaming_callback: StreamingCallback | None = None,
    ) -> GenerateResponse:
        """Execute a generate request, streaming chunks to the callback if given."""
        return await self.runner(model)(request, streaming_callback)
