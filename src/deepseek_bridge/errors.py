"""Package specific exception hierarchy."""

from __future__ import annotations

from typing import Any


class DeepSeekBridgeError(Exception):
    """Base exception for deepseek_bridge package."""


class UnsupportedModelError(DeepSeekBridgeError):
    """Raised when a model name is not in the model registry."""

    def __init__(self, model: str) -> None:
        super().__init__(f"Unsupported model: {model}")
        self.model = model


class MissingConfigurationError(DeepSeekBridgeError):
    """Raised when a generate request carries no generation config."""

    def __init__(self) -> None:
        super().__init__("Missing configuration in request")


class UnsupportedContentTypeError(DeepSeekBridgeError):
    """Raised when a message part is not plain text."""

    def __init__(self, part: Any) -> None:
        super().__init__(f"DeepSeek only supports text parts; received: {part!r}.")
        self.part = part


class SchemaValidationError(DeepSeekBridgeError):
    """Raised when an upstream payload does not match the expected shape."""

    def __init__(self, detail: str) -> None:
        super().__init__(f"Malformed upstream payload: {detail}")


class MissingAPIKeyError(DeepSeekBridgeError):
    """Raised when no API key is passed or found in the environment."""

    def __init__(self, env_var: str) -> None:
        super().__init__(
            f"DeepSeek API key is required. Pass api_key or set the {env_var} environment variable."
        )
