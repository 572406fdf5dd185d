"""Convert framework generate requests into DeepSeek chat-completion bodies."""

from __future__ import annotations

import logging
from typing import Any

from deepseek_bridge.errors import MissingConfigurationError
from deepseek_bridge.models import get_model
from deepseek_bridge.response import to_text_content
from deepseek_bridge.types import GenerateRequest, GenerationConfig, Message, ToolDefinition
from deepseek_bridge.utils import remove_empty_keys

_logger = logging.getLogger(__name__)

# Unknown roles are passed through unchanged.
_ROLE_MAP = {
    "system": "system",
    "assistant": "assistant",
    "user": "user",
    "function": "function",
}

# (GenerationConfig attribute, wire key)
_CONFIG_FIELDS = (
    ("temperature", "temperature"),
    ("max_output_tokens", "max_tokens"),
    ("top_p", "top_p"),
    ("stop_sequences", "stop"),
    ("frequency_penalty", "frequency_penalty"),
    ("presence_penalty", "presence_penalty"),
    ("log_probs", "logprobs"),
    ("top_log_probs", "top_logprobs"),
)


def to_wire_role(role: str) -> str:
    return _ROLE_MAP.get(role, role)


def to_wire_message(message: Message) -> dict[str, Any]:
    """Reduce a message to role + text content; function messages keep a name."""
    role = to_wire_role(message.role)
    content = "".join(to_text_content(part)["text"] for part in message.content)
    if role == "function":
        return {"role": role, "content": content, "name": message.name or "function"}
    return {"role": role, "content": content}


def to_wire_tool(tool: ToolDefinition) -> dict[str, Any]:
    function = remove_empty_keys(
        {
            "name": tool.name,
            "description": tool.description,
            "parameters": tool.input_schema,
        }
    )
    return {"type": "function", "function": function}


def to_wire_config(config: GenerationConfig) -> dict[str, Any]:
    """Apply the config field table; unset fields come out as None."""
    return {wire_key: getattr(config, attr) for attr, wire_key in _CONFIG_FIELDS}


def build_request_body(model_name: str, request: GenerateRequest) -> dict[str, Any]:
    """Build the chat-completion request body for ``model_name``.

    Raises:
        UnsupportedModelError: ``model_name`` is not a registered model.
        MissingConfigurationError: ``request.config`` is not set.
        UnsupportedContentTypeError: a message carries a non-text part.
    """
    model = get_model(model_name)

    config = request.config
    if config is None:
        raise MissingConfigurationError()

    body: dict[str, Any] = {
        "model": model.name,
        "messages": [to_wire_message(m) for m in request.messages],
        **to_wire_config(config),
        "tools": [to_wire_tool(t) for t in request.tools] if request.tools else None,
        "tool_choice": config.tool_choice or "none",
        # DeepSeek only returns text
        "response_format": {"type": "text"},
        # switched on by the runner when a streaming callback is given
        "stream": False,
        "stream_options": None,
    }

    remove_empty_keys(body)
    _logger.debug("Built request body for %s with %d message(s)", model.name, len(body["messages"]))
    return body
