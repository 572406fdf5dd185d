"""Translate framework generate requests to and from the DeepSeek chat API."""

from deepseek_bridge.client import DeepSeekClient
from deepseek_bridge.errors import (
    DeepSeekBridgeError,
    MissingAPIKeyError,
    MissingConfigurationError,
    SchemaValidationError,
    UnsupportedContentTypeError,
    UnsupportedModelError,
)
from deepseek_bridge.models import DEEPSEEK_CHAT, DEEPSEEK_REASONER, SUPPORTED_MODELS
from deepseek_bridge.request import build_request_body
from deepseek_bridge.response import from_choice, from_chunk_choice, from_completion, to_text_content
from deepseek_bridge.runner import DeepSeekRunner, deepseek_runner
from deepseek_bridge.types import (
    Candidate,
    GenerateRequest,
    GenerateResponse,
    GenerateResponseChunk,
    GenerationConfig,
    Message,
    Part,
    ToolDefinition,
    Usage,
)
from deepseek_bridge.utils import remove_empty_keys

__all__ = [
    "DeepSeekClient",
    "DeepSeekRunner",
    "deepseek_runner",
    "DEEPSEEK_CHAT",
    "DEEPSEEK_REASONER",
    "SUPPORTED_MODELS",
    "build_request_body",
    "from_choice",
    "from_chunk_choice",
    "from_completion",
    "to_text_content",
    "remove_empty_keys",
    "Candidate",
    "GenerateRequest",
    "GenerateResponse",
    "GenerateResponseChunk",
    "GenerationConfig",
    "Message",
    "Part",
    "ToolDefinition",
    "Usage",
    "DeepSeekBridgeError",
    "MissingAPIKeyError",
    "MissingConfigurationError",
    "SchemaValidationError",
    "UnsupportedContentTypeError",
    "UnsupportedModelError",
]
