"""Models served by the DeepSeek chat-completion API.

See https://api-docs.deepseek.com/api/create-chat-completion and
https://api-docs.deepseek.com/guides/reasoning_model.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from deepseek_bridge.errors import UnsupportedModelError

PLUGIN_NAME = "deepseek"


@dataclass(frozen=True)
class ModelCapabilities:
    """Describes feature support for a model."""

    media: bool = False
    output: tuple[str, ...] = ("text",)
    multiturn: bool = True
    system_role: bool = True
    tools: bool = False


@dataclass(frozen=True)
class ModelInfo:
    """Registry entry for a single model."""

    name: str
    label: str
    supports: ModelCapabilities = field(default_factory=ModelCapabilities)

    @property
    def qualified_name(self) -> str:
        return f"{PLUGIN_NAME}/{self.name}"


DEEPSEEK_CHAT = ModelInfo(name="deepseek-chat", label="DeepSeek - Chat")
DEEPSEEK_REASONER = ModelInfo(name="deepseek-reasoner", label="DeepSeek - Reasoner")

SUPPORTED_MODELS: dict[str, ModelInfo] = {
    DEEPSEEK_CHAT.name: DEEPSEEK_CHAT,
    DEEPSEEK_REASONER.name: DEEPSEEK_REASONER,
}


def get_model(name: str) -> ModelInfo:
    """Look up a model by short or plugin-qualified name."""
    prefix = f"{PLUGIN_NAME}/"
    short = name[len(prefix) :] if name.startswith(prefix) else name
    try:
        return SUPPORTED_MODELS[short]
    except KeyError as exc:
        raise UnsupportedModelError(name) from exc
