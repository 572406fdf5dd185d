"""Framework-native request/response models."""

from __future__ import annotations

from typing import Any, Literal

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel


class _FrameworkModel(BaseModel):
    """Accepts camelCase framework keys as well as snake_case field names."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class Part(_FrameworkModel):
    """Single piece of message content."""

    # media, toolRequest, ... parts are kept as extras so they can be rejected
    model_config = ConfigDict(extra="allow")

    text: str | None = None


class Message(_FrameworkModel):
    """Single chat message."""

    role: str
    content: list[Part] = Field(default_factory=list)
    name: str | None = None

    @field_validator("content", mode="before")
    @classmethod
    def _wrap_plain_text(cls, value: Any) -> Any:
        if isinstance(value, str):
            return [{"text": value}]
        return value

    @property
    def text(self) -> str:
        """Concatenated text of all text parts."""
        return "".join(part.text for part in self.content if part.text is not None)


class ToolDefinition(_FrameworkModel):
    """Tool declaration whose schema is forwarded to the API."""

    name: str
    description: str | None = None
    input_schema: dict[str, Any] | None = None
    output_schema: dict[str, Any] | None = None


class GenerationConfig(_FrameworkModel):
    """Generation options; anything left unset is omitted from the wire body."""

    model_config = ConfigDict(extra="allow")

    version: str | None = None
    temperature: float | None = None
    max_output_tokens: int | None = None
    top_k: int | None = None
    top_p: float | None = None
    stop_sequences: list[str] | None = None
    frequency_penalty: float | None = Field(default=None, ge=-2, le=2)
    presence_penalty: float | None = Field(default=None, ge=-2, le=2)
    log_probs: bool | None = None
    top_log_probs: int | None = Field(default=None, ge=0, le=20)
    seed: int | None = None
    user: str | None = None
    tool_choice: Any = Field(
        default=None,
        alias="tool_choice",
        validation_alias=AliasChoices("tool_choice", "toolChoice"),
    )


class GenerateRequest(_FrameworkModel):
    """Messages, tools and config for a single generate call."""

    messages: list[Message]
    config: GenerationConfig | None = None
    tools: list[ToolDefinition] | None = None


class CandidateMessage(_FrameworkModel):
    """Generated text; DeepSeek only ever answers as the assistant."""

    role: Literal["assistant"]
    text: str


class Candidate(_FrameworkModel):
    """One generated alternative."""

    index: int
    finish_reason: str
    message: CandidateMessage
    custom: dict[str, Any] = Field(default_factory=dict)


class Usage(_FrameworkModel):
    """Token counts reported by the API."""

    input_tokens: int | None = None
    output_tokens: int | None = None
    total_tokens: int | None = None


class GenerateResponse(_FrameworkModel):
    """Normalized generate result."""

    candidates: list[Candidate]
    usage: Usage = Field(default_factory=Usage)
    # raw upstream completion kept for debugging or advanced use
    custom: dict[str, Any] = Field(default_factory=dict)


class GenerateResponseChunk(_FrameworkModel):
    """Partial candidate pushed to the streaming callback."""

    index: int
    content: list[Part]
