"""Convert DeepSeek chat-completion responses into framework responses."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from pydantic import BaseModel, ConfigDict, ValidationError

from deepseek_bridge.errors import SchemaValidationError, UnsupportedContentTypeError
from deepseek_bridge.types import Candidate, GenerateResponse, Part, Usage

_DEFAULT_FINISH_REASON = "other"


class _WireMessage(BaseModel):
    model_config = ConfigDict(extra="allow")

    content: str | None = None
    reasoning_content: str | None = None


class _WireChoice(BaseModel):
    model_config = ConfigDict(extra="allow")

    index: int
    finish_reason: str | None = None
    message: _WireMessage


class _WireChunkChoice(BaseModel):
    model_config = ConfigDict(extra="allow")

    index: int
    finish_reason: str | None = None
    delta: _WireMessage


class _WireUsage(BaseModel):
    model_config = ConfigDict(extra="allow")

    prompt_tokens: int | None = None
    completion_tokens: int | None = None
    total_tokens: int | None = None


class _WireCompletion(BaseModel):
    model_config = ConfigDict(extra="allow")

    choices: list[Any]
    usage: _WireUsage | None = None


def _as_mapping(payload: Any) -> Any:
    # openai SDK objects are pydantic models
    if isinstance(payload, BaseModel):
        return payload.model_dump()
    return payload


def _parse(schema: type[BaseModel], payload: Any) -> Any:
    try:
        return schema.model_validate(_as_mapping(payload))
    except ValidationError as exc:
        raise SchemaValidationError(str(exc)) from exc


def _candidate(index: int, finish_reason: str | None, text: str | None, custom: dict[str, Any]) -> Candidate:
    try:
        return Candidate.model_validate(
            {
                "index": index,
                "finish_reason": finish_reason or _DEFAULT_FINISH_REASON,
                "message": {"role": "assistant", "text": text or ""},
                "custom": custom,
            }
        )
    except ValidationError as exc:
        raise SchemaValidationError(str(exc)) from exc


def from_choice(choice: Any) -> Candidate:
    """Map a non-streaming completion choice to a candidate."""
    wire = _parse(_WireChoice, choice)
    custom = {k: v for k, v in (wire.model_extra or {}).items() if v is not None}
    if wire.message.reasoning_content is not None:
        custom["reasoning_content"] = wire.message.reasoning_content
    return _candidate(wire.index, wire.finish_reason, wire.message.content, custom)


def from_chunk_choice(choice: Any) -> Candidate:
    """Map a streaming chunk choice to a candidate carrying only its delta text."""
    wire = _parse(_WireChunkChoice, choice)
    return _candidate(wire.index, wire.finish_reason, wire.delta.content, {})


def from_completion(completion: Any) -> GenerateResponse:
    """Map a full chat completion, choices and usage, to a generate response."""
    raw = _as_mapping(completion)
    wire = _parse(_WireCompletion, raw)
    usage = wire.usage or _WireUsage()
    return GenerateResponse(
        candidates=[from_choice(c) for c in wire.choices],
        usage=Usage(
            input_tokens=usage.prompt_tokens,
            output_tokens=usage.completion_tokens,
            total_tokens=usage.total_tokens,
        ),
        custom=dict(raw),
    )


def to_text_content(part: Part | Mapping[str, Any]) -> dict[str, str]:
    """Return ``{"type": "text", "text": ...}`` for a text part.

    Raises:
        UnsupportedContentTypeError: the part has no text field.
    """
    text = part.get("text") if isinstance(part, Mapping) else part.text
    if text is None:
        raise UnsupportedContentTypeError(part)
    return {"type": "text", "text": text}
