"""Domain models for model turns: transcript entries, stream events, results.

Stream events serialize with camelCase keys (``toolCallId``,
``finishReason``) so that they can be forwarded verbatim to a chat transport.
Construct them with either spelling.
"""

from __future__ import annotations

import json
from enum import StrEnum
from typing import Annotated, Any, Literal

from pydantic import BaseModel, ConfigDict, Field, computed_field
from pydantic.alias_generators import to_camel


class _WireModel(BaseModel):
    model_config = ConfigDict(
        frozen=True,
        alias_generator=to_camel,
        populate_by_name=True,
        serialize_by_alias=True,
    )


class Role(StrEnum):
    """Role of a transcript entry."""

    USER = "user"
    ASSISTANT = "assistant"
    TOOL_RESULT = "tool-result"


class TranscriptEntry(BaseModel):
    """A single role-tagged entry in the running transcript."""

    model_config = ConfigDict(frozen=True)

    role: Role
    content: str = ""


Transcript = list[TranscriptEntry]


class FinishReason(StrEnum):
    """Terminal classification of a turn."""

    TOOL_CALLS = "tool-calls"
    STOP = "stop"


class Usage(_WireModel):
    """Synthetic token counters reported with every finish event."""

    input_tokens: int = Field(default=0, ge=0)
    output_tokens: int = Field(default=0, ge=0)

    @computed_field  # type: ignore[prop-decorator]
    @property
    def total_tokens(self) -> int:
        return self.input_tokens + self.output_tokens


# ---------------------------------------------------------------------------
# Stream events
# ---------------------------------------------------------------------------


class TextStart(_WireModel):
    type: Literal["text-start"] = "text-start"
    id: str


class TextDelta(_WireModel):
    type: Literal["text-delta"] = "text-delta"
    id: str
    delta: str


class TextEnd(_WireModel):
    type: Literal["text-end"] = "text-end"
    id: str


class _ToolInput:
    """Decoding shared by the streamed and the aggregate tool call."""

    def arguments(self) -> dict[str, Any]:
        """Decode ``input`` into a dict.

        Raises
        ------
        ValueError
            If ``input`` is not a JSON object.
        """
        decoded = json.loads(self.input)
        if not isinstance(decoded, dict):
            raise ValueError(f"expected a JSON object, got {type(decoded).__name__}")
        return decoded


class ToolCallEvent(_WireModel, _ToolInput):
    """A tool call proposed by the model. ``input`` is a JSON object string."""

    type: Literal["tool-call"] = "tool-call"
    tool_call_id: str
    tool_name: str
    input: str


class FinishEvent(_WireModel):
    type: Literal["finish"] = "finish"
    finish_reason: FinishReason
    usage: Usage


StreamEvent = Annotated[
    TextStart | TextDelta | TextEnd | ToolCallEvent | FinishEvent,
    Field(discriminator="type"),
]


# ---------------------------------------------------------------------------
# Aggregate (non-streaming) result
# ---------------------------------------------------------------------------


class TextPart(_WireModel):
    type: Literal["text"] = "text"
    text: str


class ToolCallPart(_WireModel, _ToolInput):
    type: Literal["tool-call"] = "tool-call"
    tool_call_id: str
    tool_name: str
    input: str


ContentPart = Annotated[TextPart | ToolCallPart, Field(discriminator="type")]


class GenerateResult(_WireModel):
    """A fully drained turn folded into a single record."""

    content: list[ContentPart] = Field(default_factory=list)
    finish_reason: FinishReason = FinishReason.STOP
    usage: Usage = Field(default_factory=Usage)
    warnings: list[str] = Field(default_factory=list)

    @property
    def text(self) -> str:
        return "".join(part.text for part in self.content if isinstance(part, TextPart))

    @property
    def tool_calls(self) -> list[ToolCallPart]:
        return [part for part in self.content if isinstance(part, ToolCallPart)]


__all__ = [
    "ContentPart",
    "FinishEvent",
    "FinishReason",
    "GenerateResult",
    "Role",
    "StreamEvent",
    "TextDelta",
    "TextEnd",
    "TextPart",
    "TextStart",
    "ToolCallEvent",
    "ToolCallPart",
    "Transcript",
    "TranscriptEntry",
    "Usage",
]
