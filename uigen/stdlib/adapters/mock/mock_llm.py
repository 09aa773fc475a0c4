"""Scripted mock language model.

Stands in for a real model behind the :class:`~uigen.kernel.ports.llm.LanguageModel`
port and walks a fixed four-step plan that builds a small React project:

====================  =================================================
tool results so far   turn
====================  =================================================
0                     intro text, ``create /App.jsx``
1                     text, ``create /components/<Name>.jsx``
2                     text, ``str_replace`` enhancement on the component
3 or more             closing summary, no tool call, finish ``stop``
====================  =================================================

The step is derived from the transcript alone (the number of ``tool-result``
entries), so the model holds no per-conversation state and any transcript
can be replayed. The component variant comes from the *first* user message.
"""

from __future__ import annotations

import asyncio
import json
import uuid
from collections.abc import AsyncIterator, Mapping
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from uigen.kernel.domain.stream import (
    FinishEvent,
    FinishReason,
    GenerateResult,
    Role,
    TextDelta,
    TextEnd,
    TextPart,
    TextStart,
    ToolCallEvent,
    ToolCallPart,
    TranscriptEntry,
    Usage,
)
from uigen.kernel.logging import get_logger
from uigen.stdlib.adapters.mock.templates import ComponentTemplate, detect_component

if TYPE_CHECKING:
    from uigen.kernel.config.models import MockModelConfig
    from uigen.kernel.domain.stream import ContentPart, StreamEvent
    from uigen.kernel.ports.llm import TranscriptInput

logger = get_logger(__name__)

EDITOR_TOOL = "str_replace_editor"

_TOOL_RESULT_ROLES = frozenset({Role.TOOL_RESULT.value, "tool"})
_TOOL_STEP_USAGE = Usage(input_tokens=50, output_tokens=30)
_FINAL_STEP_USAGE = Usage(input_tokens=50, output_tokens=50)


@dataclass(frozen=True, slots=True)
class TurnScript:
    """Everything one scripted turn emits."""

    text: str
    delay_seconds: float
    finish_reason: FinishReason
    usage: Usage
    tool_call: ToolCallEvent | None = None


def _role_of(entry: TranscriptEntry | Mapping[str, Any]) -> str:
    if isinstance(entry, TranscriptEntry):
        return entry.role.value
    role = entry.get("role")
    return str(role) if role is not None else ""


def _text_of(entry: TranscriptEntry | Mapping[str, Any]) -> str:
    if isinstance(entry, TranscriptEntry):
        return entry.content
    content = entry.get("content")
    if isinstance(content, str):
        return content
    if isinstance(content, list):
        # Multi-part message content: keep only the text parts
        return " ".join(
            str(part.get("text", ""))
            for part in content
            if isinstance(part, Mapping) and part.get("type") == "text"
        )
    return ""


def count_tool_results(transcript: TranscriptInput) -> int:
    """Return the number of tool-result entries, the plan step selector."""
    return sum(1 for entry in transcript if _role_of(entry) in _TOOL_RESULT_ROLES)


def extract_user_prompt(transcript: TranscriptInput) -> str:
    """Return the text of the first user entry, or ``""`` if there is none."""
    for entry in transcript:
        if _role_of(entry) == Role.USER.value:
            return _text_of(entry)
    return ""


def _tool_call(step: int, arguments: dict[str, Any]) -> ToolCallEvent:
    return ToolCallEvent(
        tool_call_id=f"call_{step + 1}",
        tool_name=EDITOR_TOOL,
        input=json.dumps(arguments),
    )


def plan_turn(step: int, template: ComponentTemplate) -> TurnScript | None:
    """Return the script for plan *step*, or None for an out-of-plan step."""
    match step:
        case 0:
            return TurnScript(
                text=(
                    "This is a static response. You can place an Anthropic API key in the "
                    ".env file to use the Anthropic API for component generation. "
                    "Let me create an App.jsx file to display the component."
                ),
                delay_seconds=0.015,
                finish_reason=FinishReason.TOOL_CALLS,
                usage=_TOOL_STEP_USAGE,
                tool_call=_tool_call(
                    step,
                    {"command": "create", "path": "/App.jsx", "file_text": template.app_code},
                ),
            )
        case 1:
            return TurnScript(
                text=f"I'll create a {template.name} component for you.",
                delay_seconds=0.025,
                finish_reason=FinishReason.TOOL_CALLS,
                usage=_TOOL_STEP_USAGE,
                tool_call=_tool_call(
                    step,
                    {"command": "create", "path": template.path, "file_text": template.code},
                ),
            )
        case 2:
            return TurnScript(
                text="Now let me enhance the component with better styling.",
                delay_seconds=0.025,
                finish_reason=FinishReason.TOOL_CALLS,
                usage=_TOOL_STEP_USAGE,
                tool_call=_tool_call(
                    step,
                    {
                        "command": "str_replace",
                        "path": template.path,
                        "old_str": template.old_str,
                        "new_str": template.new_str,
                    },
                ),
            )
        case n if n >= 3:
            return TurnScript(
                text=(
                    "Perfect! I've created:\n\n"
                    f"1. **{template.name}.jsx** - A fully-featured {template.kind} component\n"
                    "2. **App.jsx** - The main app file that displays the component\n\n"
                    "The component is now ready to use. "
                    "You can see the preview on the right side of the screen."
                ),
                delay_seconds=0.030,
                finish_reason=FinishReason.STOP,
                usage=_FINAL_STEP_USAGE,
            )
        case _:
            return None


class MockLanguageModel:
    """Deterministic, scripted stand-in for a tool-calling model.

    Parameters
    ----------
    model_id : str
        Identifier reported by the model.
    delay_scale : float
        Multiplier on the per-character streaming delay. ``0`` streams
        without sleeping, which is what tests want.
    """

    provider = "mock"

    def __init__(self, model_id: str = "mock-claude-sonnet-4-0", delay_scale: float = 1.0) -> None:
        if delay_scale < 0:
            raise ValueError(f"delay_scale must be >= 0, got {delay_scale}")
        self.model_id = model_id
        self.delay_scale = delay_scale

    @classmethod
    def from_config(cls, config: MockModelConfig) -> MockLanguageModel:
        return cls(model_id=config.model_id, delay_scale=config.delay_scale)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(model_id={self.model_id!r})"

    @staticmethod
    def extract_user_prompt(transcript: TranscriptInput) -> str:
        """Return the text of the first user message in *transcript*."""
        return extract_user_prompt(transcript)

    async def astream(self, transcript: TranscriptInput) -> AsyncIterator[StreamEvent]:
        """Stream one turn: text start/deltas/end, an optional tool call, finish."""
        step = count_tool_results(transcript)
        template = detect_component(extract_user_prompt(transcript))
        script = plan_turn(step, template)
        logger.debug(
            "Mock model step {step} for {component}", step=step, component=template.name
        )
        if script is None:
            return

        async for event in self._stream_text(script.text, script.delay_seconds):
            yield event
        if script.tool_call is not None:
            yield script.tool_call
        yield FinishEvent(finish_reason=script.finish_reason, usage=script.usage)

    async def agenerate(self, transcript: TranscriptInput) -> GenerateResult:
        """Drain :meth:`astream` and fold its events into one result."""
        text_parts: list[str] = []
        tool_calls: list[ToolCallPart] = []
        finish: FinishEvent | None = None

        async for event in self.astream(transcript):
            match event:
                case TextDelta():
                    text_parts.append(event.delta)
                case ToolCallEvent():
                    tool_calls.append(
                        ToolCallPart(
                            tool_call_id=event.tool_call_id,
                            tool_name=event.tool_name,
                            input=event.input,
                        )
                    )
                case FinishEvent():
                    finish = event
                case _:
                    pass

        text = "".join(text_parts)
        content: list[ContentPart] = [TextPart(text=text)] if text else []
        content.extend(tool_calls)
        if finish is None:
            return GenerateResult(content=content)
        return GenerateResult(content=content, finish_reason=finish.finish_reason, usage=finish.usage)

    async def _stream_text(self, text: str, delay_seconds: float) -> AsyncIterator[StreamEvent]:
        text_id = f"text-{uuid.uuid4().hex[:12]}"
        pause = delay_seconds * self.delay_scale
        yield TextStart(id=text_id)
        for char in text:
            yield TextDelta(id=text_id, delta=char)
            if pause > 0:
                await asyncio.sleep(pause)
        yield TextEnd(id=text_id)


__all__ = [
    "EDITOR_TOOL",
    "MockLanguageModel",
    "TurnScript",
    "count_tool_results",
    "extract_user_prompt",
    "plan_turn",
]
