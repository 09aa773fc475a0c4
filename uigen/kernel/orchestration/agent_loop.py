"""Multi-turn agent loop.

Drives a :class:`~uigen.kernel.ports.llm.LanguageModel` against a workspace:
each turn streams the model's events, records the assistant text, executes
the tool call (if any) through the :class:`WorkspaceToolRouter` and appends
the tool result to the transcript before the next turn.
"""

from __future__ import annotations

import uuid
from collections.abc import AsyncIterator, Callable
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from uigen.kernel.domain.stream import (
    FinishEvent,
    FinishReason,
    Role,
    TextDelta,
    ToolCallEvent,
    TranscriptEntry,
)
from uigen.kernel.logging import clear_correlation_id, get_logger, set_correlation_id

if TYPE_CHECKING:
    from uigen.kernel.domain.stream import StreamEvent
    from uigen.kernel.domain.vfs import Snapshot
    from uigen.kernel.ports.llm import LanguageModel
    from uigen.stdlib.tools.router import ToolInvocation, WorkspaceToolRouter

logger = get_logger(__name__)

DEFAULT_MAX_STEPS = 40


@dataclass(slots=True)
class AgentRunResult:
    """Outcome of one :meth:`AgentLoop.arun`.

    Attributes
    ----------
    transcript : list[TranscriptEntry]
        The user prompt followed by every assistant and tool-result entry.
    steps : int
        Number of model turns that ran.
    finish_reason : FinishReason | None
        Finish reason of the last turn; None if it emitted no finish event.
    truncated : bool
        True if the run stopped because ``max_steps`` was reached.
    files : Snapshot
        Workspace snapshot taken when the run ended.
    tool_invocations : list[ToolInvocation]
        Every tool call executed during the run, in order.
    """

    transcript: list[TranscriptEntry]
    steps: int
    finish_reason: FinishReason | None
    truncated: bool
    files: Snapshot
    tool_invocations: list[ToolInvocation] = field(default_factory=list)


@dataclass(slots=True)
class _RunState:
    transcript: list[TranscriptEntry]
    steps: int = 0
    finish_reason: FinishReason | None = None
    truncated: bool = False
    tool_invocations: list[ToolInvocation] = field(default_factory=list)


class AgentLoop:
    """Runs model turns until the model stops or the step limit is hit.

    Parameters
    ----------
    model : LanguageModel
        Model answering each turn.
    router : WorkspaceToolRouter
        Router bound to the workspace the tools operate on.
    max_steps : int
        Upper bound on the number of turns in one run.
    on_tool_result : Callable[[ToolInvocation], None] | None
        Called after every executed tool call.
    """

    def __init__(
        self,
        model: LanguageModel,
        router: WorkspaceToolRouter,
        max_steps: int = DEFAULT_MAX_STEPS,
        on_tool_result: Callable[[ToolInvocation], None] | None = None,
    ) -> None:
        if max_steps < 1:
            raise ValueError(f"max_steps must be >= 1, got {max_steps}")
        self.model = model
        self.router = router
        self.max_steps = max_steps
        self.on_tool_result = on_tool_result
        self.last_result: AgentRunResult | None = None

    async def arun(self, prompt: str) -> AgentRunResult:
        """Run to completion and return the aggregate result."""
        async for _ in self.astream(prompt):
            pass
        if self.last_result is None:
            raise RuntimeError("agent run ended without a result")
        return self.last_result

    async def astream(self, prompt: str) -> AsyncIterator[StreamEvent]:
        """Yield the raw events of every turn as they arrive.

        When the stream is exhausted :attr:`last_result` holds the run result.
        """
        session_id = uuid.uuid4().hex[:8]
        set_correlation_id(session_id)
        state = _RunState(transcript=[TranscriptEntry(role=Role.USER, content=prompt)])
        self.last_result = None
        logger.info(
            "Starting agent run",
            model=self.model.model_id,
            max_steps=self.max_steps,
        )

        try:
            while True:
                if state.steps >= self.max_steps:
                    state.truncated = True
                    logger.warning("Agent reached max steps", max_steps=self.max_steps)
                    break

                text_parts: list[str] = []
                tool_call: ToolCallEvent | None = None
                finish_reason: FinishReason | None = None

                async for event in self.model.astream(state.transcript):
                    match event:
                        case TextDelta():
                            text_parts.append(event.delta)
                        case ToolCallEvent():
                            tool_call = event
                        case FinishEvent():
                            finish_reason = event.finish_reason
                        case _:
                            pass
                    yield event

                state.steps += 1
                state.finish_reason = finish_reason
                text = "".join(text_parts)
                if text or tool_call is not None:
                    state.transcript.append(TranscriptEntry(role=Role.ASSISTANT, content=text))
                logger.debug(
                    "Agent step {step} finished: {reason}",
                    step=state.steps,
                    reason=finish_reason,
                )

                if tool_call is None:
                    break

                invocation = self.router.execute_tool_call(tool_call)
                state.tool_invocations.append(invocation)
                state.transcript.append(
                    TranscriptEntry(role=Role.TOOL_RESULT, content=invocation.output)
                )
                if self.on_tool_result is not None:
                    self.on_tool_result(invocation)

                if finish_reason is FinishReason.STOP:
                    break

            self.last_result = AgentRunResult(
                transcript=state.transcript,
                steps=state.steps,
                finish_reason=state.finish_reason,
                truncated=state.truncated,
                files=self.router.vfs.serialize(),
                tool_invocations=state.tool_invocations,
            )
            logger.info(
                "Agent run finished",
                steps=state.steps,
                truncated=state.truncated,
                files=len(self.last_result.files),
            )
        finally:
            clear_correlation_id()


__all__ = ["DEFAULT_MAX_STEPS", "AgentLoop", "AgentRunResult"]
