"""Port interface for the language model that drives a workspace."""

from __future__ import annotations

from abc import abstractmethod
from collections.abc import AsyncIterator, Mapping, Sequence
from typing import TYPE_CHECKING, Any, Protocol, runtime_checkable

if TYPE_CHECKING:
    from uigen.kernel.domain.stream import GenerateResult, StreamEvent, TranscriptEntry

TranscriptInput = Sequence["TranscriptEntry | Mapping[str, Any]"]


@runtime_checkable
class LanguageModel(Protocol):
    """Port interface for a turn-based, tool-calling language model.

    One call covers one turn: the model reads the whole transcript so far and
    answers with prose, at most one tool call, and a finish reason. Any state
    the model needs must be derivable from the transcript.
    """

    provider: str
    model_id: str

    @abstractmethod
    def astream(self, transcript: TranscriptInput) -> AsyncIterator[StreamEvent]:
        """Stream the events of one turn.

        Args
        ----
            transcript: Ordered entries (``TranscriptEntry`` or
                ``{"role": ..., "content": ...}`` mappings).

        Returns
        -------
            A finite async iterator ending with a ``finish`` event.
        """
        ...

    @abstractmethod
    async def agenerate(self, transcript: TranscriptInput) -> GenerateResult:
        """Run one turn to completion and return the aggregate result."""
        ...


__all__ = ["LanguageModel", "TranscriptInput"]
