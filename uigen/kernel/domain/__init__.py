"""Domain layer exports for uigen."""

from uigen.kernel.domain.commands import (
    CreateCommand,
    DeleteCommand,
    FileManagerResult,
    InsertCommand,
    RenameCommand,
    StrReplaceCommand,
    UndoEditCommand,
    ViewCommand,
)
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
from uigen.kernel.domain.vfs import (
    DirEntry,
    DirectoryNode,
    EntryType,
    FileNode,
    SnapshotEntry,
    StatResult,
)

__all__ = [
    # VFS domain models
    "DirEntry",
    "DirectoryNode",
    "EntryType",
    "FileNode",
    "SnapshotEntry",
    "StatResult",
    # Tool commands
    "CreateCommand",
    "DeleteCommand",
    "FileManagerResult",
    "InsertCommand",
    "RenameCommand",
    "StrReplaceCommand",
    "UndoEditCommand",
    "ViewCommand",
    # Model turns
    "FinishEvent",
    "FinishReason",
    "GenerateResult",
    "Role",
    "TextDelta",
    "TextEnd",
    "TextPart",
    "TextStart",
    "ToolCallEvent",
    "ToolCallPart",
    "TranscriptEntry",
    "Usage",
]
