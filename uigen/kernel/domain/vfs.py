"""Domain models for the Virtual Filesystem (VFS).

Nodes are the mutable records owned by a single
:class:`~uigen.drivers.vfs.memory.InMemoryVFS`. Entries, stat results and
snapshot entries are the immutable views handed to callers.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import StrEnum
from typing import Literal

from pydantic import BaseModel, ConfigDict


class EntryType(StrEnum):
    """Type of a VFS entry."""

    FILE = "file"
    DIRECTORY = "directory"


@dataclass(slots=True)
class FileNode:
    """A text file. Content is replaced in place; no history is kept."""

    path: str
    content: str = ""

    @property
    def entry_type(self) -> EntryType:
        return EntryType.FILE


@dataclass(slots=True)
class DirectoryNode:
    """A directory holding the names of its direct children."""

    path: str
    children: set[str] = field(default_factory=set)

    @property
    def entry_type(self) -> EntryType:
        return EntryType.DIRECTORY


Node = FileNode | DirectoryNode


class DirEntry(BaseModel):
    """A single entry in a VFS directory listing."""

    name: str
    entry_type: EntryType
    path: str


class StatResult(BaseModel):
    """Metadata about a VFS path.

    Attributes
    ----------
    path : str
        Normalized absolute path.
    entry_type : EntryType
        Whether this is a file or directory.
    child_count : int | None
        Number of direct children (directories only).
    size : int | None
        Content length in characters (files only).
    line_count : int | None
        Number of lines as the text editor counts them (files only).
    """

    path: str
    entry_type: EntryType
    child_count: int | None = None
    size: int | None = None
    line_count: int | None = None


class SnapshotEntry(BaseModel):
    """One node in a serialized workspace snapshot.

    Files carry their content; directories never do.
    """

    model_config = ConfigDict(frozen=True)

    type: Literal["file", "directory"]
    content: str | None = None


Snapshot = dict[str, SnapshotEntry]


__all__ = [
    "DirEntry",
    "DirectoryNode",
    "EntryType",
    "FileNode",
    "Node",
    "Snapshot",
    "SnapshotEntry",
    "StatResult",
]
