"""VFS port: the workspace filesystem contract used by tool executors.

Tools depend on this protocol rather than on a concrete driver, so a
workspace can be backed by any store that keeps the same semantics:

- paths are normalized by :func:`uigen.kernel.paths.normalize_path`;
- creating a node creates every missing ancestor directory;
- deleting a directory removes its whole subtree;
- the root ``/`` always exists and can be neither renamed nor deleted.

Drivers
-------
- ``InMemoryVFS``: single-process, non-persistent tree.
"""

from __future__ import annotations

from abc import abstractmethod
from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from uigen.kernel.domain.vfs import DirEntry, Node, Snapshot, StatResult


@runtime_checkable
class VFS(Protocol):
    """Virtual filesystem port for one workspace."""

    @abstractmethod
    def exists(self, path: str) -> bool:
        """Return True if a file or directory exists at *path*."""
        ...

    @abstractmethod
    def get_node(self, path: str) -> Node | None:
        """Return the node at *path*, or None if there is none."""
        ...

    @abstractmethod
    def stat(self, path: str) -> StatResult:
        """Return metadata about *path*.

        Raises
        ------
        PathNotFoundError
            If nothing exists at *path*.
        """
        ...

    @abstractmethod
    def create_directory(self, path: str) -> None:
        """Create a directory and any missing ancestors (idempotent).

        Raises
        ------
        PathIsFileError
            If a file occupies *path* or one of its ancestors.
        """
        ...

    @abstractmethod
    def create_file(self, path: str, content: str = "") -> None:
        """Create a file, creating missing ancestors first.

        Raises
        ------
        PathExistsError
            If any node already exists at *path*.
        """
        ...

    @abstractmethod
    def read_file(self, path: str) -> str:
        """Return the content of the file at *path*.

        Raises
        ------
        PathNotFoundError
            If nothing exists at *path*.
        IsDirectoryError
            If *path* names a directory.
        """
        ...

    @abstractmethod
    def write_file(self, path: str, content: str) -> None:
        """Replace file content, creating the file and ancestors if absent."""
        ...

    @abstractmethod
    def list_directory(self, path: str) -> list[DirEntry]:
        """List a directory: directories first, then files, each alphabetical.

        Raises
        ------
        PathNotFoundError
            If nothing exists at *path*.
        NotDirectoryError
            If *path* names a file.
        """
        ...

    @abstractmethod
    def rename(self, path: str, new_path: str) -> bool:
        """Move a node (and its subtree) to *new_path*.

        Returns
        -------
            False without mutating anything if the move is impossible.
        """
        ...

    @abstractmethod
    def delete(self, path: str) -> bool:
        """Delete a node recursively. Returns False for a missing path or root."""
        ...

    @abstractmethod
    def serialize(self) -> Snapshot:
        """Return a full snapshot of every non-root node keyed by path."""
        ...


__all__ = ["VFS"]
