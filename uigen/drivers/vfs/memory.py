"""In-memory VFS driver.

Holds one workspace as a flat table of nodes keyed by normalized path, with
each directory tracking the names of its direct children. Nothing is
persisted; the tree lives exactly as long as the instance.

Example
-------
.. code-block:: python

    vfs = InMemoryVFS()
    vfs.create_file("/components/Card.jsx", "export default Card;")
    vfs.list_directory("/")   # [DirEntry(name="components", ...)]
    snapshot = vfs.serialize()
    clone = InMemoryVFS.deserialize(snapshot)

Instances are not safe for concurrent mutation; keep one per session.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Literal, overload

from uigen.kernel.domain.vfs import (
    DirEntry,
    DirectoryNode,
    EntryType,
    FileNode,
    Node,
    Snapshot,
    SnapshotEntry,
    StatResult,
)
from uigen.kernel.exceptions import (
    IsDirectoryError,
    NotDirectoryError,
    PathExistsError,
    PathIsFileError,
    PathNotFoundError,
)
from uigen.kernel.logging import get_logger
from uigen.kernel.paths import (
    ROOT,
    ancestors,
    base_name,
    is_within,
    join_path,
    normalize_path,
    parent_path,
)

logger = get_logger(__name__)


class InMemoryVFS:
    """Hierarchical in-memory filesystem for a single workspace."""

    def __init__(self) -> None:
        self._nodes: dict[str, Node] = {ROOT: DirectoryNode(ROOT)}

    def __len__(self) -> int:
        """Number of nodes, not counting the root."""
        return len(self._nodes) - 1

    def __repr__(self) -> str:
        return f"{type(self).__name__}(nodes={len(self)})"

    # ── Queries ───────────────────────────────────────────────────────

    def exists(self, path: str) -> bool:
        return normalize_path(path) in self._nodes

    def get_node(self, path: str) -> Node | None:
        return self._nodes.get(normalize_path(path))

    def stat(self, path: str) -> StatResult:
        normalized = normalize_path(path)
        node = self._nodes.get(normalized)
        if node is None:
            raise PathNotFoundError(normalized)
        if isinstance(node, DirectoryNode):
            return StatResult(
                path=normalized,
                entry_type=EntryType.DIRECTORY,
                child_count=len(node.children),
            )
        return StatResult(
            path=normalized,
            entry_type=EntryType.FILE,
            size=len(node.content),
            line_count=len(node.content.split("\n")),
        )

    def read_file(self, path: str) -> str:
        node = self._require(normalize_path(path))
        if isinstance(node, DirectoryNode):
            raise IsDirectoryError(node.path)
        return node.content

    def list_directory(self, path: str) -> list[DirEntry]:
        node = self._require(normalize_path(path))
        if isinstance(node, FileNode):
            raise NotDirectoryError(node.path)

        entries = []
        for name in node.children:
            child = self._nodes[join_path(node.path, name)]
            entries.append(DirEntry(name=name, entry_type=child.entry_type, path=child.path))
        entries.sort(key=lambda e: (e.entry_type is not EntryType.DIRECTORY, e.name))
        return entries

    def get_all_files(self) -> dict[str, str]:
        """Return every file's content keyed by path, in path order."""
        return {
            path: node.content
            for path, node in sorted(self._nodes.items())
            if isinstance(node, FileNode)
        }

    # ── Mutation ──────────────────────────────────────────────────────

    def create_directory(self, path: str) -> None:
        normalized = normalize_path(path)
        existing = self._nodes.get(normalized)
        if isinstance(existing, FileNode):
            raise PathIsFileError(normalized)
        if existing is not None:
            return

        self._ensure_parents(normalized)
        self._attach(DirectoryNode(normalized))
        logger.debug("Created directory {path}", path=normalized)

    def create_file(self, path: str, content: str = "") -> None:
        normalized = normalize_path(path)
        if normalized in self._nodes:
            raise PathExistsError(normalized)

        self._ensure_parents(normalized)
        self._attach(FileNode(normalized, content))
        logger.debug("Created file {path} ({size} chars)", path=normalized, size=len(content))

    def write_file(self, path: str, content: str) -> None:
        normalized = normalize_path(path)
        node = self._nodes.get(normalized)
        if isinstance(node, DirectoryNode):
            raise IsDirectoryError(normalized)
        if isinstance(node, FileNode):
            node.content = content
            logger.debug("Wrote file {path} ({size} chars)", path=normalized, size=len(content))
            return
        self.create_file(normalized, content)

    def rename(self, path: str, new_path: str) -> bool:
        source = normalize_path(path)
        target = normalize_path(new_path)

        if source == ROOT or source not in self._nodes:
            logger.debug("Rename {src} -> {dst} refused: no such source", src=source, dst=target)
            return False
        if target in self._nodes:
            logger.debug("Rename {src} -> {dst} refused: target exists", src=source, dst=target)
            return False
        if is_within(target, source):
            logger.debug("Rename {src} -> {dst} refused: target inside source", src=source, dst=target)
            return False
        if self._file_ancestor(target) is not None:
            logger.debug("Rename {src} -> {dst} refused: target parent is a file", src=source, dst=target)
            return False

        self._ensure_parents(target)
        moved = [self._nodes.pop(key) for key in self._subtree(source)]
        self._parent_of(source).children.discard(base_name(source))
        for node in moved:
            node.path = target + node.path[len(source) :]
            self._nodes[node.path] = node
        self._parent_of(target).children.add(base_name(target))

        logger.debug("Renamed {src} -> {dst} ({count} nodes)", src=source, dst=target, count=len(moved))
        return True

    def delete(self, path: str) -> bool:
        normalized = normalize_path(path)
        if normalized == ROOT or normalized not in self._nodes:
            return False

        removed = self._subtree(normalized)
        for key in removed:
            del self._nodes[key]
        self._parent_of(normalized).children.discard(base_name(normalized))

        logger.debug("Deleted {path} ({count} nodes)", path=normalized, count=len(removed))
        return True

    def reset(self) -> None:
        """Remove everything except the root."""
        self._nodes = {ROOT: DirectoryNode(ROOT)}

    # ── Snapshots ─────────────────────────────────────────────────────

    @overload
    def serialize(self, *, mode: Literal["python"] = "python") -> Snapshot: ...

    @overload
    def serialize(self, *, mode: Literal["json"]) -> dict[str, dict[str, Any]]: ...

    def serialize(self, *, mode: Literal["python", "json"] = "python") -> Any:
        """Snapshot every non-root node keyed by path.

        Args
        ----
            mode: ``"python"`` for :class:`SnapshotEntry` values, ``"json"``
                for plain dicts ready for transport.
        """
        snapshot: Snapshot = {}
        for path, node in sorted(self._nodes.items()):
            if path == ROOT:
                continue
            if isinstance(node, FileNode):
                snapshot[path] = SnapshotEntry(type="file", content=node.content)
            else:
                snapshot[path] = SnapshotEntry(type="directory")

        if mode == "json":
            return {path: entry.model_dump(exclude_none=True) for path, entry in snapshot.items()}
        return snapshot

    @classmethod
    def deserialize(cls, snapshot: Mapping[str, SnapshotEntry | Mapping[str, Any]]) -> InMemoryVFS:
        """Rebuild a filesystem from :meth:`serialize` output.

        Accepts either model values or plain dicts. A ``/`` key is ignored.
        """
        vfs = cls()
        for path, raw in sorted(snapshot.items()):
            entry = raw if isinstance(raw, SnapshotEntry) else SnapshotEntry.model_validate(raw)
            if normalize_path(path) == ROOT:
                continue
            if entry.type == "directory":
                vfs.create_directory(path)
            else:
                vfs.write_file(path, entry.content or "")
        return vfs

    # ── Internals ─────────────────────────────────────────────────────

    def _require(self, path: str) -> Node:
        node = self._nodes.get(path)
        if node is None:
            raise PathNotFoundError(path)
        return node

    def _file_ancestor(self, path: str) -> str | None:
        for ancestor in ancestors(path):
            if isinstance(self._nodes.get(ancestor), FileNode):
                return ancestor
        return None

    def _ensure_parents(self, path: str) -> None:
        # Validate the whole chain before creating anything
        blocked = self._file_ancestor(path)
        if blocked is not None:
            raise PathIsFileError(blocked)
        for ancestor in ancestors(path):
            if ancestor not in self._nodes:
                self._attach(DirectoryNode(ancestor))

    def _attach(self, node: Node) -> None:
        parent = self._parent_of(node.path)
        self._nodes[node.path] = node
        parent.children.add(base_name(node.path))

    def _parent_of(self, path: str) -> DirectoryNode:
        parent = self._nodes[parent_path(path)]
        if not isinstance(parent, DirectoryNode):
            raise NotDirectoryError(parent.path)
        return parent

    def _subtree(self, path: str) -> list[str]:
        return [key for key in self._nodes if is_within(key, path)]


__all__ = ["InMemoryVFS"]
