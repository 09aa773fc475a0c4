"""Tests for InMemoryVFS driver."""

from __future__ import annotations

import pytest

from uigen.drivers.vfs.memory import InMemoryVFS
from uigen.kernel.domain.vfs import DirEntry, EntryType, FileNode, SnapshotEntry
from uigen.kernel.exceptions import (
    InvalidPathError,
    IsDirectoryError,
    NotDirectoryError,
    PathExistsError,
    PathIsFileError,
    PathNotFoundError,
)
from uigen.kernel.ports.vfs import VFS


class TestProtocol:
    def test_satisfies_protocol(self) -> None:
        assert isinstance(InMemoryVFS(), VFS)

    def test_starts_with_root_only(self, vfs: InMemoryVFS) -> None:
        assert vfs.exists("/")
        assert len(vfs) == 0
        assert vfs.list_directory("/") == []


class TestFiles:
    def test_create_then_read(self, vfs: InMemoryVFS) -> None:
        vfs.create_file("/App.jsx", "export default App;")
        assert vfs.read_file("/App.jsx") == "export default App;"

    def test_create_defaults_to_empty(self, vfs: InMemoryVFS) -> None:
        vfs.create_file("/empty.txt")
        assert vfs.read_file("/empty.txt") == ""

    def test_paths_are_normalized(self, vfs: InMemoryVFS) -> None:
        vfs.create_file("components//Card.jsx/", "x")
        assert vfs.exists("/components/Card.jsx")
        assert vfs.read_file("/components/Card.jsx") == "x"

    def test_create_makes_parents(self, vfs: InMemoryVFS) -> None:
        vfs.create_file("/src/components/Button.tsx", "")
        assert vfs.stat("/src").entry_type is EntryType.DIRECTORY
        assert vfs.stat("/src/components").entry_type is EntryType.DIRECTORY

    def test_create_existing_raises(self, vfs: InMemoryVFS) -> None:
        vfs.create_file("/a.txt", "first")
        with pytest.raises(PathExistsError):
            vfs.create_file("/a.txt", "second")
        assert vfs.read_file("/a.txt") == "first"

    def test_create_under_file_raises_and_changes_nothing(self, vfs: InMemoryVFS) -> None:
        vfs.create_file("/a", "file")
        with pytest.raises(PathIsFileError) as exc_info:
            vfs.create_file("/a/b/c.txt")
        assert exc_info.value.path == "/a"
        assert len(vfs) == 1

    def test_read_missing_raises(self, vfs: InMemoryVFS) -> None:
        with pytest.raises(PathNotFoundError):
            vfs.read_file("/missing.txt")

    def test_read_directory_raises(self, vfs: InMemoryVFS) -> None:
        vfs.create_directory("/src")
        with pytest.raises(IsDirectoryError):
            vfs.read_file("/src")

    def test_write_replaces_content(self, vfs: InMemoryVFS) -> None:
        vfs.create_file("/a.txt", "old")
        vfs.write_file("/a.txt", "new")
        assert vfs.read_file("/a.txt") == "new"

    def test_write_creates_missing_file(self, vfs: InMemoryVFS) -> None:
        vfs.write_file("/deep/a.txt", "x")
        assert vfs.read_file("/deep/a.txt") == "x"

    def test_write_directory_raises(self, vfs: InMemoryVFS) -> None:
        vfs.create_directory("/src")
        with pytest.raises(IsDirectoryError):
            vfs.write_file("/src", "x")

    def test_invalid_path_raises(self, vfs: InMemoryVFS) -> None:
        with pytest.raises(InvalidPathError):
            vfs.create_file("/a/../b.txt")


class TestDirectories:
    def test_create_directory_idempotent(self, vfs: InMemoryVFS) -> None:
        vfs.create_directory("/src")
        vfs.create_file("/src/a.txt", "x")
        vfs.create_directory("/src")
        assert vfs.read_file("/src/a.txt") == "x"

    def test_create_directory_over_file_raises(self, vfs: InMemoryVFS) -> None:
        vfs.create_file("/src", "x")
        with pytest.raises(PathIsFileError):
            vfs.create_directory("/src")

    def test_list_directory_sorted_dirs_first(self, vfs: InMemoryVFS) -> None:
        vfs.create_file("/src/index.ts")
        vfs.create_directory("/src/components")
        vfs.create_file("/src/app.ts")
        vfs.create_directory("/src/assets")

        entries = vfs.list_directory("/src")

        assert [e.name for e in entries] == ["assets", "components", "app.ts", "index.ts"]
        assert entries[0] == DirEntry(
            name="assets", entry_type=EntryType.DIRECTORY, path="/src/assets"
        )

    def test_list_file_raises(self, vfs: InMemoryVFS) -> None:
        vfs.create_file("/a.txt")
        with pytest.raises(NotDirectoryError):
            vfs.list_directory("/a.txt")

    def test_list_missing_raises(self, vfs: InMemoryVFS) -> None:
        with pytest.raises(PathNotFoundError):
            vfs.list_directory("/nope")


class TestStat:
    def test_file(self, vfs: InMemoryVFS) -> None:
        vfs.create_file("/a.txt", "one\ntwo")
        stat = vfs.stat("a.txt")
        assert stat.path == "/a.txt"
        assert stat.size == 7
        assert stat.line_count == 2
        assert stat.child_count is None

    def test_directory(self, vfs: InMemoryVFS) -> None:
        vfs.create_file("/src/a.txt")
        vfs.create_file("/src/b.txt")
        assert vfs.stat("/src").child_count == 2
        assert vfs.stat("/").child_count == 1

    def test_missing(self, vfs: InMemoryVFS) -> None:
        with pytest.raises(PathNotFoundError):
            vfs.stat("/nope")


class TestRename:
    def test_rename_file(self, vfs: InMemoryVFS) -> None:
        vfs.create_file("/old.txt", "content")
        assert vfs.rename("/old.txt", "/new.txt") is True
        assert not vfs.exists("/old.txt")
        assert vfs.read_file("/new.txt") == "content"
        assert [e.name for e in vfs.list_directory("/")] == ["new.txt"]

    def test_rename_creates_parents(self, vfs: InMemoryVFS) -> None:
        vfs.create_file("/file.txt", "content")
        assert vfs.rename("/file.txt", "/deeply/nested/path/file.txt") is True
        assert vfs.exists("/deeply/nested")
        assert vfs.read_file("/deeply/nested/path/file.txt") == "content"

    def test_rename_directory_moves_subtree(self, vfs: InMemoryVFS) -> None:
        vfs.create_file("/old/a.txt", "a")
        vfs.create_file("/old/sub/b.txt", "b")

        assert vfs.rename("/old", "/new") is True

        assert not vfs.exists("/old")
        assert not vfs.exists("/old/sub/b.txt")
        assert vfs.read_file("/new/a.txt") == "a"
        assert vfs.read_file("/new/sub/b.txt") == "b"
        assert vfs.get_node("/new/sub/b.txt").path == "/new/sub/b.txt"  # type: ignore[union-attr]
        assert [e.name for e in vfs.list_directory("/new")] == ["sub", "a.txt"]

    def test_rename_does_not_touch_sibling_prefix(self, vfs: InMemoryVFS) -> None:
        vfs.create_file("/a/x.txt", "x")
        vfs.create_file("/ab/y.txt", "y")
        assert vfs.rename("/a", "/c") is True
        assert vfs.read_file("/ab/y.txt") == "y"

    def test_missing_source(self, vfs: InMemoryVFS) -> None:
        assert vfs.rename("/nope", "/other") is False
        assert len(vfs) == 0

    def test_existing_destination_leaves_both(self, vfs: InMemoryVFS) -> None:
        vfs.create_file("/source.txt", "source")
        vfs.create_file("/dest.txt", "dest")
        assert vfs.rename("/source.txt", "/dest.txt") is False
        assert vfs.read_file("/source.txt") == "source"
        assert vfs.read_file("/dest.txt") == "dest"

    def test_root_cannot_move(self, vfs: InMemoryVFS) -> None:
        assert vfs.rename("/", "/elsewhere") is False

    def test_into_own_subtree_refused(self, vfs: InMemoryVFS) -> None:
        vfs.create_file("/a/x.txt")
        assert vfs.rename("/a", "/a/b") is False
        assert vfs.exists("/a/x.txt")

    def test_under_file_refused(self, vfs: InMemoryVFS) -> None:
        vfs.create_file("/a.txt", "x")
        vfs.create_file("/b.txt", "y")
        assert vfs.rename("/b.txt", "/a.txt/b.txt") is False
        assert vfs.read_file("/b.txt") == "y"


class TestDelete:
    def test_delete_file(self, vfs: InMemoryVFS) -> None:
        vfs.create_file("/a.txt")
        assert vfs.delete("/a.txt") is True
        assert not vfs.exists("/a.txt")
        assert vfs.list_directory("/") == []

    def test_delete_recursive(self, vfs: InMemoryVFS) -> None:
        vfs.create_file("/folder/file1.txt", "1")
        vfs.create_file("/folder/sub/file2.txt", "2")
        assert vfs.delete("/folder") is True
        assert len(vfs) == 0

    def test_delete_missing(self, vfs: InMemoryVFS) -> None:
        assert vfs.delete("/nope") is False

    def test_delete_root_refused(self, vfs: InMemoryVFS) -> None:
        vfs.create_file("/a.txt")
        assert vfs.delete("/") is False
        assert vfs.exists("/a.txt")

    def test_reset(self, vfs: InMemoryVFS) -> None:
        vfs.create_file("/a/b.txt")
        vfs.reset()
        assert len(vfs) == 0
        assert vfs.exists("/")


class TestSnapshots:
    def test_serialize_excludes_root(self, vfs: InMemoryVFS) -> None:
        vfs.create_file("/src/a.txt", "a")
        assert vfs.serialize() == {
            "/src": SnapshotEntry(type="directory"),
            "/src/a.txt": SnapshotEntry(type="file", content="a"),
        }

    def test_serialize_json_mode(self, vfs: InMemoryVFS) -> None:
        vfs.create_file("/src/a.txt", "a")
        assert vfs.serialize(mode="json") == {
            "/src": {"type": "directory"},
            "/src/a.txt": {"type": "file", "content": "a"},
        }

    def test_round_trip(self, vfs: InMemoryVFS) -> None:
        vfs.create_file("/App.jsx", "app")
        vfs.create_file("/components/Card.jsx", "card")
        vfs.create_directory("/empty")

        clone = InMemoryVFS.deserialize(vfs.serialize(mode="json"))

        assert clone.get_all_files() == vfs.get_all_files()
        assert clone.serialize() == vfs.serialize()
        assert clone.exists("/empty")

    def test_deserialize_ignores_root_key(self) -> None:
        clone = InMemoryVFS.deserialize(
            {"/": {"type": "directory"}, "/a.txt": {"type": "file", "content": "x"}}
        )
        assert len(clone) == 1

    def test_get_all_files(self, vfs: InMemoryVFS) -> None:
        vfs.create_file("/b.txt", "b")
        vfs.create_file("/a/c.txt", "c")
        assert vfs.get_all_files() == {"/a/c.txt": "c", "/b.txt": "b"}


class TestInternals:
    def test_attach_under_file_raises_and_changes_nothing(self, vfs: InMemoryVFS) -> None:
        vfs.create_file("/a.txt", "x")
        with pytest.raises(NotDirectoryError):
            vfs._attach(FileNode("/a.txt/b.txt"))
        assert not vfs.exists("/a.txt/b.txt")
        assert vfs.read_file("/a.txt") == "x"
