"""Tests for the str_replace_editor tool."""

from __future__ import annotations

import pytest

from uigen.drivers.vfs.memory import InMemoryVFS
from uigen.kernel.domain.commands import CreateCommand, ViewCommand
from uigen.stdlib.tools.text_editor import UNDO_NOT_SUPPORTED, TextEditorTool


@pytest.fixture
def tool(vfs: InMemoryVFS) -> TextEditorTool:
    """Fixture providing a text editor bound to the workspace."""
    return TextEditorTool(vfs)


class TestDefinition:
    def test_name_and_schema(self) -> None:
        definition = TextEditorTool.definition()
        assert definition["name"] == "str_replace_editor"
        assert definition["input_schema"]


class TestView:
    def test_file_with_line_numbers(self, vfs: InMemoryVFS, tool: TextEditorTool) -> None:
        vfs.create_file("/test.txt", "line1\nline2\nline3")
        result = tool.execute({"command": "view", "path": "/test.txt"})
        assert result == "1\tline1\n2\tline2\n3\tline3"

    def test_view_range(self, vfs: InMemoryVFS, tool: TextEditorTool) -> None:
        vfs.create_file("/test.txt", "line1\nline2\nline3\nline4\nline5")
        result = tool.execute({"command": "view", "path": "/test.txt", "view_range": [2, 4]})
        assert result == "2\tline2\n3\tline3\n4\tline4"

    def test_view_range_to_end(self, vfs: InMemoryVFS, tool: TextEditorTool) -> None:
        vfs.create_file("/test.txt", "line1\nline2\nline3")
        result = tool.execute({"command": "view", "path": "/test.txt", "view_range": [2, -1]})
        assert result == "2\tline2\n3\tline3"

    def test_directory(self, vfs: InMemoryVFS, tool: TextEditorTool) -> None:
        vfs.create_directory("/src")
        vfs.create_file("/src/index.ts", "")
        vfs.create_directory("/src/components")
        result = tool.execute({"command": "view", "path": "/src"})
        assert result == "[DIR] components\n[FILE] index.ts"

    def test_missing(self, tool: TextEditorTool) -> None:
        result = tool.execute({"command": "view", "path": "/nonexistent.txt"})
        assert result == "File not found: /nonexistent.txt"

    def test_accepts_command_model(self, vfs: InMemoryVFS, tool: TextEditorTool) -> None:
        vfs.create_file("/a.txt", "x")
        assert tool.execute(ViewCommand(path="/a.txt")) == "1\tx"


class TestCreate:
    def test_creates_file(self, vfs: InMemoryVFS, tool: TextEditorTool) -> None:
        result = tool.execute(
            {"command": "create", "path": "/new-file.txt", "file_text": "Hello World"}
        )
        assert result == "File created: /new-file.txt"
        assert vfs.read_file("/new-file.txt") == "Hello World"

    def test_creates_parents(self, vfs: InMemoryVFS, tool: TextEditorTool) -> None:
        result = tool.execute(
            CreateCommand(
                path="/src/components/Button.tsx", file_text="export const Button = () => {};"
            )
        )
        assert result == "File created: /src/components/Button.tsx"
        assert vfs.exists("/src")
        assert vfs.exists("/src/components")

    def test_empty_file_text(self, vfs: InMemoryVFS, tool: TextEditorTool) -> None:
        assert tool.execute({"command": "create", "path": "/empty.txt"}) == (
            "File created: /empty.txt"
        )
        assert vfs.read_file("/empty.txt") == ""

    def test_existing_file(self, vfs: InMemoryVFS, tool: TextEditorTool) -> None:
        vfs.create_file("/existing.txt", "content")
        result = tool.execute(
            {"command": "create", "path": "/existing.txt", "file_text": "new content"}
        )
        assert result == "Error: File already exists: /existing.txt"
        assert vfs.read_file("/existing.txt") == "content"

    def test_parent_is_file(self, vfs: InMemoryVFS, tool: TextEditorTool) -> None:
        vfs.create_file("/a", "x")
        result = tool.execute({"command": "create", "path": "/a/b.txt"})
        assert result == "Error: Parent path is a file: /a"


class TestStrReplace:
    def test_replaces(self, vfs: InMemoryVFS, tool: TextEditorTool) -> None:
        vfs.create_file("/test.txt", "Hello World")
        result = tool.execute(
            {"command": "str_replace", "path": "/test.txt", "old_str": "World", "new_str": "Universe"}
        )
        assert result == "Replaced 1 occurrence(s) of the string in /test.txt"
        assert vfs.read_file("/test.txt") == "Hello Universe"

    def test_replaces_all_occurrences(self, vfs: InMemoryVFS, tool: TextEditorTool) -> None:
        vfs.create_file("/test.txt", "foo bar foo baz foo")
        result = tool.execute(
            {"command": "str_replace", "path": "/test.txt", "old_str": "foo", "new_str": "qux"}
        )
        assert result == "Replaced 3 occurrence(s) of the string in /test.txt"
        assert vfs.read_file("/test.txt") == "qux bar qux baz qux"

    def test_empty_new_str(self, vfs: InMemoryVFS, tool: TextEditorTool) -> None:
        vfs.create_file("/test.txt", "Hello World")
        result = tool.execute(
            {"command": "str_replace", "path": "/test.txt", "old_str": " World", "new_str": ""}
        )
        assert result == "Replaced 1 occurrence(s) of the string in /test.txt"
        assert vfs.read_file("/test.txt") == "Hello"

    def test_replacement_is_literal(self, vfs: InMemoryVFS, tool: TextEditorTool) -> None:
        vfs.create_file("/test.txt", "a.b a.b")
        tool.execute({"command": "str_replace", "path": "/test.txt", "old_str": ".", "new_str": "$&"})
        assert vfs.read_file("/test.txt") == "a$&b a$&b"

    def test_not_found(self, vfs: InMemoryVFS, tool: TextEditorTool) -> None:
        vfs.create_file("/test.txt", "Hello World")
        result = tool.execute(
            {"command": "str_replace", "path": "/test.txt", "old_str": "nonexistent", "new_str": "x"}
        )
        assert result == 'Error: String not found in file: "nonexistent"'
        assert vfs.read_file("/test.txt") == "Hello World"

    def test_missing_file(self, tool: TextEditorTool) -> None:
        result = tool.execute(
            {"command": "str_replace", "path": "/nonexistent.txt", "old_str": "old", "new_str": "new"}
        )
        assert result == "Error: File not found: /nonexistent.txt"

    def test_directory(self, vfs: InMemoryVFS, tool: TextEditorTool) -> None:
        vfs.create_directory("/src")
        result = tool.execute(
            {"command": "str_replace", "path": "/src", "old_str": "old", "new_str": "new"}
        )
        assert result == "Error: Cannot edit a directory: /src"


class TestInsert:
    def test_inserts_after_line(self, vfs: InMemoryVFS, tool: TextEditorTool) -> None:
        vfs.create_file("/test.txt", "line1\nline2\nline3")
        result = tool.execute(
            {"command": "insert", "path": "/test.txt", "insert_line": 1, "new_str": "inserted"}
        )
        assert result == "Text inserted at line 1 in /test.txt"
        assert vfs.read_file("/test.txt") == "line1\ninserted\nline2\nline3"

    def test_line_zero_prepends(self, vfs: InMemoryVFS, tool: TextEditorTool) -> None:
        vfs.create_file("/test.txt", "line1\nline2")
        result = tool.execute(
            {"command": "insert", "path": "/test.txt", "insert_line": 0, "new_str": "first"}
        )
        assert result == "Text inserted at line 0 in /test.txt"
        assert vfs.read_file("/test.txt") == "first\nline1\nline2"

    def test_defaults_to_line_zero(self, vfs: InMemoryVFS, tool: TextEditorTool) -> None:
        vfs.create_file("/test.txt", "existing")
        result = tool.execute({"command": "insert", "path": "/test.txt", "new_str": "prepended"})
        assert result == "Text inserted at line 0 in /test.txt"
        assert vfs.read_file("/test.txt") == "prepended\nexisting"

    def test_missing_file(self, tool: TextEditorTool) -> None:
        result = tool.execute(
            {"command": "insert", "path": "/nonexistent.txt", "insert_line": 0, "new_str": "text"}
        )
        assert result == "Error: File not found: /nonexistent.txt"

    def test_directory(self, vfs: InMemoryVFS, tool: TextEditorTool) -> None:
        vfs.create_directory("/src")
        result = tool.execute({"command": "insert", "path": "/src", "new_str": "x"})
        assert result == "Error: Cannot edit a directory: /src"


class TestInvalidInput:
    def test_undo_edit(self, tool: TextEditorTool) -> None:
        result = tool.execute({"command": "undo_edit", "path": "/test.txt"})
        assert result == UNDO_NOT_SUPPORTED
        assert result == (
            "Error: undo_edit command is not supported in this version. "
            "Use str_replace to revert changes."
        )

    def test_unknown_command(self, tool: TextEditorTool) -> None:
        assert tool.execute({"command": "explode", "path": "/a"}) == "Error: Invalid command"

    @pytest.mark.parametrize("tag", [["view"], {"x": 1}, 3, None])
    def test_non_string_command(self, tool: TextEditorTool, tag: object) -> None:
        assert tool.execute({"command": tag, "path": "/"}) == "Error: Invalid command"

    def test_missing_field(self, tool: TextEditorTool) -> None:
        result = tool.execute({"command": "str_replace", "path": "/a"})
        assert result.startswith("Error: Invalid input: ")
        assert "old_str" in result

    def test_invalid_path(self, tool: TextEditorTool) -> None:
        result = tool.execute({"command": "create", "path": "/a/../b.txt"})
        assert result == "Error: Invalid path: /a/../b.txt"
