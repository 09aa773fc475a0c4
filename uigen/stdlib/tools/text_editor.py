"""TextEditorTool: the ``str_replace_editor`` tool.

Views, creates and edits text files in a workspace. Every outcome, failures
included, is returned as plain text: the caller is a model that reads the
result and corrects itself, so domain errors never propagate as exceptions.
The result strings are a fixed protocol; consumers match on them verbatim.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, assert_never

from pydantic import ValidationError

from uigen.kernel.domain.commands import (
    EDITOR_COMMANDS,
    CreateCommand,
    EditorCommand,
    InsertCommand,
    StrReplaceCommand,
    UndoEditCommand,
    ViewCommand,
    parse_editor_command,
)
from uigen.kernel.domain.vfs import DirectoryNode, EntryType
from uigen.kernel.exceptions import InvalidPathError, PathIsFileError
from uigen.kernel.logging import get_logger
from uigen.stdlib.tools.base import WorkspaceTool, summarize_validation_error

logger = get_logger(__name__)

UNDO_NOT_SUPPORTED = (
    "Error: undo_edit command is not supported in this version. "
    "Use str_replace to revert changes."
)


class TextEditorTool(WorkspaceTool):
    """View, create and edit files in the workspace.

    Commands
    --------
    - ``view``: directory listing or numbered lines, optionally a range
    - ``create``: new file with ``file_text``
    - ``str_replace``: replace every occurrence of ``old_str``
    - ``insert``: add ``new_str`` as a line after ``insert_line``
    - ``undo_edit``: always rejected
    """

    name = "str_replace_editor"
    description = (
        "View, create and edit files in the project. "
        "Paths are absolute and rooted at '/'. "
        "str_replace replaces every occurrence of old_str."
    )
    command_type = EditorCommand

    def execute(self, command: EditorCommand | Mapping[str, Any]) -> str:
        """Run one command and return its result text."""
        if isinstance(command, Mapping):
            tag = command.get("command")
            if not isinstance(tag, str) or tag not in EDITOR_COMMANDS:
                return "Error: Invalid command"
            try:
                command = parse_editor_command(command)
            except ValidationError as exc:
                return f"Error: Invalid input: {summarize_validation_error(exc)}"

        try:
            match command:
                case ViewCommand():
                    return self._view(command)
                case CreateCommand():
                    return self._create(command)
                case StrReplaceCommand():
                    return self._str_replace(command)
                case InsertCommand():
                    return self._insert(command)
                case UndoEditCommand():
                    return UNDO_NOT_SUPPORTED
                case _:
                    assert_never(command)
        except InvalidPathError as exc:
            return f"Error: Invalid path: {exc.path}"

    def _view(self, command: ViewCommand) -> str:
        node = self.vfs.get_node(command.path)
        if node is None:
            return f"File not found: {command.path}"

        if isinstance(node, DirectoryNode):
            return "\n".join(
                f"[DIR] {entry.name}"
                if entry.entry_type is EntryType.DIRECTORY
                else f"[FILE] {entry.name}"
                for entry in self.vfs.list_directory(node.path)
            )

        lines = node.content.split("\n")
        start, end = command.view_range or (1, len(lines))
        if end == -1:
            end = len(lines)
        return "\n".join(
            f"{number}\t{line}" for number, line in enumerate(lines[start - 1 : end], start=start)
        )

    def _create(self, command: CreateCommand) -> str:
        if self.vfs.exists(command.path):
            return f"Error: File already exists: {command.path}"
        try:
            self.vfs.create_file(command.path, command.file_text)
        except PathIsFileError as exc:
            return f"Error: Parent path is a file: {exc.path}"
        return f"File created: {command.path}"

    def _str_replace(self, command: StrReplaceCommand) -> str:
        node = self.vfs.get_node(command.path)
        if node is None:
            return f"Error: File not found: {command.path}"
        if isinstance(node, DirectoryNode):
            return f"Error: Cannot edit a directory: {command.path}"

        occurrences = node.content.count(command.old_str)
        if occurrences == 0:
            logger.debug("str_replace found no match in {path}", path=node.path)
            return f'Error: String not found in file: "{command.old_str}"'

        self.vfs.write_file(node.path, node.content.replace(command.old_str, command.new_str))
        return f"Replaced {occurrences} occurrence(s) of the string in {command.path}"

    def _insert(self, command: InsertCommand) -> str:
        node = self.vfs.get_node(command.path)
        if node is None:
            return f"Error: File not found: {command.path}"
        if isinstance(node, DirectoryNode):
            return f"Error: Cannot edit a directory: {command.path}"

        lines = node.content.split("\n")
        lines.insert(command.insert_line, command.new_str)
        self.vfs.write_file(node.path, "\n".join(lines))
        return f"Text inserted at line {command.insert_line} in {command.path}"


__all__ = ["UNDO_NOT_SUPPORTED", "TextEditorTool"]
