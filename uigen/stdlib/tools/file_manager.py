"""FileManagerTool: the ``file_manager`` tool.

Renames and deletes files or whole directories. Unlike the text editor it
answers with a structured :class:`FileManagerResult`, so that the calling
loop can branch on ``success`` without parsing text.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, assert_never

from pydantic import ValidationError

from uigen.kernel.domain.commands import (
    FILE_MANAGER_COMMANDS,
    DeleteCommand,
    FileManagerCommand,
    FileManagerResult,
    RenameCommand,
    parse_file_manager_command,
)
from uigen.kernel.exceptions import VFSError
from uigen.kernel.logging import get_logger
from uigen.stdlib.tools.base import WorkspaceTool, summarize_validation_error

logger = get_logger(__name__)


class FileManagerTool(WorkspaceTool):
    """Rename or delete files and directories in the workspace."""

    name = "file_manager"
    description = (
        "Rename/move or delete files and directories. "
        "Deleting a directory removes everything inside it."
    )
    command_type = FileManagerCommand

    def execute(self, command: FileManagerCommand | Mapping[str, Any]) -> FileManagerResult:
        """Run one command and return its structured outcome."""
        if isinstance(command, Mapping):
            tag = command.get("command")
            if not isinstance(tag, str) or tag not in FILE_MANAGER_COMMANDS:
                return FileManagerResult.fail("Invalid command")
            try:
                command = parse_file_manager_command(command)
            except ValidationError as exc:
                return FileManagerResult.fail(f"Invalid input: {summarize_validation_error(exc)}")

        match command:
            case RenameCommand():
                return self._rename(command)
            case DeleteCommand():
                return self._delete(command)
            case _:
                assert_never(command)

    def _rename(self, command: RenameCommand) -> FileManagerResult:
        if not command.new_path:
            return FileManagerResult.fail("new_path is required for rename command")

        try:
            renamed = self.vfs.rename(command.path, command.new_path)
        except VFSError as exc:
            logger.debug("Rename rejected: {reason}", reason=exc.reason)
            renamed = False

        if not renamed:
            return FileManagerResult.fail(f"Failed to rename {command.path} to {command.new_path}")
        return FileManagerResult.ok(f"Successfully renamed {command.path} to {command.new_path}")

    def _delete(self, command: DeleteCommand) -> FileManagerResult:
        try:
            deleted = self.vfs.delete(command.path)
        except VFSError as exc:
            logger.debug("Delete rejected: {reason}", reason=exc.reason)
            deleted = False

        if not deleted:
            return FileManagerResult.fail(f"Failed to delete {command.path}")
        return FileManagerResult.ok(f"Successfully deleted {command.path}")


__all__ = ["FileManagerTool"]
