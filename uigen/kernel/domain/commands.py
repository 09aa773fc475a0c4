"""Tool command models.

Each command is a self-describing record discriminated on its ``command``
field. The text editor and the file manager accept disjoint command sets, so
each has its own closed union; :func:`parse_editor_command` and
:func:`parse_file_manager_command` validate raw tool input into them.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Annotated, Any, Literal

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter, field_validator


class _Command(BaseModel):
    model_config = ConfigDict(frozen=True, extra="ignore")

    path: str


# ---------------------------------------------------------------------------
# str_replace_editor
# ---------------------------------------------------------------------------


class ViewCommand(_Command):
    """Show a directory listing or numbered file lines."""

    command: Literal["view"] = "view"
    view_range: tuple[int, int] | None = None

    @field_validator("view_range")
    @classmethod
    def _check_range(cls, value: tuple[int, int] | None) -> tuple[int, int] | None:
        if value is None:
            return value
        start, end = value
        if start < 1:
            raise ValueError("view_range start must be >= 1")
        if end != -1 and end < start:
            raise ValueError("view_range end must be >= start, or -1 for end of file")
        return value


class CreateCommand(_Command):
    """Create a new file, failing if the path is taken."""

    command: Literal["create"] = "create"
    file_text: str = ""


class StrReplaceCommand(_Command):
    """Replace every occurrence of ``old_str`` with ``new_str``."""

    command: Literal["str_replace"] = "str_replace"
    old_str: str = Field(min_length=1)
    new_str: str = ""


class InsertCommand(_Command):
    """Insert ``new_str`` as a line after ``insert_line`` (0 prepends)."""

    command: Literal["insert"] = "insert"
    insert_line: int = Field(default=0, ge=0)
    new_str: str


class UndoEditCommand(_Command):
    command: Literal["undo_edit"] = "undo_edit"


EditorCommand = Annotated[
    ViewCommand | CreateCommand | StrReplaceCommand | InsertCommand | UndoEditCommand,
    Field(discriminator="command"),
]

EDITOR_COMMANDS = frozenset({"view", "create", "str_replace", "insert", "undo_edit"})


# ---------------------------------------------------------------------------
# file_manager
# ---------------------------------------------------------------------------


class RenameCommand(_Command):
    """Move a file or directory subtree to ``new_path``."""

    command: Literal["rename"] = "rename"
    new_path: str | None = None


class DeleteCommand(_Command):
    """Delete a file or, recursively, a directory."""

    command: Literal["delete"] = "delete"


FileManagerCommand = Annotated[RenameCommand | DeleteCommand, Field(discriminator="command")]

FILE_MANAGER_COMMANDS = frozenset({"rename", "delete"})


class FileManagerResult(BaseModel):
    """Structured outcome of a file manager command."""

    success: bool
    message: str | None = None
    error: str | None = None

    @classmethod
    def ok(cls, message: str) -> FileManagerResult:
        return cls(success=True, message=message)

    @classmethod
    def fail(cls, error: str) -> FileManagerResult:
        return cls(success=False, error=error)


_editor_adapter: TypeAdapter[EditorCommand] = TypeAdapter(EditorCommand)
_file_manager_adapter: TypeAdapter[FileManagerCommand] = TypeAdapter(FileManagerCommand)


def parse_editor_command(raw: Mapping[str, Any]) -> EditorCommand:
    """Validate raw tool input into a text editor command.

    Raises
    ------
    pydantic.ValidationError
        If the command tag is unknown or required fields are missing.
    """
    return _editor_adapter.validate_python(dict(raw))


def parse_file_manager_command(raw: Mapping[str, Any]) -> FileManagerCommand:
    """Validate raw tool input into a file manager command."""
    return _file_manager_adapter.validate_python(dict(raw))


__all__ = [
    "EDITOR_COMMANDS",
    "FILE_MANAGER_COMMANDS",
    "CreateCommand",
    "DeleteCommand",
    "EditorCommand",
    "FileManagerCommand",
    "FileManagerResult",
    "InsertCommand",
    "RenameCommand",
    "StrReplaceCommand",
    "UndoEditCommand",
    "ViewCommand",
    "parse_editor_command",
    "parse_file_manager_command",
]
