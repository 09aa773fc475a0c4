"""Shared base for tools that operate on a workspace filesystem."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, ClassVar

from pydantic import TypeAdapter, ValidationError

if TYPE_CHECKING:
    from uigen.kernel.ports.vfs import VFS


class WorkspaceTool:
    """A model-callable tool bound to exactly one workspace filesystem.

    Subclasses set ``name``, ``description`` and ``command_type`` (the
    discriminated union of commands they accept) and implement ``execute``.
    Tools hold no state besides the filesystem reference, so every call is
    fully described by its command.
    """

    name: ClassVar[str]
    description: ClassVar[str]
    command_type: ClassVar[Any]

    def __init__(self, vfs: VFS) -> None:
        self._vfs = vfs

    @property
    def vfs(self) -> VFS:
        return self._vfs

    @classmethod
    def input_schema(cls) -> dict[str, Any]:
        """Return the JSON schema of the accepted command union."""
        return TypeAdapter(cls.command_type).json_schema()

    @classmethod
    def definition(cls) -> dict[str, Any]:
        """Return a provider-neutral tool definition for the model."""
        return {
            "name": cls.name,
            "description": cls.description,
            "input_schema": cls.input_schema(),
        }


def summarize_validation_error(exc: ValidationError) -> str:
    """Render a short, model-readable summary of a validation failure."""
    parts = []
    for error in exc.errors()[:5]:
        location = ".".join(str(loc) for loc in error.get("loc", ()) if not isinstance(loc, int))
        parts.append(f"{location}: {error.get('msg', '')}" if location else error.get("msg", ""))
    summary = "; ".join(parts)
    return (summary[:297] + "...") if len(summary) > 300 else summary


__all__ = ["WorkspaceTool", "summarize_validation_error"]
