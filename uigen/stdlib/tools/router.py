"""The workspace tool router.

Binds the text editor and the file manager to one filesystem and dispatches
model tool calls to them by name. Every call yields a :class:`ToolInvocation`
whose ``output`` is the text appended to the transcript as the tool result.
"""

from __future__ import annotations

import json
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from uigen.kernel.domain.commands import FileManagerResult
from uigen.kernel.logging import get_logger
from uigen.stdlib.tools.file_manager import FileManagerTool
from uigen.stdlib.tools.text_editor import TextEditorTool

if TYPE_CHECKING:
    from uigen.kernel.domain.stream import ToolCallEvent, ToolCallPart
    from uigen.kernel.ports.vfs import VFS
    from uigen.stdlib.tools.base import WorkspaceTool

logger = get_logger(__name__)


@dataclass(slots=True)
class ToolInvocation:
    """Record of one executed tool call."""

    tool_call_id: str
    tool_name: str
    args: dict[str, Any]
    result: str | FileManagerResult
    output: str

    @property
    def succeeded(self) -> bool:
        if isinstance(self.result, FileManagerResult):
            return self.result.success
        return not self.result.startswith(("Error:", "File not found:"))


def render_result(result: str | FileManagerResult) -> str:
    """Render a tool result as transcript text."""
    if isinstance(result, FileManagerResult):
        return result.model_dump_json(exclude_none=True)
    return result


class WorkspaceToolRouter:
    """Routes tool calls to the tools of a single workspace.

    Parameters
    ----------
    vfs : VFS
        The workspace filesystem shared by all tools.
    """

    def __init__(self, vfs: VFS) -> None:
        self._vfs = vfs
        self._tools: dict[str, WorkspaceTool] = {
            TextEditorTool.name: TextEditorTool(vfs),
            FileManagerTool.name: FileManagerTool(vfs),
        }
        self.call_history: list[ToolInvocation] = []

    @property
    def vfs(self) -> VFS:
        return self._vfs

    def get_available_tools(self) -> list[str]:
        """Return names of all registered tools."""
        return list(self._tools)

    def get_tool(self, tool_name: str) -> WorkspaceTool | None:
        return self._tools.get(tool_name)

    def get_tool_definitions(self) -> list[dict[str, Any]]:
        """Return model-facing definitions for every tool."""
        return [tool.definition() for tool in self._tools.values()]

    def call_tool(
        self, tool_name: str, args: dict[str, Any], tool_call_id: str = ""
    ) -> ToolInvocation:
        """Execute a tool by name with already-decoded arguments."""
        tool = self._tools.get(tool_name)
        result: str | FileManagerResult
        if isinstance(tool, TextEditorTool):
            result = tool.execute(args)
        elif isinstance(tool, FileManagerTool):
            result = tool.execute(args)
        else:
            result = f"Error: Unknown tool: {tool_name}"

        invocation = ToolInvocation(
            tool_call_id=tool_call_id,
            tool_name=tool_name,
            args=args,
            result=result,
            output=render_result(result),
        )
        self.call_history.append(invocation)
        logger.debug(
            "Tool {tool} {command} -> {ok}",
            tool=tool_name,
            command=args.get("command"),
            ok="ok" if invocation.succeeded else "failed",
        )
        return invocation

    def execute_tool_call(self, call: ToolCallEvent | ToolCallPart) -> ToolInvocation:
        """Decode a model tool call's JSON input and execute it."""
        try:
            args = call.arguments()
        except ValueError as exc:
            reason = exc.msg if isinstance(exc, json.JSONDecodeError) else str(exc)
            message = f"Error: Invalid tool input: {reason}"
            invocation = ToolInvocation(
                tool_call_id=call.tool_call_id,
                tool_name=call.tool_name,
                args={},
                result=message,
                output=message,
            )
            self.call_history.append(invocation)
            return invocation

        return self.call_tool(call.tool_name, args, tool_call_id=call.tool_call_id)


__all__ = ["ToolInvocation", "WorkspaceToolRouter", "render_result"]
