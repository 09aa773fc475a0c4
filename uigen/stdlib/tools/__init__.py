"""Model-callable tools operating on a workspace filesystem."""

from uigen.stdlib.tools.display import describe_tool_call
from uigen.stdlib.tools.file_manager import FileManagerTool
from uigen.stdlib.tools.router import ToolInvocation, WorkspaceToolRouter
from uigen.stdlib.tools.text_editor import TextEditorTool

__all__ = [
    "FileManagerTool",
    "TextEditorTool",
    "ToolInvocation",
    "WorkspaceToolRouter",
    "describe_tool_call",
]
