"""Short human-readable labels for tool calls, e.g. ``Creating /App.jsx``."""

from __future__ import annotations

import json
from collections.abc import Mapping
from typing import Any


def _parse_args(args: object) -> Mapping[str, Any] | None:
    if not args:
        return None
    if isinstance(args, str):
        try:
            decoded = json.loads(args)
        except json.JSONDecodeError:
            return None
        return decoded if isinstance(decoded, Mapping) else None
    if isinstance(args, Mapping):
        return args
    return None


def describe_tool_call(tool_name: str, args: object = None) -> str:
    """Return a one-line label for a tool call, falling back to the tool name.

    Args
    ----
        tool_name: Name of the called tool.
        args: Tool input as a JSON string or mapping.

    Examples
    --------
    >>> describe_tool_call("str_replace_editor", '{"command": "create", "path": "/App.jsx"}')
    'Creating /App.jsx'
    >>> describe_tool_call("file_manager", {"command": "rename", "path": "/a", "new_path": "/b"})
    'Renaming /a → /b'
    """
    parsed = _parse_args(args)
    if parsed is None:
        return tool_name

    command = parsed.get("command")
    path = parsed.get("path")
    if not path:
        return tool_name

    if tool_name == "str_replace_editor":
        match command:
            case "create":
                return f"Creating {path}"
            case "str_replace" | "insert":
                return f"Editing {path}"
            case "view":
                return f"Viewing {path}"
            case _:
                return tool_name

    if tool_name == "file_manager":
        match command:
            case "rename":
                new_path = parsed.get("new_path")
                return f"Renaming {path} → {new_path}" if new_path else f"Renaming {path}"
            case "delete":
                return f"Deleting {path}"
            case _:
                return tool_name

    return tool_name


__all__ = ["describe_tool_call"]
