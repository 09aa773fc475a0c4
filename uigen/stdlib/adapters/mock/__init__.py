"""Scripted mock model and its component templates."""

from uigen.stdlib.adapters.mock.mock_llm import (
    EDITOR_TOOL,
    MockLanguageModel,
    TurnScript,
    count_tool_results,
    extract_user_prompt,
    plan_turn,
)
from uigen.stdlib.adapters.mock.templates import (
    TEMPLATES,
    ComponentKind,
    ComponentTemplate,
    detect_component,
)

__all__ = [
    "EDITOR_TOOL",
    "TEMPLATES",
    "ComponentKind",
    "ComponentTemplate",
    "MockLanguageModel",
    "TurnScript",
    "count_tool_results",
    "detect_component",
    "extract_user_prompt",
    "plan_turn",
]
