"""uigen: a workspace engine for generating React components with a tool-calling model.

A session owns an in-memory virtual filesystem, a text editor and file manager
tool bound to it, and a language model that drives the tools turn by turn.
"""

# Version is defined in pyproject.toml and read dynamically
try:
    from importlib.metadata import version

    __version__ = version("uigen")
except Exception:
    __version__ = "0.0.0.dev0"  # Fallback for development installs

from uigen.drivers.vfs import InMemoryVFS
from uigen.kernel.config import UIGenConfig, load_config
from uigen.kernel.orchestration import AgentLoop, AgentRunResult
from uigen.stdlib.adapters import MockLanguageModel, get_language_model
from uigen.stdlib.tools import FileManagerTool, TextEditorTool, WorkspaceToolRouter

__all__ = [
    "AgentLoop",
    "AgentRunResult",
    "FileManagerTool",
    "InMemoryVFS",
    "MockLanguageModel",
    "TextEditorTool",
    "UIGenConfig",
    "WorkspaceToolRouter",
    "__version__",
    "get_language_model",
    "load_config",
]
