"""Port interfaces for uigen."""

from uigen.kernel.ports.llm import LanguageModel
from uigen.kernel.ports.vfs import VFS

__all__ = ["VFS", "LanguageModel"]
