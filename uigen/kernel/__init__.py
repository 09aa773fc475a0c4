"""uigen kernel: domain types, ports, configuration and orchestration.

Concrete filesystems live in :mod:`uigen.drivers`; tools and model adapters
in :mod:`uigen.stdlib`.
"""

from uigen.kernel.exceptions import (
    ConfigurationError,
    InvalidPathError,
    PathNotFoundError,
    UIGenError,
    VFSError,
)
from uigen.kernel.logging import configure_logging, get_logger
from uigen.kernel.ports import VFS, LanguageModel

__all__ = [
    "VFS",
    "ConfigurationError",
    "InvalidPathError",
    "LanguageModel",
    "PathNotFoundError",
    "UIGenError",
    "VFSError",
    "configure_logging",
    "get_logger",
]
