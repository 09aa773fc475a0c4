"""Core exception hierarchy for uigen.

All uigen exceptions inherit from UIGenError for easy exception handling.
Filesystem failures carry the offending path so that tool executors can
translate them into the fixed result strings shown to the driving model.
"""

from __future__ import annotations

# ============================================================================
# Base Exception
# ============================================================================


class UIGenError(Exception):
    """Base exception for all uigen errors.

    Catch this to handle all uigen-specific errors.
    """

    pass


# ============================================================================
# Configuration Errors
# ============================================================================


class ConfigurationError(UIGenError):
    """Raised when configuration is invalid or missing.

    Examples
    --------
    Example usage::

        raise ConfigurationError("agent", "max_steps must be positive")
    """

    def __init__(self, component: str, reason: str) -> None:
        """Initialize configuration error.

        Args
        ----
            component: Name of the component with invalid configuration
            reason: Explanation of what's wrong
        """
        super().__init__(f"Configuration error in '{component}': {reason}")
        self.component = component
        self.reason = reason


# ============================================================================
# VFS Errors
# ============================================================================


class VFSError(UIGenError):
    """Raised when a VFS operation fails.

    Examples
    --------
    Example usage::

        raise VFSError("/components/Card.jsx", "path not found")
    """

    def __init__(self, path: str, reason: str) -> None:
        """Initialize VFS error.

        Args
        ----
            path: The VFS path that caused the error
            reason: Explanation of what went wrong
        """
        super().__init__(f"VFS error at '{path}': {reason}")
        self.path = path
        self.reason = reason


class InvalidPathError(VFSError):
    """Raised when a path string cannot be normalized."""

    def __init__(self, path: object, reason: str = "invalid path") -> None:
        super().__init__(str(path), reason)


class PathNotFoundError(VFSError):
    """Raised when no node exists at the path."""

    def __init__(self, path: str) -> None:
        super().__init__(path, "path not found")


class PathExistsError(VFSError):
    """Raised when creating a node at a path that is already taken."""

    def __init__(self, path: str) -> None:
        super().__init__(path, "path already exists")


class IsDirectoryError(VFSError):
    """Raised when a file operation targets a directory."""

    def __init__(self, path: str) -> None:
        super().__init__(path, "path is a directory")


class NotDirectoryError(VFSError):
    """Raised when a directory operation targets a file."""

    def __init__(self, path: str) -> None:
        super().__init__(path, "path is not a directory")


class PathIsFileError(VFSError):
    """Raised when a directory is needed where a file already sits.

    Covers both the target path itself and any of its ancestors.
    """

    def __init__(self, path: str) -> None:
        super().__init__(path, "a file exists at this path")


__all__ = [
    # Base
    "UIGenError",
    # Configuration
    "ConfigurationError",
    # VFS
    "VFSError",
    "InvalidPathError",
    "PathNotFoundError",
    "PathExistsError",
    "IsDirectoryError",
    "NotDirectoryError",
    "PathIsFileError",
]
