"""Path normalization for the virtual filesystem.

Every VFS operation funnels its path arguments through :func:`normalize_path`
so that nodes are keyed by exactly one spelling of each location.

Rules
-----
- A missing leading ``/`` is added (``"App.jsx"`` → ``"/App.jsx"``).
- Repeated slashes collapse (``"//a///b"`` → ``"/a/b"``).
- Trailing slashes are stripped, except for the root itself.
- The empty string is the root.
- ``.`` and ``..`` segments are rejected rather than resolved.
"""

from __future__ import annotations

from uigen.kernel.exceptions import InvalidPathError

ROOT = "/"

_RELATIVE_SEGMENTS = frozenset({".", ".."})


def split_path(path: str) -> list[str]:
    """Return the segments of *path*, validating each one.

    Raises
    ------
    InvalidPathError
        If *path* is not a string, contains a NUL byte, or has a
        ``.``/``..`` segment.
    """
    if not isinstance(path, str):
        raise InvalidPathError(path, f"expected a string, got {type(path).__name__}")
    if "\x00" in path:
        raise InvalidPathError(path, "path contains a NUL character")

    segments = [segment for segment in path.split("/") if segment]
    for segment in segments:
        if segment in _RELATIVE_SEGMENTS:
            raise InvalidPathError(path, f"relative segment {segment!r} is not supported")
    return segments


def normalize_path(path: str) -> str:
    """Normalize *path* to its canonical absolute form.

    Examples
    --------
    >>> normalize_path("components//Card.jsx/")
    '/components/Card.jsx'
    >>> normalize_path("")
    '/'
    """
    segments = split_path(path)
    if not segments:
        return ROOT
    return ROOT + "/".join(segments)


def parent_path(path: str) -> str:
    """Return the parent of a normalized path. The root is its own parent."""
    if path == ROOT:
        return ROOT
    head, _, _ = path.rpartition("/")
    return head or ROOT


def base_name(path: str) -> str:
    """Return the final segment of a normalized path (empty for the root)."""
    return path.rpartition("/")[2]


def join_path(parent: str, name: str) -> str:
    """Join a normalized parent path and a single child name."""
    if parent == ROOT:
        return ROOT + name
    return f"{parent}/{name}"


def ancestors(path: str) -> list[str]:
    """Return the proper ancestors of *path*, root first, excluding *path*.

    >>> ancestors("/a/b/c.txt")
    ['/', '/a', '/a/b']
    """
    if path == ROOT:
        return []
    result = [ROOT]
    current = ""
    for segment in path.strip("/").split("/")[:-1]:
        current = f"{current}/{segment}"
        result.append(current)
    return result


def is_within(path: str, ancestor: str) -> bool:
    """Return True if *path* equals *ancestor* or lies inside its subtree."""
    if ancestor == ROOT:
        return True
    return path == ancestor or path.startswith(ancestor + "/")


__all__ = [
    "ROOT",
    "ancestors",
    "base_name",
    "is_within",
    "join_path",
    "normalize_path",
    "parent_path",
    "split_path",
]
