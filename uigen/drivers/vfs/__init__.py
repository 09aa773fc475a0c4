"""Virtual filesystem drivers."""

from uigen.drivers.vfs.memory import InMemoryVFS

__all__ = ["InMemoryVFS"]
