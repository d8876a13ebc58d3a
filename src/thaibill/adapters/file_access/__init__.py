"""File access adapters: local filesystem and in-memory."""

from .local import LocalFileAccess
from .memory import MemoryFileAccess

__all__ = ["LocalFileAccess", "MemoryFileAccess"]
