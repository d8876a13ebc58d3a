"""In-memory file access backend.

This module provides a tiny, dependency-free `FileAccess` implementation
meant for **tests**, examples, and local development. Files are kept in a
dict keyed by their normalized POSIX path; there is no persistence.

Key behaviors
-------------
- Paths are normalized with `PurePosixPath`, so `"data/a.json"`,
  `"./data/a.json"` and `Path("data") / "a.json"` name the same file.
- Parent directories of stored files count as existing entries, mirroring
  `Path.exists()` on a real filesystem.
- `read_text()` raises `FileNotFoundError` for missing files and
  `IsADirectoryError` for implied directories.
- **Thread-safety**: all lookups and writes happen under an `RLock`, so the
  store can be shared with the worker threads used by the async operations.

Typical usage
-------------
    files = MemoryFileAccess({"invoices/001.json": '{"items": []}'})
    files.exists("invoices")               # True
    files.read_text("invoices/001.json")   # '{"items": []}'
"""

from __future__ import annotations

import os
import threading
from collections.abc import Mapping
from pathlib import PurePosixPath

from thaibill.interfaces.file_access import FileAccess, PathLike

__all__ = ["MemoryFileAccess"]


class MemoryFileAccess(FileAccess):
    """In-memory FileAccess backend for tests and examples."""

    def __init__(self, files: Mapping[str, str] | None = None) -> None:
        self._files: dict[str, str] = {}
        self._lock = threading.RLock()
        for path, text in (files or {}).items():
            self.write_text(path, text)

    def write_text(self, path: PathLike, text: str) -> None:
        """Install `text` as the contents of `path`, replacing any previous file."""
        key = _normalize(path)
        with self._lock:
            self._files[key] = text

    def remove(self, path: PathLike) -> None:
        """Delete the file at `path`.

        Raises:
            FileNotFoundError: If no file is stored at `path`.
        """
        key = _normalize(path)
        with self._lock:
            try:
                del self._files[key]
            except KeyError:
                raise FileNotFoundError(os.fspath(path)) from None

    # ---- FileAccess ----

    def exists(self, path: PathLike) -> bool:
        key = _normalize(path)
        with self._lock:
            return key in self._files or self._is_directory(key)

    def read_text(self, path: PathLike) -> str:
        key = _normalize(path)
        with self._lock:
            try:
                return self._files[key]
            except KeyError:
                if self._is_directory(key):
                    raise IsADirectoryError(os.fspath(path)) from None
                raise FileNotFoundError(os.fspath(path)) from None

    # ---- Internal Helpers ----

    def _is_directory(self, key: str) -> bool:
        prefix = key if key.endswith("/") else f"{key}/"
        return any(name.startswith(prefix) for name in self._files)


def _normalize(path: PathLike) -> str:
    return str(PurePosixPath(os.fspath(path)))
