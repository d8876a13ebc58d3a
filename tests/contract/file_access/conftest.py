"""Pytest fixtures for FileAccess contract tests.

Provided fixtures
-----------------
- **backend**: Parametrized factory returning a `(files, put)` pair for each
  backend: a fresh `FileAccess` plus a helper that installs a UTF-8 text
  file at a relative path. `"memory"` uses `MemoryFileAccess`; `"local"`
  uses `LocalFileAccess` rooted at a per-test temporary directory.
"""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path

import pytest

from thaibill.adapters.file_access import LocalFileAccess, MemoryFileAccess
from thaibill.interfaces.file_access import FileAccess

Put = Callable[[str, str], None]


@pytest.fixture(params=["memory", "local"])
def backend(request: pytest.FixtureRequest, tmp_path: Path) -> tuple[FileAccess, Put]:
    """Return a fresh file access and a helper to install files into it."""

    match request.param:
        case "memory":
            memory = MemoryFileAccess()
            return memory, memory.write_text
        case "local":

            def put(relpath: str, text: str) -> None:
                target = tmp_path / relpath
                target.parent.mkdir(parents=True, exist_ok=True)
                target.write_text(text, encoding="utf-8")

            return LocalFileAccess(tmp_path), put
        case _:
            raise ValueError(f"unknown file access type: {request.param}")
