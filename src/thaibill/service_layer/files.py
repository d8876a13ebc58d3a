"""Asynchronous file operations over the `FileAccess` port.

Each operation runs a single blocking call of the injected file access in a
worker thread via `asyncio.to_thread`. There is no retry, timeout or locking.
"""

from __future__ import annotations

import asyncio
import json
import logging
import os
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from thaibill.interfaces.file_access import FileAccess, PathLike

logger = logging.getLogger(__name__)


async def file_exists(path: PathLike, files: FileAccess) -> bool:
    """Return whether an entry exists at `path`.

    Never raises: any error from the file access layer (permission errors
    included) is logged at DEBUG and reported as `False`.

    Args:
        path: The path to check.
        files: File access used for the check.

    Returns:
        bool: True if the entry exists and could be checked, False otherwise.
    """
    try:
        return await asyncio.to_thread(files.exists, path)
    except Exception as e:  # pylint: disable=broad-exception-caught
        logger.debug("Existence check for %s failed: %r", os.fspath(path), e)
        return False


async def read_json(path: PathLike, files: FileAccess) -> Any:
    """Read the file at `path` and parse its contents as JSON.

    No schema validation is applied; the caller decides what the value means.

    Args:
        path: The path of the UTF-8 encoded JSON file.
        files: File access used to read the file.

    Returns:
        The deserialized JSON value.

    Raises:
        FileNotFoundError: If the file does not exist.
        json.JSONDecodeError: If the contents are not valid JSON.
    """
    text = await asyncio.to_thread(files.read_text, path)
    logger.debug("Read %d characters from %s", len(text), os.fspath(path))
    return json.loads(text)
