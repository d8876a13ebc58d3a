"""Configuration utilities for THAIBILL.

This module centralizes small helpers and constants related to application
configuration. Values come from the environment so the CLI and library
callers can share them.
"""

import os
from pathlib import Path

from thaibill.service_layer.documents import DEFAULT_OUTPUT_DIR

OUTPUT_DIR_ENV = "THAIBILL_OUTPUT_DIR"  # pragma: no mutate
DATA_ROOT_ENV = "THAIBILL_DATA_ROOT"  # pragma: no mutate


class DataRootNotFoundError(Exception):
    """Raised when THAIBILL_DATA_ROOT points to a missing directory."""

    def __init__(self, root: Path) -> None:
        super().__init__(f"THAIBILL_DATA_ROOT directory {str(root)!r} does not exist.")
        self.root = root


def get_output_dir() -> str:
    """Get the default output directory for rendered documents.

    Returns:
        The value of `THAIBILL_OUTPUT_DIR` without a trailing slash, or
        `"output"` when it is unset or empty.
    """
    if not (value := os.environ.get(OUTPUT_DIR_ENV, "").strip()):
        return DEFAULT_OUTPUT_DIR
    return value.rstrip("/") or "/"


def get_data_root() -> Path | None:
    """Get the base directory that relative input paths are resolved against.

    Returns:
        The `THAIBILL_DATA_ROOT` directory, or `None` when it is unset.

    Raises:
        DataRootNotFoundError: If the variable names a missing directory.
    """
    if not (value := os.environ.get(DATA_ROOT_ENV, "").strip()):
        return None
    root = Path(value).expanduser()
    if not root.is_dir():
        raise DataRootNotFoundError(root)
    return root
