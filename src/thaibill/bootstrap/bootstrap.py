"""Bootstrap the file operations with the configured file access."""

from __future__ import annotations

import functools
import inspect
from collections.abc import Awaitable, Callable, Mapping
from dataclasses import dataclass
from typing import Any

from thaibill import config
from thaibill.adapters.file_access import LocalFileAccess
from thaibill.domain.value_objects import InvoiceDocument
from thaibill.interfaces.file_access import FileAccess, PathLike
from thaibill.service_layer.documents import load_document
from thaibill.service_layer.files import file_exists, read_json


@dataclass(frozen=True)
class AppContainer:
    """A class to hold the wired application operations."""

    files: FileAccess
    file_exists: Callable[[PathLike], Awaitable[bool]]
    read_json: Callable[[PathLike], Awaitable[Any]]
    load_document: Callable[[PathLike], Awaitable[InvoiceDocument]]


def build_file_access(root: PathLike | None = None) -> FileAccess:
    """Build the local file access, rooted at `root` or the configured data root."""
    if root is None:
        root = config.get_data_root()
    return LocalFileAccess(root)


def bootstrap(files: FileAccess | None = None) -> AppContainer:
    """Bind the async file operations to `files` (default: local filesystem)."""
    files = files if files is not None else build_file_access()
    dependencies = {"files": files}

    return AppContainer(
        files=files,
        file_exists=inject_dependencies(file_exists, dependencies),
        read_json=inject_dependencies(read_json, dependencies),
        load_document=inject_dependencies(load_document, dependencies),
    )


def inject_dependencies(
    operation: Callable, dependencies: Mapping[str, object]
) -> Callable:
    """Inject dependencies into an operation based on its parameter names."""
    params = inspect.signature(operation).parameters
    deps = {
        name: dependency for name, dependency in dependencies.items() if name in params
    }
    return functools.partial(operation, **deps)
