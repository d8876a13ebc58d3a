"""File access interface definitions."""

import abc
import os

PathLike = str | os.PathLike[str]


class FileAccess(abc.ABC):
    """Abstract base class for the read-only file operations THAIBILL needs."""

    @abc.abstractmethod
    def exists(self, path: PathLike) -> bool:
        """Check whether an entry exists at `path`.

        Args:
            path (PathLike): The path to check.

        Returns:
            bool: True if the entry exists, False otherwise.

        Note:
            Implementations may raise (e.g., `PermissionError`); callers that
            need a plain boolean collapse such errors themselves.
        """

    @abc.abstractmethod
    def read_text(self, path: PathLike) -> str:
        """Read the whole file at `path` as UTF-8 text.

        Args:
            path (PathLike): The path of the file to read.

        Returns:
            str: The decoded file contents.

        Raises:
            FileNotFoundError: If no file exists at `path`.
        """
