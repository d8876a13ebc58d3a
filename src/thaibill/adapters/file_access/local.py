"""Local filesystem-based file access adapter."""

from pathlib import Path

from thaibill.interfaces.file_access import FileAccess, PathLike

ENCODING = "utf-8"


class LocalFileAccess(FileAccess):
    """FileAccess implementation that uses the local filesystem.

    Relative paths are resolved against `root` when one is given, otherwise
    against the current working directory. Absolute paths are used as-is.
    """

    def __init__(self, root: PathLike | None = None) -> None:
        self._root = Path(root) if root is not None else None

    @property
    def root(self) -> Path | None:
        """Base directory for relative paths, if any."""
        return self._root

    def exists(self, path: PathLike) -> bool:
        return self._resolve(path).exists()

    def read_text(self, path: PathLike) -> str:
        return self._resolve(path).read_text(encoding=ENCODING)

    # --- Internal Helpers ---

    def _resolve(self, path: PathLike) -> Path:
        candidate = Path(path)
        if self._root is None or candidate.is_absolute():
            return candidate
        return self._root / candidate
