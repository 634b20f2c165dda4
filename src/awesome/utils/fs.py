"""Filesystem access used by plugin discovery, report aggregation and the locators.

Commands take a ``FileSystem`` so tests can swap the real disk for
``MemoryFileSystem``.
"""

import fnmatch
import logging
from dataclasses import dataclass
from pathlib import Path, PurePath

from awesome.errors import DirectoryUnreadable

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class DirEntry:
    """A single directory listing entry."""

    name: str
    is_dir: bool


class FileSystem:
    """Minimal filesystem interface."""

    def list_dir(self, path) -> list[DirEntry]:
        """List a directory, sorted by name.

        Raises:
            DirectoryUnreadable: If the directory is missing or not readable.
        """
        raise NotImplementedError

    def read_bytes(self, path) -> bytes:
        raise NotImplementedError

    def write_bytes(self, path, data: bytes) -> None:
        raise NotImplementedError

    def glob(self, directory, pattern: str) -> list[str]:
        """Return sorted paths of entries in ``directory`` matching ``pattern``."""
        try:
            entries = self.list_dir(directory)
        except DirectoryUnreadable:
            return []
        return [
            str(PurePath(directory) / entry.name)
            for entry in entries
            if fnmatch.fnmatch(entry.name, pattern)
        ]


class OSFileSystem(FileSystem):
    """FileSystem backed by the local disk."""

    def list_dir(self, path) -> list[DirEntry]:
        try:
            items = list(Path(path).iterdir())
        except OSError as e:
            raise DirectoryUnreadable(path, e.strerror or str(e)) from e
        entries = []
        for item in items:
            try:
                is_dir = item.is_dir()
            except OSError:
                is_dir = False
            entries.append(DirEntry(name=item.name, is_dir=is_dir))
        return sorted(entries, key=lambda e: e.name)

    def read_bytes(self, path) -> bytes:
        return Path(path).read_bytes()

    def write_bytes(self, path, data: bytes) -> None:
        Path(path).write_bytes(data)


class MemoryFileSystem(FileSystem):
    """In-memory FileSystem for tests.

    Paths are normalized to POSIX strings. Directories exist implicitly
    as parents of files or explicitly through ``mkdir``.
    """

    def __init__(self, files: dict[str, bytes] | None = None) -> None:
        self._files: dict[str, bytes] = {}
        self._dirs: set[str] = set()
        self.read_only: set[str] = set()
        for path, data in (files or {}).items():
            self.write_bytes(path, data)

    @staticmethod
    def _key(path) -> str:
        return PurePath(path).as_posix()

    def mkdir(self, path) -> None:
        key = self._key(path)
        self._dirs.add(key)
        for parent in PurePath(key).parents:
            self._dirs.add(parent.as_posix())

    def exists(self, path) -> bool:
        key = self._key(path)
        return key in self._files or key in self._dirs

    def list_dir(self, path) -> list[DirEntry]:
        key = self._key(path)
        if key not in self._dirs:
            raise DirectoryUnreadable(path, "no such file or directory")

        names: dict[str, bool] = {}
        for file_path in self._files:
            if PurePath(file_path).parent.as_posix() == key:
                names[PurePath(file_path).name] = False
        for dir_path in self._dirs:
            if dir_path != key and PurePath(dir_path).parent.as_posix() == key:
                names[PurePath(dir_path).name] = True
        return [DirEntry(name=n, is_dir=d) for n, d in sorted(names.items())]

    def read_bytes(self, path) -> bytes:
        key = self._key(path)
        if key not in self._files:
            raise FileNotFoundError(f"No such file: {key}")
        return self._files[key]

    def write_bytes(self, path, data: bytes) -> None:
        key = self._key(path)
        parent = PurePath(key).parent.as_posix()
        if parent in self.read_only:
            raise PermissionError(f"Read-only directory: {parent}")
        self.mkdir(parent)
        self._files[key] = data
