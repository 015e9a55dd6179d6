"""Filesystem access used by the installer."""

# ============================================================
# Imports
# ============================================================

import os
import shutil
import stat
from collections.abc import Iterator
from pathlib import Path
from typing import Protocol

from .models import PathKind


# ============================================================
# Interface
# ============================================================

class FileSystem(Protocol):
    """Operations the installer performs on the filesystem."""

    def exists(self, path: Path) -> bool:
        """Return True if path exists, following symlinks."""
        ...

    def lstat(self, path: Path) -> PathKind:
        """Return what exists at path without following symlinks."""
        ...

    def resolve(self, path: Path) -> Path:
        """Return path with every symlink in it followed."""
        ...

    def mkdir_recursive(self, path: Path) -> None:
        """Create a directory and any missing parents."""
        ...

    def remove_file(self, path: Path) -> None:
        """Unlink a file or symlink."""
        ...

    def remove_dir_recursive(self, path: Path) -> None:
        """Remove a real directory and everything below it."""
        ...

    def create_symlink(self, source: Path, target: Path) -> None:
        """Create a symlink at target pointing to source."""
        ...

    def read_text(self, path: Path) -> str:
        """Read a UTF-8 text file."""
        ...

    def list_files_recursive(self, root: Path) -> Iterator[Path]:
        """Yield every non-directory entry under root."""
        ...


# ============================================================
# Local Filesystem
# ============================================================

class LocalFileSystem:
    """FileSystem implementation backed by the operating system."""

    def exists(self, path: Path) -> bool:
        return path.exists()

    def lstat(self, path: Path) -> PathKind:
        try:
            mode = path.lstat().st_mode
        except (FileNotFoundError, NotADirectoryError):
            return PathKind.MISSING

        if stat.S_ISLNK(mode):
            return PathKind.SYMLINK
        if stat.S_ISDIR(mode):
            return PathKind.DIRECTORY
        return PathKind.FILE

    def resolve(self, path: Path) -> Path:
        return path.resolve()

    def mkdir_recursive(self, path: Path) -> None:
        path.mkdir(parents=True, exist_ok=True)

    def remove_file(self, path: Path) -> None:
        path.unlink()

    def remove_dir_recursive(self, path: Path) -> None:
        shutil.rmtree(path)

    def create_symlink(self, source: Path, target: Path) -> None:
        target.symlink_to(source)

    def read_text(self, path: Path) -> str:
        return path.read_text(encoding='utf-8')

    def list_files_recursive(self, root: Path) -> Iterator[Path]:
        """Yield entries sorted by name, descending into real directories only."""
        entries = sorted(os.scandir(root), key=lambda e: e.name)

        for entry in entries:
            if entry.is_dir(follow_symlinks=False):
                yield from self.list_files_recursive(Path(entry.path))
            else:
                yield Path(entry.path)
