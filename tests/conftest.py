"""Shared fixtures: an in-memory filesystem and repository layouts."""

import errno
from pathlib import Path, PurePosixPath

import pytest

from dotlib import Config, PathKind


ROOT = PurePosixPath("/")


class MemoryFileSystem:
    """In-memory FileSystem with absolute POSIX paths and absolute symlinks."""

    def __init__(self):
        self.entries = {ROOT: ("dir", None)}
        self.readonly = set()
        self.calls = []

    # -- helpers for building and inspecting trees ------------------------- #

    def add_dir(self, path):
        self.mkdir_recursive(Path(path))

    def add_file(self, path, content=""):
        path = PurePosixPath(path)
        self.mkdir_recursive(Path(path.parent))
        self.entries[self._locate(path)] = ("file", content)

    def add_symlink(self, path, target):
        path = PurePosixPath(path)
        self.mkdir_recursive(Path(path.parent))
        self.entries[self._locate(path)] = ("symlink", PurePosixPath(target))

    def read_link(self, path):
        entry = self.entries.get(self._locate(PurePosixPath(path)))
        return Path(entry[1]) if entry and entry[0] == "symlink" else None

    def snapshot(self):
        return dict(self.entries)

    # -- resolution ------------------------------------------------------- #

    def _follow(self, path, depth=0):
        """Resolve symlinks in every component of path."""
        parts = PurePosixPath(path).parts[1:]
        current = ROOT
        for index, part in enumerate(parts):
            current = current / part
            entry = self.entries.get(current)
            if entry and entry[0] == "symlink":
                if depth > 40:
                    raise OSError(errno.ELOOP, "Too many levels of symbolic links", str(path))
                return self._follow(entry[1].joinpath(*parts[index + 1:]), depth + 1)
        return current

    def _locate(self, path):
        """Resolve the parent of path but not its final component."""
        path = PurePosixPath(path)
        if path == ROOT:
            return ROOT
        return self._follow(path.parent) / path.name

    def _check_writable(self, directory):
        if directory in self.readonly:
            raise PermissionError(errno.EACCES, "Permission denied", str(directory))

    # -- FileSystem interface --------------------------------------------- #

    def exists(self, path):
        try:
            return self._follow(path) in self.entries
        except OSError:
            return False

    def lstat(self, path):
        entry = self.entries.get(self._locate(path))
        if entry is None:
            return PathKind.MISSING
        return {"file": PathKind.FILE, "dir": PathKind.DIRECTORY, "symlink": PathKind.SYMLINK}[entry[0]]

    def resolve(self, path):
        return Path(self._follow(path))

    def mkdir_recursive(self, path):
        self.calls.append(("mkdir_recursive", Path(path)))
        current = ROOT
        for part in PurePosixPath(path).parts[1:]:
            current = self._follow(current / part)
            entry = self.entries.get(current)
            if entry is None:
                self._check_writable(current.parent)
                self.entries[current] = ("dir", None)
            elif entry[0] != "dir":
                raise FileExistsError(errno.EEXIST, "File exists", str(current))

    def remove_file(self, path):
        self.calls.append(("remove_file", Path(path)))
        key = self._locate(path)
        entry = self.entries.get(key)
        if entry is None:
            raise FileNotFoundError(errno.ENOENT, "No such file or directory", str(path))
        if entry[0] == "dir":
            raise IsADirectoryError(errno.EISDIR, "Is a directory", str(path))
        self._check_writable(key.parent)
        del self.entries[key]

    def remove_dir_recursive(self, path):
        self.calls.append(("remove_dir_recursive", Path(path)))
        key = self._locate(path)
        entry = self.entries.get(key)
        if entry is None or entry[0] != "dir":
            raise NotADirectoryError(errno.ENOTDIR, "Not a directory", str(path))
        self._check_writable(key.parent)
        for candidate in [k for k in self.entries if k == key or key in k.parents]:
            del self.entries[candidate]

    def create_symlink(self, source, target):
        self.calls.append(("create_symlink", Path(source), Path(target)))
        key = self._locate(target)
        if key in self.entries:
            raise FileExistsError(errno.EEXIST, "File exists", str(target))
        parent = self.entries.get(key.parent)
        if parent is None or parent[0] != "dir":
            raise FileNotFoundError(errno.ENOENT, "No such file or directory", str(target))
        self._check_writable(key.parent)
        self.entries[key] = ("symlink", PurePosixPath(source))

    def read_text(self, path):
        entry = self.entries.get(self._follow(path))
        if entry is None:
            raise FileNotFoundError(errno.ENOENT, "No such file or directory", str(path))
        return entry[1]

    def list_files_recursive(self, root):
        key = self._follow(root)
        entry = self.entries.get(key)
        if entry is None or entry[0] != "dir":
            raise FileNotFoundError(errno.ENOENT, "No such file or directory", str(root))

        children = sorted((k for k in self.entries if k != ROOT and k.parent == key), key=lambda k: k.name)
        for child in children:
            if self.entries[child][0] == "dir":
                yield from self.list_files_recursive(Path(root) / child.name)
            else:
                yield Path(root) / child.name


@pytest.fixture
def memory_fs():
    """Empty in-memory filesystem."""
    return MemoryFileSystem()


@pytest.fixture
def memory_config(memory_fs):
    """Config for a repository at /repo installing into /home/user."""
    memory_fs.add_dir("/repo/home")
    memory_fs.add_dir("/home/user")
    return Config(repo_root=Path("/repo"), home_dir=Path("/home/user"), extra_links=())


@pytest.fixture
def local_repo(tmp_path):
    """Real repository and home directory under tmp_path."""
    repo_root = tmp_path / "dotfiles"
    home_dir = tmp_path / "user"
    (repo_root / "home").mkdir(parents=True)
    home_dir.mkdir()
    return Config(repo_root=repo_root, home_dir=home_dir, extra_links=())
