"""Symlink creation and source tree enumeration."""

# ============================================================
# Imports
# ============================================================

from collections.abc import Iterator
from pathlib import Path

from .config import Config
from .filesystem import FileSystem
from .models import LinkOperation, LinkResult, LinkStatus, PathKind


# ============================================================
# Enumeration
# ============================================================

def iter_source_files(fs: FileSystem, source_root: Path) -> Iterator[Path]:
    """
    Yield every file under the source tree.

    Each call starts a fresh traversal. Symlinked directories are yielded
    as entries and never followed.
    """
    yield from fs.list_files_recursive(source_root)


# ============================================================
# Symlinks
# ============================================================

def apply_link(config: Config, fs: FileSystem, operation: LinkOperation) -> LinkResult:
    """
    Replace whatever exists at the target with a symlink to the source.

    Existing files and symlinks are unlinked, real directories are removed
    recursively. Nothing is backed up. Targets whose parent resolves into
    the source tree, through a directory link made earlier in the run or
    left over from a previous one, are skipped. Filesystem errors propagate.

    Args:
        config: Configuration object
        fs: Filesystem to operate on
        operation: Operation to apply

    Returns:
        Result with status after execution
    """
    target = operation.target_path

    # The source tree is never modified
    if is_inside_source_tree(config, fs, target.parent):
        return LinkResult(operation=operation, status=LinkStatus.SKIPPED_INSIDE_SOURCE)

    previous = fs.lstat(target)

    # Report without touching the filesystem
    if config.dryrun:
        status = LinkStatus.CREATED_DRYRUN if previous == PathKind.MISSING else LinkStatus.REPLACED_DRYRUN
        return LinkResult(operation=operation, status=status, previous=previous)

    # Create parent directories and clear the target
    fs.mkdir_recursive(target.parent)
    remove_existing(fs, target, previous)

    # Link to the absolute source path
    fs.create_symlink(operation.source_path, target)
    status = LinkStatus.CREATED if previous == PathKind.MISSING else LinkStatus.REPLACED

    return LinkResult(operation=operation, status=status, previous=previous)


def is_inside_source_tree(config: Config, fs: FileSystem, path: Path) -> bool:
    """Check if path, with symlinks followed, lies within the source tree."""
    return fs.resolve(path).is_relative_to(fs.resolve(config.source_root))


def remove_existing(fs: FileSystem, target: Path, kind: PathKind) -> None:
    """Remove the entry at target according to its kind."""
    if kind == PathKind.DIRECTORY:
        fs.remove_dir_recursive(target)
    elif kind in (PathKind.FILE, PathKind.SYMLINK):
        fs.remove_file(target)
