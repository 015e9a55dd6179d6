"""Link command: mirror the repository home tree into the home directory."""

# ============================================================
# Imports
# ============================================================

from pathlib import Path, PurePosixPath

from .config import Config, load_directory_links
from .filesystem import FileSystem, LocalFileSystem
from .models import LinkKind, LinkOperation, LinkResult, LinkStatus, PathKind
from .output import print_header, print_link_result, print_success
from .paths import is_under_directory_link
from .symlinks import apply_link, iter_source_files


# Files that only keep an empty directory under version control
PLACEHOLDER_NAMES = {".gitkeep"}


# ============================================================
# Entry Point
# ============================================================

def execute_link(config: Config, fs: FileSystem | None = None) -> list[LinkResult]:
    """
    Symlink the home tree into the home directory.

    Process:
    1. Read directory links from symlink-dirs.conf
    2. Link each configured directory as a whole
    3. Link every other file individually
    4. Apply extra links whose source exists

    Args:
        config: Configuration object
        fs: Filesystem to operate on (defaults to the local filesystem)

    Returns:
        List of results from all operations
    """
    fs = fs or LocalFileSystem()
    print_header(f"Installing dotfiles from {config.repo_root}")

    # Resolve directory links
    dir_links = load_directory_links(fs, config.dir_links_file)

    # Execute operations and collect results
    results: list[LinkResult] = []
    results += link_directories(config, fs, dir_links)
    results += link_files(config, fs, dir_links)
    results += link_extras(config, fs)

    print_success("Done!")
    return results


# ============================================================
# Operations
# ============================================================

def link_directories(config: Config, fs: FileSystem, dir_links: list[str]) -> list[LinkResult]:
    """Link each configured directory that exists in the source tree."""
    results: list[LinkResult] = []

    for dir_link in dir_links:
        source_path = config.source_root / dir_link

        # Skip entries without a real source directory
        if fs.lstat(source_path) != PathKind.DIRECTORY:
            continue

        operation = LinkOperation(
            kind=LinkKind.DIRECTORY,
            source_path=source_path,
            target_path=config.home_dir / dir_link,
        )
        results.append(run_operation(config, fs, operation))

    return results


def link_files(config: Config, fs: FileSystem, dir_links: list[str]) -> list[LinkResult]:
    """Link every source file that is not inside a linked directory."""
    results: list[LinkResult] = []

    for source_path in iter_source_files(fs, config.source_root):
        if source_path.name in PLACEHOLDER_NAMES:
            continue

        rel_path = PurePosixPath(source_path.relative_to(config.source_root).as_posix())

        # Reached through the directory symlink instead
        if is_under_directory_link(rel_path, dir_links):
            continue

        operation = LinkOperation(
            kind=LinkKind.FILE,
            source_path=source_path,
            target_path=config.home_dir / Path(rel_path),
        )
        results.append(run_operation(config, fs, operation))

    return results


def link_extras(config: Config, fs: FileSystem) -> list[LinkResult]:
    """Apply the explicit extra links, skipping those without a source."""
    results: list[LinkResult] = []

    for extra_link in config.extra_links:
        operation = LinkOperation(
            kind=LinkKind.EXTRA,
            source_path=extra_link.resolve_source_path(config.source_root),
            target_path=extra_link.resolve_target_path(config.home_dir),
        )

        # Optional sources leave the target untouched
        if not fs.exists(operation.source_path):
            result = LinkResult(operation=operation, status=LinkStatus.SKIPPED_SOURCE_NOT_FOUND)
            print_link_result(result)
            results.append(result)
            continue

        results.append(run_operation(config, fs, operation))

    return results


def run_operation(config: Config, fs: FileSystem, operation: LinkOperation) -> LinkResult:
    """Apply an operation and print its result."""
    result = apply_link(config, fs, operation)
    print_link_result(result)
    return result
