"""Path classification for directory-linked subtrees."""

from collections.abc import Iterable
from pathlib import PurePosixPath


def is_under_directory_link(rel_path: str | PurePosixPath, dir_links: Iterable[str]) -> bool:
    """
    Return True if rel_path lies strictly inside one of dir_links.

    Compares whole path segments, so '.config' excludes '.config/a' but
    neither '.configX/a' nor '.config' itself.
    """
    parts = PurePosixPath(rel_path).parts

    for dir_link in dir_links:
        link_parts = PurePosixPath(dir_link).parts
        if len(parts) > len(link_parts) and parts[:len(link_parts)] == link_parts:
            return True

    return False
