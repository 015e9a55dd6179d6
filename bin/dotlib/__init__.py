"""Dotfiles symlink installation library."""

from .command_link import execute_link
from .config import EXTRA_LINKS, Config, load_directory_links
from .filesystem import FileSystem, LocalFileSystem
from .models import (
    ExtraLink,
    LinkKind,
    LinkOperation,
    LinkResult,
    LinkStatus,
    PathKind,
)
from .paths import is_under_directory_link
from .symlinks import apply_link, iter_source_files

__all__ = [
    # Configuration
    'Config',
    'EXTRA_LINKS',
    'load_directory_links',
    # Filesystem
    'FileSystem',
    'LocalFileSystem',
    # Domain models
    'ExtraLink',
    'LinkKind',
    'LinkOperation',
    'LinkResult',
    'LinkStatus',
    'PathKind',
    # Installation
    'apply_link',
    'is_under_directory_link',
    'iter_source_files',
    # Commands
    'execute_link',
]
