"""Domain models for dotfiles symlink installation."""

# ============================================================
# Imports
# ============================================================

from dataclasses import dataclass
from enum import Enum
from pathlib import Path


# ============================================================
# Enums
# ============================================================

class PathKind(Enum):
    """What exists at a path, inspected without following symlinks."""

    MISSING = "missing"
    FILE = "file"
    DIRECTORY = "directory"
    SYMLINK = "symlink"


class LinkKind(Enum):
    """Install step that planned an operation."""

    DIRECTORY = "directory"
    FILE = "file"
    EXTRA = "extra"


class LinkStatus(Enum):
    """Status of a symlink operation after execution."""

    CREATED = "Linked"
    CREATED_DRYRUN = "Linked (Not executed)"
    REPLACED = "Replaced"
    REPLACED_DRYRUN = "Replaced (Not executed)"
    SKIPPED_SOURCE_NOT_FOUND = "Skipped (source not found)"
    SKIPPED_INSIDE_SOURCE = "Skipped (inside source tree)"


# ============================================================
# Extra Link Models
# ============================================================

@dataclass(frozen=True)
class ExtraLink:
    """
    An explicit symlink that does not follow the mirrored-tree layout.

    Attributes:
        source: Path to the source, relative to the source tree unless absolute
        target: Path to the link, relative to the home directory unless absolute
    """

    source: str
    target: str

    def resolve_source_path(self, source_root: Path) -> Path:
        """
        Resolve the source path against the source tree.

        Args:
            source_root: Root of the mirrored home tree in the repository

        Returns:
            Absolute path to source
        """
        path = Path(self.source)
        return path if path.is_absolute() else source_root / path

    def resolve_target_path(self, home_dir: Path) -> Path:
        """
        Resolve the target path against the home directory.

        Args:
            home_dir: Destination root

        Returns:
            Absolute path to target
        """
        path = Path(self.target)
        return path if path.is_absolute() else home_dir / path


# ============================================================
# Symlink Operation Models
# ============================================================

@dataclass(frozen=True)
class LinkOperation:
    """
    A planned symlink operation with resolved paths.

    Attributes:
        kind: Install step the operation belongs to
        source_path: Absolute path the symlink will point at
        target_path: Absolute path where the symlink is created
    """

    kind: LinkKind
    source_path: Path
    target_path: Path

    @property
    def label(self) -> str:
        """Get the log label for this operation."""
        return self.kind.value


@dataclass(frozen=True)
class LinkResult:
    """
    Result of executing a symlink operation.

    Attributes:
        operation: The operation that was executed
        status: Status after execution
        previous: What existed at the target before the operation
    """

    operation: LinkOperation
    status: LinkStatus
    previous: PathKind = PathKind.MISSING

    @property
    def label(self) -> str:
        """Get the log label from the operation."""
        return self.operation.label

    @property
    def target_path(self) -> Path:
        """Get the target path from the operation."""
        return self.operation.target_path

    @property
    def description(self) -> str:
        """Status text including what was replaced, e.g. 'Replaced symlink'."""
        if self.status == LinkStatus.REPLACED:
            return f"Replaced {self.previous.value}"
        if self.status == LinkStatus.REPLACED_DRYRUN:
            return f"Replaced {self.previous.value} (Not executed)"
        return self.status.value

