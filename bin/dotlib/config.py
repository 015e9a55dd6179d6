"""Configuration management."""

# ============================================================
# Imports
# ============================================================

import os
import subprocess
import sys
from pathlib import Path

from .filesystem import FileSystem
from .models import ExtraLink


# ============================================================
# Defaults
# ============================================================

SOURCE_DIR_NAME = "home"
DIR_LINKS_FILE_NAME = "symlink-dirs.conf"

# Links that expose one tool's configuration under another tool's path
EXTRA_LINKS = (
    ExtraLink(source=".claude/CLAUDE.md", target=".codex/AGENTS.md"),
    ExtraLink(source=".claude/skills", target=".codex/skills"),
)


# ============================================================
# Configuration
# ============================================================

class Config:
    """Configuration paths and global state."""

    def __init__(self, repo_root: Path | None = None, home_dir: Path | None = None,
                 extra_links: tuple[ExtraLink, ...] = EXTRA_LINKS):
        # Resolve repository root directory via git
        self.repo_root = Path(repo_root).absolute() if repo_root else find_repo_root()

        # Resolve destination root from the environment
        if home_dir:
            self.home_dir = Path(home_dir).absolute()
        elif os.environ.get("HOME"):
            self.home_dir = Path(os.environ["HOME"])
        else:
            print("Error: HOME is not set", file=sys.stderr)
            sys.exit(1)

        # Source tree and configuration file paths
        self.source_root = self.repo_root / SOURCE_DIR_NAME
        self.dir_links_file = self.repo_root / DIR_LINKS_FILE_NAME
        self.extra_links = tuple(extra_links)

        # Runtime flags
        self.dryrun = False


def find_repo_root() -> Path:
    """Return the top level of the git repository containing this package."""
    try:
        result = subprocess.run(
            ["git", "rev-parse", "--show-toplevel"],
            capture_output=True, text=True, check=True,
            cwd=Path(__file__).parent,
        )
    except (subprocess.CalledProcessError, FileNotFoundError):
        print("Error: Not inside a git repository", file=sys.stderr)
        sys.exit(1)

    return Path(result.stdout.strip())


# ============================================================
# Directory Links
# ============================================================

def load_directory_links(fs: FileSystem, path: Path) -> list[str]:
    """
    Read relative paths that are linked as whole directories.

    Blank lines and lines starting with '#' are ignored. Returns an
    empty list when the file is missing.
    """
    if not fs.exists(path):
        return []

    # Keep remaining lines in file order
    lines = (line.strip() for line in fs.read_text(path).splitlines())
    return [line for line in lines if line and not line.startswith("#")]
