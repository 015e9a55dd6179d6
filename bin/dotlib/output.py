"""Terminal output for the installer."""

# ============================================================
# Imports
# ============================================================

import sys

from .models import LinkResult, LinkStatus


# ============================================================
# Configuration
# ============================================================

class Color:
    """ANSI color codes for terminal output."""

    RESET = '\033[0m'
    BOLD = '\033[1m'
    CYAN = '\033[36m'
    GREEN = '\033[32m'
    YELLOW = '\033[33m'
    GRAY = '\033[90m'


# Color per status; skipped lines are printed entirely in gray
STATUS_COLORS = {
    LinkStatus.CREATED: Color.GREEN,
    LinkStatus.CREATED_DRYRUN: Color.GREEN,
    LinkStatus.REPLACED: Color.YELLOW,
    LinkStatus.REPLACED_DRYRUN: Color.YELLOW,
    LinkStatus.SKIPPED_SOURCE_NOT_FOUND: Color.GRAY,
    LinkStatus.SKIPPED_INSIDE_SOURCE: Color.GRAY,
}

SKIPPED_STATUSES = (LinkStatus.SKIPPED_SOURCE_NOT_FOUND, LinkStatus.SKIPPED_INSIDE_SOURCE)


# ============================================================
# Messages
# ============================================================

def print_header(message: str) -> None:
    """Print a section header with bold cyan formatting."""
    print()
    print(f"{Color.BOLD}{Color.CYAN}# {message}{Color.RESET}")
    print()


def print_info(message: str) -> None:
    """Print an informational message."""
    print(message)


def print_error(message: str) -> None:
    """Print an error message to stderr with 'Error:' prefix."""
    print(f"Error: {message}", file=sys.stderr)


def print_success(message: str) -> None:
    """Print a success message in green."""
    print(f"{Color.GREEN}{message}{Color.RESET}")


# ============================================================
# Link Results
# ============================================================

def format_link_result(result: LinkResult) -> str:
    """
    Format one result as '[label] Status -> target'.

    Skipped results are dimmed as a whole; otherwise only the label and
    status are colored.
    """
    color = STATUS_COLORS[result.status]

    if result.status in SKIPPED_STATUSES:
        return f"{color}[{result.label}] {result.description} -> {result.target_path}{Color.RESET}"

    return f"[{Color.CYAN}{result.label}{Color.RESET}] {color}{result.description}{Color.RESET} -> {result.target_path}"


def print_link_result(result: LinkResult) -> None:
    """Print formatted result for a symlink operation."""
    print(format_link_result(result))
