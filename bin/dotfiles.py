#!/usr/bin/env python3
"""Dotfiles installer.

Symlinks every file in the repository's home/ tree into the home directory,
linking paths listed in symlink-dirs.conf as whole directories.
"""

import argparse
import sys

from dotlib import Config, execute_link
from dotlib.output import print_error, print_info


# --------------------------------------------------------------------------- #
# Main
# --------------------------------------------------------------------------- #

def main(argv=None):
    """Parse arguments and run the installer."""
    parser = argparse.ArgumentParser(description="Symlink dotfiles into the home directory")
    parser.add_argument("--dry-run", action="store_true",
                        help="print actions without executing them")
    args = parser.parse_args(argv)

    # Initialize configuration
    config = Config()
    config.dryrun = args.dry_run

    # Run installer
    try:
        execute_link(config)
    except KeyboardInterrupt:
        print_info("\nInterrupted")
        sys.exit(130)
    except Exception as e:
        print_error(str(e))
        sys.exit(1)


if __name__ == "__main__":
    main()
