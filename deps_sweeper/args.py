"""Command-line argument parsing for deps-sweeper."""

import argparse

from deps_sweeper.__version__ import __version__
from deps_sweeper.constants import FEATURE_BRANCH, RUN_MODES, RunMode


def parse_args(argv=None):
    """Parse command-line arguments. All of them are optional."""
    parser = argparse.ArgumentParser(
        prog="deps-sweeper",
        description="Update dependencies in every repository under the current directory "
        "and open pull requests for the changes",
        epilog="Requires gh, git and yarn on PATH. gh must be authenticated (gh auth login).",
    )
    parser.add_argument("--version", action="version", version=f"deps-sweeper {__version__}")
    parser.add_argument(
        "--mode",
        choices=RUN_MODES,
        default=RunMode.UPDATE,
        help="update: upgrade clean default branches onto a dated branch (default); "
        f"pull-request: publish folders checked out on {FEATURE_BRANCH}",
    )
    output = parser.add_mutually_exclusive_group()
    output.add_argument(
        "--debug", action="store_true", help="Show debug information and write a log file"
    )
    output.add_argument("-q", "--quiet", action="store_true", help="Only show warnings and errors")

    return parser.parse_args(argv)
