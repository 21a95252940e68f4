"""Command-line argument parsing for git-prompt-status."""

import argparse
import os

from git_prompt_status.__version__ import __version__
from git_prompt_status.constants import INPUT_MODE_ENV, INPUT_MODES


def parse_args(argv=None):
    """Parse command-line arguments."""
    parser = argparse.ArgumentParser(
        prog="git-prompt-status",
        description="Summarize 'git status --porcelain --branch' as one line for a shell prompt",
        epilog="Output fields: branch ahead behind staged conflicts changed untracked "
        "stashes local_only upstream merging rebase",
    )
    parser.add_argument("--version", action="version", version=f"git-prompt-status {__version__}")
    parser.add_argument(
        "-C",
        "--directory",
        default=".",
        help="Start the repository search here instead of the current directory",
    )
    parser.add_argument(
        "--input",
        choices=list(INPUT_MODES),
        default=os.environ.get(INPUT_MODE_ENV, "auto"),
        help="Read the report from stdin, run git, or pick automatically (default: auto)",
    )
    parser.add_argument(
        "--timeout",
        type=float,
        default=10.0,
        metavar="SECONDS",
        help="Kill 'git status' after this many seconds (default: 10)",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Show verbose output")
    parser.add_argument(
        "--debug", action="store_true", help="Show debug information for troubleshooting"
    )
    parser.add_argument(
        "-q", "--quiet", action="store_true", help="Do not print error messages, only exit codes"
    )

    return parser.parse_args(argv)
