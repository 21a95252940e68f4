"""Parsing and probing services for git-prompt-status."""

from .paths import LocalFileSystem, PathResolver, resolve_repo_paths
from .branch_parser import parse_branch
from .tracking_parser import parse_remote
from .classifier import parse_stats
from .probes import stash_count, merge_in_progress, rebase_progress

__all__ = [
    "LocalFileSystem",
    "PathResolver",
    "resolve_repo_paths",
    "parse_branch",
    "parse_remote",
    "parse_stats",
    "stash_count",
    "merge_in_progress",
    "rebase_progress",
]
