"""Shared constants for git-prompt-status."""

from typing import FrozenSet


# Repository metadata layout
METADATA_DIR_NAME = ".git"
WORKTREE_POINTER_KEY = "gitdir:"
HEAD_FILE = "HEAD"
MERGE_HEAD_FILE = "MERGE_HEAD"
REBASE_DIR = "rebase-apply"
REBASE_NEXT_FILE = "next"
REBASE_LAST_FILE = "last"
STASH_LOG_PARTS = ("logs", "refs", "stash")


# Header line grammar (git status --porcelain --branch)
HEADER_PREFIX = "##"
UPSTREAM_SEPARATOR = "..."
TRACKING_OPEN = " ["
TRACKING_CLOSE = "]"
TRACKING_AHEAD = "ahead"
TRACKING_BEHIND = "behind"
DETACHED_MARKER = "(no branch)"
INITIAL_COMMIT_MARKERS = ("Initial commit", "No commits yet")


# Status line codes
UNTRACKED_CODE = "?"
CONFLICT_PAIRS: FrozenSet[str] = frozenset({"AA", "AU", "DD", "DU", "UA", "UD", "UU"})
STAGED_CODES: FrozenSet[str] = frozenset("ACDMR")
CHANGED_CODES: FrozenSet[str] = frozenset("CDMR")


# Output
NO_REBASE = "0"
FIELD_SEPARATOR = " "
OUTPUT_FIELD_COUNT = 12


# Input modes for the status source
INPUT_MODES = ("auto", "stdin", "git")
INPUT_MODE_ENV = "GIT_PROMPT_STATUS_INPUT"
