"""Status models for a single working tree"""
import os
from dataclasses import dataclass
from typing import List

from git_prompt_status.constants import (
    FIELD_SEPARATOR,
    HEAD_FILE,
    MERGE_HEAD_FILE,
    NO_REBASE,
    REBASE_DIR,
    STASH_LOG_PARTS,
)


@dataclass(frozen=True)
class RepoPaths:
    """Resolved repository metadata locations.

    ``metadata_dir`` is the metadata directory of the current checkout. Inside a
    linked worktree it points at ``.git/worktrees/<name>`` while ``repo_root``
    stays on the primary ``.git`` directory.
    """
    metadata_dir: str
    repo_root: str

    @property
    def head(self) -> str:
        return os.path.join(self.metadata_dir, HEAD_FILE)

    @property
    def merge(self) -> str:
        return os.path.join(self.metadata_dir, MERGE_HEAD_FILE)

    @property
    def rebase(self) -> str:
        return os.path.join(self.metadata_dir, REBASE_DIR)

    @property
    def stash(self) -> str:
        return os.path.join(self.repo_root, *STASH_LOG_PARTS)

    @property
    def is_worktree(self) -> bool:
        return self.metadata_dir != self.repo_root


@dataclass(frozen=True)
class BranchInfo:
    """Branch and upstream parsed from the header line."""
    branch: str
    upstream: str = ""
    local_only: bool = True


@dataclass(frozen=True)
class RemoteTracking:
    """Commits ahead of and behind the upstream."""
    ahead: int = 0
    behind: int = 0


@dataclass(frozen=True)
class StatusCounts:
    """Per-bucket counts of the status lines."""
    staged: int = 0
    conflicts: int = 0
    changed: int = 0
    untracked: int = 0


@dataclass(frozen=True)
class PromptStatus:
    """Everything shown in the prompt for one working tree."""
    branch: BranchInfo
    remote: RemoteTracking
    stats: StatusCounts
    stashes: int = 0
    merging: bool = False
    rebase: str = NO_REBASE

    def fields(self) -> List[str]:
        """Return the output fields in their fixed order."""
        return [
            self.branch.branch,
            str(self.remote.ahead),
            str(self.remote.behind),
            str(self.stats.staged),
            str(self.stats.conflicts),
            str(self.stats.changed),
            str(self.stats.untracked),
            str(self.stashes),
            str(int(self.branch.local_only)),
            self.branch.upstream,
            str(int(self.merging)),
            self.rebase,
        ]

    def format_line(self) -> str:
        """Render the single space-separated status line."""
        return FIELD_SEPARATOR.join(self.fields())

    def __str__(self) -> str:
        return self.format_line()
