"""Classify porcelain status lines into prompt counters"""

from typing import Iterable

from git_prompt_status.constants import (
    CHANGED_CODES,
    CONFLICT_PAIRS,
    STAGED_CODES,
    UNTRACKED_CODE,
)
from git_prompt_status.models.status import StatusCounts


def parse_stats(lines: Iterable[str]) -> StatusCounts:
    """
    Count staged, conflicted, changed and untracked entries.

    ``lines`` must not include the '##' header. Each line is ``XY path``
    where X is the index status and Y the worktree status. An entry is
    untracked, a conflict, or else staged and/or changed.
    """
    staged = conflicts = changed = untracked = 0

    for line in lines:
        if not line:
            continue

        if line[0] == UNTRACKED_CODE:
            untracked += 1
            continue

        code = line[:2].ljust(2)
        if code in CONFLICT_PAIRS:
            conflicts += 1
            continue

        if code[0] in STAGED_CODES:
            staged += 1
        if code[1] in CHANGED_CODES:
            changed += 1

    return StatusCounts(
        staged=staged,
        conflicts=conflicts,
        changed=changed,
        untracked=untracked,
    )
