"""Probes for optional on-disk repository state.

None of these raise: a missing or unreadable file simply means the state
is absent and the probe returns its default.
"""

import os
from typing import Optional

from git_prompt_status.constants import NO_REBASE, REBASE_LAST_FILE, REBASE_NEXT_FILE
from git_prompt_status.logging_config import get_logger
from git_prompt_status.services.paths import LocalFileSystem

logger = get_logger(__name__)


def stash_count(stash_file: str, fs: Optional[LocalFileSystem] = None) -> int:
    """Count the non-blank lines of the stash reflog."""
    fs = fs or LocalFileSystem()
    try:
        text = fs.read_text(stash_file)
    except OSError as e:
        logger.debug(f"No stash log at {stash_file}: {e}")
        return 0

    return sum(1 for line in text.splitlines() if line.strip())


def merge_in_progress(merge_file: str, fs: Optional[LocalFileSystem] = None) -> bool:
    """Check whether MERGE_HEAD exists."""
    fs = fs or LocalFileSystem()
    try:
        return fs.exists(merge_file)
    except OSError as e:
        logger.debug(f"Could not check {merge_file}: {e}")
        return False


def _first_token(fs: LocalFileSystem, path: str) -> Optional[str]:
    try:
        tokens = fs.read_text(path).split()
    except OSError as e:
        logger.debug(f"Could not read {path}: {e}")
        return None
    return tokens[0] if tokens else None


def rebase_progress(rebase_dir: str, fs: Optional[LocalFileSystem] = None) -> str:
    """
    Report progress of an in-flight rebase.

    Returns:
        "0" when no rebase is active, otherwise "<next>/<last>" (e.g. "1/4")
    """
    fs = fs or LocalFileSystem()
    current = _first_token(fs, os.path.join(rebase_dir, REBASE_NEXT_FILE))
    total = _first_token(fs, os.path.join(rebase_dir, REBASE_LAST_FILE))
    if current is None or total is None:
        return NO_REBASE

    if not (current.isdecimal() and total.isdecimal()):
        logger.debug(f"Ignoring non-numeric rebase progress {current!r}/{total!r}")
        return NO_REBASE

    return f"{int(current)}/{int(total)}"
