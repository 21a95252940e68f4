"""Parse branch and upstream from the porcelain header line"""

from typing import Optional

from git_prompt_status.constants import (
    DETACHED_MARKER,
    HEADER_PREFIX,
    INITIAL_COMMIT_MARKERS,
    TRACKING_CLOSE,
    TRACKING_OPEN,
    UPSTREAM_SEPARATOR,
)
from git_prompt_status.exceptions import MetadataReadError
from git_prompt_status.logging_config import get_logger
from git_prompt_status.models.status import BranchInfo
from git_prompt_status.services.paths import LocalFileSystem

logger = get_logger(__name__)


def header_content(header: str) -> str:
    """Return the header text after the leading '## '."""
    end = len(header.rstrip("\r\n"))
    start = len(HEADER_PREFIX) if header.startswith(HEADER_PREFIX) else 0
    if start < end and header[start] == " ":
        start += 1
    return header[start:end]


def strip_tracking(content: str) -> str:
    """Drop a trailing ' [ahead N, behind M]' annotation, if any."""
    if not content.endswith(TRACKING_CLOSE):
        return content
    found = content.rfind(TRACKING_OPEN)
    if found == -1:
        return content
    return content[:found]


def read_head_hash(head_file: str, fs: Optional[LocalFileSystem] = None) -> str:
    """Read the commit hash a detached HEAD points at.

    Raises:
        MetadataReadError: HEAD could not be read or is empty
    """
    fs = fs or LocalFileSystem()
    try:
        tokens = fs.read_text(head_file).split()
    except OSError as e:
        raise MetadataReadError(head_file, f"failed to get hash ({e})") from e
    if not tokens:
        raise MetadataReadError(head_file, "file is empty")
    return tokens[0]


def parse_branch(header: str, head_file: str, fs: Optional[LocalFileSystem] = None) -> BranchInfo:
    """
    Parse the branch portion of the header line.

    Checks run in a fixed order since the text may match more than one form:
    ``main...origin/main``, ``HEAD (no branch)``, ``No commits yet on main``
    (or the older ``Initial commit on main``), and finally a bare branch name.

    Args:
        header: First line of ``git status --porcelain --branch``
        head_file: Path of HEAD, read only for a detached head

    Returns:
        BranchInfo for the header
    """
    content = strip_tracking(header_content(header))

    found = content.find(UPSTREAM_SEPARATOR)
    if found != -1:
        return BranchInfo(
            branch=content[:found],
            upstream=content[found + len(UPSTREAM_SEPARATOR):],
            local_only=False,
        )

    if DETACHED_MARKER in content:
        logger.debug("Detached HEAD, reading commit hash")
        return BranchInfo(branch=read_head_hash(head_file, fs), local_only=True)

    if any(marker in content for marker in INITIAL_COMMIT_MARKERS):
        return BranchInfo(branch=content[content.rfind(" ") + 1:])

    return BranchInfo(branch=content, local_only=True)
