"""Parse ahead/behind counts from the porcelain header line"""

import string
from typing import Optional, Tuple

from git_prompt_status.constants import (
    TRACKING_AHEAD,
    TRACKING_BEHIND,
    TRACKING_CLOSE,
    TRACKING_OPEN,
)
from git_prompt_status.exceptions import TrackingParseError
from git_prompt_status.models.status import RemoteTracking


def tracking_annotation(header: str) -> Optional[str]:
    """Return the text inside a trailing ' [...]', or None when there is none.

    Example: ``## main...origin/main [ahead 2, behind 3]`` gives
    ``ahead 2, behind 3``.
    """
    line = header.rstrip("\r\n")
    if not line.endswith(TRACKING_CLOSE):
        return None
    found = line.rfind(TRACKING_OPEN)
    if found == -1:
        return None
    return line[found + len(TRACKING_OPEN):-len(TRACKING_CLOSE)]


def _read_count(text: str, pos: int, keyword: str) -> Tuple[int, int]:
    """Read the digits after a keyword starting at pos.

    Returns:
        (count, position just past the last digit)
    """
    if pos < len(text) and text[pos] == " ":
        pos += 1
    start = pos
    while pos < len(text) and text[pos] in string.digits:
        pos += 1
    if start == pos:
        raise TrackingParseError(text, f"no count after '{keyword}'")
    return int(text[start:pos]), pos


def parse_remote(header: str) -> RemoteTracking:
    """
    Parse the remote tracking portion of the header line.

    Recognizes ``[ahead N]``, ``[behind N]`` and ``[ahead N, behind M]``.
    Any other annotation such as ``[gone]`` counts as in sync.

    Raises:
        TrackingParseError: A keyword is present but not followed by digits
    """
    text = tracking_annotation(header)
    if text is None:
        return RemoteTracking()

    ahead = behind = 0
    pos = 0

    found = text.find(TRACKING_AHEAD)
    if found != -1:
        ahead, pos = _read_count(text, found + len(TRACKING_AHEAD), TRACKING_AHEAD)

    if pos < len(text) and text[pos] == ",":
        pos += 1

    found = text.find(TRACKING_BEHIND, pos)
    if found != -1:
        behind, pos = _read_count(text, found + len(TRACKING_BEHIND), TRACKING_BEHIND)

    return RemoteTracking(ahead=ahead, behind=behind)
