"""Supply porcelain status lines from stdin or from git"""

import select
import sys
from typing import IO, List, Optional, Union, TYPE_CHECKING

import git

from git_prompt_status.exceptions import StatusCommandError
from git_prompt_status.logging_config import get_logger

if TYPE_CHECKING:
    from git_prompt_status.config import Config

logger = get_logger(__name__)

STATUS_ARGS = ("--porcelain", "--branch")


def stdin_has_input(stream: Optional[IO[str]] = None) -> bool:
    """Check, without blocking, whether the stream has any input waiting."""
    stream = stream if stream is not None else sys.stdin
    if stream is None or stream.closed or stream.isatty():
        return False
    try:
        readable, _, _ = select.select([stream], [], [], 0)
    except (OSError, ValueError) as e:
        # No usable file descriptor (e.g. a replaced sys.stdin)
        logger.debug(f"Cannot poll stdin: {e}")
        return False
    return bool(readable)


def read_lines(stream: IO[str]) -> List[str]:
    return stream.read().splitlines()


def run_git_status(start_dir: str, timeout: Optional[float] = None) -> List[str]:
    """
    Run ``git status --porcelain --branch`` in start_dir.

    Raises:
        StatusCommandError: git is missing or exited with an error
    """
    command = "git status " + " ".join(STATUS_ARGS)
    logger.debug(f"Running '{command}' in {start_dir}")
    try:
        output = git.Git(start_dir).status(*STATUS_ARGS, kill_after_timeout=timeout)
    except git.exc.GitCommandNotFound as e:
        raise StatusCommandError(command, f"could not run git ({e})") from e
    except git.exc.GitCommandError as e:
        stderr = e.stderr.strip() if isinstance(e.stderr, str) else ""
        message = f"exit {e.status}: {stderr}" if stderr else f"exit {e.status}"
        raise StatusCommandError(command, message) from e
    return output.splitlines()


def load_status_lines(config: Union["Config", dict], stream: Optional[IO[str]] = None) -> List[str]:
    """Collect the report according to the configured input mode."""
    stream = stream if stream is not None else sys.stdin
    mode = config.get("input_mode", "auto")

    if mode == "stdin":
        logger.debug("Reading status report from stdin")
        return read_lines(stream)

    if mode == "auto" and stdin_has_input(stream):
        lines = read_lines(stream)
        if lines:
            logger.debug("Reading status report from stdin")
            return lines
        # EOF also polls as readable (e.g. </dev/null)
        logger.debug("Stdin is at end of file, running git instead")

    return run_git_status(config.get("start_dir", "."), config.get("git_timeout"))
