"""Compose the prompt status line for a working tree"""

from dataclasses import dataclass
from typing import Iterable, Optional, Union, TYPE_CHECKING

from git_prompt_status.constants import METADATA_DIR_NAME
from git_prompt_status.exceptions import EmptyStatusError, ErrorKind, GitPromptStatusError
from git_prompt_status.logging_config import get_logger
from git_prompt_status.models.status import PromptStatus, RepoPaths
from git_prompt_status.services.branch_parser import parse_branch
from git_prompt_status.services.classifier import parse_stats
from git_prompt_status.services.paths import LocalFileSystem, PathResolver
from git_prompt_status.services.probes import merge_in_progress, rebase_progress, stash_count
from git_prompt_status.services.tracking_parser import parse_remote

if TYPE_CHECKING:
    from git_prompt_status.config import Config

logger = get_logger(__name__)


@dataclass(frozen=True)
class StatusResult:
    """Outcome of a status computation: either a line or the error that stopped it."""
    line: Optional[str] = None
    error: Optional[GitPromptStatusError] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @property
    def kind(self) -> Optional[ErrorKind]:
        return self.error.kind if self.error is not None else None


class StatusAggregator:
    """Build the prompt status from a porcelain report and the metadata directory."""

    def __init__(
        self,
        start_dir: str,
        config: Union["Config", dict, None] = None,
        fs: Optional[LocalFileSystem] = None,
    ):
        """Initialize the aggregator.

        Args:
            start_dir: Directory the repository search starts from
            config: Configuration dictionary or Config object
            fs: Filesystem capability shared by every lookup
        """
        self.start_dir = start_dir
        self.config = config if config is not None else {}
        self.fs = fs or LocalFileSystem()
        self.resolver = PathResolver(
            self.fs, self.config.get("metadata_dir_name", METADATA_DIR_NAME)
        )

    def resolve_paths(self) -> RepoPaths:
        return self.resolver.resolve(self.start_dir)

    def collect(self, lines: Iterable[str]) -> PromptStatus:
        """
        Parse a full porcelain report.

        Args:
            lines: Output of ``git status --porcelain --branch``, header first

        Raises:
            GitPromptStatusError: On the first failure; nothing partial is returned
        """
        paths = self.resolve_paths()

        lines = list(lines)
        if not lines:
            raise EmptyStatusError()
        header, entries = lines[0], lines[1:]
        logger.debug(f"Header: {header!r}, {len(entries)} status lines")

        status = PromptStatus(
            branch=parse_branch(header, paths.head, self.fs),
            remote=parse_remote(header),
            stats=parse_stats(entries),
            stashes=stash_count(paths.stash, self.fs),
            merging=merge_in_progress(paths.merge, self.fs),
            rebase=rebase_progress(paths.rebase, self.fs),
        )
        logger.info(f"Status for {status.branch.branch}: {status.format_line()}")
        return status

    def status_line(self, lines: Iterable[str]) -> str:
        return self.collect(lines).format_line()

    def try_status_line(self, lines: Iterable[str]) -> StatusResult:
        """Like status_line, but hand back the failure instead of raising it."""
        try:
            return StatusResult(line=self.status_line(lines))
        except GitPromptStatusError as e:
            logger.debug(f"Status computation stopped ({e.kind.value}): {e}")
            return StatusResult(error=e)


def current_gitstatus(
    lines: Iterable[str],
    start_dir: str = ".",
    fs: Optional[LocalFileSystem] = None,
) -> str:
    """Take a porcelain report and produce the status line for start_dir."""
    return StatusAggregator(start_dir, fs=fs).status_line(lines)
