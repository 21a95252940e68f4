"""Locate repository metadata on disk"""

import os
from typing import Optional

from git_prompt_status.constants import METADATA_DIR_NAME, WORKTREE_POINTER_KEY
from git_prompt_status.exceptions import MetadataReadError, RepositoryNotFoundError
from git_prompt_status.logging_config import get_logger
from git_prompt_status.models.status import RepoPaths

logger = get_logger(__name__)


class LocalFileSystem:
    """Filesystem lookups used by the resolver and the probes.

    Swapped for a mock in tests so no real directory tree is needed.
    """

    def exists(self, path: str) -> bool:
        return os.path.exists(path)

    def is_dir(self, path: str) -> bool:
        return os.path.isdir(path)

    def read_text(self, path: str) -> str:
        with open(path, encoding="utf-8", errors="replace") as fin:
            return fin.read()


class PathResolver:
    """Resolve the metadata directory for a starting directory."""

    def __init__(self, fs: Optional[LocalFileSystem] = None, metadata_dir_name: str = METADATA_DIR_NAME):
        """Initialize the resolver.

        Args:
            fs: Filesystem capability, defaults to the local filesystem
            metadata_dir_name: Name of the metadata entry to look for
        """
        self.fs = fs or LocalFileSystem()
        self.metadata_dir_name = metadata_dir_name

    def find_metadata_entry(self, start_dir: str) -> str:
        """Walk upward from start_dir until a metadata entry is found.

        Returns:
            Path of the entry, which is either a directory or a worktree pointer file

        Raises:
            RepositoryNotFoundError: The filesystem root was reached without a match
        """
        current = os.path.abspath(start_dir)
        while True:
            candidate = os.path.join(current, self.metadata_dir_name)
            if self.fs.exists(candidate):
                logger.debug(f"Found metadata entry at {candidate}")
                return candidate

            parent = os.path.dirname(current)
            if parent == current:
                raise RepositoryNotFoundError(start_dir)
            current = parent

    def resolve(self, start_dir: str) -> RepoPaths:
        """Resolve RepoPaths for start_dir, following worktree indirection.

        Raises:
            RepositoryNotFoundError: No metadata entry, or the pointer leads nowhere
            MetadataReadError: The worktree pointer file could not be read
        """
        entry = self.find_metadata_entry(start_dir)
        if self.fs.is_dir(entry):
            return RepoPaths(metadata_dir=entry, repo_root=entry)

        metadata_dir = self._read_worktree_pointer(entry)
        repo_root = self._find_named_ancestor(metadata_dir, start_dir)
        logger.debug(f"Worktree metadata at {metadata_dir}, repository root {repo_root}")
        return RepoPaths(metadata_dir=metadata_dir, repo_root=repo_root)

    def _read_worktree_pointer(self, pointer_file: str) -> str:
        # File of format:
        # gitdir: /tmp/g/.git/worktrees/wg
        try:
            text = self.fs.read_text(pointer_file)
        except OSError as e:
            raise MetadataReadError(pointer_file, f"could not open worktree file ({e})") from e

        first_line = text.splitlines()[0] if text else ""
        tokens = first_line.split(None, 1)
        if len(tokens) < 2 or tokens[0] != WORKTREE_POINTER_KEY:
            raise MetadataReadError(pointer_file, f"expected '{WORKTREE_POINTER_KEY} <path>'")

        target = tokens[1].strip()
        if not os.path.isabs(target):
            target = os.path.join(os.path.dirname(pointer_file), target)
        return os.path.normpath(target)

    def _find_named_ancestor(self, metadata_dir: str, start_dir: str) -> str:
        current = metadata_dir
        while os.path.basename(current) != self.metadata_dir_name:
            parent = os.path.dirname(current)
            if parent == current:
                raise RepositoryNotFoundError(
                    start_dir, f"no '{self.metadata_dir_name}' ancestor of {metadata_dir}"
                )
            current = parent
        return current


def resolve_repo_paths(start_dir: str, fs: Optional[LocalFileSystem] = None) -> RepoPaths:
    """Resolve RepoPaths for start_dir with the default metadata name."""
    return PathResolver(fs).resolve(start_dir)
