"""Configuration handling for git-prompt-status"""

import os
from dataclasses import dataclass

from git_prompt_status.constants import INPUT_MODES, METADATA_DIR_NAME


@dataclass
class Config:
    """Configuration for git-prompt-status with validation."""

    # Where the upward search for repository metadata starts
    start_dir: str = "."
    metadata_dir_name: str = METADATA_DIR_NAME

    # Where the porcelain report comes from
    input_mode: str = "auto"  # auto, stdin, git
    git_timeout: float = 10.0  # seconds

    # Diagnostics
    verbose: bool = False
    debug: bool = False

    def __post_init__(self):
        """Validate configuration after initialization."""
        self._validate_start_dir()
        self._validate_metadata_dir_name()
        self._validate_input_mode()
        self._validate_git_timeout()

    def _validate_start_dir(self):
        """Validate start_dir is not empty."""
        if not self.start_dir or not str(self.start_dir).strip():
            raise ValueError("start_dir cannot be empty")
        self.start_dir = str(self.start_dir)

    def _validate_metadata_dir_name(self):
        """Validate metadata_dir_name is a bare directory name."""
        name = self.metadata_dir_name
        if not name or not name.strip():
            raise ValueError("metadata_dir_name cannot be empty")
        if os.sep in name or (os.altsep and os.altsep in name):
            raise ValueError(f"metadata_dir_name must not contain a path separator, got '{name}'")

    def _validate_input_mode(self):
        """Validate input_mode is one of allowed values."""
        if self.input_mode not in INPUT_MODES:
            raise ValueError(f"input_mode must be one of {list(INPUT_MODES)}, got '{self.input_mode}'")

    def _validate_git_timeout(self):
        """Validate git_timeout is positive."""
        if self.git_timeout <= 0:
            raise ValueError(f"git_timeout must be positive, got {self.git_timeout}")

    def to_dict(self) -> dict:
        """Convert config to dictionary."""
        return {
            "start_dir": self.start_dir,
            "metadata_dir_name": self.metadata_dir_name,
            "input_mode": self.input_mode,
            "git_timeout": self.git_timeout,
            "verbose": self.verbose,
            "debug": self.debug,
        }

    def get(self, key: str, default=None):
        """Get config value by key so a Config and a plain dict read the same way."""
        return getattr(self, key, default)

    @classmethod
    def from_dict(cls, config_dict: dict) -> "Config":
        """Create Config from dictionary."""
        known_fields = {
            "start_dir",
            "metadata_dir_name",
            "input_mode",
            "git_timeout",
            "verbose",
            "debug",
        }

        filtered = {k: v for k, v in config_dict.items() if k in known_fields}
        return cls(**filtered)
