"""Custom exceptions for git-prompt-status"""

from enum import Enum
from typing import Optional


class ErrorKind(Enum):
    """Kind of failure that aborts a status computation."""
    NOT_FOUND = "not-found"
    IO_ERROR = "io-error"
    PARSE_ERROR = "parse-error"


class GitPromptStatusError(Exception):
    """Base exception for all git-prompt-status errors."""

    kind: ErrorKind = ErrorKind.IO_ERROR


class RepositoryNotFoundError(GitPromptStatusError):
    """Exception raised when no repository metadata can be located."""

    kind = ErrorKind.NOT_FOUND

    def __init__(self, start_dir: str, message: Optional[str] = None):
        self.start_dir = start_dir
        self.message = message

        error_msg = f"Could not find a git directory from '{start_dir}'"
        if message:
            error_msg += f": {message}"

        super().__init__(error_msg)


class MetadataReadError(GitPromptStatusError):
    """Exception raised when a required metadata file cannot be read."""

    kind = ErrorKind.IO_ERROR

    def __init__(self, path: str, message: Optional[str] = None):
        self.path = path
        self.message = message

        error_msg = f"Could not read '{path}'"
        if message:
            error_msg += f": {message}"

        super().__init__(error_msg)


class StatusCommandError(GitPromptStatusError):
    """Exception raised when the status report could not be produced."""

    kind = ErrorKind.IO_ERROR

    def __init__(self, command: str, message: Optional[str] = None):
        self.command = command
        self.message = message

        error_msg = f"Command '{command}' failed"
        if message:
            error_msg += f": {message}"

        super().__init__(error_msg)


class TrackingParseError(GitPromptStatusError):
    """Exception raised when an ahead/behind count is malformed."""

    kind = ErrorKind.PARSE_ERROR

    def __init__(self, text: str, message: Optional[str] = None):
        self.text = text
        self.message = message

        error_msg = f"Malformed tracking annotation '{text}'"
        if message:
            error_msg += f": {message}"

        super().__init__(error_msg)


class EmptyStatusError(GitPromptStatusError):
    """Exception raised when the status report has no header line."""

    kind = ErrorKind.PARSE_ERROR

    def __init__(self):
        super().__init__("Status report is empty, expected a '##' header line")
