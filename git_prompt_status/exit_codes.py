"""CLI exit codes for consistent error reporting.

| Code | Meaning                          |
|------|----------------------------------|
| 0    | Success                          |
| 1    | General error                    |
| 2    | Invalid arguments                |
| 3    | No repository found              |
| 4    | Required file or command failed  |
| 5    | Malformed status report          |
"""

from git_prompt_status.exceptions import ErrorKind


class ExitCode:
    """Standard exit codes for the git-prompt-status CLI."""

    SUCCESS = 0
    """Status line written to stdout."""

    ERROR = 1
    """Unexpected error. Run with --debug for details."""

    INVALID_ARGS = 2
    """Invalid arguments or configuration."""

    REPOSITORY_NOT_FOUND = 3
    """No repository metadata above the start directory."""

    IO_ERROR = 4
    """A required metadata file or the git command could not be read."""

    PARSE_ERROR = 5
    """The status report did not follow the porcelain grammar."""


_KIND_CODES = {
    ErrorKind.NOT_FOUND: ExitCode.REPOSITORY_NOT_FOUND,
    ErrorKind.IO_ERROR: ExitCode.IO_ERROR,
    ErrorKind.PARSE_ERROR: ExitCode.PARSE_ERROR,
}


def exit_code_for(kind: ErrorKind) -> int:
    """Map an error kind to its exit code."""
    return _KIND_CODES.get(kind, ExitCode.ERROR)
