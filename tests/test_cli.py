"""Tests for the command-line entry point"""
import importlib
import io

import pytest

from git_prompt_status.cli.main import main
from git_prompt_status.exceptions import ErrorKind, RepositoryNotFoundError, StatusCommandError
from git_prompt_status.exit_codes import ExitCode, exit_code_for

# git_prompt_status.cli re-exports main(), which shadows the submodule attribute
cli_main = importlib.import_module("git_prompt_status.cli.main")


@pytest.fixture
def stdin_report(monkeypatch):
    """Replace stdin with a porcelain report."""
    def _set(text):
        monkeypatch.setattr("sys.stdin", io.StringIO(text))
    return _set


class TestMain:
    """Test main() exit codes and output."""

    def test_success(self, fake_repo, stdin_report, capsys):
        stdin_report("## main...origin/main [ahead 1]\n M a.py\n?? b.py\n")

        code = main(["--input", "stdin", "-C", str(fake_repo)])

        out, _ = capsys.readouterr()
        assert code == ExitCode.SUCCESS
        assert out == "main 1 0 0 0 1 1 0 0 origin/main 0 0\n"

    def test_parse_error(self, fake_repo, stdin_report, capsys):
        stdin_report("## main...origin/main [ahead]\n")

        code = main(["--input", "stdin", "-C", str(fake_repo)])

        out, err = capsys.readouterr()
        assert code == ExitCode.PARSE_ERROR
        assert out == ""
        assert "Error" in err

    def test_empty_report(self, fake_repo, stdin_report, capsys):
        stdin_report("")
        assert main(["--input", "stdin", "-C", str(fake_repo)]) == ExitCode.PARSE_ERROR
        assert capsys.readouterr().out == ""

    def test_repository_not_found(self, fake_repo, stdin_report, monkeypatch, capsys):
        def not_found(self, start_dir):
            raise RepositoryNotFoundError(start_dir)

        monkeypatch.setattr(
            "git_prompt_status.services.paths.PathResolver.find_metadata_entry", not_found
        )
        stdin_report("## main\n")

        code = main(["--input", "stdin", "-C", str(fake_repo)])

        assert code == ExitCode.REPOSITORY_NOT_FOUND
        assert capsys.readouterr().out == ""

    def test_status_command_failure(self, fake_repo, monkeypatch, capsys):
        def fail(config):
            raise StatusCommandError("git status --porcelain --branch", "exit 128")

        monkeypatch.setattr(cli_main, "load_status_lines", fail)

        code = main(["--input", "git", "-C", str(fake_repo)])

        out, err = capsys.readouterr()
        assert code == ExitCode.IO_ERROR
        assert out == ""
        assert "exit 128" in err

    def test_quiet_suppresses_errors(self, fake_repo, stdin_report, capsys):
        stdin_report("## main...origin/main [behind]\n")

        code = main(["--input", "stdin", "-q", "-C", str(fake_repo)])

        out, err = capsys.readouterr()
        assert code == ExitCode.PARSE_ERROR
        assert out == ""
        assert err == ""

    def test_invalid_timeout(self, fake_repo, capsys):
        assert main(["--timeout", "0", "-C", str(fake_repo)]) == ExitCode.INVALID_ARGS

    def test_invalid_input_choice(self):
        with pytest.raises(SystemExit) as exc_info:
            main(["--input", "socket"])
        assert exc_info.value.code == 2

    def test_unexpected_error(self, fake_repo, monkeypatch, capsys):
        def boom(config):
            raise RuntimeError("boom")

        monkeypatch.setattr(cli_main, "load_status_lines", boom)

        assert main(["-C", str(fake_repo)]) == ExitCode.ERROR
        assert "boom" in capsys.readouterr().err


class TestExitCodes:
    """Test the error kind to exit code mapping."""

    @pytest.mark.parametrize(
        "kind, code",
        [
            (ErrorKind.NOT_FOUND, ExitCode.REPOSITORY_NOT_FOUND),
            (ErrorKind.IO_ERROR, ExitCode.IO_ERROR),
            (ErrorKind.PARSE_ERROR, ExitCode.PARSE_ERROR),
        ],
    )
    def test_exit_code_for(self, kind, code):
        assert exit_code_for(kind) == code
