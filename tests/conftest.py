"""Pytest fixtures for git-prompt-status tests"""
import tempfile
from pathlib import Path
import pytest
import git


@pytest.fixture
def temp_dir():
    """Create a temporary directory for testing."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir).resolve()


@pytest.fixture
def mock_config():
    """Create a mock configuration dictionary."""
    return {
        'verbose': False,
        'debug': False,
        'start_dir': '.',
        'metadata_dir_name': '.git',
        'input_mode': 'stdin',
        'git_timeout': 10.0,
    }


@pytest.fixture
def fake_repo(temp_dir):
    """Create a working tree with a hand-made .git directory (no git needed)."""
    work_tree = temp_dir / "project"
    git_dir = work_tree / ".git"
    (git_dir / "logs" / "refs").mkdir(parents=True)
    (git_dir / "HEAD").write_text("ref: refs/heads/main\n")
    return work_tree


@pytest.fixture
def fake_worktree(fake_repo, temp_dir):
    """Create a linked worktree whose .git is a pointer file into fake_repo."""
    tree_meta = fake_repo / ".git" / "worktrees" / "linked"
    tree_meta.mkdir(parents=True)
    (tree_meta / "HEAD").write_text("0123456789abcdef0123456789abcdef01234567\n")

    linked = temp_dir / "linked"
    linked.mkdir()
    (linked / ".git").write_text(f"gitdir: {tree_meta}\n")
    return linked


@pytest.fixture
def git_repo(temp_dir):
    """Create a real Git repository for testing."""
    repo_path = temp_dir / "test_repo"
    repo_path.mkdir()

    repo = git.Repo.init(repo_path)
    repo.git.symbolic_ref("HEAD", "refs/heads/main")

    # Configure git user for commits
    repo.config_writer().set_value("user", "name", "Test User").release()
    repo.config_writer().set_value("user", "email", "test@example.com").release()

    test_file = repo_path / "README.md"
    test_file.write_text("# Test Repository\n")
    repo.index.add(["README.md"])
    repo.index.commit("Initial commit")

    yield repo

    repo.close()
