import subprocess
from pathlib import Path

import pytest

from repo_state import BaselineConfig, GitRepo


@pytest.fixture
def tmp_git_repo(tmp_path):
    """Create a temporary git repository on `main` with user config set."""
    repo = tmp_path / "repo"
    repo.mkdir()

    def git(cmd):
        subprocess.check_call(f"git -C {repo} {cmd}", shell=True)

    git("init -q")
    git("symbolic-ref HEAD refs/heads/main")
    git('config user.email "test@example.com"')
    git('config user.name "Test User"')
    return repo, git


@pytest.fixture(autouse=True)
def isolate_git_environment(monkeypatch, tmp_path):
    """Keep the user's global git config and git override out of the tests."""
    home = tmp_path / "home"
    home.mkdir()
    monkeypatch.setenv("HOME", str(home))
    monkeypatch.setenv("XDG_CONFIG_HOME", str(home / ".config"))
    monkeypatch.setenv("GIT_CONFIG_NOSYSTEM", "1")
    monkeypatch.setenv("GIT_CONFIG_GLOBAL", str(home / ".gitconfig"))
    monkeypatch.delenv("REPO_STATE_GIT_BINARY_PATH", raising=False)
    return


@pytest.fixture
def write_file():
    def _write(base: Path, name: str, content: str = "sample"):
        path = base / name
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(content)
        return path

    return _write


@pytest.fixture
def make_repo():
    """Build a GitRepo rooted at `path` with optional config overrides."""

    def _make(path, **config):
        return GitRepo(BaselineConfig(working_directory=str(path), **config))

    return _make
