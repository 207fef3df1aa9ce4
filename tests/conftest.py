"""Shared fixtures: isolated git environment and repository factories."""

import subprocess
from pathlib import Path

import pytest


def run_git(cwd: Path, *args: str) -> str:
    """Run a git command and return stdout."""
    result = subprocess.run(
        ["git", *args],
        cwd=cwd,
        capture_output=True,
        text=True,
        check=True,
    )
    return result.stdout.strip()


@pytest.fixture(autouse=True)
def isolated_git_env(tmp_path_factory, monkeypatch):
    """Point HOME at an empty directory so global config never leaks in."""
    home = tmp_path_factory.mktemp("home")
    monkeypatch.setenv("HOME", str(home))
    monkeypatch.setenv("XDG_CONFIG_HOME", str(home / ".config"))
    monkeypatch.setenv("GIT_CONFIG_NOSYSTEM", "1")
    monkeypatch.setenv("GIT_AUTHOR_NAME", "Test")
    monkeypatch.setenv("GIT_AUTHOR_EMAIL", "test@test.com")
    monkeypatch.setenv("GIT_COMMITTER_NAME", "Test")
    monkeypatch.setenv("GIT_COMMITTER_EMAIL", "test@test.com")
    return home


@pytest.fixture
def make_repo():
    """Factory: create a non-bare repository with one commit and optional remotes."""

    def _make(path: Path, remotes: dict[str, str] | None = None, commit: bool = True) -> Path:
        path.mkdir(parents=True, exist_ok=True)
        run_git(path, "init", "-q", "-b", "main")
        for name, url in (remotes or {}).items():
            run_git(path, "remote", "add", name, url)
        if commit:
            (path / "README.md").write_text(f"# {path.name}\n")
            run_git(path, "add", "README.md")
            run_git(path, "commit", "-q", "-m", "Initial commit")
        return path

    return _make
