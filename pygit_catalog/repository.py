"""Concrete GitPython-based repository implementation (read-only)."""

from __future__ import annotations

import configparser
import logging
import os
from pathlib import Path

from git import InvalidGitRepositoryError, NoSuchPathError, Repo

from pygit_catalog.errors import ConfigReadError, RemoteAccessError, RepositoryOpenError

# GitPython config levels, most specific first
CONFIG_LEVELS = ('repository', 'global', 'user', 'system')


class GitPythonRepository:
    """Read-only view of a repository using GitPython"""

    def __init__(self, repo_path: Path, repo: Repo):
        """Wrap an already opened Repo. Use open() or discover() instead."""
        self._path = Path(repo_path)
        self._repo = repo
        self._logger = logging.getLogger(__name__)

    @classmethod
    def open(cls, repo_path: Path) -> GitPythonRepository:
        """Open the repository rooted exactly at repo_path."""
        return cls._open(repo_path, search_parent_directories=False)

    @classmethod
    def discover(cls, path: Path) -> GitPythonRepository:
        """Open the repository containing path, searching parent directories."""
        return cls._open(path, search_parent_directories=True)

    @classmethod
    def _open(cls, path: Path, search_parent_directories: bool) -> GitPythonRepository:
        try:
            repo = Repo(os.fspath(path), search_parent_directories=search_parent_directories)
        except (InvalidGitRepositoryError, NoSuchPathError, OSError, ValueError) as e:
            raise RepositoryOpenError(path, f"{type(e).__name__}: {e}") from e
        return cls(path, repo)

    def close(self) -> None:
        """Release underlying git resources."""
        self._repo.close()

    @property
    def path(self) -> Path:
        """Path the repository was opened from."""
        return self._path

    @property
    def git_dir(self) -> Path:
        """Resolved git directory (follows gitdir redirects)."""
        return Path(self._repo.git_dir)

    @property
    def working_tree(self) -> Path | None:
        """Root of the working tree, or None for bare repositories."""
        wt = self._repo.working_tree_dir
        return Path(wt) if wt is not None else None

    @property
    def root(self) -> Path:
        """Working tree root, or the git directory's parent when bare."""
        return self.working_tree or self.git_dir.parent

    def remote_names(self) -> list[str]:
        """Names of all configured remotes, in config order."""
        try:
            return [remote.name for remote in self._repo.remotes]
        except (OSError, configparser.Error, ValueError) as e:
            raise RemoteAccessError(self._path, e) from e

    def remote_fetch_url(self, name: str) -> str | None:
        """Fetch URL of a remote, or None if it has none."""
        try:
            return self._read(f'remote "{name}"', 'url')
        except ConfigReadError as e:
            raise RemoteAccessError(self._path, e.reason) from e

    def config_value(self, key: str, level: str | None = None) -> str | None:
        """Read a dotted key like 'user.name'.

        With level=None the merged view of all levels is used; otherwise one
        of CONFIG_LEVELS.
        """
        section, _, option = key.rpartition('.')
        if not section or not option:
            raise ConfigReadError(self._path, f"invalid key {key!r}")
        return self._read(section, option, level)

    def _read(self, section: str, option: str, level: str | None = None) -> str | None:
        try:
            value = self._repo.config_reader(level).get(section, option)
        except (configparser.NoSectionError, configparser.NoOptionError):
            return None
        except (OSError, configparser.Error, ValueError) as e:
            raise ConfigReadError(self._path, e) from e
        value = str(value).strip()
        return value or None
