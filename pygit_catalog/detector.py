"""RepositoryDetector: decides whether a path is a repository root."""

from __future__ import annotations

import logging
import os
from pathlib import Path

from pygit_catalog.errors import RepositoryOpenError
from pygit_catalog.models import DetectedRepository, RepoKind
from pygit_catalog.repository import GitPythonRepository

logger = logging.getLogger(__name__)


class RepositoryDetector:
    """Classifies candidate directories as REGULAR, SUBMODULE or not a repository"""

    def detect(self, path: Path) -> DetectedRepository | None:
        """Return the detected repository rooted exactly at path, or None.

        Discovery searches parent directories, so a subdirectory of a
        repository would "succeed"; the discovered root must therefore be
        path itself.
        """
        dot_git = path / '.git'
        if not os.path.lexists(dot_git):
            return None

        try:
            repo = GitPythonRepository.discover(path)
        except RepositoryOpenError as e:
            logger.debug("Not a repository root: %s (%s)", path, e.reason)
            return None

        try:
            root = repo.root
            git_dir = repo.git_dir
        finally:
            repo.close()

        if not git_dir.is_dir():
            logger.debug("Skipping %s: git directory %s is missing", path, git_dir)
            return None

        if not _same_directory(root, path):
            logger.debug("Skipping %s: belongs to repository at %s", path, root)
            return None

        kind = RepoKind.SUBMODULE if is_linked_git_dir(path) else RepoKind.REGULAR
        return DetectedRepository(path=path, kind=kind)


def is_linked_git_dir(path: Path) -> bool:
    """True if path/.git is a gitdir redirect file rather than a directory."""
    return (path / '.git').is_file()


def _same_directory(a: Path, b: Path) -> bool:
    try:
        return os.path.samefile(a, b)
    except OSError:
        return os.path.realpath(a) == os.path.realpath(b)
