"""Repository scanner: walks a root directory and yields repository roots."""

from __future__ import annotations

import logging
import os
import stat
from collections.abc import Iterator
from pathlib import Path

from pygit_catalog.detector import RepositoryDetector
from pygit_catalog.errors import RootAccessError, RootNotADirectoryError, RootNotFoundError
from pygit_catalog.models import DetectedRepository, ScanConfig

logger = logging.getLogger(__name__)


class RepositoryScanner:
    """Responsible for finding git repositories under one root"""

    def __init__(self, detector: RepositoryDetector | None = None):
        """Create a scanner. A custom detector can be injected for testing."""
        self.detector = detector or RepositoryDetector()

    def find_repositories(self, root: Path, config: ScanConfig) -> Iterator[DetectedRepository]:
        """Validate root and return an iterator over the repositories below it.

        Raises RootNotFoundError / RootNotADirectoryError / RootAccessError
        immediately; the walk itself never raises for unreadable entries.
        """
        root = Path(os.path.abspath(os.path.expanduser(root)))
        try:
            st = os.stat(root)
        except (FileNotFoundError, NotADirectoryError) as e:
            raise RootNotFoundError(root) from e
        except OSError as e:
            raise RootAccessError(root, e.strerror or e) from e
        if not stat.S_ISDIR(st.st_mode):
            raise RootNotADirectoryError(root)
        return self._walk(root, config)

    def _walk(self, root: Path, config: ScanConfig) -> Iterator[DetectedRepository]:
        """Depth-first, pre-order walk that prunes each repository's subtree."""
        confirmed: list[Path] = []
        for dirpath, dirnames, _filenames in os.walk(
            root, onerror=self._on_walk_error, followlinks=config.follow_symlinks
        ):
            current = Path(dirpath)
            dirnames.sort()
            dirnames[:] = [d for d in dirnames if d != '.git']

            if self._is_inside_known_repo(current, confirmed):
                dirnames.clear()
                continue

            if self._should_exclude(current, config.exclude_patterns):
                logger.debug("Excluded: %s", current)
                dirnames.clear()
                continue

            detected = self.detector.detect(current)
            if detected is not None:
                confirmed.append(current)
                dirnames.clear()
                if detected.is_submodule and not config.include_submodules:
                    logger.debug("Skipping submodule/worktree: %s", current)
                    continue
                logger.debug("Found: %s (%s)", current,
                             "submodule" if detected.is_submodule else "repo")
                yield detected
                continue

            depth = len(current.relative_to(root).parts)
            if config.max_depth is not None and depth >= config.max_depth:
                dirnames.clear()
                continue

            if config.follow_symlinks:
                dirnames[:] = [d for d in dirnames if not self._is_symlink_cycle(current, d)]

    def _is_inside_known_repo(self, path: Path, known_repos: list[Path]) -> bool:
        """Return True if path is a strict descendant of a discovered repository."""
        return any(path != repo and path.is_relative_to(repo) for repo in known_repos)

    def _should_exclude(self, path: Path, exclude_patterns: tuple[str, ...]) -> bool:
        """Return True if any exclude pattern is a substring of the path."""
        path_str = str(path)
        return any(pattern in path_str for pattern in exclude_patterns)

    def _is_symlink_cycle(self, parent: Path, name: str) -> bool:
        """Return True if parent/name links back to parent or one of its ancestors."""
        child = parent / name
        if not child.is_symlink():
            return False
        target = os.path.realpath(child)
        current = os.path.realpath(parent)
        if current == target or current.startswith(target.rstrip(os.sep) + os.sep):
            logger.debug("Skipping symlink loop: %s -> %s", child, target)
            return True
        return False

    @staticmethod
    def _on_walk_error(error: OSError) -> None:
        logger.debug("Skipping entry: %s (%s)", error.filename, error.strerror or error)
