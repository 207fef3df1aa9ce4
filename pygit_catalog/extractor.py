"""MetadataExtractor: builds a Project record for a detected repository."""

from __future__ import annotations

import logging
from collections.abc import Callable
from datetime import datetime, timezone

from pygit_catalog.detector import is_linked_git_dir
from pygit_catalog.errors import ConfigReadError, RemoteAccessError
from pygit_catalog.identity import ConfigResolver
from pygit_catalog.models import DetectedRepository, GitConfig, Project, RemoteUrl
from pygit_catalog.protocols import GitRepository
from pygit_catalog.repository import GitPythonRepository
from pygit_catalog.urls import parse_git_url

UNKNOWN_NAME = "unknown"

logger = logging.getLogger(__name__)


class MetadataExtractor:
    """Responsible for turning a repository root into a Project"""

    def __init__(
        self,
        resolver: ConfigResolver | None = None,
        opener: Callable[..., GitRepository] = GitPythonRepository.open,
    ):
        self.resolver = resolver or ConfigResolver()
        self._open = opener

    def extract(self, detected: DetectedRepository) -> Project:
        """Open the repository and collect its metadata.

        Raises RepositoryOpenError if the repository cannot be opened; every
        other lookup degrades to an empty/None field.
        """
        path = detected.path
        logger.debug("Analyzing repository: %s", path)

        repo = self._open(path)
        try:
            remotes = self.extract_remotes(repo)
            config = self.extract_config(repo)
        finally:
            repo.close()

        return Project(
            name=path.name or UNKNOWN_NAME,
            path=path,
            remotes=tuple(remotes),
            config=config,
            is_submodule=is_linked_git_dir(path),
            has_submodules=(path / '.gitmodules').exists(),
            last_scanned=datetime.now(timezone.utc),
        )

    def extract_remotes(self, repo: GitRepository) -> list[RemoteUrl]:
        """Return remotes that have a fetch URL, in enumeration order."""
        try:
            names = repo.remote_names()
        except RemoteAccessError as e:
            logger.debug("Failed to list remotes for %s: %s", repo.path, e.reason)
            return []

        remotes = []
        for name in names:
            try:
                url = repo.remote_fetch_url(name)
            except RemoteAccessError as e:
                logger.debug("Skipping remote %r in %s: %s", name, repo.path, e.reason)
                continue
            if url is None:
                continue
            service, account = parse_git_url(url)
            remotes.append(RemoteUrl(name=name, url=url, service=service, account=account))
        return remotes

    def extract_config(self, repo: GitRepository) -> GitConfig | None:
        """Resolve identity config, or None if it cannot be read."""
        try:
            return self.resolver.resolve(repo)
        except ConfigReadError as e:
            logger.debug("Failed to read config for %s: %s", repo.path, e.reason)
            return None
