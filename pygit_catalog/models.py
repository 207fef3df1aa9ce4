"""Domain models: enums, dataclasses, and configuration."""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum, auto
from pathlib import Path
from typing import Any

from pygit_catalog.errors import InvalidScanConfigError


class ConfigScope(Enum):
    """Configuration level an identity value was found at"""
    LOCAL = "local"
    GLOBAL = "global"
    SYSTEM = "system"

    @property
    def precedence(self) -> int:
        """Lower is more specific."""
        return _SCOPE_PRECEDENCE[self]


_SCOPE_PRECEDENCE = {ConfigScope.LOCAL: 0, ConfigScope.GLOBAL: 1, ConfigScope.SYSTEM: 2}


class RepoKind(Enum):
    """How a repository root keeps its git directory"""
    REGULAR = auto()
    SUBMODULE = auto()  # .git is a gitdir file: submodule or linked worktree


@dataclass(frozen=True)
class RemoteUrl:
    """One configured remote with best-effort hosting metadata"""
    name: str
    url: str
    service: str | None = None
    account: str | None = None

    def to_dict(self) -> dict[str, Any]:
        """Serialize to a plain dict, omitting absent service/account."""
        data: dict[str, Any] = {'name': self.name, 'url': self.url}
        if self.service is not None:
            data['service'] = self.service
        if self.account is not None:
            data['account'] = self.account
        return data


@dataclass(frozen=True)
class GitConfig:
    """Resolved identity configuration"""
    user_name: str | None = None
    user_email: str | None = None
    scope: ConfigScope = ConfigScope.SYSTEM

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {}
        if self.user_name is not None:
            data['user_name'] = self.user_name
        if self.user_email is not None:
            data['user_email'] = self.user_email
        data['scope'] = self.scope.value
        return data


@dataclass(frozen=True)
class DetectedRepository:
    """A path confirmed as a repository root"""
    path: Path
    kind: RepoKind

    @property
    def is_submodule(self) -> bool:
        return self.kind is RepoKind.SUBMODULE


@dataclass(frozen=True)
class Project:
    """One discovered repository"""
    name: str
    path: Path
    remotes: tuple[RemoteUrl, ...] = ()
    config: GitConfig | None = None
    is_submodule: bool = False
    has_submodules: bool = False
    last_scanned: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    @property
    def primary_remote(self) -> RemoteUrl | None:
        """The first remote in discovery order, if any."""
        return self.remotes[0] if self.remotes else None

    def to_dict(self) -> dict[str, Any]:
        """Serialize to a plain dict for JSON output."""
        data: dict[str, Any] = {
            'name': self.name,
            'path': str(self.path),
            'remotes': [r.to_dict() for r in self.remotes],
        }
        if self.config is not None:
            data['config'] = self.config.to_dict()
        data['is_submodule'] = self.is_submodule
        data['has_submodules'] = self.has_submodules
        data['last_scanned'] = self.last_scanned.isoformat()
        return data


@dataclass(frozen=True)
class ScanConfig:
    """Configuration for a scan"""
    root_paths: tuple[Path, ...] = field(default_factory=lambda: (Path.home(),))
    max_depth: int | None = None
    follow_symlinks: bool = False
    include_submodules: bool = True
    exclude_patterns: tuple[str, ...] = ()
    parallel: bool = False
    max_workers: int = field(default_factory=lambda: min(os.cpu_count() or 4, 8))

    def __post_init__(self):
        # Accept any iterable of str/Path and normalize to tuples.
        object.__setattr__(self, 'root_paths', tuple(Path(p) for p in self.root_paths))
        object.__setattr__(self, 'exclude_patterns', tuple(self.exclude_patterns))
        if not self.root_paths:
            raise InvalidScanConfigError("at least one root path is required")
        if self.max_depth is not None and self.max_depth < 0:
            raise InvalidScanConfigError(f"max_depth must be >= 0, got {self.max_depth}")
        if self.max_workers < 1:
            raise InvalidScanConfigError(f"max_workers must be >= 1, got {self.max_workers}")

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {'root_paths': [str(p) for p in self.root_paths]}
        if self.max_depth is not None:
            data['max_depth'] = self.max_depth
        data['follow_symlinks'] = self.follow_symlinks
        data['include_submodules'] = self.include_submodules
        return data
