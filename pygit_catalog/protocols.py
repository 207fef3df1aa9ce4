"""Protocols and abstract interfaces for dependency injection."""

from __future__ import annotations

from pathlib import Path
from typing import Protocol

from pygit_catalog.models import Project, ScanConfig


class GitRepository(Protocol):
    """Protocol for the read-only repository operations the scanner needs"""

    def remote_names(self) -> list[str]: ...
    def remote_fetch_url(self, name: str) -> str | None: ...
    def config_value(self, key: str, level: str | None = None) -> str | None: ...
    def close(self) -> None: ...

    @property
    def path(self) -> Path: ...


class OutputHandler(Protocol):
    """Protocol for handling output"""

    def info(self, message: str, indent: int = 0) -> None: ...
    def success(self, message: str, indent: int = 0) -> None: ...
    def warning(self, message: str, indent: int = 0) -> None: ...
    def error(self, message: str, indent: int = 0) -> None: ...
    def debug(self, message: str) -> None: ...


class ProjectScanner(Protocol):
    """Anything that turns a ScanConfig into a list of projects"""

    def scan(self, config: ScanConfig) -> list[Project]: ...
