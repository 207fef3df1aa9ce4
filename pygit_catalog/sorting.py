"""Sort profiles for the scanned project list."""

from __future__ import annotations

from enum import Enum

from pygit_catalog.models import Project


class SortProfile(Enum):
    """Orderings offered by the CLI"""
    NAME = "name"
    PATH = "path"
    RECENT = "recent"
    SERVICE = "service"


def sort_projects(projects: list[Project], profile: SortProfile | str = SortProfile.NAME) -> list[Project]:
    """Return a new list ordered by the given profile."""
    profile = SortProfile(profile)
    if profile is SortProfile.PATH:
        return sorted(projects, key=lambda p: str(p.path))
    if profile is SortProfile.RECENT:
        return sorted(projects, key=lambda p: p.last_scanned, reverse=True)
    if profile is SortProfile.SERVICE:
        return sorted(projects, key=_service_key)
    return sorted(projects, key=lambda p: p.name.lower())


def _service_key(project: Project) -> tuple[str, str, str]:
    remote = project.primary_remote
    service = (remote.service if remote else None) or ""
    account = (remote.account if remote else None) or ""
    return service, account, project.name
