"""ConfigResolver: user.name / user.email lookup with scope attribution."""

from __future__ import annotations

from pygit_catalog.models import ConfigScope, GitConfig
from pygit_catalog.protocols import GitRepository

IDENTITY_KEYS = ('user.name', 'user.email')

LEVEL_SCOPES: tuple[tuple[str, ConfigScope], ...] = (
    ('repository', ConfigScope.LOCAL),
    ('global', ConfigScope.GLOBAL),
    ('user', ConfigScope.GLOBAL),
    ('system', ConfigScope.SYSTEM),
)


def determine_config_scope(*scopes: ConfigScope | None) -> ConfigScope:
    """Pick the most specific scope (LOCAL > GLOBAL > SYSTEM); SYSTEM if none."""
    found = [s for s in scopes if s is not None]
    if not found:
        return ConfigScope.SYSTEM
    return min(found, key=lambda s: s.precedence)


class ConfigResolver:
    """Resolves the identity configuration of a repository.

    With attribute_scope=True (default) each key's scope is the most specific
    config level that defines it. With attribute_scope=False any value seen
    in the merged view counts as LOCAL.
    """

    def __init__(self, attribute_scope: bool = True):
        self.attribute_scope = attribute_scope

    def resolve(self, repo: GitRepository) -> GitConfig:
        """Return the GitConfig for repo. Raises ConfigReadError on read failure."""
        values: dict[str, str | None] = {}
        scopes: list[ConfigScope | None] = []
        for key in IDENTITY_KEYS:
            value, scope = self._value_with_scope(repo, key)
            values[key] = value
            scopes.append(scope)

        return GitConfig(
            user_name=values['user.name'],
            user_email=values['user.email'],
            scope=determine_config_scope(*scopes),
        )

    def _value_with_scope(self, repo: GitRepository, key: str) -> tuple[str | None, ConfigScope | None]:
        value = repo.config_value(key)
        if value is None:
            return None, None
        if not self.attribute_scope:
            return value, ConfigScope.LOCAL

        for level, scope in LEVEL_SCOPES:
            if repo.config_value(key, level) is not None:
                return value, scope
        # Only visible through the merged view (includes, env overrides)
        return value, ConfigScope.LOCAL
