"""Tests for ConfigResolver scope attribution."""

from pathlib import Path

import pytest

from pygit_catalog import (
    ConfigReadError,
    ConfigResolver,
    ConfigScope,
    GitPythonRepository,
    determine_config_scope,
)

from conftest import run_git


class FakeConfigRepository:
    """Fake repository exposing per-level config values."""

    def __init__(self, levels: dict[str, dict[str, str]] | None = None, merged_only: dict[str, str] | None = None):
        self._levels = levels or {}
        self._merged_only = merged_only or {}
        self.fail = False

    @property
    def path(self) -> Path:
        return Path("/tmp/fake-repo")

    def config_value(self, key: str, level: str | None = None) -> str | None:
        if self.fail:
            raise ConfigReadError(self.path, "broken config")
        if level is not None:
            return self._levels.get(level, {}).get(key)
        for name in ("repository", "global", "user", "system"):
            if key in self._levels.get(name, {}):
                return self._levels[name][key]
        return self._merged_only.get(key)

    def remote_names(self) -> list[str]:
        return []

    def remote_fetch_url(self, name: str) -> str | None:
        return None

    def close(self) -> None:
        pass


class TestDetermineConfigScope:
    def test_local_wins(self):
        assert determine_config_scope(ConfigScope.LOCAL, ConfigScope.GLOBAL) is ConfigScope.LOCAL
        assert determine_config_scope(ConfigScope.SYSTEM, ConfigScope.LOCAL) is ConfigScope.LOCAL

    def test_global_over_system(self):
        assert determine_config_scope(ConfigScope.GLOBAL, ConfigScope.SYSTEM) is ConfigScope.GLOBAL

    def test_defaults_to_system(self):
        assert determine_config_scope(None, None) is ConfigScope.SYSTEM
        assert determine_config_scope() is ConfigScope.SYSTEM


class TestConfigResolver:
    def test_local_values(self):
        repo = FakeConfigRepository({"repository": {"user.name": "Ada", "user.email": "ada@example.com"}})
        config = ConfigResolver().resolve(repo)
        assert config.user_name == "Ada"
        assert config.user_email == "ada@example.com"
        assert config.scope is ConfigScope.LOCAL

    def test_only_global_reports_global(self):
        repo = FakeConfigRepository({"global": {"user.name": "Ada", "user.email": "ada@example.com"}})
        assert ConfigResolver().resolve(repo).scope is ConfigScope.GLOBAL

    def test_xdg_user_file_counts_as_global(self):
        repo = FakeConfigRepository({"user": {"user.email": "ada@example.com"}})
        assert ConfigResolver().resolve(repo).scope is ConfigScope.GLOBAL

    def test_only_system(self):
        repo = FakeConfigRepository({"system": {"user.name": "Root"}})
        config = ConfigResolver().resolve(repo)
        assert config.user_name == "Root"
        assert config.scope is ConfigScope.SYSTEM

    def test_split_levels_pick_most_specific(self):
        repo = FakeConfigRepository({
            "global": {"user.name": "Ada"},
            "repository": {"user.email": "work@example.com"},
        })
        config = ConfigResolver().resolve(repo)
        assert config.user_name == "Ada"
        assert config.user_email == "work@example.com"
        assert config.scope is ConfigScope.LOCAL

    def test_nothing_found_defaults_to_system(self):
        config = ConfigResolver().resolve(FakeConfigRepository())
        assert config.user_name is None
        assert config.user_email is None
        assert config.scope is ConfigScope.SYSTEM

    def test_merged_only_value_counts_as_local(self):
        repo = FakeConfigRepository(merged_only={"user.name": "Included"})
        assert ConfigResolver().resolve(repo).scope is ConfigScope.LOCAL

    def test_merged_view_mode_treats_found_as_local(self):
        repo = FakeConfigRepository({"global": {"user.name": "Ada"}})
        assert ConfigResolver(attribute_scope=False).resolve(repo).scope is ConfigScope.LOCAL

    def test_merged_view_mode_nothing_is_system(self):
        assert ConfigResolver(attribute_scope=False).resolve(FakeConfigRepository()).scope is ConfigScope.SYSTEM

    def test_read_failure_propagates(self):
        repo = FakeConfigRepository()
        repo.fail = True
        with pytest.raises(ConfigReadError):
            ConfigResolver().resolve(repo)


class TestConfigResolverWithGit:
    def test_local_config(self, tmp_path, make_repo):
        path = make_repo(tmp_path / "repo")
        run_git(path, "config", "user.name", "Local User")
        run_git(path, "config", "user.email", "local@example.com")

        repo = GitPythonRepository.open(path)
        try:
            config = ConfigResolver().resolve(repo)
        finally:
            repo.close()

        assert config.user_name == "Local User"
        assert config.user_email == "local@example.com"
        assert config.scope is ConfigScope.LOCAL

    def test_global_config(self, tmp_path, make_repo, isolated_git_env):
        (isolated_git_env / ".gitconfig").write_text("[user]\n\tname = Global User\n\temail = global@example.com\n")
        path = make_repo(tmp_path / "repo")

        repo = GitPythonRepository.open(path)
        try:
            config = ConfigResolver().resolve(repo)
        finally:
            repo.close()

        assert config.user_name == "Global User"
        assert config.scope is ConfigScope.GLOBAL

    def test_local_overrides_global(self, tmp_path, make_repo, isolated_git_env):
        (isolated_git_env / ".gitconfig").write_text("[user]\n\tname = Global User\n")
        path = make_repo(tmp_path / "repo")
        run_git(path, "config", "user.name", "Local User")

        repo = GitPythonRepository.open(path)
        try:
            config = ConfigResolver().resolve(repo)
        finally:
            repo.close()

        assert config.user_name == "Local User"
        assert config.scope is ConfigScope.LOCAL
