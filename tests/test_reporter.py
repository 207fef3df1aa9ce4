"""Tests for the table reporter."""

from pathlib import Path

from pygit_catalog import (
    BufferedOutputHandler,
    CatalogReporter,
    ConfigScope,
    GitConfig,
    Localizer,
    Project,
    RemoteUrl,
)
from pygit_catalog.reporter import truncate


def _project(name="repo", remotes=(), config=None, **kwargs):
    return Project(name=name, path=Path("/code") / name, remotes=tuple(remotes), config=config, **kwargs)


def _reporter():
    output = BufferedOutputHandler()
    return CatalogReporter(output, Localizer("en")), output


class TestTruncate:
    def test_short_text_unchanged(self):
        assert truncate("abc", 10) == "abc"

    def test_long_text_gets_ellipsis(self):
        assert truncate("abcdefghij", 6) == "abc..."

    def test_tiny_width(self):
        assert truncate("abcdef", 2) == "..."


class TestFormatRemotes:
    def test_no_remotes(self):
        reporter, _ = _reporter()
        assert reporter.format_remotes(_project()) == "(no remotes)"

    def test_service_and_account(self):
        reporter, _ = _reporter()
        project = _project(remotes=[RemoteUrl("origin", "u", "github", "alice")])
        assert reporter.format_remotes(project) == "github/alice"

    def test_unknown_service_uses_remote_name(self):
        reporter, _ = _reporter()
        project = _project(remotes=[RemoteUrl("mirror", "u", None, "alice")])
        assert reporter.format_remotes(project) == "mirror"

    def test_additional_remotes_counted(self):
        reporter, _ = _reporter()
        project = _project(remotes=[
            RemoteUrl("origin", "u", "gitlab", "bob"),
            RemoteUrl("backup", "v"),
        ])
        assert reporter.format_remotes(project) == "gitlab/bob (+2 remotes)"


class TestFormatConfig:
    def test_no_config(self):
        reporter, _ = _reporter()
        assert reporter.format_config(_project()) == "(no config)"

    def test_full_identity(self):
        reporter, _ = _reporter()
        project = _project(config=GitConfig("Ada", "ada@example.com", ConfigScope.GLOBAL))
        assert reporter.format_config(project) == "Ada <ada@example.com> [global]"

    def test_scope_only(self):
        reporter, _ = _reporter()
        assert reporter.format_config(_project(config=GitConfig())) == "[system]"

    def test_localized_scope(self):
        reporter = CatalogReporter(BufferedOutputHandler(), Localizer("de"))
        project = _project(config=GitConfig(user_email="a@b.c", scope=ConfigScope.LOCAL))
        assert reporter.format_config(project) == "<a@b.c> [lokal]"


class TestPrintTable:
    def test_empty_list_warns(self):
        reporter, output = _reporter()
        reporter.print_table([])
        assert output.messages == [("warning", "No Git repositories found.", 0)]

    def test_rows_and_summary(self):
        reporter, output = _reporter()
        projects = [
            _project("alpha", remotes=[RemoteUrl("origin", "u", "github", "alice")]),
            _project("beta", is_submodule=True, has_submodules=True),
        ]

        reporter.print_table(projects)

        lines = [message for _, message, _ in output.messages]
        assert lines[0].startswith("Name")
        assert set(lines[1]) == {"="}
        assert "alpha" in lines[2] and "github/alice" in lines[2]
        assert "/code/beta" in lines[3]
        assert lines[3].rstrip().endswith("yes")
        assert output.messages[-1] == ("success", "Found 2 Git repositories", 0)

    def test_long_path_truncated(self):
        reporter, output = _reporter()
        project = Project(name="deep", path=Path("/" + "x" * 100) / "deep")
        reporter.print_table([project])
        row = output.messages[2][1]
        assert "..." in row
        assert str(project.path) not in row
