"""CatalogReporter: renders the scanned projects as a table or JSON."""

from __future__ import annotations

import json

from pygit_catalog.messages import Localizer
from pygit_catalog.models import ConfigScope, Project
from pygit_catalog.protocols import OutputHandler

PATH_WIDTH_CAP = 60
REMOTE_WIDTH = 30
CONFIG_WIDTH = 35


def truncate(text: str, max_width: int) -> str:
    """Cut text to max_width characters, ending with '...' when shortened."""
    if len(text) <= max_width:
        return text
    if max_width <= 3:
        return "..."
    return text[:max_width - 3] + "..."


def projects_to_json(projects: list[Project]) -> str:
    """Serialize projects as pretty-printed JSON."""
    return json.dumps([p.to_dict() for p in projects], indent=2)


class CatalogReporter:
    """Generates and displays the project table"""

    def __init__(self, output: OutputHandler, localizer: Localizer | None = None):
        """Create a reporter that writes to the given output handler."""
        self.output = output
        self.messages = localizer or Localizer("en")

    def print_table(self, projects: list[Project]):
        """Print one row per project followed by a count line."""
        if not projects:
            self.output.warning(self.messages.get("scan-no-results"))
            return

        headers = [self.messages.get(key) for key in (
            "header-name", "header-path", "header-remotes",
            "header-config", "header-submodule", "header-has-submodules",
        )]
        name_width = max([len(p.name) for p in projects] + [len(headers[0])])
        path_width = min(max([len(str(p.path)) for p in projects] + [len(headers[1])]), PATH_WIDTH_CAP)
        sub_width = max(len(headers[4]), 3)

        self.output.info(
            f"{headers[0]:<{name_width}}  {headers[1]:<{path_width}}  "
            f"{headers[2]:<{REMOTE_WIDTH}}  {headers[3]:<{CONFIG_WIDTH}}  "
            f"{headers[4]:<{sub_width}}  {headers[5]}"
        )
        self.output.info("=" * (name_width + path_width + REMOTE_WIDTH + CONFIG_WIDTH + sub_width + 20))

        for project in projects:
            self.output.info(
                f"{truncate(project.name, name_width):<{name_width}}  "
                f"{truncate(str(project.path), path_width):<{path_width}}  "
                f"{truncate(self.format_remotes(project), REMOTE_WIDTH):<{REMOTE_WIDTH}}  "
                f"{truncate(self.format_config(project), CONFIG_WIDTH):<{CONFIG_WIDTH}}  "
                f"{self._yes_no(project.is_submodule):<{sub_width}}  "
                f"{self._yes_no(project.has_submodules)}"
            )

        self.output.info("")
        self.output.success(self.messages.get("scan-complete", count=len(projects)))

    def format_remotes(self, project: Project) -> str:
        """'service/account' of the first remote (or its name), plus a count of the rest."""
        first = project.primary_remote
        if first is None:
            return self.messages.get("remote-none")

        if first.service:
            text = first.service
            if first.account:
                text += f"/{first.account}"
        else:
            text = first.name

        if len(project.remotes) > 1:
            text += f" (+{self.messages.get('remote-count', count=len(project.remotes))})"
        return text

    def format_config(self, project: Project) -> str:
        """'name <email> [scope]' with whichever parts are known."""
        config = project.config
        if config is None:
            return self.messages.get("config-none")

        scope = self.messages.get({
            ConfigScope.LOCAL: "config-local",
            ConfigScope.GLOBAL: "config-global",
            ConfigScope.SYSTEM: "config-system",
        }[config.scope])

        parts = []
        if config.user_name:
            parts.append(config.user_name)
        if config.user_email:
            parts.append(f"<{config.user_email}>")
        parts.append(f"[{scope}]")
        return " ".join(parts)

    def _yes_no(self, flag: bool) -> str:
        return self.messages.get("submodule-yes" if flag else "submodule-no")
