"""
pygit-catalog: Git Repository Catalog

Recursively discovers git repositories under one or more directories and
reports their location, remotes, identity configuration and submodule
relationships.
"""

from colorama import init as colorama_init

colorama_init(autoreset=True)

__version__ = "0.3.0"

# Re-export public API so `from pygit_catalog import X` keeps working.
from pygit_catalog.cli import main  # noqa: E402
from pygit_catalog.config import create_argument_parser, load_config_file  # noqa: E402
from pygit_catalog.detector import RepositoryDetector  # noqa: E402
from pygit_catalog.errors import (  # noqa: E402
    ConfigReadError,
    InvalidScanConfigError,
    RemoteAccessError,
    RootAccessError,
    RepositoryOpenError,
    RootNotADirectoryError,
    RootNotFoundError,
    ScanError,
)
from pygit_catalog.extractor import MetadataExtractor  # noqa: E402
from pygit_catalog.identity import ConfigResolver, determine_config_scope  # noqa: E402
from pygit_catalog.messages import Localizer, detect_system_locale  # noqa: E402
from pygit_catalog.models import (  # noqa: E402
    ConfigScope,
    DetectedRepository,
    GitConfig,
    Project,
    RemoteUrl,
    RepoKind,
    ScanConfig,
)
from pygit_catalog.orchestrator import ScanOrchestrator, scan  # noqa: E402
from pygit_catalog.output import (  # noqa: E402
    BufferedOutputHandler,
    ConsoleOutputHandler,
    NullOutputHandler,
)
from pygit_catalog.protocols import GitRepository, OutputHandler, ProjectScanner  # noqa: E402
from pygit_catalog.reporter import CatalogReporter, projects_to_json  # noqa: E402
from pygit_catalog.repository import GitPythonRepository  # noqa: E402
from pygit_catalog.scanner import RepositoryScanner  # noqa: E402
from pygit_catalog.sorting import SortProfile, sort_projects  # noqa: E402
from pygit_catalog.urls import parse_git_url  # noqa: E402

__all__ = [
    "__version__",
    # Models
    "ConfigScope",
    "DetectedRepository",
    "GitConfig",
    "Project",
    "RemoteUrl",
    "RepoKind",
    "ScanConfig",
    # Errors
    "ConfigReadError",
    "InvalidScanConfigError",
    "RemoteAccessError",
    "RootAccessError",
    "RepositoryOpenError",
    "RootNotADirectoryError",
    "RootNotFoundError",
    "ScanError",
    # Protocols
    "GitRepository",
    "OutputHandler",
    "ProjectScanner",
    # Implementations
    "GitPythonRepository",
    "BufferedOutputHandler",
    "ConsoleOutputHandler",
    "NullOutputHandler",
    # Services
    "ConfigResolver",
    "MetadataExtractor",
    "RepositoryDetector",
    "RepositoryScanner",
    "ScanOrchestrator",
    "CatalogReporter",
    "Localizer",
    "SortProfile",
    # Functions
    "determine_config_scope",
    "detect_system_locale",
    "parse_git_url",
    "projects_to_json",
    "scan",
    "sort_projects",
    # Config / CLI
    "create_argument_parser",
    "load_config_file",
    "main",
]
