"""Exception hierarchy for scanning and metadata extraction."""

from __future__ import annotations

from pathlib import Path


class ScanError(Exception):
    """Base class for all scanner errors."""


class RootNotFoundError(ScanError):
    """A scan root does not exist."""

    def __init__(self, path: Path | str):
        self.path = Path(path)
        super().__init__(f"Path does not exist: {self.path}")


class RootNotADirectoryError(ScanError):
    """A scan root exists but is not a directory."""

    def __init__(self, path: Path | str):
        self.path = Path(path)
        super().__init__(f"Path is not a directory: {self.path}")


class RootAccessError(ScanError):
    """A scan root cannot be inspected (permission denied, name too long, ...)."""

    def __init__(self, path: Path | str, reason: object = ""):
        self.path = Path(path)
        self.reason = str(reason)
        super().__init__(f"Cannot access path: {self.path}: {self.reason}")


class RepositoryError(ScanError):
    """A repository-level failure, tied to a path and a reason."""

    message = "Repository error"

    def __init__(self, path: Path | str, reason: object = ""):
        self.path = Path(path)
        self.reason = str(reason)
        text = f"{self.message} at {self.path}"
        if self.reason:
            text = f"{text}: {self.reason}"
        super().__init__(text)


class RepositoryOpenError(RepositoryError):
    """The repository could not be opened or discovered."""

    message = "Failed to open Git repository"


class ConfigReadError(RepositoryError):
    """Identity configuration could not be read."""

    message = "Failed to read Git config"


class RemoteAccessError(RepositoryError):
    """Remote names or URLs could not be read."""

    message = "Failed to access remotes"


class InvalidScanConfigError(ScanError, ValueError):
    """The scan configuration is unusable."""

    def __init__(self, reason: str):
        self.reason = reason
        super().__init__(f"Invalid scan configuration: {reason}")
