"""Output handler implementations: console, null, buffered."""

from __future__ import annotations

import sys

from colorama import Fore, Style
from tqdm import tqdm

from pygit_catalog.protocols import OutputHandler


class ConsoleOutputHandler:
    """Console output with colors.

    info/success go to stdout (the catalog itself); warnings, errors and
    debug messages go to stderr so JSON and table output stay clean.
    """

    def __init__(self, verbose: bool = False):
        """Create a console handler. Set verbose=True to enable debug output."""
        self.verbose = verbose

    def info(self, message: str, indent: int = 0) -> None:
        """Print an informational message."""
        tqdm.write("  " * indent + message, file=sys.stdout)

    def success(self, message: str, indent: int = 0) -> None:
        """Print a green success message."""
        tqdm.write("  " * indent + f"{Fore.GREEN}{message}{Style.RESET_ALL}", file=sys.stdout)

    def warning(self, message: str, indent: int = 0) -> None:
        """Print a yellow warning message to stderr."""
        tqdm.write("  " * indent + f"{Fore.YELLOW}{message}{Style.RESET_ALL}", file=sys.stderr)

    def error(self, message: str, indent: int = 0) -> None:
        """Print a red error message to stderr."""
        tqdm.write("  " * indent + f"{Fore.RED}{message}{Style.RESET_ALL}", file=sys.stderr)

    def debug(self, message: str) -> None:
        """Print a cyan debug message to stderr (only when verbose is enabled)."""
        if self.verbose:
            tqdm.write(f"{Fore.CYAN}[DEBUG] {message}{Style.RESET_ALL}", file=sys.stderr)


class NullOutputHandler:
    """Silent output handler for testing and JSON mode."""

    def info(self, message: str, indent: int = 0) -> None:
        pass

    def success(self, message: str, indent: int = 0) -> None:
        pass

    def warning(self, message: str, indent: int = 0) -> None:
        pass

    def error(self, message: str, indent: int = 0) -> None:
        pass

    def debug(self, message: str) -> None:
        pass


class BufferedOutputHandler:
    """Collects messages from one worker for replay on the real handler (parallel mode)."""

    def __init__(self):
        """Initialize with an empty message buffer."""
        self.messages: list[tuple[str, str, int]] = []

    def info(self, message: str, indent: int = 0) -> None:
        self.messages.append(('info', message, indent))

    def success(self, message: str, indent: int = 0) -> None:
        self.messages.append(('success', message, indent))

    def warning(self, message: str, indent: int = 0) -> None:
        self.messages.append(('warning', message, indent))

    def error(self, message: str, indent: int = 0) -> None:
        self.messages.append(('error', message, indent))

    def debug(self, message: str) -> None:
        self.messages.append(('debug', message, 0))

    def flush_to(self, target: OutputHandler) -> None:
        """Replay all buffered messages on target, preserving their level, then clear."""
        for level, message, indent in self.messages:
            if level == 'debug':
                getattr(target, level)(message)
            else:
                getattr(target, level)(message, indent=indent)
        self.messages.clear()
