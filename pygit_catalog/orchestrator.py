"""ScanOrchestrator: coordinates scanning across multiple roots."""

from __future__ import annotations

import concurrent.futures
import logging
import sys
from pathlib import Path

from tqdm import tqdm

from pygit_catalog.errors import RepositoryOpenError, ScanError
from pygit_catalog.extractor import MetadataExtractor
from pygit_catalog.models import Project, ScanConfig
from pygit_catalog.output import BufferedOutputHandler, NullOutputHandler
from pygit_catalog.protocols import OutputHandler
from pygit_catalog.scanner import RepositoryScanner

logger = logging.getLogger(__name__)


class ScanOrchestrator:
    """Main orchestrator - scans every root and aggregates the projects"""

    def __init__(
        self,
        output: OutputHandler | None = None,
        scanner: RepositoryScanner | None = None,
        extractor: MetadataExtractor | None = None,
        show_progress: bool = False,
    ):
        """Create an orchestrator. Collaborators can be injected for testing."""
        self.output = output or NullOutputHandler()
        self.scanner = scanner or RepositoryScanner()
        self.extractor = extractor or MetadataExtractor()
        self.show_progress = show_progress

    def scan(self, config: ScanConfig) -> list[Project]:
        """Scan all roots and return the projects, unique by path.

        A failing root is logged and skipped; this never raises for per-root
        problems.
        """
        if config.parallel and len(config.root_paths) > 1:
            per_root = self._scan_parallel(config)
        else:
            per_root = self._scan_sequential(config)

        combined: list[Project] = []
        seen: set[Path] = set()
        for projects in per_root:
            self._merge_results(combined, seen, projects)

        self.output.debug(f"Found {len(combined)} projects")
        return combined

    def scan_root(self, root: Path, config: ScanConfig, output: OutputHandler | None = None) -> list[Project]:
        """Scan a single root. Raises ScanError if the root is unusable."""
        output = output or self.output
        output.debug(f"Scanning root: {root}")

        projects = []
        for detected in self.scanner.find_repositories(root, config):
            try:
                project = self.extractor.extract(detected)
            except RepositoryOpenError as e:
                logger.debug("Error analyzing %s: %s", detected.path, e)
                output.debug(f"Error analyzing {detected.path}: {e}")
                continue
            kind = "submodule" if project.is_submodule else "repo"
            output.debug(f"Found: {project.path} ({kind})")
            projects.append(project)

        output.debug(f"Found {len(projects)} projects in {root}")
        return projects

    def _scan_root_isolated(self, root: Path, config: ScanConfig, output: OutputHandler) -> list[Project]:
        """Scan a root, turning root-level errors into an empty contribution."""
        try:
            return self.scan_root(root, config, output)
        except ScanError as e:
            logger.warning("Error scanning %s: %s", root, e)
            output.warning(f"Error scanning {root}: {e}")
            return []

    def _scan_sequential(self, config: ScanConfig) -> list[list[Project]]:
        """Scan roots one at a time with a progress bar."""
        results = []
        with tqdm(total=len(config.root_paths), desc="Scanning", unit="root",
                  disable=not self.show_progress, file=sys.stderr) as pbar:
            for root in config.root_paths:
                pbar.set_postfix_str(root.name or str(root), refresh=True)
                results.append(self._scan_root_isolated(root, config, self.output))
                pbar.update(1)
        return results

    def _scan_parallel(self, config: ScanConfig) -> list[list[Project]]:
        """Scan roots concurrently with buffered output per worker; keeps root order."""
        roots = config.root_paths
        results: list[list[Project]] = [[] for _ in roots]

        def _scan_with_buffer(root: Path) -> tuple[list[Project], BufferedOutputHandler]:
            buf = BufferedOutputHandler()
            return self._scan_root_isolated(root, config, buf), buf

        with concurrent.futures.ThreadPoolExecutor(max_workers=config.max_workers) as executor:
            futures = {executor.submit(_scan_with_buffer, root): i for i, root in enumerate(roots)}

            with tqdm(total=len(roots), desc="Scanning roots", unit="root",
                      disable=not self.show_progress, file=sys.stderr) as pbar:
                for future in concurrent.futures.as_completed(futures):
                    index = futures[future]
                    try:
                        projects, buf = future.result()
                        buf.flush_to(self.output)
                        results[index] = projects
                    except Exception as e:
                        logger.exception("Unexpected error scanning %s", roots[index])
                        self.output.error(f"Unexpected error scanning {roots[index]}: {e}")
                    finally:
                        pbar.update(1)

        return results

    def _merge_results(self, combined: list[Project], seen: set[Path], new: list[Project]):
        """Append projects whose path has not been reported yet."""
        for project in new:
            if project.path in seen:
                logger.debug("Duplicate project skipped: %s", project.path)
                continue
            seen.add(project.path)
            combined.append(project)


def scan(config: ScanConfig, output: OutputHandler | None = None) -> list[Project]:
    """Convenience wrapper: scan with the default collaborators."""
    return ScanOrchestrator(output).scan(config)
