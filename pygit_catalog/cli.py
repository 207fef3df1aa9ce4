"""CLI entry point: main() function."""

from __future__ import annotations

import json
import logging
import sys
from pathlib import Path

from pygit_catalog.config import create_argument_parser, explicit_options, load_config_file
from pygit_catalog.messages import Localizer
from pygit_catalog.models import ScanConfig
from pygit_catalog.orchestrator import ScanOrchestrator
from pygit_catalog.output import ConsoleOutputHandler, NullOutputHandler
from pygit_catalog.reporter import CatalogReporter, projects_to_json
from pygit_catalog.sorting import sort_projects


def main(argv: list[str] | None = None):
    """Main entry point"""
    parser = create_argument_parser()
    argv = sys.argv[1:] if argv is None else argv
    args = parser.parse_args(argv)

    file_config = load_config_file(Path.cwd(), args.config)

    # Explicit CLI flags win over the config file, which wins over defaults
    cli_explicit = explicit_options(argv)

    def effective(dest: str, toml_key: str):
        if dest in cli_explicit or toml_key not in file_config:
            return getattr(args, dest)
        return file_config[toml_key]

    verbose = effective('verbose', 'verbose')
    json_output = effective('json_output', 'json_output')
    messages = Localizer(effective('locale', 'locale'))

    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )

    output = NullOutputHandler() if json_output else ConsoleOutputHandler(verbose=verbose)

    roots = [Path(r).expanduser().resolve() for r in (effective('roots', 'roots') or [Path.home()])]
    for root in roots:
        if not _is_usable_root(root):
            error = messages.get("error-invalid-root", path=root)
            if json_output:
                print(json.dumps({'error': error}, indent=2))
            else:
                output.error(error)
            sys.exit(1)

    max_depth = effective('max_depth', 'max_depth')
    if effective('unlimited_depth', 'unlimited_depth'):
        max_depth = None

    try:
        config = ScanConfig(
            root_paths=roots,
            max_depth=max_depth,
            follow_symlinks=effective('follow_symlinks', 'follow_symlinks'),
            include_submodules=effective('include_submodules', 'include_submodules'),
            exclude_patterns=effective('exclude_patterns', 'exclude_patterns') or (),
            parallel=effective('parallel', 'parallel'),
            max_workers=effective('max_workers', 'max_workers'),
        )
    except ValueError as e:
        parser.error(str(e))

    if verbose:
        output.debug(messages.get("scan-started"))
        for root in config.root_paths:
            output.debug(messages.get("scan-started-path", path=root))
        output.debug(messages.get("scan-settings", settings=json.dumps(config.to_dict())))

    orchestrator = ScanOrchestrator(output, show_progress=not json_output and sys.stderr.isatty())

    try:
        projects = sort_projects(orchestrator.scan(config), effective('sort', 'sort'))

        if json_output:
            print(projects_to_json(projects))
        else:
            CatalogReporter(output, messages).print_table(projects)

        sys.exit(0)

    except KeyboardInterrupt:
        if not json_output:
            output.warning("\n\n" + messages.get("interrupted"))
        sys.exit(130)
    except Exception as e:
        if json_output:
            print(json.dumps({'error': str(e)}, indent=2))
        else:
            output.error("\n" + messages.get("error-unexpected", error=e))
            if verbose:
                import traceback
                traceback.print_exc()
        sys.exit(1)


def _is_usable_root(root: Path) -> bool:
    try:
        return root.is_dir()
    except OSError:
        return False
