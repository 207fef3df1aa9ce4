"""Configuration: argument parser and config file loader."""

from __future__ import annotations

import argparse
import os
import sys
import tomllib
from pathlib import Path
from typing import Any

from pygit_catalog.sorting import SortProfile

CONFIG_FILE_NAME = '.gitcatalog.toml'
DEFAULT_MAX_DEPTH = 3


def create_argument_parser() -> argparse.ArgumentParser:
    """Build the CLI argument parser with all pygit-catalog flags."""
    # Lazy import to avoid circular dependency with __init__.py
    from pygit_catalog import __version__

    parser = argparse.ArgumentParser(
        prog='pygit-catalog',
        description="Scan and catalog Git repositories on your local filesystem",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s                                     # Scan home directory, 3 levels deep
  %(prog)s -r ~/code -r ~/work --depth 5       # Several roots, deeper
  %(prog)s -r ~/code --json --sort service     # JSON grouped by hosting service
  %(prog)s -r ~/code --no-submodules           # Skip submodules and worktrees
        """
    )

    parser.add_argument('--version', action='version', version=f'%(prog)s {__version__}')
    parser.add_argument('-r', '--root', dest='roots', action='append', default=[], metavar='PATH',
                       help='Root directory to scan (can specify multiple, default: home)')
    parser.add_argument('-d', '--depth', dest='max_depth', type=int, default=DEFAULT_MAX_DEPTH, metavar='N',
                       help=f'Maximum recursion depth (default: {DEFAULT_MAX_DEPTH})')
    parser.add_argument('--unlimited-depth', action='store_true',
                       help='Do not limit recursion depth')
    parser.add_argument('--no-symlinks', dest='follow_symlinks', action='store_false',
                       help="Don't follow symbolic links")
    parser.add_argument('--no-submodules', dest='include_submodules', action='store_false',
                       help="Don't include submodule and worktree repositories")
    parser.add_argument('-s', '--sort', choices=[p.value for p in SortProfile], default=SortProfile.NAME.value,
                       help='Sort results by: name, path, recent, or service (default: name)')
    parser.add_argument('-j', '--json', dest='json_output', action='store_true',
                       help='Output as JSON')
    parser.add_argument('-v', '--verbose', action='store_true',
                       help='Show verbose output')
    parser.add_argument('-l', '--locale', default=None,
                       help='Locale for messages, e.g. en, de (default: from environment)')
    parser.add_argument('--exclude', dest='exclude_patterns', action='append', default=[],
                       help='Exclude directories whose path contains this pattern (can specify multiple)')
    parser.add_argument('--parallel', action='store_true',
                       help='Scan roots in parallel')
    parser.add_argument('--max-workers', type=int, default=min(os.cpu_count() or 4, 8),
                       help='Max parallel workers (default: min(cpu_count, 8))')
    parser.add_argument('--config', type=str, default=None,
                       help=f'Path to config file (default: {CONFIG_FILE_NAME} in current dir or home)')

    return parser


def load_config_file(search_dir: Path, config_path: str | None = None) -> dict[str, Any]:
    """Load .gitcatalog.toml from explicit path, search dir, or home dir.

    Returns empty dict if not found or unparsable.
    """
    candidates = [Path(config_path)] if config_path else [search_dir / CONFIG_FILE_NAME, Path.home() / CONFIG_FILE_NAME]
    for path in candidates:
        if path.is_file():
            try:
                with open(path, 'rb') as f:
                    return tomllib.load(f)
            except (OSError, tomllib.TOMLDecodeError) as e:
                print(f"Warning: Failed to parse {path}: {e}", file=sys.stderr)
                return {}
    if config_path:
        print(f"Warning: Config file '{config_path}' not found. Ignoring.", file=sys.stderr)
    return {}


def explicit_options(argv: list[str]) -> set[str]:
    """Return the dests of options actually given in argv.

    Parses argv again with every default suppressed, so clustered short
    flags (-vj) and attached values (-d5) count as explicit too.
    """
    parser = create_argument_parser()
    for action in parser._actions:
        action.default = argparse.SUPPRESS
    return set(vars(parser.parse_args(argv)))
