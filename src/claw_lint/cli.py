#!/usr/bin/env python3
"""
claw-lint - Project health checker for AI agents.

Validates that a project is ready to ship (README, license, package.json,
git, etc.) and can generate the missing boilerplate.

Usage:
    claw-lint                     # Check current directory
    claw-lint ./my-project --json
    claw-lint --fix --strict
"""

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

from rich.console import Console

from . import __version__
from .checks import CHECKERS, ScanContext, run_checks
from .config import ConfigError, LintSettings, RunConfig
from .report import exit_code, print_json, render_text

logger = logging.getLogger(__name__)

EPILOG = """
CHECKS
  README.md exists and has content
  LICENSE file exists
  SKILL.md exists (for agents)
  Git repository is initialized, clean, with a remote
  .gitignore exists
  package.json is valid (Node.js projects)
  Main entry point exists

EXIT CODES
  0 = All checks pass
  1 = Errors found
  2 = Warnings found (strict mode)

EXAMPLES
  %(prog)s                    # Check current directory
  %(prog)s ./my-project       # Check specific path
  %(prog)s --json             # JSON output
  %(prog)s --fix              # Auto-fix what's possible
"""


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="claw-lint",
        description="claw-lint - Project health checker for AI agents",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=EPILOG,
    )
    parser.add_argument(
        "path",
        nargs="?",
        default=".",
        help="Project directory to check (default: current directory)"
    )
    parser.add_argument("-j", "--json", action="store_true", help="Output as JSON")
    parser.add_argument("-f", "--fix", action="store_true", help="Attempt to auto-fix issues")
    parser.add_argument("-s", "--strict", action="store_true", help="Fail on warnings too")
    parser.add_argument("-v", "--verbose", action="store_true", help="Log check activity to stderr")
    parser.add_argument(
        "--config",
        type=Path,
        default=None,
        help="Settings file (default: .claw-lint.yaml in the target directory)"
    )
    parser.add_argument(
        "--list-checks",
        action="store_true",
        help="List all available checks and exit"
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def configure_logging(verbose: bool):
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )


def list_checks(console: Console):
    """Print all registered checks in run order."""
    console.print("\nAvailable Checks:", style="bold", markup=False)
    for checker in CHECKERS:
        console.print(f"  {checker.name:<12} {checker.description}", markup=False, highlight=False)
    console.print(f"\nTotal: {len(CHECKERS)} checks registered", markup=False, highlight=False)


def load_settings(target: Path, config_path: Optional[Path]) -> LintSettings:
    try:
        return LintSettings.load(target, config_path)
    except ConfigError as e:
        logger.warning(f"{e}; using default settings")
        return LintSettings()


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    configure_logging(args.verbose)
    console = Console(highlight=False)

    if args.list_checks:
        list_checks(console)
        return 0

    target = Path(args.path).resolve()
    if not target.exists():
        print(f'Error: Path "{target}" does not exist', file=sys.stderr)
        return 1
    if not target.is_dir():
        print(f'Error: Path "{target}" is not a directory', file=sys.stderr)
        return 1

    config = RunConfig(
        path=target,
        json_output=args.json,
        fix=args.fix,
        strict=args.strict,
        settings=load_settings(target, args.config),
    )
    logger.debug(f"Checking {target} (fix={config.fix}, strict={config.strict})")

    results = run_checks(ScanContext.build(config))

    if config.json_output:
        print_json(results, config)
    else:
        render_text(results, config, console)

    return exit_code(results, config)


if __name__ == "__main__":
    sys.exit(main())
