"""
Rendering of a finished ResultSet, as JSON or as a console report.
"""

import json
import sys
from typing import Optional, TextIO

from rich.console import Console

from .config import RunConfig
from .results import CheckResult, ResultSet

EXIT_OK = 0
EXIT_ERRORS = 1
EXIT_STRICT_WARNINGS = 2


def status(results: ResultSet, config: RunConfig) -> str:
    if results.has_errors:
        return "error"
    if results.has_warnings and config.strict:
        return "warning"
    return "ok"


def exit_code(results: ResultSet, config: RunConfig) -> int:
    """1 on any error, 2 on warnings under strict mode, else 0."""
    if results.has_errors:
        return EXIT_ERRORS
    if results.has_warnings and config.strict:
        return EXIT_STRICT_WARNINGS
    return EXIT_OK


def to_json(results: ResultSet, config: RunConfig) -> dict:
    return {
        "path": str(config.path),
        "passed": len(results.passed),
        "errors": [e.message for e in results.errors],
        "warnings": [w.message for w in results.warnings],
        "fixed": list(results.fixed),
        "status": status(results, config),
    }


def print_json(results: ResultSet, config: RunConfig, stream: Optional[TextIO] = None):
    stream = stream or sys.stdout
    stream.write(json.dumps(to_json(results, config), indent=2, ensure_ascii=False) + "\n")


def _issue_line(item: CheckResult) -> str:
    suffix = " (fixable)" if item.fixable else ""
    return f"   • {item.message}{suffix}"


def render_text(results: ResultSet, config: RunConfig, console: Optional[Console] = None):
    """Print the grouped human-readable report."""
    console = console or Console(highlight=False)

    def out(text: str = ""):
        console.print(text, markup=False, emoji=False, highlight=False, soft_wrap=True)

    out(f"\n📋 Project Health: {config.path.name}\n")
    out(f"   Path: {config.path}\n")

    if results.passed:
        out("✅ Passed:")
        for message in results.passed:
            out(f"   • {message}")
        out()

    if results.fixed:
        out("🔧 Fixed:")
        for message in results.fixed:
            out(f"   • {message}")
        out()

    if results.warnings:
        out("⚠️  Warnings:")
        for item in results.warnings:
            out(_issue_line(item))
        out()

    if results.errors:
        out("❌ Errors:")
        for item in results.errors:
            out(_issue_line(item))
        out()

    if results.has_errors:
        marker, style = "🔴", "bold red"
    elif results.has_warnings:
        marker, style = "🟡", "bold yellow"
    else:
        marker, style = "🟢", "bold green"
    console.print(f"{marker} {len(results.passed)}/{results.total} checks passed",
                  style=style, markup=False, emoji=False, highlight=False)

    if results.has_errors or results.has_warnings:
        out("\n💡 Tip: Run with --fix to auto-fix issues")
