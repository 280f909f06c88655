"""
Readiness checks for a project directory.

Architecture:
    - Each checker is self-contained and returns its own ResultSet
    - Checkers run in the fixed order of the CHECKERS list
    - Facts published by a checker (e.g. "manifest_present") are visible
      to every checker that runs after it
    - Easy to extend: create a new Checker class, add to CHECKERS list
"""

import json
import logging
import sys
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from datetime import datetime
from typing import Dict, List, Optional, Set

from .config import RunConfig
from .probes import FilesystemProbe, VcsProbe
from .results import ResultSet
from . import templates

logger = logging.getLogger(__name__)

MANIFEST_PRESENT = "manifest_present"


# =============================================================================
# Shared Context
# =============================================================================

@dataclass
class ScanContext:
    """Shared context passed to all checkers."""
    config: RunConfig
    fs: FilesystemProbe
    vcs: VcsProbe
    facts: Set[str] = field(default_factory=set)

    @classmethod
    def build(cls, config: RunConfig) -> "ScanContext":
        return cls(
            config=config,
            fs=FilesystemProbe(config.path),
            vcs=VcsProbe(config.path),
        )

    @property
    def min_length(self) -> int:
        return self.config.settings.min_content_length


# =============================================================================
# Base Checker Interface
# =============================================================================

class BaseChecker(ABC):
    """
    Abstract base class for all readiness checkers.

    To create a new checker:
        1. Subclass BaseChecker
        2. Set name and description
        3. Implement check() method
        4. Add instance to CHECKERS list at bottom of file
    """

    name: str = "base"
    description: str = "Override this description"

    @abstractmethod
    def check(self, ctx: ScanContext) -> ResultSet:
        """
        Run the check.

        Args:
            ctx: Shared context with config, probes and facts from earlier checks

        Returns:
            A fresh ResultSet holding this check's outcomes
        """
        pass

    def _write_fix(self, ctx: ScanContext, results: ResultSet, filename: str,
                   content: str, fixed_message: str):
        """Write a generated file, recording a write failure as an error."""
        try:
            ctx.fs.write(filename, content)
        except OSError as e:
            logger.error(f"Fix for {filename} failed: {e}")
            results.add_error(f"Failed to create {filename}: {e.strerror or e}")
            return
        logger.info(f"Fixed: {fixed_message}")
        results.add_fixed(fixed_message)

    def _check_content_length(self, ctx: ScanContext, results: ResultSet, filename: str):
        content = ctx.fs.read(filename)
        if not content or len(content.strip()) < ctx.min_length:
            results.add_warning(f"{filename} is too short (< {ctx.min_length} chars)")
        else:
            results.add_passed(f"{filename} exists with content")


# =============================================================================
# Documentation Checkers
# =============================================================================

class ReadmeChecker(BaseChecker):
    """README.md must exist and say something."""

    name = "readme"
    description = "README.md exists and has content"

    FILENAME = "README.md"

    def check(self, ctx: ScanContext) -> ResultSet:
        results = ResultSet()

        if not ctx.fs.exists(self.FILENAME):
            if ctx.config.fix:
                content = templates.render_readme(ctx.config.path.name)
                self._write_fix(ctx, results, self.FILENAME, content, "Created README.md template")
            else:
                results.add_error("README.md not found", fixable=True)
            return results

        self._check_content_length(ctx, results, self.FILENAME)
        return results


class LicenseChecker(BaseChecker):
    """A LICENSE file in one of the usual spellings."""

    name = "license"
    description = "LICENSE file exists"

    FILENAMES = ["LICENSE", "LICENSE.md", "LICENSE.txt", "LICENCE"]

    def check(self, ctx: ScanContext) -> ResultSet:
        results = ResultSet()

        if any(ctx.fs.exists(f) for f in self.FILENAMES):
            results.add_passed("LICENSE file exists")
            return results

        if ctx.config.fix:
            content = templates.render_mit_license(datetime.now().year, self._author(ctx))
            self._write_fix(ctx, results, "LICENSE", content, "Created MIT LICENSE")
        else:
            results.add_error("No LICENSE file found", fixable=True)
        return results

    def _author(self, ctx: ScanContext) -> str:
        if ctx.config.settings.author:
            return ctx.config.settings.author
        user = ctx.vcs.run("config", "user.name")
        if user.ok and user.value:
            return user.value
        return templates.DEFAULT_AUTHOR


class SkillChecker(BaseChecker):
    """SKILL.md describes the project for agents. Recommended, never required."""

    name = "skill"
    description = "SKILL.md exists (for agents)"

    FILENAME = "SKILL.md"

    def check(self, ctx: ScanContext) -> ResultSet:
        results = ResultSet()
        if not ctx.fs.exists(self.FILENAME):
            results.add_warning("SKILL.md not found (recommended for agent skills)")
            return results

        self._check_content_length(ctx, results, self.FILENAME)
        return results


# =============================================================================
# Repository Checkers
# =============================================================================

class GitChecker(BaseChecker):
    """Git repository is initialized, clean, and has a remote."""

    name = "git"
    description = "Git repository is initialized, clean, with a remote"

    def check(self, ctx: ScanContext) -> ResultSet:
        results = ResultSet()

        if not ctx.fs.exists(".git"):
            if ctx.config.fix:
                if ctx.vcs.run("init").ok:
                    logger.info("Fixed: Initialized git repository")
                    results.add_fixed("Initialized git repository")
                else:
                    results.add_error("Failed to initialize git")
            else:
                results.add_error("Not a git repository", fixable=True)
            return results

        results.add_passed("Git repository initialized")

        # Unknown status or remotes (git missing, broken repo) record nothing.
        status = ctx.vcs.run("status", "--porcelain")
        if status.ok:
            if status.lines:
                results.add_warning(f"{len(status.lines)} uncommitted file(s)")
            else:
                results.add_passed("No uncommitted changes")
        else:
            logger.debug(f"git status unknown ({status.status.value})")

        remote = ctx.vcs.run("remote", "-v")
        if remote.ok:
            if remote.value:
                results.add_passed("Git remote configured")
            else:
                results.add_warning("No git remote configured")
        else:
            logger.debug(f"git remotes unknown ({remote.status.value})")

        return results


class GitignoreChecker(BaseChecker):
    """A missing .gitignore is only a warning."""

    name = "gitignore"
    description = ".gitignore exists"

    FILENAME = ".gitignore"

    def check(self, ctx: ScanContext) -> ResultSet:
        results = ResultSet()

        if ctx.fs.exists(self.FILENAME):
            results.add_passed(".gitignore exists")
        elif ctx.config.fix:
            self._write_fix(ctx, results, self.FILENAME, templates.render_gitignore(), "Created .gitignore")
        else:
            results.add_warning(".gitignore not found", fixable=True)
        return results


# =============================================================================
# Manifest Checkers
# =============================================================================

class ManifestChecker(BaseChecker):
    """Validate package.json, or recognize another ecosystem's manifest."""

    name = "manifest"
    description = "package.json is valid (Node.js projects)"

    FILENAME = "package.json"
    DEFAULT_MAIN = "index.js"
    ALTERNATE_MARKERS = [
        (["Cargo.toml"], "Cargo.toml exists (Rust project)"),
        (["go.mod"], "go.mod exists (Go project)"),
        (["requirements.txt", "pyproject.toml"], "Python project detected"),
    ]

    def check(self, ctx: ScanContext) -> ResultSet:
        results = ResultSet()

        if not ctx.fs.exists(self.FILENAME):
            self._check_alternates(ctx, results)
            return results

        results.facts.add(MANIFEST_PRESENT)

        pkg = self._load(ctx, results)
        if pkg is None:
            return results

        self._check_fields(pkg, results)
        self._check_main(ctx, pkg, results)
        self._check_bins(ctx, pkg, results)

        scripts = pkg.get("scripts")
        if not isinstance(scripts, dict) or not scripts:
            results.add_warning("No npm scripts defined")

        return results

    def _check_alternates(self, ctx: ScanContext, results: ResultSet):
        for filenames, message in self.ALTERNATE_MARKERS:
            if any(ctx.fs.exists(f) for f in filenames):
                results.add_passed(message)
                return
        results.add_warning("No package manager file found")

    def _load(self, ctx: ScanContext, results: ResultSet) -> Optional[dict]:
        raw = ctx.fs.read(self.FILENAME)
        try:
            pkg = json.loads(raw) if raw is not None else None
        except json.JSONDecodeError as e:
            logger.debug(f"package.json parse error: {e}")
            pkg = None

        if pkg is None:
            results.add_error("package.json is invalid JSON")
            return None
        if not isinstance(pkg, dict):
            results.add_error("package.json must contain a JSON object")
            return None
        return pkg

    def _check_fields(self, pkg: dict, results: ResultSet):
        for key in ("name", "version"):
            if not pkg.get(key):
                results.add_error(f'package.json missing "{key}"')
            else:
                results.add_passed(f"package.json has {key}")

        if not pkg.get("description"):
            results.add_warning('package.json missing "description"')
        else:
            results.add_passed("package.json has description")

        keywords = pkg.get("keywords")
        if not isinstance(keywords, list) or not keywords:
            results.add_warning('package.json missing "keywords"')
        else:
            results.add_passed(f"package.json has {len(keywords)} keywords")

        if not pkg.get("author"):
            results.add_warning('package.json missing "author"')
        else:
            results.add_passed("package.json has author")

    def _check_main(self, ctx: ScanContext, pkg: dict, results: ResultSet):
        main = pkg.get("main") or self.DEFAULT_MAIN
        if not isinstance(main, str) or not ctx.fs.exists(main):
            results.add_error(f'Main entry "{main}" not found')
        else:
            results.add_passed(f'Main entry "{main}" exists')

    def _check_bins(self, ctx: ScanContext, pkg: dict, results: ResultSet):
        bins = self._bin_map(pkg)
        for bin_name, bin_path in bins.items():
            if not isinstance(bin_path, str) or not ctx.fs.exists(bin_path):
                results.add_error(f'Binary "{bin_name}" at "{bin_path}" not found')
                continue

            try:
                if not sys.platform.startswith("win") and not ctx.fs.is_executable(bin_path):
                    results.add_warning(f'Binary "{bin_name}" is not executable (chmod +x)')
            except OSError as e:
                logger.debug(f"Could not stat {bin_path}: {e}")

            head = ctx.fs.read_head(bin_path)
            if head is None:
                results.add_passed(f'Binary "{bin_name}" exists')
            elif head.startswith(b"#!"):
                results.add_passed(f'Binary "{bin_name}" is valid (exists + shebang)')
            else:
                results.add_warning(f'Binary "{bin_name}" missing shebang (#!/usr/bin/env node)')

    @staticmethod
    def _bin_map(pkg: dict) -> Dict[str, object]:
        bins = pkg.get("bin")
        if not bins:
            return {}
        if isinstance(bins, str):
            # string form is keyed by the package name; "bin" when name is missing too
            return {str(pkg.get("name") or "bin"): bins}
        if isinstance(bins, dict):
            return {str(k): v for k, v in bins.items()}
        return {}


class EntryPointChecker(BaseChecker):
    """Look for a conventional entry point when there is no package.json."""

    name = "entrypoint"
    description = "Main entry point exists"

    ENTRY_FILES = ["index.js", "main.js", "cli.js", "index.ts", "main.ts", "src/index.js", "src/main.js"]

    def check(self, ctx: ScanContext) -> ResultSet:
        results = ResultSet()

        # package.json entries were already validated by ManifestChecker
        if MANIFEST_PRESENT in ctx.facts:
            return results

        for entry in self.ENTRY_FILES:
            if ctx.fs.exists(entry):
                results.add_passed(f'Entry point "{entry}" found')
                return results

        shell_scripts = [f for f in ctx.fs.list_dir() if f.endswith(".sh")]
        if shell_scripts:
            results.add_passed(f"Shell script(s) found: {', '.join(shell_scripts)}")
            return results

        results.add_warning("No obvious entry point found")
        return results


# =============================================================================
# Registry
# =============================================================================

CHECKERS: List[BaseChecker] = [
    ReadmeChecker(),
    LicenseChecker(),
    SkillChecker(),
    GitChecker(),
    GitignoreChecker(),
    ManifestChecker(),
    EntryPointChecker(),
]


def run_checks(ctx: ScanContext, checkers: Optional[List[BaseChecker]] = None) -> ResultSet:
    """Run every registered checker in order and merge their results."""
    checkers = CHECKERS if checkers is None else checkers
    skip = ctx.config.settings.skip_checks
    all_results = ResultSet()

    unknown = skip - {c.name for c in checkers}
    if unknown:
        logger.warning(f"Ignoring unknown checks in skip: {', '.join(sorted(unknown))}")

    for checker in checkers:
        if checker.name in skip:
            logger.info(f"Skipping {checker.name} (disabled in settings)")
            continue

        logger.debug(f"Running {checker.name}...")
        try:
            results = checker.check(ctx)
        except Exception as e:
            logger.exception(f"{checker.name} check crashed")
            results = ResultSet()
            results.add_error(f"{checker.name} check failed: {e}")

        ctx.facts |= results.facts
        all_results.merge(results)

    return all_results
