"""Pytest fixtures and configuration for claw-lint tests."""

import json
import shutil

import pytest
from pathlib import Path
from typing import Dict, List, Optional

from claw_lint.checks import ScanContext
from claw_lint.config import LintSettings, RunConfig
from claw_lint.probes import FilesystemProbe, VcsOutput, VcsStatus


GIT_AVAILABLE = shutil.which("git") is not None

requires_git = pytest.mark.skipif(not GIT_AVAILABLE, reason="git binary not installed")


class FakeVcs:
    """Stands in for VcsProbe. Maps a command string to its canned output."""

    def __init__(self, responses: Optional[Dict[str, VcsOutput]] = None,
                 default: Optional[VcsOutput] = None, create_git_dir: bool = True):
        self.responses = responses or {}
        self.default = default or VcsOutput(VcsStatus.UNAVAILABLE)
        self.create_git_dir = create_git_dir
        self.calls: List[str] = []
        self.root: Optional[Path] = None

    def run(self, *args: str) -> VcsOutput:
        cmd = " ".join(args)
        self.calls.append(cmd)
        result = self.responses.get(cmd, self.default)
        if cmd == "init" and result.ok and self.create_git_dir and self.root:
            (self.root / ".git").mkdir(exist_ok=True)
        return result


def ok(value: str = "") -> VcsOutput:
    return VcsOutput(VcsStatus.OK, value)


def failed() -> VcsOutput:
    return VcsOutput(VcsStatus.FAILED)


@pytest.fixture
def project(tmp_path) -> Path:
    """An empty project directory with a stable name."""
    project_dir = tmp_path / "my-project"
    project_dir.mkdir()
    return project_dir


@pytest.fixture
def fake_vcs() -> FakeVcs:
    """A git stand-in where init succeeds and the repo is clean with a remote."""
    return FakeVcs({
        "init": ok("Initialized empty Git repository"),
        "status --porcelain": ok(""),
        "remote -v": ok("origin\tgit@example.com:me/my-project.git (fetch)"),
        "config user.name": ok("Jane Doe"),
    })


@pytest.fixture
def make_ctx(project, fake_vcs):
    """Build a ScanContext over the project directory using the fake git probe."""
    def _make(fix: bool = False, strict: bool = False, vcs=None,
              settings: Optional[LintSettings] = None, path: Optional[Path] = None) -> ScanContext:
        root = path or project
        config = RunConfig(
            path=root,
            fix=fix,
            strict=strict,
            settings=settings or LintSettings(),
        )
        probe = vcs or fake_vcs
        probe.root = root
        return ScanContext(config=config, fs=FilesystemProbe(root), vcs=probe)
    return _make


@pytest.fixture
def write_manifest(project):
    """Write a package.json into the project."""
    def _write(data) -> Path:
        path = project / "package.json"
        path.write_text(data if isinstance(data, str) else json.dumps(data))
        return path
    return _write


@pytest.fixture
def complete_project(project) -> Path:
    """A project that satisfies every file-based check."""
    (project / "README.md").write_text("# my-project\n\n" + "A thorough description of the project. " * 3)
    (project / "LICENSE").write_text("MIT License\n")
    (project / "SKILL.md").write_text("# Skill\n\n" + "Explains what this agent skill does and when. " * 2)
    (project / ".gitignore").write_text("node_modules/\n")
    (project / ".git").mkdir()
    (project / "index.js").write_text("module.exports = {};\n")
    cli = project / "cli.js"
    cli.write_text("#!/usr/bin/env node\nrequire('./index');\n")
    cli.chmod(0o755)
    (project / "package.json").write_text(json.dumps({
        "name": "my-project",
        "version": "1.0.0",
        "description": "A project",
        "keywords": ["agents", "lint"],
        "author": "Jane Doe",
        "main": "index.js",
        "bin": {"my-project": "cli.js"},
        "scripts": {"test": "node test.js"},
    }))
    return project
