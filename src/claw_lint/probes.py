"""
Filesystem and git probes scoped to the target directory.
"""

import logging
import subprocess
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import List, Optional

logger = logging.getLogger(__name__)

GIT_TIMEOUT_SECONDS = 30


class FilesystemProbe:
    """Reads and writes known filenames relative to the target directory."""

    def __init__(self, root: Path):
        self.root = root

    def path(self, name: str) -> Path:
        return self.root / name

    def exists(self, name: str) -> bool:
        return self.path(name).exists()

    def read(self, name: str) -> Optional[str]:
        """Return file content, or None if it cannot be read."""
        try:
            return self.path(name).read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            logger.debug(f"Could not read {name}: {e}")
            return None

    def write(self, name: str, content: str):
        """Write content to a file. OSError propagates to the caller."""
        self.path(name).write_text(content, encoding="utf-8")
        logger.debug(f"Wrote {len(content)} chars to {self.path(name)}")

    def read_head(self, name: str, size: int = 2) -> Optional[bytes]:
        """Return the first bytes of a file, or None on an I/O error."""
        try:
            with open(self.path(name), "rb") as f:
                return f.read(size)
        except OSError as e:
            logger.debug(f"Could not read {name}: {e}")
            return None

    def is_executable(self, name: str) -> bool:
        return bool(self.path(name).stat().st_mode & 0o111)

    def list_dir(self) -> List[str]:
        try:
            return sorted(p.name for p in self.root.iterdir())
        except OSError as e:
            logger.debug(f"Could not list {self.root}: {e}")
            return []


class VcsStatus(Enum):
    OK = "ok"
    FAILED = "failed"
    UNAVAILABLE = "unavailable"


@dataclass(frozen=True)
class VcsOutput:
    """
    Outcome of a git command.

    FAILED means git ran and exited non-zero; UNAVAILABLE means git could not
    be started at all. Neither should be read as a "no" answer.
    """
    status: VcsStatus
    value: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.status is VcsStatus.OK

    @property
    def lines(self) -> List[str]:
        if not self.ok or not self.value:
            return []
        return self.value.splitlines()


class VcsProbe:
    """Runs git commands inside the target directory."""

    def __init__(self, root: Path, binary: str = "git"):
        self.root = root
        self.binary = binary

    def run(self, *args: str) -> VcsOutput:
        cmd = [self.binary, *args]
        try:
            result = subprocess.run(
                cmd,
                cwd=self.root,
                capture_output=True,
                text=True,
                encoding="utf-8",
                errors="replace",
                timeout=GIT_TIMEOUT_SECONDS,
            )
        except FileNotFoundError:
            logger.debug(f"{self.binary} not found on PATH")
            return VcsOutput(VcsStatus.UNAVAILABLE)
        except (OSError, subprocess.TimeoutExpired) as e:
            logger.debug(f"{' '.join(cmd)} could not run: {e}")
            return VcsOutput(VcsStatus.FAILED)

        if result.returncode != 0:
            logger.debug(f"{' '.join(cmd)} exited {result.returncode}: {result.stderr.strip()}")
            return VcsOutput(VcsStatus.FAILED)
        return VcsOutput(VcsStatus.OK, result.stdout.strip())
