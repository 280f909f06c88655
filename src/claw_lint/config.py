"""
Configuration for a claw-lint run.

Settings are read from YAML with priority:
1. --config FILE
2. $CLAW_LINT_CONFIG
3. .claw-lint.yaml in the target directory
Environment variable CLAW_LINT_AUTHOR overrides the license author.
"""

import os
import logging
from dataclasses import dataclass, field, replace
from pathlib import Path
from typing import FrozenSet, Optional

import yaml

logger = logging.getLogger(__name__)

CONFIG_FILENAME = ".claw-lint.yaml"
CONFIG_ENV_VAR = "CLAW_LINT_CONFIG"
AUTHOR_ENV_VAR = "CLAW_LINT_AUTHOR"
DEFAULT_MIN_CONTENT_LENGTH = 50

KNOWN_KEYS = {"min_content_length", "skip", "author"}


class ConfigError(Exception):
    """Raised when a settings file is missing or invalid."""
    pass


@dataclass(frozen=True)
class LintSettings:
    min_content_length: int = DEFAULT_MIN_CONTENT_LENGTH
    skip_checks: FrozenSet[str] = field(default_factory=frozenset)
    author: Optional[str] = None

    @classmethod
    def from_dict(cls, data: dict) -> "LintSettings":
        if not isinstance(data, dict):
            raise ConfigError("settings must be a mapping")

        unknown = set(data) - KNOWN_KEYS
        if unknown:
            logger.warning(f"Ignoring unknown settings: {', '.join(sorted(unknown))}")

        min_length = data.get("min_content_length", DEFAULT_MIN_CONTENT_LENGTH)
        if isinstance(min_length, bool) or not isinstance(min_length, int) or min_length <= 0:
            raise ConfigError(f"min_content_length must be a positive integer, got {min_length!r}")

        skip = data.get("skip") or []
        if isinstance(skip, str):
            skip = [skip]
        if not isinstance(skip, list) or not all(isinstance(s, str) for s in skip):
            raise ConfigError("skip must be a list of check names")

        author = data.get("author")
        if author is not None and not isinstance(author, str):
            raise ConfigError("author must be a string")

        return cls(
            min_content_length=min_length,
            skip_checks=frozenset(s.lower() for s in skip),
            author=author or None,
        )

    @classmethod
    def load(cls, target: Path, explicit_path: Optional[Path] = None) -> "LintSettings":
        """Load settings for a target directory. Raises ConfigError if invalid."""
        config_path = explicit_path
        if config_path is None and os.getenv(CONFIG_ENV_VAR):
            config_path = Path(os.environ[CONFIG_ENV_VAR])

        if config_path is not None and not config_path.is_file():
            raise ConfigError(f"Config file not found: {config_path}")

        if config_path is None:
            candidate = target / CONFIG_FILENAME
            config_path = candidate if candidate.is_file() else None

        data = {}
        if config_path is not None:
            logger.debug(f"Loading settings from {config_path}")
            try:
                with open(config_path, "r", encoding="utf-8") as f:
                    data = yaml.safe_load(f) or {}
            except (OSError, yaml.YAMLError) as e:
                raise ConfigError(f"Could not read {config_path}: {e}") from e

        settings = cls.from_dict(data)

        env_author = os.getenv(AUTHOR_ENV_VAR)
        if env_author:
            settings = replace(settings, author=env_author)
        return settings


@dataclass(frozen=True)
class RunConfig:
    """Resolved target and mode flags. Built once by the CLI."""
    path: Path
    json_output: bool = False
    fix: bool = False
    strict: bool = False
    settings: LintSettings = field(default_factory=LintSettings)
