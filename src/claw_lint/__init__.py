"""claw-lint: project readiness checks for agent-built repositories."""

__version__ = "1.0.0"

from .checks import CHECKERS, BaseChecker, ScanContext, run_checks
from .config import ConfigError, LintSettings, RunConfig
from .results import CheckResult, ResultSet

__all__ = [
    "CHECKERS",
    "BaseChecker",
    "CheckResult",
    "ConfigError",
    "LintSettings",
    "ResultSet",
    "RunConfig",
    "ScanContext",
    "run_checks",
]
