"""
Result aggregation for claw-lint.

Each checker returns its own ResultSet. The runner merges them in check order
into one run-wide ResultSet, which the reporter reads after all checks finish.
"""

from dataclasses import dataclass, field
from typing import List, Set


@dataclass(frozen=True)
class CheckResult:
    """An error or warning produced by a check."""
    message: str
    fixable: bool = False


@dataclass
class ResultSet:
    """Append-only buckets of check outcomes plus facts for later checks."""
    errors: List[CheckResult] = field(default_factory=list)
    warnings: List[CheckResult] = field(default_factory=list)
    passed: List[str] = field(default_factory=list)
    fixed: List[str] = field(default_factory=list)
    facts: Set[str] = field(default_factory=set)

    def add_error(self, message: str, fixable: bool = False):
        self.errors.append(CheckResult(message, fixable))

    def add_warning(self, message: str, fixable: bool = False):
        self.warnings.append(CheckResult(message, fixable))

    def add_passed(self, message: str):
        self.passed.append(message)

    def add_fixed(self, message: str):
        self.fixed.append(message)

    def merge(self, other: "ResultSet") -> "ResultSet":
        """Append another set's entries after ours, preserving order."""
        self.errors.extend(other.errors)
        self.warnings.extend(other.warnings)
        self.passed.extend(other.passed)
        self.fixed.extend(other.fixed)
        self.facts |= other.facts
        return self

    @property
    def has_errors(self) -> bool:
        return bool(self.errors)

    @property
    def has_warnings(self) -> bool:
        return bool(self.warnings)

    @property
    def has_fixable(self) -> bool:
        return any(r.fixable for r in self.errors + self.warnings)

    @property
    def total(self) -> int:
        return len(self.passed) + len(self.errors) + len(self.warnings)
