"""Tests for ResultSet aggregation."""

import pytest
from dataclasses import FrozenInstanceError

from claw_lint.results import CheckResult, ResultSet


class TestCheckResult:
    def test_defaults_to_not_fixable(self):
        assert CheckResult("README.md not found").fixable is False

    def test_is_immutable(self):
        result = CheckResult("README.md not found", fixable=True)
        with pytest.raises(FrozenInstanceError):
            result.message = "changed"


class TestResultSet:
    def test_starts_empty(self):
        results = ResultSet()

        assert results.errors == []
        assert results.warnings == []
        assert results.passed == []
        assert results.fixed == []
        assert results.facts == set()
        assert results.total == 0

    def test_add_helpers_fill_their_bucket(self):
        results = ResultSet()
        results.add_error("boom", fixable=True)
        results.add_warning("hmm")
        results.add_passed("fine")
        results.add_fixed("Created .gitignore")

        assert results.errors == [CheckResult("boom", True)]
        assert results.warnings == [CheckResult("hmm", False)]
        assert results.passed == ["fine"]
        assert results.fixed == ["Created .gitignore"]

    def test_total_excludes_fixed(self):
        results = ResultSet()
        results.add_passed("a")
        results.add_warning("b")
        results.add_error("c")
        results.add_fixed("d")

        assert results.total == 3

    def test_merge_preserves_order(self):
        first = ResultSet()
        first.add_passed("one")
        first.add_error("first error")
        second = ResultSet()
        second.add_passed("two")
        second.add_error("second error")
        second.facts.add("manifest_present")

        merged = ResultSet().merge(first).merge(second)

        assert merged.passed == ["one", "two"]
        assert [e.message for e in merged.errors] == ["first error", "second error"]
        assert merged.facts == {"manifest_present"}

    def test_has_flags(self):
        results = ResultSet()
        assert not results.has_errors
        assert not results.has_warnings
        assert not results.has_fixable

        results.add_warning(".gitignore not found", fixable=True)

        assert results.has_warnings
        assert results.has_fixable
        assert not results.has_errors
