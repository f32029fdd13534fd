"""Tests for the dependency audit, report and summary."""

import logging

import pytest

from semver_range.audit import check_dependencies, collect_declared
from semver_range.config import Settings
from semver_range.report import aggregate, validate_report
from semver_range.summary import render_summary


def _by_package(report):
    return {entry["package"]: entry for entry in report["packages"]}


class TestCollectDeclared:
    """Declared requirements come from the configured sections only."""

    def test_sections_in_order(self, manifest):
        declared = collect_declared(manifest, ["devDependencies", "dependencies"])
        assert declared[0] == ("devDependencies", "mocha", "10.2.0 || 10.3.0")
        assert [name for _, name, _ in declared[1:]] == ["left-pad", "lodash", "chalk"]

    def test_missing_section_is_empty(self, manifest):
        assert collect_declared(manifest, ["optionalDependencies"]) == []

    def test_non_mapping_section_skipped(self, caplog):
        with caplog.at_level(logging.WARNING, logger="semver_range"):
            assert collect_declared({"dependencies": ["a"]}, ["dependencies"]) == []
        assert "not a mapping" in caplog.text


class TestCheckDependencies:
    """Declared ranges against installed versions."""

    def test_report(self, manifest, installed):
        report = check_dependencies(manifest, installed)
        entries = _by_package(report)

        assert entries["left-pad"]["satisfied"] is True
        assert entries["lodash"]["satisfied"] is True
        assert entries["mocha"]["satisfied"] is True
        assert entries["chalk"] == {
            "section": "dependencies",
            "package": "chalk",
            "requirement": "~2.4.1",
            "installed": "2.5.0",
            "satisfied": False,
            "reason": "unsatisfied",
        }
        assert entries["react"]["reason"] == "missing"
        assert entries["react"]["installed"] is None

        assert report["ok"] is False
        assert report["totals"] == {"packages": 5, "satisfied": 3, "unsatisfied": 2}
        validate_report(report)

    def test_sections_from_settings(self, manifest, installed):
        report = check_dependencies(manifest, installed, Settings(sections=("devDependencies",)))
        assert report["ok"] is True
        assert [e["package"] for e in report["packages"]] == ["mocha"]

    def test_invalid_requirement_recorded(self):
        report = check_dependencies({"dependencies": {"a": "latest"}}, {"a": "1.0.0"})
        assert report["packages"][0]["reason"] == "invalid-requirement"
        validate_report(report)

    def test_invalid_installed_version_recorded(self):
        report = check_dependencies({"dependencies": {"a": "^1"}}, {"a": "not-a-version"})
        assert report["packages"][0]["reason"] == "invalid-version"

    def test_prerelease_install(self):
        manifest = {"dependencies": {"a": "^1.2.0", "b": "^2.0.0-rc.1", "c": ">=2.0.0-rc.1 <3"}}
        report = check_dependencies(manifest, {"a": "1.4.0-beta", "b": "2.0.0-rc.2", "c": "2.0.0-rc.2"})
        entries = _by_package(report)
        assert entries["a"]["satisfied"] is False
        assert entries["b"]["satisfied"] is True
        assert entries["c"]["satisfied"] is False

    def test_unsatisfied_logged(self, manifest, installed, caplog):
        with caplog.at_level(logging.WARNING, logger="semver_range"):
            check_dependencies(manifest, installed)
        assert "chalk 2.5.0 does not satisfy '~2.4.1'" in caplog.text


class TestReport:
    """Aggregation and schema validation."""

    def test_empty(self):
        report = aggregate([])
        assert report["ok"] is True
        assert report["totals"] == {"packages": 0, "satisfied": 0, "unsatisfied": 0}
        validate_report(report)

    def test_validation_errors_listed(self):
        report = aggregate([{"package": "a", "satisfied": "yes"}])
        with pytest.raises(ValueError) as excinfo:
            validate_report(report)
        message = str(excinfo.value)
        assert "packages/0" in message
        assert "'section' is a required property" in message


class TestRenderSummary:
    """Markdown rendering."""

    def test_rows(self, manifest, installed):
        text = render_summary(check_dependencies(manifest, installed))
        assert "Declared: 5 | Satisfied: 3 | Unsatisfied: 2" in text
        assert "| dependencies | chalk | ~2.4.1 | 2.5.0 | unsatisfied |" in text
        assert "| peerDependencies | react | ^18.0.0 | n/a | missing |" in text
        assert "| devDependencies | mocha | 10.2.0 || 10.3.0 | 10.3.0+sha.1 | ok |" in text

    def test_no_packages(self):
        text = render_summary(aggregate([]))
        assert "No declared dependencies" in text
        assert text.endswith("\n")
