"""Tests for stagegate data models."""

import pytest

from stagegate.models import CheckFailure, LintStep, RunResult, StagedFile, ValidationOutcome


class TestStagedFile:
    @pytest.mark.parametrize(
        "path,extension",
        [
            ("src/main.rs", "rs"),
            ("archive.tar.gz", "gz"),
            ("Makefile", ""),
            ("kernel.d/README", ""),
            (".gitignore", "gitignore"),
        ],
    )
    def test_extension(self, path, extension):
        assert StagedFile(path).extension == extension


class TestValidationOutcome:
    def test_ok(self):
        outcome = ValidationOutcome.ok("a.rs")
        assert outcome.passed
        assert outcome.reason is None

    def test_fail(self):
        outcome = ValidationOutcome.fail("b.rs", "header format incorrect")
        assert not outcome.passed
        assert outcome.reason == "header format incorrect"


class TestRunResult:
    def test_starts_passing(self):
        result = RunResult()
        assert not result.failed
        assert result.exit_code == 0

    def test_failure_sticks(self):
        result = RunResult()
        result.record(CheckFailure("b.rs", "header", "header format incorrect"))
        result.checked.append("c.rs")
        assert result.failed
        assert result.exit_code == 1

    def test_to_dict(self):
        result = RunResult(checked=["b.rs"], failures=[CheckFailure("b.rs", "header", "unreadable")])
        assert result.to_dict() == {
            "status": "FAIL",
            "checked": ["b.rs"],
            "failures": [{"path": "b.rs", "check": "header", "reason": "unreadable"}],
        }


class TestLintStep:
    def test_from_dict(self):
        step = LintStep.from_dict({"name": "fuzz", "args": ["cargo", "clippy"], "env": {"A": 1}})
        assert step.args == ["cargo", "clippy"]
        assert step.env == {"A": "1"}

    def test_requires_args(self):
        with pytest.raises(ValueError, match="fuzz"):
            LintStep.from_dict({"name": "fuzz", "args": []})

    def test_env_must_be_mapping(self):
        with pytest.raises(ValueError):
            LintStep.from_dict({"args": ["cargo"], "env": ["A=1"]})
