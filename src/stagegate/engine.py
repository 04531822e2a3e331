"""Core stagegate engine — runs per-file checks and the global lint gates."""

from __future__ import annotations

import sys
from collections.abc import Iterable

from stagegate.config import StageGateConfig
from stagegate.header import HeaderValidator
from stagegate.models import CheckFailure, CheckKind, RunResult, StagedFile
from stagegate.tools import SubprocessRunner, ToolRunner


class StageGateEngine:
    """Orchestrates the checks of a single pre-commit run.

    Per-file checks (formatting and header) never stop the run; every
    failure is recorded in a RunResult and reported at the end. Lint steps
    run afterwards, in order, and the first one to fail ends the run with
    its own exit status.
    """

    def __init__(
        self,
        config: StageGateConfig,
        runner: ToolRunner | None = None,
        validator: HeaderValidator | None = None,
        check_format: bool = True,
    ) -> None:
        self.config = config
        self.runner = runner or SubprocessRunner()
        self.validator = validator or HeaderValidator.from_config(config)
        self.check_format = check_format

    def selects(self, staged: StagedFile) -> bool:
        """Whether a path is subject to the per-file checks."""
        if not self.config.is_source_file(staged.extension):
            return False
        return not self.config.is_path_excluded(staged.path)

    def run(self, paths: Iterable[str]) -> RunResult:
        """Run the per-file checks over every selected path.

        Args:
            paths: Candidate file paths, typically the staged files.

        Returns:
            The accumulated result for all selected files.
        """
        result = RunResult()
        for path in paths:
            staged = StagedFile(path)
            if not self.selects(staged):
                continue
            result.checked.append(staged.path)
            for failure in self.check_file(staged):
                result.record(failure)
        return result

    def check_file(self, staged: StagedFile) -> list[CheckFailure]:
        """Run the formatter check and the header check on one file."""
        failures: list[CheckFailure] = []

        if self.check_format:
            status = self.runner.run_check(
                self.config.formatter_command + [staged.path], quiet=True
            )
            if status != 0:
                print(
                    f"❌ Please run '{self.config.formatter_hint}' before committing "
                    f"changes to {staged.path}",
                    file=sys.stderr,
                )
                failures.append(
                    CheckFailure(staged.path, CheckKind.FORMAT.value, "formatting incorrect")
                )

        outcome = self.validator.validate(staged.path)
        if not outcome.passed:
            failures.append(
                CheckFailure(staged.path, CheckKind.HEADER.value, outcome.reason or "")
            )

        return failures

    def run_lint(self) -> int:
        """Run every lint step in order, stopping at the first failure.

        Returns:
            0 if all steps pass, otherwise the failing step's exit status.
        """
        for step in self.config.lint_steps:
            status = self.runner.run_check(step.args, env=step.env or None)
            if status != 0:
                return status
        return 0

    def execute(self, paths: Iterable[str], lint: bool = True) -> tuple[int, RunResult]:
        """Run a complete pre-commit pass.

        Returns:
            The process exit status and the per-file result. A failing lint
            step's status wins over the per-file result.
        """
        result = self.run(paths)
        if lint:
            status = self.run_lint()
            if status != 0:
                return status, result
        return result.exit_code, result
