"""Data models for stagegate."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum


class Outcome(str, Enum):
    """Result of validating a single file."""

    PASS = "PASS"
    FAIL = "FAIL"


class CheckKind(str, Enum):
    """Per-file check that produced a failure."""

    FORMAT = "format"
    HEADER = "header"


HEADER_FORMAT_INCORRECT = "header format incorrect"
UNREADABLE = "unreadable"


@dataclass(frozen=True)
class StagedFile:
    """A path staged for commit."""

    path: str

    @property
    def extension(self) -> str:
        """Suffix after the last ``.`` of the file name, or ``""``."""
        name = self.path.replace("\\", "/").rsplit("/", 1)[-1]
        if "." not in name:
            return ""
        return name.rsplit(".", 1)[1]


@dataclass(frozen=True)
class ValidationOutcome:
    """Pass/fail verdict of the header validator for one file."""

    outcome: Outcome
    path: str
    reason: str | None = None

    @property
    def passed(self) -> bool:
        return self.outcome is Outcome.PASS

    @classmethod
    def ok(cls, path: str) -> ValidationOutcome:
        return cls(Outcome.PASS, path)

    @classmethod
    def fail(cls, path: str, reason: str) -> ValidationOutcome:
        return cls(Outcome.FAIL, path, reason)


@dataclass(frozen=True)
class CheckFailure:
    """A non-fatal per-file failure."""

    path: str
    check: str
    reason: str

    def to_dict(self) -> dict:
        return {"path": self.path, "check": self.check, "reason": self.reason}


@dataclass
class RunResult:
    """Accumulated outcome of the per-file checks of one run.

    Once a failure is recorded the result stays failed; nothing clears it.
    """

    checked: list[str] = field(default_factory=list)
    failures: list[CheckFailure] = field(default_factory=list)

    @property
    def failed(self) -> bool:
        return bool(self.failures)

    @property
    def exit_code(self) -> int:
        return 1 if self.failed else 0

    def record(self, failure: CheckFailure) -> None:
        self.failures.append(failure)

    def to_dict(self) -> dict:
        return {
            "status": "FAIL" if self.failed else "PASS",
            "checked": list(self.checked),
            "failures": [f.to_dict() for f in self.failures],
        }


@dataclass(frozen=True)
class LintStep:
    """One whole-workspace static-analysis invocation.

    Any non-zero exit status of a lint step ends the run with that status.
    """

    name: str
    args: list[str]
    env: dict[str, str] = field(default_factory=dict)

    @classmethod
    def from_dict(cls, data: dict) -> LintStep:
        if not isinstance(data, dict):
            raise ValueError(f"lint step must be a mapping, got {data!r}")
        name = data.get("name") or "lint"
        args = data.get("args")
        if not isinstance(args, list) or not args:
            raise ValueError(f"lint step '{name}' needs a non-empty 'args' list")
        env = data.get("env") or {}
        if not isinstance(env, dict):
            raise ValueError(f"lint step '{name}' has a non-mapping 'env'")
        return cls(
            name=name,
            args=[str(a) for a in args],
            env={str(k): str(v) for k, v in env.items()},
        )
