"""External tool invocation for formatter and lint checks."""

from __future__ import annotations

import os
import subprocess
import sys
from abc import ABC, abstractmethod

# Exit status a POSIX shell reports for a command it cannot find
COMMAND_NOT_FOUND = 127


class ToolRunner(ABC):
    """Runs an external tool and reports only its exit status."""

    @abstractmethod
    def run_check(
        self,
        args: list[str],
        env: dict[str, str] | None = None,
        quiet: bool = False,
    ) -> int:
        """Run ``args`` to completion and return the exit status.

        Args:
            args: Command line, program first.
            env: Extra environment variables layered over the current ones.
            quiet: Discard the tool's stdout and stderr.

        Returns:
            The process exit status; 0 means the check passed.
        """
        ...  # pragma: no cover


class SubprocessRunner(ToolRunner):
    """Blocking ``subprocess.run`` implementation of ToolRunner."""

    def __init__(self, cwd: str | None = None) -> None:
        self.cwd = cwd

    def run_check(
        self,
        args: list[str],
        env: dict[str, str] | None = None,
        quiet: bool = False,
    ) -> int:
        full_env = None
        if env:
            full_env = dict(os.environ)
            full_env.update(env)

        output = subprocess.DEVNULL if quiet else None
        try:
            result = subprocess.run(
                args,
                env=full_env,
                cwd=self.cwd,
                stdout=output,
                stderr=output,
            )
        except FileNotFoundError:
            print(f"Error: {args[0]} is not installed or not in PATH", file=sys.stderr)
            return COMMAND_NOT_FOUND
        return result.returncode
