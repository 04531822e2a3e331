#!/usr/bin/env python3
"""Git pre-commit hook for stagegate.

Install by copying or symlinking this file to `.git/hooks/pre-commit`,
or let `stagegate init` write a shell hook for you. With the pre-commit
framework:

    # .pre-commit-config.yaml
    repos:
      - repo: local
        hooks:
          - id: stagegate
            name: stagegate header, format and lint checks
            entry: python -m stagegate check
            language: python
            pass_filenames: false
            always_run: true
"""

from __future__ import annotations

import subprocess
import sys


def main(argv: list[str] | None = None) -> int:
    """Run stagegate on the staged files and return its exit status."""
    cmd = [sys.executable, "-m", "stagegate", "check", *(argv or [])]

    result = subprocess.run(cmd)
    return result.returncode


if __name__ == "__main__":
    sys.exit(main(sys.argv[1:]))
