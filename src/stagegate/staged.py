"""Listing of the files a commit will contain."""

from __future__ import annotations

import subprocess
import sys
from collections.abc import Iterator

_GIT_COMMANDS = {
    "staged": ["git", "diff", "--cached", "--name-only", "-z"],
    "all": ["git", "ls-files", "-z"],
}


def iter_staged_files(mode: str = "staged", cwd: str | None = None) -> Iterator[str]:
    """Yield file paths from the git index, in the order git reports them.

    Args:
        mode: 'staged' for files staged for commit, 'all' for every tracked file.
        cwd: Directory to run git in (default: current directory).

    Yields:
        Repository-relative paths, unquoted. Nothing is yielded when git fails.
    """
    cmd = _GIT_COMMANDS[mode]
    try:
        result = subprocess.run(
            cmd, capture_output=True, text=True, encoding="utf-8", check=True, cwd=cwd
        )
    except subprocess.CalledProcessError as e:
        print(f"⚠️  git could not list files: {(e.stderr or '').strip()}", file=sys.stderr)
        return
    except FileNotFoundError:
        print("⚠️  git is not installed or not in PATH", file=sys.stderr)
        return

    # -z output is NUL-separated and never C-quoted
    for path in result.stdout.split("\0"):
        if path:
            yield path
