"""stagegate init command — bootstrap project configuration and the git hook."""

from __future__ import annotations

import stat
from pathlib import Path

# ---------------------------------------------------------------------------
# Template builders
# ---------------------------------------------------------------------------


def _build_stagegate_yml(extension: str) -> str:
    return f"""\
# .stagegate.yml — stagegate configuration
#
# Files with this extension get the formatter and header checks.
extension: {extension}

# Required header (first five lines of every checked file):
#   // SPDX-License-Identifier: <one of licenses>
#   //
#   // Copyright ...
#   //
#   // Author: ...
header:
  comment_prefix: "//"
  licenses:
    - MIT OR Apache-2.0
    - MIT

# Per-file formatter, run in check-only mode. Failures do not stop the run.
formatter:
  command: [rustfmt, --check, --edition, "2021"]
  hint: cargo fmt --all

# Workspace lint steps, run in order after the per-file checks.
# The first failing step ends the commit check with its own exit status.
lint:
  - name: clippy-workspace
    args: [cargo, clippy, --workspace, --all-features, --exclude, packit,
           --exclude, svsm-fuzz, --exclude, igvmbuilder, --exclude, igvmmeasure,
           --exclude, stage1, "--", -D, warnings]
  - name: clippy-host-tools
    args: [cargo, clippy, --workspace, --all-features, --exclude, packit,
           --exclude, svsm-fuzz, --exclude, svsm, --exclude, stage1,
           --target=x86_64-unknown-linux-gnu, "--", -D, warnings]
  - name: clippy-fuzz
    args: [cargo, clippy, --package, svsm-fuzz, --all-features,
           --target=x86_64-unknown-linux-gnu, "--", -D, warnings]
    env:
      RUSTFLAGS: --cfg fuzzing
  - name: clippy-tests
    args: [cargo, clippy, --workspace, --all-features, --exclude, packit, --tests,
           --target=x86_64-unknown-linux-gnu, "--", -D, warnings]

# Paths (fnmatch globs) never checked
exclusions:
  paths: []
"""


def _build_hook_script() -> str:
    return """\
#!/bin/sh
# Installed by 'stagegate init'
exec python3 -m stagegate check "$@"
"""


def _build_precommit_config() -> str:
    return """\
# .pre-commit-config.yaml — stagegate pre-commit hook
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


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def _prompt_yn(question: str, default: bool = False) -> bool:
    """Yes/no prompt."""
    default_str = "Y/n" if default else "y/N"
    answer = input(f"  {question} [{default_str}]: ").strip().lower()
    if not answer:
        return default
    return answer.startswith("y")


def _write_file(path: Path, content: str) -> bool:
    """Write file, prompting if it already exists. Returns True if written."""
    if path.exists() and not _prompt_yn(f"{path} already exists. Overwrite?", default=False):
        print(f"  Skipped: {path}")
        return False
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(content, encoding="utf-8")
    print(f"  Creating {path} ... done")
    return True


def _install_hook(root: Path) -> bool:
    """Write the pre-commit hook into the repository's hooks directory."""
    git_dir = root / ".git"
    if not git_dir.is_dir():
        print(f"  No git repository at {root}; hook not installed")
        return False
    hook = git_dir / "hooks" / "pre-commit"
    if not _write_file(hook, _build_hook_script()):
        return False
    hook.chmod(hook.stat().st_mode | stat.S_IXUSR | stat.S_IXGRP | stat.S_IXOTH)
    return True


# ---------------------------------------------------------------------------
# Main command
# ---------------------------------------------------------------------------


def init_command(args: object) -> int:
    """Execute the init command.

    Args:
        args: Parsed CLI arguments with optional ``path``, ``extension``,
              ``no_hook`` and ``pre_commit_config`` attributes.

    Returns:
        0 on success.
    """
    root = Path(getattr(args, "path", None) or ".").resolve()
    extension = (getattr(args, "extension", None) or "rs").lstrip(".")

    print()
    print("stagegate init")
    print("-" * 50)

    _write_file(root / ".stagegate.yml", _build_stagegate_yml(extension))

    if not getattr(args, "no_hook", False):
        _install_hook(root)

    if getattr(args, "pre_commit_config", False):
        _write_file(root / ".pre-commit-config.yaml", _build_precommit_config())

    print("-" * 50)
    print("Done! stagegate is configured for this project.")
    print()
    print("  Next steps:")
    print("    1. Review .stagegate.yml and adjust the lint steps")
    print("    2. stagegate check --all   (audit every tracked file)")
    print()
    return 0
