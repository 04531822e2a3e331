"""Configuration management for stagegate."""

from __future__ import annotations

import copy
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import yaml  # type: ignore

from stagegate.models import LintStep

_TARGET = "--target=x86_64-unknown-linux-gnu"

_DEFAULT_CONFIG = {
    "extension": "rs",
    "header": {
        "comment_prefix": "//",
        "licenses": [
            "MIT OR Apache-2.0",
            "MIT",
        ],
    },
    "formatter": {
        "command": ["rustfmt", "--check", "--edition", "2021"],
        "hint": "cargo fmt --all",
    },
    "lint": [
        {
            "name": "clippy-workspace",
            "args": [
                "cargo", "clippy", "--workspace", "--all-features",
                "--exclude", "packit", "--exclude", "svsm-fuzz",
                "--exclude", "igvmbuilder", "--exclude", "igvmmeasure",
                "--exclude", "stage1",
                "--", "-D", "warnings",
            ],
        },
        {
            "name": "clippy-host-tools",
            "args": [
                "cargo", "clippy", "--workspace", "--all-features",
                "--exclude", "packit", "--exclude", "svsm-fuzz",
                "--exclude", "svsm", "--exclude", "stage1",
                _TARGET,
                "--", "-D", "warnings",
            ],
        },
        {
            "name": "clippy-fuzz",
            "args": [
                "cargo", "clippy", "--package", "svsm-fuzz", "--all-features",
                _TARGET,
                "--", "-D", "warnings",
            ],
            "env": {"RUSTFLAGS": "--cfg fuzzing"},
        },
        {
            "name": "clippy-tests",
            "args": [
                "cargo", "clippy", "--workspace", "--all-features",
                "--exclude", "packit", "--tests",
                _TARGET,
                "--", "-D", "warnings",
            ],
        },
    ],
    "exclusions": {
        "paths": [],
    },
}

CONFIG_FILENAME = ".stagegate.yml"


@dataclass
class StageGateConfig:
    """Full stagegate configuration loaded from `.stagegate.yml`."""

    extension: str = "rs"
    comment_prefix: str = "//"
    licenses: list[str] = field(default_factory=lambda: ["MIT OR Apache-2.0", "MIT"])
    formatter_command: list[str] = field(
        default_factory=lambda: ["rustfmt", "--check", "--edition", "2021"]
    )
    formatter_hint: str = "cargo fmt --all"
    lint_steps: list[LintStep] = field(default_factory=list)
    excluded_paths: list[str] = field(default_factory=list)

    @classmethod
    def load(cls, config_path: str | Path | None = None) -> StageGateConfig:
        """Load configuration from a YAML file, falling back to defaults.

        Search order:
        1. Explicit ``config_path`` argument
        2. ``.stagegate.yml`` in the current directory
        3. Built-in defaults
        """
        raw: dict[str, Any] = copy.deepcopy(_DEFAULT_CONFIG)

        search_paths: list[Path] = []
        if config_path:
            search_paths.append(Path(config_path))
        search_paths.append(Path(CONFIG_FILENAME))

        for path in search_paths:
            if path.exists():
                with open(path, encoding="utf-8") as f:
                    loaded = yaml.safe_load(f)
                if loaded and isinstance(loaded, dict):
                    raw = _deep_merge(raw, loaded)
                break

        return cls._from_raw(raw)

    @classmethod
    def _from_raw(cls, raw: dict[str, Any]) -> StageGateConfig:
        """Build config from a raw dict (merged defaults + user overrides)."""
        cfg = cls()
        cfg.extension = str(raw.get("extension", cfg.extension)).lstrip(".")

        header = _section(raw, "header")
        cfg.comment_prefix = str(header.get("comment_prefix", cfg.comment_prefix))
        cfg.licenses = _string_list(header.get("licenses", cfg.licenses), "header.licenses")

        formatter = _section(raw, "formatter")
        command = formatter.get("command", cfg.formatter_command)
        if isinstance(command, str):
            command = command.split()
        cfg.formatter_command = _string_list(command, "formatter.command")
        cfg.formatter_hint = str(formatter.get("hint", cfg.formatter_hint))

        lint = raw.get("lint") or []
        if not isinstance(lint, list):
            raise ValueError("'lint' must be a list of steps")
        cfg.lint_steps = [LintStep.from_dict(step) for step in lint]

        exclusions = _section(raw, "exclusions")
        paths = exclusions.get("paths") or []
        cfg.excluded_paths = _string_list(paths, "exclusions.paths", allow_empty=True)

        return cfg

    @property
    def license_lines(self) -> list[str]:
        """Exact first-line strings accepted as a license header."""
        return [f"{self.comment_prefix} SPDX-License-Identifier: {lic}" for lic in self.licenses]

    def is_source_file(self, extension: str) -> bool:
        """Check if an extension names the checked source language."""
        return extension == self.extension

    def is_path_excluded(self, file_path: str) -> bool:
        """Check if a file path is excluded by glob patterns."""
        from fnmatch import fnmatch

        return any(fnmatch(file_path, pattern) for pattern in self.excluded_paths)


def _deep_merge(base: dict, override: dict) -> dict:
    """Deep-merge override dict into base dict."""
    result = dict(base)
    for key, value in override.items():
        if key in result and isinstance(result[key], dict) and isinstance(value, dict):
            result[key] = _deep_merge(result[key], value)
        else:
            result[key] = value
    return result


def _section(raw: dict[str, Any], key: str) -> dict[str, Any]:
    """Return a mapping section of the config; a missing or empty one is ``{}``."""
    value = raw.get(key)
    if value is None:
        return {}
    if not isinstance(value, dict):
        raise ValueError(f"'{key}' must be a mapping, got {value!r}")
    return value


def _string_list(value: Any, key: str, allow_empty: bool = False) -> list[str]:
    """Coerce a scalar or list config value to a list of strings."""
    if isinstance(value, str):
        value = [value]
    if not isinstance(value, list) or (not value and not allow_empty):
        kind = "a list" if allow_empty else "a non-empty list"
        raise ValueError(f"'{key}' must be {kind}, got {value!r}")
    return [str(v) for v in value]
