"""Shared test fixtures for stagegate tests."""

from __future__ import annotations

import pytest

from stagegate.config import StageGateConfig
from stagegate.tools import ToolRunner

VALID_HEADER = [
    "// SPDX-License-Identifier: MIT OR Apache-2.0",
    "//",
    "// Copyright (c) 2023 SUSE LLC",
    "//",
    "// Author: Joerg Roedel <jroedel@suse.de>",
]


class FakeRunner(ToolRunner):
    """ToolRunner double returning scripted exit statuses.

    ``statuses`` maps a program-plus-marker key to an exit status: the first
    key contained in the joined command line wins. Unmatched commands pass.
    """

    def __init__(self, statuses: dict[str, int] | None = None) -> None:
        self.statuses = statuses or {}
        self.calls: list[tuple[list[str], dict[str, str] | None, bool]] = []

    def run_check(self, args, env=None, quiet=False):
        self.calls.append((list(args), env, quiet))
        line = " ".join(args)
        for key, status in self.statuses.items():
            if key in line:
                return status
        return 0

    def commands(self) -> list[str]:
        return [" ".join(args) for args, _, _ in self.calls]


@pytest.fixture
def config():
    return StageGateConfig.load()


@pytest.fixture
def runner():
    return FakeRunner()


@pytest.fixture
def write_source(tmp_path):
    """Write a file from a list of lines and return its path as a string."""

    def _write(name: str, lines: list[str]) -> str:
        path = tmp_path / name
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text("\n".join(lines) + "\n", encoding="utf-8")
        return str(path)

    return _write


@pytest.fixture
def make_runner():
    return FakeRunner


@pytest.fixture
def valid_header():
    return list(VALID_HEADER)
