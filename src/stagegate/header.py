"""License and copyright header validation.

A header is the first five lines of a source file::

    // SPDX-License-Identifier: MIT OR Apache-2.0
    //
    // Copyright (c) 2023 Some Company
    //
    // Author: Jane Doe <jane@example.com>

Lines 2 and 4 are separators and are not inspected.
"""

from __future__ import annotations

import re
import sys
from collections.abc import Callable, Sequence
from dataclasses import dataclass
from itertools import islice
from pathlib import Path

from stagegate.config import StageGateConfig
from stagegate.models import HEADER_FORMAT_INCORRECT, UNREADABLE, ValidationOutcome

HEADER_LINE_COUNT = 5


@dataclass(frozen=True)
class HeaderRule:
    """A requirement on one line of the header."""

    line_index: int
    description: str
    matches: Callable[[str], bool]


def exact_line(line_index: int, accepted: Sequence[str]) -> HeaderRule:
    """Rule requiring the line to equal one of ``accepted``."""
    choices = frozenset(accepted)
    return HeaderRule(
        line_index=line_index,
        description="one of: " + ", ".join(repr(a) for a in accepted),
        matches=lambda line: line in choices,
    )


def prefixed_line(line_index: int, comment_prefix: str, keyword: str) -> HeaderRule:
    """Rule requiring ``<prefix><whitespace><keyword>`` at the start of the line."""
    pattern = re.compile(rf"{re.escape(comment_prefix)}\s+{re.escape(keyword)}")
    return HeaderRule(
        line_index=line_index,
        description=pattern.pattern,
        matches=lambda line: pattern.match(line) is not None,
    )


def build_rules(config: StageGateConfig) -> list[HeaderRule]:
    """Build the header grammar, in evaluation order."""
    return [
        exact_line(0, config.license_lines),
        prefixed_line(2, config.comment_prefix, "Copyright"),
        prefixed_line(4, config.comment_prefix, "Author:"),
    ]


def read_header(path: str | Path) -> list[str]:
    """Read the first five lines of a file, padded with empty strings.

    Raises:
        OSError: the file cannot be opened or read.
        UnicodeDecodeError: the file is not UTF-8 text.
    """
    with open(path, encoding="utf-8", newline="") as f:
        lines = [line.rstrip("\r\n") for line in islice(f, HEADER_LINE_COUNT)]
    lines.extend([""] * (HEADER_LINE_COUNT - len(lines)))
    return lines


class HeaderValidator:
    """Decide whether a file starts with the required header."""

    def __init__(self, rules: list[HeaderRule]) -> None:
        self.rules = rules

    @classmethod
    def from_config(cls, config: StageGateConfig) -> HeaderValidator:
        return cls(build_rules(config))

    def check_lines(self, lines: Sequence[str]) -> HeaderRule | None:
        """Return the first rule the lines violate, or None."""
        for rule in self.rules:
            line = lines[rule.line_index] if rule.line_index < len(lines) else ""
            if not rule.matches(line):
                return rule
        return None

    def validate(self, path: str | Path) -> ValidationOutcome:
        """Validate the header of ``path``.

        Prints a diagnostic naming the file to stderr when it fails.
        """
        path_str = str(path)
        try:
            lines = read_header(path)
        except (OSError, UnicodeDecodeError):
            print(f"❌ Cannot read {path_str}", file=sys.stderr)
            return ValidationOutcome.fail(path_str, UNREADABLE)

        if self.check_lines(lines) is not None:
            print(f"❌ Header format incorrect in {path_str}", file=sys.stderr)
            return ValidationOutcome.fail(path_str, HEADER_FORMAT_INCORRECT)
        return ValidationOutcome.ok(path_str)
