"""Run result reporters for stagegate."""

from stagegate.reporters.json_reporter import JSONReporter
from stagegate.reporters.text_reporter import TextReporter

__all__ = ["JSONReporter", "TextReporter"]
