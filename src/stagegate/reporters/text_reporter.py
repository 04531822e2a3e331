"""Plain-text run summary for terminals."""

from __future__ import annotations

from pathlib import Path

from stagegate.models import RunResult


class TextReporter:
    """Render a RunResult as a short human-readable summary."""

    def render(self, result: RunResult) -> str:
        checked = len(result.checked)
        if not result.failed:
            return f"✅ {checked} file(s) checked, no problems found"

        failed_files = {f.path for f in result.failures}
        lines = [
            f"🚫 {len(result.failures)} problem(s) in {len(failed_files)} "
            f"of {checked} checked file(s):"
        ]
        for failure in result.failures:
            lines.append(f"   {failure.path}: {failure.check} ({failure.reason})")
        return "\n".join(lines)

    def write(self, result: RunResult, output_path: str) -> None:
        path = Path(output_path)
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(self.render(result) + "\n", encoding="utf-8")
