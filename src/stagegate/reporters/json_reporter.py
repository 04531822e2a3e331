"""JSON run reporter for stagegate."""

from __future__ import annotations

import json

from stagegate.models import RunResult


class JSONReporter:
    """Serialize a RunResult to JSON format."""

    def render(self, result: RunResult) -> str:
        """Render the result as a JSON string.

        Args:
            result: The per-file result to serialize.

        Returns:
            A formatted JSON string with status, checked files and failures.
        """
        return json.dumps(result.to_dict(), indent=2, ensure_ascii=False)

    def write(self, result: RunResult, output_path: str) -> None:
        """Write the result to a JSON file.

        Args:
            result: The per-file result to serialize.
            output_path: Path to the output file.
        """
        from pathlib import Path

        path = Path(output_path)
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(self.render(result), encoding="utf-8")
