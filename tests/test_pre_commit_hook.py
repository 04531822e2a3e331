"""Tests for hooks/pre_commit_hook.py"""

import sys
from unittest.mock import MagicMock, patch

import pre_commit_hook


class TestMain:
    def test_runs_stagegate_check(self):
        with patch("pre_commit_hook.subprocess.run") as mock_run:
            mock_run.return_value = MagicMock(returncode=0)
            assert pre_commit_hook.main() == 0
            cmd = mock_run.call_args[0][0]
            assert cmd == [sys.executable, "-m", "stagegate", "check"]

    def test_propagates_exit_status(self):
        with patch("pre_commit_hook.subprocess.run") as mock_run:
            mock_run.return_value = MagicMock(returncode=2)
            assert pre_commit_hook.main(["--skip-lint"]) == 2
            assert mock_run.call_args[0][0][-1] == "--skip-lint"
