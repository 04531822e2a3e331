"""Tests for the stagegate init command."""

import argparse
import os
from unittest.mock import patch

import yaml

from stagegate.config import StageGateConfig
from stagegate.init_command import (
    _build_hook_script,
    _build_precommit_config,
    _build_stagegate_yml,
    init_command,
)


class TestTemplates:
    def test_stagegate_yml_loads_to_defaults(self, tmp_path):
        cfg_file = tmp_path / ".stagegate.yml"
        cfg_file.write_text(_build_stagegate_yml("rs"))
        loaded = StageGateConfig.load(cfg_file)
        defaults = StageGateConfig.load()
        assert loaded.extension == defaults.extension
        assert loaded.license_lines == defaults.license_lines
        assert loaded.formatter_command == defaults.formatter_command
        assert loaded.lint_steps == defaults.lint_steps

    def test_stagegate_yml_has_chosen_extension(self):
        assert "extension: c\n" in _build_stagegate_yml("c")

    def test_hook_script_runs_check(self):
        script = _build_hook_script()
        assert script.startswith("#!/bin/sh")
        assert "-m stagegate check" in script

    def test_precommit_config_is_valid_yaml(self):
        data = yaml.safe_load(_build_precommit_config())
        hook = data["repos"][0]["hooks"][0]
        assert hook["id"] == "stagegate"
        assert hook["pass_filenames"] is False


class TestInitCommand:
    def _args(self, path, **kwargs):
        defaults = {"path": str(path), "extension": None, "no_hook": False, "pre_commit_config": False}
        defaults.update(kwargs)
        return argparse.Namespace(**defaults)

    def test_writes_config_and_hook(self, tmp_path):
        (tmp_path / ".git").mkdir()
        assert init_command(self._args(tmp_path)) == 0
        assert (tmp_path / ".stagegate.yml").exists()
        hook = tmp_path / ".git" / "hooks" / "pre-commit"
        assert hook.exists()
        assert os.access(hook, os.X_OK)

    def test_no_git_repository(self, tmp_path, capsys):
        assert init_command(self._args(tmp_path)) == 0
        assert (tmp_path / ".stagegate.yml").exists()
        assert "hook not installed" in capsys.readouterr().out

    def test_no_hook(self, tmp_path):
        (tmp_path / ".git").mkdir()
        init_command(self._args(tmp_path, no_hook=True))
        assert not (tmp_path / ".git" / "hooks" / "pre-commit").exists()

    def test_pre_commit_config(self, tmp_path):
        init_command(self._args(tmp_path, no_hook=True, pre_commit_config=True))
        assert (tmp_path / ".pre-commit-config.yaml").exists()

    def test_extension_option(self, tmp_path):
        init_command(self._args(tmp_path, no_hook=True, extension=".c"))
        assert "extension: c\n" in (tmp_path / ".stagegate.yml").read_text()

    def test_existing_file_kept_when_declined(self, tmp_path):
        cfg = tmp_path / ".stagegate.yml"
        cfg.write_text("extension: py\n")
        with patch("builtins.input", return_value="n"):
            init_command(self._args(tmp_path, no_hook=True))
        assert cfg.read_text() == "extension: py\n"

    def test_existing_file_overwritten_when_confirmed(self, tmp_path):
        cfg = tmp_path / ".stagegate.yml"
        cfg.write_text("extension: py\n")
        with patch("builtins.input", return_value="y"):
            init_command(self._args(tmp_path, no_hook=True))
        assert "extension: rs" in cfg.read_text()
