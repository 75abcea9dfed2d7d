"""
Smoke tests for the click command line.
"""

from __future__ import annotations

import logging
from pathlib import Path

import pytest
import yaml
from click.testing import CliRunner

from dayboard.backend.cli.main import main


@pytest.fixture
def runner() -> CliRunner:
    return CliRunner()


@pytest.fixture
def config_file(tmp_path: Path) -> str:
    path = tmp_path / "config.yaml"
    path.write_text(
        yaml.dump(
            {
                "backend": {"mode": "memory"},
                "storage": {"path": str(tmp_path / "storage.json")},
                "logging": {"level": "WARNING", "file": None},
            }
        ),
        encoding="utf-8",
    )
    return str(path)


@pytest.fixture(autouse=True)
def _restore_root_logging():
    root = logging.getLogger()
    handlers = list(root.handlers)
    level = root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)


class TestCommands:
    def test_help_lists_commands(self, runner: CliRunner) -> None:
        result = runner.invoke(main, ["--help"])
        assert result.exit_code == 0
        for command in ("serve", "agenda", "terms", "check-deps"):
            assert command in result.output

    def test_check_deps(self, runner: CliRunner) -> None:
        result = runner.invoke(main, ["check-deps"])
        assert result.exit_code == 0

    def test_check_deps_flags_unknown_timezone(self, runner: CliRunner) -> None:
        result = runner.invoke(main, ["check-deps"], env={"DAYBOARD_TIMEZONE": "Mars/Olympus_Mons"})
        assert result.exit_code == 1
        assert "Invalid timezone" in result.output

    def test_terms(self, runner: CliRunner, config_file: str, tmp_path: Path) -> None:
        result = runner.invoke(main, ["-c", config_file, "terms"])
        assert result.exit_code == 0
        assert "Terms for" in result.output
        assert (tmp_path / "storage.json").exists()

    def test_agenda_needs_hosted_backend(self, runner: CliRunner, config_file: str) -> None:
        # The in-memory backend starts empty in every process.
        result = runner.invoke(main, ["-c", config_file, "agenda", "-u", "alice", "-p", "secret1"])
        assert result.exit_code == 1
        assert "agenda needs a hosted backend" in result.output

    def test_missing_config_file(self, runner: CliRunner) -> None:
        result = runner.invoke(main, ["-c", "/nonexistent/config.yaml", "terms"])
        assert result.exit_code != 0
