"""Smoke tests for CLI command structure."""

import pytest
from typer.testing import CliRunner

from playsort.infrastructure.cli.app import app


@pytest.fixture
def runner():
    """CLI test runner."""
    return CliRunner()


class TestCoreCommandStructure:
    """Test that core commands exist and are accessible."""

    def test_main_help_shows_commands(self, runner):
        result = runner.invoke(app, ["--help"])

        assert result.exit_code == 0
        for command in ("sort", "reverse", "shuffle", "run", "modes", "version"):
            assert command in result.stdout

    def test_version_command_works(self, runner):
        result = runner.invoke(app, ["version"])

        assert result.exit_code == 0
        assert "playsort" in result.stdout

    @pytest.mark.parametrize("command", ["sort", "reverse", "shuffle", "run"])
    def test_playlist_commands_have_help(self, runner, command):
        result = runner.invoke(app, [command, "--help"])

        assert result.exit_code == 0
        assert "No such command" not in result.stdout

    def test_no_args_shows_help(self, runner):
        result = runner.invoke(app, [])

        assert "Usage" in result.stdout
