"""Integration tests for help text and global flags."""

import pytest
from click.testing import CliRunner

from socialnet import __version__
from socialnet.cli.commands import main


@pytest.fixture
def runner() -> CliRunner:
    """Create CLI runner for tests."""
    return CliRunner()


class TestMainHelpText:
    """Tests for socialnet --help output."""

    def test_main_help_lists_all_commands(self, runner: CliRunner) -> None:
        result = runner.invoke(main, ["--help"])
        assert result.exit_code == 0, f"Expected exit 0, got {result.exit_code}: {result.output}"

        for command in ("shell", "run", "config"):
            assert command in result.output, f"Expected '{command}' command in help"

    def test_global_flags_documented(self, runner: CliRunner) -> None:
        result = runner.invoke(main, ["--help"])

        assert "--verbose" in result.output
        assert "--debug" in result.output
        assert "--config" in result.output

    def test_run_help_lists_script_commands(self, runner: CliRunner) -> None:
        result = runner.invoke(main, ["run", "--help"])
        assert result.exit_code == 0

        assert "recommend" in result.output
        assert "--strict" in result.output

    def test_version(self, runner: CliRunner) -> None:
        result = runner.invoke(main, ["--version"])

        assert result.exit_code == 0
        assert __version__ in result.output
