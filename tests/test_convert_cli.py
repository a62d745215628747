"""Tests for agentshift.cli.convert module."""

from unittest.mock import patch

import pytest
from typer.testing import CliRunner

from agentshift import __version__
from agentshift.cli.convert import app
from agentshift.utils.errors import AgentShiftError, ExitCode, UserCancelledError

runner = CliRunner()


@pytest.fixture
def output_dir(tmp_path, monkeypatch):
    """Redirect the fixed output directory into tmp_path."""
    out = tmp_path / "converted-opencode"
    monkeypatch.setattr("agentshift.cli.convert.OUTPUT_DIR", out)
    return out


class TestConvertVersion:
    def test_version_flag(self):
        """--version shows version and exits."""
        result = runner.invoke(app, ["--version"])

        assert result.exit_code == 0
        assert __version__ in result.stdout

    def test_short_version_flag(self):
        """-v shows version and exits."""
        result = runner.invoke(app, ["-v"])

        assert result.exit_code == 0
        assert __version__ in result.stdout


class TestConvertRun:
    """Runs of the converter against the current directory."""

    def test_converts_current_directory(self, agent_tree, output_dir, monkeypatch):
        """Agents under cwd are written to the output directory."""
        monkeypatch.chdir(agent_tree)

        result = runner.invoke(app, [])

        assert result.exit_code == 0
        assert (output_dir / "reviewer.md").is_file()
        assert (output_dir / "team" / "nested" / "writer.md").is_file()
        assert "Converted: reviewer.md" in result.stdout
        assert "Conversion complete!" in result.stdout

    def test_no_agents_found(self, tmp_path, output_dir, monkeypatch):
        """An empty tree reports nothing found and still succeeds."""
        source = tmp_path / "empty"
        source.mkdir()
        monkeypatch.chdir(source)

        result = runner.invoke(app, [])

        assert result.exit_code == 0
        assert "No Claude agent files found" in result.stdout
        assert "Conversion complete!" not in result.stdout
        assert output_dir.is_dir()

    def test_watch_flag_warns(self, agent_tree, output_dir, monkeypatch):
        """--watch is accepted but only runs once."""
        monkeypatch.chdir(agent_tree)

        result = runner.invoke(app, ["--watch"])

        assert result.exit_code == 0
        assert "--watch is not implemented" in result.stdout
        assert (output_dir / "reviewer.md").is_file()

    def test_application_error_exit_code(self, agent_tree, output_dir, monkeypatch):
        """AgentShiftError maps to its exit code."""
        monkeypatch.chdir(agent_tree)

        with patch(
            "agentshift.cli.convert.convert_agents",
            side_effect=AgentShiftError("boom", ExitCode.CONFIG_ERROR),
        ):
            result = runner.invoke(app, [])

        assert result.exit_code == ExitCode.CONFIG_ERROR

    def test_keyboard_interrupt(self, agent_tree, output_dir, monkeypatch):
        """Ctrl+C exits with the cancelled code."""
        monkeypatch.chdir(agent_tree)

        with patch("agentshift.cli.convert.convert_agents", side_effect=KeyboardInterrupt):
            result = runner.invoke(app, [])

        assert result.exit_code == ExitCode.USER_CANCELLED

    def test_filesystem_error_propagates(self, agent_tree, output_dir, monkeypatch):
        """Unexpected I/O errors end the run with a non-zero exit."""
        monkeypatch.chdir(agent_tree)

        with patch(
            "agentshift.cli.convert.convert_agents", side_effect=PermissionError("denied")
        ):
            result = runner.invoke(app, [])

        assert result.exit_code != 0
        assert isinstance(result.exception, PermissionError)

    def test_cancelled_mid_run(self, agent_tree, output_dir, monkeypatch):
        """A cancellation during writing is reported, not raised."""
        monkeypatch.chdir(agent_tree)

        with patch(
            "agentshift.cli.convert.convert_agents",
            side_effect=UserCancelledError("Conversion cancelled after 1 of 2 file(s)"),
        ):
            result = runner.invoke(app, [])

        assert result.exit_code == ExitCode.USER_CANCELLED
        assert "Conversion cancelled after 1 of 2 file(s)" in result.stdout
