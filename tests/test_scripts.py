"""Tests for agentshift.hooks.scripts module."""

import json
import subprocess
import sys
from pathlib import Path
from unittest.mock import patch

import pytest

from agentshift.hooks.scripts import ScriptResult, ScriptRunner
from agentshift.utils.errors import HookScriptError
from tests.helpers import make_script, read_calls


@pytest.fixture
def script_runner(elf_dir):
    return ScriptRunner(python=sys.executable, elf_dir=elf_dir, timeout=60)


class TestScriptResult:
    def test_success_on_zero(self):
        assert ScriptResult(0, "", "").success is True

    def test_failure_on_non_zero(self):
        assert ScriptResult(2, "", "err").success is False


class TestScriptRunnerCommand:
    """Command construction and display."""

    def test_build_command(self, script_runner, elf_dir):
        script = elf_dir / "query" / "query.py"

        assert script_runner.build_command(script, ("--context",)) == [
            sys.executable,
            str(script),
            "--context",
        ]

    def test_describe_quotes_spaces(self, tmp_path):
        runner = ScriptRunner(python="python3", elf_dir=tmp_path, timeout=5)

        described = runner.describe(Path("/opt/my tools/query.py"), ("--auto",))

        assert described == 'python3 "/opt/my tools/query.py" --auto'


class TestScriptRunnerRun:
    """Runs against real fake scripts."""

    def test_runs_script_with_args(self, script_runner, elf_dir):
        result = script_runner.run(elf_dir / "query" / "checkout.py", "--auto", "--final")

        assert result.success
        assert result.stdout.strip() == "checkout.py ran"
        calls = read_calls(elf_dir)
        assert calls[0]["script"] == "checkout.py"
        assert calls[0]["args"] == ["--auto", "--final"]

    def test_payload_written_to_stdin(self, script_runner, elf_dir):
        script = elf_dir / "hooks" / "learning-loop" / "pre_tool_learning.py"

        script_runner.run(script, payload={"tool": "bash", "session_id": "s1"})

        assert json.loads(read_calls(elf_dir)[0]["stdin"]) == {"tool": "bash", "session_id": "s1"}

    def test_no_payload_gives_empty_stdin(self, script_runner, elf_dir):
        script_runner.run(elf_dir / "query" / "query.py")

        assert read_calls(elf_dir)[0]["stdin"] == ""

    def test_elf_base_path_exported(self, script_runner, elf_dir):
        script_runner.run(elf_dir / "query" / "query.py")

        assert read_calls(elf_dir)[0]["elf_base_path"] == str(elf_dir)

    def test_non_zero_exit_returned(self, script_runner, elf_dir):
        script = make_script(elf_dir / "query" / "failing.py", exit_code=3)

        result = script_runner.run(script)

        assert result.returncode == 3
        assert not result.success

    def test_missing_script_raises(self, script_runner, elf_dir):
        with pytest.raises(HookScriptError) as exc_info:
            script_runner.run(elf_dir / "query" / "missing.py")

        assert "Script not found" in str(exc_info.value)
        assert exc_info.value.script == elf_dir / "query" / "missing.py"

    def test_timeout_raises(self, script_runner, elf_dir):
        with patch(
            "agentshift.hooks.scripts.subprocess.run",
            side_effect=subprocess.TimeoutExpired(cmd="python", timeout=60),
        ):
            with pytest.raises(HookScriptError, match="timed out"):
                script_runner.run(elf_dir / "query" / "query.py")

    def test_interpreter_missing_raises(self, elf_dir):
        runner = ScriptRunner(
            python=str(elf_dir / "no-such-python"), elf_dir=elf_dir, timeout=60
        )

        with pytest.raises(HookScriptError, match="Failed to start"):
            runner.run(elf_dir / "query" / "query.py")

    def test_timeout_passed_to_subprocess(self, elf_dir):
        runner = ScriptRunner(python="python3", elf_dir=elf_dir, timeout=7)

        with patch("agentshift.hooks.scripts.subprocess.run") as mock_run:
            mock_run.return_value = subprocess.CompletedProcess([], 0, "", "")
            runner.run(elf_dir / "query" / "query.py")

        assert mock_run.call_args.kwargs["timeout"] == 7

    def test_run_logged_with_elapsed(self, script_runner, elf_dir):
        script = make_script(elf_dir / "query" / "failing.py", exit_code=3)

        with patch("agentshift.hooks.scripts.log_command") as mock_log:
            script_runner.run(script)

        args = mock_log.call_args.args
        assert "failing.py" in args[0]
        assert args[1] == 3
        assert isinstance(args[2], float) and args[2] >= 0

    def test_timeout_logged_as_killed(self, script_runner, elf_dir):
        with (
            patch(
                "agentshift.hooks.scripts.subprocess.run",
                side_effect=subprocess.TimeoutExpired(cmd="python", timeout=60),
            ),
            patch("agentshift.hooks.scripts.log_command") as mock_log,
        ):
            with pytest.raises(HookScriptError):
                script_runner.run(elf_dir / "query" / "query.py")

        assert mock_log.call_args.args[1] == -1
