"""Runner for the external learning scripts.

Each call is a blocking ``subprocess.run`` with a timeout. Scripts get the
learning root in ``ELF_BASE_PATH`` and, when given, a JSON payload on stdin.
"""

from __future__ import annotations

import json
import os
import subprocess
import time
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from agentshift.utils.errors import HookScriptError
from agentshift.utils.logging import log_command, log_message

# Output beyond this is truncated in logs and status messages
MAX_CAPTURED_OUTPUT = 4000


@dataclass(frozen=True)
class ScriptResult:
    """Completed script invocation."""

    returncode: int
    stdout: str
    stderr: str

    @property
    def success(self) -> bool:
        return self.returncode == 0


class ScriptRunner:
    """Runs learning scripts with a fixed interpreter.

    Attributes:
        python: Interpreter command
        elf_dir: Learning system root, exported as ELF_BASE_PATH
        timeout: Seconds before a script is killed
    """

    def __init__(self, python: str, elf_dir: Path, timeout: float) -> None:
        self.python = python
        self.elf_dir = elf_dir
        self.timeout = timeout

    def build_command(self, script: Path, args: tuple[str, ...] = ()) -> list[str]:
        return [self.python, str(script), *args]

    def describe(self, script: Path, args: tuple[str, ...] = ()) -> str:
        """Human-readable command line for logs and status output."""
        parts = self.build_command(script, args)
        return " ".join(f'"{part}"' if " " in part else part for part in parts)

    def run(
        self,
        script: Path,
        *args: str,
        payload: dict[str, Any] | None = None,
    ) -> ScriptResult:
        """Run a script and wait for it.

        A non-zero exit is returned, not raised; callers decide whether it
        matters.

        Args:
            script: Path to the Python script
            *args: Extra command-line arguments
            payload: Optional JSON-serializable data written to stdin

        Returns:
            ScriptResult with exit code and captured output

        Raises:
            HookScriptError: If the script is missing, cannot be started,
                or times out
        """
        if not script.exists():
            raise HookScriptError(f"Script not found: {script}", script=script)

        cmd = self.build_command(script, args)
        env = {**os.environ, "ELF_BASE_PATH": str(self.elf_dir)}
        stdin_data = json.dumps(payload) if payload is not None else None

        started = time.monotonic()
        try:
            result = subprocess.run(
                cmd,
                input=stdin_data,
                stdin=subprocess.DEVNULL if stdin_data is None else None,
                capture_output=True,
                text=True,
                encoding="utf-8",
                errors="replace",
                env=env,
                timeout=self.timeout,
            )
        except subprocess.TimeoutExpired as e:
            log_command(self.describe(script, args), -1, time.monotonic() - started)
            raise HookScriptError(
                f"Script timed out after {self.timeout}s: {script}", script=script
            ) from e
        except OSError as e:
            raise HookScriptError(f"Failed to start {script}: {e}", script=script) from e

        log_command(self.describe(script, args), result.returncode, time.monotonic() - started)
        if result.returncode != 0 and result.stderr:
            log_message(f"  stderr: {result.stderr[:MAX_CAPTURED_OUTPUT]}")

        return ScriptResult(
            returncode=result.returncode,
            stdout=result.stdout,
            stderr=result.stderr,
        )


__all__ = [
    "ScriptResult",
    "ScriptRunner",
    "MAX_CAPTURED_OUTPUT",
]
