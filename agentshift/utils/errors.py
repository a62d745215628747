"""Custom exceptions and exit codes for agentshift.

This module defines the exit codes and exception hierarchy used by both
command-line entry points.
"""

from enum import IntEnum
from pathlib import Path
from typing import ClassVar


class ExitCode(IntEnum):
    """Process exit codes reported by the CLIs."""

    SUCCESS = 0
    GENERAL_ERROR = 1
    USER_CANCELLED = 2
    CONFIG_ERROR = 3


class AgentShiftError(Exception):
    """Base exception for agentshift errors.

    Each exception type has an associated exit code for proper error
    reporting by the CLI layer.
    """

    _default_exit_code: ClassVar[ExitCode] = ExitCode.GENERAL_ERROR

    def __init__(self, message: str, exit_code: ExitCode | None = None) -> None:
        """Initialize the exception."""
        super().__init__(message)
        self._exit_code = exit_code

    @property
    def exit_code(self) -> ExitCode:
        """Get the exit code for this exception."""
        if self._exit_code is not None:
            return self._exit_code
        return self.__class__._default_exit_code


class ConfigError(AgentShiftError):
    """Configuration value could not be parsed.

    Raised when:
    - A numeric setting holds a non-numeric value
    - A numeric setting is out of range
    """

    _default_exit_code: ClassVar[ExitCode] = ExitCode.CONFIG_ERROR


class UserCancelledError(AgentShiftError):
    """User cancelled the operation (Ctrl+C)."""

    _default_exit_code: ClassVar[ExitCode] = ExitCode.USER_CANCELLED


class HookScriptError(AgentShiftError):
    """An external learning script could not be run to completion.

    Raised for a missing script, a failed start or a timeout. A script
    that runs and exits non-zero is a result, not an error.

    Attributes:
        script: Path of the script that failed
    """

    def __init__(self, message: str, script: Path) -> None:
        super().__init__(message)
        self.script = script


__all__ = [
    "ExitCode",
    "AgentShiftError",
    "ConfigError",
    "UserCancelledError",
    "HookScriptError",
]
