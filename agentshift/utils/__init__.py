"""Utility modules for agentshift.

This package contains:
- console: Rich-based terminal output utilities
- errors: Custom exceptions and exit codes
- logging: Logging configuration
"""

from agentshift.utils.console import (
    console,
    print_error,
    print_header,
    print_info,
    print_step,
    print_success,
    print_warning,
)
from agentshift.utils.errors import (
    AgentShiftError,
    ConfigError,
    ExitCode,
    HookScriptError,
    UserCancelledError,
)
from agentshift.utils.logging import log_command, log_message, setup_logging

__all__ = [
    # Console
    "console",
    "print_error",
    "print_success",
    "print_warning",
    "print_info",
    "print_header",
    "print_step",
    # Errors
    "ExitCode",
    "AgentShiftError",
    "ConfigError",
    "UserCancelledError",
    "HookScriptError",
    # Logging
    "setup_logging",
    "log_message",
    "log_command",
]
