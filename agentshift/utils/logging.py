"""Log file for conversion runs and hook invocations.

Hooks run as short-lived processes spawned by the host, so their only
durable trace is this file. It is off unless asked for:

Environment Variables:
    AGENTSHIFT_LOG: Set to "true" to enable logging (default: "false")
    AGENTSHIFT_LOG_FILE: Path to log file (default: ~/.agentshift.log)

Each line carries the process id, since several hook processes can append
to the same file.
"""

import logging
import os
from pathlib import Path

LOG_ENABLED = os.environ.get("AGENTSHIFT_LOG", "false").lower() == "true"
LOG_FILE = Path(os.environ.get("AGENTSHIFT_LOG_FILE", str(Path.home() / ".agentshift.log")))

LOG_FORMAT = "[%(asctime)s] [%(process)d] %(message)s"

_logger: logging.Logger | None = None


def setup_logging() -> logging.Logger:
    """Configure the ``agentshift`` logger once per process.

    With AGENTSHIFT_LOG=true, records at DEBUG and above go to LOG_FILE;
    otherwise a NullHandler discards them. Module loggers under
    ``agentshift.*`` propagate here.

    Returns:
        The ``agentshift`` logger
    """
    global _logger

    if _logger is not None:
        return _logger

    logger = logging.getLogger("agentshift")
    logger.handlers.clear()

    if LOG_ENABLED:
        LOG_FILE.parent.mkdir(parents=True, exist_ok=True)
        handler = logging.FileHandler(LOG_FILE, encoding="utf-8")
        handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt="%Y-%m-%d %H:%M:%S"))
        logger.addHandler(handler)
        logger.setLevel(logging.DEBUG)
    else:
        logger.addHandler(logging.NullHandler())

    _logger = logger
    return logger


def get_logger() -> logging.Logger:
    global _logger
    if _logger is None:
        return setup_logging()
    return _logger


def log_message(message: str) -> None:
    """Write an INFO line to the log file (no-op when logging is off)."""
    get_logger().info(message)


def log_command(command: str, exit_code: int, elapsed: float | None = None) -> None:
    """Record one learning script invocation.

    Args:
        command: Command line as shown to the user
        exit_code: Script exit code, -1 if it was killed on timeout
        elapsed: Wall-clock seconds the script ran, if measured
    """
    line = f"SCRIPT: {command} | EXIT_CODE: {exit_code}"
    if elapsed is not None:
        line += f" | ELAPSED: {elapsed:.2f}s"
    get_logger().info(line)


__all__ = [
    "LOG_ENABLED",
    "LOG_FILE",
    "LOG_FORMAT",
    "setup_logging",
    "get_logger",
    "log_message",
    "log_command",
]
