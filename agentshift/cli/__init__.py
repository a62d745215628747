"""Command-line entry points for agentshift."""

from agentshift.cli.convert import app as convert_app
from agentshift.cli.hooks import app as hooks_app

__all__ = ["convert_app", "hooks_app"]
