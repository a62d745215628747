"""Test helper utilities for agentshift."""

from tests.helpers.scripts import make_script, read_calls

__all__ = ["make_script", "read_calls"]
