"""agentshift - Claude-to-OpenCode agent conversion and learning hooks.

This package provides a converter that rewrites Claude agent definition
files into the OpenCode format, and a dispatcher that forwards host
session events to the external learning scripts.
"""

__version__ = "0.1.0"
SCRIPT_NAME = "agentshift"

__all__ = [
    "__version__",
    "SCRIPT_NAME",
]
