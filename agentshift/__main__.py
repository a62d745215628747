"""Entry point for running agentshift as a module.

This allows running the converter with:
    python -m agentshift [--watch]
"""

from agentshift.cli.convert import app

if __name__ == "__main__":
    app()
