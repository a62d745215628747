"""Configuration for agentshift."""

from agentshift.config.manager import ConfigManager
from agentshift.config.settings import CONFIG_FILE, OUTPUT_DIR, Settings

__all__ = [
    "ConfigManager",
    "Settings",
    "CONFIG_FILE",
    "OUTPUT_DIR",
]
