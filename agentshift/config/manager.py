"""Configuration manager for agentshift.

Loads the learning-hook settings with a cascading hierarchy:

    1. Environment Variables (highest priority)
    2. Global Config (~/.agentshift-config)
    3. Built-in Defaults (lowest priority)
"""

from __future__ import annotations

import os
import re
from pathlib import Path

from agentshift.config.settings import CONFIG_FILE, Settings
from agentshift.utils.console import console, print_fields, print_header, print_info
from agentshift.utils.errors import ConfigError
from agentshift.utils.logging import log_message


class ConfigManager:
    """Loads configuration from the config file and environment.

    The config file uses the shell-style ``KEY=VALUE`` or ``KEY="VALUE"``
    format and is parsed line by line; comments and unknown keys are ignored.

    Attributes:
        settings: Current settings instance
        config_path: Path to the global config file
    """

    def __init__(self, config_path: Path | None = None) -> None:
        self.config_path = config_path or CONFIG_FILE
        self.settings = Settings()
        self._raw_values: dict[str, str] = {}
        self._config_sources: dict[str, str] = {}

    def load(self) -> Settings:
        """Load configuration from all sources with cascading precedence.

        Each call starts from clean defaults, so repeated loads never keep
        stale values.

        Returns:
            Settings instance with loaded values

        Raises:
            ConfigError: If a numeric value cannot be parsed
        """
        self.settings = Settings()
        self._raw_values = {}
        self._config_sources = {}

        if self.config_path.exists():
            log_message(f"Loading configuration from {self.config_path}")
            self._load_file(self.config_path)

        self._load_environment()

        for key, value in self._raw_values.items():
            self._apply_value_to_settings(key, value)

        log_message(f"Configuration loaded successfully ({len(self._raw_values)} keys)")
        return self.settings

    def _load_file(self, path: Path) -> None:
        """Load key=value pairs from a config file."""
        pattern = re.compile(r"^([a-zA-Z_][a-zA-Z0-9_]*)=(.*)$")

        with path.open(encoding="utf-8") as f:
            for line in f:
                line = line.strip()

                if not line or line.startswith("#"):
                    continue

                match = pattern.match(line)
                if match:
                    key, value = match.groups()
                    if len(value) >= 2 and value[0] == value[-1] and value[0] in "\"'":
                        value = value[1:-1]
                    self._raw_values[key] = value
                    self._config_sources[key] = "file"

    def _load_environment(self) -> None:
        """Override config with environment variables for known keys only."""
        for key in Settings.get_config_keys():
            env_value = os.environ.get(key)
            if env_value is not None:
                self._raw_values[key] = env_value
                self._config_sources[key] = "environment"

    def _apply_value_to_settings(self, key: str, value: str) -> None:
        """Apply a raw config value to the settings object."""
        attr = self.settings.get_attribute_for_key(key)
        if attr is None:
            return  # Unknown key, ignore

        current_value = getattr(self.settings, attr)

        if isinstance(current_value, int):
            try:
                parsed = int(value)
            except ValueError as e:
                raise ConfigError(f"{key} must be an integer, got {value!r}") from e
            if parsed <= 0:
                raise ConfigError(f"{key} must be positive, got {parsed}")
            setattr(self.settings, attr, parsed)
        else:
            setattr(self.settings, attr, value)

    def get_source(self, key: str) -> str:
        """Return where a key's effective value came from."""
        return self._config_sources.get(key, "default")

    def show(self) -> None:
        """Display the effective hook configuration."""
        print_header("Learning Hooks Configuration")
        print_info(f"Config file: {self.config_path}")
        console.print()

        s = self.settings
        print_fields(
            "Locations",
            {
                "Learning root": f"{s.elf_dir} ({self.get_source('ELF_BASE_PATH')})",
                "Hooks": s.hooks_dir,
                "Query": s.query_dir,
                "Session state": s.session_state_file,
            },
        )
        print_fields(
            "Execution",
            {
                "Python": f"{s.resolve_python()} ({self.get_source('ELF_PYTHON')})",
                "Timeout": f"{s.hook_timeout_seconds}s",
            },
        )


__all__ = ["ConfigManager"]
