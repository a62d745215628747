"""Settings dataclass and fixed constants for agentshift.

The converter is deliberately not configurable: its output location and
rewrite vocabulary are module constants. The learning hooks read their
locations from the Settings dataclass, loaded by ConfigManager.
"""

from __future__ import annotations

import os
import shutil
from dataclasses import dataclass, field
from pathlib import Path

# --- Converter constants ---

# Output root sits next to the agentshift package directory
PROGRAM_DIR = Path(__file__).resolve().parent.parent.parent
OUTPUT_DIR_NAME = "converted-opencode"
OUTPUT_DIR = PROGRAM_DIR / OUTPUT_DIR_NAME

# Directory names used by the body path rewrites. Identical today; the
# rewrite rules are built from these so they can diverge later.
SOURCE_CONFIG_DIR = ".opencode"
TARGET_CONFIG_DIR = ".opencode"
LEARNING_DIR_NAME = "emergent-learning"

SOURCE_CLI_NAME = "claude"
TARGET_MODEL = "opencode/big-pickle"

# --- Learning hooks defaults ---

DEFAULT_OPENCODE_DIR = Path.home() / ".opencode"
DEFAULT_HOOK_TIMEOUT_SECONDS = 120
SESSION_STATE_FILE_NAME = "agentshift_session.json"


@dataclass
class Settings:
    """Configuration settings for the learning hooks.

    All settings have defaults and can be overridden from the
    configuration file (~/.agentshift-config) or the environment.

    Attributes:
        opencode_dir: OpenCode home directory (empty = ~/.opencode)
        elf_base_path: Learning system root (empty = <opencode_dir>/emergent-learning)
        elf_python: Interpreter used to run the learning scripts (empty = auto-detect)
        hook_timeout_seconds: Per-script timeout for hook invocations
    """

    opencode_dir: str = ""
    elf_base_path: str = ""
    elf_python: str = ""
    hook_timeout_seconds: int = DEFAULT_HOOK_TIMEOUT_SECONDS

    # Config key to attribute mapping
    _key_mapping: dict[str, str] = field(
        default_factory=lambda: {
            "OPENCODE_DIR": "opencode_dir",
            "ELF_BASE_PATH": "elf_base_path",
            "ELF_PYTHON": "elf_python",
            "HOOK_TIMEOUT_SECONDS": "hook_timeout_seconds",
        },
        repr=False,
    )

    def get_attribute_for_key(self, key: str) -> str | None:
        """Get the attribute name for a config key."""
        return self._key_mapping.get(key)

    @classmethod
    def get_config_keys(cls) -> list[str]:
        """Get list of all valid configuration keys."""
        temp = cls()
        return list(temp._key_mapping.keys())

    @property
    def elf_dir(self) -> Path:
        """Root directory of the learning system."""
        if self.elf_base_path:
            return Path(self.elf_base_path).expanduser()
        opencode = DEFAULT_OPENCODE_DIR
        if self.opencode_dir:
            opencode = Path(self.opencode_dir).expanduser()
        return opencode / LEARNING_DIR_NAME

    @property
    def hooks_dir(self) -> Path:
        return self.elf_dir / "hooks" / "learning-loop"

    @property
    def query_dir(self) -> Path:
        return self.elf_dir / "query"

    @property
    def pre_tool_script(self) -> Path:
        return self.hooks_dir / "pre_tool_learning.py"

    @property
    def post_tool_script(self) -> Path:
        return self.hooks_dir / "post_tool_learning.py"

    @property
    def checkin_script(self) -> Path:
        return self.query_dir / "query.py"

    @property
    def checkout_script(self) -> Path:
        return self.query_dir / "checkout.py"

    @property
    def session_state_file(self) -> Path:
        return self.elf_dir / SESSION_STATE_FILE_NAME

    def resolve_python(self) -> str:
        """Pick the interpreter for the learning scripts.

        Candidates, first existing wins: the configured interpreter, the
        learning system's own virtualenv (POSIX then Windows layout),
        ``python3``, ``python``. Bare command names are looked up on PATH.
        """
        candidates = [
            self.elf_python,
            str(self.elf_dir / ".venv" / "bin" / "python"),
            str(self.elf_dir / ".venv" / "Scripts" / "python.exe"),
            "python3",
            "python",
        ]
        for candidate in candidates:
            if not candidate:
                continue
            if os.sep in candidate or "/" in candidate:
                if Path(candidate).exists():
                    return candidate
            elif shutil.which(candidate):
                return candidate
        return "python"


# Default configuration file path
CONFIG_FILE = Path.home() / ".agentshift-config"


__all__ = [
    "Settings",
    "CONFIG_FILE",
    "PROGRAM_DIR",
    "OUTPUT_DIR",
    "OUTPUT_DIR_NAME",
    "SOURCE_CONFIG_DIR",
    "TARGET_CONFIG_DIR",
    "LEARNING_DIR_NAME",
    "SOURCE_CLI_NAME",
    "TARGET_MODEL",
    "DEFAULT_HOOK_TIMEOUT_SECONDS",
    "SESSION_STATE_FILE_NAME",
]
