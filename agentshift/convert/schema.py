"""Claude → OpenCode frontmatter mapping.

Translates the header of a Claude agent definition into the fields
OpenCode understands:

    name, description    copied as-is
    tools                → permissions (six capability flags)
    model                → model (alias table, always resolved)
    permissionMode       → mode ("subagent" for plan, else "default")
    skills, hooks        normalized to lists
"""

from __future__ import annotations

from dataclasses import astuple, dataclass, fields
from typing import Any

from agentshift.config.settings import TARGET_MODEL
from agentshift.convert.frontmatter import Frontmatter, FrontmatterValue

# Claude tool name for each OpenCode capability, in output order
CAPABILITY_TOOLS: dict[str, str] = {
    "read": "Read",
    "grep": "Grep",
    "glob": "Glob",
    "edit": "Edit",
    "write": "Write",
    "bash": "Bash",
}

MODEL_ALIASES: dict[str, str] = {
    "sonnet": TARGET_MODEL,
    "opus": TARGET_MODEL,
    "haiku": TARGET_MODEL,
    "gpt-4": TARGET_MODEL,
    "gpt-4o": TARGET_MODEL,
}
FALLBACK_MODEL = TARGET_MODEL

PLAN_PERMISSION_MODE = "plan"
MODE_SUBAGENT = "subagent"
MODE_DEFAULT = "default"


@dataclass(frozen=True)
class Permissions:
    """OpenCode capability flags derived from a Claude tool list."""

    read: bool = False
    grep: bool = False
    glob: bool = False
    edit: bool = False
    write: bool = False
    bash: bool = False

    @classmethod
    def from_tools(cls, tools: list[str]) -> Permissions:
        """Grant each capability whose Claude tool name is in ``tools``.

        Matching is exact and case-sensitive: ``"read"`` or ``"ReadFile"``
        grant nothing.
        """
        return cls(**{cap: tool in tools for cap, tool in CAPABILITY_TOOLS.items()})

    def granted(self) -> list[str]:
        """Names of granted capabilities, in vocabulary order."""
        return [f.name for f, allowed in zip(fields(self), astuple(self)) if allowed]


def normalize_list(value: FrontmatterValue) -> list[str]:
    """Return list values unchanged; split strings on commas."""
    if isinstance(value, list):
        return value
    return [item.strip() for item in value.split(",")]


def map_model(model: Any) -> str:
    """Resolve a Claude model alias to an OpenCode model id.

    Total: unknown, empty and missing values resolve to FALLBACK_MODEL.
    """
    if isinstance(model, str):
        return MODEL_ALIASES.get(model) or FALLBACK_MODEL
    return FALLBACK_MODEL


def map_mode(permission_mode: Any) -> str:
    return MODE_SUBAGENT if permission_mode == PLAN_PERMISSION_MODE else MODE_DEFAULT


def map_frontmatter(claude: Frontmatter) -> dict[str, Any]:
    """Build OpenCode frontmatter from a Claude agent header.

    The caller is expected to have checked that ``name`` and
    ``description`` are present (see ``is_convertible``).

    Args:
        claude: Parsed Claude frontmatter

    Returns:
        Insertion-ordered mapping: name, description, permissions (only if
        tools were given), model, mode, skills and hooks (only if given).
    """
    opencode: dict[str, Any] = {
        "name": claude.get("name"),
        "description": claude.get("description"),
    }

    tools = claude.get("tools")
    if tools:
        opencode["permissions"] = Permissions.from_tools(normalize_list(tools))

    opencode["model"] = map_model(claude.get("model"))
    opencode["mode"] = map_mode(claude.get("permissionMode"))

    for key in ("skills", "hooks"):
        value = claude.get(key)
        if value:
            opencode[key] = normalize_list(value)

    return opencode


__all__ = [
    "CAPABILITY_TOOLS",
    "MODEL_ALIASES",
    "FALLBACK_MODEL",
    "MODE_SUBAGENT",
    "MODE_DEFAULT",
    "Permissions",
    "normalize_list",
    "map_model",
    "map_mode",
    "map_frontmatter",
]
