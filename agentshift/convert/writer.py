"""Serialization of converted agent files."""

from __future__ import annotations

from collections.abc import Mapping
from pathlib import Path
from typing import Any

from agentshift.convert.schema import Permissions


def _render_line(key: str, value: Any) -> str:
    if isinstance(value, Permissions):
        return f"permissions: [{', '.join(value.granted())}]"
    if isinstance(value, list):
        items = ", ".join(f'"{item}"' for item in value)
        return f"{key}: [{items}]"
    return f'{key}: "{value}"'


def render_frontmatter(frontmatter: Mapping[str, Any]) -> str:
    """Render header lines, one per key, in mapping order.

    Scalars are double-quoted, lists become quoted bracket lists, and
    permissions list the granted capability names unquoted (an empty
    ``[]`` when nothing is granted).
    """
    return "\n".join(_render_line(key, value) for key, value in frontmatter.items())


def render_markdown(frontmatter: Mapping[str, Any], body: str) -> str:
    """Assemble a complete OpenCode agent file."""
    return f"---\n{render_frontmatter(frontmatter)}\n---\n\n{body}"


def write_document(output_dir: Path, relative_path: Path, content: str) -> Path:
    """Write converted content under output_dir, mirroring relative_path.

    Returns:
        The path written to

    Raises:
        OSError: If the directory or file cannot be created
    """
    output_path = output_dir / relative_path
    output_path.parent.mkdir(parents=True, exist_ok=True)
    with output_path.open("w", encoding="utf-8", newline="") as f:
        f.write(content)
    return output_path


__all__ = [
    "render_frontmatter",
    "render_markdown",
    "write_document",
]
