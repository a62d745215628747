"""Conversion of a directory tree of Claude agents to OpenCode format.

A run clears the output directory, discovers markdown files under the
source root, keeps the ones with a name and description in their
frontmatter, and writes each converted file to the mirrored location under
the output directory.

Filesystem errors are not caught: a failure ends the run and leaves the
output directory as far as it got.
"""

from __future__ import annotations

import shutil
from dataclasses import dataclass, field
from pathlib import Path

from agentshift.convert.body import rewrite_body
from agentshift.convert.discovery import find_markdown_files
from agentshift.convert.frontmatter import Document, parse_frontmatter, read_document
from agentshift.convert.schema import map_frontmatter
from agentshift.convert.writer import render_markdown, write_document
from agentshift.utils.console import print_converted, print_info, print_step
from agentshift.utils.errors import UserCancelledError
from agentshift.utils.logging import log_message


@dataclass
class ConversionResult:
    """Outcome of a conversion run."""

    output_dir: Path
    converted: list[Path] = field(default_factory=list)
    skipped: list[Path] = field(default_factory=list)

    @property
    def converted_count(self) -> int:
        return len(self.converted)


def convert_text(content: str) -> str | None:
    """Convert the text of one Claude agent file.

    Returns:
        The OpenCode file content, or None if the content has no
        frontmatter.
    """
    frontmatter, body = parse_frontmatter(content)
    if frontmatter is None:
        return None
    return render_markdown(map_frontmatter(frontmatter), rewrite_body(body))


def convert_document(document: Document) -> str:
    """Render the OpenCode version of a convertible document."""
    return render_markdown(map_frontmatter(document.frontmatter), rewrite_body(document.body))


def reset_output_dir(output_dir: Path) -> None:
    """Delete and recreate the output directory."""
    if output_dir.exists():
        shutil.rmtree(output_dir)
    output_dir.mkdir(parents=True, exist_ok=True)


def select_agent_files(files: list[Path], result: ConversionResult) -> list[Document]:
    """Read each file and keep those with both a name and a description."""
    selected = []
    for path in files:
        document = read_document(path)
        if document.is_convertible:
            selected.append(document)
            continue
        reason = "no frontmatter" if document.frontmatter is None else "missing name or description"
        log_message(f"Skipping {path} ({reason})")
        result.skipped.append(path)
    return selected


def process_agent(document: Document, source_root: Path, output_dir: Path) -> Path:
    """Convert one agent document and write it under output_dir.

    Returns:
        The path written, relative to output_dir
    """
    relative_path = document.path.relative_to(source_root)
    write_document(output_dir, relative_path, convert_document(document))
    print_converted(relative_path)
    return relative_path


def convert_agents(source_root: Path, output_dir: Path) -> ConversionResult:
    """Convert every Claude agent file under source_root.

    Args:
        source_root: Directory tree to scan for agent files
        output_dir: Output root; deleted and recreated first

    Returns:
        ConversionResult listing converted and skipped files

    Raises:
        UserCancelledError: If interrupted while writing converted files
    """
    source_root = source_root.resolve()
    result = ConversionResult(output_dir=output_dir)

    reset_output_dir(output_dir)
    print_step("Converting Claude agents to OpenCode format...")

    candidates = find_markdown_files(source_root)
    log_message(f"Found {len(candidates)} markdown file(s) under {source_root}")
    agents = select_agent_files(candidates, result)

    if not agents:
        print_info("No Claude agent files found. Looking for .md files with frontmatter...")
        return result

    try:
        for document in agents:
            result.converted.append(process_agent(document, source_root, output_dir))
    except KeyboardInterrupt as e:
        raise UserCancelledError(
            f"Conversion cancelled after {result.converted_count} of {len(agents)} file(s)"
        ) from e

    return result


__all__ = [
    "ConversionResult",
    "convert_text",
    "convert_document",
    "reset_output_dir",
    "select_agent_files",
    "process_agent",
    "convert_agents",
]
