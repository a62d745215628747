"""Recursive discovery of markdown files."""

from __future__ import annotations

from pathlib import Path

MARKDOWN_SUFFIX = ".md"


def find_markdown_files(directory: Path, files: list[Path] | None = None) -> list[Path]:
    """Recursively collect ``*.md`` files, depth first.

    Symlinked directories are not followed. Entries are visited in
    directory-listing order, which is platform dependent.

    Args:
        directory: Directory to walk
        files: Accumulator for recursive calls

    Returns:
        List of markdown file paths
    """
    if files is None:
        files = []

    for entry in directory.iterdir():
        if entry.is_dir() and not entry.is_symlink():
            find_markdown_files(entry, files)
        elif entry.name.endswith(MARKDOWN_SUFFIX):
            files.append(entry)

    return files


__all__ = ["find_markdown_files", "MARKDOWN_SUFFIX"]
