"""Frontmatter parsing for agent definition files.

Agent files carry a small YAML-like header:

    ---
    name: code-reviewer
    tools: [Read, Grep]
    ---
    body content...

Only the subset used by agent definitions is understood: one ``key: value``
per line, with bracketed values read as flat lists. Anything richer is
kept as a plain string.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from pathlib import Path

FrontmatterValue = str | list[str]
Frontmatter = dict[str, FrontmatterValue]

# Opening delimiter must be the very first line; the closing one must be
# followed by a newline.
_FRONTMATTER_RE = re.compile(r"\A---\n(.*?)\n---\n(.*)\Z", re.DOTALL)

REQUIRED_FIELDS = ("name", "description")


@dataclass(frozen=True)
class Document:
    """A markdown file split into header and body.

    Attributes:
        path: Location the document was read from
        frontmatter: Parsed header, or None if the file has no header
        body: Text after the closing delimiter (whole file if no header)
    """

    path: Path
    frontmatter: Frontmatter | None
    body: str

    @property
    def is_convertible(self) -> bool:
        return is_convertible(self.frontmatter)


def _parse_value(raw: str) -> FrontmatterValue:
    if raw.startswith("[") and raw.endswith("]"):
        return [token.strip().replace('"', "") for token in raw[1:-1].split(",")]
    return raw


def parse_frontmatter(content: str) -> tuple[Frontmatter | None, str]:
    """Split document text into a header mapping and body.

    For each header line containing a colon, the text before the first
    colon is the key and the rest is the value; both are trimmed. Lines
    without a colon are skipped and later duplicates overwrite earlier ones.

    Args:
        content: Full file content

    Returns:
        Tuple of (frontmatter, body). frontmatter is None when the content
        does not start with a delimited header, in which case body is the
        unmodified content.
    """
    match = _FRONTMATTER_RE.match(content)
    if not match:
        return None, content

    header, body = match.group(1), match.group(2)

    frontmatter: Frontmatter = {}
    for line in header.split("\n"):
        key, sep, value = line.partition(":")
        if not sep:
            continue
        frontmatter[key.strip()] = _parse_value(value.strip())

    return frontmatter, body


def is_convertible(frontmatter: Frontmatter | None) -> bool:
    """Check that a header carries both a name and a description."""
    if frontmatter is None:
        return False
    return all(frontmatter.get(key) for key in REQUIRED_FIELDS)


def read_text(path: Path) -> str:
    """Read a file as UTF-8 without translating line endings.

    Undecodable bytes are replaced with U+FFFD rather than raising.
    """
    with path.open(encoding="utf-8", errors="replace", newline="") as f:
        return f.read()


def read_document(path: Path) -> Document:
    """Read and parse an agent file.

    Raises:
        OSError: If the file cannot be read
    """
    frontmatter, body = parse_frontmatter(read_text(path))
    return Document(path=path, frontmatter=frontmatter, body=body)


__all__ = [
    "Document",
    "Frontmatter",
    "FrontmatterValue",
    "REQUIRED_FIELDS",
    "parse_frontmatter",
    "is_convertible",
    "read_text",
    "read_document",
]
