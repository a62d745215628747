"""Claude → OpenCode agent definition converter.

This package contains:
- frontmatter: Header parsing and the Document type
- schema: Field mapping from Claude to OpenCode frontmatter
- body: Path and CLI invocation rewrites in the body text
- writer: Serialization of converted files
- discovery: Recursive markdown file discovery
- runner: The end-to-end conversion run
"""

from agentshift.convert.body import (
    DEFAULT_REWRITE_RULES,
    RewriteRule,
    build_rewrite_rules,
    rewrite_body,
)
from agentshift.convert.discovery import find_markdown_files
from agentshift.convert.frontmatter import (
    Document,
    is_convertible,
    parse_frontmatter,
    read_document,
)
from agentshift.convert.runner import (
    ConversionResult,
    convert_agents,
    convert_document,
    convert_text,
)
from agentshift.convert.schema import Permissions, map_frontmatter, map_model
from agentshift.convert.writer import render_markdown

__all__ = [
    # Frontmatter
    "Document",
    "parse_frontmatter",
    "is_convertible",
    "read_document",
    # Schema
    "Permissions",
    "map_frontmatter",
    "map_model",
    # Body
    "RewriteRule",
    "DEFAULT_REWRITE_RULES",
    "build_rewrite_rules",
    "rewrite_body",
    # Output
    "render_markdown",
    # Discovery and runner
    "find_markdown_files",
    "ConversionResult",
    "convert_agents",
    "convert_document",
    "convert_text",
]
