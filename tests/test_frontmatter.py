"""Tests for agentshift.convert.frontmatter module."""

from agentshift.convert.frontmatter import (
    Document,
    is_convertible,
    parse_frontmatter,
    read_document,
)


class TestParseFrontmatter:
    """Tests for parse_frontmatter."""

    def test_simple_key_values(self):
        content = "---\nname: reviewer\ndescription: Reviews code\n---\nBody text\n"

        frontmatter, body = parse_frontmatter(content)

        assert frontmatter == {"name": "reviewer", "description": "Reviews code"}
        assert body == "Body text\n"

    def test_no_frontmatter_returns_none_and_full_content(self):
        content = "# Title\n\nJust markdown.\n"

        frontmatter, body = parse_frontmatter(content)

        assert frontmatter is None
        assert body == content

    def test_header_must_start_at_first_line(self):
        content = "\n---\nname: x\n---\nbody\n"

        frontmatter, _ = parse_frontmatter(content)

        assert frontmatter is None

    def test_unclosed_header_is_not_frontmatter(self):
        frontmatter, _ = parse_frontmatter("---\nname: x\ndescription: y\n")

        assert frontmatter is None

    def test_closing_delimiter_needs_trailing_newline(self):
        frontmatter, _ = parse_frontmatter("---\nname: x\n---")

        assert frontmatter is None

    def test_empty_header_has_zero_keys(self):
        frontmatter, body = parse_frontmatter("---\n\n---\nbody")

        assert frontmatter == {}
        assert body == "body"

    def test_body_is_verbatim(self):
        body_text = "  indented\n\n---\nnot a header\n\n"
        frontmatter, body = parse_frontmatter(f"---\nname: x\n---\n{body_text}")

        assert frontmatter == {"name": "x"}
        assert body == body_text

    def test_bracketed_value_becomes_list(self):
        frontmatter, _ = parse_frontmatter('---\ntools: [Read, "Bash" ,Grep]\n---\n')

        assert frontmatter["tools"] == ["Read", "Bash", "Grep"]

    def test_empty_brackets_give_single_empty_token(self):
        frontmatter, _ = parse_frontmatter("---\nskills: []\n---\n")

        assert frontmatter["skills"] == [""]

    def test_single_quotes_are_kept(self):
        frontmatter, _ = parse_frontmatter("---\ntools: ['Read']\n---\n")

        assert frontmatter["tools"] == ["'Read'"]

    def test_comma_string_without_brackets_stays_string(self):
        frontmatter, _ = parse_frontmatter("---\ntools: Read, Bash\n---\n")

        assert frontmatter["tools"] == "Read, Bash"

    def test_only_first_colon_splits(self):
        frontmatter, _ = parse_frontmatter("---\ndescription: Use when: reviewing: code\n---\n")

        assert frontmatter["description"] == "Use when: reviewing: code"

    def test_lines_without_colon_ignored(self):
        frontmatter, _ = parse_frontmatter("---\nname: x\njust text\n---\n")

        assert frontmatter == {"name": "x"}

    def test_duplicate_keys_last_wins(self):
        frontmatter, _ = parse_frontmatter("---\nmodel: opus\nmodel: haiku\n---\n")

        assert frontmatter == {"model": "haiku"}

    def test_no_type_coercion(self):
        frontmatter, _ = parse_frontmatter("---\nmaxTurns: 5\nenabled: true\n---\n")

        assert frontmatter == {"maxTurns": "5", "enabled": "true"}

    def test_keys_and_values_are_trimmed(self):
        frontmatter, _ = parse_frontmatter("---\n  name  :   spaced out   \n---\n")

        assert frontmatter == {"name": "spaced out"}


class TestIsConvertible:
    """Tests for the name + description precondition."""

    def test_name_and_description(self):
        assert is_convertible({"name": "a", "description": "b"})

    def test_missing_description(self):
        assert not is_convertible({"name": "a"})

    def test_missing_name(self):
        assert not is_convertible({"description": "b"})

    def test_empty_value_is_missing(self):
        assert not is_convertible({"name": "", "description": "b"})

    def test_no_frontmatter(self):
        assert not is_convertible(None)


class TestReadDocument:
    """Tests for read_document."""

    def test_reads_and_parses(self, tmp_path):
        path = tmp_path / "agent.md"
        path.write_text("---\nname: a\ndescription: b\n---\nhello\n")

        doc = read_document(path)

        assert isinstance(doc, Document)
        assert doc.path == path
        assert doc.frontmatter == {"name": "a", "description": "b"}
        assert doc.body == "hello\n"
        assert doc.is_convertible

    def test_crlf_file_has_no_frontmatter(self, tmp_path):
        path = tmp_path / "agent.md"
        path.write_bytes(b"---\r\nname: a\r\ndescription: b\r\n---\r\nhello\r\n")

        doc = read_document(path)

        assert doc.frontmatter is None
        assert not doc.is_convertible

    def test_invalid_utf8_is_replaced(self, tmp_path):
        """Latin-1 bytes decode to replacement characters instead of raising."""
        path = tmp_path / "notes.md"
        path.write_bytes(b"# Caf\xe9 notes\n")

        doc = read_document(path)

        assert doc.frontmatter is None
        assert doc.body == "# Caf\ufffd notes\n"
