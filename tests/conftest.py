"""Shared pytest fixtures for agentshift tests."""

import sys
from pathlib import Path

import pytest

from agentshift.config.settings import Settings
from tests.helpers import make_script

HOOK_ENV_KEYS = ("OPENCODE_DIR", "ELF_BASE_PATH", "ELF_PYTHON", "HOOK_TIMEOUT_SECONDS")

SAMPLE_AGENT = """---
name: code-reviewer
description: Reviews code for quality
tools: Read, Grep, Glob
model: sonnet
permissionMode: plan
---
You are a code reviewer.

Run `claude --print --model haiku "summarize"` for quick summaries.
"""


@pytest.fixture(autouse=True)
def isolated_config(tmp_path, monkeypatch):
    """Keep tests away from the user's config file and hook environment."""
    for key in HOOK_ENV_KEYS:
        monkeypatch.delenv(key, raising=False)
    monkeypatch.setattr(
        "agentshift.config.manager.CONFIG_FILE", tmp_path / "no-such-agentshift-config"
    )


@pytest.fixture
def agent_tree(tmp_path: Path) -> Path:
    """Create a source tree with agents and files that must be skipped."""
    root = tmp_path / "agents"
    (root / "team" / "nested").mkdir(parents=True)

    (root / "reviewer.md").write_text(SAMPLE_AGENT)
    (root / "team" / "nested" / "writer.md").write_text(
        "---\nname: writer\ndescription: Writes docs\ntools: [Write, Edit]\n---\nWrite docs.\n"
    )
    (root / "README.md").write_text("# Agents\n\nNo frontmatter here.\n")
    (root / "team" / "partial.md").write_text("---\nname: partial\n---\nMissing description.\n")
    (root / "notes.txt").write_text("---\nname: x\ndescription: y\n---\nnot markdown\n")
    return root


@pytest.fixture
def elf_dir(tmp_path: Path) -> Path:
    """Learning system root with all four scripts present and succeeding."""
    root = tmp_path / "emergent-learning"
    make_script(root / "hooks" / "learning-loop" / "pre_tool_learning.py")
    make_script(root / "hooks" / "learning-loop" / "post_tool_learning.py")
    make_script(root / "query" / "query.py")
    make_script(root / "query" / "checkout.py")
    return root


@pytest.fixture
def hook_settings(elf_dir: Path) -> Settings:
    """Settings pointing at the fake learning system."""
    return Settings(
        elf_base_path=str(elf_dir),
        elf_python=sys.executable,
        hook_timeout_seconds=60,
    )
