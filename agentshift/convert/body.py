"""Body text rewrites applied during conversion.

Agent bodies reference the learning system by path and shell out to the
Claude CLI with model aliases. These references are rewritten with an
ordered list of regex rules applied to the whole body text.
"""

from __future__ import annotations

import re
from collections.abc import Callable, Sequence
from dataclasses import dataclass

from agentshift.config.settings import (
    LEARNING_DIR_NAME,
    SOURCE_CLI_NAME,
    SOURCE_CONFIG_DIR,
    TARGET_CONFIG_DIR,
    TARGET_MODEL,
)

Replacement = str | Callable[[re.Match[str]], str]

CLAUDE_MODEL_ALIASES = ("haiku", "opus", "sonnet")
LEGACY_MODEL_ALIAS = "gpt-4"


@dataclass(frozen=True)
class RewriteRule:
    """A single global substitution over body text."""

    pattern: re.Pattern[str]
    replacement: Replacement

    def apply(self, text: str) -> str:
        replacement = self.replacement
        if isinstance(replacement, str):
            # Literal text; no backreference expansion
            return self.pattern.sub(lambda _match: replacement, text)
        return self.pattern.sub(replacement, text)


def _replace_first(old: str, new: str) -> Callable[[re.Match[str]], str]:
    def replace(match: re.Match[str]) -> str:
        return match.group(0).replace(old, new, 1)

    return replace


def build_rewrite_rules(
    source_dir: str = SOURCE_CONFIG_DIR,
    target_dir: str = TARGET_CONFIG_DIR,
    *,
    cli_name: str = SOURCE_CLI_NAME,
    target_model: str = TARGET_MODEL,
) -> list[RewriteRule]:
    """Build the ordered body rewrite rules.

    Args:
        source_dir: Config directory name referenced by source bodies
        target_dir: Config directory name to reference instead
        cli_name: CLI whose ``--print --model`` invocations are rewritten
        target_model: Model id substituted for known aliases

    Returns:
        Rules in application order
    """
    learning = f"{re.escape(source_dir)}/{re.escape(LEARNING_DIR_NAME)}"
    cli = re.escape(cli_name)
    aliases = "|".join(re.escape(alias) for alias in CLAUDE_MODEL_ALIASES)
    model_invocation = f"{cli_name} --print --model {target_model}"

    return [
        # ~/<dir>/emergent-learning
        RewriteRule(
            re.compile(f"~/{learning}"),
            f"~/{target_dir}/{LEARNING_DIR_NAME}",
        ),
        # absolute paths, e.g. /home/user/<dir>/emergent-learning
        RewriteRule(
            re.compile(f"/{learning}"),
            f"/{target_dir}/{LEARNING_DIR_NAME}",
        ),
        RewriteRule(
            re.compile(f"{cli} --print --model (?:{aliases})"),
            model_invocation,
        ),
        RewriteRule(
            re.compile(f"{cli} --print --model {re.escape(LEGACY_MODEL_ALIAS)}"),
            model_invocation,
        ),
        # python <anything>/<dir>/emergent-learning/ on one line
        RewriteRule(
            re.compile(f"python .*/{learning}/"),
            _replace_first(source_dir, target_dir),
        ),
    ]


DEFAULT_REWRITE_RULES: tuple[RewriteRule, ...] = tuple(build_rewrite_rules())


def rewrite_body(body: str, rules: Sequence[RewriteRule] = DEFAULT_REWRITE_RULES) -> str:
    """Apply rewrite rules to body text, in order."""
    for rule in rules:
        body = rule.apply(body)
    return body


__all__ = [
    "RewriteRule",
    "DEFAULT_REWRITE_RULES",
    "build_rewrite_rules",
    "rewrite_body",
]
