"""Session context for the learning hooks.

The host runtime invokes the hooks as separate processes, so the session
context is persisted to a small JSON file between calls. It is created on
``session.created`` and cleared on ``session.deleted``.
"""

from __future__ import annotations

import json
import logging
import os
import tempfile
from dataclasses import asdict, dataclass, replace
from pathlib import Path
from typing import Any

from agentshift.utils.logging import log_message

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SessionContext:
    """State of the current host session.

    Attributes:
        session_id: Host session identifier, None outside a session
        checkin_done: Whether check-in succeeded for this session
        enabled: Whether hooks run at all; survives session changes
    """

    session_id: str | None = None
    checkin_done: bool = False
    enabled: bool = True

    def start(self, session_id: str | None) -> SessionContext:
        """Begin a new session; check-in has not happened yet."""
        return replace(self, session_id=session_id, checkin_done=False)

    def mark_checked_in(self) -> SessionContext:
        return replace(self, checkin_done=True)

    def clear(self) -> SessionContext:
        """End the session, keeping only the enabled flag."""
        return SessionContext(enabled=self.enabled)

    def with_enabled(self, enabled: bool) -> SessionContext:
        return replace(self, enabled=enabled)


def extract_session_id(event: dict[str, Any]) -> str | None:
    """Find the session id in a host event.

    Hosts put it in different places depending on the event type; the
    first present location wins:
    ``properties.info.id``, ``properties.sessionID``, ``session.id``,
    ``sessionID``, ``properties.session.id``.
    """

    def dig(*keys: str) -> Any:
        value: Any = event
        for key in keys:
            if not isinstance(value, dict):
                return None
            value = value.get(key)
        return value

    for keys in (
        ("properties", "info", "id"),
        ("properties", "sessionID"),
        ("session", "id"),
        ("sessionID",),
        ("properties", "session", "id"),
    ):
        value = dig(*keys)
        if value:
            return str(value)
    return None


class SessionStore:
    """Loads and saves SessionContext as JSON.

    A missing or unreadable file yields a fresh context; a corrupt file
    is logged and ignored rather than blocking the hook.
    """

    def __init__(self, path: Path) -> None:
        self.path = path

    def load(self) -> SessionContext:
        if not self.path.exists():
            return SessionContext()
        try:
            data = json.loads(self.path.read_text(encoding="utf-8"))
        except (OSError, ValueError) as e:
            logger.warning(f"Ignoring unreadable session state {self.path}: {e}")
            return SessionContext()
        if not isinstance(data, dict):
            logger.warning(f"Ignoring malformed session state {self.path}")
            return SessionContext()
        session_id = data.get("session_id")
        return SessionContext(
            session_id=str(session_id) if session_id else None,
            checkin_done=bool(data.get("checkin_done", False)),
            enabled=bool(data.get("enabled", True)),
        )

    def save(self, context: SessionContext) -> None:
        """Atomically write the context to disk."""
        self.path.parent.mkdir(parents=True, exist_ok=True)
        fd, temp_path = tempfile.mkstemp(dir=self.path.parent, prefix=".agentshift-session-")
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                json.dump(asdict(context), f)
            Path(temp_path).replace(self.path)
        except Exception:
            try:
                os.unlink(temp_path)
            except OSError:
                pass
            raise
        log_message(f"Session state saved: {context}")


__all__ = [
    "SessionContext",
    "SessionStore",
    "extract_session_id",
]
