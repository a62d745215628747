"""Learning hooks: host session events forwarded to external scripts.

This package contains:
- session: SessionContext and its JSON persistence
- scripts: Subprocess runner for the learning scripts
- dispatcher: Event and command dispatch
"""

from agentshift.hooks.dispatcher import HookDispatcher
from agentshift.hooks.scripts import ScriptResult, ScriptRunner
from agentshift.hooks.session import SessionContext, SessionStore, extract_session_id

__all__ = [
    "HookDispatcher",
    "ScriptResult",
    "ScriptRunner",
    "SessionContext",
    "SessionStore",
    "extract_session_id",
]
