"""Dispatch of host lifecycle events to the learning scripts.

Every handler takes the current SessionContext explicitly and the event
handler returns the updated one; persisting it is the caller's job.

Hook failures never propagate: a missing script, a timeout or a non-zero
exit is logged and the host's own action goes ahead.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

from agentshift.config.settings import Settings
from agentshift.hooks.scripts import ScriptResult, ScriptRunner
from agentshift.hooks.session import SessionContext, extract_session_id
from agentshift.utils.errors import HookScriptError
from agentshift.utils.logging import log_message

logger = logging.getLogger(__name__)

EVENT_SESSION_CREATED = "session.created"
EVENT_SESSION_COMPACTED = "session.compacted"
EVENT_SESSION_DELETED = "session.deleted"
EVENT_SESSION_IDLE = "session.idle"

CHECKIN_ARGS = ("--context",)


class HookDispatcher:
    """Maps host events and commands onto learning script runs.

    Args:
        settings: Loaded hook settings (script locations, interpreter, timeout)
        runner: Script runner; built from settings when omitted
    """

    def __init__(self, settings: Settings, runner: ScriptRunner | None = None) -> None:
        self.settings = settings
        self.runner = runner or ScriptRunner(
            python=settings.resolve_python(),
            elf_dir=settings.elf_dir,
            timeout=settings.hook_timeout_seconds,
        )

    # ------------------------------------------------------------------
    # Script invocation
    # ------------------------------------------------------------------

    def _run_safely(
        self,
        label: str,
        script: Path,
        *args: str,
        payload: dict[str, Any] | None = None,
    ) -> ScriptResult | None:
        """Run a script, logging instead of raising on failure.

        Returns:
            The result, or None if the script could not be run at all
        """
        try:
            result = self.runner.run(script, *args, payload=payload)
        except HookScriptError as e:
            logger.warning(f"{label} hook error: {e}")
            log_message(f"{label} hook error: {e}")
            return None
        except Exception as e:
            logger.error(f"{label} hook failed unexpectedly: {e}", exc_info=True)
            log_message(f"{label} hook failed unexpectedly: {e}")
            return None

        if not result.success:
            logger.warning(f"{label} hook exited with code: {result.returncode}")
        log_message(f"{label} hook completed (exit code: {result.returncode})")
        return result

    # ------------------------------------------------------------------
    # Tool hooks
    # ------------------------------------------------------------------

    def tool_before(
        self,
        context: SessionContext,
        tool: str,
        payload: dict[str, Any] | None = None,
    ) -> ScriptResult | None:
        """Run the pre-tool learning script before a tool executes."""
        if not context.enabled:
            return None
        log_message(f"Pre-tool hook triggered for: {tool}")
        data = {"tool": tool, "session_id": context.session_id, **(payload or {})}
        return self._run_safely("Pre-tool", self.settings.pre_tool_script, payload=data)

    def tool_after(
        self,
        context: SessionContext,
        tool: str,
        payload: dict[str, Any] | None = None,
    ) -> ScriptResult | None:
        """Run the post-tool learning script after a tool executes."""
        if not context.enabled:
            return None
        log_message(f"Post-tool hook triggered for: {tool}")
        data = {"tool": tool, "session_id": context.session_id, **(payload or {})}
        return self._run_safely("Post-tool", self.settings.post_tool_script, payload=data)

    # ------------------------------------------------------------------
    # Check-in / check-out
    # ------------------------------------------------------------------

    def checkin(self, context: SessionContext) -> tuple[SessionContext, ScriptResult | None]:
        """Load context from the learning system.

        Returns:
            Updated context (checked in only on exit code 0) and the result
        """
        result = self._run_safely("Check-in", self.settings.checkin_script, *CHECKIN_ARGS)
        if result is not None and result.success:
            log_message("Check-in completed - context loaded")
            return context.mark_checked_in(), result
        return context, result

    def checkout(
        self,
        context: SessionContext,
        *,
        final: bool = False,
        auto: bool = False,
    ) -> ScriptResult | None:
        """Record learnings for the session."""
        args: tuple[str, ...] = ()
        if auto:
            args += ("--auto",)
        if final:
            args += ("--final",)
        return self._run_safely("Check-out", self.settings.checkout_script, *args)

    # ------------------------------------------------------------------
    # Session lifecycle
    # ------------------------------------------------------------------

    def handle_event(self, event: dict[str, Any], context: SessionContext) -> SessionContext:
        """Dispatch a host event.

        - session.created: start a session and check in
        - session.compacted: automatic check-out
        - session.deleted: final check-out if checked in; session cleared
        - session.idle: logged only

        Args:
            event: Host event with at least a ``type`` key
            context: Current session context

        Returns:
            The session context after the event
        """
        if not context.enabled:
            return context

        event_type = event.get("type")

        if event_type == EVENT_SESSION_CREATED:
            context = context.start(extract_session_id(event))
            log_message(f"Session started ({context.session_id}) - running auto check-in")
            context, _ = self.checkin(context)

        elif event_type == EVENT_SESSION_COMPACTED:
            log_message("Session compacting - running auto check-out")
            self.checkout(context, auto=True)

        elif event_type == EVENT_SESSION_DELETED:
            if context.checkin_done:
                log_message("Session ending - running final auto check-out")
                self.checkout(context, auto=True, final=True)
            context = context.clear()

        elif event_type == EVENT_SESSION_IDLE:
            logger.debug("Session idle - checkpoint opportunity")

        else:
            log_message(f"Ignoring event type: {event_type}")

        return context

    # ------------------------------------------------------------------
    # Status
    # ------------------------------------------------------------------

    def describe_commands(self) -> dict[str, str]:
        """Command lines the hooks run, keyed by hook name."""
        s = self.settings
        return {
            "Pre-tool": self.runner.describe(s.pre_tool_script),
            "Post-tool": self.runner.describe(s.post_tool_script),
            "Check-in": self.runner.describe(s.checkin_script, CHECKIN_ARGS),
            "Check-out": self.runner.describe(s.checkout_script),
        }


__all__ = [
    "HookDispatcher",
    "EVENT_SESSION_CREATED",
    "EVENT_SESSION_COMPACTED",
    "EVENT_SESSION_DELETED",
    "EVENT_SESSION_IDLE",
]
