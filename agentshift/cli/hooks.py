"""Typer application for the learning hooks.

The host runtime calls the hook commands (``tool-before``, ``tool-after``,
``event``) on its lifecycle events; the rest are manual commands. Hook
commands always exit 0 so a learning failure never blocks the host.
"""

import json
import sys
from typing import Annotated, Any

import typer

from agentshift.config.manager import ConfigManager
from agentshift.hooks.dispatcher import HookDispatcher
from agentshift.hooks.scripts import MAX_CAPTURED_OUTPUT, ScriptResult
from agentshift.hooks.session import SessionContext, SessionStore
from agentshift.utils.console import (
    console,
    print_error,
    print_fields,
    print_header,
    print_info,
    print_success,
    print_warning,
    show_version,
)
from agentshift.utils.errors import AgentShiftError, ExitCode
from agentshift.utils.logging import get_logger, log_message, setup_logging

app = typer.Typer(
    name="agentshift-hooks",
    help="Learning hooks for OpenCode sessions",
    add_completion=False,
    no_args_is_help=True,
)

PayloadOption = Annotated[
    str | None,
    typer.Option("--payload", help="Event data as JSON (default: read from stdin for events)"),
]

# Everything a hook command may hit before or around the dispatcher:
# bad config values, unreadable config or state files, malformed payloads
HOOK_ERRORS = (AgentShiftError, OSError, ValueError)


def version_callback(value: bool) -> None:
    """Display version and exit."""
    if value:
        show_version()
        raise typer.Exit()


@app.callback()
def callback(
    version: Annotated[
        bool | None,
        typer.Option(
            "--version",
            "-v",
            callback=version_callback,
            is_eager=True,
            help="Show version information",
        ),
    ] = None,
) -> None:
    """Forward OpenCode session events to the learning scripts."""
    setup_logging()


def _load() -> tuple[ConfigManager, SessionStore, SessionContext, HookDispatcher]:
    config = ConfigManager()
    settings = config.load()
    store = SessionStore(settings.session_state_file)
    return config, store, store.load(), HookDispatcher(settings)


def _load_or_exit() -> tuple[ConfigManager, SessionStore, SessionContext, HookDispatcher]:
    """Load for a manual command, turning failures into a clean exit."""
    try:
        return _load()
    except AgentShiftError as e:
        print_error(str(e))
        raise typer.Exit(e.exit_code) from e
    except (OSError, ValueError) as e:
        print_error(f"Failed to load configuration: {e}")
        raise typer.Exit(ExitCode.GENERAL_ERROR) from e


def _parse_payload(raw: str | None) -> dict[str, Any]:
    if not raw or not raw.strip():
        return {}
    data = json.loads(raw)
    if not isinstance(data, dict):
        raise ValueError("payload must be a JSON object")
    return data


def _hook_failed(label: str, error: Exception) -> None:
    """Record a hook-level failure without failing the host action."""
    get_logger().warning(f"{label} hook skipped: {error}")
    log_message(f"{label} hook skipped: {error}")


def _report(action: str, result: ScriptResult | None) -> None:
    if result is None:
        print_error(f"{action} could not run. Check the log for details.")
        return
    if result.success:
        print_success(f"{action} complete")
    else:
        print_warning(f"{action} exited with code: {result.returncode}")
    output = result.stdout.strip()
    if output:
        console.print(output[:MAX_CAPTURED_OUTPUT], markup=False, highlight=False)


# --- Host hooks ---


@app.command("tool-before")
def tool_before(
    tool: Annotated[str, typer.Argument(help="Name of the tool about to run")],
    payload: PayloadOption = None,
) -> None:
    """Run the pre-tool learning hook."""
    try:
        _, _, context, dispatcher = _load()
        dispatcher.tool_before(context, tool, _parse_payload(payload))
    except HOOK_ERRORS as e:
        _hook_failed("Pre-tool", e)


@app.command("tool-after")
def tool_after(
    tool: Annotated[str, typer.Argument(help="Name of the tool that ran")],
    payload: PayloadOption = None,
) -> None:
    """Run the post-tool learning hook."""
    try:
        _, _, context, dispatcher = _load()
        dispatcher.tool_after(context, tool, _parse_payload(payload))
    except HOOK_ERRORS as e:
        _hook_failed("Post-tool", e)


@app.command("event")
def event(payload: PayloadOption = None) -> None:
    """Handle a session lifecycle event (JSON with a ``type`` key)."""
    try:
        data = _parse_payload(payload if payload is not None else sys.stdin.read())
        _, store, context, dispatcher = _load()
        updated = dispatcher.handle_event(data, context)
        if updated != context:
            store.save(updated)
    except HOOK_ERRORS as e:
        _hook_failed("Event", e)


# --- Manual commands ---


@app.command("checkin")
def checkin() -> None:
    """Load context, golden rules and heuristics from the learning system."""
    _, store, context, dispatcher = _load_or_exit()

    updated, result = dispatcher.checkin(context)
    if updated != context:
        store.save(updated)
    _report("Check-in", result)


@app.command("checkout")
def checkout(
    final: Annotated[
        bool,
        typer.Option("--final", help="Mark this as the final check-out before the session ends"),
    ] = False,
) -> None:
    """Record learnings, heuristics and session notes."""
    _, _, context, dispatcher = _load_or_exit()

    _report("Check-out", dispatcher.checkout(context, final=final))


@app.command("status")
def status() -> None:
    """Show session state and the configured hook commands."""
    _, store, context, dispatcher = _load_or_exit()

    print_header("Learning Hooks Status")
    print_fields(
        "Session State",
        {
            "Hooks enabled": "yes" if context.enabled else "no",
            "Session ID": context.session_id or "N/A",
            "Check-in done": "yes" if context.checkin_done else "no",
            "Check-out pending": "yes (auto on session end)" if context.checkin_done else "N/A",
            "State file": store.path,
        },
    )
    print_fields("Hook Commands", dispatcher.describe_commands())
    print_fields(
        "Session Events",
        {
            "session.created": "auto check-in",
            "session.compacted": "auto check-out",
            "session.deleted": "final auto check-out",
        },
    )


def _set_enabled(enabled: bool) -> None:
    _, store, context, _ = _load_or_exit()
    try:
        store.save(context.with_enabled(enabled))
    except OSError as e:
        print_error(f"Failed to save session state: {e}")
        raise typer.Exit(ExitCode.GENERAL_ERROR) from e
    print_success(f"Learning hooks {'enabled' if enabled else 'disabled'}")


@app.command("enable")
def enable() -> None:
    """Enable the learning hooks."""
    _set_enabled(True)


@app.command("disable")
def disable() -> None:
    """Disable the learning hooks until re-enabled."""
    _set_enabled(False)


@app.command("reload")
def reload() -> None:
    """Re-read configuration and show the effective values."""
    config, store, context, _ = _load_or_exit()

    config.show()
    print_info(f"Session state reloaded from {store.path} (enabled: {context.enabled})")
