"""Terminal output for the converter and the hook commands.

Status lines share one rich theme. Anything a user might want to find
later (conversions, warnings, errors) is also written to the log file
through log_message; headers and key/value listings are screen-only.
"""

from __future__ import annotations

from collections.abc import Mapping
from pathlib import Path

from rich.console import Console
from rich.theme import Theme

from agentshift import SCRIPT_NAME, __version__
from agentshift.utils.logging import log_message

custom_theme = Theme(
    {
        "error": "bold red",
        "success": "bold green",
        "warning": "bold yellow",
        "info": "bold blue",
        "header": "bold magenta",
        "step": "bold cyan",
        "label": "bold",
    }
)

console = Console(theme=custom_theme)
console_err = Console(theme=custom_theme, stderr=True)


def print_error(message: str) -> None:
    """Error line on stderr."""
    console_err.print(f"[error][[ERROR]][/error] [red]{message}[/red]")
    log_message(f"ERROR: {message}")


def print_success(message: str) -> None:
    console.print(f"[success][[SUCCESS]][/success] [green]{message}[/green]")
    log_message(f"SUCCESS: {message}")


def print_warning(message: str) -> None:
    console.print(f"[warning][[WARNING]][/warning] [yellow]{message}[/yellow]")
    log_message(f"WARNING: {message}")


def print_info(message: str) -> None:
    console.print(f"[info][[INFO]][/info] [cyan]{message}[/cyan]")
    log_message(f"INFO: {message}")


def print_converted(relative_path: Path) -> None:
    """Report one converted agent file, relative to the output root."""
    print_success(f"Converted: {relative_path.as_posix()}")


def print_header(title: str) -> None:
    console.print()
    console.print(f"[header]=== {title} ===[/header]")
    console.print()


def print_step(message: str) -> None:
    console.print(f"[step]➜[/step] {message}")


def print_fields(title: str, fields: Mapping[str, object], indent: int = 4) -> None:
    """Print a titled block of ``label: value`` lines.

    Values are printed without markup so paths and command lines show
    verbatim.
    """
    pad = " " * indent
    console.print(f"{pad[:-2]}[label]{title}:[/label]")
    for label, value in fields.items():
        console.print(f"{pad}{label}: {value}", markup=False, highlight=False)
    console.print()


def show_version() -> None:
    console.print(f"[bold]{SCRIPT_NAME}[/bold] v{__version__}")


__all__ = [
    "console",
    "console_err",
    "custom_theme",
    "print_error",
    "print_success",
    "print_warning",
    "print_info",
    "print_converted",
    "print_header",
    "print_step",
    "print_fields",
    "show_version",
]
