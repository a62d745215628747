"""Typer application for the agent converter.

Converts every Claude agent file under the current directory into
OpenCode format, written below the fixed output directory.
"""

from pathlib import Path
from typing import Annotated

import typer

from agentshift.config.settings import OUTPUT_DIR
from agentshift.convert.runner import convert_agents
from agentshift.utils.console import (
    console,
    print_error,
    print_header,
    print_info,
    print_warning,
    show_version,
)
from agentshift.utils.errors import AgentShiftError, ExitCode, UserCancelledError
from agentshift.utils.logging import log_message, setup_logging

app = typer.Typer(
    name="agentshift-convert",
    help="Convert Claude agent definitions to OpenCode format",
    add_completion=False,
    no_args_is_help=False,
)


def version_callback(value: bool) -> None:
    """Display version and exit."""
    if value:
        show_version()
        raise typer.Exit()


@app.command()
def main(
    watch: Annotated[
        bool,
        typer.Option(
            "--watch",
            help="Re-run on changes (not implemented yet)",
        ),
    ] = False,
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
    """Convert Claude agents under the current directory to OpenCode format.

    The output directory is cleared first, then every markdown file with
    a name and description in its frontmatter is converted.
    """
    setup_logging()

    print_header("Claude → OpenCode Agent Converter")
    print_info(f"Output: {OUTPUT_DIR}")

    if watch:
        print_warning("--watch is not implemented; running a single conversion")
        log_message("--watch requested but not implemented")

    try:
        result = convert_agents(Path.cwd(), OUTPUT_DIR)
    except UserCancelledError as e:
        print_info(f"\n{e}")
        raise typer.Exit(e.exit_code) from e
    except AgentShiftError as e:
        print_error(str(e))
        raise typer.Exit(e.exit_code) from e
    except KeyboardInterrupt as e:
        print_info("\nConversion cancelled by user")
        raise typer.Exit(ExitCode.USER_CANCELLED) from e

    if result.converted:
        console.print()
        console.print("[success]Conversion complete![/success]")
        console.print(f"   Output: {result.output_dir}")
        console.print(
            f"   {result.converted_count} file(s) converted to OpenCode format "
            "with permissions and model mapping."
        )
