"""
cliinit.cli - Command Line Interface
====================================

This module provides the command-line interface for cli-init using Typer.
It is the thin layer around the core: it parses flags, decides what to do
with an existing target directory, sets up logging, and turns errors into
exit codes.

Usage Examples
--------------
    $ cli-init todo
    $ cli-init -s add,list,delete todo
    $ cli-init -s add,list -u octocat --force todo

Exit Codes
----------
    0  Success, or the user declined to overwrite an existing directory
    1  Blank application name or any generation error

See Also
--------
- generator.py: File generation
- models.py: Application data model
"""

from __future__ import annotations

import logging
import shutil
from pathlib import Path
from typing import Annotated

import questionary
import typer
from rich import print as rprint
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape

from cliinit import __version__
from cliinit.errors import CliInitError
from cliinit.generator import create_application
from cliinit.models import define_application, parse_sub_commands
from cliinit.registry import TemplateRegistry


logger = logging.getLogger(__name__)


# =============================================================================
# CLI Application Setup
# =============================================================================

app = typer.Typer(
    name="cli-init",
    help="cli-init is the easy way to start building command-line app.",
    rich_markup_mode="rich",
    add_completion=False,
)

# Console for rich output
console = Console()


# =============================================================================
# Callbacks and Helpers
# =============================================================================

def version_callback(value: bool) -> None:
    """Print the version and exit."""
    if value:
        console.print(f"cli-init v{__version__}")
        raise typer.Exit()


def configure_logging(debug: bool) -> None:
    """
    Route log records through Rich.

    Parameters
    ----------
    debug : bool
        If True, log at DEBUG level; otherwise only warnings and above.
    """
    logging.basicConfig(
        level=logging.DEBUG if debug else logging.WARNING,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
        force=True,
    )


def fail(error: Exception) -> typer.Exit:
    """Print ``error`` and return the exit to raise."""
    if isinstance(error, CliInitError):
        logger.debug("Generation failed: %s", error.to_dict())
        rprint(f"[red]Error ({error.kind}):[/] {escape(error.message)}")
        for key, value in error.context.items():
            rprint(f"  [dim]{key}:[/] {escape(str(value))}")
    else:
        rprint(f"[red]Error:[/] {escape(str(error))}")
    return typer.Exit(1)


def confirm_overwrite(project_dir: Path) -> bool:
    """
    Ask whether an existing directory may be replaced.

    Raises
    ------
    typer.Abort
        If the prompt is cancelled (Ctrl-C).
    """
    answer = questionary.confirm(
        f"{project_dir} already exists, overwrite it?",
        default=False,
    ).ask()

    if answer is None:
        raise typer.Abort()

    return answer


# =============================================================================
# Main Command
# =============================================================================

@app.command()
def main(
    application: Annotated[
        str,
        typer.Argument(
            help="Name of the application to create",
            show_default=False,
        ),
    ] = "",
    subcommands: Annotated[
        str,
        typer.Option(
            "--subcommands",
            "-s",
            help="Comma-separated list of sub-commands to build",
        ),
    ] = "",
    username: Annotated[
        str,
        typer.Option(
            "--username",
            "-u",
            help="GitHub username (default: git config user.name)",
        ),
    ] = "",
    force: Annotated[
        bool,
        typer.Option(
            "--force",
            "-f",
            help="Overwrite application without prompting",
        ),
    ] = False,
    output_dir: Annotated[
        Path | None,
        typer.Option(
            "--output",
            "-o",
            help="Directory to create the application in (default: current directory)",
        ),
    ] = None,
    debug: Annotated[
        bool,
        typer.Option(
            "--debug",
            help="Run as DEBUG mode",
        ),
    ] = False,
    version: Annotated[
        bool | None,
        typer.Option(
            "--version",
            "-v",
            help="Print version information and quit",
            callback=version_callback,
            is_eager=True,
        ),
    ] = None,
) -> None:
    """
    Create the skeleton of a Go command-line application.

    [bold]Examples:[/]

        cli-init todo

        cli-init -s add,list,delete todo
    """
    configure_logging(debug)
    logger.debug("Run as DEBUG mode")

    if not application.strip():
        rprint("[red]Error:[/] Application name must not be blank")
        raise typer.Exit(1)

    sub_command_names = parse_sub_commands(subcommands)
    logger.debug("application: %r, sub-commands: %r", application, sub_command_names)

    # Templates and the model are validated before anything touches the disk
    try:
        registry = TemplateRegistry.load()
        model = define_application(application, sub_command_names, username)
    except CliInitError as e:
        raise fail(e) from e

    project_dir = (output_dir or Path()) / application

    if project_dir.exists():
        if not force and not confirm_overwrite(project_dir):
            raise typer.Exit(0)
        logger.debug("Removing existing %s", project_dir)
        try:
            shutil.rmtree(project_dir)
        except OSError as e:
            raise fail(e) from e

    try:
        create_application(model, registry, project_dir, verbose=True)
    except CliInitError as e:
        raise fail(e) from e
