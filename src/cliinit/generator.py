"""
cliinit.generator - Rendering the Scaffold to Disk
==================================================

This module turns an ``Application`` into files. It follows a short,
fixed pipeline:

    1. Create the output directory
    2. Render README.md, CHANGELOG.md, version.go, <name>.go in that order
    3. Render commands.go only when the application has sub-commands

Every step raises on failure and nothing after it runs. Files that were
already written stay on disk: there is no rollback, a half-written scaffold
is left for the user to inspect or remove (``cli-init --force`` replaces it).

Usage Example
-------------
>>> from cliinit.generator import create_application
>>> from cliinit.models import define_application
>>> from cliinit.registry import TemplateRegistry
>>> app = define_application("todo", ["add", "list"])
>>> result = create_application(app, TemplateRegistry.load())
>>> sorted(p.name for p in result.files_created)
['CHANGELOG.md', 'README.md', 'commands.go', 'todo.go', 'version.go']
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import TYPE_CHECKING

from jinja2 import Template, TemplateError
from rich.console import Console
from rich.markup import escape
from rich.panel import Panel

from cliinit import __version__
from cliinit.errors import FilesystemFailure, TemplateRenderFailure


if TYPE_CHECKING:
    from cliinit.models import Application
    from cliinit.registry import TemplateRegistry


logger = logging.getLogger(__name__)

# Console for rich output
console = Console()


# =============================================================================
# Data Classes
# =============================================================================


@dataclass(frozen=True)
class Source:
    """
    One file to generate: its name inside the output directory and the
    template that produces its content.
    """

    name: str
    template: Template


@dataclass
class GenerationResult:
    """
    Outcome of a successful ``create_application`` call.

    Attributes
    ----------
    project_path : Path
        Directory the scaffold was written to.
    files_created : list[Path]
        Written files, in generation order.
    """

    project_path: Path
    files_created: list[Path] = field(default_factory=list)


# =============================================================================
# Rendering
# =============================================================================


def build_sources(app: Application, registry: TemplateRegistry) -> list[Source]:
    """
    List the files to generate for ``app``, in generation order.

    ``commands.go`` is only included when the application has sub-commands.
    """
    sources = [
        Source(name="README.md", template=registry["readme"]),
        Source(name="CHANGELOG.md", template=registry["changelog"]),
        Source(name="version.go", template=registry["version"]),
        Source(name=f"{app.name}.go", template=registry["main"]),
    ]
    if app.has_sub_command:
        sources.append(Source(name="commands.go", template=registry["commands"]))
    return sources


def render(source: Source, app: Application) -> str:
    """
    Render ``source`` against ``app``.

    The context holds only ``app`` and ``cliinit_version`` so equal
    applications always produce identical text.

    Raises
    ------
    TemplateRenderFailure
        If the template fails to evaluate (e.g. an undefined field).
    """
    try:
        return source.template.render(app=app, cliinit_version=__version__)
    except TemplateError as e:
        raise TemplateRenderFailure(
            f"failed to render template: {e}",
            file=source.name,
            template=source.template.name,
        ) from e


def generate(source: Source, output_dir: Path, app: Application) -> Path:
    """
    Render ``source`` and write it to ``output_dir / source.name``.

    The template is evaluated before the file is opened, so a render
    failure never leaves an empty file behind. An existing file is
    truncated.

    Returns
    -------
    Path
        Path of the written file.

    Raises
    ------
    TemplateRenderFailure
        If the template fails to evaluate.
    FilesystemFailure
        If the file cannot be opened or written.
    """
    content = render(source, app)
    path = Path(output_dir) / source.name

    try:
        with open(path, "w", encoding="utf-8") as f:
            f.write(content)
    except OSError as e:
        raise FilesystemFailure(
            f"failed to write file: {e.strerror or e}", path=str(path)
        ) from e

    logger.debug("Wrote %s (%d bytes)", path, len(content))
    return path


def create_output_dir(path: Path) -> Path:
    """
    Create the scaffold directory.

    Raises
    ------
    FilesystemFailure
        If the directory exists already or cannot be created.
    """
    try:
        path.mkdir(parents=True)
    except OSError as e:
        raise FilesystemFailure(
            f"failed to create directory: {e.strerror or e}", path=str(path)
        ) from e
    logger.debug("Created directory %s", path)
    return path


# =============================================================================
# Main Generation Function
# =============================================================================


def create_application(
    app: Application,
    registry: TemplateRegistry,
    output_dir: Path | None = None,
    *,
    verbose: bool = False,
) -> GenerationResult:
    """
    Write the complete scaffold for ``app``.

    Parameters
    ----------
    app : Application
        The application model.
    registry : TemplateRegistry
        Loaded templates.
    output_dir : Path | None
        Target directory. Defaults to ``./<app.name>``. It must not exist.
    verbose : bool, default=False
        If True, display progress information to the console.

    Returns
    -------
    GenerationResult
        The directory and the files written.

    Raises
    ------
    FilesystemFailure
        Directory creation or a file write failed.
    TemplateRenderFailure
        A template could not be rendered.
    """
    project_dir = Path(output_dir) if output_dir is not None else Path(app.name)
    result = GenerationResult(project_path=project_dir)

    if verbose:
        console.print()
        console.print(f"[bold]Creating application:[/] [green]{escape(app.name)}[/]")

    create_output_dir(project_dir)

    for source in build_sources(app, registry):
        path = generate(source, project_dir, app)
        result.files_created.append(path)
        if verbose:
            console.print(f"  Created {escape(app.name)}/{escape(source.name)}")

    if verbose:
        console.print()
        console.print(
            Panel(
                f"[bold green]Application created successfully![/]\n\n"
                f"[dim]Location:[/] {escape(str(project_dir))}\n\n"
                f"[bold]Next steps:[/]\n"
                f"  cd {escape(str(project_dir))}\n"
                f"  gofmt -w .\n"
                f"  go build",
                title="[bold green]Success[/]",
                border_style="green",
            )
        )

    return result
