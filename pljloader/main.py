"""Command line entrypoint: ``pljava-loader``."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import List, Optional

import typer

from .bootstrap import ServiceContainer
from .logging_config import configure_logging
from .modules.loader import LoadRequest
from .modules.loader.archive import build_archive
from .modules.loader.domain import ArtifactCoordinates
from .modules.loader.exceptions import LoaderError
from .modules.loader.service import generate_name
from .settings import get_settings

log = logging.getLogger(__name__)

app = typer.Typer(
    name="pljava-loader",
    help="Install Maven build artifacts as PL/Java jars and publish the resulting classpath.",
    no_args_is_help=True,
    add_completion=False,
)


def _parse_coordinates(specs: List[str], option: str) -> List[ArtifactCoordinates]:
    coordinates = []
    for spec in specs:
        try:
            coordinates.append(ArtifactCoordinates.parse(spec))
        except ValueError as exc:
            raise typer.BadParameter(str(exc), param_hint=option) from exc
    return coordinates


@app.command(name="load", help="Drop and install every runtime artifact of the project.")
def load_cmd(
    project: Optional[Path] = typer.Option(
        None, "--project", "-p", help="Project descriptor (defaults to PLJ_PROJECT_FILE)."
    ),
    exclude: Optional[List[str]] = typer.Option(
        None, "--exclude", "-x", help="Coordinates to leave out, groupId:artifactId[:type[:classifier]]:version."
    ),
    add: Optional[List[str]] = typer.Option(
        None, "--add", "-a", help="Additional coordinates to install."
    ),
    classpath_property: Optional[str] = typer.Option(
        None, "--classpath-property", help="Property name receiving the generated classpath."
    ),
    classpath_file: Optional[Path] = typer.Option(
        None, "--classpath-file", help="Properties file the classpath is published to."
    ),
    dry_run: bool = typer.Option(False, "--dry-run", help="Use an in-memory store instead of the database."),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log ignored drop failures and other details."),
) -> None:
    configure_logging("DEBUG" if verbose else "INFO")
    settings = get_settings()
    excluded = _parse_coordinates([*settings.excluded, *(exclude or [])], "--exclude")
    additional = _parse_coordinates([*settings.additional, *(add or [])], "--add")

    container = ServiceContainer(settings, dry_run=dry_run, classpath_file=classpath_file)
    try:
        service = container.loader_service
        build_project = service.load_project(project or Path(settings.project_file))
        result = service.run(
            LoadRequest(
                project=build_project,
                excluded=excluded,
                additional=additional,
                classpath_property=classpath_property or settings.classpath_property,
            )
        )
    except LoaderError as exc:
        log.error("Unable to load jars: %s", exc)
        typer.echo(f"Unable to load jars: {exc}", err=True)
        raise typer.Exit(code=1) from exc
    finally:
        container.close()
    typer.echo(result.classpath.render())


@app.command(name="name", help="Print the module name generated for the coordinates.")
def name_cmd(coordinates: str = typer.Argument(..., help="groupId:artifactId[:type[:classifier]]:version")) -> None:
    coords = _parse_coordinates([coordinates], "COORDINATES")[0]
    typer.echo(generate_name(coords))


@app.command(name="archive", help="Jar up a directory the same way directory artifacts are installed.")
def archive_cmd(
    directory: Path = typer.Argument(..., exists=True, file_okay=False, dir_okay=True),
    output: Path = typer.Argument(..., dir_okay=False),
) -> None:
    configure_logging()
    try:
        payload = build_archive(directory)
    except LoaderError as exc:
        typer.echo(str(exc), err=True)
        raise typer.Exit(code=1) from exc
    output.parent.mkdir(parents=True, exist_ok=True)
    output.write_bytes(payload)
    typer.echo(f"{output} ({len(payload)} bytes)")


def main() -> None:
    """CLI entry point."""
    app()


if __name__ == "__main__":
    main()
