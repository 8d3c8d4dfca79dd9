"""Load the build project model from ``pljava-project.json``."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import List

from pydantic import ValidationError

from pljloader.modules.loader.domain import (
    ArtifactDescriptor,
    BuildProject,
    ProjectDescriptor,
    ResolvedArtifact,
)
from pljloader.modules.loader.domain.constants import ORIGIN_DESCRIPTOR, ORIGIN_PROJECT
from pljloader.modules.loader.exceptions import ArtifactResolutionError, ProjectDescriptorError

from .artifact_set import Resolver

log = logging.getLogger(__name__)


def read_descriptor(path: Path) -> ProjectDescriptor:
    try:
        raw = json.loads(Path(path).read_text(encoding="utf-8"))
    except OSError as exc:
        raise ProjectDescriptorError(f"Unable to read project descriptor {path}: {exc}") from exc
    except json.JSONDecodeError as exc:
        raise ProjectDescriptorError(f"Project descriptor {path} is not valid JSON: {exc}") from exc
    try:
        return ProjectDescriptor.model_validate(raw)
    except ValidationError as exc:
        raise ProjectDescriptorError(f"Project descriptor {path} is invalid: {exc}") from exc


def _local_path(base_dir: Path, entry: ArtifactDescriptor) -> Path:
    path = Path(entry.path).expanduser()
    return path if path.is_absolute() else base_dir / path


def load_project(path: Path, resolver: Resolver) -> BuildProject:
    """Build the project model, resolving dependencies that carry no path."""
    path = Path(path)
    descriptor = read_descriptor(path)
    base_dir = path.parent

    if not descriptor.artifact.path:
        raise ProjectDescriptorError(f"Project artifact in {path} needs a path to its build output")
    project_artifact = ResolvedArtifact(
        coordinates=descriptor.artifact.coordinates,
        path=_local_path(base_dir, descriptor.artifact),
        origin=ORIGIN_PROJECT,
    )

    dependencies: List[ResolvedArtifact] = []
    for entry in descriptor.dependencies:
        if not entry.on_runtime_classpath:
            log.debug("Skipping %s with scope %s", entry.coordinates, entry.scope)
            continue
        if entry.path:
            dependencies.append(
                ResolvedArtifact(
                    coordinates=entry.coordinates,
                    path=_local_path(base_dir, entry),
                    origin=ORIGIN_DESCRIPTOR,
                )
            )
            continue
        resolution = resolver.resolve(entry.coordinates)
        if not resolution.ok:
            raise ArtifactResolutionError(f"Unable to resolve dependency {entry.coordinates}: {resolution.reason}")
        dependencies.append(resolution.artifact)

    log.info("Project %s with %d runtime dependencies", project_artifact, len(dependencies))
    return BuildProject(artifact=project_artifact, dependencies=dependencies)
