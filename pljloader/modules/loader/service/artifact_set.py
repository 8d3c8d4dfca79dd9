"""Combine the project's runtime set with explicit exclusions and additions."""

from __future__ import annotations

import logging
from typing import Dict, List, Protocol, Sequence

from pljloader.modules.loader.domain import (
    ArtifactCoordinates,
    BuildProject,
    Resolution,
    ResolvedArtifact,
)


class Resolver(Protocol):
    def resolve(self, coords: ArtifactCoordinates) -> Resolution:  # pragma: no cover - interface
        ...


class ArtifactSetBuilder:
    """Produces the ordered artifact collection handed to the installer."""

    def __init__(self, resolver: Resolver) -> None:
        self.resolver = resolver
        self.log = logging.getLogger(self.__class__.__name__)

    def build(
        self,
        project: BuildProject,
        excluded: Sequence[ArtifactCoordinates] = (),
        additional: Sequence[ArtifactCoordinates] = (),
    ) -> List[ResolvedArtifact]:
        artifacts: Dict[ArtifactCoordinates, ResolvedArtifact] = {}
        for dependency in project.dependencies:
            artifacts.setdefault(dependency.coordinates, dependency)
        artifacts.setdefault(project.artifact.coordinates, project.artifact)

        # Exclusions are applied before additions.
        for coords in excluded:
            resolution = self.resolver.resolve(coords)
            if not resolution.ok:
                self.log.error("can't resolve exclusion %s: %s", coords, resolution.reason)
                continue
            if artifacts.pop(resolution.artifact.coordinates, None) is None:
                self.log.info("exclusion %s matches no artifact", coords)
            else:
                self.log.info("excluded %s", coords)

        for coords in additional:
            resolution = self.resolver.resolve(coords)
            if not resolution.ok:
                self.log.warning("skipping addition %s: %s", coords, resolution.reason)
                continue
            artifacts.setdefault(resolution.artifact.coordinates, resolution.artifact)

        return list(artifacts.values())
