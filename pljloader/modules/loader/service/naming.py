"""Module names derived from artifact coordinates."""

from __future__ import annotations

from typing import Union

from pljloader.modules.loader.domain import ArtifactCoordinates, ResolvedArtifact


def sanitize(value: str) -> str:
    return value.replace("-", "_").replace(".", "_")


def generate_name(artifact: Union[ResolvedArtifact, ArtifactCoordinates]) -> str:
    """Return ``<artifactId>_<version>`` with every ``-`` and ``.`` as ``_``.

    The groupId takes no part, so artifacts differing only by group share a
    name and replace each other in the store.
    """
    coords = artifact.coordinates if isinstance(artifact, ResolvedArtifact) else artifact
    return f"{sanitize(coords.artifactid)}_{sanitize(coords.version)}"
