"""Domain objects describing Maven artifacts."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import List, Optional

from .constants import DEFAULT_EXTENSION


@dataclass(frozen=True)
class ArtifactCoordinates:
    """Represents a Maven/Nexus artifact coordinate."""

    groupid: str
    artifactid: str
    version: str
    extension: str = DEFAULT_EXTENSION
    classifier: Optional[str] = None

    @classmethod
    def parse(cls, spec: str) -> "ArtifactCoordinates":
        """Parse ``g:a:v``, ``g:a:type:v`` or ``g:a:type:classifier:v``."""
        parts = [segment.strip() for segment in spec.strip().split(":")]
        if any(not part for part in parts):
            raise ValueError(f"invalid artifact coordinates {spec!r}")
        if len(parts) == 3:
            groupid, artifactid, version = parts
            return cls(groupid=groupid, artifactid=artifactid, version=version)
        if len(parts) == 4:
            groupid, artifactid, extension, version = parts
            return cls(groupid=groupid, artifactid=artifactid, version=version, extension=extension)
        if len(parts) == 5:
            groupid, artifactid, extension, classifier, version = parts
            return cls(
                groupid=groupid,
                artifactid=artifactid,
                version=version,
                extension=extension,
                classifier=classifier,
            )
        raise ValueError(
            f"invalid artifact coordinates {spec!r}, expected groupId:artifactId[:type[:classifier]]:version"
        )

    @property
    def filename(self) -> str:
        suffix = f"-{self.classifier}" if self.classifier else ""
        return f"{self.artifactid}-{self.version}{suffix}.{self.extension}"

    @property
    def path_segments(self) -> List[str]:
        group_path = self.groupid.replace(".", "/")
        return [group_path, self.artifactid, self.version, self.filename]

    def __str__(self) -> str:
        parts = [self.groupid, self.artifactid, self.extension]
        if self.classifier:
            parts.append(self.classifier)
        parts.append(self.version)
        return ":".join(parts)


@dataclass(frozen=True)
class ResolvedArtifact:
    """Coordinates bound to a local file or directory."""

    coordinates: ArtifactCoordinates
    path: Path
    origin: str = ""

    def __str__(self) -> str:
        return str(self.coordinates)


@dataclass(frozen=True)
class Resolution:
    """Outcome of resolving coordinates: an artifact or the reason it failed."""

    coordinates: ArtifactCoordinates
    artifact: Optional[ResolvedArtifact] = None
    reason: str = ""

    @property
    def ok(self) -> bool:
        return self.artifact is not None

    @classmethod
    def success(cls, artifact: ResolvedArtifact) -> "Resolution":
        return cls(coordinates=artifact.coordinates, artifact=artifact)

    @classmethod
    def failure(cls, coordinates: ArtifactCoordinates, reason: str) -> "Resolution":
        return cls(coordinates=coordinates, reason=reason)
