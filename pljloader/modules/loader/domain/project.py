"""Pydantic models for the JSON project descriptor."""

from __future__ import annotations

from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field

from .artifact import ArtifactCoordinates
from .constants import DEFAULT_EXTENSION, DEFAULT_SCOPE, RUNTIME_SCOPES


class ArtifactDescriptor(BaseModel):
    """One artifact entry as written in ``pljava-project.json``."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    group_id: str = Field(alias="groupId")
    artifact_id: str = Field(alias="artifactId")
    version: str
    type: str = DEFAULT_EXTENSION
    classifier: Optional[str] = None
    scope: str = DEFAULT_SCOPE
    path: Optional[str] = None

    @property
    def coordinates(self) -> ArtifactCoordinates:
        return ArtifactCoordinates(
            groupid=self.group_id,
            artifactid=self.artifact_id,
            version=self.version,
            extension=self.type,
            classifier=self.classifier or None,
        )

    @property
    def on_runtime_classpath(self) -> bool:
        return self.scope.lower() in RUNTIME_SCOPES


class ProjectDescriptor(BaseModel):
    model_config = ConfigDict(extra="ignore")

    artifact: ArtifactDescriptor
    dependencies: List[ArtifactDescriptor] = Field(default_factory=list)
