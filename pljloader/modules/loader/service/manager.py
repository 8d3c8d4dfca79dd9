"""Load run orchestration: artifact set, one store session, publication."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional, Sequence

from pljloader.modules.loader.domain import ArtifactCoordinates, BuildProject, Classpath, ResolvedArtifact
from pljloader.modules.loader.publish import ClasspathPublisher
from pljloader.modules.loader.repositories import ModuleStore

from .artifact_set import ArtifactSetBuilder, Resolver
from .installer import ModuleInstaller
from .project import load_project

log = logging.getLogger(__name__)


@dataclass
class LoadRequest:
    project: BuildProject
    excluded: Sequence[ArtifactCoordinates] = ()
    additional: Sequence[ArtifactCoordinates] = ()
    classpath_property: Optional[str] = None


@dataclass
class LoadResult:
    classpath: Classpath
    artifacts: List[ResolvedArtifact] = field(default_factory=list)
    published_to: Optional[Path] = None


class LoaderService:
    """Loads a project's runtime artifacts into the module store."""

    def __init__(
        self,
        resolver: Resolver,
        store: ModuleStore,
        publisher: Optional[ClasspathPublisher] = None,
        installer: Optional[ModuleInstaller] = None,
    ) -> None:
        self.resolver = resolver
        self.store = store
        self.publisher = publisher
        self.artifact_set_builder = ArtifactSetBuilder(resolver)
        self.installer = installer or ModuleInstaller()

    def load_project(self, project_file: Path) -> BuildProject:
        return load_project(project_file, self.resolver)

    def run(self, request: LoadRequest) -> LoadResult:
        artifacts = self.artifact_set_builder.build(request.project, request.excluded, request.additional)
        log.info("Loading %d artifacts into %s", len(artifacts), self.store.describe())

        with self.store.session() as session:
            classpath = self.installer.install_all(artifacts, session)

        result = LoadResult(classpath=classpath, artifacts=artifacts)
        if request.classpath_property and self.publisher:
            result.published_to = self.publisher.publish(request.classpath_property, classpath.render())
        log.info("Installed %d modules, classpath: %s", len(classpath), classpath.render())
        return result
