"""Drop-then-install of each artifact into the module store."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Callable, Iterable

from pljloader.modules.loader.archive import load_content
from pljloader.modules.loader.domain import Classpath, ResolvedArtifact
from pljloader.modules.loader.exceptions import ArtifactReadError, InstallError, ModuleStoreError
from pljloader.modules.loader.repositories import ModuleSession

from .naming import generate_name

ContentLoader = Callable[[Path], bytes]


class ModuleInstaller:
    """Installs artifacts one by one and accumulates the classpath."""

    def __init__(self, content_loader: ContentLoader = load_content) -> None:
        self.content_loader = content_loader
        self.log = logging.getLogger(self.__class__.__name__)

    def install_all(self, artifacts: Iterable[ResolvedArtifact], session: ModuleSession) -> Classpath:
        classpath = Classpath()
        for artifact in artifacts:
            name = generate_name(artifact)
            self._drop(session, name)
            self.log.info("loading artifact %s, name: %s file: %s", artifact, name, artifact.path)
            self._load(session, artifact, name, classpath)
            classpath.append(name)
        return classpath

    def _drop(self, session: ModuleSession, name: str) -> None:
        self.log.info("dropping jar %s", name)
        outcome = session.remove(name, cascade=False)
        if not outcome.removed:
            self.log.debug("dropping %s : %s", name, outcome.message)

    def _load(self, session: ModuleSession, artifact: ResolvedArtifact, name: str, classpath: Classpath) -> None:
        try:
            payload = self.content_loader(artifact.path)
        except ArtifactReadError as exc:
            raise ArtifactReadError(
                f"Unable to read artifact {artifact} for {name}: {exc}",
                path=artifact.path,
            ) from exc

        try:
            installed = session.install(payload, name, replace=True)
        except ModuleStoreError as exc:
            raise InstallError(
                f"Unable to load jar {name} {artifact.path}: {exc}",
                artifact=str(artifact),
                name=name,
                completed=classpath.names,
            ) from exc
        if not installed:
            raise InstallError(
                f"Unable to load jar {name} {artifact.path}",
                artifact=str(artifact),
                name=name,
                completed=classpath.names,
            )
