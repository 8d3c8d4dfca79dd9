"""Resolve coordinates to local files: local repository first, then Nexus."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

import httpx

from pljloader.modules.loader.domain import ArtifactCoordinates, Resolution, ResolvedArtifact
from pljloader.modules.loader.domain.constants import ORIGIN_LOCAL_REPOSITORY, ORIGIN_REMOTE_PREFIX
from pljloader.settings import Settings

from .nexus_downloader import NexusDownloader


class ArtifactResolver:
    """Maps coordinates to a file in a Maven-layout local repository."""

    def __init__(self, local_repository: Path, downloader: Optional[NexusDownloader] = None) -> None:
        self.local_repository = Path(local_repository).expanduser()
        self.downloader = downloader
        self.log = logging.getLogger(self.__class__.__name__)

    @classmethod
    def from_settings(cls, settings: Settings, client: Optional[httpx.Client] = None) -> "ArtifactResolver":
        downloader = NexusDownloader(settings, client=client) if settings.nexus_base_url else None
        return cls(Path(settings.maven_local_repository), downloader=downloader)

    def local_path(self, coords: ArtifactCoordinates) -> Path:
        return self.local_repository.joinpath(*coords.path_segments)

    def resolve(self, coords: ArtifactCoordinates) -> Resolution:
        target = self.local_path(coords)
        if target.is_file():
            self.log.debug("Resolved %s from local repository %s", coords, target)
            return Resolution.success(
                ResolvedArtifact(coordinates=coords, path=target, origin=ORIGIN_LOCAL_REPOSITORY)
            )

        if self.downloader is None:
            return Resolution.failure(coords, f"{target} not found and no remote repository configured")

        try:
            self.downloader.download(coords, target)
        except httpx.HTTPStatusError as exc:
            return Resolution.failure(coords, f"HTTP {exc.response.status_code} for {exc.request.url}")
        except (httpx.HTTPError, OSError) as exc:
            return Resolution.failure(coords, f"download failed: {exc}")
        origin = ORIGIN_REMOTE_PREFIX + self.downloader.repository_url
        return Resolution.success(ResolvedArtifact(coordinates=coords, path=target, origin=origin))
