"""HTTP client to fetch artifacts from a Maven/Nexus repository."""

from __future__ import annotations

import logging
import time
from pathlib import Path
from typing import Optional

import httpx

from pljloader.modules.loader.domain import ArtifactCoordinates
from pljloader.settings import Settings


class NexusDownloader:
    """Download artifacts from a Nexus repository to the local filesystem."""

    def __init__(self, settings: Settings, client: Optional[httpx.Client] = None) -> None:
        if not settings.nexus_base_url:
            raise ValueError("nexus_base_url is required for remote resolution")
        self.settings = settings
        self.base_url = settings.nexus_base_url.rstrip("/")
        self.repository = settings.nexus_repository
        self.log = logging.getLogger(self.__class__.__name__)
        auth = None
        if settings.nexus_username and settings.nexus_password:
            auth = (settings.nexus_username, settings.nexus_password)
        self._auth = auth
        self._client = client or httpx.Client(timeout=30, verify=True, follow_redirects=True)

    @property
    def repository_url(self) -> str:
        return f"{self.base_url}/repository/{self.repository}"

    def artifact_url(self, coords: ArtifactCoordinates) -> str:
        path = "/".join(coords.path_segments)
        return f"{self.repository_url}/{path}"

    def download(self, coords: ArtifactCoordinates, dest_path: Path) -> Path:
        """Stream the artifact into ``dest_path``; partial files are removed on error."""
        url = self.artifact_url(coords)
        dest_path.parent.mkdir(parents=True, exist_ok=True)
        partial = dest_path.with_name(dest_path.name + ".part")
        self.log.info("Downloading artifact %s url=%s", coords, url)
        start_time = time.time()
        downloaded = 0
        try:
            with self._client.stream("GET", url, auth=self._auth) as response:
                response.raise_for_status()
                with open(partial, "wb") as fh:
                    for chunk in response.iter_bytes(65536):
                        if not chunk:
                            continue
                        fh.write(chunk)
                        downloaded += len(chunk)
            partial.replace(dest_path)
        finally:
            if partial.exists():
                partial.unlink()
        elapsed = max(time.time() - start_time, 1e-3)
        self.log.info(
            "Downloaded artifact %s -> %s (%d bytes, %.2fs)",
            coords,
            dest_path,
            downloaded,
            elapsed,
        )
        return dest_path

    def close(self) -> None:
        self._client.close()
