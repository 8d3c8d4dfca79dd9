"""Wiring of the loader services from shared settings."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

import httpx

from pljloader.modules.loader import LoaderService
from pljloader.modules.loader.fileget import ArtifactResolver
from pljloader.modules.loader.publish import ClasspathPublisher
from pljloader.modules.loader.repositories import InMemoryModuleStore, ModuleStore, PlJavaModuleStore

from .settings import Settings

log = logging.getLogger(__name__)


@dataclass
class ServiceContainer:
    """Container that wires plain-Python services with shared settings."""

    settings: Settings
    dry_run: bool = False
    http_client: Optional[httpx.Client] = None
    classpath_file: Optional[Path] = None
    resolver: ArtifactResolver = field(init=False)
    store: ModuleStore = field(init=False)
    publisher: ClasspathPublisher = field(init=False)
    loader_service: LoaderService = field(init=False)

    def __post_init__(self) -> None:
        self.resolver = ArtifactResolver.from_settings(self.settings, client=self.http_client)
        if self.dry_run:
            log.info("Dry run: modules are kept in memory, nothing is sent to the database")
            self.store = InMemoryModuleStore()
        else:
            self.store = PlJavaModuleStore(self.settings)
        self.publisher = ClasspathPublisher(self.classpath_file or Path(self.settings.classpath_file))
        self.loader_service = LoaderService(
            resolver=self.resolver,
            store=self.store,
            publisher=self.publisher,
        )

    def close(self) -> None:
        if self.resolver.downloader is not None:
            self.resolver.downloader.close()
