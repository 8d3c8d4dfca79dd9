"""Errors raised while loading artifacts into the module store."""

from __future__ import annotations

from pathlib import Path
from typing import Optional, Sequence


class LoaderError(RuntimeError):
    """Base class for failures that abort a load run."""


class ProjectDescriptorError(LoaderError):
    """Raised when the project descriptor is missing or malformed."""


class ArtifactResolutionError(LoaderError):
    """Raised when a dependency of the project itself cannot be resolved."""


class ArtifactReadError(LoaderError):
    """Raised when an artifact's file or directory content cannot be read."""

    def __init__(self, message: str, path: Optional[Path] = None) -> None:
        super().__init__(message)
        self.path = path


class StoreUnavailableError(LoaderError):
    """Raised when the module store cannot be reached or the session broke."""


class ModuleStoreError(LoaderError):
    """Raised when the store rejects a statement."""


class InstallError(LoaderError):
    """Raised when the store does not report a successful install."""

    def __init__(self, message: str, *, artifact: str, name: str, completed: Sequence[str] = ()) -> None:
        super().__init__(message)
        self.artifact = artifact
        self.name = name
        self.completed = list(completed)
