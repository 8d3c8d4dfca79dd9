"""Dataclasses shared by the loader services."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Iterator, List

from .artifact import ResolvedArtifact
from .constants import CLASSPATH_SEPARATOR


class EntryKind(str, Enum):
    FILE = "file"
    DIRECTORY = "directory"


@dataclass(frozen=True)
class ArchiveEntry:
    """One path-addressed entry of a directory archive."""

    path: str
    kind: EntryKind
    mtime: float
    data: bytes = b""

    @property
    def is_dir(self) -> bool:
        return self.kind is EntryKind.DIRECTORY


@dataclass
class Classpath:
    """Ordered module names installed during a run."""

    names: List[str] = field(default_factory=list)

    def append(self, name: str) -> None:
        self.names.append(name)

    def render(self) -> str:
        return CLASSPATH_SEPARATOR.join(self.names)

    def __len__(self) -> int:
        return len(self.names)

    def __iter__(self) -> Iterator[str]:
        return iter(self.names)

    def __str__(self) -> str:
        return self.render()


@dataclass
class BuildProject:
    """The project's own output plus its resolved runtime dependencies."""

    artifact: ResolvedArtifact
    dependencies: List[ResolvedArtifact] = field(default_factory=list)


@dataclass(frozen=True)
class RemoveOutcome:
    removed: bool
    message: str = ""
