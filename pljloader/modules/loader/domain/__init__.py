from .artifact import ArtifactCoordinates, Resolution, ResolvedArtifact
from .models import ArchiveEntry, BuildProject, Classpath, EntryKind, RemoveOutcome
from .project import ArtifactDescriptor, ProjectDescriptor

__all__ = [
    "ArtifactCoordinates",
    "ArchiveEntry",
    "ArtifactDescriptor",
    "BuildProject",
    "Classpath",
    "EntryKind",
    "ProjectDescriptor",
    "RemoveOutcome",
    "Resolution",
    "ResolvedArtifact",
]
