from .artifact_set import ArtifactSetBuilder
from .installer import ModuleInstaller
from .manager import LoaderService, LoadRequest, LoadResult
from .naming import generate_name, sanitize
from .project import load_project

__all__ = [
    "ArtifactSetBuilder",
    "LoadRequest",
    "LoadResult",
    "LoaderService",
    "ModuleInstaller",
    "generate_name",
    "load_project",
    "sanitize",
]
