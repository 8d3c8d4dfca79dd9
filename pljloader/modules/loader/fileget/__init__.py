from .nexus_downloader import NexusDownloader
from .resolver import ArtifactResolver

__all__ = ["ArtifactResolver", "NexusDownloader"]
