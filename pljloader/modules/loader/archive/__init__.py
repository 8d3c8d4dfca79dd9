from .builder import build_archive, collect_entries, write_archive
from .content import load_content

__all__ = ["build_archive", "collect_entries", "load_content", "write_archive"]
