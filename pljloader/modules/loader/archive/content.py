"""Resolve the byte payload installed for an artifact."""

from __future__ import annotations

from pathlib import Path

from ..exceptions import ArtifactReadError
from .builder import build_archive


def load_content(path: Path) -> bytes:
    """Return file bytes for a jar, or a freshly built archive for a directory."""
    path = Path(path)
    if path.is_dir():
        return build_archive(path)
    try:
        return path.read_bytes()
    except OSError as exc:
        raise ArtifactReadError(f"Unable to read {path}: {exc}", path=path) from exc
