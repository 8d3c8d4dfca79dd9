"""Jar up a directory tree into a single reproducible zip blob."""

from __future__ import annotations

import io
import logging
import time
from pathlib import Path
from typing import Iterable, List, Tuple
from zipfile import ZIP_DEFLATED, ZIP_STORED, ZipFile, ZipInfo

from ..domain import ArchiveEntry, EntryKind
from ..exceptions import ArtifactReadError

log = logging.getLogger(__name__)

# Range of timestamps a zip entry can carry.
ZIP_EPOCH: Tuple[int, int, int, int, int, int] = (1980, 1, 1, 0, 0, 0)
ZIP_MAX: Tuple[int, int, int, int, int, int] = (2107, 12, 31, 23, 59, 58)

# MS-DOS creator with the directory attribute bit for markers.
CREATE_SYSTEM = 0
DOS_DIRECTORY_ATTR = 0x10


def _relative_name(root: Path, node: Path) -> str:
    return node.relative_to(root).as_posix()


def _sorted_children(directory: Path) -> List[Path]:
    return sorted(directory.iterdir(), key=lambda child: child.name)


def _walk(root: Path, directory: Path, entries: List[ArchiveEntry]) -> None:
    for child in _sorted_children(directory):
        name = _relative_name(root, child)
        if child.is_dir():
            entries.append(
                ArchiveEntry(
                    path=name + "/",
                    kind=EntryKind.DIRECTORY,
                    mtime=child.stat().st_mtime,
                )
            )
            _walk(root, child, entries)
            continue
        entries.append(
            ArchiveEntry(
                path=name,
                kind=EntryKind.FILE,
                mtime=child.stat().st_mtime,
                data=child.read_bytes(),
            )
        )


def collect_entries(root: Path) -> List[ArchiveEntry]:
    """Return the entries of ``root`` depth-first, siblings sorted by name.

    The root itself never produces an entry; every other directory yields a
    ``name/`` marker ahead of its descendants.
    """
    root = Path(root)
    entries: List[ArchiveEntry] = []
    try:
        _walk(root, root, entries)
    except OSError as exc:
        raise ArtifactReadError(f"Unable to read directory {root}: {exc}", path=root) from exc
    return entries


def _date_time(mtime: float) -> Tuple[int, int, int, int, int, int]:
    stamp = tuple(time.gmtime(mtime)[:6])
    if stamp < ZIP_EPOCH:
        return ZIP_EPOCH
    if stamp > ZIP_MAX:
        return ZIP_MAX
    return stamp


def _zip_info(entry: ArchiveEntry) -> ZipInfo:
    info = ZipInfo(entry.path, date_time=_date_time(entry.mtime))
    info.create_system = CREATE_SYSTEM
    if entry.is_dir:
        info.compress_type = ZIP_STORED
        info.external_attr = DOS_DIRECTORY_ATTR
    else:
        info.compress_type = ZIP_DEFLATED
        info.external_attr = 0
    return info


def write_archive(entries: Iterable[ArchiveEntry]) -> bytes:
    """Serialize entries, in the given order, into a zip (jar) blob."""
    buffer = io.BytesIO()
    with ZipFile(buffer, "w") as archive:
        for entry in entries:
            archive.writestr(_zip_info(entry), entry.data)
    return buffer.getvalue()


def build_archive(root: Path) -> bytes:
    """Jar up the directory and return its bytes."""
    entries = collect_entries(root)
    payload = write_archive(entries)
    log.debug("Archived %s: %d entries, %d bytes", root, len(entries), len(payload))
    return payload
