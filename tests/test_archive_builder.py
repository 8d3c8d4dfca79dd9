import calendar
import io
import os
import time
from pathlib import Path
from zipfile import ZipFile

import pytest

from pljloader.modules.loader.archive import build_archive, collect_entries
from pljloader.modules.loader.domain import ArtifactCoordinates, EntryKind, ResolvedArtifact
from pljloader.modules.loader.exceptions import ArtifactReadError
from pljloader.modules.loader.repositories import InMemoryModuleStore
from pljloader.modules.loader.service import ModuleInstaller


def _stamp(*fields) -> float:
    return float(calendar.timegm((*fields, 0, 0, -1)))


def _build_tree(root: Path) -> None:
    (root / "lib").mkdir()
    (root / "meta").mkdir()
    (root / "lib" / "util.jar").write_bytes(b"\x00jar-bytes\xff")
    (root / "org" / "acme").mkdir(parents=True)
    (root / "org" / "acme" / "Udf.class").write_bytes(b"cafebabe")
    (root / "plugin.properties").write_text("name=udf\n")


def test_entries_cover_every_file_and_subdirectory(tmp_path):
    _build_tree(tmp_path)

    entries = collect_entries(tmp_path)
    paths = [entry.path for entry in entries]

    assert paths == [
        "lib/",
        "lib/util.jar",
        "meta/",
        "org/",
        "org/acme/",
        "org/acme/Udf.class",
        "plugin.properties",
    ]
    assert [e.path for e in entries if e.kind is EntryKind.DIRECTORY] == ["lib/", "meta/", "org/", "org/acme/"]
    assert "" not in paths and "/" not in paths


def test_file_entries_keep_content_and_mtime(tmp_path):
    _build_tree(tmp_path)
    jar = tmp_path / "lib" / "util.jar"
    stamp = _stamp(2021, 5, 4, 10, 20, 30)
    os.utime(jar, (stamp, stamp))
    meta_stamp = _stamp(2020, 1, 2, 3, 4, 6)
    os.utime(tmp_path / "meta", (meta_stamp, meta_stamp))

    entries = {entry.path: entry for entry in collect_entries(tmp_path)}

    assert entries["lib/util.jar"].data == b"\x00jar-bytes\xff"
    assert entries["lib/util.jar"].mtime == stamp
    assert entries["meta/"].mtime == meta_stamp
    assert entries["meta/"].data == b""


def test_archive_is_a_readable_jar(tmp_path):
    _build_tree(tmp_path)
    jar = tmp_path / "lib" / "util.jar"
    stamp = _stamp(2021, 5, 4, 10, 20, 30)
    os.utime(jar, (stamp, stamp))

    payload = build_archive(tmp_path)

    with ZipFile(io.BytesIO(payload)) as archive:
        names = archive.namelist()
        assert names.count("lib/util.jar") == 1
        assert names.count("meta/") == 1
        assert len(names) == 7
        assert archive.read("lib/util.jar") == b"\x00jar-bytes\xff"
        assert archive.read("org/acme/Udf.class") == b"cafebabe"
        assert archive.getinfo("lib/util.jar").date_time == (2021, 5, 4, 10, 20, 30)
        assert archive.getinfo("meta/").is_dir()


def test_same_tree_gives_identical_bytes(tmp_path):
    first = tmp_path / "first"
    first.mkdir()
    _build_tree(first)

    assert build_archive(first) == build_archive(first)


def test_empty_root_gives_empty_archive(tmp_path):
    assert collect_entries(tmp_path) == []
    with ZipFile(io.BytesIO(build_archive(tmp_path))) as archive:
        assert archive.namelist() == []


def test_timestamps_before_1980_are_clamped(tmp_path):
    old = tmp_path / "old.txt"
    old.write_text("old")
    stamp = _stamp(1975, 6, 1, 12, 0, 0)
    os.utime(old, (stamp, stamp))

    with ZipFile(io.BytesIO(build_archive(tmp_path))) as archive:
        assert archive.getinfo("old.txt").date_time == (1980, 1, 1, 0, 0, 0)


def test_timestamps_after_2107_are_clamped(tmp_path):
    (tmp_path / "future").mkdir()
    late = tmp_path / "future" / "late.txt"
    late.write_text("late")
    stamp = _stamp(2150, 1, 1, 0, 0, 0)
    os.utime(late, (stamp, stamp))
    os.utime(tmp_path / "future", (stamp, stamp))

    with ZipFile(io.BytesIO(build_archive(tmp_path))) as archive:
        assert archive.getinfo("future/").date_time == (2107, 12, 31, 23, 59, 58)
        assert archive.getinfo("future/late.txt").date_time == (2107, 12, 31, 23, 59, 58)
        assert archive.read("future/late.txt") == b"late"


def test_far_future_directory_artifact_installs(tmp_path):
    classes = tmp_path / "classes"
    classes.mkdir()
    udf = classes / "Udf.class"
    udf.write_bytes(b"cafebabe")
    stamp = _stamp(2150, 1, 1, 0, 0, 0)
    os.utime(udf, (stamp, stamp))
    artifact = ResolvedArtifact(coordinates=ArtifactCoordinates.parse("g:udf:1.0"), path=classes)
    store = InMemoryModuleStore()

    classpath = ModuleInstaller().install_all([artifact], store)

    assert classpath.names == ["udf_1_0"]
    with ZipFile(io.BytesIO(store.modules["udf_1_0"])) as archive:
        assert archive.read("Udf.class") == b"cafebabe"


def test_timestamps_do_not_depend_on_local_timezone(tmp_path, monkeypatch):
    jar = tmp_path / "util.jar"
    jar.write_bytes(b"jar")
    stamp = _stamp(2021, 5, 4, 10, 20, 30)
    os.utime(jar, (stamp, stamp))

    with ZipFile(io.BytesIO(build_archive(tmp_path))) as archive:
        assert archive.getinfo("util.jar").date_time == (2021, 5, 4, 10, 20, 30)

    monkeypatch.setenv("TZ", "IST-5:30")
    if hasattr(time, "tzset"):
        time.tzset()
    try:
        with ZipFile(io.BytesIO(build_archive(tmp_path))) as archive:
            assert archive.getinfo("util.jar").date_time == (2021, 5, 4, 10, 20, 30)
    finally:
        monkeypatch.undo()
        if hasattr(time, "tzset"):
            time.tzset()


def test_unreadable_nested_entry_aborts_whole_archive(tmp_path):
    (tmp_path / "a_good.txt").write_text("good")
    nested = tmp_path / "b_pkg"
    nested.mkdir()
    (nested / "Fine.class").write_bytes(b"cafebabe")
    (nested / "dangling.jar").symlink_to(tmp_path / "nowhere.jar")
    payload = None

    with pytest.raises(ArtifactReadError) as excinfo:
        payload = build_archive(tmp_path)

    assert payload is None
    assert excinfo.value.path == tmp_path
    with pytest.raises(ArtifactReadError):
        collect_entries(tmp_path)


def test_missing_root_is_a_read_error(tmp_path):
    with pytest.raises(ArtifactReadError):
        build_archive(tmp_path / "absent")
