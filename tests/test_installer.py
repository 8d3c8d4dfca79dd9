from pathlib import Path

import pytest

from pljloader.modules.loader.domain import ArtifactCoordinates, RemoveOutcome, ResolvedArtifact
from pljloader.modules.loader.exceptions import (
    ArtifactReadError,
    InstallError,
    ModuleStoreError,
    StoreUnavailableError,
)
from pljloader.modules.loader.repositories import InMemoryModuleStore
from pljloader.modules.loader.service import ModuleInstaller


def _artifact(tmp_path: Path, spec: str, content: bytes = b"jar") -> ResolvedArtifact:
    coords = ArtifactCoordinates.parse(spec)
    path = tmp_path / coords.filename
    path.write_bytes(content)
    return ResolvedArtifact(coordinates=coords, path=path, origin="test")


class RejectingStore(InMemoryModuleStore):
    def __init__(self, reject: str) -> None:
        super().__init__()
        self.reject = reject

    def install(self, payload: bytes, name: str, replace: bool = True) -> bool:
        if name == self.reject:
            self.calls.append(("install", name))
            return False
        return super().install(payload, name, replace)


def test_installs_in_order_and_builds_classpath(tmp_path):
    artifacts = [
        _artifact(tmp_path, "org.x:core-lib:2.3.1", b"core"),
        _artifact(tmp_path, "org.x:api:1.0", b"api"),
        _artifact(tmp_path, "org.y:udf:0.1-SNAPSHOT", b"udf"),
    ]
    store = InMemoryModuleStore()

    classpath = ModuleInstaller().install_all(artifacts, store)

    assert classpath.names == ["core_lib_2_3_1", "api_1_0", "udf_0_1_SNAPSHOT"]
    assert classpath.render() == "core_lib_2_3_1:api_1_0:udf_0_1_SNAPSHOT"
    assert store.calls == [
        ("remove", "core_lib_2_3_1"),
        ("install", "core_lib_2_3_1"),
        ("remove", "api_1_0"),
        ("install", "api_1_0"),
        ("remove", "udf_0_1_SNAPSHOT"),
        ("install", "udf_0_1_SNAPSHOT"),
    ]
    assert store.modules["api_1_0"] == b"api"


def test_remove_of_unknown_module_does_not_block_install(tmp_path):
    store = InMemoryModuleStore()
    artifact = _artifact(tmp_path, "g:fresh:1.0")

    assert store.remove("fresh_1_0") == RemoveOutcome(removed=False, message="no module named fresh_1_0")
    classpath = ModuleInstaller().install_all([artifact], store)

    assert classpath.names == ["fresh_1_0"]
    assert "fresh_1_0" in store.modules


def test_reinstalling_same_name_keeps_second_payload(tmp_path):
    store = InMemoryModuleStore()
    installer = ModuleInstaller()
    first = tmp_path / "first"
    second = tmp_path / "second"
    first.mkdir()
    second.mkdir()

    installer.install_all([_artifact(first, "g:udf:1.0", b"one")], store)
    installer.install_all([_artifact(second, "g:udf:1.0", b"two")], store)

    assert list(store.modules) == ["udf_1_0"]
    assert store.modules["udf_1_0"] == b"two"


def test_failed_install_stops_the_batch(tmp_path):
    artifacts = [
        _artifact(tmp_path, "g:alpha:1.0"),
        _artifact(tmp_path, "g:widget:1.0.0"),
        _artifact(tmp_path, "g:omega:1.0"),
    ]
    store = RejectingStore(reject="widget_1_0_0")

    with pytest.raises(InstallError) as excinfo:
        ModuleInstaller().install_all(artifacts, store)

    error = excinfo.value
    assert error.name == "widget_1_0_0"
    assert error.artifact == "g:widget:jar:1.0.0"
    assert error.completed == ["alpha_1_0"]
    assert all(name != "omega_1_0" for _, name in store.calls)


def test_store_statement_error_is_an_install_error(tmp_path):
    class BrokenInstallStore(InMemoryModuleStore):
        def install(self, payload, name, replace=True):
            raise ModuleStoreError("permission denied for schema sqlj")

    with pytest.raises(InstallError) as excinfo:
        ModuleInstaller().install_all([_artifact(tmp_path, "g:udf:1.0")], BrokenInstallStore())

    assert isinstance(excinfo.value.__cause__, ModuleStoreError)
    assert "udf_1_0" in str(excinfo.value)


def test_read_failure_aborts_before_install(tmp_path):
    good = _artifact(tmp_path, "g:good:1.0")
    missing = ResolvedArtifact(
        coordinates=ArtifactCoordinates.parse("g:gone:1.0"),
        path=tmp_path / "gone-1.0.jar",
    )
    later = _artifact(tmp_path, "g:later:1.0")
    store = InMemoryModuleStore()

    with pytest.raises(ArtifactReadError) as excinfo:
        ModuleInstaller().install_all([good, missing, later], store)

    assert "gone_1_0" in str(excinfo.value)
    assert ("install", "gone_1_0") not in store.calls
    assert ("remove", "later_1_0") not in store.calls
    assert list(store.modules) == ["good_1_0"]


def test_connection_loss_during_remove_propagates(tmp_path):
    class DisconnectedStore(InMemoryModuleStore):
        def remove(self, name, cascade=False):
            raise StoreUnavailableError("server closed the connection unexpectedly")

    with pytest.raises(StoreUnavailableError):
        ModuleInstaller().install_all([_artifact(tmp_path, "g:udf:1.0")], DisconnectedStore())


def test_directory_artifact_is_installed_as_archive(tmp_path):
    classes = tmp_path / "classes"
    classes.mkdir()
    (classes / "Udf.class").write_bytes(b"cafebabe")
    artifact = ResolvedArtifact(coordinates=ArtifactCoordinates.parse("g:udf:1.0"), path=classes)
    store = InMemoryModuleStore()

    ModuleInstaller().install_all([artifact], store)

    assert store.modules["udf_1_0"].startswith(b"PK")
