"""PostgreSQL/PL/Java backed module store."""

from __future__ import annotations

import logging
from contextlib import contextmanager
from typing import Callable, Iterator

import psycopg

from pljloader.db import describe_target, pg_connection
from pljloader.modules.loader.domain import RemoveOutcome
from pljloader.modules.loader.exceptions import ModuleStoreError, StoreUnavailableError
from pljloader.modules.loader.repositories.base import ModuleSession, ModuleStore
from pljloader.settings import Settings

log = logging.getLogger(__name__)

REMOVE_SQL = "SELECT sqlj.remove_jar(%s, %s)"
INSTALL_SQL = "SELECT sqlj.install_jar(%s, %s, %s)"

Connector = Callable[[Settings], psycopg.Connection]


class PlJavaSession(ModuleSession):
    """Calls the ``sqlj`` schema functions over one autocommit connection."""

    def __init__(self, conn: psycopg.Connection) -> None:
        self.conn = conn

    def _raise_if_broken(self, exc: psycopg.Error) -> None:
        if self.conn.closed or self.conn.broken:
            raise StoreUnavailableError(f"Lost connection to the database: {exc}") from exc

    def remove(self, name: str, cascade: bool = False) -> RemoveOutcome:
        try:
            with self.conn.cursor() as cur:
                cur.execute(REMOVE_SQL, (name, cascade))
        except psycopg.Error as exc:
            self._raise_if_broken(exc)
            return RemoveOutcome(removed=False, message=str(exc).strip())
        return RemoveOutcome(removed=True)

    def install(self, payload: bytes, name: str, replace: bool = True) -> bool:
        try:
            with self.conn.cursor() as cur:
                cur.execute(INSTALL_SQL, (payload, name, replace))
                row = cur.fetchone()
        except psycopg.Error as exc:
            self._raise_if_broken(exc)
            raise ModuleStoreError(f"sqlj.install_jar rejected {name}: {str(exc).strip()}") from exc
        return row is not None


class PlJavaModuleStore(ModuleStore):
    def __init__(self, settings: Settings, connect: Connector = pg_connection) -> None:
        self.settings = settings
        self._connect = connect

    def describe(self) -> str:
        return describe_target(self.settings)

    @contextmanager
    def session(self) -> Iterator[ModuleSession]:
        target = self.describe()
        try:
            conn = self._connect(self.settings)
        except psycopg.Error as exc:
            raise StoreUnavailableError(f"Unable to connect to {target}: {exc}") from exc
        log.info("using driver psycopg %s, url: %s", psycopg.__version__, target)
        try:
            yield PlJavaSession(conn)
        finally:
            conn.close()
