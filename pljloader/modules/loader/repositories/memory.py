"""In-memory module store implementation."""

from __future__ import annotations

from contextlib import contextmanager
from typing import Dict, Iterator, List, Tuple

from pljloader.modules.loader.domain import RemoveOutcome
from pljloader.modules.loader.repositories.base import ModuleSession, ModuleStore


class InMemoryModuleStore(ModuleStore, ModuleSession):
    """Simple storage so dry runs and tests behave without a database."""

    def __init__(self) -> None:
        self.modules: Dict[str, bytes] = {}
        self.calls: List[Tuple[str, str]] = []
        self.sessions_opened = 0
        self.sessions_closed = 0

    def describe(self) -> str:
        return "in-memory store"

    @contextmanager
    def session(self) -> Iterator[ModuleSession]:
        self.sessions_opened += 1
        try:
            yield self
        finally:
            self.sessions_closed += 1

    def remove(self, name: str, cascade: bool = False) -> RemoveOutcome:
        self.calls.append(("remove", name))
        if self.modules.pop(name, None) is None:
            return RemoveOutcome(removed=False, message=f"no module named {name}")
        return RemoveOutcome(removed=True)

    def install(self, payload: bytes, name: str, replace: bool = True) -> bool:
        self.calls.append(("install", name))
        if name in self.modules and not replace:
            return False
        self.modules[name] = bytes(payload)
        return True
