"""Store contracts for installed modules."""

from __future__ import annotations

from typing import ContextManager

from pljloader.modules.loader.domain import RemoveOutcome


class ModuleSession:
    """Operations available while a store session is open."""

    def remove(self, name: str, cascade: bool = False) -> RemoveOutcome:
        raise NotImplementedError

    def install(self, payload: bytes, name: str, replace: bool = True) -> bool:
        raise NotImplementedError


class ModuleStore:
    def describe(self) -> str:
        return self.__class__.__name__

    def session(self) -> ContextManager[ModuleSession]:
        """Open the single session shared by every call of a run."""
        raise NotImplementedError
