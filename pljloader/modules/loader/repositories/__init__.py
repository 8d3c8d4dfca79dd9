"""Repository exports."""

from .base import ModuleSession, ModuleStore
from .memory import InMemoryModuleStore
from .pljava import PlJavaModuleStore, PlJavaSession

__all__ = [
    "InMemoryModuleStore",
    "ModuleSession",
    "ModuleStore",
    "PlJavaModuleStore",
    "PlJavaSession",
]
