"""PL/Java loader module exports."""

from .service import LoaderService, LoadRequest

__all__ = ["LoadRequest", "LoaderService"]
