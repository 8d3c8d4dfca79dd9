"""Runtime configuration for the PL/Java loader."""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path
from typing import List, Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


def _default_local_repository() -> str:
    return str(Path.home() / ".m2" / "repository")


class Settings(BaseSettings):
    """Configuration values mapped from ``PLJ_*`` environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="PLJ_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    app_name: str = "pljava-loader"
    version: str = "1.0.0"

    # Target database (PL/Java enabled PostgreSQL)
    database_url: Optional[str] = None
    db_host: str = "127.0.0.1"
    db_port: int = 5432
    db_name: str = "postgres"
    db_user: Optional[str] = None
    db_password: Optional[str] = None

    # Artifact resolution
    maven_local_repository: str = Field(default_factory=_default_local_repository)
    nexus_base_url: Optional[str] = None
    nexus_repository: str = "releases"
    nexus_username: Optional[str] = None
    nexus_password: Optional[str] = None

    # Artifact set
    project_file: str = "pljava-project.json"
    excluded: List[str] = Field(default_factory=list)
    additional: List[str] = Field(default_factory=list)

    # Classpath publication
    classpath_property: Optional[str] = None
    classpath_file: str = "pljava-loader.properties"


@lru_cache
def get_settings() -> Settings:
    """Return a cached Settings instance."""
    return Settings()
