"""Database helpers for the PL/Java target."""

from __future__ import annotations

from typing import Any, Dict

import psycopg

from pljloader.settings import Settings

JDBC_PREFIX = "jdbc:"


def normalize_database_url(url: str) -> str:
    """Accept JDBC style URLs (``jdbc:postgresql://...``) as libpq URIs."""
    url = url.strip()
    if url.startswith(JDBC_PREFIX):
        return url[len(JDBC_PREFIX):]
    return url


def build_pg_conninfo(settings: Settings) -> Dict[str, Any]:
    """Return kwargs for psycopg based on the database settings."""
    if settings.database_url:
        # A full URI wins over the discrete host/port/user values.
        return {
            "conninfo": normalize_database_url(settings.database_url),
            "user": settings.db_user,
            "password": settings.db_password,
        }

    return {
        "host": settings.db_host,
        "port": settings.db_port,
        "dbname": settings.db_name,
        "user": settings.db_user,
        "password": settings.db_password,
    }


def describe_target(settings: Settings) -> str:
    """Return a loggable description of the target without the password."""
    if settings.database_url:
        return normalize_database_url(settings.database_url)
    user = f"{settings.db_user}@" if settings.db_user else ""
    return f"postgresql://{user}{settings.db_host}:{settings.db_port}/{settings.db_name}"


def pg_connection(settings: Settings) -> psycopg.Connection:
    """Create a raw autocommit psycopg connection."""
    kwargs = build_pg_conninfo(settings)
    return psycopg.connect(autocommit=True, **kwargs)
