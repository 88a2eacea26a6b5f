"""Database settings taken from a parameter store."""

from ._settings import (
    SUPPORTED_SYSTEMS,
    DatabaseSettings,
    connection_url,
    database_settings,
    get_database,
)

__all__ = [
    "SUPPORTED_SYSTEMS",
    "DatabaseSettings",
    "database_settings",
    "get_database",
    "connection_url",
]
