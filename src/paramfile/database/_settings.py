"""Database connection settings read from a parameter store.

The store only supplies strings. Turning them into a live connection is the
job of a connector registered per database system::

    db = get_database(store, {"POSTGRES": my_postgres_connector})

A connector is any callable taking :class:`DatabaseSettings`.
"""

from __future__ import annotations

import logging
from typing import Any, Callable, Literal, Mapping
from urllib.parse import quote

from pydantic import BaseModel, ConfigDict

from ..store import ParameterStore, Secret, UndefinedParameterError, UnsupportedDatabaseError

logger = logging.getLogger(__name__)

SUPPORTED_SYSTEMS = ("ORACLE", "MYSQL", "POSTGRES")

REQUIRED_PARAMETERS = (
    "databaseSystem - either Oracle, Postgres or MySQL",
    "databaseUser - the user name for the database "
    "(also: databaseDatabase, databaseSID, databasePort, databaseHost, databaseSchema)",
    "databasePassword - the password for the database",
)

# settings field -> parameter name
OPTIONAL_PARAMETERS = {
    "host": "databaseHost",
    "schema_name": "databaseSchema",
    "port": "databasePort",
    "instance": "databaseSID",
    "database": "databaseDatabase",
}

Connector = Callable[["DatabaseSettings"], Any]


class DatabaseSettings(BaseModel):
    """Connection parameters for one of the supported database systems."""

    model_config = ConfigDict(frozen=True)

    system: Literal["ORACLE", "MYSQL", "POSTGRES"]
    user: str
    password: Secret
    host: str | None = None
    schema_name: str | None = None
    port: str | None = None
    instance: str | None = None
    database: str | None = None


def database_settings(store: ParameterStore) -> DatabaseSettings:
    """Read the database parameters from *store*.

    ``databaseSystem``, ``databaseUser`` and ``databasePassword`` are required;
    missing ones abort with one aggregated message. The system name is
    case-insensitive and must be Oracle, MySQL or Postgres.
    """
    store.ensure_required(*REQUIRED_PARAMETERS)

    system = store.get("databaseSystem").upper()
    if system not in SUPPORTED_SYSTEMS:
        raise UnsupportedDatabaseError(system)

    optional: dict[str, str] = {}
    for field_name, parameter in OPTIONAL_PARAMETERS.items():
        try:
            optional[field_name] = store.get(parameter)
        except UndefinedParameterError as exc:
            logger.debug("Warning: %s", exc)

    return DatabaseSettings(
        system=system,
        user=store.get("databaseUser"),
        password=store.get("databasePassword"),
        **optional,
    )


def get_database(store: ParameterStore, connectors: Mapping[str, Connector]) -> Any:
    """Build the database defined in *store* with the matching connector.

    *connectors* maps upper-case system names to connector callables. A
    system without a connector raises ``UnsupportedDatabaseError``.
    """
    settings = database_settings(store)
    connector = connectors.get(settings.system)
    if connector is None:
        raise UnsupportedDatabaseError(settings.system)
    logger.debug("Connecting to %s as %s", settings.system, settings.user)
    return connector(settings)


def connection_url(settings: DatabaseSettings) -> str:
    """Return the URL addressing the database described by *settings*.

    Oracle is addressed by instance, MySQL by database, and Postgres by
    database plus an optional search-path schema.
    """
    credentials = f"{quote(settings.user, safe='')}:{quote(settings.password.secret_value, safe='')}"
    location = settings.host or "localhost"
    if settings.port:
        location = f"{location}:{settings.port}"

    if settings.system == "ORACLE":
        return f"oracle://{credentials}@{location}/{settings.instance or ''}"
    if settings.system == "MYSQL":
        return f"mysql://{credentials}@{location}/{settings.database or ''}"

    url = f"postgresql://{credentials}@{location}/{settings.database or ''}"
    if settings.schema_name:
        url += f"?options=-csearch_path%3D{quote(settings.schema_name, safe='')}"
    return url
