"""Shared helper for accepting either a DB-API connection or a database adapter."""

from __future__ import annotations

from typing import Any, Optional

from .contracts import DatabasePort, DialectPort


def resolve_database(connection: Any, dialect: Optional[DialectPort] = None) -> DatabasePort:
    """Return a database adapter for `connection`.

    A `Database` adapter is used as is unless an explicit, different dialect
    is requested. A raw DB-API connection is wrapped without taking ownership:
    the wrapper is never closed, so the caller's connection stays open.
    """

    from ..ports.db_api.database import Database

    if isinstance(connection, Database):
        if dialect is None or dialect is connection.dialect:
            return connection
        return Database(connection.conn, dialect)
    return Database(connection, dialect)
