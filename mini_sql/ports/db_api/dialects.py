"""Concrete SQL dialect implementations for DB-API adapters."""

from __future__ import annotations

import itertools
import sys
from typing import Any

from ...core.template import PLACEHOLDER_PATTERN


class Dialect:
    """Base dialect that defines the driver's positional marker."""

    name: str = "generic"
    paramstyle: str = "qmark"

    def marker(self, position: int) -> str:
        """Return the positional marker for 1-based `position`."""

        if self.paramstyle == "qmark":
            return "?"
        if self.paramstyle == "format":
            return "%s"
        if self.paramstyle == "numeric":
            return f":{position}"
        raise ValueError(f"Unsupported paramstyle: {self.paramstyle}")

    def default_values_insert(self, table: str) -> str:
        """Return an `INSERT` that fills a new row with column defaults."""

        return f"INSERT INTO {table} DEFAULT VALUES"

    def to_positional(self, sql: str) -> str:
        """Rewrite ``:name`` placeholders into positional markers.

        For the ``format`` style literal ``%`` characters are doubled so the
        driver does not read them as markers.
        """

        if self.paramstyle == "format":
            sql = sql.replace("%", "%%")
        counter = itertools.count(1)
        return PLACEHOLDER_PATTERN.sub(lambda _m: self.marker(next(counter)), sql)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(paramstyle={self.paramstyle!r})"


class FormatDialect(Dialect):
    """Generic dialect for drivers using `%s` markers."""

    name = "format"
    paramstyle = "format"


class SQLiteDialect(Dialect):
    """SQLite dialect (`?` positional parameters)."""

    name = "sqlite"
    paramstyle = "qmark"


class PostgresDialect(Dialect):
    """PostgreSQL dialect (`%s` positional parameters)."""

    name = "postgres"
    paramstyle = "format"


class MySQLDialect(Dialect):
    """MySQL dialect (`%s` positional parameters)."""

    name = "mysql"
    paramstyle = "format"

    def default_values_insert(self, table: str) -> str:
        return f"INSERT INTO {table} () VALUES ()"


class NumericDialect(Dialect):
    """Dialect for drivers using `:1`, `:2`, ... markers (for example Oracle)."""

    name = "numeric"
    paramstyle = "numeric"


def dialect_for(conn: Any) -> Dialect:
    """Pick a dialect for a DB-API connection (or a `Database` adapter).

    Known drivers are recognized by module name. For other drivers the
    PEP 249 module-level ``paramstyle`` decides between `?`, `%s` and `:1`
    markers; drivers that only take named parameters get the generic dialect.
    """

    dialect = getattr(conn, "dialect", None)
    if isinstance(dialect, Dialect):
        return dialect

    module_name = type(conn).__module__.lower()
    if module_name.startswith(("sqlite3", "_sqlite3")):
        return SQLiteDialect()
    if "psycopg" in module_name:
        return PostgresDialect()
    if "mysql" in module_name or "pymysql" in module_name or "mysqldb" in module_name:
        return MySQLDialect()

    paramstyle = _driver_paramstyle(type(conn).__module__)
    if paramstyle in ("format", "pyformat"):
        return FormatDialect()
    if paramstyle == "numeric":
        return NumericDialect()
    return Dialect()


def _driver_paramstyle(module_name: str) -> str | None:
    root = module_name.split(".")[0]
    if not root:
        return None
    module = sys.modules.get(root)
    paramstyle = getattr(module, "paramstyle", None)
    return paramstyle if isinstance(paramstyle, str) else None
