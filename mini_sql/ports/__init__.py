"""Public port exports for concrete adapter implementations."""

from .db_api import (
    Database,
    Dialect,
    FormatDialect,
    MySQLDialect,
    NumericDialect,
    PostgresDialect,
    SQLiteDialect,
    dialect_for,
)

__all__ = [
    "Database",
    "Dialect",
    "FormatDialect",
    "SQLiteDialect",
    "PostgresDialect",
    "MySQLDialect",
    "NumericDialect",
    "dialect_for",
]
