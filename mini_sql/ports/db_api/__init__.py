"""DB-API adapter and dialect exports."""

from .database import Database
from .dialects import (
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
    "MySQLDialect",
    "NumericDialect",
    "PostgresDialect",
    "SQLiteDialect",
    "dialect_for",
]
