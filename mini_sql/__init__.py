"""mini_sql: SQL templates with conditional blocks and single-table CRUD over DB-API."""

import logging

from .core import (
    BLOCK_PATTERN,
    PLACEHOLDER_PATTERN,
    BindingError,
    ConditionalBlock,
    MiniSqlError,
    PreparedStatement,
    SqlValue,
    TableOperation,
    TemplateQuery,
    UnsupportedParameterType,
    ValueKind,
    bind,
    bind_values,
    classify,
    conditional_blocks,
    extract_placeholders,
    map_rows,
    render,
)
from .ports import (
    Database,
    Dialect,
    FormatDialect,
    MySQLDialect,
    NumericDialect,
    PostgresDialect,
    SQLiteDialect,
    dialect_for,
)

logging.getLogger(__name__).addHandler(logging.NullHandler())

__version__ = "0.1.0"

__all__ = [
    "BLOCK_PATTERN",
    "PLACEHOLDER_PATTERN",
    "BindingError",
    "ConditionalBlock",
    "Database",
    "Dialect",
    "FormatDialect",
    "MiniSqlError",
    "MySQLDialect",
    "NumericDialect",
    "PostgresDialect",
    "PreparedStatement",
    "SQLiteDialect",
    "SqlValue",
    "TableOperation",
    "TemplateQuery",
    "UnsupportedParameterType",
    "ValueKind",
    "bind",
    "bind_values",
    "classify",
    "conditional_blocks",
    "dialect_for",
    "extract_placeholders",
    "map_rows",
    "render",
]
