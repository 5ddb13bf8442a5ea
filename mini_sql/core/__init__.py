"""Public core API for template rendering, binding, and table operations."""

from .binder import bind, bind_values
from .errors import BindingError, MiniSqlError, UnsupportedParameterType
from .operation import TableOperation
from .query import TemplateQuery
from .query_builder import delete_sql, insert_sql, select_sql, update_sql
from .row_mapper import column_labels, map_rows
from .statement import PreparedStatement
from .template import (
    BLOCK_PATTERN,
    PLACEHOLDER_PATTERN,
    ConditionalBlock,
    conditional_blocks,
    extract_placeholders,
    render,
)
from .values import SqlValue, ValueKind, adapt, classify, to_driver_value

__all__ = [
    "BLOCK_PATTERN",
    "PLACEHOLDER_PATTERN",
    "BindingError",
    "ConditionalBlock",
    "MiniSqlError",
    "PreparedStatement",
    "SqlValue",
    "TableOperation",
    "TemplateQuery",
    "UnsupportedParameterType",
    "ValueKind",
    "adapt",
    "bind",
    "bind_values",
    "classify",
    "column_labels",
    "conditional_blocks",
    "delete_sql",
    "extract_placeholders",
    "insert_sql",
    "map_rows",
    "render",
    "select_sql",
    "to_driver_value",
    "update_sql",
]
