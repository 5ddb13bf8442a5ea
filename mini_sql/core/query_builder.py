"""SQL text builders for single-table INSERT/UPDATE/DELETE/SELECT.

Builders only produce SQL text with one positional marker per bound value;
binding and execution live in `TableOperation`. Column order always follows
the iteration order of the maps passed in, which is also the bind order.
"""

from __future__ import annotations

from typing import Optional

from .contracts import DialectPort
from .types import ColumnList, ColumnValues


def compile_assignments(
    values: ColumnValues, dialect: DialectPort, *, start: int = 1
) -> str:
    """Compile ``col = ?, ...`` for a `SET` clause."""

    return ", ".join(
        f"{col} = {dialect.marker(position)}"
        for position, col in enumerate(values, start=start)
    )


def compile_where(
    conditions: Optional[ColumnValues], dialect: DialectPort, *, start: int = 1
) -> str:
    """Compile equality conditions joined by `AND` into a `WHERE` fragment.

    Args:
        conditions: Column/value map; ``None`` or empty means no predicate.
        dialect: SQL dialect deciding the positional marker.
        start: Position of the first marker.

    Returns:
        SQL ` WHERE ...` fragment or an empty string.
    """

    if not conditions:
        return ""
    clauses = " AND ".join(
        f"{col} = {dialect.marker(position)}"
        for position, col in enumerate(conditions, start=start)
    )
    return f" WHERE {clauses}"


def insert_sql(table: str, values: ColumnValues, dialect: DialectPort) -> str:
    """Build an `INSERT` statement for `values`.

    An empty map inserts a row made only of column defaults, in the form
    the dialect accepts.
    """

    if not values:
        return dialect.default_values_insert(table)
    columns = ", ".join(values)
    markers = ", ".join(dialect.marker(p) for p in range(1, len(values) + 1))
    return f"INSERT INTO {table} ({columns}) VALUES ({markers})"


def update_sql(
    table: str,
    values: ColumnValues,
    conditions: ColumnValues,
    dialect: DialectPort,
) -> str:
    """Build an `UPDATE` statement; `values` markers come before `conditions`."""

    if not values:
        raise ValueError(f"Cannot UPDATE {table} without values to set.")
    if not conditions:
        raise ValueError(
            f"Cannot UPDATE {table} without conditions; refusing to update every row."
        )
    set_clause = compile_assignments(values, dialect)
    where = compile_where(conditions, dialect, start=len(values) + 1)
    return f"UPDATE {table} SET {set_clause}{where}"


def delete_sql(table: str, conditions: ColumnValues, dialect: DialectPort) -> str:
    """Build a `DELETE` statement."""

    if not conditions:
        raise ValueError(
            f"Cannot DELETE from {table} without conditions; refusing to delete every row."
        )
    return f"DELETE FROM {table}{compile_where(conditions, dialect)}"


def select_sql(
    table: str,
    columns: ColumnList,
    conditions: Optional[ColumnValues],
    dialect: DialectPort,
) -> str:
    """Build a `SELECT` statement.

    No columns selects ``*``; no conditions selects every row.
    """

    column_sql = ", ".join(columns) if columns else "*"
    return f"SELECT {column_sql} FROM {table}{compile_where(conditions, dialect)}"
