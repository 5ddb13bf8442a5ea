"""Table-backed CRUD operations built from column/value maps."""

from __future__ import annotations

import logging
from typing import Any, Optional

from ._database_resolver import resolve_database
from .binder import bind_values
from .contracts import DialectPort
from .query_builder import delete_sql, insert_sql, select_sql, update_sql
from .row_mapper import map_rows
from .types import ColumnList, ColumnValues, Rows

logger = logging.getLogger(__name__)


class TableOperation:
    """INSERT/UPDATE/DELETE/SELECT for one table.

    Nothing about the table is cached: every call builds its SQL from the
    maps it receives. Column names and the table name are used verbatim, so
    they must come from trusted code, never from user input.
    """

    def __init__(self, table: str, *, dialect: Optional[DialectPort] = None):
        self.table = table
        self.dialect = dialect

    def insert(self, connection: Any, values: ColumnValues) -> int:
        """Insert one row and return the affected-row count."""

        db = resolve_database(connection, self.dialect)
        sql = insert_sql(self.table, values, db.dialect)
        with db.prepare_positional(sql, parameter_count=len(values)) as statement:
            bind_values(statement, values)
            return statement.execute_update()

    def update(
        self, connection: Any, values: ColumnValues, conditions: ColumnValues
    ) -> int:
        """Update rows matching every condition and return the affected-row count.

        `values` fill positions ``1..N``; `conditions` continue at ``N + 1``.

        Raises:
            ValueError: If `values` or `conditions` is empty.
        """

        db = resolve_database(connection, self.dialect)
        sql = update_sql(self.table, values, conditions, db.dialect)
        count = len(values) + len(conditions)
        with db.prepare_positional(sql, parameter_count=count) as statement:
            bound = bind_values(statement, values)
            bind_values(statement, conditions, start_index=bound)
            return statement.execute_update()

    def delete(self, connection: Any, conditions: ColumnValues) -> int:
        """Delete rows matching every condition and return the affected-row count.

        Raises:
            ValueError: If `conditions` is empty.
        """

        db = resolve_database(connection, self.dialect)
        sql = delete_sql(self.table, conditions, db.dialect)
        with db.prepare_positional(sql, parameter_count=len(conditions)) as statement:
            bind_values(statement, conditions)
            return statement.execute_update()

    def select(
        self,
        connection: Any,
        columns: ColumnList = (),
        conditions: Optional[ColumnValues] = None,
    ) -> Rows:
        """Select rows matching every condition.

        An empty `columns` selects ``*``; no conditions selects every row.
        """

        if isinstance(columns, str):
            columns = [columns]
        conditions = conditions or {}
        db = resolve_database(connection, self.dialect)
        sql = select_sql(self.table, columns, conditions, db.dialect)
        with db.prepare_positional(sql, parameter_count=len(conditions)) as statement:
            bind_values(statement, conditions)
            rows = map_rows(statement.execute_query())
        logger.debug("Select on %s returned %d row(s)", self.table, len(rows))
        return rows

    def __repr__(self) -> str:
        return f"TableOperation({self.table!r})"
