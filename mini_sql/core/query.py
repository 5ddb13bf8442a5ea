"""Template-backed queries: render, bind, execute, map rows."""

from __future__ import annotations

import logging
from typing import Any, List, Optional

from ._database_resolver import resolve_database
from .binder import bind
from .contracts import DialectPort
from .row_mapper import map_rows
from .template import ConditionalBlock, conditional_blocks, extract_placeholders, render
from .types import ParamMap, Rows

logger = logging.getLogger(__name__)


class TemplateQuery:
    """SQL template with conditional blocks and named placeholders.

    Example:
        >>> query = TemplateQuery(
        ...     "SELECT * FROM users WHERE 1=1 "
        ...     "[age | AND age > :age] [city | AND city = :city]"
        ... )
        >>> query.render({"age": 30})
        'SELECT * FROM users WHERE 1=1 AND age > :age '
    """

    def __init__(self, template: str, *, dialect: Optional[DialectPort] = None):
        """Create a query.

        Args:
            template: SQL template text.
            dialect: Dialect used for positional markers. Detected from the
                connection on each call when omitted.
        """

        self.template = template
        self.dialect = dialect

    @property
    def blocks(self) -> List[ConditionalBlock]:
        return conditional_blocks(self.template)

    def render(self, params: ParamMap) -> str:
        """Return the SQL text for `params`, placeholders still named."""

        return render(self.template, params)

    def placeholders(self, params: Optional[ParamMap] = None) -> List[str]:
        """Placeholder names in bind order.

        With `params` the names come from the rendered text, which is what
        `execute()` binds; without them every placeholder of the raw template
        is listed.
        """

        if params is None:
            return extract_placeholders(self.template)
        return extract_placeholders(self.render(params))

    def execute(self, connection: Any, params: ParamMap) -> Rows:
        """Run the query and return its rows.

        Args:
            connection: DB-API connection or `Database` adapter.
            params: Parameter map used for block selection and binding.

        Returns:
            Rows as ``{column label: value}`` dicts in result order.

        Raises:
            BindingError: A parameter could not be bound; nothing was executed.
            Exception: Driver errors propagate unchanged.
        """

        db = resolve_database(connection, self.dialect)
        sql = self.render(params)
        with db.prepare(sql) as statement:
            bind(statement, sql, params)
            cursor = statement.execute_query()
            rows = map_rows(cursor)
        logger.debug("Query returned %d row(s)", len(rows))
        return rows

    def execute_update(self, connection: Any, params: ParamMap) -> int:
        """Run a DML template and return the affected-row count."""

        db = resolve_database(connection, self.dialect)
        sql = self.render(params)
        with db.prepare(sql) as statement:
            bind(statement, sql, params)
            return statement.execute_update()

    def __repr__(self) -> str:
        return f"TemplateQuery({self.template!r})"
