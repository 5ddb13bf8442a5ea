"""DB-API adapter implementation for the core database port."""

from __future__ import annotations

import logging
from typing import Any, Optional

from ...core.statement import PreparedStatement
from ...core.template import extract_placeholders
from .dialects import Dialect, dialect_for

logger = logging.getLogger(__name__)


class Database:
    """Thin DB-API wrapper that pairs a connection with its dialect."""

    def __init__(self, conn: Any, dialect: Optional[Dialect] = None):
        """Create database adapter.

        Args:
            conn: DB-API connection object.
            dialect: Concrete SQL dialect instance. Detected from the
                connection's driver when omitted.
        """

        self._closed = False
        self.conn: Any | None = conn
        self.dialect = dialect if dialect is not None else dialect_for(conn)

    def _require_open_connection(self) -> Any:
        if self._closed or self.conn is None:
            raise RuntimeError("connection is closed")
        return self.conn

    def prepare(self, sql: str) -> PreparedStatement:
        """Prepare `sql` (written with ``:name`` placeholders) for binding.

        Placeholders are rewritten into the dialect's positional markers and
        a fresh cursor is opened for the statement. Close the statement (or
        use it in a ``with`` block) to release the cursor.
        """

        conn = self._require_open_connection()
        positional = self.dialect.to_positional(sql)
        count = len(extract_placeholders(sql))
        logger.debug("Preparing %s (%d parameter(s))", positional, count)
        return PreparedStatement(conn.cursor(), positional, parameter_count=count)

    def prepare_positional(
        self, sql: str, *, parameter_count: Optional[int] = None
    ) -> PreparedStatement:
        """Prepare SQL that already uses the dialect's positional markers."""

        conn = self._require_open_connection()
        logger.debug("Preparing %s", sql)
        return PreparedStatement(conn.cursor(), sql, parameter_count=parameter_count)

    def close(self) -> None:
        """Close the underlying connection; closing twice is a no-op."""

        if self._closed:
            return
        conn = self.conn
        self._closed = True
        self.conn = None
        close = getattr(conn, "close", None)
        if callable(close):
            close()

    def __enter__(self) -> Database:
        return self

    def __exit__(self, exc_type: Any, exc: Any, tb: Any) -> None:
        self.close()
