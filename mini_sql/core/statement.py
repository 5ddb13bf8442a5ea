"""Prepared statement over a DB-API cursor with 1-based positional slots."""

from __future__ import annotations

import logging
from typing import Any, Dict, Optional

from .contracts import CursorPort
from .errors import BindingError
from .types import PositionalParams
from .values import SqlValue, adapt, classify

logger = logging.getLogger(__name__)


class PreparedStatement:
    """Positional SQL plus the values bound to its slots.

    DB-API has no separate prepare step, so the statement keeps the bound
    values until `execute_query()` or `execute_update()` hands them to the
    cursor in slot order. The cursor is owned by the statement and closed by
    `close()`; use the statement as a context manager to guarantee that on
    every exit path.
    """

    def __init__(
        self,
        cursor: CursorPort,
        sql: str,
        *,
        parameter_count: Optional[int] = None,
    ):
        """Create a statement.

        Args:
            cursor: Fresh DB-API cursor owned by this statement.
            sql: SQL text already using the driver's positional markers.
            parameter_count: Number of markers in `sql` when known; binding
                outside ``1..parameter_count`` is rejected.
        """

        self.cursor = cursor
        self.sql = sql
        self.parameter_count = parameter_count
        self._slots: Dict[int, Any] = {}
        self._closed = False

    @property
    def closed(self) -> bool:
        return self._closed

    def set_parameter(self, position: int, value: Any, key: Optional[str] = None) -> None:
        """Bind `value` to the 1-based `position`.

        The value is classified into its kind and converted by that kind's
        adapter before it is stored.

        Raises:
            ValueError: If `position` is below 1.
            BindingError: If the position is beyond the statement's markers or
                the value does not fit its kind.
            UnsupportedParameterType: If the value kind is not supported.
        """

        if position < 1:
            raise ValueError(f"Parameter positions start at 1, got {position}.")
        if self.parameter_count is not None and position > self.parameter_count:
            raise BindingError(
                f"Parameter position {position} for key: {key} is out of range "
                f"(statement has {self.parameter_count} parameters)",
                key=key,
            )
        self._slots[position] = adapt(classify(value, key), key)

    def set_null(self, position: int, key: Optional[str] = None) -> None:
        self.set_parameter(position, SqlValue.null(), key)

    def clear_parameters(self) -> None:
        self._slots.clear()

    def parameters(self) -> PositionalParams:
        """Return bound values in slot order.

        Raises:
            BindingError: If a slot between 1 and the highest expected
                position was never bound.
        """

        highest = max(self._slots, default=0)
        if self.parameter_count is not None:
            highest = max(highest, self.parameter_count)
        missing = [p for p in range(1, highest + 1) if p not in self._slots]
        if missing:
            raise BindingError(f"Parameter {missing[0]} is not bound.")
        return [self._slots[p] for p in range(1, highest + 1)]

    def _execute(self) -> CursorPort:
        if self._closed:
            raise RuntimeError("statement is closed")
        params = self.parameters()
        logger.debug("Executing %s with %d parameter(s)", self.sql, len(params))
        self.cursor.execute(self.sql, params)
        return self.cursor

    def execute_query(self) -> CursorPort:
        """Execute and return the cursor positioned on the result set.

        The returned cursor is the statement's own cursor and is released
        together with the statement.
        """

        return self._execute()

    def execute_update(self) -> int:
        """Execute and return the driver's affected-row count."""

        cursor = self._execute()
        count = cursor.rowcount
        logger.debug("Statement affected %s row(s)", count)
        return count

    def close(self) -> None:
        if self._closed:
            return
        self._closed = True
        self.cursor.close()

    def __enter__(self) -> PreparedStatement:
        return self

    def __exit__(self, exc_type: Any, exc: Any, tb: Any) -> None:
        self.close()
