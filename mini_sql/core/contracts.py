"""Core port contracts used by adapters, binder, and executors."""

from __future__ import annotations

from contextlib import AbstractContextManager
from typing import Any, Optional, Protocol, Sequence


class CursorPort(Protocol):
    """Subset of a PEP 249 cursor used by statements and the row mapper."""

    description: Optional[Sequence[Sequence[Any]]]
    rowcount: int

    def execute(self, sql: str, params: Any = ...) -> Any: ...

    def fetchall(self) -> Sequence[Any]: ...

    def close(self) -> None: ...


class DialectPort(Protocol):
    """Dialect behavior required to turn named SQL into positional SQL."""

    name: str
    paramstyle: str

    def marker(self, position: int) -> str: ...

    def default_values_insert(self, table: str) -> str: ...

    def to_positional(self, sql: str) -> str: ...


class StatementPort(Protocol):
    """Positional parameter slots the binder writes into."""

    def set_parameter(self, position: int, value: Any, key: Optional[str] = None) -> None: ...


class DatabasePort(Protocol):
    """Database adapter behavior required by queries and table operations."""

    dialect: DialectPort

    def prepare(self, sql: str) -> AbstractContextManager[Any]: ...

    def prepare_positional(
        self, sql: str, *, parameter_count: Optional[int] = None
    ) -> AbstractContextManager[Any]: ...
