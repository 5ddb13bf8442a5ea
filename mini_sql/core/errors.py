"""Error types raised by template binding and statement execution.

Driver errors (PEP 249 ``Error`` subclasses) are never wrapped; they reach the
caller exactly as the driver raised them.
"""

from __future__ import annotations

from typing import Any, Optional


class MiniSqlError(Exception):
    """Base class for errors raised by mini_sql itself."""


class BindingError(MiniSqlError, ValueError):
    """Raised when a parameter value cannot be bound to a statement slot."""

    def __init__(self, message: str, *, key: Optional[str] = None):
        super().__init__(message)
        self.key = key


class UnsupportedParameterType(BindingError, TypeError):
    """Raised when a parameter value is not one of the supported kinds."""

    def __init__(self, key: Optional[str], value: Any):
        self.value_type = type(value)
        super().__init__(
            f"Unsupported parameter type for key: {key} ({self.value_type.__name__})",
            key=key,
        )
