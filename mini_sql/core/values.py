"""Closed set of bindable scalar kinds and their driver adapters.

Plain Python values are classified by runtime type. Kinds without a distinct
Python type (BYTE, SHORT, FLOAT, INT64 for small numbers) can be requested
explicitly with `SqlValue` constructors such as `SqlValue.short(7)`.
"""

from __future__ import annotations

import datetime as dt
import math
import struct
from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable, Dict, Optional

from .errors import BindingError, UnsupportedParameterType

INT32_MIN, INT32_MAX = -(2**31), 2**31 - 1
INT64_MIN, INT64_MAX = -(2**63), 2**63 - 1
SHORT_MIN, SHORT_MAX = -(2**15), 2**15 - 1
BYTE_MIN, BYTE_MAX = -(2**7), 2**7 - 1


class ValueKind(str, Enum):
    """Scalar kinds accepted for positional binding."""

    NULL = "null"
    TEXT = "text"
    INT32 = "int32"
    INT64 = "int64"
    DOUBLE = "double"
    FLOAT = "float"
    BOOLEAN = "boolean"
    BYTE = "byte"
    SHORT = "short"
    DATE = "date"
    TIME = "time"
    TIMESTAMP = "timestamp"
    BYTES = "bytes"


@dataclass(frozen=True)
class SqlValue:
    """A value tagged with the kind it must be bound as."""

    kind: ValueKind
    value: Any = None

    @classmethod
    def null(cls) -> SqlValue:
        return cls(ValueKind.NULL)

    @classmethod
    def text(cls, value: str) -> SqlValue:
        return cls(ValueKind.TEXT, value)

    @classmethod
    def int32(cls, value: int) -> SqlValue:
        return cls(ValueKind.INT32, value)

    @classmethod
    def int64(cls, value: int) -> SqlValue:
        return cls(ValueKind.INT64, value)

    @classmethod
    def double(cls, value: float) -> SqlValue:
        return cls(ValueKind.DOUBLE, value)

    @classmethod
    def float32(cls, value: float) -> SqlValue:
        return cls(ValueKind.FLOAT, value)

    @classmethod
    def boolean(cls, value: bool) -> SqlValue:
        return cls(ValueKind.BOOLEAN, value)

    @classmethod
    def byte(cls, value: int) -> SqlValue:
        return cls(ValueKind.BYTE, value)

    @classmethod
    def short(cls, value: int) -> SqlValue:
        return cls(ValueKind.SHORT, value)

    @classmethod
    def date(cls, value: dt.date) -> SqlValue:
        return cls(ValueKind.DATE, value)

    @classmethod
    def time(cls, value: dt.time) -> SqlValue:
        return cls(ValueKind.TIME, value)

    @classmethod
    def timestamp(cls, value: dt.datetime | dt.date) -> SqlValue:
        return cls(ValueKind.TIMESTAMP, value)

    @classmethod
    def binary(cls, value: bytes | bytearray | memoryview) -> SqlValue:
        return cls(ValueKind.BYTES, value)


def classify(value: Any, key: Optional[str] = None) -> SqlValue:
    """Tag a plain Python value with its bind kind.

    Args:
        value: Parameter value, or an already tagged `SqlValue`.
        key: Parameter or column name, used in error messages.

    Returns:
        The tagged value.

    Raises:
        UnsupportedParameterType: When the runtime type is outside the
            supported set (including integers wider than 64 bits).
    """

    if isinstance(value, SqlValue):
        return value
    if value is None:
        return SqlValue.null()
    if isinstance(value, str):
        return SqlValue.text(value)
    # bool is an int subclass, so it has to be checked first.
    if isinstance(value, bool):
        return SqlValue.boolean(value)
    if isinstance(value, int):
        if INT32_MIN <= value <= INT32_MAX:
            return SqlValue.int32(value)
        if INT64_MIN <= value <= INT64_MAX:
            return SqlValue.int64(value)
        raise UnsupportedParameterType(key, value)
    if isinstance(value, float):
        return SqlValue.double(value)
    # datetime is a date subclass.
    if isinstance(value, dt.datetime):
        return SqlValue.timestamp(value)
    if isinstance(value, dt.date):
        return SqlValue.date(value)
    if isinstance(value, dt.time):
        return SqlValue.time(value)
    if isinstance(value, (bytes, bytearray, memoryview)):
        return SqlValue.binary(value)
    raise UnsupportedParameterType(key, value)


def adapt(value: SqlValue, key: Optional[str] = None) -> Any:
    """Convert a tagged value into the object handed to the DB-API driver."""

    return _ADAPTERS[value.kind](value.value, key)


def to_driver_value(value: Any, key: Optional[str] = None) -> Any:
    """Classify then adapt a plain or tagged value."""

    return adapt(classify(value, key), key)


def _require(condition: bool, kind: ValueKind, value: Any, key: Optional[str]) -> None:
    if not condition:
        raise BindingError(
            f"Value {value!r} for key: {key} cannot be bound as {kind.value}",
            key=key,
        )


def _is_int(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def _ranged_int(kind: ValueKind, low: int, high: int) -> Callable[[Any, Optional[str]], int]:
    def convert(value: Any, key: Optional[str]) -> int:
        _require(_is_int(value) and low <= value <= high, kind, value, key)
        return int(value)

    return convert


def _null(value: Any, key: Optional[str]) -> None:
    _require(value is None, ValueKind.NULL, value, key)
    return None


def _text(value: Any, key: Optional[str]) -> str:
    _require(isinstance(value, str), ValueKind.TEXT, value, key)
    return value


def _double(value: Any, key: Optional[str]) -> float:
    _require(_is_int(value) or isinstance(value, float), ValueKind.DOUBLE, value, key)
    return float(value)


def _float32(value: Any, key: Optional[str]) -> float:
    _require(_is_int(value) or isinstance(value, float), ValueKind.FLOAT, value, key)
    message = f"Value {value!r} for key: {key} is out of range for float"
    try:
        result = struct.unpack("f", struct.pack("f", float(value)))[0]
    except OverflowError as exc:
        raise BindingError(message, key=key) from exc
    # Narrowing a finite double can round to infinity instead of raising.
    if math.isinf(result) and not math.isinf(float(value)):
        raise BindingError(message, key=key)
    return result


def _boolean(value: Any, key: Optional[str]) -> bool:
    _require(isinstance(value, bool), ValueKind.BOOLEAN, value, key)
    return value


def _date(value: Any, key: Optional[str]) -> dt.date:
    _require(isinstance(value, dt.date), ValueKind.DATE, value, key)
    if isinstance(value, dt.datetime):
        return value.date()
    return value


def _time(value: Any, key: Optional[str]) -> dt.time:
    _require(isinstance(value, dt.time), ValueKind.TIME, value, key)
    return value


def _timestamp(value: Any, key: Optional[str]) -> dt.datetime:
    _require(isinstance(value, dt.date), ValueKind.TIMESTAMP, value, key)
    if isinstance(value, dt.datetime):
        return value
    # Calendar dates are promoted to midnight timestamps.
    return dt.datetime.combine(value, dt.time())


def _bytes(value: Any, key: Optional[str]) -> bytes:
    _require(
        isinstance(value, (bytes, bytearray, memoryview)), ValueKind.BYTES, value, key
    )
    return bytes(value)


_ADAPTERS: Dict[ValueKind, Callable[[Any, Optional[str]], Any]] = {
    ValueKind.NULL: _null,
    ValueKind.TEXT: _text,
    ValueKind.INT32: _ranged_int(ValueKind.INT32, INT32_MIN, INT32_MAX),
    ValueKind.INT64: _ranged_int(ValueKind.INT64, INT64_MIN, INT64_MAX),
    ValueKind.DOUBLE: _double,
    ValueKind.FLOAT: _float32,
    ValueKind.BOOLEAN: _boolean,
    ValueKind.BYTE: _ranged_int(ValueKind.BYTE, BYTE_MIN, BYTE_MAX),
    ValueKind.SHORT: _ranged_int(ValueKind.SHORT, SHORT_MIN, SHORT_MAX),
    ValueKind.DATE: _date,
    ValueKind.TIME: _time,
    ValueKind.TIMESTAMP: _timestamp,
    ValueKind.BYTES: _bytes,
}

_missing = set(ValueKind) - set(_ADAPTERS)
if _missing:
    raise RuntimeError(f"No adapter for value kinds: {sorted(k.value for k in _missing)}")
