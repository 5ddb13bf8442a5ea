"""Positional binding of named template parameters."""

from __future__ import annotations

from .contracts import StatementPort
from .template import extract_placeholders
from .types import ColumnValues, ParamMap


def bind(
    statement: StatementPort,
    template: str,
    params: ParamMap,
    start_index: int = 0,
) -> int:
    """Bind every ``:name`` placeholder of `template` to a positional slot.

    Placeholders are taken in left-to-right order; the first one fills slot
    ``start_index + 1``. A name missing from `params` is bound as NULL. Each
    value is dispatched on its own kind, so only genuinely unsupported values
    fail.

    Args:
        statement: Prepared statement receiving the values.
        template: Text to scan. Pass the same text the statement was prepared
            from so slot numbers match its markers.
        params: Parameter map.
        start_index: Number of slots already bound by an earlier pass.

    Returns:
        Number of positions bound by this call.

    Raises:
        UnsupportedParameterType: Names the first parameter whose kind is not
            supported; nothing has been executed at that point.
    """

    names = extract_placeholders(template)
    for offset, name in enumerate(names, start=1):
        statement.set_parameter(start_index + offset, params.get(name), name)
    return len(names)


def bind_values(
    statement: StatementPort,
    values: ColumnValues,
    start_index: int = 0,
) -> int:
    """Bind the values of a column map in iteration order."""

    position = start_index
    for key, value in values.items():
        position += 1
        statement.set_parameter(position, value, key)
    return position - start_index
