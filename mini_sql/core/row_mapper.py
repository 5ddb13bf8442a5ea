"""Convert DB-API result cursors into lists of plain dict rows."""

from __future__ import annotations

from typing import Any, List, Mapping, Sequence

from .contracts import CursorPort
from .types import Row, Rows


def column_labels(cursor: CursorPort) -> List[str]:
    """Return column labels from `cursor.description` (empty if none)."""

    description = getattr(cursor, "description", None)
    if not description:
        return []
    return [str(column[0]) for column in description]


def map_rows(cursor: CursorPort) -> Rows:
    """Read every remaining row of `cursor` into label/value dicts.

    Labels are read once from the cursor metadata. Rows keep cursor order;
    when two columns share a label the later column wins.

    A cursor without a description (the statement produced no result set)
    maps to an empty list.
    """

    labels = column_labels(cursor)
    if not labels:
        return []
    return [_row_to_mapping(labels, row) for row in cursor.fetchall()]


def _row_to_mapping(labels: Sequence[str], row: Any) -> Row:
    """Normalize one fetched row to a dict.

    Mapping rows (dict cursors) are copied. Anything else indexable by
    position (tuples, lists, `sqlite3.Row`) is read column by column.
    """

    if isinstance(row, Mapping):
        return dict(row)

    try:
        width = len(row)
    except TypeError:
        raise TypeError(f"Unsupported row type: {type(row)}") from None
    if width != len(labels):
        raise TypeError(
            f"Row has {width} values but the cursor describes {len(labels)} columns."
        )

    mapped: Row = {}
    for index, label in enumerate(labels):
        mapped[label] = row[index]
    return mapped
