"""Shared core type aliases used across contracts, statements, and ports."""

from __future__ import annotations

from typing import Any, Dict, List, Mapping, Sequence

ParamMap = Mapping[str, Any]
ColumnValues = Mapping[str, Any]
PositionalParams = List[Any]

Row = Dict[str, Any]
Rows = List[Row]
ColumnList = Sequence[str]
