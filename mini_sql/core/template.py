"""Conditional-block rendering and placeholder scanning for SQL templates.

Templates understand exactly two forms:

- ``[key | fragment]`` is replaced by ``fragment`` when ``params[key]`` is
  present and not ``None``, and by an empty string otherwise.
- ``:name`` marks a named bind parameter.

Everything else is copied through as literal SQL. Malformed blocks are not
an error; they simply do not match and stay in the text.

A PostgreSQL cast such as ``a::text`` also matches ``:text`` and is bound as a
parameter; write casts as ``CAST(a AS text)`` in templates.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import List

from .types import ParamMap

BLOCK_PATTERN = re.compile(r"\[(\w+) \| (.+?)\]")
PLACEHOLDER_PATTERN = re.compile(r":(\w+)")


@dataclass(frozen=True)
class ConditionalBlock:
    """One ``[key | fragment]`` block found in a template."""

    key: str
    fragment: str
    start: int
    end: int


def render(template: str, params: ParamMap) -> str:
    """Resolve conditional blocks of `template` against `params`.

    Fragments are inserted literally: they are not rendered again and
    parameter values are never substituted into the text.

    Args:
        template: SQL template text.
        params: Parameter map; only presence and non-``None`` matter here.

    Returns:
        SQL text with every block replaced by its fragment or ``""``.
    """

    def replace(match: re.Match[str]) -> str:
        if params.get(match.group(1)) is not None:
            return match.group(2)
        return ""

    return BLOCK_PATTERN.sub(replace, template)


def conditional_blocks(template: str) -> List[ConditionalBlock]:
    """List conditional blocks in left-to-right order."""

    return [
        ConditionalBlock(m.group(1), m.group(2), m.start(), m.end())
        for m in BLOCK_PATTERN.finditer(template)
    ]


def extract_placeholders(text: str) -> List[str]:
    """Return placeholder names in scan order.

    Repeated names are kept: every occurrence fills its own positional slot.
    """

    return PLACEHOLDER_PATTERN.findall(text)
