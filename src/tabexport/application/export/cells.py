"""Application export – cell value resolution.

Every encoder goes through the same two steps:

1. :func:`resolve_cell` reads the raw value for a column (plain key or dotted
   path), runs the column's formatter and classifies the result into the
   closed :data:`CellValue` variant.
2. :func:`cell_text` turns that variant into the plain text an encoder then
   escapes for its own target format.

:func:`project_rows` applies step 1 once per row and column, so a formatter
is never called twice for the same cell.
"""
from __future__ import annotations

import math
from dataclasses import dataclass
from decimal import Decimal
from typing import Any, Iterable, Mapping, Sequence, Union, assert_never

from tabexport.application.export.request import ColumnDef, Row

__all__ = [
    "ABSENT",
    "NULL",
    "Absent",
    "CellValue",
    "ListValue",
    "Null",
    "Scalar",
    "cell_text",
    "classify",
    "lookup",
    "project_rows",
    "resolve_cell",
]

DEFAULT_LIST_SEPARATOR = "; "


@dataclass(frozen=True)
class Absent:
    """The key (or one segment of its path) does not exist in the row."""


@dataclass(frozen=True)
class Null:
    """The key exists but holds ``None``."""


@dataclass(frozen=True)
class Scalar:
    value: Any


@dataclass(frozen=True)
class ListValue:
    items: tuple[Any, ...]


CellValue = Union[Absent, Null, Scalar, ListValue]

ABSENT = Absent()
NULL = Null()

_MISSING: Any = object()


def _step(current: Any, segment: str) -> Any:
    if isinstance(current, Mapping):
        return current.get(segment, _MISSING)
    if (
        isinstance(current, Sequence)
        and not isinstance(current, (str, bytes))
        and segment.isdigit()
    ):
        index = int(segment)
        return current[index] if index < len(current) else _MISSING
    return _MISSING


def lookup(row: Row, key: str) -> Any:
    """Return the value at *key*, or the ``_MISSING`` sentinel.

    A dotted key walks nested mappings (and, for numeric segments, lists).
    The walk stops at the first ``None`` or missing segment; it never raises.
    """
    if "." not in key:
        return _step(row, key)
    current: Any = row
    for segment in key.split("."):
        if current is None or current is _MISSING:
            return _MISSING
        current = _step(current, segment)
    return current


def classify(value: Any) -> CellValue:
    if value is _MISSING:
        return ABSENT
    if value is None:
        return NULL
    if isinstance(value, (list, tuple)):
        return ListValue(tuple(value))
    return Scalar(value)


def resolve_cell(row: Row, column: ColumnDef) -> CellValue:
    """Resolve one cell; formatter exceptions propagate to the caller."""
    raw = lookup(row, column.key)
    if column.formatter is not None:
        return classify(column.formatter(None if raw is _MISSING else raw, row))
    return classify(raw)


def project_rows(
    rows: Iterable[Row], columns: Sequence[ColumnDef]
) -> list[list[CellValue]]:
    return [[resolve_cell(row, col) for col in columns] for row in rows]


def _float_text(value: float) -> str:
    """Render *value* the way JavaScript's ``Number#toString`` does."""
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "Infinity" if value > 0 else "-Infinity"
    if value == 0:
        return "0"
    text = repr(value)
    if 1e-6 <= abs(value) < 1e21:
        if value.is_integer():
            return str(int(value))
        return format(Decimal(text), "f") if "e" in text else text
    mantissa, _, exponent = text.partition("e")
    sign = "-" if exponent.startswith("-") else "+"
    return f"{mantissa}e{sign}{exponent.lstrip('+-').lstrip('0')}"


def _scalar_text(value: Any) -> str:
    if value is None:
        return ""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float):
        return _float_text(value)
    if isinstance(value, (list, tuple)):
        # nested lists flatten with "," as Array#toString does
        return ",".join(_scalar_text(item) for item in value)
    return str(value)


def cell_text(cell: CellValue, list_separator: str = DEFAULT_LIST_SEPARATOR) -> str:
    """Render *cell* as unescaped text; absent and null become ``""``."""
    match cell:
        case Absent() | Null():
            return ""
        case Scalar(value=value):
            return _scalar_text(value)
        case ListValue(items=items):
            return list_separator.join(_scalar_text(item) for item in items)
        case _:
            assert_never(cell)
