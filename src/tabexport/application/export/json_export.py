"""Application export – JsonExporter."""
from __future__ import annotations

import json
from typing import Any, Iterable, Mapping

from tabexport.application.export.request import Row

__all__ = ["JsonExporter"]


def _default(obj: Any) -> Any:
    if isinstance(obj, Mapping):
        return dict(obj)
    return str(obj)


class JsonExporter:
    """Dumps the raw rows as a JSON array.

    Columns are not applied: the JSON export is a full-fidelity copy of the
    input, unlike the CSV and Excel exports.
    """

    def __init__(self, *, indent: int = 2) -> None:
        self._indent = indent

    def encode(self, rows: Iterable[Row]) -> str:
        return json.dumps(
            list(rows),
            indent=self._indent,
            ensure_ascii=False,
            default=_default,
        )
