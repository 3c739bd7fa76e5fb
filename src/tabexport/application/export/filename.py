"""Application export – timestamped filenames."""
from __future__ import annotations

from tabexport.kernel.time import Clock, SystemClock

__all__ = ["generate_filename"]

TIMESTAMP_FORMAT = "%Y%m%d_%H%M"


def generate_filename(prefix: str, extension: str, clock: Clock | None = None) -> str:
    """Return ``"{prefix}_{YYYYMMDD_HHMM}.{extension}"`` in local time."""
    now = (clock or SystemClock()).now()
    return f"{prefix}_{now.strftime(TIMESTAMP_FORMAT)}.{extension}"
