"""Application export – BlobSink port and the directory-backed sink."""
from __future__ import annotations

import contextlib
import os
import tempfile
from pathlib import Path
from typing import Protocol, runtime_checkable

from tabexport.observability.logging import get_logger

__all__ = ["BlobSink", "DirectoryBlobSink"]


@runtime_checkable
class BlobSink(Protocol):
    """Port: turns in-memory content into a user-facing file download."""

    def emit(self, content: bytes, filename: str, mime_type: str) -> None:
        """Deliver *content* once under *filename*."""
        ...


class DirectoryBlobSink:
    """Saves exports into a download directory.

    Each :meth:`emit` writes to a temporary ``.part`` file in the target
    directory and renames it into place; a failed write leaves no file
    behind. Unless *overwrite* is set, existing files are kept: the final
    name is claimed with an exclusive create, and a clashing name gets a
    ``" (1)"``, ``" (2)"``… suffix the way browsers do it.
    """

    def __init__(self, directory: str | os.PathLike[str], *, overwrite: bool = False) -> None:
        self._directory = Path(directory)
        self._overwrite = overwrite
        self._log = get_logger(__name__)
        self.last_path: Path | None = None

    @property
    def directory(self) -> Path:
        return self._directory

    def _reserve(self, filename: str) -> Path:
        """Claim a free name by creating an empty placeholder exclusively."""
        target = self._directory / Path(filename).name
        stem, suffix = target.stem, target.suffix
        candidate, n = target, 0
        while True:
            try:
                with open(candidate, "xb"):
                    return candidate
            except FileExistsError:
                n += 1
                candidate = target.with_name(f"{stem} ({n}){suffix}")

    def emit(self, content: bytes, filename: str, mime_type: str) -> None:
        self._directory.mkdir(parents=True, exist_ok=True)
        fd, tmp_name = tempfile.mkstemp(prefix=".", suffix=".part", dir=self._directory)
        target: Path | None = None
        try:
            with os.fdopen(fd, "wb") as fh:
                fh.write(content)
            if self._overwrite:
                target = self._directory / Path(filename).name
            else:
                target = self._reserve(filename)
            os.replace(tmp_name, target)
        except BaseException:
            with contextlib.suppress(FileNotFoundError):
                os.unlink(tmp_name)
            if target is not None and not self._overwrite:
                with contextlib.suppress(FileNotFoundError):
                    os.unlink(target)
            raise
        self.last_path = target
        self._log.debug(
            "export.saved",
            path=str(target),
            mime_type=mime_type,
            bytes=len(content),
        )
