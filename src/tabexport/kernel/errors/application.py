"""Application-layer errors — raised by use cases such as an export run."""

from __future__ import annotations

from tabexport.kernel.errors.base import BaseError


class ApplicationError(BaseError):
    """Cross-cutting application-layer concern."""

    default_code = "application_error"


__all__ = ["ApplicationError"]
