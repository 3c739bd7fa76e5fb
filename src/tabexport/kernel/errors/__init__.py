"""Kernel error hierarchy — public re-export surface.

Hierarchy::

    BaseError
    └── ApplicationError            (application.py)
        ├── ConfigError             (tabexport.config.validation)
        └── ExportError             (tabexport.application.export.errors)
            └── UnsupportedFormatError
"""

from tabexport.kernel.errors.application import ApplicationError
from tabexport.kernel.errors.base import BaseError

__all__ = [
    "ApplicationError",
    "BaseError",
]
