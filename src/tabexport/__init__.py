"""
tabexport – tabular export engine for the scan dashboard.

Import path convention::

    from tabexport.application.export import ColumnDef, ExportService
    from tabexport.application.export.sink import DirectoryBlobSink
    from tabexport.kernel.errors import BaseError
"""

__version__ = "0.1.0"
__all__ = ["__version__"]
