"""Database export import package."""

from litscope.sources.base import CANONICAL_COLUMNS, DatabaseFormat
from litscope.sources.exceptions import (
    SourceError,
    UnknownDatabaseError,
    UnsupportedFileError,
)
from litscope.sources.formats import FORMATS, detect_database, get_format
from litscope.sources.reader import import_file, import_scope, read_export_file

__all__ = [
    "CANONICAL_COLUMNS",
    "DatabaseFormat",
    "FORMATS",
    "SourceError",
    "UnknownDatabaseError",
    "UnsupportedFileError",
    "detect_database",
    "get_format",
    "import_file",
    "import_scope",
    "read_export_file",
]
