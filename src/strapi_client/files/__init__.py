"""Media library (upload plugin) support."""

from .errors import FileErrorMapper
from .manager import FILE_API_PREFIX, FilesManager
from .validators import validate_file_id, validate_file_query_params

__all__ = [
    "FILE_API_PREFIX",
    "FilesManager",
    "FileErrorMapper",
    "validate_file_id",
    "validate_file_query_params",
]
