"""Utility modules for strapi-client.

This package contains helper utilities including:
- Query string serialization
- URL formatting for diagnostics
"""

from strapi_client.utils.url import (
    UNSET,
    append_query_params,
    drop_unset,
    flatten_query_params,
    stringify_query_params,
    to_readable_path,
)

__all__ = [
    "UNSET",
    "append_query_params",
    "drop_unset",
    "flatten_query_params",
    "stringify_query_params",
    "to_readable_path",
]
