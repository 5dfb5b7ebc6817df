"""Content-type managers and their path and payload rules."""

from .collection import CollectionTypeManager
from .constants import PLUGINS_THAT_DO_NOT_WRAP_DATA, WELL_KNOWN_STRAPI_RESOURCES, WellKnownResource
from .paths import resolve_plugin_prefix, resolve_root_path, should_wrap_payload, wrap_payload
from .single import SingleTypeManager

__all__ = [
    "CollectionTypeManager",
    "SingleTypeManager",
    "WELL_KNOWN_STRAPI_RESOURCES",
    "PLUGINS_THAT_DO_NOT_WRAP_DATA",
    "WellKnownResource",
    "resolve_plugin_prefix",
    "resolve_root_path",
    "should_wrap_payload",
    "wrap_payload",
]
