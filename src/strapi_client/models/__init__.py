"""Data models for strapi-client."""

from .config import AuthConfig, RetryConfig, StrapiConfig
from .media import MediaFile, MediaFormat
from .resource import PluginDescriptor, ResourceDescriptor

__all__ = [
    "StrapiConfig",
    "RetryConfig",
    "AuthConfig",
    "MediaFile",
    "MediaFormat",
    "PluginDescriptor",
    "ResourceDescriptor",
]
