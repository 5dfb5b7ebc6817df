"""strapi-client: an async Python client for the Strapi content API.

This package provides:
- Managers for collection types, single types and the media library
- Bracket-notation query serialization for filters, sort, pagination and populate
- Pluggable authentication (API token, users-permissions login)
- Validated configuration from code, dictionaries or environment variables
"""

from .__version__ import __version__
from .auth import (
    APITokenAuthProvider,
    AuthManager,
    AuthProvider,
    AuthProviderFactory,
    UsersPermissionsAuthProvider,
)
from .client import StrapiClient, strapi
from .config_factory import ConfigFactory
from .content_types import (
    PLUGINS_THAT_DO_NOT_WRAP_DATA,
    WELL_KNOWN_STRAPI_RESOURCES,
    CollectionTypeManager,
    SingleTypeManager,
    resolve_root_path,
    should_wrap_payload,
)
from .exceptions import (
    AuthenticationError,
    AuthorizationError,
    BadRequestError,
    ConfigurationError,
    ConflictError,
    ConnectionError,
    FormatError,
    HTTPError,
    MediaError,
    MediaForbiddenError,
    MediaNotFoundError,
    NotFoundError,
    RateLimitError,
    RequestTimeoutError,
    ServerError,
    StrapiError,
    TimeoutError,
    ValidationError,
)
from .files import FilesManager
from .http import HttpClient
from .models import (
    AuthConfig,
    MediaFile,
    MediaFormat,
    PluginDescriptor,
    ResourceDescriptor,
    RetryConfig,
    StrapiConfig,
)
from .protocols import Transport
from .utils import UNSET, append_query_params, stringify_query_params, to_readable_path

__all__ = [
    "__version__",
    # Client
    "StrapiClient",
    "strapi",
    "HttpClient",
    "Transport",
    # Configuration
    "StrapiConfig",
    "RetryConfig",
    "AuthConfig",
    "ConfigFactory",
    # Content types
    "CollectionTypeManager",
    "SingleTypeManager",
    "ResourceDescriptor",
    "PluginDescriptor",
    "WELL_KNOWN_STRAPI_RESOURCES",
    "PLUGINS_THAT_DO_NOT_WRAP_DATA",
    "resolve_root_path",
    "should_wrap_payload",
    # Files
    "FilesManager",
    "MediaFile",
    "MediaFormat",
    # Authentication
    "AuthManager",
    "AuthProvider",
    "AuthProviderFactory",
    "APITokenAuthProvider",
    "UsersPermissionsAuthProvider",
    # Query strings
    "UNSET",
    "append_query_params",
    "stringify_query_params",
    "to_readable_path",
    # Exceptions
    "StrapiError",
    "ConfigurationError",
    "ValidationError",
    "ConnectionError",
    "TimeoutError",
    "FormatError",
    "HTTPError",
    "BadRequestError",
    "AuthenticationError",
    "AuthorizationError",
    "NotFoundError",
    "RequestTimeoutError",
    "ConflictError",
    "RateLimitError",
    "ServerError",
    "MediaError",
    "MediaNotFoundError",
    "MediaForbiddenError",
]
