"""Pluggable authentication for strapi-client."""

from .api_token import APITokenAuthProvider
from .base import AuthProvider
from .manager import AuthManager, AuthProviderFactory, default_auth_provider_factory
from .users_permissions import UsersPermissionsAuthProvider

__all__ = [
    "AuthProvider",
    "APITokenAuthProvider",
    "UsersPermissionsAuthProvider",
    "AuthManager",
    "AuthProviderFactory",
    "default_auth_provider_factory",
]
