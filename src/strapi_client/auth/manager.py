"""Authentication strategy registry and lifecycle management."""

import asyncio
import logging
from collections.abc import Callable
from typing import TYPE_CHECKING, Any

import httpx

from ..exceptions import ConfigurationError
from .api_token import APITokenAuthProvider
from .base import AuthProvider
from .users_permissions import UsersPermissionsAuthProvider

if TYPE_CHECKING:
    from ..http.client import HttpClient

logger = logging.getLogger(__name__)

ProviderBuilder = Callable[[dict[str, Any]], AuthProvider]


class AuthProviderFactory:
    """Maps strategy identifiers to provider builders."""

    def __init__(self) -> None:
        self._registry: dict[str, ProviderBuilder] = {}

    def register(self, identifier: str, builder: ProviderBuilder) -> None:
        self._registry[identifier] = builder

    @property
    def strategies(self) -> list[str]:
        return list(self._registry)

    def create(self, identifier: str, options: dict[str, Any]) -> AuthProvider:
        """Build and validate the provider registered under ``identifier``.

        Raises:
            ConfigurationError: If the strategy is unknown or its options are invalid
        """
        builder = self._registry.get(identifier)
        if builder is None:
            raise ConfigurationError(
                f'Auth strategy "{identifier}" is not supported. '
                f"Available strategies: {', '.join(self._registry) or 'none'}"
            )

        provider = builder(options)
        provider.preflight_validation()
        return provider


def default_auth_provider_factory() -> AuthProviderFactory:
    """Factory with the built-in api-token and users-permissions strategies."""
    factory = AuthProviderFactory()
    factory.register(APITokenAuthProvider.identifier, APITokenAuthProvider)
    factory.register(UsersPermissionsAuthProvider.identifier, UsersPermissionsAuthProvider)
    return factory


class AuthManager:
    """Holds the selected auth strategy and applies it to outgoing requests.

    The transport calls :meth:`authenticate` before dispatching a request and
    :meth:`authenticate_request` on the built request. A 401 response resets
    the authenticated state so the next request logs in again.
    """

    def __init__(self, factory: AuthProviderFactory | None = None) -> None:
        self._factory = factory or default_auth_provider_factory()
        self._provider: AuthProvider | None = None
        self._is_authenticated = False
        self._lock = asyncio.Lock()

    @property
    def strategy(self) -> str | None:
        return self._provider.name if self._provider else None

    @property
    def is_authenticated(self) -> bool:
        return self._is_authenticated

    def set_strategy(self, strategy: str, options: dict[str, Any]) -> None:
        """Select the strategy used for subsequent requests.

        Raises:
            ConfigurationError: If the strategy is unknown or its options are invalid
        """
        logger.debug(f"Setting auth strategy to {strategy!r}")
        self._provider = self._factory.create(strategy, options)
        self._is_authenticated = False

    async def authenticate(self, http_client: "HttpClient") -> None:
        """Make sure credentials are available before a request is sent.

        The login request goes through a sibling of ``http_client`` that
        skips the auth hooks.
        """
        if self._provider is None:
            return

        async with self._lock:
            if self._is_authenticated:
                return

            try:
                await self._provider.authenticate(http_client.create(authenticate=False))
            except Exception:
                self._is_authenticated = False
                raise

            self._is_authenticated = True
            logger.debug(f"Authenticated using the {self._provider.name!r} strategy")

    def authenticate_request(self, request: httpx.Request) -> None:
        """Inject the provider's headers into ``request``."""
        if self._provider is None:
            return
        request.headers.update(self._provider.headers)

    def handle_unauthorized_error(self) -> None:
        """Forget the authenticated state after a 401 response."""
        if self._is_authenticated:
            logger.debug("Received 401 Unauthorized, resetting authentication state")
        self._is_authenticated = False
