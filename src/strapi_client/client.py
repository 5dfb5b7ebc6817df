"""Entry point of the Strapi content API client."""

import logging
from typing import Any

import httpx

from .auth.manager import AuthManager
from .config_factory import ConfigFactory
from .content_types.collection import CollectionTypeManager
from .content_types.constants import WELL_KNOWN_STRAPI_RESOURCES
from .content_types.single import SingleTypeManager
from .files.manager import FilesManager
from .http.client import HttpClient
from .models.config import StrapiConfig
from .models.resource import PluginDescriptor, ResourceDescriptor

logger = logging.getLogger(__name__)


class StrapiClient:
    """Client for a Strapi content API.

    Hands out managers for collection types, single types and the media
    library, all sharing one authenticated HTTP transport.

    Example:
        ```python
        import asyncio
        from strapi_client import StrapiConfig, StrapiClient

        async def main():
            config = StrapiConfig(
                base_url="http://localhost:1337/api",
                api_token="your-token",
            )

            async with StrapiClient(config) as client:
                articles = await client.collection("articles").find({"locale": "en"})
                print(articles)

        asyncio.run(main())
        ```
    """

    def __init__(
        self,
        config: StrapiConfig,
        http_client: HttpClient | None = None,
        auth_manager: AuthManager | None = None,
    ) -> None:
        """Initialize the client with dependency injection.

        Args:
            config: Validated client configuration
            http_client: Transport (defaults to one built from ``config``)
            auth_manager: Auth manager (defaults to the built-in strategies)

        Raises:
            ConfigurationError: If the configured auth strategy is unknown or invalid
        """
        self.config = config
        self._auth_manager = auth_manager or AuthManager()

        if config.auth is not None:
            self._auth_manager.set_strategy(config.auth.strategy, config.auth.options)

        self._http_client = http_client or HttpClient(
            config.get_base_url(),
            headers=config.headers,
            timeout=config.timeout,
            verify_ssl=config.verify_ssl,
            max_connections=config.max_connections,
            retry=config.retry,
            auth_manager=self._auth_manager,
        )

        logger.info(
            f"Initialized Strapi client for {self.base_url} "
            f"(auth: {self._auth_manager.strategy or 'none'})"
        )

    async def __aenter__(self) -> "StrapiClient":
        """Async context manager entry."""
        return self

    async def __aexit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
        """Async context manager exit - closes the client."""
        await self.close()

    async def close(self) -> None:
        """Close the underlying HTTP transport."""
        await self._http_client.close()
        logger.info("Closed Strapi client")

    @property
    def base_url(self) -> str:
        return self._http_client.base_url

    @property
    def files(self) -> FilesManager:
        """Manager for the media library."""
        return FilesManager(self._http_client)

    async def fetch(
        self,
        url: str,
        method: str = "GET",
        *,
        content: str | bytes | None = None,
        headers: dict[str, str] | None = None,
    ) -> httpx.Response:
        """Send a raw request to a path relative to the base URL.

        Authentication and error mapping apply as for managers.
        """
        return await self._http_client.fetch(url, method, content=content, headers=headers)

    def collection(
        self,
        resource: str,
        path: str | None = None,
        plugin: PluginDescriptor | dict[str, Any] | None = None,
    ) -> CollectionTypeManager:
        """Create a manager for a collection type.

        Args:
            resource: Plural API name (e.g. ``"articles"``)
            path: Root path override (e.g. ``"/custom-articles"``)
            plugin: Plugin serving the resource; well-known plugin resources
                such as ``"users"`` are configured automatically

        Example:
            >>> articles = client.collection("articles")
            >>> posts = client.collection("posts", plugin={"name": "blog"})
        """
        descriptor = self._describe(resource, path, plugin)
        return CollectionTypeManager(descriptor, self._http_client)

    def single(
        self,
        resource: str,
        path: str | None = None,
        plugin: PluginDescriptor | dict[str, Any] | None = None,
    ) -> SingleTypeManager:
        """Create a manager for a single type.

        Args:
            resource: Singular API name (e.g. ``"homepage"``)
            path: Root path override
            plugin: Plugin serving the resource
        """
        descriptor = self._describe(resource, path, plugin)
        return SingleTypeManager(descriptor, self._http_client)

    @staticmethod
    def _describe(
        resource: str,
        path: str | None,
        plugin: PluginDescriptor | dict[str, Any] | None,
    ) -> ResourceDescriptor:
        if plugin is None and resource in WELL_KNOWN_STRAPI_RESOURCES:
            plugin = WELL_KNOWN_STRAPI_RESOURCES[resource].plugin
            logger.debug(f"Using the well-known {plugin.name!r} plugin for {resource!r}")
        elif isinstance(plugin, dict):
            plugin = PluginDescriptor.model_validate(plugin)

        return ResourceDescriptor(resource=resource, path=path, plugin=plugin)


def strapi(config: StrapiConfig | dict[str, Any] | None = None, **kwargs: Any) -> StrapiClient:
    """Create a :class:`StrapiClient` from a config object, a dict or keywords.

    Example:
        >>> client = strapi(base_url="http://localhost:1337/api", api_token="token")

    Raises:
        ConfigurationError: If the configuration is invalid
    """
    if isinstance(config, StrapiConfig):
        return StrapiClient(config)

    if config is not None:
        if isinstance(config, dict):
            config = {**config, **kwargs}
        return StrapiClient(ConfigFactory.from_dict(config))

    return StrapiClient(ConfigFactory.create(**kwargs))
