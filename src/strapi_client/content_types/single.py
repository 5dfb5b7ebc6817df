"""Manager for single-type resources."""

import logging
from typing import Any

from ..http.client import parse_json
from ..models.resource import PluginDescriptor, ResourceDescriptor
from ..protocols import Transport
from ..utils.url import QueryParams, append_query_params
from .collection import JSON_HEADERS, dump_body
from .paths import resolve_root_path, wrap_payload

logger = logging.getLogger(__name__)


class SingleTypeManager:
    """Read, update and delete the one document of a single type.

    A single type has no document identifier and cannot be created through
    the API: all operations target the resolved root path itself.

    Example:
        ```python
        homepage = client.single("homepage")

        current = await homepage.find({"locale": "es"})
        await homepage.update({"title": "Inicio"}, {"locale": "es"})
        ```
    """

    def __init__(self, descriptor: ResourceDescriptor, http_client: Transport) -> None:
        self._descriptor = descriptor
        self._http_client = http_client

        logger.debug(f"Initialized a single manager for {descriptor!r}")

    @property
    def resource(self) -> str:
        return self._descriptor.resource

    @property
    def path(self) -> str | None:
        return self._descriptor.path

    @property
    def plugin(self) -> PluginDescriptor | None:
        return self._descriptor.plugin

    @property
    def root_path(self) -> str:
        return resolve_root_path(self._descriptor)

    async def find(self, query_params: QueryParams | None = None) -> Any:
        """Retrieve the document.

        Args:
            query_params: Optional populate, fields, locale, ...

        Returns:
            The parsed response body
        """
        logger.debug(f"Finding the {self.resource} document")

        url = append_query_params(self.root_path, query_params)
        response = await self._http_client.get(url)

        logger.debug(f"The {self.resource} document has been fetched")
        return parse_json(response)

    async def update(self, data: dict[str, Any], query_params: QueryParams | None = None) -> Any:
        """Update the document.

        Args:
            data: Fields to change
            query_params: Optional query parameters (e.g. ``{"locale": "es"}``)

        Returns:
            The parsed response body
        """
        logger.debug(f"Updating the {self.resource} document")

        url = append_query_params(self.root_path, query_params)
        payload = wrap_payload(data, self.plugin.name if self.plugin else None)
        response = await self._http_client.put(url, dump_body(payload), JSON_HEADERS)

        logger.debug(f"The {self.resource} document has been updated")
        return parse_json(response)

    async def delete(self, query_params: QueryParams | None = None) -> None:
        """Delete the document. The response body is discarded."""
        logger.debug(f"Deleting the {self.resource} document")

        url = append_query_params(self.root_path, query_params)
        await self._http_client.delete(url)

        logger.debug(f"The {self.resource} document has been deleted")
