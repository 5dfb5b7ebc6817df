"""Manager for collection-type resources."""

import json
import logging
from typing import Any

from ..http.client import parse_json
from ..models.resource import PluginDescriptor, ResourceDescriptor
from ..protocols import Transport
from ..utils.url import QueryParams, append_query_params, drop_unset
from .paths import resolve_root_path, wrap_payload

logger = logging.getLogger(__name__)

JSON_HEADERS = {"Content-Type": "application/json"}


def dump_body(payload: Any) -> str:
    """Serialize a request body as compact JSON, leaving out UNSET fields."""
    return json.dumps(drop_unset(payload), separators=(",", ":"), ensure_ascii=False)


class CollectionTypeManager:
    """Find, create, update and delete documents of a collection type.

    Every operation resolves the root path from the resource descriptor,
    appends the optional query parameters and sends a single request through
    the transport. Transport errors propagate unchanged.

    Example:
        ```python
        articles = client.collection("articles")

        page = await articles.find({
            "filters": {"published": True},
            "sort": "createdAt:desc",
            "pagination": {"page": 1, "pageSize": 10},
        })
        created = await articles.create({"title": "Hello"}, {"locale": "en"})
        await articles.delete(created["data"]["documentId"])
        ```
    """

    def __init__(self, descriptor: ResourceDescriptor, http_client: Transport) -> None:
        """Initialize the manager.

        Args:
            descriptor: Plural resource name with optional path override and plugin
            http_client: Transport used for every request
        """
        self._descriptor = descriptor
        self._http_client = http_client

        logger.debug(f"Initialized a collection manager for {descriptor!r}")

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

    def _document_path(self, document_id: str | int) -> str:
        return f"{self.root_path}/{document_id}"

    def _wrap(self, data: Any) -> Any:
        return wrap_payload(data, self.plugin.name if self.plugin else None)

    async def find(self, query_params: QueryParams | None = None) -> Any:
        """Retrieve documents matching the query.

        Args:
            query_params: Filters, sort, pagination, populate, fields, locale, ...

        Returns:
            The parsed response body (``data`` list and ``meta``)

        Raises:
            StrapiError: Whatever the transport raises
        """
        logger.debug(f"Finding documents for {self.resource}")

        url = append_query_params(self.root_path, query_params)
        response = await self._http_client.get(url)
        body = parse_json(response)

        if isinstance(body, dict) and isinstance(body.get("data"), list):
            logger.debug(f"Found {len(body['data'])} {self.resource} documents")

        return body

    async def find_one(
        self, document_id: str | int, query_params: QueryParams | None = None
    ) -> Any:
        """Retrieve one document by its identifier.

        Args:
            document_id: Document ID (numeric IDs are accepted for users-permissions users)
            query_params: Optional populate, fields, locale, ...
        """
        logger.debug(f"Finding a {self.resource} document with id {document_id}")

        url = append_query_params(self._document_path(document_id), query_params)
        response = await self._http_client.get(url)

        return parse_json(response)

    async def create(self, data: dict[str, Any], query_params: QueryParams | None = None) -> Any:
        """Create a document.

        The body is wrapped as ``{"data": ...}`` unless the resource belongs
        to a plugin that expects raw payloads.

        Args:
            data: Field values of the new document
            query_params: Optional query parameters (e.g. ``{"locale": "en"}``)
        """
        logger.debug(f"Creating a {self.resource} document")

        url = append_query_params(self.root_path, query_params)
        response = await self._http_client.post(url, dump_body(self._wrap(data)), JSON_HEADERS)

        logger.debug(f"Created the {self.resource} document")
        return parse_json(response)

    async def update(
        self,
        document_id: str | int,
        data: dict[str, Any],
        query_params: QueryParams | None = None,
    ) -> Any:
        """Update a document.

        Args:
            document_id: Identifier of the document to update
            data: Fields to change
            query_params: Optional query parameters
        """
        logger.debug(f"Updating the {self.resource} document with id {document_id}")

        url = append_query_params(self._document_path(document_id), query_params)
        response = await self._http_client.put(url, dump_body(self._wrap(data)), JSON_HEADERS)

        logger.debug(f"Updated the {self.resource} document with id {document_id}")
        return parse_json(response)

    async def delete(
        self, document_id: str | int, query_params: QueryParams | None = None
    ) -> None:
        """Delete a document. The response body is discarded."""
        logger.debug(f"Deleting the {self.resource} document with id {document_id}")

        url = append_query_params(self._document_path(document_id), query_params)
        await self._http_client.delete(url)

        logger.debug(f"Deleted the {self.resource} document with id {document_id}")
