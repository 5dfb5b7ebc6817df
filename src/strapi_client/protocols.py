"""Protocols for dependency injection.

Content-type and file managers depend on these structural types rather than
on :class:`~strapi_client.http.HttpClient` directly, so tests and callers can
substitute their own transport.
"""

from collections.abc import Callable
from typing import Protocol, runtime_checkable

import httpx

from .exceptions import StrapiError

ErrorMapper = Callable[[StrapiError], StrapiError | None]
"""Receives a transport error, returns a more specific one or ``None``."""


@runtime_checkable
class Transport(Protocol):
    """Async HTTP transport rooted at the content API base URL.

    Each method resolves ``url`` against the base URL, raises a
    :class:`~strapi_client.exceptions.StrapiError` subclass on failure and
    otherwise returns the raw response.
    """

    async def get(self, url: str) -> httpx.Response: ...

    async def post(
        self, url: str, body: str | bytes | None = None, headers: dict[str, str] | None = None
    ) -> httpx.Response: ...

    async def put(
        self, url: str, body: str | bytes | None = None, headers: dict[str, str] | None = None
    ) -> httpx.Response: ...

    async def delete(self, url: str) -> httpx.Response: ...

    def create(self, error_mapper: ErrorMapper | None = None) -> "Transport": ...
