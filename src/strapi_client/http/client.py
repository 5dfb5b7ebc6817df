"""Async HTTP transport for the Strapi content API.

This module wraps ``httpx.AsyncClient`` with:
- Base URL resolution for resource paths
- Authentication before dispatch and header injection per request
- Mapping of HTTP status codes onto the client exception hierarchy
- Pluggable error mappers for domain-specific errors
- Optional retry of transient failures
"""

import logging
from collections.abc import Iterable
from typing import TYPE_CHECKING, Any

import httpx
from tenacity import retry, retry_if_exception, stop_after_attempt, wait_exponential

from ..exceptions import (
    AuthenticationError,
    AuthorizationError,
    BadRequestError,
    ConflictError,
    FormatError,
    HTTPError,
    NotFoundError,
    RateLimitError,
    RequestTimeoutError,
    ServerError,
    StrapiError,
)
from ..exceptions import (
    ConnectionError as StrapiConnectionError,
)
from ..exceptions import (
    TimeoutError as StrapiTimeoutError,
)
from ..models.config import RetryConfig
from ..protocols import ErrorMapper
from ..utils.url import to_readable_path

if TYPE_CHECKING:
    from ..auth.manager import AuthManager

logger = logging.getLogger(__name__)

_STATUS_ERRORS: dict[int, type[HTTPError]] = {
    400: BadRequestError,
    401: AuthenticationError,
    403: AuthorizationError,
    404: NotFoundError,
    408: RequestTimeoutError,
    409: ConflictError,
}


def parse_json(response: httpx.Response) -> Any:
    """Decode a JSON response body.

    Raises:
        FormatError: If the body is empty or not valid JSON
    """
    try:
        return response.json()
    except ValueError as e:
        content_type = response.headers.get("content-type", "unknown")
        body_preview = response.text[:500] if response.text else ""
        raise FormatError(
            f"Received non-JSON response (content-type: {content_type})",
            details={"body_preview": body_preview},
        ) from e


class HttpClient:
    """Async HTTP client bound to a Strapi content API base URL.

    Paths given to the request methods are resolved against ``base_url``
    (``/articles`` -> ``http://localhost:1337/api/articles``); absolute URLs
    are used as-is.

    Example:
        ```python
        async with HttpClient("http://localhost:1337/api") as http:
            response = await http.get("/articles?locale=en")
            print(response.json())
        ```
    """

    def __init__(
        self,
        base_url: str,
        *,
        headers: dict[str, str] | None = None,
        timeout: float = 30.0,
        verify_ssl: bool = True,
        max_connections: int = 10,
        retry: RetryConfig | None = None,
        auth_manager: "AuthManager | None" = None,
        http_client: httpx.AsyncClient | None = None,
        error_mappers: Iterable[ErrorMapper] = (),
    ) -> None:
        """Initialize the transport.

        Args:
            base_url: Root of the content API (e.g. ``http://localhost:1337/api``)
            headers: Headers sent with every request
            timeout: Request timeout in seconds
            verify_ssl: Whether to verify TLS certificates
            max_connections: Connection pool size
            retry: Retry policy (defaults to a single attempt)
            auth_manager: Authenticates the client and outgoing requests
            http_client: Pre-built ``httpx.AsyncClient`` (not closed by this instance)
            error_mappers: Callables that may replace a status error with a more specific one
        """
        self.base_url = base_url.rstrip("/")
        self.headers = dict(headers or {})
        self.timeout = timeout
        self.retry = retry or RetryConfig()
        self.auth_manager = auth_manager
        self._error_mappers: tuple[ErrorMapper, ...] = tuple(error_mappers)

        self._client = http_client or httpx.AsyncClient(
            timeout=timeout,
            verify=verify_ssl,
            limits=httpx.Limits(
                max_connections=max_connections,
                max_keepalive_connections=max_connections,
            ),
        )
        self._owns_client = http_client is None

    async def __aenter__(self) -> "HttpClient":
        """Async context manager entry."""
        return self

    async def __aexit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
        """Async context manager exit - closes the client."""
        await self.close()

    async def close(self) -> None:
        """Close the connection pool if this instance created it."""
        if self._owns_client:
            await self._client.aclose()
        logger.debug(f"Closed HTTP client for {self.base_url}")

    def create(
        self, error_mapper: ErrorMapper | None = None, *, authenticate: bool = True
    ) -> "HttpClient":
        """Create a sibling client sharing this one's connection pool and settings.

        Args:
            error_mapper: Extra mapper, consulted after the inherited ones
            authenticate: Whether the new client runs the auth hooks

        Returns:
            A new client; closing it leaves the shared pool open
        """
        mappers = self._error_mappers + ((error_mapper,) if error_mapper else ())

        return HttpClient(
            self.base_url,
            headers=self.headers,
            timeout=self.timeout,
            retry=self.retry,
            auth_manager=self.auth_manager if authenticate else None,
            http_client=self._client,
            error_mappers=mappers,
        )

    def _build_url(self, url: str) -> str:
        if httpx.URL(url).is_absolute_url:
            return url
        if not url.startswith("/"):
            url = f"/{url}"
        return f"{self.base_url}{url}"

    def _get_headers(self, extra_headers: dict[str, str] | None = None) -> dict[str, str]:
        headers = {"Accept": "application/json", **self.headers}
        if extra_headers:
            headers.update(extra_headers)
        return headers

    def _create_retry_decorator(self) -> Any:
        """Create a retry decorator based on the retry configuration."""
        return retry(
            stop=stop_after_attempt(self.retry.max_attempts),
            wait=wait_exponential(
                multiplier=self.retry.exponential_base,
                min=self.retry.initial_wait,
                max=self.retry.max_wait,
            ),
            retry=retry_if_exception(self._should_retry),
            reraise=True,
        )

    def _should_retry(self, error: BaseException) -> bool:
        if isinstance(error, StrapiConnectionError):
            return True
        if isinstance(error, HTTPError):
            return error.status_code in self.retry.retry_on_status
        return False

    async def fetch(
        self,
        url: str,
        method: str = "GET",
        *,
        content: str | bytes | None = None,
        headers: dict[str, str] | None = None,
    ) -> httpx.Response:
        """Send a request and return the successful response.

        Args:
            url: Path relative to the base URL, or an absolute URL
            method: HTTP method
            content: Raw request body
            headers: Additional headers for this request

        Returns:
            The ``httpx.Response`` for a 2xx status

        Raises:
            HTTPError: On non-2xx responses (subclass chosen by status code)
            ConnectionError: On connection failures
            TimeoutError: On request timeout
        """
        retry_decorator = self._create_retry_decorator()

        @retry_decorator  # type: ignore[untyped-decorator]
        async def _do_request() -> httpx.Response:
            return await self._send(method, url, content=content, headers=headers)

        return await _do_request()  # type: ignore[no-any-return]

    async def _send(
        self,
        method: str,
        url: str,
        *,
        content: str | bytes | None,
        headers: dict[str, str] | None,
    ) -> httpx.Response:
        if self.auth_manager is not None:
            await self.auth_manager.authenticate(self)

        request = self._client.build_request(
            method,
            self._build_url(url),
            content=content,
            headers=self._get_headers(headers),
        )

        if self.auth_manager is not None:
            self.auth_manager.authenticate_request(request)

        logger.debug(f"{method} {to_readable_path(request.url)}")

        try:
            response = await self._client.send(request)
        except httpx.ConnectError as e:
            raise StrapiConnectionError(f"Failed to connect to {self.base_url}: {e}") from e
        except httpx.TimeoutException as e:
            raise StrapiTimeoutError(f"Request timed out after {self.timeout}s: {e}") from e

        if not response.is_success:
            self._handle_error_response(request, response)

        logger.debug(f"Response: {response.status_code}")
        return response

    def _handle_error_response(self, request: httpx.Request, response: httpx.Response) -> None:
        """Raise the exception matching a non-2xx response.

        Raises:
            HTTPError subclass, possibly replaced by a registered error mapper
        """
        error: StrapiError = self._build_error(request, response)

        for mapper in self._error_mappers:
            mapped = mapper(error)
            if mapped is not None:
                error = mapped
                break

        if response.status_code == 401 and self.auth_manager is not None:
            self.auth_manager.handle_unauthorized_error()

        raise error

    @staticmethod
    def _build_error(request: httpx.Request, response: httpx.Response) -> HTTPError:
        status_code = response.status_code

        # Try to extract error details from response
        try:
            error_data = response.json()
            error = error_data.get("error") if isinstance(error_data, dict) else None
            if not isinstance(error, dict):
                error = {}
            error_message = error.get("message") or response.text
            error_details = error.get("details") or {}
        except ValueError:
            error_message = response.text or f"HTTP {status_code}"
            error_details = {}

        path = to_readable_path(request.url)
        message = f"{status_code} {response.reason_phrase} ({request.method} {path}): {error_message}"

        if status_code == 429:
            retry_after = response.headers.get("Retry-After")
            return RateLimitError(
                message,
                retry_after=int(retry_after) if retry_after and retry_after.isdigit() else None,
                request=request,
                response=response,
                details=error_details,
            )

        if 500 <= status_code < 600:
            error_class: type[HTTPError] = ServerError
        else:
            error_class = _STATUS_ERRORS.get(status_code, HTTPError)

        return error_class(message, request=request, response=response, details=error_details)

    async def get(self, url: str) -> httpx.Response:
        """Send a GET request."""
        return await self.fetch(url, "GET")

    async def post(
        self, url: str, body: str | bytes | None = None, headers: dict[str, str] | None = None
    ) -> httpx.Response:
        """Send a POST request with a raw body."""
        return await self.fetch(url, "POST", content=body, headers=headers)

    async def put(
        self, url: str, body: str | bytes | None = None, headers: dict[str, str] | None = None
    ) -> httpx.Response:
        """Send a PUT request with a raw body."""
        return await self.fetch(url, "PUT", content=body, headers=headers)

    async def delete(self, url: str) -> httpx.Response:
        """Send a DELETE request."""
        return await self.fetch(url, "DELETE")
