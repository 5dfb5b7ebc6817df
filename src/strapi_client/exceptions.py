"""Exception hierarchy for strapi-client.

All errors raised by the client derive from :class:`StrapiError`. HTTP status
errors carry the originating ``httpx.Request`` and ``httpx.Response`` so callers
can inspect what was sent and what came back.
"""

from typing import Any

import httpx


class StrapiError(Exception):
    """Base exception for all strapi-client errors."""

    def __init__(self, message: str, details: dict[str, Any] | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.details = details or {}


class ConfigurationError(StrapiError):
    """Invalid client configuration."""


class ValidationError(StrapiError):
    """Invalid parameters, either rejected locally or by the server (400)."""


class ConnectionError(StrapiError):
    """Failed to connect to the Strapi server."""


class TimeoutError(StrapiError):
    """The request timed out before a response was received."""


class FormatError(StrapiError):
    """The response body could not be parsed as expected."""


class HTTPError(StrapiError):
    """A response with a non-2xx status code."""

    def __init__(
        self,
        message: str,
        request: httpx.Request | None = None,
        response: httpx.Response | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message, details=details)
        self.request = request
        self.response = response

    @property
    def status_code(self) -> int | None:
        return self.response.status_code if self.response is not None else None


class BadRequestError(HTTPError, ValidationError):
    """HTTP 400."""


class AuthenticationError(HTTPError):
    """HTTP 401, or a failed login against the auth endpoint."""


class AuthorizationError(HTTPError):
    """HTTP 403."""


class NotFoundError(HTTPError):
    """HTTP 404."""


class RequestTimeoutError(HTTPError):
    """HTTP 408."""


class ConflictError(HTTPError):
    """HTTP 409."""


class RateLimitError(HTTPError):
    """HTTP 429."""

    def __init__(
        self,
        message: str,
        retry_after: int | None = None,
        request: httpx.Request | None = None,
        response: httpx.Response | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message, request=request, response=response, details=details)
        self.retry_after = retry_after


class ServerError(HTTPError):
    """HTTP 5xx."""


class MediaError(StrapiError):
    """Base class for errors raised by the file subsystem."""


class MediaNotFoundError(NotFoundError, MediaError):
    """A specific media file does not exist."""

    def __init__(self, file_id: int, original: NotFoundError) -> None:
        super().__init__(
            f"File with ID {file_id} not found. "
            "The requested file may have been deleted or never existed.",
            request=original.request,
            response=original.response,
            details=original.details,
        )
        self.file_id = file_id


class MediaForbiddenError(AuthorizationError, MediaError):
    """Access to one or all media files is forbidden."""

    def __init__(self, original: AuthorizationError, file_id: int | None = None) -> None:
        if file_id is not None:
            message = (
                f"Access to file with ID {file_id} is forbidden. "
                "You may not have sufficient permissions."
            )
        else:
            message = "Access to files is forbidden. You may not have sufficient permissions."
        super().__init__(
            message,
            request=original.request,
            response=original.response,
            details=original.details,
        )
        self.file_id = file_id


__all__ = [
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
