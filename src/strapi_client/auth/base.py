"""Base class for authentication providers."""

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Any, ClassVar

if TYPE_CHECKING:
    from ..http.client import HttpClient


class AuthProvider(ABC):
    """A single authentication strategy.

    Subclasses declare a unique ``identifier``, validate their options in
    :meth:`preflight_validation` and expose the headers to attach to each
    authenticated request.
    """

    identifier: ClassVar[str]

    def __init__(self, options: dict[str, Any]) -> None:
        self._options = options

    @property
    def name(self) -> str:
        return self.identifier

    @abstractmethod
    def preflight_validation(self) -> None:
        """Validate the provider options.

        Raises:
            ConfigurationError: If the options cannot be used
        """

    @abstractmethod
    async def authenticate(self, http_client: "HttpClient") -> None:
        """Acquire credentials, if the strategy needs a login step."""

    @property
    @abstractmethod
    def headers(self) -> dict[str, str]:
        """Headers to add to every authenticated request."""
