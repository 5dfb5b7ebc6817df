"""API token authentication."""

import logging

from ..exceptions import ConfigurationError
from ..http.client import HttpClient
from .base import AuthProvider

logger = logging.getLogger(__name__)


class APITokenAuthProvider(AuthProvider):
    """Authenticates requests with a static API token.

    Tokens are created in the Strapi admin panel (Settings > API Tokens) and
    sent as ``Authorization: Bearer <token>``.
    """

    identifier = "api-token"

    @property
    def _token(self) -> str:
        return self._options.get("token")  # type: ignore[return-value]

    def preflight_validation(self) -> None:
        logger.debug("Validating api-token provider configuration")

        token = self._token
        if not isinstance(token, str) or not token.strip():
            raise ConfigurationError(
                "A valid API token is required when using the api-token auth strategy. "
                f"Got {token!r}"
            )

    async def authenticate(self, http_client: HttpClient) -> None:
        logger.debug("No authentication step is required for the api-token strategy")

    @property
    def headers(self) -> dict[str, str]:
        return {"Authorization": f"Bearer {self._token}"}
