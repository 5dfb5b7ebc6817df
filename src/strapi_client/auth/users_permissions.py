"""Login-based authentication through the users-permissions plugin."""

import json
import logging

from ..exceptions import AuthenticationError, ConfigurationError, HTTPError
from ..http.client import HttpClient, parse_json
from .base import AuthProvider

logger = logging.getLogger(__name__)

LOCAL_AUTH_ENDPOINT = "/auth/local"


class UsersPermissionsAuthProvider(AuthProvider):
    """Logs in with an identifier (username or email) and password.

    The JWT returned by ``POST /auth/local`` is kept in memory and sent as a
    bearer token until the server rejects it.
    """

    identifier = "users-permissions"

    def __init__(self, options: dict[str, str]) -> None:
        super().__init__(options)
        self._token: str | None = None

    @property
    def credentials(self) -> dict[str, str]:
        return {
            "identifier": self._options.get("identifier"),  # type: ignore[dict-item]
            "password": self._options.get("password"),  # type: ignore[dict-item]
        }

    def preflight_validation(self) -> None:
        logger.debug("Validating users-permissions provider configuration")

        for key, value in self.credentials.items():
            if not isinstance(value, str) or not value.strip():
                raise ConfigurationError(
                    f'A valid "{key}" is required when using the users-permissions '
                    "auth strategy."
                )

    async def authenticate(self, http_client: HttpClient) -> None:
        logger.debug(f"Logging in as {self.credentials['identifier']!r}")

        try:
            response = await http_client.post(
                LOCAL_AUTH_ENDPOINT,
                json.dumps(self.credentials),
                headers={"Content-Type": "application/json"},
            )
        except HTTPError as e:
            raise AuthenticationError(
                f"Failed to authenticate with users-permissions: {e.message}",
                request=e.request,
                response=e.response,
                details=e.details,
            ) from e

        data = parse_json(response)
        token = data.get("jwt") if isinstance(data, dict) else None
        if not isinstance(token, str) or not token:
            raise AuthenticationError(
                "Failed to authenticate with users-permissions: no JWT in the login response",
                response=response,
            )

        self._token = token
        logger.info("Authenticated with the users-permissions strategy")

    @property
    def headers(self) -> dict[str, str]:
        if self._token is None:
            return {}
        return {"Authorization": f"Bearer {self._token}"}
