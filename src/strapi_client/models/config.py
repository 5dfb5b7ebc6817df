"""Client configuration models.

Configuration can be built directly, from a dictionary, or from ``STRAPI_*``
environment variables (``STRAPI_BASE_URL``, ``STRAPI_API_TOKEN``,
``STRAPI_RETRY_MAX_ATTEMPTS``, ...).
"""

from typing import Any

import httpx
from pydantic import BaseModel, Field, SecretStr, field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class RetryConfig(BaseSettings):
    """Retry policy applied by the transport.

    The default is a single attempt: errors reach the caller on first failure.
    """

    model_config = SettingsConfigDict(env_prefix="STRAPI_RETRY_", extra="ignore")

    max_attempts: int = Field(default=1, ge=1, le=10)
    initial_wait: float = Field(default=0.5, ge=0.0, le=60.0)
    max_wait: float = Field(default=10.0, ge=0.0, le=300.0)
    exponential_base: float = Field(default=2.0, ge=1.0)
    retry_on_status: set[int] = Field(default_factory=lambda: {502, 503, 504})


class AuthConfig(BaseModel):
    """Selects an authentication strategy and its options.

    Example:
        >>> AuthConfig(strategy="users-permissions",
        ...            options={"identifier": "editor", "password": "secret"})
    """

    strategy: str
    options: dict[str, Any] = Field(default_factory=dict)


class StrapiConfig(BaseSettings):
    """Configuration for :class:`~strapi_client.client.StrapiClient`.

    ``base_url`` is the root of the content API, including its mount point,
    e.g. ``http://localhost:1337/api``. Resource paths are resolved relative
    to it.
    """

    model_config = SettingsConfigDict(env_prefix="STRAPI_", extra="ignore")

    base_url: str
    api_token: SecretStr | None = None
    auth: AuthConfig | None = None
    headers: dict[str, str] = Field(default_factory=dict)
    timeout: float = Field(default=30.0, gt=0)
    max_connections: int = Field(default=10, ge=1)
    verify_ssl: bool = True
    retry: RetryConfig = Field(default_factory=RetryConfig)

    @field_validator("base_url")
    @classmethod
    def validate_base_url(cls, value: str) -> str:
        """Require an absolute http(s) URL and strip the trailing slash."""
        try:
            url = httpx.URL(value)
        except httpx.InvalidURL as e:
            raise ValueError(f"Invalid base URL {value!r}: {e}") from e

        if url.scheme not in ("http", "https"):
            raise ValueError(
                f"Invalid base URL {value!r}: the protocol must be http or https"
            )
        if not url.host:
            raise ValueError(f"Invalid base URL {value!r}: a host is required")

        return value.rstrip("/")

    @model_validator(mode="after")
    def default_auth_from_token(self) -> "StrapiConfig":
        """Use the api-token strategy when only ``api_token`` is given."""
        if self.auth is None and self.api_token is not None:
            self.auth = AuthConfig(
                strategy="api-token",
                options={"token": self.api_token.get_secret_value()},
            )
        return self

    def get_base_url(self) -> str:
        return self.base_url

    def get_api_token(self) -> str | None:
        return self.api_token.get_secret_value() if self.api_token else None
