"""Factory helpers for building a validated :class:`StrapiConfig`.

All helpers convert pydantic validation failures into
:class:`~strapi_client.exceptions.ConfigurationError` so callers only need to
handle the client's own exception hierarchy.
"""

import logging
from typing import Any

from pydantic import ValidationError as PydanticValidationError

from .exceptions import ConfigurationError
from .models.config import RetryConfig, StrapiConfig

logger = logging.getLogger(__name__)


class ConfigFactory:
    """Builds :class:`StrapiConfig` instances from different sources."""

    @staticmethod
    def create(**kwargs: Any) -> StrapiConfig:
        """Create a configuration from keyword arguments.

        ``retry`` may be given as a :class:`RetryConfig` or a plain dict.

        Raises:
            ConfigurationError: If any value is invalid
        """
        retry = kwargs.get("retry")
        if isinstance(retry, dict):
            kwargs["retry"] = ConfigFactory._build_retry(retry)

        try:
            return StrapiConfig(**kwargs)
        except PydanticValidationError as e:
            logger.debug(f"Rejected client configuration: {e}")
            raise ConfigurationError(f"Invalid configuration: {e}") from e

    @staticmethod
    def from_dict(data: dict[str, Any]) -> StrapiConfig:
        """Create a configuration from a dictionary."""
        if not isinstance(data, dict):
            raise ConfigurationError(
                "Invalid configuration: the provided configuration is not a valid object"
            )
        return ConfigFactory.create(**data)

    @staticmethod
    def from_environment_only() -> StrapiConfig:
        """Create a configuration from ``STRAPI_*`` environment variables only."""
        try:
            return StrapiConfig()  # type: ignore[call-arg]
        except PydanticValidationError as e:
            raise ConfigurationError(f"Invalid configuration: {e}") from e

    @staticmethod
    def _build_retry(data: dict[str, Any]) -> RetryConfig:
        try:
            return RetryConfig(**data)
        except PydanticValidationError as e:
            raise ConfigurationError(f"Invalid configuration: {e}") from e
