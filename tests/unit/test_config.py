"""Tests for configuration models and ConfigFactory."""

import pytest

from strapi_client import AuthConfig, ConfigFactory, RetryConfig, StrapiConfig
from strapi_client.exceptions import ConfigurationError


class TestStrapiConfig:
    """Tests for StrapiConfig validation."""

    def test_minimal(self) -> None:
        """Test defaults with only a base URL."""
        config = StrapiConfig(base_url="http://localhost:1337/api")

        assert config.get_base_url() == "http://localhost:1337/api"
        assert config.get_api_token() is None
        assert config.auth is None
        assert config.headers == {}
        assert config.timeout == 30.0
        assert config.retry.max_attempts == 1

    def test_trailing_slash_removed(self) -> None:
        """Test the base URL is normalized."""
        config = StrapiConfig(base_url="https://cms.example.com/api/")
        assert config.base_url == "https://cms.example.com/api"

    def test_api_token_selects_strategy(self) -> None:
        """Test an API token alone enables the api-token strategy."""
        config = StrapiConfig(base_url="http://localhost:1337/api", api_token="secret")

        assert config.get_api_token() == "secret"
        assert config.auth == AuthConfig(strategy="api-token", options={"token": "secret"})

    def test_token_is_not_leaked_in_repr(self) -> None:
        """Test the API token is stored as a secret."""
        config = StrapiConfig(base_url="http://localhost:1337/api", api_token="secret")
        assert "secret" not in repr(config.api_token)

    def test_explicit_auth_wins(self) -> None:
        """Test an explicit auth config is kept when a token is also given."""
        config = StrapiConfig(
            base_url="http://localhost:1337/api",
            api_token="secret",
            auth=AuthConfig(
                strategy="users-permissions",
                options={"identifier": "editor", "password": "pw"},
            ),
        )
        assert config.auth is not None
        assert config.auth.strategy == "users-permissions"

    @pytest.mark.parametrize(
        "base_url",
        ["localhost:1337", "ftp://example.com", "/api", "not a url", "http://"],
    )
    def test_invalid_base_url(self, base_url: str) -> None:
        """Test non-http(s) or host-less URLs are rejected."""
        with pytest.raises(ValueError):
            StrapiConfig(base_url=base_url)

    def test_from_environment(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Test values are read from STRAPI_* variables."""
        monkeypatch.setenv("STRAPI_BASE_URL", "http://cms.internal:1337/api")
        monkeypatch.setenv("STRAPI_API_TOKEN", "env-token")
        monkeypatch.setenv("STRAPI_TIMEOUT", "5")
        monkeypatch.setenv("STRAPI_RETRY_MAX_ATTEMPTS", "4")

        config = StrapiConfig()  # type: ignore[call-arg]

        assert config.base_url == "http://cms.internal:1337/api"
        assert config.get_api_token() == "env-token"
        assert config.timeout == 5.0
        assert config.retry.max_attempts == 4


class TestConfigFactory:
    """Tests for ConfigFactory."""

    def test_create(self) -> None:
        """Test creating a config from keyword arguments."""
        config = ConfigFactory.create(
            base_url="http://localhost:1337/api",
            api_token="token",
            headers={"X-Tenant": "acme"},
        )

        assert config.headers == {"X-Tenant": "acme"}
        assert config.auth is not None
        assert config.auth.strategy == "api-token"

    def test_create_with_retry_dict(self) -> None:
        """Test a plain dict is accepted for the retry policy."""
        config = ConfigFactory.create(
            base_url="http://localhost:1337/api",
            retry={"max_attempts": 3, "retry_on_status": [503]},
        )

        assert isinstance(config.retry, RetryConfig)
        assert config.retry.max_attempts == 3
        assert config.retry.retry_on_status == {503}

    def test_from_dict(self) -> None:
        """Test creating a config from a dictionary."""
        config = ConfigFactory.from_dict(
            {
                "base_url": "http://localhost:1337/api",
                "auth": {
                    "strategy": "users-permissions",
                    "options": {"identifier": "editor", "password": "pw"},
                },
            }
        )

        assert config.auth is not None
        assert config.auth.options == {"identifier": "editor", "password": "pw"}

    @pytest.mark.parametrize("data", [None, "http://localhost:1337/api", ["base_url"]])
    def test_from_dict_rejects_non_objects(self, data: object) -> None:
        """Test non-dict configurations are rejected."""
        with pytest.raises(ConfigurationError, match="not a valid object"):
            ConfigFactory.from_dict(data)  # type: ignore[arg-type]

    @pytest.mark.parametrize(
        "kwargs",
        [
            {"base_url": "ftp://example.com"},
            {"base_url": "http://localhost:1337/api", "headers": {"X-Count": 1}},
            {"base_url": "http://localhost:1337/api", "headers": "X-Tenant: acme"},
            {"base_url": "http://localhost:1337/api", "timeout": 0},
            {"base_url": "http://localhost:1337/api", "retry": {"max_attempts": 0}},
        ],
    )
    def test_invalid_values(self, kwargs: dict) -> None:
        """Test invalid values raise ConfigurationError."""
        with pytest.raises(ConfigurationError, match="Invalid configuration"):
            ConfigFactory.create(**kwargs)

    def test_missing_base_url(self) -> None:
        """Test a base URL is required."""
        with pytest.raises(ConfigurationError):
            ConfigFactory.create(api_token="token")

    def test_from_environment_only(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Test building purely from the environment."""
        monkeypatch.setenv("STRAPI_BASE_URL", "https://cms.example.com/api")

        config = ConfigFactory.from_environment_only()

        assert config.base_url == "https://cms.example.com/api"

    def test_from_environment_only_missing(self) -> None:
        """Test a missing STRAPI_BASE_URL is reported."""
        with pytest.raises(ConfigurationError):
            ConfigFactory.from_environment_only()
