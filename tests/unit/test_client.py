"""Tests for StrapiClient and the strapi() factory."""

import pytest
import respx
from httpx import Response

from strapi_client import (
    AuthManager,
    CollectionTypeManager,
    FilesManager,
    HttpClient,
    PluginDescriptor,
    SingleTypeManager,
    StrapiClient,
    StrapiConfig,
    strapi,
)
from strapi_client.exceptions import ConfigurationError

BASE_URL = "http://localhost:1337/api"


class TestStrapiClient:
    """Tests for client construction and manager factories."""

    def test_initialization(self, strapi_config: StrapiConfig) -> None:
        """Test client initialization."""
        client = StrapiClient(strapi_config)

        assert client.base_url == BASE_URL
        assert client.config == strapi_config

    async def test_context_manager(self, strapi_config: StrapiConfig) -> None:
        """Test client as async context manager."""
        async with StrapiClient(strapi_config) as client:
            assert client is not None

    def test_invalid_auth_strategy(self) -> None:
        """Test an unknown auth strategy fails at construction."""
        config = StrapiConfig(base_url=BASE_URL, auth={"strategy": "oauth", "options": {}})

        with pytest.raises(ConfigurationError, match="not supported"):
            StrapiClient(config)

    def test_collection(self, strapi_config: StrapiConfig) -> None:
        """Test collection managers for regular content types."""
        articles = StrapiClient(strapi_config).collection("articles")

        assert isinstance(articles, CollectionTypeManager)
        assert articles.root_path == "/articles"
        assert articles.plugin is None

    def test_collection_with_path(self, strapi_config: StrapiConfig) -> None:
        """Test a custom root path."""
        articles = StrapiClient(strapi_config).collection("articles", path="/custom-articles")
        assert articles.root_path == "/custom-articles"

    def test_collection_with_plugin_dict(self, strapi_config: StrapiConfig) -> None:
        """Test the plugin may be given as a plain dict."""
        posts = StrapiClient(strapi_config).collection(
            "posts", plugin={"name": "blog", "prefix": "news"}
        )

        assert posts.plugin == PluginDescriptor(name="blog", prefix="news")
        assert posts.root_path == "/news/posts"

    def test_users_is_well_known(self, strapi_config: StrapiConfig) -> None:
        """Test users default to the users-permissions plugin without prefix."""
        users = StrapiClient(strapi_config).collection("users")

        assert users.plugin == PluginDescriptor(name="users-permissions", prefix="")
        assert users.root_path == "/users"

    def test_explicit_plugin_overrides_well_known(self, strapi_config: StrapiConfig) -> None:
        """Test an explicit plugin replaces the well-known one."""
        users = StrapiClient(strapi_config).collection("users", plugin={"name": "crm"})
        assert users.root_path == "/crm/users"

    def test_single(self, strapi_config: StrapiConfig) -> None:
        """Test single type managers."""
        homepage = StrapiClient(strapi_config).single("homepage")

        assert isinstance(homepage, SingleTypeManager)
        assert homepage.root_path == "/homepage"

    def test_files(self, strapi_config: StrapiConfig) -> None:
        """Test the files manager is exposed."""
        assert isinstance(StrapiClient(strapi_config).files, FilesManager)

    @respx.mock
    async def test_users_create_sends_raw_body(self, strapi_config: StrapiConfig) -> None:
        """Test users created through the client are not wrapped."""
        route = respx.post(f"{BASE_URL}/users").mock(
            return_value=Response(201, json={"id": 1, "username": "a"})
        )

        async with StrapiClient(strapi_config) as client:
            await client.collection("users").create({"username": "a"})

        assert route.calls.last.request.content == b'{"username":"a"}'

    @respx.mock
    async def test_fetch(self, strapi_config: StrapiConfig) -> None:
        """Test raw requests are authenticated and resolved against the base URL."""
        route = respx.get(f"{BASE_URL}/i18n/locales").mock(
            return_value=Response(200, json=[{"code": "en"}])
        )

        async with StrapiClient(strapi_config) as client:
            response = await client.fetch("/i18n/locales")

        assert response.json() == [{"code": "en"}]
        assert route.calls.last.request.headers["Authorization"] == "Bearer test-token"

    @respx.mock
    async def test_injected_transport(self, strapi_config: StrapiConfig) -> None:
        """Test a custom transport and auth manager can be injected."""
        route = respx.get(f"{BASE_URL}/articles").mock(
            return_value=Response(200, json={"data": []})
        )
        auth_manager = AuthManager()
        http_client = HttpClient(BASE_URL, auth_manager=auth_manager)

        async with StrapiClient(
            strapi_config, http_client=http_client, auth_manager=auth_manager
        ) as client:
            await client.collection("articles").find()

        assert auth_manager.strategy == "api-token"
        assert route.calls.last.request.headers["Authorization"] == "Bearer test-token"


class TestStrapiFactory:
    """Tests for the strapi() convenience factory."""

    def test_from_keywords(self) -> None:
        """Test building a client from keyword arguments."""
        client = strapi(base_url=BASE_URL, api_token="token")

        assert isinstance(client, StrapiClient)
        assert client.base_url == BASE_URL

    def test_from_dict(self) -> None:
        """Test building a client from a dict, with keyword overrides."""
        client = strapi({"base_url": "http://other:1337/api"}, base_url=BASE_URL)
        assert client.base_url == BASE_URL

    def test_from_config(self, strapi_config: StrapiConfig) -> None:
        """Test an existing config is used as-is."""
        assert strapi(strapi_config).config is strapi_config

    def test_invalid_config(self) -> None:
        """Test invalid input raises ConfigurationError."""
        with pytest.raises(ConfigurationError):
            strapi(base_url="ftp://example.com")

    def test_non_dict_config(self) -> None:
        """Test a config that is neither a dict nor a StrapiConfig is rejected."""
        with pytest.raises(ConfigurationError, match="not a valid object"):
            strapi("http://localhost:1337/api")  # type: ignore[arg-type]
