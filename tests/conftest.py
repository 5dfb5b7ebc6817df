"""Pytest configuration and shared fixtures."""

import pytest

from strapi_client import HttpClient, StrapiConfig

BASE_URL = "http://localhost:1337/api"


@pytest.fixture(autouse=True)
def clean_strapi_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep STRAPI_* variables of the host environment out of the tests."""
    for name in (
        "STRAPI_BASE_URL",
        "STRAPI_API_TOKEN",
        "STRAPI_AUTH",
        "STRAPI_HEADERS",
        "STRAPI_TIMEOUT",
        "STRAPI_MAX_CONNECTIONS",
        "STRAPI_VERIFY_SSL",
        "STRAPI_RETRY",
        "STRAPI_RETRY_MAX_ATTEMPTS",
        "STRAPI_RETRY_INITIAL_WAIT",
        "STRAPI_RETRY_MAX_WAIT",
        "STRAPI_RETRY_EXPONENTIAL_BASE",
        "STRAPI_RETRY_RETRY_ON_STATUS",
    ):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def strapi_config() -> StrapiConfig:
    """Create a test Strapi configuration.

    Returns:
        Test configuration with mock values
    """
    return StrapiConfig(
        base_url=BASE_URL,
        api_token="test-token",  # noqa: S106
    )


@pytest.fixture
async def http_client():
    """Unauthenticated transport rooted at the test base URL."""
    client = HttpClient(BASE_URL)
    yield client
    await client.close()


@pytest.fixture
def mock_document_response() -> dict:
    """Mock content API response for a single document."""
    return {
        "data": {
            "id": 1,
            "documentId": "abc123def456",
            "title": "Test Article",
            "createdAt": "2024-01-01T00:00:00.000Z",
            "updatedAt": "2024-01-01T00:00:00.000Z",
            "publishedAt": "2024-01-01T00:00:00.000Z",
        },
        "meta": {},
    }


@pytest.fixture
def mock_list_response() -> dict:
    """Mock content API response for a list of documents."""
    return {
        "data": [
            {"id": 1, "documentId": "doc1", "title": "Article 1"},
            {"id": 2, "documentId": "doc2", "title": "Article 2"},
        ],
        "meta": {"pagination": {"page": 1, "pageSize": 25, "pageCount": 1, "total": 2}},
    }


@pytest.fixture
def mock_media_response() -> dict:
    """Mock upload plugin response for a single file."""
    return {
        "id": 1,
        "documentId": "media_abc123",
        "name": "test-image.jpg",
        "alternativeText": "Test image",
        "caption": "Test caption",
        "width": 1920,
        "height": 1080,
        "formats": {
            "thumbnail": {
                "name": "thumbnail",
                "hash": "hash_abc",
                "ext": ".jpg",
                "mime": "image/jpeg",
                "url": "/uploads/thumbnail_test.jpg",
                "width": 150,
                "height": 150,
                "size": 15.5,
            },
        },
        "hash": "hash_abc123",
        "ext": ".jpg",
        "mime": "image/jpeg",
        "size": 250.75,
        "url": "/uploads/test-image.jpg",
        "provider": "local",
        "createdAt": "2024-01-01T00:00:00.000Z",
        "updatedAt": "2024-01-01T00:00:00.000Z",
    }
