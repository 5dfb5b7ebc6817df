"""HTTP transport for strapi-client."""

from .client import HttpClient, parse_json

__all__ = ["HttpClient", "parse_json"]
