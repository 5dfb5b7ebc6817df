"""Version information for strapi-client."""

__version__ = "0.1.0"
