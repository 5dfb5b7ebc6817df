"""Identity of a resource managed through the content API."""

from pydantic import BaseModel, ConfigDict


class PluginDescriptor(BaseModel):
    """The backend plugin that serves a resource.

    ``prefix`` distinguishes "not given" (``None``: the plugin name is used as
    the route prefix) from an explicit empty string (no prefix segment).
    """

    model_config = ConfigDict(frozen=True)

    name: str
    prefix: str | None = None


class ResourceDescriptor(BaseModel):
    """A resource name with its optional path override and plugin.

    Example:
        >>> ResourceDescriptor(resource="posts", plugin=PluginDescriptor(name="blog"))
        ResourceDescriptor(resource='posts', path=None, plugin=PluginDescriptor(name='blog', prefix=None))
    """

    model_config = ConfigDict(frozen=True)

    resource: str
    path: str | None = None
    plugin: PluginDescriptor | None = None
