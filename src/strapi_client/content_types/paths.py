"""Root path resolution and payload wrapping rules for content-type managers.

Both are pure functions of the resource configuration. Managers call them on
every operation instead of caching their results.
"""

from typing import Any

from ..models.resource import PluginDescriptor, ResourceDescriptor
from .constants import PLUGINS_THAT_DO_NOT_WRAP_DATA


def resolve_plugin_prefix(plugin: PluginDescriptor | None) -> str | None:
    """Return the route prefix contributed by a plugin.

    An explicit ``prefix`` wins, even when empty; otherwise the plugin name
    is the prefix. Without a plugin there is no prefix.
    """
    if plugin is None:
        return None
    if plugin.prefix is not None:
        return plugin.prefix
    return plugin.name


def resolve_root_path(descriptor: ResourceDescriptor) -> str:
    """Compute the root path of a resource.

    Resolution order:

    1. ``descriptor.path`` verbatim when set; plugin settings are ignored.
    2. ``/{prefix}/{resource}`` when the plugin yields a non-empty prefix.
    3. ``/{resource}`` otherwise.

    Resource names are not validated.

    Examples:
        >>> resolve_root_path(ResourceDescriptor(resource="articles"))
        '/articles'
        >>> resolve_root_path(ResourceDescriptor(
        ...     resource="posts", plugin=PluginDescriptor(name="blog")))
        '/blog/posts'
        >>> resolve_root_path(ResourceDescriptor(
        ...     resource="users", plugin=PluginDescriptor(name="users-permissions", prefix="")))
        '/users'
    """
    if descriptor.path is not None:
        return descriptor.path

    prefix = resolve_plugin_prefix(descriptor.plugin)

    if prefix:
        return f"/{prefix}/{descriptor.resource}"

    return f"/{descriptor.resource}"


def should_wrap_payload(plugin_name: str | None) -> bool:
    """Tell whether a write body must be sent as ``{"data": payload}``.

    Regular content types and unknown plugins wrap; plugins listed in
    :data:`PLUGINS_THAT_DO_NOT_WRAP_DATA` (users-permissions) take the raw
    payload.
    """
    if plugin_name is None:
        return True
    return plugin_name not in PLUGINS_THAT_DO_NOT_WRAP_DATA


def wrap_payload(data: Any, plugin_name: str | None) -> Any:
    """Apply :func:`should_wrap_payload` to ``data``."""
    return {"data": data} if should_wrap_payload(plugin_name) else data
