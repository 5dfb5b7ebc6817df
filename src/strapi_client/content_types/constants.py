"""Resources and plugins whose API contract differs from regular content types."""

from types import MappingProxyType
from typing import Final

from pydantic import BaseModel, ConfigDict

from ..models.resource import PluginDescriptor


class WellKnownResource(BaseModel):
    """Routing and payload rules for a resource served by a built-in plugin."""

    model_config = ConfigDict(frozen=True)

    plugin: PluginDescriptor
    wraps_data: bool


WELL_KNOWN_STRAPI_RESOURCES: Final = MappingProxyType(
    {
        # users-permissions users: no route prefix, raw (unwrapped) request bodies
        "users": WellKnownResource(
            plugin=PluginDescriptor(name="users-permissions", prefix=""),
            wraps_data=False,
        ),
    }
)

PLUGINS_THAT_DO_NOT_WRAP_DATA: Final = frozenset(
    resource.plugin.name
    for resource in WELL_KNOWN_STRAPI_RESOURCES.values()
    if not resource.wraps_data
)
