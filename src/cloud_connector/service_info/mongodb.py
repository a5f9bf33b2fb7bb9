"""MongoDB service info."""

from typing import ClassVar

from cloud_connector.service_info.base import ServiceInfo
from cloud_connector.service_info.registry import ServiceKindRegistry


@ServiceKindRegistry.register
class MongoServiceInfo(ServiceInfo):
    """MongoDB service info."""

    label: ClassVar[str] = "mongodb"
    schemes: ClassVar[tuple[str, ...]] = ("mongodb",)

    @property
    def database(self) -> str:
        """Get the database name (the URI path)."""
        return self.path
