"""Redis service info."""

from typing import ClassVar

from cloud_connector.service_info.base import ServiceInfo
from cloud_connector.service_info.registry import ServiceKindRegistry

_TLS_SCHEME = "rediss"


@ServiceKindRegistry.register
class RedisServiceInfo(ServiceInfo):
    """Redis service info. The ``rediss`` scheme denotes a TLS connection."""

    label: ClassVar[str] = "redis"
    schemes: ClassVar[tuple[str, ...]] = ("redis", _TLS_SCHEME)

    @property
    def ssl(self) -> bool:
        """Whether the connection uses TLS."""
        return self.scheme == _TLS_SCHEME
