"""AMQP (RabbitMQ) service info."""

from typing import ClassVar

from cloud_connector.service_info.base import ServiceInfo
from cloud_connector.service_info.registry import ServiceKindRegistry

_TLS_SCHEME = "amqps"
_DEFAULT_VIRTUAL_HOST = "/"


@ServiceKindRegistry.register
class AmqpServiceInfo(ServiceInfo):
    """AMQP broker service info. The URI path names the virtual host."""

    label: ClassVar[str] = "amqp"
    schemes: ClassVar[tuple[str, ...]] = ("amqp", _TLS_SCHEME)

    @property
    def virtual_host(self) -> str:
        """Get the virtual host, ``/`` when the URI has no path."""
        return self.path or _DEFAULT_VIRTUAL_HOST

    @property
    def ssl(self) -> bool:
        """Whether the connection uses TLS."""
        return self.scheme == _TLS_SCHEME
