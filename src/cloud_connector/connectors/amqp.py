"""Connection configuration for AMQP broker services."""

from typing import cast, override

from pydantic import Field

from cloud_connector.connectors.base import (
    ConnectorFactoryRegistry,
    ServiceConnectorFactory,
)
from cloud_connector.service_info import AmqpServiceInfo
from cloud_connector.services import BaseServiceConfiguration

_DEFAULT_PORT = 5672
_DEFAULT_TLS_PORT = 5671


class AmqpConnectionConfiguration(BaseServiceConfiguration):
    """Connection settings for an AMQP client."""

    host: str
    port: int = Field(default=_DEFAULT_PORT, ge=1, le=65535)
    username: str = ""
    password: str = Field(default="", repr=False)
    virtual_host: str = "/"
    ssl: bool = False
    channel_cache_size: int | None = Field(default=None, ge=1)


class AmqpConnectionFactory(ServiceConnectorFactory[AmqpConnectionConfiguration]):
    """Builds an AmqpConnectionConfiguration from an AMQP service info."""

    connector_type = AmqpConnectionConfiguration

    @override
    def _build(self) -> AmqpConnectionConfiguration:
        info = cast(AmqpServiceInfo, self.service_info)
        default_port = _DEFAULT_TLS_PORT if info.ssl else _DEFAULT_PORT
        return AmqpConnectionConfiguration.model_validate(
            {
                "host": info.host,
                "port": info.port or default_port,
                "username": info.user_name,
                "password": info.password,
                "virtual_host": info.virtual_host,
                "ssl": info.ssl,
            }
            | self.settings
        )


ConnectorFactoryRegistry.register_default(AmqpServiceInfo, AmqpConnectionFactory)
