"""Connection configuration for Redis services."""

from typing import cast, override

from pydantic import Field

from cloud_connector.connectors.base import (
    ConnectorFactoryRegistry,
    ServiceConnectorFactory,
)
from cloud_connector.service_info import RedisServiceInfo
from cloud_connector.services import BaseServiceConfiguration

_DEFAULT_PORT = 6379


class RedisConnectionConfiguration(BaseServiceConfiguration):
    """Connection settings for a Redis client."""

    host: str
    port: int = Field(default=_DEFAULT_PORT, ge=1, le=65535)
    password: str = Field(default="", repr=False)
    ssl: bool = False
    url: str = Field(default="", repr=False)
    timeout_ms: int | None = Field(default=None, ge=0)


class RedisConnectionFactory(ServiceConnectorFactory[RedisConnectionConfiguration]):
    """Builds a RedisConnectionConfiguration from a Redis service info."""

    connector_type = RedisConnectionConfiguration

    @override
    def _build(self) -> RedisConnectionConfiguration:
        info = cast(RedisServiceInfo, self.service_info)
        return RedisConnectionConfiguration.model_validate(
            {
                "host": info.host,
                "port": info.port or _DEFAULT_PORT,
                "password": info.password,
                "ssl": info.ssl,
                "url": info.uri,
            }
            | self.settings
        )


ConnectorFactoryRegistry.register_default(RedisServiceInfo, RedisConnectionFactory)
