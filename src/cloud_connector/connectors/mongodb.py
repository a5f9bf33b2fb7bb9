"""Client configuration for MongoDB services."""

from typing import cast, override

from pydantic import Field

from cloud_connector.connectors.base import (
    ConnectorFactoryRegistry,
    ServiceConnectorFactory,
)
from cloud_connector.service_info import MongoServiceInfo
from cloud_connector.services import BaseServiceConfiguration


class MongoClientConfiguration(BaseServiceConfiguration):
    """Connection settings for a MongoDB client."""

    uri: str = Field(repr=False, description="MongoDB connection URI")
    database: str = ""
    max_pool_size: int | None = Field(default=None, ge=1)


class MongoClientFactory(ServiceConnectorFactory[MongoClientConfiguration]):
    """Builds a MongoClientConfiguration from a MongoDB service info."""

    connector_type = MongoClientConfiguration

    @override
    def _build(self) -> MongoClientConfiguration:
        info = cast(MongoServiceInfo, self.service_info)
        return MongoClientConfiguration.model_validate(
            {"uri": info.uri, "database": info.database} | self.settings
        )


ConnectorFactoryRegistry.register_default(MongoServiceInfo, MongoClientFactory)
