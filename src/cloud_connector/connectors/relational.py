"""Data source configuration for relational database services."""

from typing import Self, cast, override

from pydantic import Field, model_validator

from cloud_connector.connectors.base import (
    ConnectorFactoryRegistry,
    ServiceConnectorFactory,
)
from cloud_connector.service_info import RelationalServiceInfo
from cloud_connector.services import BaseServiceConfiguration


class PoolConfiguration(BaseServiceConfiguration):
    """Connection pool settings for a data source.

    Attributes:
        min_pool_size: Connections kept open when idle
        max_pool_size: Upper bound on open connections
        max_wait_ms: How long a caller waits for a free connection

    """

    min_pool_size: int = Field(default=0, ge=0)
    max_pool_size: int = Field(default=4, ge=1)
    max_wait_ms: int = Field(default=30_000, ge=0)

    @model_validator(mode="after")
    def validate_pool_bounds(self) -> Self:
        """Validate that the minimum pool size does not exceed the maximum."""
        if self.min_pool_size > self.max_pool_size:
            raise ValueError(
                f"min_pool_size ({self.min_pool_size}) cannot exceed "
                f"max_pool_size ({self.max_pool_size})"
            )
        return self


class DataSourceConfiguration(BaseServiceConfiguration):
    """Everything a JDBC-style driver needs to open a pooled data source."""

    url: str = Field(repr=False, description="Driver-specific connection URL")
    username: str = ""
    password: str = Field(default="", repr=False)
    database_type: str = Field(description="Driver database type, e.g. 'postgresql'")
    pool: PoolConfiguration = Field(default_factory=PoolConfiguration)


class DataSourceFactory(ServiceConnectorFactory[DataSourceConfiguration]):
    """Builds a DataSourceConfiguration for any relational service kind.

    Settings may carry a ``pool`` mapping, validated as PoolConfiguration.
    """

    connector_type = DataSourceConfiguration

    @override
    def _build(self) -> DataSourceConfiguration:
        info = cast(RelationalServiceInfo, self.service_info)
        return DataSourceConfiguration.model_validate(
            {
                "url": info.jdbc_url,
                "username": info.user_name,
                "password": info.password,
                "database_type": info.jdbc_url_database_type,
            }
            | self.settings
        )


ConnectorFactoryRegistry.register_default(RelationalServiceInfo, DataSourceFactory)
