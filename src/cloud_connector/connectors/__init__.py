"""Connector factories producing client configurations for bound services.

Each module registers its factory for its service kind on import.
"""

from cloud_connector.connectors.amqp import (
    AmqpConnectionConfiguration,
    AmqpConnectionFactory,
)
from cloud_connector.connectors.base import (
    ConnectorFactoryRegistry,
    ServiceConnectorFactory,
)
from cloud_connector.connectors.mongodb import MongoClientConfiguration, MongoClientFactory
from cloud_connector.connectors.redis import (
    RedisConnectionConfiguration,
    RedisConnectionFactory,
)
from cloud_connector.connectors.relational import (
    DataSourceConfiguration,
    DataSourceFactory,
    PoolConfiguration,
)
from cloud_connector.connectors.smtp import (
    SmtpConnectionConfiguration,
    SmtpConnectionFactory,
)

__all__ = [
    "AmqpConnectionConfiguration",
    "AmqpConnectionFactory",
    "ConnectorFactoryRegistry",
    "DataSourceConfiguration",
    "DataSourceFactory",
    "MongoClientConfiguration",
    "MongoClientFactory",
    "PoolConfiguration",
    "RedisConnectionConfiguration",
    "RedisConnectionFactory",
    "ServiceConnectorFactory",
    "SmtpConnectionConfiguration",
    "SmtpConnectionFactory",
]
