"""Cloud Connector - service-binding layer.

This package discovers bound backing services, parses their connection
credentials into typed service infos, and registers them into a dependency
injection container as ready-to-use client configurations.
"""

__version__ = "0.1.0"

from cloud_connector.catalog import (
    ServiceCatalog,
    get_default_catalog,
    reset_default_catalog,
)
from cloud_connector.config import CatalogConfiguration
from cloud_connector.connectors import (
    AmqpConnectionConfiguration,
    ConnectorFactoryRegistry,
    DataSourceConfiguration,
    MongoClientConfiguration,
    PoolConfiguration,
    RedisConnectionConfiguration,
    ServiceConnectorFactory,
    SmtpConnectionConfiguration,
)
from cloud_connector.errors import (
    AmbiguousServiceError,
    CatalogUnavailableError,
    CloudConnectorError,
    DuplicateServiceError,
    MalformedCredentialError,
    RegistrationError,
    SourceUnavailableError,
    UnknownServiceError,
    UnsupportedServiceKindError,
)
from cloud_connector.registrar import ServiceRegistrar
from cloud_connector.service_info import (
    AmqpServiceInfo,
    Db2ServiceInfo,
    MongoServiceInfo,
    MysqlServiceInfo,
    OracleServiceInfo,
    PostgresqlServiceInfo,
    RedisServiceInfo,
    RelationalServiceInfo,
    ServiceInfo,
    ServiceKindRegistry,
    SmtpServiceInfo,
    SqlServerServiceInfo,
    create_service_info,
)
from cloud_connector.services import (
    BaseServiceConfiguration,
    RegistrationSink,
    ServiceContainer,
    ServiceFactory,
    ServiceRegistration,
)
from cloud_connector.sources import (
    EnvironmentBindingSource,
    RawBinding,
    RawBindingSource,
    StaticBindingSource,
    YamlBindingSource,
)
from cloud_connector.uri import ServiceURI, parse_service_uri, redact_uri

__all__ = [
    # Version
    "__version__",
    # URI parsing
    "ServiceURI",
    "parse_service_uri",
    "redact_uri",
    # Service infos
    "AmqpServiceInfo",
    "Db2ServiceInfo",
    "MongoServiceInfo",
    "MysqlServiceInfo",
    "OracleServiceInfo",
    "PostgresqlServiceInfo",
    "RedisServiceInfo",
    "RelationalServiceInfo",
    "ServiceInfo",
    "ServiceKindRegistry",
    "SmtpServiceInfo",
    "SqlServerServiceInfo",
    "create_service_info",
    # Binding sources
    "EnvironmentBindingSource",
    "RawBinding",
    "RawBindingSource",
    "StaticBindingSource",
    "YamlBindingSource",
    # Catalog
    "CatalogConfiguration",
    "ServiceCatalog",
    "get_default_catalog",
    "reset_default_catalog",
    # Dependency Injection
    "BaseServiceConfiguration",
    "RegistrationSink",
    "ServiceContainer",
    "ServiceFactory",
    "ServiceRegistrar",
    "ServiceRegistration",
    # Connectors
    "AmqpConnectionConfiguration",
    "ConnectorFactoryRegistry",
    "DataSourceConfiguration",
    "MongoClientConfiguration",
    "PoolConfiguration",
    "RedisConnectionConfiguration",
    "ServiceConnectorFactory",
    "SmtpConnectionConfiguration",
    # Errors
    "CloudConnectorError",
    "AmbiguousServiceError",
    "CatalogUnavailableError",
    "DuplicateServiceError",
    "MalformedCredentialError",
    "RegistrationError",
    "SourceUnavailableError",
    "UnknownServiceError",
    "UnsupportedServiceKindError",
]
