"""Typed, immutable descriptors of bound backing services."""

from cloud_connector.service_info.base import ServiceInfo
from cloud_connector.service_info.registry import ServiceKindRegistry

# Kind modules register themselves on import
from cloud_connector.service_info.amqp import AmqpServiceInfo
from cloud_connector.service_info.mongodb import MongoServiceInfo
from cloud_connector.service_info.redis import RedisServiceInfo
from cloud_connector.service_info.relational import (
    Db2ServiceInfo,
    MysqlServiceInfo,
    OracleServiceInfo,
    PostgresqlServiceInfo,
    RelationalServiceInfo,
    SqlServerServiceInfo,
)
from cloud_connector.service_info.smtp import SmtpServiceInfo
from cloud_connector.service_info.creator import create_service_info

__all__ = [
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
]
