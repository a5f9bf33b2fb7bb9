"""Connection configuration for SMTP mail relays."""

from typing import cast, override

from pydantic import Field

from cloud_connector.connectors.base import (
    ConnectorFactoryRegistry,
    ServiceConnectorFactory,
)
from cloud_connector.service_info import SmtpServiceInfo
from cloud_connector.services import BaseServiceConfiguration

_DEFAULT_PORT = 587


class SmtpConnectionConfiguration(BaseServiceConfiguration):
    """Connection settings for an SMTP client."""

    host: str
    port: int = Field(default=_DEFAULT_PORT, ge=1, le=65535)
    username: str = ""
    password: str = Field(default="", repr=False)


class SmtpConnectionFactory(ServiceConnectorFactory[SmtpConnectionConfiguration]):
    """Builds an SmtpConnectionConfiguration from an SMTP service info."""

    connector_type = SmtpConnectionConfiguration

    @override
    def _build(self) -> SmtpConnectionConfiguration:
        info = cast(SmtpServiceInfo, self.service_info)
        return SmtpConnectionConfiguration.model_validate(
            {
                "host": info.host,
                "port": info.port or _DEFAULT_PORT,
                "username": info.user_name,
                "password": info.password,
            }
            | self.settings
        )


ConnectorFactoryRegistry.register_default(SmtpServiceInfo, SmtpConnectionFactory)
