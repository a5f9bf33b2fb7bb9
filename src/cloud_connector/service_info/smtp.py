"""SMTP mail relay service info."""

from typing import ClassVar

from cloud_connector.service_info.base import ServiceInfo
from cloud_connector.service_info.registry import ServiceKindRegistry


@ServiceKindRegistry.register
class SmtpServiceInfo(ServiceInfo):
    """SMTP service info."""

    label: ClassVar[str] = "smtp"
    schemes: ClassVar[tuple[str, ...]] = ("smtp",)
