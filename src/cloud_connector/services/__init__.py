"""Service management and dependency injection infrastructure."""

from cloud_connector.services.configuration import BaseServiceConfiguration
from cloud_connector.services.container import ServiceContainer
from cloud_connector.services.lifecycle import ServiceLifetime, ServiceRegistration
from cloud_connector.services.protocols import RegistrationSink, ServiceFactory

__all__ = [
    "BaseServiceConfiguration",
    "RegistrationSink",
    "ServiceContainer",
    "ServiceFactory",
    "ServiceLifetime",
    "ServiceRegistration",
]
