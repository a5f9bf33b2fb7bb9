"""Service lifecycle management for dependency injection."""

from dataclasses import dataclass
from typing import Literal

from cloud_connector.service_info import ServiceInfo
from cloud_connector.services.protocols import ServiceFactory

type ServiceLifetime = Literal["singleton", "transient"]


@dataclass(frozen=True)
class ServiceRegistration[T]:
    """Registration of one bound service with lifecycle configuration.

    Attributes:
        service_id: Id the service is registered and retrieved under
        service_info: Parsed credentials the factory builds from
        factory: Factory that creates service instances
        lifetime: Service lifetime ("singleton" or "transient")

    """

    service_id: str
    service_info: ServiceInfo
    factory: ServiceFactory[T]
    lifetime: ServiceLifetime = "singleton"
