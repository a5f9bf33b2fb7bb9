"""Connector factory abstraction and the registry choosing a factory per kind.

A connector factory turns one service info into the client configuration a
driver needs. Factories are deferred constructors: the registrar builds them
for every catalog entry, the registration sink invokes them on demand.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import Any, ClassVar

from pydantic import ValidationError

from cloud_connector.errors import UnsupportedServiceKindError
from cloud_connector.service_info import ServiceInfo
from cloud_connector.services import BaseServiceConfiguration

logger = logging.getLogger(__name__)


class ServiceConnectorFactory[T: BaseServiceConfiguration](ABC):
    """Abstract base class for factories producing client configurations.

    Implements the ServiceFactory protocol. Subclasses declare the client
    configuration type they produce and build it from the service info.

    Type Parameters:
        T: The client configuration type this factory creates

    Example:
        ```python
        class SmtpConnectionFactory(ServiceConnectorFactory[SmtpConnectionConfiguration]):
            connector_type = SmtpConnectionConfiguration

            def _build(self) -> SmtpConnectionConfiguration:
                info = self.service_info
                return SmtpConnectionConfiguration(host=info.host, port=info.port)
        ```

    """

    connector_type: ClassVar[type[BaseServiceConfiguration]]

    def __init__(
        self,
        service_info: ServiceInfo,
        settings: dict[str, Any] | None = None,
    ) -> None:
        """Initialise the factory without creating anything.

        Args:
            service_info: Parsed credentials of the bound service
            settings: Optional connector settings (e.g. pool sizes) merged
                into the created configuration

        """
        self._service_info = service_info
        self._settings = settings or {}

    @property
    def service_info(self) -> ServiceInfo:
        """Get the service info this factory builds from."""
        return self._service_info

    @property
    def settings(self) -> dict[str, Any]:
        """Get the connector settings."""
        return self._settings

    def create(self) -> T | None:
        """Create the client configuration.

        Returns:
            Client configuration, or None if the credentials cannot produce one

        """
        try:
            return self._build()
        except (ValidationError, ValueError) as e:
            logger.warning(
                "Cannot create %s for service '%s': %s",
                self.connector_type.__name__,
                self._service_info.id,
                e,
            )
            return None

    def can_create(self) -> bool:
        """Check if the service info carries enough to build a configuration."""
        return bool(self._service_info.host)

    @abstractmethod
    def _build(self) -> T:
        """Build the client configuration.

        Raises:
            ValidationError: If the resulting configuration is invalid

        """
        ...


class ConnectorFactoryRegistry:
    """Maps service info kinds to connector factory classes.

    Lookup walks the kind's MRO, so a factory registered for a base kind
    (e.g. RelationalServiceInfo) serves every subclass without its own entry.
    """

    _default_factories: ClassVar[
        dict[type[ServiceInfo], type[ServiceConnectorFactory[Any]]]
    ] = {}

    def __init__(self) -> None:
        """Initialise with the default kind-to-factory table."""
        self._factories = dict(self._default_factories)

    @classmethod
    def register_default(
        cls,
        service_type: type[ServiceInfo],
        factory_class: type[ServiceConnectorFactory[Any]],
    ) -> None:
        """Register a factory class for a kind in every new registry."""
        cls._default_factories[service_type] = factory_class

    def register(
        self,
        service_type: type[ServiceInfo],
        factory_class: type[ServiceConnectorFactory[Any]],
    ) -> None:
        """Register (or override) the factory class for a kind in this registry."""
        self._factories[service_type] = factory_class
        logger.debug(
            "Registered connector factory %s for %s",
            factory_class.__name__,
            service_type.__name__,
        )

    def factory_class_for(
        self, service_type: type[ServiceInfo]
    ) -> type[ServiceConnectorFactory[Any]]:
        """Get the factory class serving a kind.

        Raises:
            UnsupportedServiceKindError: If no factory serves the kind

        """
        for klass in service_type.__mro__:
            factory_class = self._factories.get(klass)
            if factory_class is not None:
                return factory_class
        raise UnsupportedServiceKindError(
            f"No connector factory registered for {service_type.__name__}"
        )

    def create_factory(
        self,
        service_info: ServiceInfo,
        settings: dict[str, Any] | None = None,
    ) -> ServiceConnectorFactory[Any]:
        """Create the deferred factory for one service info.

        Raises:
            UnsupportedServiceKindError: If no factory serves the kind

        """
        factory_class = self.factory_class_for(type(service_info))
        return factory_class(service_info, settings)
