"""Service container for dependency injection."""

import logging
from collections.abc import Iterator
from typing import Any

from cloud_connector.errors import (
    AmbiguousServiceError,
    DuplicateServiceError,
    UnknownServiceError,
)
from cloud_connector.service_info import ServiceInfo
from cloud_connector.services.lifecycle import ServiceLifetime, ServiceRegistration
from cloud_connector.services.protocols import ServiceFactory

logger = logging.getLogger(__name__)


class ServiceContainer:
    """Dependency injection container holding one named service per bound service.

    Services are registered under their service id and created lazily by
    their factory on first retrieval. The container implements the
    RegistrationSink protocol.
    """

    def __init__(self, lifetime: ServiceLifetime = "singleton") -> None:
        """Initialise the service container.

        Args:
            lifetime: Lifetime applied to services registered through the
                RegistrationSink protocol

        """
        self._default_lifetime: ServiceLifetime = lifetime
        # Registrations are heterogeneous - type safety is enforced at the
        # public API level through generics
        self._registrations: dict[str, ServiceRegistration[Any]] = {}
        self._singletons: dict[str, Any] = {}
        logger.debug("ServiceContainer initialized")

    def register(
        self,
        service_id: str,
        service_info: ServiceInfo,
        factory: ServiceFactory[Any],
    ) -> None:
        """Register a deferred factory under a service id.

        Args:
            service_id: Id the service will be retrieved by
            service_info: Parsed credentials of the service
            factory: Factory that creates the service on first retrieval

        Raises:
            DuplicateServiceError: If the id is already registered

        """
        self.add(
            ServiceRegistration(
                service_id, service_info, factory, self._default_lifetime
            )
        )

    def add[T](self, registration: ServiceRegistration[T]) -> None:
        """Register a fully described service.

        Raises:
            DuplicateServiceError: If the id is already registered

        """
        if registration.service_id in self._registrations:
            raise DuplicateServiceError(
                f"Service '{registration.service_id}' is already registered"
            )
        self._registrations[registration.service_id] = registration
        logger.debug(
            "Registered service: %s (%s) with lifetime: %s",
            registration.service_id,
            registration.service_info.label,
            registration.lifetime,
        )

    @property
    def service_ids(self) -> tuple[str, ...]:
        """Get registered service ids in registration order."""
        return tuple(self._registrations)

    def __contains__(self, service_id: object) -> bool:
        """Check whether a service id is registered."""
        return service_id in self._registrations

    def __iter__(self) -> Iterator[str]:
        """Iterate over registered service ids."""
        return iter(self._registrations)

    def __len__(self) -> int:
        """Return the number of registered services."""
        return len(self._registrations)

    def get_service_info(self, service_id: str) -> ServiceInfo:
        """Get the service info a service was registered with.

        Raises:
            UnknownServiceError: If the id is not registered

        """
        return self._get_registration(service_id).service_info

    def get_service(self, service_id: str) -> Any:  # noqa: ANN401  # Registrations hold heterogeneous service types
        """Get a service instance from the container.

        Args:
            service_id: Id of the service to retrieve

        Returns:
            Service instance

        Raises:
            UnknownServiceError: If the id is not registered
            ValueError: If factory returns None (service unavailable)

        """
        registration = self._get_registration(service_id)

        if registration.lifetime == "singleton":
            if service_id not in self._singletons:
                logger.debug("Creating singleton service: %s", service_id)
                self._singletons[service_id] = self._create(registration)
            else:
                logger.debug("Returning cached singleton service: %s", service_id)
            return self._singletons[service_id]

        logger.debug("Creating transient service: %s", service_id)
        return self._create(registration)

    def get_services_of_type[T](self, service_type: type[T]) -> dict[str, T]:
        """Get every service whose factory produces instances of a type.

        Factories are matched on their ``connector_type`` without being
        invoked; matching services are then created (or fetched from the
        singleton cache).

        Args:
            service_type: Type (or base type) of the wanted services

        Returns:
            Mapping of service id to service instance, in registration order

        """
        return {
            service_id: self.get_service(service_id)
            for service_id, registration in self._registrations.items()
            if _produces(registration.factory, service_type)
        }

    def get_service_of_type[T](self, service_type: type[T]) -> T:
        """Get the only service whose factory produces instances of a type.

        Raises:
            UnknownServiceError: If no registered service produces the type
            AmbiguousServiceError: If several registered services produce it

        """
        matches = [
            service_id
            for service_id, registration in self._registrations.items()
            if _produces(registration.factory, service_type)
        ]
        if not matches:
            raise UnknownServiceError(
                service_type.__name__,
                f"No registered service produces type '{service_type.__name__}'",
            )
        if len(matches) > 1:
            raise AmbiguousServiceError(
                f"Expected one service of type {service_type.__name__}, "
                f"found {len(matches)}: {', '.join(matches)}"
            )
        return self.get_service(matches[0])

    def _get_registration(self, service_id: str) -> ServiceRegistration[Any]:
        try:
            return self._registrations[service_id]
        except KeyError:
            raise UnknownServiceError(service_id) from None

    def _create(self, registration: ServiceRegistration[Any]) -> Any:  # noqa: ANN401
        instance = registration.factory.create()
        if instance is None:
            logger.error(
                "Factory for %s returned None - service unavailable",
                registration.service_id,
            )
            msg = f"Factory for {registration.service_id} returned None - service unavailable"
            raise ValueError(msg)
        return instance


def _produces(factory: ServiceFactory[Any], service_type: type) -> bool:
    connector_type = getattr(factory, "connector_type", None)
    return isinstance(connector_type, type) and issubclass(connector_type, service_type)
