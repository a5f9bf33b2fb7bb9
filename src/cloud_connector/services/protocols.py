"""Service protocols for dependency injection."""

from typing import Any, Protocol

from cloud_connector.service_info import ServiceInfo


class ServiceFactory[T](Protocol):
    """Protocol for deferred constructors of client configuration objects.

    A factory is handed to a registration sink without being invoked. The
    sink calls create() when the service is first requested.

    The protocol methods (create, can_create) take NO parameters. The service
    info and any connector settings are held by the factory instance, not
    passed per-call.

    Example:
        ```python
        class RedisConnectionFactory:
            def __init__(self, service_info: RedisServiceInfo):
                self._service_info = service_info

            def can_create(self) -> bool:
                return bool(self._service_info.host)

            def create(self) -> RedisConnectionConfiguration | None:
                if not self.can_create():
                    return None
                return RedisConnectionConfiguration(
                    host=self._service_info.host,
                    port=self._service_info.port,
                )
        ```

    """

    def create(self) -> T | None:
        """Create a service instance.

        Returns:
            Service instance, or None if service unavailable.

        """
        ...

    def can_create(self) -> bool:
        """Check if factory can create service instance.

        Returns:
            True if service is available and can be created, False otherwise.

        """
        ...


class RegistrationSink(Protocol):
    """Protocol for anything that accepts service registrations.

    ServiceContainer is the bundled implementation. A sink may reject a
    registration (for example a duplicate id) by raising.
    """

    def register(
        self,
        service_id: str,
        service_info: ServiceInfo,
        factory: ServiceFactory[Any],
    ) -> None:
        """Register a deferred factory for one bound service.

        Args:
            service_id: Service id the factory is registered under
            service_info: Parsed credentials of the service (shared, read-only)
            factory: Deferred constructor, not yet invoked

        """
        ...
