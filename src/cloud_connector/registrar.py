"""Registrar publishing every catalog entry into a registration sink.

For each bound service the registrar registers a deferred connector factory
under the service id. With ServiceContainer as the sink, application code
retrieves ready-to-use client configurations by id or by type:

    >>> container = ServiceContainer()
    >>> ServiceRegistrar().register_all(catalog, container)
    >>> orders_db = container.get_service("orders-db")
    >>> caches = container.get_services_of_type(RedisConnectionConfiguration)

Registration is not transactional: a rejected entry does not stop the
remaining entries, and entries registered before a failure stay registered.
"""

import logging
from typing import Any

from cloud_connector.catalog import ServiceCatalog
from cloud_connector.connectors import ConnectorFactoryRegistry
from cloud_connector.errors import RegistrationError
from cloud_connector.services import RegistrationSink

logger = logging.getLogger(__name__)


class ServiceRegistrar:
    """Registers one deferred connector factory per catalog entry."""

    def __init__(
        self,
        factories: ConnectorFactoryRegistry | None = None,
        connector_settings: dict[str, dict[str, Any]] | None = None,
    ) -> None:
        """Initialise the registrar.

        Args:
            factories: Kind-to-factory registry (defaults when None)
            connector_settings: Optional per-service-id connector settings,
                e.g. ``{"orders-db": {"pool": {"max_pool_size": 10}}}``

        """
        self._factories = factories or ConnectorFactoryRegistry()
        self._connector_settings = connector_settings or {}

    def register_all(self, catalog: ServiceCatalog, sink: RegistrationSink) -> list[str]:
        """Register every catalog entry with the sink, in service id order.

        Factories are handed over without being invoked.

        Args:
            catalog: Catalog to register (resolved if not yet built)
            sink: Registration sink receiving one call per entry

        Returns:
            Ids registered successfully

        Raises:
            CatalogUnavailableError: If the catalog cannot be built
            RegistrationError: If any entry failed, naming every offending id
                after all entries have been attempted

        """
        services = catalog.resolve()
        registered: list[str] = []
        failures: dict[str, Exception] = {}

        for service_id in sorted(services):
            service_info = services[service_id]
            try:
                factory = self._factories.create_factory(
                    service_info, self._connector_settings.get(service_id)
                )
                sink.register(service_id, service_info, factory)
            except Exception as e:
                logger.error("Error registering service '%s': %s", service_id, e)
                failures[service_id] = e
                continue
            registered.append(service_id)
            logger.debug("Registered service '%s' (%s)", service_id, service_info.label)

        if failures:
            raise RegistrationError(failures)
        return registered
