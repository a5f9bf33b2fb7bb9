"""Service catalog: the lazily built, read-only map of bound services.

The catalog fetches raw bindings from its source exactly once, parses every
binding into a service info and caches the result for the lifetime of the
catalog. Concurrent first callers share a single build and all observe the
same catalog or the same failure. A partially built catalog is never exposed.
"""

from __future__ import annotations

import logging
import threading
from collections.abc import Mapping
from concurrent.futures import Future
from types import MappingProxyType

from cloud_connector.config import CatalogConfiguration
from cloud_connector.errors import (
    AmbiguousServiceError,
    CatalogUnavailableError,
    MalformedCredentialError,
    SourceUnavailableError,
    UnknownServiceError,
)
from cloud_connector.service_info import ServiceInfo, create_service_info
from cloud_connector.sources import RawBindingSource

logger = logging.getLogger(__name__)


class ServiceCatalog:
    """Read-only mapping from service id to service info, built on first access.

    Example:
        >>> catalog = ServiceCatalog(YamlBindingSource(Path("bindings.yaml")))
        >>> orders_db = catalog.lookup_by_id("orders-db")
        >>> caches = catalog.lookup_by_label("redis")

    """

    def __init__(
        self,
        source: RawBindingSource,
        config: CatalogConfiguration | None = None,
    ) -> None:
        """Initialise the catalog without fetching anything.

        Args:
            source: Raw binding source, called once per (re)build
            config: Catalog configuration (defaults apply when None)

        """
        self._source = source
        self._config = config or CatalogConfiguration()
        self._lock = threading.Lock()
        self._services: Mapping[str, ServiceInfo] | None = None
        self._build_in_flight: Future[Mapping[str, ServiceInfo]] | None = None

    @property
    def config(self) -> CatalogConfiguration:
        """Get the catalog configuration."""
        return self._config

    @property
    def is_resolved(self) -> bool:
        """Whether a catalog has been built successfully."""
        return self._services is not None

    def resolve(self) -> Mapping[str, ServiceInfo]:
        """Get the full mapping from service id to service info.

        The first call builds the catalog; later calls return the cached
        mapping.

        Raises:
            CatalogUnavailableError: If the catalog cannot be built

        """
        services = self._services
        if services is not None:
            return services
        return self._build_single_flight(refresh=False)

    def refresh(self) -> Mapping[str, ServiceInfo]:
        """Rebuild the catalog from a fresh fetch of the binding source.

        The previously cached mapping is left in place if the rebuild fails.

        Raises:
            CatalogUnavailableError: If the catalog cannot be built

        """
        return self._build_single_flight(refresh=True)

    def lookup_by_id(self, service_id: str) -> ServiceInfo:
        """Get the service info bound under an id.

        Raises:
            UnknownServiceError: If no service is bound under the id
            CatalogUnavailableError: If the catalog cannot be built

        """
        try:
            return self.resolve()[service_id]
        except KeyError:
            raise UnknownServiceError(service_id) from None

    def lookup_by_label(self, label: str) -> tuple[ServiceInfo, ...]:
        """Get every service info of the kind identified by a label.

        Returns:
            Matching service infos in first-seen order; empty if none match

        """
        return tuple(
            service for service in self.resolve().values() if service.label == label
        )

    def lookup_by_type[S: ServiceInfo](self, service_type: type[S]) -> tuple[S, ...]:
        """Get every service info that is an instance of a kind or kind family.

        Example:
            >>> catalog.lookup_by_type(RelationalServiceInfo)

        """
        return tuple(
            service
            for service in self.resolve().values()
            if isinstance(service, service_type)
        )

    def lookup_single_by_label(self, label: str) -> ServiceInfo:
        """Get the only service info of the kind identified by a label.

        Raises:
            UnknownServiceError: If no service has the label
            AmbiguousServiceError: If several services have the label

        """
        matches = self.lookup_by_label(label)
        if not matches:
            raise UnknownServiceError(
                label, f"No service bound with label '{label}'"
            )
        if len(matches) > 1:
            raise AmbiguousServiceError(
                f"Expected one '{label}' service, found {len(matches)}: "
                f"{', '.join(service.id for service in matches)}"
            )
        return matches[0]

    def _build_single_flight(self, refresh: bool) -> Mapping[str, ServiceInfo]:
        with self._lock:
            if not refresh and self._services is not None:
                return self._services
            flight = self._build_in_flight
            leader = flight is None
            if flight is None:
                flight = Future()
                self._build_in_flight = flight

        if not leader:
            logger.debug("Waiting for in-flight catalog build")
            return flight.result()

        try:
            services = self._build()
        except BaseException as e:
            with self._lock:
                self._build_in_flight = None
            flight.set_exception(e)
            raise

        with self._lock:
            self._services = services
            self._build_in_flight = None
        flight.set_result(services)
        return services

    def _build(self) -> Mapping[str, ServiceInfo]:
        logger.debug("Building service catalog")
        try:
            bindings = self._source.fetch_raw_bindings()
        except SourceUnavailableError as e:
            raise CatalogUnavailableError(f"Service bindings unavailable: {e}") from e

        services: dict[str, ServiceInfo] = {}
        for binding in bindings:
            if binding.id in services:
                raise CatalogUnavailableError(
                    f"Duplicate service id '{binding.id}' in service bindings"
                )
            try:
                services[binding.id] = create_service_info(binding)
            except MalformedCredentialError as e:
                if self._config.on_malformed == "skip":
                    logger.warning("Skipping service '%s': %s", binding.id, e)
                    continue
                raise CatalogUnavailableError(
                    f"Malformed credentials for service '{binding.id}': {e}"
                ) from e

        logger.debug("Service catalog built with %d services", len(services))
        return MappingProxyType(services)


_default_catalog: ServiceCatalog | None = None
_default_catalog_lock = threading.Lock()


def get_default_catalog() -> ServiceCatalog:
    """Get the process-wide catalog, creating it on first call.

    The catalog is configured from the environment through
    CatalogConfiguration.from_properties(); it is created but not resolved.
    """
    global _default_catalog
    if _default_catalog is None:
        with _default_catalog_lock:
            # Double-check after acquiring lock
            if _default_catalog is None:
                config = CatalogConfiguration.from_properties({})
                _default_catalog = ServiceCatalog(config.create_binding_source(), config)
    return _default_catalog


def reset_default_catalog() -> None:
    """Drop the process-wide catalog so the next access creates a new one."""
    global _default_catalog
    with _default_catalog_lock:
        _default_catalog = None
