"""Registry mapping service labels and URI schemes to service info kinds."""

import logging
import threading
from importlib.metadata import entry_points
from typing import ClassVar, TypedDict

from cloud_connector.errors import UnsupportedServiceKindError
from cloud_connector.service_info.base import ServiceInfo

logger = logging.getLogger(__name__)

ENTRY_POINT_GROUP = "cloud_connector.service_kinds"


class ServiceKindRegistryState(TypedDict):
    """State snapshot for ServiceKindRegistry.

    Used for test isolation - captures and restores registry state
    to prevent test pollution.
    """

    by_label: dict[str, type[ServiceInfo]]
    by_scheme: dict[str, type[ServiceInfo]]
    discovered: bool


class ServiceKindRegistry:
    """Static table of service info kinds keyed by label and by scheme.

    Built-in kinds register themselves at import time with the register
    decorator. Third-party kinds are loaded once, on first lookup, from the
    ``cloud_connector.service_kinds`` entry-point group.
    """

    _lock: ClassVar[threading.Lock] = threading.Lock()
    _by_label: ClassVar[dict[str, type[ServiceInfo]]] = {}
    _by_scheme: ClassVar[dict[str, type[ServiceInfo]]] = {}
    _discovered: ClassVar[bool] = False

    @classmethod
    def register[K: ServiceInfo](cls, kind: type[K]) -> type[K]:
        """Register a service info kind under its label and schemes.

        Usable as a class decorator. Registration is idempotent for the same
        class.

        Args:
            kind: ServiceInfo subclass defining ``label`` and ``schemes`` ClassVars

        Returns:
            The registered class, unchanged

        Raises:
            ValueError: If the kind has no label or schemes, or a label or
                scheme is already taken by a different kind

        """
        if not kind.label:
            raise ValueError(f"Service kind {kind.__name__} must define 'label' ClassVar")
        if not kind.schemes:
            raise ValueError(
                f"Service kind {kind.__name__} must define 'schemes' ClassVar"
            )

        with cls._lock:
            existing = cls._by_label.get(kind.label)
            if existing is not None and existing is not kind:
                raise ValueError(
                    f"Label '{kind.label}' is already registered to {existing.__name__}"
                )
            for scheme in kind.schemes:
                owner = cls._by_scheme.get(scheme)
                if owner is not None and owner is not kind:
                    raise ValueError(
                        f"Scheme '{scheme}' is already registered to {owner.__name__}"
                    )

            cls._by_label[kind.label] = kind
            for scheme in kind.schemes:
                cls._by_scheme[scheme] = kind

        logger.debug(
            "Registered service kind: %s (label: %s, schemes: %s)",
            kind.__name__,
            kind.label,
            ", ".join(kind.schemes),
        )
        return kind

    @classmethod
    def for_label(cls, label: str) -> type[ServiceInfo]:
        """Get the service info kind registered for a label.

        Raises:
            UnsupportedServiceKindError: If no kind is registered for the label

        """
        cls._ensure_discovered()
        try:
            return cls._by_label[label]
        except KeyError:
            raise UnsupportedServiceKindError(
                f"No service kind registered for label '{label}'. "
                f"Available labels: {', '.join(cls.labels())}"
            ) from None

    @classmethod
    def for_scheme(cls, scheme: str) -> type[ServiceInfo]:
        """Get the service info kind registered for a URI scheme.

        Raises:
            UnsupportedServiceKindError: If no kind is registered for the scheme

        """
        cls._ensure_discovered()
        try:
            return cls._by_scheme[scheme]
        except KeyError:
            raise UnsupportedServiceKindError(
                f"No service kind registered for scheme '{scheme}'. "
                f"Available schemes: {', '.join(sorted(cls._by_scheme))}"
            ) from None

    @classmethod
    def labels(cls) -> tuple[str, ...]:
        """Get all registered labels, sorted."""
        cls._ensure_discovered()
        return tuple(sorted(cls._by_label))

    @classmethod
    def is_registered(cls, label: str) -> bool:
        """Check if a kind is registered under the given label."""
        cls._ensure_discovered()
        return label in cls._by_label

    @classmethod
    def _ensure_discovered(cls) -> None:
        """Load plugin kinds from entry points (called once)."""
        if cls._discovered:
            return
        with cls._lock:
            if cls._discovered:
                return
            cls._discovered = True
            plugins = list(entry_points(group=ENTRY_POINT_GROUP))

        for ep in plugins:
            try:
                kind = ep.load()
                cls.register(kind)
            except Exception as e:
                logger.warning("Failed to load service kind '%s': %s", ep.name, e)

    @classmethod
    def snapshot_state(cls) -> ServiceKindRegistryState:
        """Capture current registry state for later restoration.

        This is primarily used for test isolation - save state before tests,
        restore after tests to prevent global state pollution.
        """
        with cls._lock:
            return {
                "by_label": cls._by_label.copy(),
                "by_scheme": cls._by_scheme.copy(),
                "discovered": cls._discovered,
            }

    @classmethod
    def restore_state(cls, state: ServiceKindRegistryState) -> None:
        """Restore registry state from a previously captured snapshot."""
        with cls._lock:
            cls._by_label = state["by_label"].copy()
            cls._by_scheme = state["by_scheme"].copy()
            cls._discovered = state["discovered"]
