"""Error classes for the cloud connector.

This module provides:
- CloudConnectorError: Base exception class for all connector errors
- MalformedCredentialError, UnsupportedServiceKindError: Parse-time exceptions
- UnknownServiceError, AmbiguousServiceError: Lookup-time exceptions
- SourceUnavailableError, CatalogUnavailableError: Catalog build exceptions
- RegistrationError, DuplicateServiceError: Registration exceptions

Messages never include a service password.
"""

from collections.abc import Mapping


class CloudConnectorError(Exception):
    """Base exception for all cloud connector errors."""

    pass


class MalformedCredentialError(CloudConnectorError):
    """Raised when a raw connection string cannot be parsed into a service info.

    Attributes:
        raw: The offending connection string with its password redacted

    """

    def __init__(self, message: str, raw: str = "") -> None:
        """Initialise with a message and the redacted raw connection string."""
        super().__init__(message)
        self.raw = raw


class UnsupportedServiceKindError(MalformedCredentialError):
    """Raised when no service kind is registered for a label or scheme."""

    pass


class UnknownServiceError(CloudConnectorError, KeyError):
    """Raised when a service id is not present in a catalog or container."""

    def __init__(self, service_id: str, message: str | None = None) -> None:
        """Initialise with the missing service id (or label, with a message)."""
        super().__init__(service_id)
        self.service_id = service_id
        self.message = message or f"No service bound with id '{service_id}'"

    def __str__(self) -> str:
        """Return a readable message instead of KeyError's repr of the key."""
        return self.message


class AmbiguousServiceError(CloudConnectorError):
    """Raised when a single-service lookup matches more than one service."""

    pass


class SourceUnavailableError(CloudConnectorError):
    """Raised by a raw binding source when binding data cannot be fetched."""

    pass


class CatalogUnavailableError(CloudConnectorError):
    """Raised when a service catalog cannot be built."""

    pass


class DuplicateServiceError(CloudConnectorError):
    """Raised when a service id is registered twice with the same container."""

    pass


class RegistrationError(CloudConnectorError):
    """Raised when one or more catalog entries could not be registered.

    Attributes:
        causes: Mapping of offending service id to the exception raised for it
        service_ids: Offending service ids in registration order
        service_id: The first offending service id

    """

    def __init__(self, causes: Mapping[str, Exception]) -> None:
        """Initialise from the per-service failures."""
        self.causes = dict(causes)
        self.service_ids = tuple(self.causes)
        self.service_id = self.service_ids[0] if self.service_ids else ""
        ids = ", ".join(f"'{service_id}'" for service_id in self.service_ids)
        super().__init__(f"Error registering service factory for {ids}")
