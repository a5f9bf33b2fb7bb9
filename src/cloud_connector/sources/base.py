"""Raw binding records and the protocol of the sources that provide them."""

from collections.abc import Sequence
from dataclasses import dataclass, field
from typing import Protocol, override

from cloud_connector.uri import redact_uri


@dataclass(frozen=True)
class RawBinding:
    """One service binding as exposed by the hosting platform.

    Attributes:
        id: Service id the binding is known by
        uri: Raw connection string
        scheme: Declared URI scheme ("" to take it from the connection string)
        kind_hint: Service label ("" to infer the kind from the scheme)

    """

    id: str
    uri: str = field(repr=False)
    scheme: str = ""
    kind_hint: str = ""

    def __post_init__(self) -> None:
        """Default the scheme to the connection string's scheme token."""
        if not self.scheme:
            scheme, separator, _ = self.uri.partition("://")
            if separator:
                object.__setattr__(self, "scheme", scheme)

    @override
    def __repr__(self) -> str:
        """Return a representation with the password masked."""
        return (
            f"RawBinding(id={self.id!r}, uri={redact_uri(self.uri)!r}, "
            f"scheme={self.scheme!r}, kind_hint={self.kind_hint!r})"
        )


class RawBindingSource(Protocol):
    """Protocol for collaborators exposing the platform's raw binding data.

    A ServiceCatalog calls fetch_raw_bindings() exactly once per (re)build.
    """

    def fetch_raw_bindings(self) -> Sequence[RawBinding]:
        """Fetch every service binding visible to the application.

        Returns:
            Bindings in the order the platform lists them

        Raises:
            SourceUnavailableError: If binding data is unreachable or malformed

        """
        ...
