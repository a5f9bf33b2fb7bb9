"""In-memory binding source."""

from collections.abc import Iterable, Sequence

from cloud_connector.sources.base import RawBinding


class StaticBindingSource:
    """Binding source serving a fixed list of bindings.

    Useful for programmatic configuration and tests.
    """

    def __init__(self, bindings: Iterable[RawBinding] = ()) -> None:
        """Initialise with the bindings to serve."""
        self._bindings = tuple(bindings)

    def fetch_raw_bindings(self) -> Sequence[RawBinding]:
        """Return the configured bindings."""
        return self._bindings
