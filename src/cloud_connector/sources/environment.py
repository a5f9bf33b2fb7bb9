"""Binding source reading connection strings from environment variables."""

import logging
import os
from collections.abc import Mapping, Sequence
from pathlib import Path

from dotenv import dotenv_values

from cloud_connector.errors import SourceUnavailableError
from cloud_connector.sources.base import RawBinding

logger = logging.getLogger(__name__)

DEFAULT_PREFIX = "CLOUD_SERVICE_"


class EnvironmentBindingSource:
    """Binding source backed by prefixed environment variables.

    Every variable ``{prefix}{NAME}={uri}`` becomes a binding whose id is
    ``NAME`` lowercased with underscores turned into hyphens, e.g.
    ``CLOUD_SERVICE_ORDERS_DB=postgres://...`` binds service ``orders-db``.
    The service kind is inferred from the URI scheme.

    An optional dotenv file supplies defaults; real environment variables
    take precedence over it.
    """

    def __init__(
        self,
        prefix: str = DEFAULT_PREFIX,
        dotenv_path: Path | None = None,
        environ: Mapping[str, str] | None = None,
    ) -> None:
        """Initialise the source.

        Args:
            prefix: Variable name prefix marking a service binding
            dotenv_path: Optional dotenv file read on every fetch
            environ: Environment to read (defaults to os.environ)

        """
        if not prefix:
            raise ValueError("Environment binding prefix cannot be empty")
        self._prefix = prefix
        self._dotenv_path = dotenv_path
        self._environ = environ

    def fetch_raw_bindings(self) -> Sequence[RawBinding]:
        """Collect bindings from the dotenv file and the environment.

        Returns:
            Bindings sorted by variable name

        Raises:
            SourceUnavailableError: If the configured dotenv file cannot be read

        """
        variables: dict[str, str] = {}
        if self._dotenv_path is not None:
            variables.update(self._read_dotenv(self._dotenv_path))
        environ = os.environ if self._environ is None else self._environ
        variables.update(environ)

        bindings = [
            RawBinding(id=self._service_id(name), uri=value.strip())
            for name, value in sorted(variables.items())
            if name.startswith(self._prefix) and len(name) > len(self._prefix)
        ]
        logger.debug(
            "Found %d service bindings in environment (prefix: %s)",
            len(bindings),
            self._prefix,
        )
        return bindings

    def _service_id(self, name: str) -> str:
        return name.removeprefix(self._prefix).lower().replace("_", "-")

    @staticmethod
    def _read_dotenv(path: Path) -> dict[str, str]:
        if not path.is_file():
            raise SourceUnavailableError(f"Dotenv file not found: {path}")
        try:
            values = dotenv_values(path)
        except (OSError, UnicodeDecodeError) as e:
            raise SourceUnavailableError(f"Cannot read dotenv file {path}: {e}") from e
        return {key: value for key, value in values.items() if value is not None}
