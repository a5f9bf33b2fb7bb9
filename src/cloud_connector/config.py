"""Catalog configuration with environment variable support."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any, Literal, Self, override

from pydantic import Field, field_validator

from cloud_connector.services import BaseServiceConfiguration
from cloud_connector.sources import (
    EnvironmentBindingSource,
    RawBindingSource,
    YamlBindingSource,
)
from cloud_connector.sources.environment import DEFAULT_PREFIX

type MalformedEntryPolicy = Literal["fail", "skip"]


class CatalogConfiguration(BaseServiceConfiguration):
    """Configuration for building a service catalog.

    Attributes:
        on_malformed: What to do with an entry whose credentials cannot be
            parsed - "fail" aborts the whole build, "skip" drops the entry
            with a warning
        bindings_file: YAML bindings file; when unset bindings are read from
            environment variables
        env_prefix: Prefix of environment variables holding bindings
        dotenv_path: Optional dotenv file supplying binding variables

    Example:
        ```python
        # Explicit configuration
        config = CatalogConfiguration(on_malformed="skip")

        # Zero-config (reads from environment)
        config = CatalogConfiguration.from_properties({})
        ```

    """

    on_malformed: MalformedEntryPolicy = Field(
        default="fail", description="Policy for entries with malformed credentials"
    )
    bindings_file: Path | None = Field(
        default=None, description="YAML bindings file (environment when None)"
    )
    env_prefix: str = Field(
        default=DEFAULT_PREFIX, description="Environment variable prefix for bindings"
    )
    dotenv_path: Path | None = Field(
        default=None, description="Dotenv file with binding variables"
    )

    @field_validator("on_malformed", mode="before")
    @classmethod
    def normalise_policy(cls, v: Any) -> Any:  # noqa: ANN401
        """Accept the policy name in any case."""
        return v.strip().lower() if isinstance(v, str) else v

    @field_validator("env_prefix")
    @classmethod
    def validate_prefix_not_empty(cls, v: str) -> str:
        """Validate that the environment prefix is not empty."""
        if not v.strip():
            raise ValueError("Environment variable prefix cannot be empty")
        return v.strip()

    @classmethod
    @override
    def from_properties(cls, properties: dict[str, Any]) -> Self:
        """Create configuration from properties with environment fallback.

        Explicit properties take precedence over environment variables:
        - CLOUD_CONNECTOR_ON_MALFORMED: "fail" or "skip"
        - CLOUD_CONNECTOR_BINDINGS_FILE: path of a YAML bindings file
        - CLOUD_CONNECTOR_ENV_PREFIX: prefix of binding variables
        - CLOUD_CONNECTOR_DOTENV: path of a dotenv file

        Args:
            properties: Configuration properties dictionary

        Returns:
            Validated configuration instance

        Raises:
            ValidationError: If configuration is invalid

        """
        config_data = properties.copy()

        env_map = {
            "on_malformed": "CLOUD_CONNECTOR_ON_MALFORMED",
            "bindings_file": "CLOUD_CONNECTOR_BINDINGS_FILE",
            "env_prefix": "CLOUD_CONNECTOR_ENV_PREFIX",
            "dotenv_path": "CLOUD_CONNECTOR_DOTENV",
        }
        for field_name, env_var in env_map.items():
            if field_name not in config_data:
                env_value = os.getenv(env_var)
                if env_value:
                    config_data[field_name] = env_value

        return cls.model_validate(config_data)

    def create_binding_source(self) -> RawBindingSource:
        """Create the binding source this configuration points at."""
        if self.bindings_file is not None:
            return YamlBindingSource(self.bindings_file)
        return EnvironmentBindingSource(
            prefix=self.env_prefix, dotenv_path=self.dotenv_path
        )
