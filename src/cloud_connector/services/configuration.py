"""Base configuration classes for services and connectors.

This module provides the base configuration class that catalog settings and
every client configuration produced by a connector factory inherit from. It
provides consistent validation, immutability, and factory patterns.
"""

from __future__ import annotations

from typing import Any, Self

from pydantic import BaseModel, ConfigDict


class BaseServiceConfiguration(BaseModel):
    """Base class for all service configurations.

    Features:
        - Pydantic validation for type safety
        - Immutable by default (frozen) for configuration integrity
        - from_properties() factory method for dictionary-based creation
        - Strict validation (no extra fields allowed)

    Example:
        ```python
        class PoolConfiguration(BaseServiceConfiguration):
            min_pool_size: int = 0
            max_pool_size: int = 4

        # Create from properties dictionary
        config = PoolConfiguration.from_properties({"max_pool_size": 10})

        # Or direct instantiation
        config = PoolConfiguration(max_pool_size=10)
        ```

    """

    model_config = ConfigDict(
        # Immutable - configuration cannot be modified after creation
        frozen=True,
        # Strict - extra fields not in the model are rejected
        extra="forbid",
        # Validate on assignment (if frozen is False in subclass)
        validate_assignment=True,
    )

    @classmethod
    def from_properties(cls, properties: dict[str, Any]) -> Self:
        """Create configuration from properties dictionary with validation.

        Subclasses override this method to add environment variable support
        and other preprocessing logic.

        Args:
            properties: Dictionary containing configuration properties

        Returns:
            Validated configuration instance

        Raises:
            ValidationError: If properties are invalid or missing required fields

        """
        return cls.model_validate(properties)
