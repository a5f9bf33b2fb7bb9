"""Testing utilities for cloud connector factories.

This module provides contract tests that every connector factory test class
can inherit to verify it honours the ServiceFactory protocol.
"""

from typing import Any

import pytest

from cloud_connector.connectors import ServiceConnectorFactory
from cloud_connector.service_info import ServiceInfo


class ServiceConnectorFactoryContractTests[T]:
    """Abstract contract tests that all ServiceConnectorFactory implementations must pass.

    Required Fixtures:
        factory: ServiceConnectorFactory instance to test

    Contract Requirements:
        1. create() must return an instance of connector_type
        2. create() must return a new, equal configuration on every call
        3. can_create() must return True for complete credentials
        4. service_info must be the service info the factory was built from
        5. the created configuration must not reveal the password in its repr

    Usage Pattern:
        class TestMyFactory(ServiceConnectorFactoryContractTests[MyConfiguration]):
            @pytest.fixture
            def factory(self) -> ServiceConnectorFactory[MyConfiguration]:
                return MyFactory(MyServiceInfo.from_uri("svc", "my://u:p@host"))

    """

    @pytest.fixture
    def factory(self) -> ServiceConnectorFactory[Any]:
        """Provide ServiceConnectorFactory instance to test.

        Subclasses MUST override this fixture. The service info should carry
        a password so the redaction contract is meaningful.

        Raises:
            NotImplementedError: If subclass doesn't override this fixture

        """
        raise NotImplementedError(
            "Subclass must provide 'factory' fixture with ServiceConnectorFactory instance"
        )

    # CONTRACT TEST 1
    def test_create_returns_connector_type_instance(
        self, factory: ServiceConnectorFactory[Any]
    ) -> None:
        """Verify factory.create() returns an instance of its connector_type."""
        configuration = factory.create()

        assert configuration is not None, "Factory create() must not return None"
        assert isinstance(configuration, factory.connector_type)

    # CONTRACT TEST 2
    def test_create_is_repeatable(self, factory: ServiceConnectorFactory[Any]) -> None:
        """Verify each create() call builds an equal, independent configuration."""
        first = factory.create()
        second = factory.create()

        assert first == second
        assert first is not second

    # CONTRACT TEST 3
    def test_can_create_returns_true_for_complete_credentials(
        self, factory: ServiceConnectorFactory[Any]
    ) -> None:
        """Verify can_create() reports availability as a boolean."""
        result = factory.can_create()

        assert isinstance(result, bool)
        assert result is True

    # CONTRACT TEST 4
    def test_service_info_is_exposed(self, factory: ServiceConnectorFactory[Any]) -> None:
        """Verify factory exposes the service info it builds from."""
        assert isinstance(factory.service_info, ServiceInfo)

    # CONTRACT TEST 5
    def test_repr_does_not_reveal_password(
        self, factory: ServiceConnectorFactory[Any]
    ) -> None:
        """Verify neither the configuration nor the service info repr leaks the password."""
        password = factory.service_info.password
        assert password, "Contract fixture must use credentials with a password"

        configuration = factory.create()

        assert password not in repr(configuration)
        assert password not in repr(factory.service_info)
