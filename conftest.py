"""Workspace-level pytest configuration and fixtures."""

import pytest

from cloud_connector import ServiceKindRegistry, reset_default_catalog


@pytest.fixture(autouse=True, scope="function")
def isolate_service_kind_registry():
    """Automatically preserve and restore ServiceKindRegistry state for each test.

    ServiceKindRegistry is class-level state shared by the whole process;
    tests registering extra kinds must not leak them into other tests.
    """
    saved_state = ServiceKindRegistry.snapshot_state()

    yield

    ServiceKindRegistry.restore_state(saved_state)


@pytest.fixture(autouse=True, scope="function")
def isolate_default_catalog():
    """Drop the process-wide default catalog around each test."""
    reset_default_catalog()

    yield

    reset_default_catalog()
