"""Creation of service infos from raw platform bindings."""

import logging

from pydantic import ValidationError

from cloud_connector.errors import MalformedCredentialError
from cloud_connector.service_info.base import ServiceInfo
from cloud_connector.service_info.registry import ServiceKindRegistry
from cloud_connector.sources.base import RawBinding
from cloud_connector.uri import redact_uri

logger = logging.getLogger(__name__)


def create_service_info(binding: RawBinding) -> ServiceInfo:
    """Parse one raw binding into the service info of its kind.

    The kind is looked up by the binding's kind hint (a service label) or,
    when the hint is empty, by its scheme.

    Args:
        binding: Raw binding record from a binding source

    Returns:
        Immutable service info

    Raises:
        UnsupportedServiceKindError: If no kind matches the hint or scheme
        MalformedCredentialError: If the connection string is malformed

    """
    if binding.kind_hint:
        kind = ServiceKindRegistry.for_label(binding.kind_hint)
    else:
        kind = ServiceKindRegistry.for_scheme(binding.scheme)

    try:
        service_info = kind.from_uri(
            binding.id, binding.uri, expected_scheme=binding.scheme or None
        )
    except ValidationError as e:
        raise MalformedCredentialError(
            f"Invalid credentials for service '{binding.id}': "
            f"{e.error_count()} validation error(s)",
            raw=redact_uri(binding.uri),
        ) from None

    logger.debug("Parsed service '%s' as %s", binding.id, kind.__name__)
    return service_info
