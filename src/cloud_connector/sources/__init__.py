"""Raw binding sources feeding the service catalog."""

from cloud_connector.sources.base import RawBinding, RawBindingSource
from cloud_connector.sources.environment import EnvironmentBindingSource
from cloud_connector.sources.static import StaticBindingSource
from cloud_connector.sources.yaml_file import YamlBindingSource

__all__ = [
    "EnvironmentBindingSource",
    "RawBinding",
    "RawBindingSource",
    "StaticBindingSource",
    "YamlBindingSource",
]
