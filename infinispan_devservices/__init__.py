"""Dev-services configuration for the Infinispan client.

Describes whether an ephemeral Infinispan server may be started during local
development and testing, and how it is shared, labelled and pre-populated.
"""

from infinispan_devservices.config import DevServicesConfig
from infinispan_devservices.exceptions import ConfigurationError, DevServicesException
from infinispan_devservices.properties import load_properties, load_properties_file
from infinispan_devservices.reuse import DISCOVERY_LABEL, can_reuse, discovery_labels
from infinispan_devservices.settings import DevServicesSettings, load_from_env

__all__ = [
    "DISCOVERY_LABEL",
    "ConfigurationError",
    "DevServicesConfig",
    "DevServicesException",
    "DevServicesSettings",
    "can_reuse",
    "discovery_labels",
    "load_from_env",
    "load_properties",
    "load_properties_file",
]
