"""
DNS Endpoints - DNS record model with ownership filtering

Models DNS resource records ("endpoints") gathered from several sources and
provides the comparison, identity and ownership rules used to reconcile them.
"""

import logging

__version__ = "1.0.0"
__author__ = "DNS Endpoints Team"
__description__ = "DNS endpoint model with deduplication and ownership filtering"

from .core.endpoint import (
    Endpoint,
    EndpointKey,
    TTL,
    new_endpoint,
    new_endpoint_with_ttl,
)
from .core.filters import filter_endpoints_by_owner_id
from .core.labels import OWNER_LABEL_KEY
from .core.provider_specific import ProviderSpecific, ProviderSpecificProperty
from .core.targets import Targets, new_targets

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "Endpoint",
    "EndpointKey",
    "TTL",
    "new_endpoint",
    "new_endpoint_with_ttl",
    "filter_endpoints_by_owner_id",
    "OWNER_LABEL_KEY",
    "ProviderSpecific",
    "ProviderSpecificProperty",
    "Targets",
    "new_targets",
]
