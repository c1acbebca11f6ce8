"""
Core DNS endpoint functionality.

This package contains the endpoint model, target comparison rules,
ownership filtering and change analysis.
"""

from .endpoint import Endpoint, EndpointKey, new_endpoint, new_endpoint_with_ttl
from .endpoint_manager import EndpointManager
from .filters import filter_endpoints_by_owner_id
from .record_manager import RecordManager

__all__ = [
    "Endpoint",
    "EndpointKey",
    "EndpointManager",
    "RecordManager",
    "filter_endpoints_by_owner_id",
    "new_endpoint",
    "new_endpoint_with_ttl",
]
