"""
Well-known endpoint labels.

The label values are written by the ownership registry; only the keys are
shared here and must match the registry verbatim.
"""

from typing import Dict

# Owner of the record, compared against the configured owner id
OWNER_LABEL_KEY = "owner"

# Source resource that produced the endpoint, e.g. "crd/default/my-endpoint"
RESOURCE_LABEL_KEY = "resource"

Labels = Dict[str, str]


def new_labels() -> Labels:
    """Return an empty label mapping."""
    return {}
