"""
Endpoint filters

Batch operations over endpoint collections coming from the sources.
"""

import logging
from typing import Iterable, List, Optional

from .endpoint import Endpoint
from .labels import OWNER_LABEL_KEY

logger = logging.getLogger(__name__)


def filter_endpoints_by_owner_id(
    owner_id: str,
    endpoints: Iterable[Endpoint],
    log: Optional[logging.Logger] = None,
) -> List[Endpoint]:
    """
    Keep only the endpoints owned by ``owner_id``.

    Endpoints are deduplicated by key: once a key has been seen, later
    endpoints with the same key are dropped whether or not they are owned.

    Args:
        owner_id: Owner id to match against the owner label
        endpoints: Endpoints in source order
        log: Diagnostic logger (module logger by default)

    Returns:
        The owned, first-seen endpoints in their original order
    """
    log = log or logger
    filtered = []
    visited = set()

    for endpoint in endpoints:
        key = endpoint.key()
        if key in visited:
            log.debug(f"Already loaded endpoint {endpoint}")
            continue
        visited.add(key)

        owner = endpoint.labels.get(OWNER_LABEL_KEY, "")
        if endpoint.is_owned_by(owner_id):
            filtered.append(endpoint)
            log.debug(
                f'Added endpoint {endpoint} because owner id matches, '
                f'found: "{owner}", required: "{owner_id}"'
            )
        else:
            log.debug(
                f'Skipping endpoint {endpoint} because owner id does not match, '
                f'found: "{owner}", required: "{owner_id}"'
            )

    return filtered
