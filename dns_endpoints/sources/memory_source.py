"""
In-memory endpoint source for testing and demonstration.
"""

import logging
from typing import Dict, Iterable, List, Optional

from .base_source import EndpointSource
from ..core.endpoint import Endpoint

logger = logging.getLogger(__name__)


class MemorySource(EndpointSource):
    """Endpoint source backed by a list held in memory."""

    def __init__(self, config: Optional[Dict] = None, endpoints: Iterable[Endpoint] = ()):
        self.records = list(endpoints)
        logger.info("Memory source initialized")

    def add(self, endpoint: Endpoint) -> None:
        self.records.append(endpoint)

    def endpoints(self) -> List[Endpoint]:
        logger.info(f"Memory: Retrieved {len(self.records)} endpoints")
        return list(self.records)
