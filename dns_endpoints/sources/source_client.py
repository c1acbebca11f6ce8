"""
Source Client - Unified interface over the configured endpoint sources
"""

import logging
from typing import Dict, List

from .base_source import EndpointSource
from .csv_source import CSVSource
from .manifest_source import ManifestSource
from .memory_source import MemorySource
from ..core.endpoint import Endpoint

logger = logging.getLogger(__name__)

SOURCE_TYPES = {
    "manifest": ManifestSource,
    "csv": CSVSource,
    "memory": MemorySource,
}


class SourceClient:
    """Collects endpoints from every configured source, in configuration order."""

    def __init__(self, config: Dict):
        """Initialize source client with configuration."""
        self.config = config
        self.sources = self._get_sources()

    def _get_sources(self) -> List[EndpointSource]:
        """Build the sources listed under ``sources`` in the configuration."""
        sources = []
        for source_config in self.config.get("sources") or []:
            source_type = source_config.get("type", "manifest")
            source_class = SOURCE_TYPES.get(source_type)
            if source_class is None:
                logger.warning(f"Unknown source type '{source_type}', skipping")
                continue
            sources.append(source_class(source_config))

        if not sources:
            logger.warning("No sources configured, using empty memory source")
            sources.append(MemorySource())
        return sources

    def endpoints(self) -> List[Endpoint]:
        """Get all endpoints from all sources."""
        endpoints = []
        for source in self.sources:
            endpoints.extend(source.endpoints())
        return endpoints
