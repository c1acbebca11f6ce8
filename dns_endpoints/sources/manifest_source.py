"""
DNSEndpoint manifest source.

Reads DNSEndpoint resources from a YAML manifest and labels each endpoint
with the resource it came from.
"""

import logging
from typing import Dict, List

from .base_source import EndpointSource
from ..core.endpoint import Endpoint
from ..core.labels import RESOURCE_LABEL_KEY
from ..parsers.manifest import ManifestParser

logger = logging.getLogger(__name__)


class ManifestSource(EndpointSource):
    """Endpoints from the DNSEndpoint resources of a manifest file."""

    def __init__(self, config: Dict):
        self.path = config.get("path", "")
        if not self.path:
            raise ValueError("Manifest source requires a 'path'")

    def endpoints(self) -> List[Endpoint]:
        endpoints = []
        for resource in ManifestParser(self.path).parse_resources():
            resource_label = f"crd/{resource.namespace}/{resource.name}"
            for endpoint in resource.endpoints:
                endpoint.labels.setdefault(RESOURCE_LABEL_KEY, resource_label)
                endpoints.append(endpoint)

        logger.info(f"Manifest source {self.path} produced {len(endpoints)} endpoints")
        return endpoints
