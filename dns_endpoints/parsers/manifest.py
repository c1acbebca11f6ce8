"""
DNSEndpoint manifest parser

Reads and writes YAML streams of DNSEndpoint and DNSEndpointList documents.
"""

import logging
from typing import Iterable, List

import yaml

from ..core.dns_endpoint import KIND, LIST_KIND, DNSEndpoint, DNSEndpointList

logger = logging.getLogger(__name__)


class ManifestParser:
    """Parser for multi-document DNSEndpoint YAML manifests."""

    def __init__(self, manifest_path: str):
        self.manifest_path = manifest_path

    def parse_resources(self) -> List[DNSEndpoint]:
        """Return every DNSEndpoint in the manifest, expanding lists."""
        resources = []

        try:
            with open(self.manifest_path, "r") as f:
                documents = list(yaml.safe_load_all(f))
        except FileNotFoundError:
            raise FileNotFoundError(f"Manifest file not found: {self.manifest_path}")
        except yaml.YAMLError as e:
            raise ValueError(f"Error parsing manifest {self.manifest_path}: {e}")

        for index, document in enumerate(documents):
            if not document:
                continue
            if not isinstance(document, dict):
                logger.warning(f"Document {index} in {self.manifest_path} is not a mapping, skipping")
                continue

            kind = document.get("kind")
            if kind == KIND:
                resources.append(DNSEndpoint.from_dict(document))
            elif kind == LIST_KIND:
                resources.extend(DNSEndpointList.from_dict(document).items)
            else:
                logger.warning(f"Unsupported kind '{kind}' in {self.manifest_path}, skipping")

        logger.info(f"Loaded {len(resources)} DNSEndpoint resources from {self.manifest_path}")
        return resources

    def parse(self):
        """Return the endpoints of every DNSEndpoint in the manifest, in document order."""
        return [e for resource in self.parse_resources() for e in resource.endpoints]


def dump_manifest(resources: Iterable[DNSEndpoint], manifest_path: str) -> None:
    """Write DNSEndpoint resources as a multi-document YAML manifest."""
    with open(manifest_path, "w") as f:
        yaml.safe_dump_all(
            [resource.to_dict() for resource in resources],
            f,
            default_flow_style=False,
            sort_keys=False,
        )
    logger.info(f"Manifest written to {manifest_path}")
