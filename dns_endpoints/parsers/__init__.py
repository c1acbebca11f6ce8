"""
Endpoint input parsers.

Readers for DNSEndpoint manifests and flat CSV endpoint lists.
"""

from .csv import CSVParser
from .manifest import ManifestParser, dump_manifest

__all__ = ["CSVParser", "ManifestParser", "dump_manifest"]
