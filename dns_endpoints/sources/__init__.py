"""
Endpoint source implementations.

This package contains the sources endpoints are collected from:
DNSEndpoint manifests, CSV files and an in-memory source.
"""

from .base_source import EndpointSource
from .csv_source import CSVSource
from .manifest_source import ManifestSource
from .memory_source import MemorySource
from .source_client import SourceClient

__all__ = ["EndpointSource", "CSVSource", "ManifestSource", "MemorySource", "SourceClient"]
