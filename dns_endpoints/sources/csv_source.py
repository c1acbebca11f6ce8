"""
CSV endpoint source.
"""

import logging
from typing import Dict, List

from .base_source import EndpointSource
from ..core.endpoint import Endpoint
from ..parsers.csv import CSVParser

logger = logging.getLogger(__name__)


class CSVSource(EndpointSource):
    """Endpoints read from a CSV file on every call."""

    def __init__(self, config: Dict):
        self.path = config.get("path", "")
        if not self.path:
            raise ValueError("CSV source requires a 'path'")

    def endpoints(self) -> List[Endpoint]:
        return CSVParser(self.path).parse()
