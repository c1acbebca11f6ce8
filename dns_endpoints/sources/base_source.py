"""
Base endpoint source interface.

This module defines the abstract base class that all endpoint sources must implement.
"""

from abc import ABC, abstractmethod
from typing import List

from ..core.endpoint import Endpoint


class EndpointSource(ABC):
    """Abstract base class for endpoint sources."""

    @abstractmethod
    def endpoints(self) -> List[Endpoint]:
        """Get all endpoints this source provides."""
        pass
