"""
DNSEndpoint resource wrapper

A DNSEndpoint carries a list of endpoints as its desired state and the
generation observed by the controller as its status. Creating, validating
and bumping the status of these resources is the controller's job; this
module only moves the endpoint list in and out of the resource losslessly.
"""

from typing import Dict, List, Optional

from .endpoint import Endpoint

API_VERSION = "externaldns.k8s.io/v1alpha1"
KIND = "DNSEndpoint"
LIST_KIND = "DNSEndpointList"


class DNSEndpoint:
    """A DNSEndpoint custom resource."""

    def __init__(
        self,
        name: str = "",
        namespace: str = "",
        endpoints: Optional[List[Endpoint]] = None,
        observed_generation: int = 0,
        metadata: Optional[Dict] = None,
    ):
        self.metadata = dict(metadata or {})
        if name:
            self.metadata["name"] = name
        if namespace:
            self.metadata["namespace"] = namespace
        self.endpoints = list(endpoints or [])
        self.observed_generation = observed_generation

    @property
    def name(self) -> str:
        return self.metadata.get("name", "")

    @property
    def namespace(self) -> str:
        return self.metadata.get("namespace", "")

    def to_dict(self) -> Dict:
        data = {"apiVersion": API_VERSION, "kind": KIND}
        if self.metadata:
            data["metadata"] = dict(self.metadata)

        spec = {}
        if self.endpoints:
            spec["endpoints"] = [e.to_dict() for e in self.endpoints]
        data["spec"] = spec

        status = {}
        if self.observed_generation:
            status["observedGeneration"] = self.observed_generation
        data["status"] = status
        return data

    @classmethod
    def from_dict(cls, data: Dict) -> "DNSEndpoint":
        spec = data.get("spec") or {}
        status = data.get("status") or {}
        return cls(
            metadata=data.get("metadata") or {},
            endpoints=[Endpoint.from_dict(e) for e in spec.get("endpoints") or []],
            observed_generation=int(status.get("observedGeneration") or 0),
        )


class DNSEndpointList:
    """A list of DNSEndpoint resources."""

    def __init__(self, items: Optional[List[DNSEndpoint]] = None):
        self.items = list(items or [])

    def endpoints(self) -> List[Endpoint]:
        """All endpoints of all items, in order."""
        return [e for item in self.items for e in item.endpoints]

    def to_dict(self) -> Dict:
        return {
            "apiVersion": API_VERSION,
            "kind": LIST_KIND,
            "items": [item.to_dict() for item in self.items],
        }

    @classmethod
    def from_dict(cls, data: Dict) -> "DNSEndpointList":
        return cls([DNSEndpoint.from_dict(item) for item in data.get("items") or []])
