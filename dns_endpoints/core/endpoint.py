"""
Endpoint - High-level model of a DNS record

An endpoint ties a DNS name and record type to the targets it resolves to,
together with its TTL, set identifier, labels and provider specific
properties. Endpoints sharing a (name, type, set identifier) key describe
the same logical DNS entry.
"""

import logging
from dataclasses import dataclass
from typing import Dict, Optional

from .labels import OWNER_LABEL_KEY, Labels, new_labels
from .provider_specific import ProviderSpecific, ProviderSpecificProperty
from .targets import Targets
from ..utils.validators import (
    find_long_label,
    is_registered_record_type,
    trim_trailing_dot,
)

logger = logging.getLogger(__name__)

RECORD_TYPE_A = "A"
RECORD_TYPE_AAAA = "AAAA"
RECORD_TYPE_CNAME = "CNAME"
RECORD_TYPE_TXT = "TXT"
RECORD_TYPE_SRV = "SRV"
RECORD_TYPE_NS = "NS"
RECORD_TYPE_PTR = "PTR"
RECORD_TYPE_MX = "MX"
RECORD_TYPE_NAPTR = "NAPTR"

# Well-known types; providers are free to use others
KNOWN_RECORD_TYPES = (
    RECORD_TYPE_A,
    RECORD_TYPE_AAAA,
    RECORD_TYPE_CNAME,
    RECORD_TYPE_TXT,
    RECORD_TYPE_SRV,
    RECORD_TYPE_NS,
    RECORD_TYPE_PTR,
    RECORD_TYPE_MX,
    RECORD_TYPE_NAPTR,
)


class TTL(int):
    """TTL of a DNS record in seconds. Zero or less means not configured."""

    def is_configured(self) -> bool:
        return self > 0


@dataclass(frozen=True)
class EndpointKey:
    """Identity of an endpoint, used to group endpoints describing the same entry."""

    dns_name: str
    record_type: str
    set_identifier: str = ""


class Endpoint:
    """A DNS record: name, type, targets, TTL and metadata."""

    def __init__(
        self,
        dns_name: str = "",
        targets=None,
        record_type: str = "",
        set_identifier: str = "",
        record_ttl: int = 0,
        labels: Optional[Labels] = None,
        provider_specific=None,
    ):
        self.dns_name = dns_name
        self.targets = Targets(targets or [])
        self.record_type = record_type
        self.set_identifier = set_identifier
        self.record_ttl = TTL(record_ttl)
        self.labels = labels if labels is not None else new_labels()
        self.provider_specific = ProviderSpecific(provider_specific or [])

    def with_set_identifier(self, set_identifier: str) -> "Endpoint":
        """Apply the given set identifier and return the endpoint."""
        self.set_identifier = set_identifier
        return self

    def with_provider_specific(self, name: str, value: str) -> "Endpoint":
        """
        Attach a provider specific property and return the endpoint.

        Unlike labels these properties are not persisted by the registry;
        they only live for the duration of a single synchronization.
        """
        self.set_provider_specific_property(name, value)
        return self

    def get_provider_specific_property(self, name: str):
        """Return ``(value, found)`` for a provider specific property."""
        return self.provider_specific.get(name)

    def set_provider_specific_property(self, name: str, value: str) -> None:
        self.provider_specific.set(name, value)

    def delete_provider_specific_property(self, name: str) -> None:
        self.provider_specific.delete(name)

    def key(self) -> EndpointKey:
        return EndpointKey(
            dns_name=self.dns_name,
            record_type=self.record_type,
            set_identifier=self.set_identifier,
        )

    def is_owned_by(self, owner_id: str) -> bool:
        """Return True if the owner label is present and equals ``owner_id``."""
        owner = self.labels.get(OWNER_LABEL_KEY)
        return owner is not None and owner == owner_id

    def to_dict(self) -> Dict:
        """Serialize to the camelCase mapping used by DNSEndpoint manifests."""
        data = {}
        if self.dns_name:
            data["dnsName"] = self.dns_name
        if self.targets:
            data["targets"] = list(self.targets)
        if self.record_type:
            data["recordType"] = self.record_type
        if self.set_identifier:
            data["setIdentifier"] = self.set_identifier
        if self.record_ttl.is_configured():
            data["recordTTL"] = int(self.record_ttl)
        if self.labels:
            data["labels"] = dict(self.labels)
        if self.provider_specific:
            data["providerSpecific"] = [p.to_dict() for p in self.provider_specific]
        return data

    @classmethod
    def from_dict(cls, data: Dict) -> "Endpoint":
        """Build an endpoint from its serialized mapping, keeping fields verbatim."""
        return cls(
            dns_name=data.get("dnsName", ""),
            targets=data.get("targets") or [],
            record_type=data.get("recordType", ""),
            set_identifier=data.get("setIdentifier", ""),
            record_ttl=int(data.get("recordTTL") or 0),
            labels=dict(data.get("labels") or {}),
            provider_specific=[
                ProviderSpecificProperty.from_dict(p)
                for p in data.get("providerSpecific") or []
            ],
        )

    def __eq__(self, other) -> bool:
        if not isinstance(other, Endpoint):
            return NotImplemented
        return self.to_dict() == other.to_dict()

    # Identity hash; equality compares the serialized fields
    __hash__ = object.__hash__

    def __repr__(self) -> str:
        return f"Endpoint({self})"

    def __str__(self) -> str:
        return (
            f"{self.dns_name} {self.record_ttl} IN {self.record_type} "
            f"{self.set_identifier} {self.targets} {self.provider_specific}"
        )


def new_endpoint(dns_name: str, record_type: str, *targets: str) -> Optional[Endpoint]:
    """Create an endpoint without a configured TTL. See new_endpoint_with_ttl."""
    return new_endpoint_with_ttl(dns_name, record_type, TTL(0), *targets)


def new_endpoint_with_ttl(
    dns_name: str, record_type: str, ttl: int, *targets: str
) -> Optional[Endpoint]:
    """
    Create an endpoint with a TTL.

    One trailing dot is stripped from the name and from every target.

    Args:
        dns_name: Hostname of the record
        record_type: Record type, e.g. "A" or "CNAME"
        ttl: TTL in seconds, 0 for unconfigured
        targets: Values the record points to

    Returns:
        The new endpoint, or None if a label of the name exceeds 63 characters
    """
    long_label = find_long_label(dns_name)
    if long_label is not None:
        logger.error(
            f"label {long_label} in {dns_name} is longer than 63 characters. "
            f"Cannot create endpoint"
        )
        return None

    if not is_registered_record_type(record_type):
        logger.debug(f"Record type {record_type} of {dns_name} is provider specific")

    return Endpoint(
        dns_name=trim_trailing_dot(dns_name),
        targets=[trim_trailing_dot(target) for target in targets],
        record_type=record_type,
        record_ttl=ttl,
        labels=new_labels(),
    )
