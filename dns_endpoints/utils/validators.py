"""
Validators - Input validation for DNS endpoints

This module provides the name, target and record type checks used when
endpoints are constructed and compared.
"""

import ipaddress
import logging
from typing import Optional, Union

import dns.rdatatype

logger = logging.getLogger(__name__)

MAX_LABEL_LENGTH = 63

IPAddress = Union[ipaddress.IPv4Address, ipaddress.IPv6Address]


def trim_trailing_dot(value: str) -> str:
    """
    Remove exactly one trailing dot.

    Args:
        value: A DNS name or target

    Returns:
        The value without its final "." (if it had one)
    """
    if value.endswith("."):
        return value[:-1]
    return value


def find_long_label(dns_name: str) -> Optional[str]:
    """
    Find the first dot-separated label longer than 63 characters.

    Args:
        dns_name: The DNS name to check

    Returns:
        The offending label, or None if every label fits
    """
    for label in dns_name.split("."):
        if len(label) > MAX_LABEL_LENGTH:
            return label
    return None


def parse_ip_address(value: str) -> IPAddress:
    """
    Parse an IPv4 or IPv6 literal.

    Raises:
        ValueError: If the value is not an IP address
    """
    return ipaddress.ip_address(value)


def is_registered_record_type(record_type: str) -> bool:
    """
    Check whether a record type is registered with IANA.

    Record types are an open set: providers may define their own tags,
    so this is informational and never used to reject an endpoint.
    """
    if not record_type or not isinstance(record_type, str):
        return False

    try:
        dns.rdatatype.from_text(record_type)
    except (dns.rdatatype.UnknownRdatatype, ValueError):
        return False

    # from_text accepts the generic TYPEnnn syntax for any number
    return not record_type.upper().startswith("TYPE")
