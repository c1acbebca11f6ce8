"""
Utility functions and helpers.

This package contains validation helpers shared by the endpoint model
and the parsers.
"""

from .validators import (
    find_long_label,
    is_registered_record_type,
    parse_ip_address,
    trim_trailing_dot,
)

__all__ = [
    "find_long_label",
    "is_registered_record_type",
    "parse_ip_address",
    "trim_trailing_dot",
]
