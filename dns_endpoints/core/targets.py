"""
Targets - The values a DNS endpoint points to

This module holds the target list type together with the equality and
ordering rules used to compare two candidate record sets. Comparisons
always work on sorted copies, so the caller's ordering is never changed.
"""

import logging
from typing import Optional

from ..utils.validators import IPAddress, parse_ip_address

logger = logging.getLogger(__name__)


class Targets(list):
    """List of target strings (IP addresses or hostnames)."""

    def __str__(self) -> str:
        return ";".join(self)

    def same(self, other) -> bool:
        """Return True if both lists hold the same targets, ignoring order and case."""
        if len(self) != len(other):
            return False

        for ours, theirs in zip(
            sorted(self, key=str.lower), sorted(other, key=str.lower)
        ):
            if ours.lower() != theirs.lower():
                return False
        return True

    def is_less(self, other, log: Optional[logging.Logger] = None) -> bool:
        """
        Decide whether this target list sorts before another one.

        A shorter list is always less. For lists of equal length the sorted
        targets are compared pairwise and the first differing pair decides:
        IP addresses sort before hostnames (so ``1.2.3.4`` beats
        ``1-2-3-4.example.com``), two IP addresses compare by address, and
        two hostnames compare as strings.

        Args:
            other: The target list to compare against
            log: Diagnostic logger for unparsable targets (module logger by default)

        Returns:
            True if this list is 'less' than ``other``
        """
        if len(self) < len(other):
            return True
        if len(self) > len(other):
            return False

        log = log or logger
        ours_sorted = sorted(self)
        theirs_sorted = sorted(other)

        for ours, theirs in zip(ours_sorted, theirs_sorted):
            if ours == theirs:
                continue

            ip_ours = _parse_target(ours, ours_sorted, theirs_sorted, log)
            ip_theirs = _parse_target(theirs, ours_sorted, theirs_sorted, log)

            if ip_ours is not None and ip_theirs is not None:
                return _address_key(ip_ours) < _address_key(ip_theirs)
            if ip_ours is not None:
                return True
            if ip_theirs is not None:
                return False
            return ours < theirs

        return False


def new_targets(*targets: str) -> Targets:
    """Create a Targets list from the given values, copied verbatim."""
    return Targets(targets)


def _parse_target(
    target: str, targets, comparison_targets, log: logging.Logger
) -> Optional[IPAddress]:
    """Parse a target as an IP address, logging and returning None on failure."""
    try:
        return parse_ip_address(target)
    except ValueError as e:
        log.debug(
            f"Couldn't parse {target} as an IP address: {e} "
            f"(targets={targets}, comparison_targets={comparison_targets})"
        )
        return None


def _address_key(address: IPAddress):
    """Ordering key: IPv4 before IPv6, then by numeric value and scope."""
    scope = getattr(address, "scope_id", None) or ""
    return (address.version, int(address), scope)
