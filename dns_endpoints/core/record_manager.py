"""
Record Manager - Conflict resolution and change analysis for endpoints

This module picks the canonical endpoint when several sources describe the
same DNS entry, and compares current and desired endpoints so that only
real differences turn into updates.
"""

import logging
from typing import Dict, Iterable, List

from .endpoint import Endpoint, EndpointKey

logger = logging.getLogger(__name__)


class RecordManager:
    """Resolves endpoint conflicts and analyzes changes between endpoint sets."""

    def group_by_key(self, endpoints: Iterable[Endpoint]) -> Dict[EndpointKey, List[Endpoint]]:
        """Group endpoints by key, keeping first-seen key order and candidate order."""
        groups: Dict[EndpointKey, List[Endpoint]] = {}
        for endpoint in endpoints:
            groups.setdefault(endpoint.key(), []).append(endpoint)
        return groups

    def resolve_conflict(self, candidates: List[Endpoint]) -> Endpoint:
        """
        Pick the canonical endpoint among candidates sharing a key.

        The candidate whose targets are 'less' wins; on a tie the earliest
        candidate is kept so the result does not depend on later sources.

        Raises:
            ValueError: If there are no candidates
        """
        if not candidates:
            raise ValueError("Cannot resolve a conflict without candidates")

        chosen = candidates[0]
        for candidate in candidates[1:]:
            if candidate.targets.is_less(chosen.targets):
                chosen = candidate

        if len(candidates) > 1:
            logger.info(
                f"Resolved {len(candidates)} conflicting endpoints for {chosen.key()} "
                f"to {chosen}"
            )
        return chosen

    def resolve(self, endpoints: Iterable[Endpoint]) -> List[Endpoint]:
        """Collapse every group of same-key endpoints to its canonical endpoint."""
        return [
            self.resolve_conflict(candidates)
            for candidates in self.group_by_key(endpoints).values()
        ]

    def analyze_changes(
        self, current_endpoints: Iterable[Endpoint], desired_endpoints: Iterable[Endpoint]
    ) -> Dict:
        """
        Analyze changes between current and desired endpoints.

        Args:
            current_endpoints: Endpoints as they exist today
            desired_endpoints: Endpoints as they should be

        Returns:
            Dictionary containing categorized changes
        """
        logger.info("Analyzing endpoint changes...")

        current = {e.key(): e for e in self.resolve(current_endpoints)}
        desired = self.resolve(desired_endpoints)
        desired_keys = {e.key() for e in desired}

        creates = []
        updates = []
        deletes = []
        no_changes = []

        for endpoint in desired:
            existing = current.get(endpoint.key())
            if existing is None:
                creates.append(endpoint)
                logger.info(f"Create needed: {endpoint}")
            elif self._is_unchanged(existing, endpoint):
                no_changes.append(endpoint)
                logger.info(f"No change needed: {endpoint}")
            else:
                updates.append(endpoint)
                logger.info(f"Update needed: {existing} -> {endpoint}")

        for key, existing in current.items():
            if key not in desired_keys:
                deletes.append(existing)
                logger.info(f"Delete needed: {existing}")

        total_changes = len(creates) + len(updates) + len(deletes)

        changes = {
            "creates": creates,
            "updates": updates,
            "deletes": deletes,
            "no_changes": no_changes,
            "total_changes": total_changes,
        }

        logger.info(
            f"Change analysis complete: {len(creates)} creates, {len(updates)} updates, "
            f"{len(deletes)} deletes, {len(no_changes)} no changes"
        )

        return changes

    def _is_unchanged(self, current: Endpoint, desired: Endpoint) -> bool:
        """Same targets and, when the desired TTL is configured, the same TTL."""
        if not current.targets.same(desired.targets):
            return False
        if desired.record_ttl.is_configured() and desired.record_ttl != current.record_ttl:
            return False
        return True
