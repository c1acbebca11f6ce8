"""
Endpoint Manager - Collects, filters and reports DNS endpoints

Gathers endpoints from the configured sources, keeps those owned by the
configured owner id and optionally compares them with a desired state.
"""

import logging
from typing import Dict, List, Optional

from rich.console import Console
from rich.table import Table

from .dns_endpoint import DNSEndpoint
from .endpoint import Endpoint
from .filters import filter_endpoints_by_owner_id
from .record_manager import RecordManager
from ..parsers.manifest import dump_manifest
from ..sources.source_client import SourceClient

console = Console()
logger = logging.getLogger(__name__)


class EndpointManager:
    """Main endpoint management class that orchestrates the entire process."""

    def __init__(self, config: Dict):
        """Initialize the endpoint manager with configuration."""
        self.config = config
        self.owner_id = config.get("owner_id", "default")
        self.source_client = SourceClient(config)
        self.record_manager = RecordManager()

    def owned_endpoints(self, owner_id: Optional[str] = None) -> List[Endpoint]:
        """Collect endpoints from all sources and keep the ones owned by ``owner_id``."""
        owner_id = owner_id if owner_id is not None else self.owner_id
        endpoints = self.source_client.endpoints()
        owned = filter_endpoints_by_owner_id(owner_id, endpoints)
        logger.info(
            f"{len(owned)} of {len(endpoints)} endpoints are owned by '{owner_id}'"
        )
        return owned

    def process(
        self,
        owner_id: Optional[str] = None,
        desired: Optional[List[Endpoint]] = None,
        output_file: Optional[str] = None,
    ) -> bool:
        """List owned endpoints, optionally diff them against ``desired`` and save them."""
        owner_id = owner_id if owner_id is not None else self.owner_id
        try:
            owned = self.owned_endpoints(owner_id)
            console.print(
                f"[green]Found {len(owned)} endpoints owned by '{owner_id}'[/green]"
            )
            self._display_endpoints(owned, owner_id)

            if desired is not None:
                changes = self.record_manager.analyze_changes(owned, desired)
                self._display_changes_summary(changes)

            if output_file:
                self._save_endpoints(owned, owner_id, output_file)
                console.print(f"[green]Owned endpoints saved to: {output_file}[/green]")

            return True

        except Exception as e:
            logger.error(f"Error processing endpoints: {e}")
            console.print(f"[red]Error: {e}[/red]")
            return False

    def _display_endpoints(self, endpoints: List[Endpoint], owner_id: str):
        """Display the endpoints as a table."""
        table = Table(title=f"Endpoints owned by {owner_id}")
        table.add_column("DNS Name", style="cyan")
        table.add_column("Type", style="magenta")
        table.add_column("Set Identifier", style="white")
        table.add_column("TTL", style="white")
        table.add_column("Targets", style="green")

        for endpoint in endpoints:
            ttl = endpoint.record_ttl
            table.add_row(
                endpoint.dns_name,
                endpoint.record_type,
                endpoint.set_identifier,
                str(int(ttl)) if ttl.is_configured() else "-",
                str(endpoint.targets),
            )

        console.print(table)

    def _display_changes_summary(self, changes: Dict):
        """Display a summary of planned changes."""
        table = Table(title="Endpoint Changes Summary")
        table.add_column("Operation", style="cyan")
        table.add_column("Count", style="magenta")
        table.add_column("Details", style="white")

        for operation, label in (
            ("creates", "Create"),
            ("updates", "Update"),
            ("deletes", "Delete"),
            ("no_changes", "No Change"),
        ):
            if changes[operation]:
                table.add_row(
                    label,
                    str(len(changes[operation])),
                    ", ".join(e.dns_name for e in changes[operation]),
                )

        console.print(table)
        console.print(f"\n[bold]Total changes: {changes['total_changes']}[/bold]")

    def _save_endpoints(self, endpoints: List[Endpoint], owner_id: str, output_file: str):
        """Save the endpoints as a DNSEndpoint manifest."""
        resource = DNSEndpoint(name=f"{owner_id}-endpoints", endpoints=endpoints)
        dump_manifest([resource], output_file)
