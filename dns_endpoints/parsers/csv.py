import csv
import logging
from typing import List

from ..core.endpoint import Endpoint, new_endpoint_with_ttl
from ..core.labels import OWNER_LABEL_KEY

logger = logging.getLogger(__name__)

REQUIRED_COLUMNS = ("DNSName", "RecordType", "Targets")


class CSVParser:
    def __init__(self, csv_path: str):
        self.csv_path = csv_path

    def parse(self) -> List[Endpoint]:
        """Parse CSV file into endpoints. Targets are separated by ';'."""
        endpoints = []

        try:
            with open(self.csv_path, "r", newline="") as f:
                reader = csv.DictReader(f)

                missing = [c for c in REQUIRED_COLUMNS if c not in (reader.fieldnames or [])]
                if missing:
                    raise ValueError(
                        f"CSV must contain {', '.join(REQUIRED_COLUMNS)} columns, "
                        f"missing: {', '.join(missing)}"
                    )

                for row_num, row in enumerate(reader, start=2):
                    endpoint = self._parse_row(row, row_num)
                    if endpoint is not None:
                        endpoints.append(endpoint)

            logger.info(f"Successfully parsed {len(endpoints)} endpoints from CSV")

        except FileNotFoundError:
            raise FileNotFoundError(f"CSV file not found: {self.csv_path}")

        return endpoints

    def _parse_row(self, row, row_num: int):
        dns_name = (row.get("DNSName") or "").strip()
        record_type = (row.get("RecordType") or "").strip()
        targets = [t.strip() for t in (row.get("Targets") or "").split(";") if t.strip()]

        if not dns_name or not record_type:
            logger.warning(f"Missing DNSName or RecordType at row {row_num}, skipping")
            return None

        ttl_text = (row.get("TTL") or "").strip()
        try:
            ttl = int(ttl_text) if ttl_text else 0
        except ValueError:
            logger.warning(f"Invalid TTL '{ttl_text}' at row {row_num}, skipping")
            return None

        endpoint = new_endpoint_with_ttl(dns_name, record_type, ttl, *targets)
        if endpoint is None:
            logger.warning(f"Invalid DNSName '{dns_name}' at row {row_num}, skipping")
            return None

        set_identifier = (row.get("SetIdentifier") or "").strip()
        if set_identifier:
            endpoint.with_set_identifier(set_identifier)

        owner = (row.get("Owner") or "").strip()
        if owner:
            endpoint.labels[OWNER_LABEL_KEY] = owner

        return endpoint
