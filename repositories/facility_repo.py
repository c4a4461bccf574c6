"""
repositories/facility_repo.py
------------------------------
Read access to the `facilities` table.
"""

from typing import Optional

from db.gateway import StoreGateway
from models.facility import Facility

# Filter key -> column. Only these may appear in a WHERE clause.
_FILTER_COLUMNS = {
    "sport_id": "sport_id",
}


class FacilityRepository:
    """Repository for querying facilities."""

    def __init__(self, gateway: Optional[StoreGateway] = None):
        self.gateway = gateway or StoreGateway()

    def find_all(self, filters: Optional[dict] = None) -> list[Facility]:
        """
        Fetch facilities ordered by name.

        Args:
            filters: Optional equality filters, e.g. {"sport_id": 3}.

        Raises:
            ValueError: If a filter key is not supported.
        """
        sql = "SELECT id, name, sport_id FROM facilities"
        params: list = []
        clauses = []
        for key, value in (filters or {}).items():
            if key not in _FILTER_COLUMNS:
                raise ValueError(f"Unsupported facility filter: {key!r}")
            clauses.append(f"{_FILTER_COLUMNS[key]} = %s")
            params.append(value)
        if clauses:
            sql += " WHERE " + " AND ".join(clauses)
        sql += " ORDER BY name;"

        return [self._row_to_facility(r) for r in self.gateway.fetch_all(sql, params)]

    @staticmethod
    def _row_to_facility(row: dict) -> Facility:
        """Convert a database row to a Facility domain object."""
        return Facility(id=row["id"], name=row["name"], sport_id=row["sport_id"])
