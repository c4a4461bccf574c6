"""
repositories/sport_repo.py
---------------------------
Data access layer for sports.
All SQL queries related to the `sports` table live here.
"""

from typing import Optional

from db.gateway import StoreGateway
from models.sport import Sport
from utils.logger import get_logger

logger = get_logger(__name__)


class SportRepository:
    """Repository for CRUD operations on the sports table."""

    def __init__(self, gateway: Optional[StoreGateway] = None):
        self.gateway = gateway or StoreGateway()

    # ── CREATE ────────────────────────────────────────────

    def insert(self, sport: Sport) -> int:
        """
        Insert a new sport.

        Returns:
            The id assigned by the database.

        Raises:
            UniqueViolationError: If the name is already taken.
        """
        sql = "INSERT INTO sports (name) VALUES (%s) RETURNING id;"
        sport_id = self.gateway.insert_returning_id(sql, (sport.name,))
        logger.info(f"Added sport '{sport.name}' #{sport_id}")
        return sport_id

    # ── READ ──────────────────────────────────────────────

    def get_by_id(self, sport_id: int) -> Optional[Sport]:
        """Fetch a single sport by ID, or None if it does not exist."""
        sql = "SELECT id, name FROM sports WHERE id = %s;"
        row = self.gateway.fetch_one(sql, (sport_id,))
        return Sport.from_storage_record(row) if row else None

    def get_all(self) -> list[Sport]:
        """Fetch every sport ordered by name (database collation)."""
        sql = "SELECT id, name FROM sports ORDER BY name;"
        return [Sport.from_storage_record(r) for r in self.gateway.fetch_all(sql)]

    # ── UPDATE ────────────────────────────────────────────

    def update(self, sport: Sport) -> bool:
        """
        Update an existing sport (must have id set).

        Returns:
            True if a row was updated, False otherwise.
        """
        sql = """
            UPDATE sports
            SET name = %s
            WHERE id = %s;
        """
        updated = self.gateway.execute(sql, (sport.name, sport.id)) > 0
        if not updated:
            logger.warning(f"Update of sport #{sport.id} matched no row")
        return updated

    # ── DELETE ────────────────────────────────────────────

    def delete(self, sport_id: int) -> None:
        """Delete a sport through the delete_sport procedure, which also detaches its facilities."""
        self.gateway.execute("CALL delete_sport(%s);", (sport_id,))
        logger.info(f"Deleted sport #{sport_id}")
