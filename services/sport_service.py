"""
services/sport_service.py
--------------------------
Business logic for sports: saving, deleting and cache-aside lookups.
Orchestrates between the SportRepository, the Cache and the
FacilityRepository.

Known race: delete_by_id() clears the cache before the delete procedure
runs. A find_by_id() for the same id that misses in between can put the
doomed row back in the cache, where it stays until the next write for
that id. Closing this needs a per-key lock or a generation counter.
"""

import copy
from typing import Optional

from models.facility import Facility
from models.sport import Sport
from repositories.facility_repo import FacilityRepository
from repositories.sport_repo import SportRepository
from utils.cache import MISS, Cache
from utils.errors import UniqueViolationError, ValidationError
from utils.logger import get_logger

logger = get_logger(__name__)

CACHE_KIND = "sport"
ALREADY_REGISTERED = "Sport is already registered."


class SportService:
    """
    Handles the lifecycle of Sport entities.

    Workflow for save():
        1. Validate the sport unless its name is already trusted.
        2. Insert it (no id yet) or update it by id.
        3. Turn a duplicate-name error into a ValidationError on "name".
        4. Refresh the cache entry for the id.
    """

    def __init__(
        self,
        repo: Optional[SportRepository] = None,
        cache: Optional[Cache] = None,
        facilities: Optional[FacilityRepository] = None,
    ):
        self.repo = repo or SportRepository()
        self.cache = cache if cache is not None else Cache()
        self.facilities = facilities or FacilityRepository()

    # ── WRITE ─────────────────────────────────────────────

    def save(self, sport: Sport) -> Sport:
        """
        Persist a sport, inserting or updating depending on whether it has an id.

        Returns:
            The same Sport, with `id` set after an insert.

        Raises:
            ValidationError: If the name is invalid or already registered.
            StoreError: For any other database failure.
            ValueError: If the sport has been deleted.
        """
        if sport.is_deleted:
            raise ValueError(f"Sport #{sport.id} has been deleted and cannot be saved")

        if sport.needs_validation:
            sport.validate()

        try:
            if sport.is_persisted:
                stored = self.repo.update(sport)
            else:
                sport.id = self.repo.insert(sport)
                stored = True
        except UniqueViolationError as e:
            logger.info(f"Rejected duplicate sport name '{sport.name}'")
            raise ValidationError({"name": ALREADY_REGISTERED}) from e

        if stored:
            self.cache.set(CACHE_KIND, sport.id, copy.copy(sport))
        else:
            # the row is gone; let the next read ask the database
            self.cache.invalidate(CACHE_KIND, sport.id)
        return sport

    def delete_by_id(self, sport_id: int) -> None:
        """Evict the cached sport, then delete it in the database."""
        self.cache.invalidate(CACHE_KIND, sport_id)
        self.repo.delete(sport_id)

    def delete(self, sport: Sport) -> None:
        """Delete this sport. The instance must not be reused afterwards."""
        if not sport.is_persisted:
            raise ValueError("Cannot delete a sport that was never saved")
        self.delete_by_id(sport.id)
        sport.mark_deleted()

    # ── READ ──────────────────────────────────────────────

    def find_by_id(self, sport_id: int) -> Optional[Sport]:
        """
        Look up a sport, going to the database only on a cache miss.
        A cached None ("no such sport") counts as a hit.

        Callers always get their own copy, so editing the result never
        changes what the cache holds.
        """
        cached = self.cache.get(CACHE_KIND, sport_id)
        if cached is not MISS:
            return copy.copy(cached)

        sport = self.repo.get_by_id(sport_id)
        self.cache.set(CACHE_KIND, sport_id, copy.copy(sport))
        return sport

    def find_all(self) -> list[Sport]:
        """List every sport ordered by name, caching a copy of each one by id."""
        sports = self.repo.get_all()
        for sport in sports:
            self.cache.set(CACHE_KIND, sport.id, copy.copy(sport))
        return sports

    def related_facilities(self, sport: Sport) -> list[Facility]:
        """Facilities dedicated to this sport."""
        return self.facilities.find_all({"sport_id": sport.id})
