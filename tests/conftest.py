"""
Shared fixtures: in-memory stand-ins for the repositories, with call
counters so tests can tell whether the database would have been hit.
"""

from collections import Counter
from unittest.mock import MagicMock

import pytest

from models.facility import Facility
from models.sport import Sport
from services.sport_service import SportService
from utils.cache import Cache
from utils.errors import UniqueViolationError


class FakeSportRepository:
    """Behaves like SportRepository over a dict instead of PostgreSQL."""

    def __init__(self):
        self.rows: dict[int, str] = {}
        self.calls = Counter()
        self.log: list[str] = []
        self._next_id = 1

    def _check_unique(self, name, own_id=None):
        for sport_id, existing in self.rows.items():
            if existing == name and sport_id != own_id:
                raise UniqueViolationError(
                    'duplicate key value violates unique constraint "sports_name_key"'
                )

    def insert(self, sport):
        self.calls["insert"] += 1
        self.log.append("insert")
        self._check_unique(sport.name)
        sport_id = self._next_id
        self._next_id += 1
        self.rows[sport_id] = sport.name
        return sport_id

    def update(self, sport):
        self.calls["update"] += 1
        self.log.append("update")
        self._check_unique(sport.name, own_id=sport.id)
        if sport.id not in self.rows:
            return False
        self.rows[sport.id] = sport.name
        return True

    def get_by_id(self, sport_id):
        self.calls["get_by_id"] += 1
        self.log.append("get_by_id")
        if sport_id not in self.rows:
            return None
        return Sport.from_storage_record({"id": sport_id, "name": self.rows[sport_id]})

    def get_all(self):
        self.calls["get_all"] += 1
        self.log.append("get_all")
        return [
            Sport.from_storage_record({"id": i, "name": n})
            for i, n in sorted(self.rows.items(), key=lambda item: item[1])
        ]

    def delete(self, sport_id):
        self.calls["delete"] += 1
        self.log.append("delete")
        self.rows.pop(sport_id, None)


@pytest.fixture
def sport_repo():
    return FakeSportRepository()


@pytest.fixture
def cache():
    return Cache()


@pytest.fixture
def facility_repo():
    repo = MagicMock()
    repo.find_all.return_value = [Facility(id=1, name="Ishallen", sport_id=1)]
    return repo


@pytest.fixture
def service(sport_repo, cache, facility_repo):
    return SportService(repo=sport_repo, cache=cache, facilities=facility_repo)
