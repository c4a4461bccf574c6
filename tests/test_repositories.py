"""
Unit tests for SportRepository and FacilityRepository against a mocked gateway.
"""

from unittest.mock import MagicMock

import pytest

from models.facility import Facility
from models.sport import Sport
from repositories.facility_repo import FacilityRepository
from repositories.sport_repo import SportRepository


@pytest.fixture
def gateway():
    return MagicMock()


class TestSportRepository:
    """Test cases for SportRepository."""

    def test_insert(self, gateway):
        gateway.insert_returning_id.return_value = 8
        sport_id = SportRepository(gateway).insert(Sport(name="Golf"))
        assert sport_id == 8
        sql, params = gateway.insert_returning_id.call_args.args
        assert sql.startswith("INSERT INTO sports")
        assert "RETURNING id" in sql
        assert params == ("Golf",)

    def test_update(self, gateway):
        gateway.execute.return_value = 1
        assert SportRepository(gateway).update(Sport(name="Golf", id=3)) is True
        sql, params = gateway.execute.call_args.args
        assert "UPDATE sports" in sql
        assert params == ("Golf", 3)

    def test_update_missing_row(self, gateway):
        gateway.execute.return_value = 0
        assert SportRepository(gateway).update(Sport(name="Golf", id=3)) is False

    def test_get_by_id(self, gateway):
        gateway.fetch_one.return_value = {"id": 3, "name": "Golf"}
        sport = SportRepository(gateway).get_by_id(3)
        assert sport == Sport(name="Golf", id=3)
        assert not sport.needs_validation
        assert gateway.fetch_one.call_args.args[1] == (3,)

    def test_get_by_id_missing(self, gateway):
        gateway.fetch_one.return_value = None
        assert SportRepository(gateway).get_by_id(3) is None

    def test_get_all_keeps_query_order(self, gateway):
        gateway.fetch_all.return_value = [
            {"id": 3, "name": "Curling"},
            {"id": 2, "name": "Fotball"},
            {"id": 1, "name": "Håndball"},
        ]
        sports = SportRepository(gateway).get_all()
        assert [s.name for s in sports] == ["Curling", "Fotball", "Håndball"]
        assert "ORDER BY name" in gateway.fetch_all.call_args.args[0]

    def test_delete_calls_procedure(self, gateway):
        SportRepository(gateway).delete(5)
        gateway.execute.assert_called_once_with("CALL delete_sport(%s);", (5,))


class TestFacilityRepository:
    """Test cases for FacilityRepository."""

    def test_find_all_unfiltered(self, gateway):
        gateway.fetch_all.return_value = [{"id": 1, "name": "Ishallen", "sport_id": None}]
        facilities = FacilityRepository(gateway).find_all()
        assert facilities == [Facility(id=1, name="Ishallen", sport_id=None)]
        gateway.fetch_all.assert_called_once_with(
            "SELECT id, name, sport_id FROM facilities ORDER BY name;", []
        )

    def test_find_all_by_sport(self, gateway):
        gateway.fetch_all.return_value = []
        FacilityRepository(gateway).find_all({"sport_id": 4})
        gateway.fetch_all.assert_called_once_with(
            "SELECT id, name, sport_id FROM facilities WHERE sport_id = %s ORDER BY name;", [4]
        )

    def test_unknown_filter_rejected(self, gateway):
        with pytest.raises(ValueError):
            FacilityRepository(gateway).find_all({"name; DROP TABLE sports": 1})
        gateway.fetch_all.assert_not_called()
