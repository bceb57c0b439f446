"""Tests for the string-keyed TownGraphManager façade."""

from dataclasses import dataclass, field
from typing import Iterator, List

import pytest

from town_graph.adapters.graph import TextRoadRepository
from town_graph.config import GraphConfig
from town_graph.domain.errors import GraphLoadError, InvalidArgumentError
from town_graph.domain.models import RoadRecord, Town
from town_graph.services import TownGraphManager


@pytest.fixture
def manager():
    m = TownGraphManager()
    m.add_road("Alpha", "Bravo", 12, "Interstate 95")
    m.add_road("Bravo", "Charlie", 4, "Route 1")
    m.add_road("Alpha", "Charlie", 21, "Old Mill Road")
    m.add_town("Island")
    return m


class TestTowns:
    def test_add_town_twice(self, manager):
        assert manager.add_town("Delta") is True
        assert manager.add_town("Delta") is False

    def test_contains_and_get_town(self, manager):
        assert manager.contains_town("Alpha")
        assert not manager.contains_town("alpha")
        assert manager.get_town("Bravo") == Town("Bravo")
        assert manager.get_town("Nowhere") is None

    def test_all_towns_sorted(self, manager):
        assert manager.all_towns() == ["Alpha", "Bravo", "Charlie", "Island"]

    def test_delete_town_removes_its_roads(self, manager):
        assert manager.delete_town("Bravo") is True
        assert manager.all_roads() == ["Old Mill Road"]
        assert manager.delete_town("Bravo") is False

    def test_blank_name_rejected(self, manager):
        with pytest.raises(InvalidArgumentError):
            manager.add_town("   ")
        with pytest.raises(InvalidArgumentError):
            manager.contains_town(None)


class TestRoads:
    def test_add_road_creates_missing_towns(self):
        m = TownGraphManager()
        assert m.add_road("X", "Y", 3, "XY") is True
        assert m.all_towns() == ["X", "Y"]

    def test_add_road_self_loop(self):
        m = TownGraphManager()
        assert m.add_road("Solo", "Solo", 1, "Loop") is True
        assert m.all_towns() == ["Solo"]
        assert m.get_road("Solo", "Solo") == "Loop"
        assert m.get_path("Solo", "Solo") == []

    def test_get_road_either_direction(self, manager):
        assert manager.get_road("Alpha", "Bravo") == "Interstate 95"
        assert manager.get_road("Bravo", "Alpha") == "Interstate 95"
        assert manager.get_road("Alpha", "Island") is None

    def test_contains_road_connection(self, manager):
        assert manager.contains_road_connection("Charlie", "Bravo")
        assert not manager.contains_road_connection("Charlie", "Island")

    def test_all_roads_sorted(self, manager):
        assert manager.all_roads() == ["Interstate 95", "Old Mill Road", "Route 1"]

    def test_delete_road_connection(self, manager):
        assert manager.delete_road_connection("Bravo", "Charlie", "Route 1") is True
        assert not manager.contains_road_connection("Bravo", "Charlie")
        assert manager.contains_town("Bravo")

    def test_delete_road_connection_wrong_name(self, manager):
        assert manager.delete_road_connection("Bravo", "Charlie", "Route 9") is False
        assert manager.get_road("Bravo", "Charlie") == "Route 1"

    def test_delete_missing_road(self, manager):
        assert manager.delete_road_connection("Alpha", "Island", "Route 1") is False


class TestPaths:
    def test_get_path(self, manager):
        assert manager.get_path("Alpha", "Charlie") == [
            "Alpha via Interstate 95 to Bravo 12 mi",
            "Bravo via Route 1 to Charlie 4 mi",
        ]

    def test_get_path_unreachable(self, manager):
        assert manager.get_path("Alpha", "Island") == []

    def test_get_path_same_town(self, manager):
        assert manager.get_path("Alpha", "Alpha") == []


def test_populate_town_graph(tmp_path):
    road_file = tmp_path / "towns.txt"
    road_file.write_text(
        "Harbor Drive,7;Charlie;Delta\n"
        "not a road\n"
        "Ridge Pass,nine;Delta;Echo\n"
        "Route 1,4;Bravo;Charlie\n",
        encoding="utf-8",
    )
    m = TownGraphManager(
        road_repository=TextRoadRepository(GraphConfig(data_dir=tmp_path))
    )

    assert m.populate_town_graph(road_file) == 2
    assert m.all_towns() == ["Bravo", "Charlie", "Delta"]
    assert m.all_roads() == ["Harbor Drive", "Route 1"]
    assert m.get_path("Bravo", "Delta") == [
        "Bravo via Route 1 to Charlie 4 mi",
        "Charlie via Harbor Drive to Delta 7 mi",
    ]


def test_populate_uses_default_repository(tmp_path, monkeypatch):
    (tmp_path / "towns.txt").write_text("Main,1;A;B\n", encoding="utf-8")
    monkeypatch.setenv("TG_GRAPH_DATA_DIR", str(tmp_path))
    from town_graph.config import reset_config

    reset_config()
    try:
        m = TownGraphManager()
        assert m.populate_town_graph() == 1
        assert isinstance(m.road_repository, TextRoadRepository)
    finally:
        reset_config()


@dataclass
class FailingRepository:
    """Yields some records, then fails as if the file broke mid-read."""

    records: List[RoadRecord] = field(default_factory=list)

    def iter_records(self, path=None) -> Iterator[RoadRecord]:
        yield from self.records
        raise GraphLoadError("disk went away", file_path=str(path))

    def load_records(self, path=None) -> List[RoadRecord]:
        return list(self.iter_records(path))


def test_populate_is_not_transactional():
    repository = FailingRepository([RoadRecord("R1", 3, "A", "B")])
    m = TownGraphManager(road_repository=repository)

    with pytest.raises(GraphLoadError):
        m.populate_town_graph("broken.txt")

    assert m.all_roads() == ["R1"]
    assert m.all_towns() == ["A", "B"]
