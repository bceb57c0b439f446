"""Tests for reading road files."""

import logging

import pytest

from town_graph.adapters.graph import TextRoadRepository, parse_line
from town_graph.config import GraphConfig
from town_graph.domain.errors import GraphLoadError
from town_graph.domain.models import RoadRecord


@pytest.fixture
def repository(tmp_path):
    return TextRoadRepository(GraphConfig(data_dir=tmp_path, roads_file="roads.txt"))


def test_parse_line_well_formed():
    record = parse_line(" Main Street , 12 ; Alpha ; Bravo \n", 3)

    assert record == RoadRecord("Main Street", 12, "Alpha", "Bravo")
    assert record.line_number == 3


@pytest.mark.parametrize(
    "line",
    [
        "Main,12;Alpha",
        "Main,12;Alpha;Bravo;Charlie",
        "Main;Alpha;Bravo",
        "Main,12,3;Alpha;Bravo",
        "Main,twelve;Alpha;Bravo",
        "Main,-4;Alpha;Bravo",
        ",12;Alpha;Bravo",
        "Main,12; ;Bravo",
        "Main,1_000;Alpha;Bravo",
        "Main,12;Alpha;Bravo; ",
    ],
)
def test_parse_line_rejects_malformed(line):
    assert parse_line(line) is None


def test_parse_line_accepts_self_loop():
    assert parse_line("Loop,2;Alpha;Alpha") == RoadRecord("Loop", 2, "Alpha", "Alpha")


@pytest.mark.parametrize("line", ["Main,12;Alpha;Bravo;", "Main,12;Alpha;Bravo;;\n"])
def test_parse_line_ignores_trailing_empty_fields(line):
    assert parse_line(line) == RoadRecord("Main", 12, "Alpha", "Bravo")


def test_load_records_skips_bad_lines(tmp_path, repository, caplog):
    road_file = tmp_path / "roads.txt"
    road_file.write_text(
        "\n".join(
            [
                "I-95,12;Alpha;Bravo",
                "garbage line",
                "",
                "Route 1,x;Bravo;Charlie",
                "Route 2,4;Bravo;Charlie",
            ]
        ),
        encoding="utf-8",
    )

    with caplog.at_level(logging.DEBUG, logger="town_graph.adapters.graph.text_repository"):
        records = repository.load_records(road_file)

    assert [r.road_name for r in records] == ["I-95", "Route 2"]
    assert [r.line_number for r in records] == [1, 5]
    assert sum("Skipping malformed" in m for m in caplog.messages) == 2


def test_defaults_to_configured_file(tmp_path, repository):
    (tmp_path / "roads.txt").write_text("Main,1;A;B\n", encoding="utf-8")

    assert repository.load_records() == [RoadRecord("Main", 1, "A", "B")]


def test_missing_file_raises_graph_load_error(tmp_path, repository):
    missing = tmp_path / "nope.txt"

    with pytest.raises(GraphLoadError) as exc_info:
        repository.load_records(missing)

    assert exc_info.value.file_path == str(missing)
    assert isinstance(exc_info.value.cause, OSError)


def test_iter_records_is_lazy(tmp_path, repository):
    road_file = tmp_path / "roads.txt"
    road_file.write_text("A1,1;A;B\nA2,2;B;C\n", encoding="utf-8")

    records = repository.iter_records(road_file)
    assert next(records).road_name == "A1"
    assert next(records).road_name == "A2"
    with pytest.raises(StopIteration):
        next(records)
