import pytest

from sandfall.components import Position
from sandfall.errors import RockParseError
from sandfall.levels.parse import parse_polyline, parse_polylines, parse_vertex
from tests.test_utils import REFERENCE_SCAN


def test_parse_vertex() -> None:
    assert parse_vertex("498,4") == Position(498, 4)
    assert parse_vertex(" 12 , 0 ") == Position(12, 0)


@pytest.mark.parametrize("token", ["498", "1,2,3", "a,4", "4,", "-1,3"])
def test_parse_vertex_rejects(token: str) -> None:
    with pytest.raises(RockParseError):
        parse_vertex(token)


def test_parse_polyline() -> None:
    assert parse_polyline("503,4 -> 502,4 -> 502,9") == (
        Position(503, 4),
        Position(502, 4),
        Position(502, 9),
    )


def test_parse_polylines_reference() -> None:
    polylines = parse_polylines(REFERENCE_SCAN)
    assert len(polylines) == 2
    assert polylines[0] == (Position(498, 4), Position(498, 6), Position(496, 6))
    assert len(polylines[1]) == 4


def test_parse_polylines_skips_blank_lines() -> None:
    assert len(parse_polylines("\n1,1 -> 1,3\n\n   \n2,2 -> 4,2\n")) == 2


def test_parse_polylines_reports_line_number() -> None:
    with pytest.raises(RockParseError) as excinfo:
        parse_polylines("1,1 -> 1,3\n2,2 -> x,2\n")
    assert excinfo.value.line_number == 2
    assert "line 2" in str(excinfo.value)
