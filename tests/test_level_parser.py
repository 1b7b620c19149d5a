import pytest

from flowlines.components.color import Color
from flowlines.levels.parser import LevelFormatError, parse_level, parse_levels

CATALOG = """
# two tiny levels
Level
1,3
RED;0,0;0,2

level
2,2
red;0,0;0,1
Blue ; 1,0 ; 1,1
"""


def test_parse_levels_assigns_ids_in_file_order():
    levels = parse_levels(CATALOG)
    assert [level.level_id for level in levels] == [1, 2]
    first, second = levels
    assert first.size == (1, 3)
    assert first.anchors == {Color.RED: ((0, 0), (0, 2))}
    assert second.colors == (Color.RED, Color.BLUE)
    assert second.anchors[Color.BLUE] == ((1, 0), (1, 1))


def test_parse_level_single_block():
    level = parse_level("3,4\nGREEN;0,0;2,3\n", level_id=9)
    assert level.level_id == 9
    assert (level.rows, level.cols) == (3, 4)
    assert level.anchors == {Color.GREEN: ((0, 0), (2, 3))}


@pytest.mark.parametrize(
    "text, fragment",
    [
        ("", "empty level"),
        ("3", "expected 'a,b'"),
        ("3,x", "non-integer"),
        ("0,3", "positive"),
        ("3,3\nRED;0,0", "COLOR;r,c;r,c"),
        ("3,3\nBLACK;0,0;1,1", "Unknown color"),
        ("3,3\nRED;0,0;3,3", "outside"),
        ("3,3\nRED;1,1;1,1", "same cell"),
        ("3,3\nRED;0,0;0,1\nRED;1,0;1,1", "listed twice"),
    ],
)
def test_parse_level_rejects_malformed_text(text, fragment):
    with pytest.raises(LevelFormatError) as excinfo:
        parse_level(text, level_id=4)
    assert fragment in str(excinfo.value)
    assert excinfo.value.level_id == 4


def test_parse_levels_rejects_content_before_header():
    with pytest.raises(LevelFormatError):
        parse_levels("3,3\nLevel\n3,3\n")


def test_bundled_catalog_parses():
    from pathlib import Path

    path = Path(__file__).resolve().parents[1] / "src" / "flowlines" / "levels" / "levels.txt"
    levels = parse_levels(path.read_text(encoding="utf-8"))
    assert levels
    for level in levels:
        assert all(len(coords) == 2 for coords in level.anchors.values())
