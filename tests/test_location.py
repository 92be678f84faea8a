import hypothesis.strategies as st
import pytest
from hypothesis import given

from _textscan.scanner import Scanner
from _textscan.scanner.location import LineIndex, Location


def test_location_of_cursor():
    scanner = Scanner("ab\ncd\n\nef")
    assert scanner.location() == Location(1, 0)
    scanner.get_char()
    assert scanner.location() == Location(1, 1)
    for _ in range(3):
        scanner.get_char()
    assert scanner.act_char() == "c"
    assert scanner.location() == Location(2, 1)
    assert scanner.location(2) == Location(1, 3)
    assert scanner.location(6) == Location(3, 1)
    assert scanner.location(8) == Location(4, 2)


def test_location_str():
    assert str(Location(3, 14)) == "3:14"


def test_num_lines():
    assert LineIndex("a").num_lines == 1
    assert LineIndex("a\nb\n").num_lines == 3


@given(st.text(alphabet="ab\n", min_size=1, max_size=40), st.data())
def test_location_matches_counting(text, data):
    position = data.draw(st.integers(min_value=0, max_value=len(text) - 1))
    preceding = text[:position]
    expected = Location(
        preceding.count("\n") + 1, position - (preceding.rfind("\n") + 1) + 1
    )
    assert LineIndex(text).location(position) == expected


def test_non_ascii_location():
    index = LineIndex("ø\n\U0001f600x")
    assert index.location(3) == Location(2, 2)


@pytest.mark.parametrize("text", ["a\rb", "a\nb", "a\r\nb"])
def test_line_ends_agree_with_eol(text):
    scanner = Scanner(text)
    scanner.get_char()
    scanner.get_char()
    assert scanner.eol()
    assert scanner.location() == Location(1, 2)
    scanner.follow_delimiter("b")
    assert scanner.location() == Location(2, 1)
    assert LineIndex(text).num_lines == 2


def test_mixed_line_ends():
    index = LineIndex("a\r\rb\r\nc\nd")
    assert index.num_lines == 5
    assert index.location(3) == Location(3, 1)
    assert index.location(6) == Location(4, 1)
    assert index.location(8) == Location(5, 1)
