"""Tests for console rendering of evaluation values."""

import pytest

from regexloops.rendering import render_value


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        (True, "true"),
        (False, "false"),
        (0, "0"),
        (6, "6"),
        (-3, "-3"),
        ("JavaScript", "JavaScript"),
        ("", ""),
        ([], "[]"),
        ([0], "[ 0 ]"),
        ([0, 1, 2], "[ 0, 1, 2 ]"),
        (["Go", "Python"], "[ 'Go', 'Python' ]"),
        ([True, 1], "[ true, 1 ]"),
    ],
)
def test_render_value(value: object, expected: str) -> None:
    """Render booleans, numbers, strings and arrays as the console prints them."""
    assert render_value(value) == expected


def test_render_tuple_as_array() -> None:
    """Tuples render like lists."""
    assert render_value((1, 2)) == "[ 1, 2 ]"


def test_render_long_array_on_one_line() -> None:
    """Arrays never wrap, whatever their length."""
    rendered = render_value(list(range(7)))
    assert rendered == "[ 0, 1, 2, 3, 4, 5, 6 ]"
    assert "\n" not in rendered
