import math

import pytest

from userpic.utilities import (
    clamp,
    format_badge_value,
    is_present,
    is_text_content,
    js_round,
    number_to_string,
    pixel_size_for_layout,
    pixel_snap,
)


def test_clamp():
    assert clamp(5, 0, 10) == 5
    assert clamp(-1, 0, 10) == 0
    assert clamp(50, 15, 45) == 45
    assert clamp(5, 15, 45) == 15
    assert clamp(1.25, 0, 1) == 1


def test_js_round_rounds_half_up():
    assert js_round(2.5) == 3
    assert js_round(3.5) == 4
    assert js_round(-2.5) == -2
    assert js_round(-2.6) == -3


def test_pixel_snap():
    assert pixel_snap(1.26, 2) == 1.5
    assert pixel_snap(1.24, 2) == 1.0
    assert pixel_snap(-2.67767, 1) == -3.0
    assert pixel_snap(-2.67767, 2) == -2.5


def test_pixel_size_for_layout():
    assert pixel_size_for_layout(50, 1) == 50
    assert pixel_size_for_layout(50, 2) == 100
    assert pixel_size_for_layout(33, 1.5) == 50


@pytest.mark.parametrize("limit", range(0, 12))
def test_format_badge_value_limit(limit):
    for value in range(-3, 20):
        expected = f"{limit}+" if value > limit else str(value)
        assert format_badge_value(value, limit) == expected


def test_format_badge_value_text_passes_through():
    assert format_badge_value("new", 9) == "new"
    assert format_badge_value("12345678901", 1) == "12345678901"
    assert format_badge_value("X", 0) == "X"


def test_format_badge_value_floats():
    assert format_badge_value(3.0, 9) == "3"
    assert format_badge_value(2.5, 9) == "2.5"
    assert format_badge_value(9.5, 9) == "9+"


@pytest.mark.parametrize(
    "value, expected",
    [
        (3, "3"),
        (-12, "-12"),
        (0.0, "0"),
        (0.1, "0.1"),
        (0.000001, "0.000001"),
        (1e-7, "1e-7"),
        (1.5e-7, "1.5e-7"),
        (1e20, "100000000000000000000"),
        (1e21, "1e+21"),
        (10**22, "1e+22"),
        (-2.5e21, "-2.5e+21"),
        (math.inf, "Infinity"),
    ],
)
def test_number_to_string(value, expected):
    assert number_to_string(value) == expected


def test_format_badge_value_small_numbers():
    assert format_badge_value(1e-7, 9) == "1e-7"
    assert format_badge_value(0.25, 9) == "0.25"


@pytest.mark.parametrize("value", [None, False, "", 0, 0.0, math.nan])
def test_absent_values(value):
    assert not is_present(value)


@pytest.mark.parametrize("value", [1, -1, 0.5, "x", "0", True, {"icon": "dot"}])
def test_present_values(value):
    assert is_present(value)


def test_text_content():
    assert is_text_content(3)
    assert is_text_content(2.5)
    assert is_text_content("new")
    assert not is_text_content(True)
    assert not is_text_content({"icon": "dot"})
