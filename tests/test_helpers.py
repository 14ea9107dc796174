import pytest

from config import HIDDEN_STYLE, VISIBLE_STYLE
from helpers import (
    format_price, format_si_price, si_format, toggle_map_visibility,
    tooltip_html, visibility_style,
)


def test_format_price_groups_thousands():
    assert format_price(500000) == "£500,000"
    assert format_price(1234567.4) == "£1,234,567"


@pytest.mark.parametrize("price", [None, float("nan")])
def test_format_price_missing(price):
    assert format_price(price) == "N/A"


@pytest.mark.parametrize("value, expected", [
    (450000, "450k"),
    (200000, "200k"),
    (1000000, "1.0M"),
    (1200000, "1.2M"),
    (2000000, "2.0M"),
    (999999, "1.0M"),
    (1500, "1.5k"),
    (12, "12"),
    (5, "5.0"),
    (0, "0.0"),
    (-250000, "-250k"),
])
def test_si_format(value, expected):
    assert si_format(value) == expected


def test_format_si_price():
    assert format_si_price(450000) == "£450k"


def test_tooltip_html():
    assert tooltip_html("A", 300000) == "A<br>£300,000"
    assert tooltip_html("B", None) == "B<br>N/A"


def test_toggle_shows_exactly_one_map():
    england_hidden, london_hidden = toggle_map_visibility(False)
    assert (england_hidden, london_hidden) == (True, False)
    assert toggle_map_visibility(True) == (False, True)


def test_toggling_twice_restores_initial_state():
    initial = False
    once, _ = toggle_map_visibility(initial)
    twice, london_hidden = toggle_map_visibility(once)
    assert twice == initial
    assert london_hidden is True


def test_visibility_style():
    assert visibility_style(True) == HIDDEN_STYLE
    assert visibility_style(False) == VISIBLE_STYLE
