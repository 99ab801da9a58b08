import pytest

from hudcore.hud_layout import (
    LoadData,
    center_text_x,
    change_on_load_temp,
    position_window,
    ticker_limited_pos,
)
from hudcore.overlay_params import Position

DISPLAY = (1920, 1080)
WINDOW = (300.0, 140.0)


def test_top_left_uses_margin():
    assert position_window(Position.TOP_LEFT, DISPLAY, WINDOW) == (10.0, 10.0)


def test_positive_offset_removes_margin():
    assert position_window(Position.TOP_LEFT, DISPLAY, WINDOW, 5, 7) == (5.0, 7.0)


def test_bottom_right_keeps_margin_to_edges():
    x, y = position_window(Position.BOTTOM_RIGHT, DISPLAY, WINDOW)
    assert x + WINDOW[0] + 10 == DISPLAY[0]
    assert y + WINDOW[1] + 10 == DISPLAY[1]


def test_right_and_left_share_vertical_position():
    for left, right in [
        (Position.TOP_LEFT, Position.TOP_RIGHT),
        (Position.MIDDLE_LEFT, Position.MIDDLE_RIGHT),
        (Position.BOTTOM_LEFT, Position.BOTTOM_RIGHT),
    ]:
        assert position_window(left, DISPLAY, WINDOW)[1] == position_window(right, DISPLAY, WINDOW)[1]


def test_middle_lies_between_top_and_bottom():
    top = position_window(Position.TOP_LEFT, DISPLAY, WINDOW)[1]
    middle = position_window(Position.MIDDLE_LEFT, DISPLAY, WINDOW)[1]
    bottom = position_window(Position.BOTTOM_LEFT, DISPLAY, WINDOW)[1]
    assert top < middle < bottom


def test_top_center_is_centred_and_ignores_x_offset():
    x, y = position_window(Position.TOP_CENTER, DISPLAY, WINDOW, 50, 0)
    assert x + WINDOW[0] / 2 == DISPLAY[0] / 2
    assert y == 0.0


def test_offset_shifts_right_anchor():
    base = position_window(Position.TOP_RIGHT, DISPLAY, WINDOW, 0, 1)
    shifted = position_window(Position.TOP_RIGHT, DISPLAY, WINDOW, 20, 1)
    assert shifted[0] - base[0] == 20


def test_ticker_text_that_fits_stays_at_cursor():
    x, left, right = ticker_limited_pos(-40.0, 100.0, 200.0, 8.0)
    assert x == 8.0
    assert right == 8.0
    assert left > right


def test_ticker_long_text_is_clamped():
    cursor = 8.0
    for pos in (-1000.0, -50.0, 0.0, 50.0, 1000.0):
        x, left, right = ticker_limited_pos(pos, 400.0, 200.0, cursor)
        assert left <= x <= right
    assert ticker_limited_pos(1000.0, 400.0, 200.0, cursor)[0] == cursor
    x, left, _ = ticker_limited_pos(-1000.0, 400.0, 200.0, cursor)
    assert x == left


def test_ticker_long_text_moves_with_pos():
    x, _, _ = ticker_limited_pos(-30.0, 400.0, 200.0, 8.0)
    assert x == 8.0 - 30.0


LOW = (0.0, 1.0, 0.0, 1.0)
MED = (1.0, 1.0, 0.0, 1.0)
HIGH = (1.0, 0.0, 0.0, 1.0)
DATA = LoadData(LOW, MED, HIGH, 60, 90)


def test_high_load_returns_high_colour():
    assert change_on_load_temp(DATA, 90) == HIGH
    assert change_on_load_temp(DATA, 150) == HIGH


def test_zero_load_returns_low_colour():
    assert change_on_load_temp(DATA, 0) == LOW


def test_medium_load_returns_medium_colour():
    assert change_on_load_temp(DATA, 60) == MED


@pytest.mark.parametrize("current", [10, 30, 59, 61, 75, 89])
def test_blend_stays_between_endpoints(current):
    red, green, blue, alpha = change_on_load_temp(DATA, current)
    assert 0.0 <= red <= 1.0
    assert 0.0 <= green <= 1.0
    assert blue == 0.0
    assert alpha == 1.0


def test_red_rises_below_medium_and_green_falls_above():
    reds = [change_on_load_temp(DATA, c)[0] for c in range(0, 61, 10)]
    greens = [change_on_load_temp(DATA, c)[1] for c in range(60, 91, 10)]
    assert reds == sorted(reds)
    assert greens == sorted(greens, reverse=True)


def test_center_text_is_symmetric():
    x = center_text_x(300.0, 100.0)
    assert x + 100.0 + x == 300.0


def test_center_text_wider_than_window_is_negative():
    assert center_text_x(100.0, 300.0) < 0