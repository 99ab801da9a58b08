"""Placement and colouring helpers for the HUD window."""

from __future__ import annotations

from dataclasses import dataclass

from hudcore.overlay_params import Position

Color = tuple[float, float, float, float]

_MARGIN = 10.0


@dataclass
class LoadData:
    """Colour thresholds for a load or temperature reading."""

    color_low: Color
    color_med: Color
    color_high: Color
    med_load: int
    high_load: int


def position_window(
    position: Position,
    display_size: tuple[float, float],
    window_size: tuple[float, float],
    offset_x: int = 0,
    offset_y: int = 0,
) -> tuple[float, float]:
    """Top-left corner of the HUD window for the given anchor.

    A margin of 10 pixels is kept from the screen edges unless an offset
    is positive. The top-center anchor ignores the horizontal offset.
    """
    width = int(display_size[0])
    height = int(display_size[1])
    win_w, win_h = window_size
    margin = 0.0 if offset_x > 0 or offset_y > 0 else _MARGIN

    left = margin + offset_x
    right = width - win_w - margin + offset_x
    top = margin + offset_y
    middle = height // 2 - win_h / 2 - margin + offset_y
    bottom = height - win_h - margin + offset_y

    position = Position(position)
    if position is Position.TOP_LEFT:
        return left, top
    if position is Position.TOP_RIGHT:
        return right, top
    if position is Position.MIDDLE_LEFT:
        return left, middle
    if position is Position.MIDDLE_RIGHT:
        return right, middle
    if position is Position.BOTTOM_LEFT:
        return left, bottom
    if position is Position.BOTTOM_RIGHT:
        return right, bottom
    return (width // 2) - (win_w / 2), top


def ticker_limited_pos(
    pos: float, text_width: float, content_width: float, cursor_x: float
) -> tuple[float, float, float]:
    """Horizontal position of scrolling text and its limits.

    Returns ``(x, left_limit, right_limit)``. Text that fits the content
    width stays at ``cursor_x``; longer text is shifted by ``pos`` and
    clamped between the limits.
    """
    left_limit = content_width - text_width + cursor_x
    right_limit = cursor_x
    if content_width < text_width:
        new_pos = cursor_x + pos
        if new_pos < left_limit:
            return left_limit, left_limit, right_limit
        if new_pos > right_limit:
            return right_limit, left_limit, right_limit
        return new_pos, left_limit, right_limit
    return cursor_x, left_limit, right_limit


def _blend(low: Color, high: Color, fraction: float) -> Color:
    return (
        low[0] + (high[0] - low[0]) * fraction,
        low[1] + (high[1] - low[1]) * fraction,
        low[2] + (high[2] - low[2]) * fraction,
        1.0,
    )


def change_on_load_temp(data: LoadData, current: int) -> Color:
    """Colour for a reading, fading low to medium to high as it rises."""
    if current >= data.high_load:
        return data.color_high
    if current >= data.med_load:
        fraction = (current - data.med_load) / (data.high_load - data.med_load)
        return _blend(data.color_med, data.color_high, fraction)
    fraction = current / data.med_load
    return _blend(data.color_low, data.color_med, fraction)


def center_text_x(window_width: float, text_width: float) -> float:
    """Cursor x that centres text of the given width in the window."""
    return window_width / 2 - text_width / 2