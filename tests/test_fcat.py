import pytest

from hudcore.fcat import FCAT_SEQUENCE, FcatOverlay


def test_first_colour_is_white():
    assert FcatOverlay().next_color(0) == (255, 255, 255)


def test_last_colour_of_cycle():
    assert FcatOverlay().next_color(15) == (255, 128, 0)


@pytest.mark.parametrize("frame", [0, 3, 7, 15, 100, 12345])
def test_colours_repeat_every_sixteen_frames(frame):
    overlay = FcatOverlay()
    assert overlay.next_color(frame) == overlay.next_color(frame + 16)


def test_consecutive_colours_differ():
    overlay = FcatOverlay()
    colours = [overlay.next_color(n) for n in range(16)]
    assert colours == list(FCAT_SEQUENCE)
    assert len(set(colours)) == 16


@pytest.mark.parametrize("edge", [0, 1, 2, 3, 7])
def test_corners_span_window_size(edge):
    p_min, p_max, size = FcatOverlay(screen_edge=edge, overlay_width=24).overlay_corners(1920, 1080)
    assert (p_max[0] - p_min[0], p_max[1] - p_min[1]) == size


@pytest.mark.parametrize("edge", [0, 1, 2, 3])
def test_strip_lies_inside_display(edge):
    w, h = 1920, 1080
    p_min, p_max, _ = FcatOverlay(screen_edge=edge, overlay_width=24).overlay_corners(w, h)
    assert 0 <= p_min[0] <= p_max[0] <= w
    assert 0 <= p_min[1] <= p_max[1] <= h


def test_left_edge():
    p_min, p_max, size = FcatOverlay(overlay_width=24).overlay_corners(1920, 1080)
    assert p_min == (0.0, 0.0)
    assert p_max == (24.0, 1080.0)
    assert size == (24.0, 1080.0)


def test_bottom_edge_touches_bottom():
    w, h, strip = 1920, 1080, 24
    p_min, p_max, size = FcatOverlay(screen_edge=1, overlay_width=strip).overlay_corners(w, h)
    assert p_max == (w, h)
    assert p_min == (0.0, h - strip)
    assert size == (w, strip)


def test_right_edge_touches_right():
    w, h, strip = 1920, 1080, 24
    p_min, p_max, size = FcatOverlay(screen_edge=2, overlay_width=strip).overlay_corners(w, h)
    assert p_min == (w - strip, 0.0)
    assert p_max == (w, h)
    assert size == (strip, h)


def test_top_edge_starts_at_origin():
    w, h, strip = 1920, 1080, 24
    p_min, p_max, size = FcatOverlay(screen_edge=3, overlay_width=strip).overlay_corners(w, h)
    assert p_min == (0.0, 0.0)
    assert p_max == (w, strip)
    assert size == (w, strip)


def test_unknown_edge_falls_back_to_left():
    assert FcatOverlay(screen_edge=9).overlay_corners(800, 600) == FcatOverlay(screen_edge=0).overlay_corners(800, 600)