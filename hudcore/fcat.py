"""Frame colour marker strip used for FCAT frame capture analysis."""

from __future__ import annotations

from dataclasses import dataclass

Point = tuple[float, float]

# The 16-colour cycle every FCAT analysis tool expects, as (R, G, B).
FCAT_SEQUENCE: tuple[tuple[int, int, int], ...] = (
    (255, 255, 255),
    (0, 255, 0),
    (0, 0, 255),
    (255, 0, 0),
    (0, 128, 128),
    (0, 0, 128),
    (0, 128, 0),
    (0, 255, 255),
    (128, 0, 0),
    (192, 192, 192),
    (128, 0, 128),
    (128, 128, 0),
    (128, 128, 128),
    (255, 0, 255),
    (255, 255, 0),
    (255, 128, 0),
)


@dataclass
class FcatOverlay:
    """Coloured strip along one screen edge that changes colour every frame.

    ``screen_edge`` counts counter-clockwise from the left edge (0): 1 is
    the bottom, 2 the right and 3 the top edge. Any other value means the
    left edge.
    """

    screen_edge: int = 0
    overlay_width: int = 24

    def next_color(self, n_frames: int) -> tuple[int, int, int]:
        """Colour of the strip for the given frame number."""
        return FCAT_SEQUENCE[n_frames % 16]

    def overlay_corners(
        self, display_width: float, display_height: float
    ) -> tuple[Point, Point, Point]:
        """Return ``(p_min, p_max, window_size)`` of the strip on the display."""
        width = float(self.overlay_width)
        w = float(display_width)
        h = float(display_height)
        if self.screen_edge == 1:
            return (0.0, h - width), (w, h), (w, width)
        if self.screen_edge == 2:
            return (w - width, 0.0), (w, h), (width, h)
        if self.screen_edge == 3:
            return (0.0, 0.0), (w, width), (w, width)
        return (0.0, 0.0), (width, h), (width, h)