"""Performance HUD building blocks: option parsing, frame statistics, pacing, layout and GPU attribute helpers."""

__version__ = "0.1.0"