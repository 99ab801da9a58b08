"""Value parsers for overlay configuration options."""

from __future__ import annotations

import logging
import os
import re
import string
from enum import IntEnum, IntFlag
from typing import Iterator

log = logging.getLogger(__name__)

DEFAULT_DELIMS = ",:+"
OPTION_DELIMITERS = ",:;="

_UINT32_MASK = 0xFFFFFFFF
_LONG_MIN = -(1 << 63)
_LONG_MAX = (1 << 63) - 1
_INT_MIN = -(1 << 31)
_INT_MAX = (1 << 31) - 1
_DEFAULT_LOAD_COLOR = 0xFFFFFF
_NS_PER_MS = 1_000_000

_FLOAT_BODY = r"[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?"
_FLOAT_PREFIX = re.compile(r"\s*(" + _FLOAT_BODY + ")")
_FLOAT_FULL = re.compile(_FLOAT_BODY)
_DIGITS = {8: "01234567", 10: string.digits, 16: string.hexdigits}


class Position(IntEnum):
    """Screen anchor of the overlay window."""

    TOP_LEFT = 0
    TOP_RIGHT = 1
    MIDDLE_LEFT = 2
    MIDDLE_RIGHT = 3
    BOTTOM_LEFT = 4
    BOTTOM_RIGHT = 5
    TOP_CENTER = 6


class GlSizeQuery(IntEnum):
    """How the OpenGL drawable size is determined."""

    DRAWABLE = 0
    VIEWPORT = 1
    SCISSORBOX = 2


class FontGlyphRange(IntFlag):
    """Extra glyph ranges loaded into the font atlas."""

    KOREAN = 1 << 0
    CHINESE_FULL = 1 << 1
    CHINESE_SIMPLIFIED = 1 << 2
    JAPANESE = 1 << 3
    CYRILLIC = 1 << 4
    THAI = 1 << 5
    VIETNAMESE = 1 << 6
    LATIN_EXT_A = 1 << 7
    LATIN_EXT_B = 1 << 8


_POSITIONS = {
    "top-left": Position.TOP_LEFT,
    "top-right": Position.TOP_RIGHT,
    "middle-left": Position.MIDDLE_LEFT,
    "middle-right": Position.MIDDLE_RIGHT,
    "bottom-left": Position.BOTTOM_LEFT,
    "bottom-right": Position.BOTTOM_RIGHT,
    "top-center": Position.TOP_CENTER,
}

_GLYPH_RANGES = {
    "korean": FontGlyphRange.KOREAN,
    "chinese": FontGlyphRange.CHINESE_FULL,
    "chinese_simplified": FontGlyphRange.CHINESE_SIMPLIFIED,
    "japanese": FontGlyphRange.JAPANESE,
    "cyrillic": FontGlyphRange.CYRILLIC,
    "thai": FontGlyphRange.THAI,
    "vietnamese": FontGlyphRange.VIETNAMESE,
    "latin_ext_a": FontGlyphRange.LATIN_EXT_A,
    "latin_ext_b": FontGlyphRange.LATIN_EXT_B,
}

_GL_SIZE_QUERIES = {
    "viewport": GlSizeQuery.VIEWPORT,
    "scissorbox": GlSizeQuery.SCISSORBOX,
}


def _scan_integer(text: str, base: int) -> int | None:
    """Parse the leading integer of ``text`` like C's strtol.

    Base 0 picks hex for ``0x``, octal for a leading ``0`` and decimal
    otherwise. Returns None when no digits were found.
    """
    s = text.lstrip(" \t\n\r\f\v")
    sign = 1
    if s.startswith(("+", "-")):
        sign = -1 if s[0] == "-" else 1
        s = s[1:]
    if base in (0, 16) and s[:2].lower() == "0x" and s[2:3] and s[2] in string.hexdigits:
        s = s[2:]
        base = 16
    elif base == 0:
        base = 8 if s.startswith("0") else 10
    valid = _DIGITS[base]
    end = 0
    while end < len(s) and s[end] in valid:
        end += 1
    if end == 0:
        return None
    return sign * int(s[:end], base)


def _strtol(text: str, base: int = 0) -> int:
    value = _scan_integer(text, base)
    if value is None:
        return 0
    return max(_LONG_MIN, min(_LONG_MAX, value))


def _stoi(text: str, base: int = 10) -> int:
    value = _scan_integer(text, base)
    if value is None:
        raise ValueError(f"invalid integer: {text!r}")
    if not _INT_MIN <= value <= _INT_MAX:
        raise ValueError(f"integer out of range: {text!r}")
    return value


def str_tokenize(text: str, delims: str = DEFAULT_DELIMS) -> list[str]:
    """Split ``text`` at any of the characters in ``delims``, dropping empty pieces."""
    tokens: list[str] = []
    current: list[str] = []
    for char in text:
        if char in delims:
            if current:
                tokens.append("".join(current))
                current = []
        else:
            current.append(char)
    if current:
        tokens.append("".join(current))
    return tokens


def parse_position(text: str | None) -> Position:
    """Map a position name to a Position; unknown names give TOP_LEFT."""
    if text is None:
        return Position.TOP_LEFT
    return _POSITIONS.get(text, Position.TOP_LEFT)


def parse_float(text: str) -> float:
    """Parse the leading decimal number of ``text``; 0.0 if there is none."""
    match = _FLOAT_PREFIX.match(text)
    return float(match.group(1)) if match else 0.0


def parse_unsigned(text: str) -> int:
    """Parse an integer (decimal, 0x hex or 0 octal) as an unsigned 32-bit value."""
    return _strtol(text, 0) & _UINT32_MASK


def parse_signed(text: str) -> int:
    """Parse an integer (decimal, 0x hex or 0 octal) as a signed 32-bit value."""
    value = _strtol(text, 0) & _UINT32_MASK
    return value - (1 << 32) if value > _INT_MAX else value


def parse_color(text: str) -> int:
    """Parse a hexadecimal 0xRRGGBB colour; invalid text gives 0."""
    return _strtol(text, 16) & _UINT32_MASK


def parse_load_color(text: str) -> list[int]:
    """Parse up to three hex colours, padding missing ones with white.

    Raises ValueError for a token that is not hexadecimal or when more
    than three colours are given.
    """
    colors = [_stoi(token.strip(), 16) & _UINT32_MASK for token in str_tokenize(text)]
    if len(colors) > 3:
        raise ValueError(f"expected at most three colours, got {len(colors)}")
    colors.extend([_DEFAULT_LOAD_COLOR] * (3 - len(colors)))
    return colors


def parse_load_value(text: str) -> list[int]:
    """Parse a list of decimal thresholds.

    Raises ValueError for a token that is not an integer.
    """
    return [_stoi(token.strip(), 10) & _UINT32_MASK for token in str_tokenize(text)]


def parse_str_tokenize(text: str, delims: str = DEFAULT_DELIMS, trim: bool = True) -> list[str]:
    """Split ``text`` into tokens, trimming each unless ``trim`` is False."""
    tokens = str_tokenize(text, delims)
    return [token.strip() for token in tokens] if trim else tokens


def parse_fps_limit(text: str) -> list[int]:
    """Parse a list of frame-rate limits; unparsable entries are skipped."""
    limits: list[int] = []
    for token in str_tokenize(text):
        value = token.strip()
        parsed = _scan_integer(value, 10)
        if parsed is None:
            log.error("invalid fps_limit value: '%s'", value)
            continue
        limits.append(parsed & _UINT32_MASK)
    return limits


def parse_fps_sampling_period(text: str) -> int:
    """Convert a period in milliseconds to nanoseconds, kept in 32 bits."""
    return (_strtol(text, 0) * _NS_PER_MS) & _UINT32_MASK


def parse_benchmark_percentiles(text: str) -> list[str]:
    """Keep ``AVG`` and numeric percentiles between 0 and 100; drop the rest."""
    percentiles: list[str] = []
    for token in str_tokenize(text):
        value = token.strip()
        if value == "AVG":
            percentiles.append(value)
            continue
        if not _FLOAT_FULL.fullmatch(value):
            log.error("invalid benchmark percentile: '%s'", value)
            continue
        if not 0 <= float(value) <= 100:
            log.error("benchmark percentile is not between 0 and 100 (%s)", value)
            continue
        percentiles.append(value)
    return percentiles


def parse_font_glyph_ranges(text: str) -> FontGlyphRange:
    """Combine the named glyph ranges; unknown names are ignored."""
    ranges = FontGlyphRange(0)
    for token in str_tokenize(text):
        ranges |= _GLYPH_RANGES.get(token.strip().lower(), FontGlyphRange(0))
    return ranges


def parse_gl_size_query(text: str) -> GlSizeQuery:
    """Map ``viewport`` or ``scissorbox`` to a query mode; anything else is DRAWABLE."""
    return _GL_SIZE_QUERIES.get(text.strip().lower(), GlSizeQuery.DRAWABLE)


def parse_path(text: str) -> str:
    """Expand a leading ``~`` to the home directory."""
    if text.startswith("~"):
        return os.path.expanduser(text)
    return text


def split_options(env: str) -> Iterator[tuple[str, str]]:
    """Yield ``(key, value)`` pairs from a ``key=value,flag:key=value`` string.

    Keys and values end at any of ``,:;=``. A key without ``=`` gets the
    value ``"1"``. A backslash before a delimiter in a value escapes it.
    """
    pos = 0
    length = len(env)
    while pos < length:
        start = pos
        while pos < length and env[pos] not in OPTION_DELIMITERS:
            pos += 1
        key = env[start:pos]
        if pos < length and env[pos] == "=":
            pos += 1
            value: list[str] = []
            while pos < length and env[pos] not in OPTION_DELIMITERS:
                char = env[pos]
                if char == "\\" and pos + 1 < length and env[pos + 1] in OPTION_DELIMITERS:
                    pos += 1
                    char = env[pos]
                value.append(char)
                pos += 1
            text = "".join(value)
        else:
            text = "1"
        if pos < length:
            pos += 1
        yield key, text