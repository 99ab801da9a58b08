"""Decoding of NV-CONTROL attribute strings into GPU readings."""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Mapping

_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


@dataclass
class NvctrlInfo:
    load: int = 0
    temp: int = 0
    memory_used: float = 0.0
    memory_total: float = 0.0
    mem_clock: int = 0
    core_clock: int = 0


def parse_attribute_string(text: str, into: dict[str, str] | None = None) -> dict[str, str]:
    """Parse ``key=value, key=value`` pairs into ``into`` and return it.

    Tokens without ``=`` or with an empty key are ignored; keys and
    values are trimmed.
    """
    options = {} if into is None else into
    for token in text.split(","):
        key, sep, value = token.partition("=")
        if not sep:
            continue
        key = key.strip()
        if key:
            options[key] = value.strip()
    return options


def _to_int(value: object) -> int:
    if isinstance(value, (int, float)):
        return int(value)
    match = _LEADING_INT.match(str(value))
    return int(match.group(1)) if match else 0


def info_from_attributes(attributes: Mapping[str, object]) -> NvctrlInfo:
    """Build readings from parsed attributes.

    ``graphics``, ``nvclock`` and ``memclock`` come from the utilization
    and clock strings; ``temperature``, ``total_dedicated_memory`` and
    ``used_dedicated_memory`` carry the numeric queries. Missing or
    unparsable values read as 0.
    """
    return NvctrlInfo(
        load=_to_int(attributes.get("graphics", "")),
        temp=_to_int(attributes.get("temperature", 0)),
        memory_used=float(_to_int(attributes.get("used_dedicated_memory", 0))),
        memory_total=float(_to_int(attributes.get("total_dedicated_memory", 0))),
        mem_clock=_to_int(attributes.get("memclock", "")),
        core_clock=_to_int(attributes.get("nvclock", "")),
    )