"""Per-swapchain frame statistics, frame-rate limiting and PCI id formatting."""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import Callable, Sequence

from hudcore.timing import get_nano, sleep_us

FRAME_HISTORY = 200
_NS_PER_SECOND = 1_000_000_000
_NS_PER_MS = 1_000_000
_NS_PER_US = 1_000

_PCI_DEV = re.compile(
    r"\s*([0-9A-Fa-f]{1,4}):\s*([0-9A-Fa-f]{1,2}):\s*([0-9A-Fa-f]{1,2})\.\s*([0-9A-Fa-f]+)"
)


@dataclass
class SwapchainStats:
    """Rolling frame-time history and frame-rate figures of one swapchain.

    ``frames_stats`` holds frame times in nanoseconds and
    ``frametime_data`` the same times in milliseconds, both as ring
    buffers of FRAME_HISTORY entries indexed by frame number.
    """

    n_frames: int = 0
    time_dividor: float = 1.0
    fps: float = 0.0
    last_present_time: int = 0
    n_frames_since_update: int = 0
    last_fps_update: int = 0
    frametime_us: float = 0.0
    min_frametime: float = 0.0
    max_frametime: float = 0.0
    frames_stats: list[int] = field(default_factory=lambda: [0] * FRAME_HISTORY)
    frametime_data: list[float] = field(default_factory=lambda: [0.0] * FRAME_HISTORY)

    def record_frame(self, frametime_ns: int, now: int, sampling_period: int) -> bool:
        """Account for a presented frame.

        ``now`` is the present time in nanoseconds and ``sampling_period``
        the interval in nanoseconds after which the frame rate is
        recomputed. Returns True when the frame rate was updated.
        """
        slot = self.n_frames % FRAME_HISTORY
        elapsed = now - self.last_fps_update

        if self.last_present_time:
            self.frames_stats[slot] = frametime_ns
            self.frametime_data[slot] = frametime_ns / _NS_PER_MS

        self.frametime_us = frametime_ns / _NS_PER_US

        updated = False
        if elapsed >= sampling_period:
            if elapsed > 0:
                self.fps = _NS_PER_SECOND * self.n_frames_since_update / elapsed
            self.n_frames_since_update = 0
            self.last_fps_update = now
            updated = True

        self.min_frametime = min(self.frametime_data)
        self.max_frametime = max(self.frametime_data)

        self.last_present_time = now
        self.n_frames += 1
        self.n_frames_since_update += 1
        return updated

    def time_stat(self, index: int) -> float:
        """Frame time at plot position ``index``, oldest first, divided by ``time_dividor``.

        Positions not yet filled read as 0. Raises IndexError for an
        index outside the history.
        """
        if not 0 <= index < FRAME_HISTORY:
            raise IndexError(f"frame index out of range: {index}")
        if FRAME_HISTORY - index > self.n_frames:
            return 0.0
        slot = (index + self.n_frames) % FRAME_HISTORY
        return self.frames_stats[slot] / self.time_dividor


def _default_sleep(ns: int) -> None:
    sleep_us(ns // _NS_PER_US)


@dataclass
class FpsLimiter:
    """Sleeps between frames to hold a target frame time, learning its own overhead.

    Times are in nanoseconds. ``clock`` and ``sleep`` default to the
    monotonic clock and a real sleep.
    """

    target_frame_time: int = 0
    frame_overhead: int = 0
    sleep_time: int = 0
    clock: Callable[[], int] = get_nano
    sleep: Callable[[int], None] = _default_sleep

    def limit(self, frame_start: int, frame_end: int) -> int:
        """Sleep as needed for the frame starting at ``frame_start``.

        Returns the number of nanoseconds slept for, 0 if no sleep was needed.
        """
        self.sleep_time = self.target_frame_time - (frame_start - frame_end)
        if self.sleep_time <= self.frame_overhead:
            return 0
        adjusted = self.sleep_time - self.frame_overhead
        self.sleep(adjusted)
        self.frame_overhead = (self.clock() - frame_start) - adjusted
        if self.frame_overhead > self.target_frame_time / 2:
            self.frame_overhead = 0
        return adjusted


def target_frame_time(fps_limit: Sequence[int]) -> int:
    """Frame time in nanoseconds for the first limit of ``fps_limit``; 0 means unlimited."""
    if fps_limit and fps_limit[0] > 0:
        return int(_NS_PER_SECOND / fps_limit[0])
    return 0


def format_pci_dev(text: str) -> str:
    """Normalise a ``domain:bus:slot.func`` PCI address to ``dddd:bb:ss.f`` in lower-case hex.

    Raises ValueError if the text does not hold such an address.
    """
    match = _PCI_DEV.match(text)
    if not match:
        raise ValueError(f"Failed to parse PCI device ID: '{text}'")
    domain, bus, slot, func = (int(part, 16) for part in match.groups())
    return f"{domain:04x}:{bus:02x}:{slot:02x}.{func:x}"