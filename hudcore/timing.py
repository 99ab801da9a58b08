"""Monotonic nanosecond clock, sleeping and timeout helpers."""

from __future__ import annotations

import os
import time
from typing import Callable

TIMEOUT_INFINITE = 0xFFFFFFFFFFFFFFFF
INT64_MAX = 0x7FFFFFFFFFFFFFFF

_CLOCK_ID = getattr(time, "CLOCK_MONOTONIC_RAW", None)


def get_nano() -> int:
    """Current time in nanoseconds from an unspecified monotonic base."""
    if _CLOCK_ID is not None:
        return time.clock_gettime_ns(_CLOCK_ID)
    return time.monotonic_ns()


def sleep_us(usecs: int) -> None:
    """Sleep for the given number of microseconds."""
    if usecs < 0:
        raise ValueError("sleep duration must not be negative")
    time.sleep(usecs / 1_000_000)


def time_timeout(start: int, end: int, curr: int) -> bool:
    """Return True if ``curr`` lies outside the interval [start, end).

    The interval may wrap around, in which case ``end`` is below ``start``.
    """
    if start <= end:
        return not (start <= curr < end)
    return not (start <= curr or curr < end)


def absolute_timeout(timeout: int) -> int:
    """Turn a relative timeout in nanoseconds into an absolute one.

    TIMEOUT_INFINITE and values that would overflow a signed 64-bit
    time come back as TIMEOUT_INFINITE.
    """
    if timeout == TIMEOUT_INFINITE or timeout > INT64_MAX:
        return TIMEOUT_INFINITE
    now = get_nano()
    deadline = now + timeout
    if deadline > INT64_MAX or deadline < now:
        return TIMEOUT_INFINITE
    return deadline


def _yield() -> None:
    if hasattr(os, "sched_yield"):
        os.sched_yield()
    else:
        time.sleep(0)


def wait_until_zero(read: Callable[[], int], timeout: int) -> bool:
    """Poll ``read`` until it returns zero or ``timeout`` nanoseconds pass.

    A timeout of 0 only checks once; TIMEOUT_INFINITE waits forever.
    Returns True if the value became zero.
    """
    if not read():
        return True
    if not timeout:
        return False
    if timeout == TIMEOUT_INFINITE:
        while read():
            _yield()
        return True

    start = get_nano()
    end = start + timeout
    while read():
        if time_timeout(start, end, get_nano()):
            return False
        _yield()
    return True


def wait_until_zero_abs_timeout(read: Callable[[], int], timeout: int) -> bool:
    """Poll ``read`` until it returns zero or the clock reaches ``timeout``.

    ``timeout`` is an absolute time as returned by get_nano(); a value at
    or before now only checks once. TIMEOUT_INFINITE (or -1) waits forever.
    """
    if not read():
        return True
    if timeout in (TIMEOUT_INFINITE, -1):
        return wait_until_zero(read, TIMEOUT_INFINITE)
    while read():
        if get_nano() >= timeout:
            return False
        _yield()
    return True