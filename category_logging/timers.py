"""
Named Timers
Per-logger start instants and the mm:ss.mmmm elapsed format
"""

import threading
import time
from typing import Callable, Dict, Optional

TIMER_NOT_FOUND = "00:00.0000"


def monotonic_ms() -> int:
    """Current monotonic time in whole milliseconds"""
    return time.monotonic_ns() // 1_000_000


def format_elapsed(elapsed_ms: int) -> str:
    """
    Format a duration as minutes:seconds.milliseconds

    Minutes are not wrapped at 60 and the millisecond remainder (0-999)
    is written in a 4 digit field, e.g. 125678 -> "02:05.0678".

    Args:
        elapsed_ms: Duration in milliseconds; negative values count as zero

    Returns:
        Formatted duration string
    """
    elapsed_ms = max(0, int(elapsed_ms))
    minutes = elapsed_ms // 60000
    seconds = (elapsed_ms % 60000) // 1000
    milliseconds = elapsed_ms % 1000
    return "%02d:%02d.%04d" % (minutes, seconds, milliseconds)


class TimerRegistry:
    """
    Start instants keyed by timer name
    An entry lives from start() until the first consume()
    """

    def __init__(self, clock: Optional[Callable[[], int]] = None):
        """
        Args:
            clock: Callable returning the current time in milliseconds
        """
        self._clock = clock or monotonic_ms
        self._timers: Dict[str, int] = {}
        self._lock = threading.Lock()

    def start(self, name: str):
        """Record now under name, replacing any running timer of that name"""
        now = self._clock()
        with self._lock:
            self._timers[name] = now

    def consume(self, name: str) -> Optional[int]:
        """
        Remove a timer and return its elapsed milliseconds

        Returns:
            Elapsed milliseconds, or None if the timer is not running
        """
        with self._lock:
            start = self._timers.pop(name, None)
        if start is None:
            return None
        return self._clock() - start

    def is_running(self, name: str) -> bool:
        with self._lock:
            return name in self._timers

    def __len__(self) -> int:
        with self._lock:
            return len(self._timers)
