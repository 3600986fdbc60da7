"""
Category Logger
Prefixed output per category, gated by the global "Logging" flag
"""

import inspect
from typing import Any, Callable, Optional, Type

from .attributes import LOGGING_ATTRIBUTE, AttributeStore, get_attribute_store, is_logging_enabled
from .exceptions import AssertionFailure, FatalError, LoggerError
from .output import OutputSink, get_default_sink
from .timers import TIMER_NOT_FOUND, TimerRegistry, format_elapsed

UNKNOWN_CATEGORY = "__Unknown__"
UNKNOWN_LOCATION = "unknown location"


def get_prefix(category: str) -> str:
    """
    Return the line prefix "[category]\\t::\\t"

    Values follow the prefix directly. Lines read "[c]\\t::\\tmsg", not
    "[c]\\t::\\t msg" as a print(prefix, *values) call would render them.
    """
    return "[" + category + "]\t::\t"


def caller_location(stacklevel: int = 1) -> str:
    """
    Describe a caller's source position

    Args:
        stacklevel: 1 for the function calling caller_location, 2 for its caller, ...

    Returns:
        "<file>:<line> in <function>", or "unknown location" when frames are unavailable
    """
    frame = inspect.currentframe()
    try:
        for _ in range(stacklevel):
            if frame is None:
                break
            frame = frame.f_back
        if frame is None:
            return UNKNOWN_LOCATION
        code = frame.f_code
        return f"{code.co_filename}:{frame.f_lineno} in {code.co_name}"
    finally:
        del frame


def _join(values) -> str:
    return " ".join(str(value) for value in values)


class Logger:
    """
    Category logger

    log() and error() always emit; print() and warn() only while the
    global "Logging" flag is not False. error() and a failed assert_()
    raise instead of returning.
    """

    def __init__(
        self,
        category: Optional[str] = None,
        *,
        sink: Optional[OutputSink] = None,
        attributes: Optional[AttributeStore] = None,
        clock: Optional[Callable[[], int]] = None,
    ):
        """
        Initialize logger for a category

        Args:
            category: Category tag; None or "" becomes "__Unknown__"
            sink: Output sink (process-wide sink by default)
            attributes: Attribute store holding the "Logging" flag
            clock: Millisecond clock used by timers
        """
        self._attributes = attributes if attributes is not None else get_attribute_store()
        self._attributes.set_default(LOGGING_ATTRIBUTE, True)

        self._category = category or UNKNOWN_CATEGORY
        self._sink = sink
        self.timers = TimerRegistry(clock)

    @property
    def category(self) -> str:
        return self._category

    @property
    def sink(self) -> OutputSink:
        # Resolved late so constructing a Logger never touches handlers
        if self._sink is None:
            self._sink = get_default_sink()
        return self._sink

    @property
    def enabled(self) -> bool:
        """Current value of the global flag, re-read on every access"""
        return is_logging_enabled(self._attributes)

    def _format(self, values) -> str:
        return get_prefix(self._category) + _join(values)

    # ===== Output =====

    def log(self, *values: Any):
        """Write a line unconditionally"""
        self.sink.write(self._category, self._format(values))

    def print(self, *values: Any):
        """Write a line if logging is enabled"""
        if self.enabled:
            self.sink.write(self._category, self._format(values))

    def warn(self, *values: Any):
        """Write a warning line if logging is enabled"""
        if self.enabled:
            self.sink.warn(self._category, self._format(values))

    # ===== Fatal =====

    def _fail(self, error_class: Type[LoggerError], values, location: str):
        message = self._format(values) + " [" + location + "]"
        self.sink.fatal(self._category, message)
        raise error_class(message, category=self._category, location=location)

    def error(self, *values: Any):
        """
        Report a fatal condition and abort

        Raises:
            FatalError: always, with the caller's location appended
        """
        self._fail(FatalError, values, caller_location(2))

    def assert_(self, condition: Any, *values: Any):
        """
        Abort unless condition holds

        Args:
            condition: Checked for truthiness; None fails
            *values: Message parts used when the check fails

        Raises:
            AssertionFailure: if condition is falsy
        """
        if not condition:
            self._fail(AssertionFailure, values, caller_location(2))

    # ===== Timers =====

    def start_timer(self, name: str):
        """Start (or restart) a named timer"""
        self.timers.start(name)

    def get_timer(self, name: str) -> str:
        """
        Stop a named timer and return its elapsed time as "mm:ss.mmmm"

        The timer is removed; a timer that is not running yields "00:00.0000".
        """
        elapsed_ms = self.timers.consume(name)
        if elapsed_ms is None:
            return TIMER_NOT_FOUND
        return format_elapsed(elapsed_ms)

    def __repr__(self) -> str:
        return f"Logger(category={self._category!r})"
