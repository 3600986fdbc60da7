"""
Category Logging Module
Categorized logger with a global enable flag, fail-fast assertions and named timers
Note: Named 'category_logging' to avoid conflict with Python's built-in 'logging' module
"""

from .config import Config
from .attributes import (
    LOGGING_ATTRIBUTE,
    AttributeStore,
    apply_config,
    get_attribute_store,
    is_logging_enabled,
    set_logging_enabled,
)
from .exceptions import AssertionFailure, FatalError, LoggerError
from .logger import Logger, get_prefix
from .output import OutputSink, get_default_sink, set_default_sink
from .timers import TIMER_NOT_FOUND, format_elapsed

__all__ = [
    'Logger',
    'Config',
    'LoggerError',
    'FatalError',
    'AssertionFailure',
    'AttributeStore',
    'OutputSink',
    'LOGGING_ATTRIBUTE',
    'TIMER_NOT_FOUND',
    'apply_config',
    'format_elapsed',
    'get_attribute_store',
    'get_default_sink',
    'get_prefix',
    'is_logging_enabled',
    'set_default_sink',
    'set_logging_enabled',
]
