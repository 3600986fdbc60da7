"""
Global Attribute Store
Process-wide named settings shared by every Logger, including the "Logging" flag
"""

import threading
from typing import Any, Dict, Optional

LOGGING_ATTRIBUTE = "Logging"


class AttributeStore:
    """
    Thread-safe mapping of attribute names to values
    An attribute that was never set reads as None
    """

    def __init__(self):
        self._values: Dict[str, Any] = {}
        self._lock = threading.RLock()

    def get(self, name: str, default: Any = None) -> Any:
        """Read an attribute"""
        with self._lock:
            return self._values.get(name, default)

    def set(self, name: str, value: Any):
        """Write an attribute"""
        with self._lock:
            self._values[name] = value

    def set_default(self, name: str, value: Any) -> Any:
        """
        Set an attribute only if it is unset

        Args:
            name: Attribute name
            value: Value to store when the attribute is missing or None

        Returns:
            The value now stored under name
        """
        with self._lock:
            if self._values.get(name) is None:
                self._values[name] = value
            return self._values[name]

    def clear(self, name: str):
        """Forget an attribute so it reads as unset again"""
        with self._lock:
            self._values.pop(name, None)

    def __contains__(self, name: str) -> bool:
        with self._lock:
            return self._values.get(name) is not None


_store = AttributeStore()


def get_attribute_store() -> AttributeStore:
    """Return the process-wide attribute store"""
    return _store


def is_logging_enabled(store: Optional[AttributeStore] = None) -> bool:
    """
    Check the "Logging" flag

    Only an explicit False disables logging; an unset flag reads as enabled.
    """
    if store is None:
        store = _store
    return store.get(LOGGING_ATTRIBUTE) is not False


def set_logging_enabled(enabled: bool, store: Optional[AttributeStore] = None):
    """Set the "Logging" flag"""
    if store is None:
        store = _store
    store.set(LOGGING_ATTRIBUTE, bool(enabled))


def apply_config(config, store: Optional[AttributeStore] = None):
    """
    Seed the "Logging" flag from configuration

    Args:
        config: Configuration object; LOGGING_ENABLED of None leaves the flag alone
        store: Attribute store to write (process-wide store by default)
    """
    enabled = getattr(config, 'LOGGING_ENABLED', None)
    if enabled is not None:
        set_logging_enabled(enabled, store)
