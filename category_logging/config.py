"""
Configuration Management
Loads and validates logging settings from environment variables
"""

import os
from typing import Mapping, Optional
from dotenv import load_dotenv


class Config:
    """
    Centralized configuration for the category logger
    Loads settings from environment variables with validation
    """

    def __init__(self, env_file: Optional[str] = None, environ: Optional[Mapping[str, str]] = None):
        """
        Initialize configuration from environment variables

        Args:
            env_file: Path to .env file (optional)
            environ: Mapping to read instead of os.environ; no .env file is loaded when given
        """
        if environ is None:
            # Load environment variables
            if env_file:
                load_dotenv(env_file)
            else:
                load_dotenv()
            environ = os.environ

        self._environ = environ
        self._load_configuration()
        self._validate_configuration()

    @classmethod
    def defaults(cls) -> 'Config':
        """Configuration built from defaults only, ignoring the environment"""
        return cls(environ={})

    def _getenv(self, name: str, default: Optional[str] = None) -> Optional[str]:
        return self._environ.get(name, default)

    def _load_configuration(self):
        """Load all configuration values from environment variables"""

        # ===== Global Flag =====
        # Left as None when unset so the first Logger can default it to True
        logging_enabled = self._getenv('LOGGING_ENABLED')
        self.LOGGING_ENABLED = self._str_to_bool(logging_enabled) if logging_enabled else None

        # ===== Output Configuration =====
        self.LOG_OUTPUT = self._getenv('LOG_OUTPUT', 'console').lower()
        self.LOG_FILE_PATH = self._getenv('LOG_FILE_PATH', './logs')
        self.LOG_FILE_MAX_SIZE = self._to_int('LOG_FILE_MAX_SIZE', '10')
        self.LOG_FILE_BACKUP_COUNT = self._to_int('LOG_FILE_BACKUP_COUNT', '5')
        self.LOG_CONSOLE_FORMAT = self._getenv('LOG_CONSOLE_FORMAT', '%(message)s')
        self.LOG_FATAL_ERRORS = self._str_to_bool(self._getenv('LOG_FATAL_ERRORS', 'true'))

    def _validate_configuration(self):
        """Validate critical configuration values"""

        # Validate output target
        if self.LOG_OUTPUT not in ['console', 'file', 'both']:
            raise ValueError("LOG_OUTPUT must be 'console', 'file' or 'both'")

        if self.LOG_FILE_MAX_SIZE < 1:
            raise ValueError("LOG_FILE_MAX_SIZE must be at least 1")

        if self.LOG_FILE_BACKUP_COUNT < 0:
            raise ValueError("LOG_FILE_BACKUP_COUNT cannot be negative")

        # Create necessary directories
        if self.LOG_OUTPUT in ['file', 'both']:
            os.makedirs(self.LOG_FILE_PATH, exist_ok=True)

    def _to_int(self, name: str, default: str) -> int:
        value = self._getenv(name, default)
        try:
            return int(value)
        except ValueError:
            raise ValueError(f"{name} must be an integer, got {value!r}") from None

    @staticmethod
    def _str_to_bool(value: str) -> bool:
        """Convert string to boolean"""
        return value.lower() in ('true', '1', 'yes', 'on')

    def writes_to_console(self) -> bool:
        """Check if log lines go to the console"""
        return self.LOG_OUTPUT in ('console', 'both')

    def writes_to_file(self) -> bool:
        """Check if log lines go to the rotating log file"""
        return self.LOG_OUTPUT in ('file', 'both')

    def __repr__(self) -> str:
        """String representation of configuration"""
        return (
            f"Config(logging={self.LOGGING_ENABLED}, "
            f"output={self.LOG_OUTPUT})"
        )
