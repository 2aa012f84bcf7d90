# Path: sched_match/config_loader.py
"""
Configuration Loader for sched_match (Schedule Matching)

Loads runtime settings from a .env file and the environment.
Singleton pattern ensures consistent settings across all components.

Matching rules (penalties, thresholds, token sets) are NOT runtime
settings: they are loaded from a YAML rule bundle by RulesLoader and
passed explicitly to the matcher. This loader only tells it where that
bundle lives.
"""

import os
from typing import Optional, Any
from pathlib import Path
from dotenv import load_dotenv


# ==============================================================================
# DEFAULT CONFIGURATION VALUES
# ==============================================================================

DEFAULT_ENVIRONMENT: str = 'development'
DEFAULT_LOG_LEVEL: str = 'INFO'
DEFAULT_EDIT_CACHE_SIZE: int = 5000
DEFAULT_JSON_INDENT: int = 2


class ConfigLoader:
    """
    Singleton configuration loader for sched_match.

    Loads settings from environment variables with type conversion
    and sensible defaults. Every key is optional.

    Example:
        config = ConfigLoader()
        rules_path = config.get('rules_path')  # Path or None
        cache_size = config.get('edit_cache_size')  # int
    """

    _instance: Optional['ConfigLoader'] = None
    _initialized: bool = False

    def __new__(cls) -> 'ConfigLoader':
        """Ensure only one instance exists (singleton pattern)."""
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __init__(self):
        """
        Initialize configuration loader.

        Only runs once due to singleton pattern. Loads the .env file
        that sits next to this module, if present.
        """
        if ConfigLoader._initialized:
            return

        env_path = Path(__file__).resolve().parent / '.env'

        if env_path.exists():
            load_dotenv(dotenv_path=env_path, interpolate=True)

        self._config = self._load_configuration()
        ConfigLoader._initialized = True

    def _load_configuration(self) -> dict[str, Any]:
        """
        Load all configuration from environment.

        Returns:
            Dictionary of configuration values with proper types
        """
        config = {
            # ================================================================
            # ENVIRONMENT
            # ================================================================
            'environment': self._get_env('SCHED_MATCH_ENVIRONMENT', DEFAULT_ENVIRONMENT),

            # ================================================================
            # RULE BUNDLE
            # ================================================================
            'rules_path': self._get_path('SCHED_MATCH_RULES_PATH'),

            # ================================================================
            # LOGGING CONFIGURATION
            # ================================================================
            'log_dir': self._get_path('SCHED_MATCH_LOG_DIR'),
            'log_level': self._get_env('SCHED_MATCH_LOG_LEVEL', DEFAULT_LOG_LEVEL),
            'log_console': self._get_bool('SCHED_MATCH_LOG_CONSOLE', True),

            # ================================================================
            # MATCHING RUNTIME
            # ================================================================
            'edit_cache_size': self._get_int(
                'SCHED_MATCH_EDIT_CACHE_SIZE', DEFAULT_EDIT_CACHE_SIZE, minimum=1
            ),

            # ================================================================
            # OUTPUT CONFIGURATION
            # ================================================================
            'output_dir': self._get_path('SCHED_MATCH_OUTPUT_DIR'),
            'json_indent': self._get_int('SCHED_MATCH_JSON_INDENT', DEFAULT_JSON_INDENT),
        }

        return config

    def get(self, key: str, default: Any = None) -> Any:
        """
        Get configuration value by key.

        Args:
            key: Configuration key
            default: Default value if key not found or unset

        Returns:
            Configuration value or default
        """
        value = self._config.get(key)
        return default if value is None else value

    def _get_path(self, key: str, required: bool = False) -> Optional[Path]:
        """
        Get path from environment variable.

        Args:
            key: Environment variable name
            required: If True, raise error when missing

        Returns:
            Path object or None

        Raises:
            ValueError: If required and missing
        """
        value = os.getenv(key)

        if not value:
            if required:
                raise ValueError(f"Required path not configured: {key}")
            return None

        if '${' in value:
            value = os.path.expandvars(value)

        return Path(value)

    def _get_env(self, key: str, default: str = '') -> str:
        """Get string environment variable."""
        return os.getenv(key, default)

    def _get_int(self, key: str, default: int, minimum: Optional[int] = None) -> int:
        """Get integer environment variable (default when unparseable or below minimum)."""
        value = os.getenv(key)
        if value is None:
            return default
        try:
            number = int(value)
        except ValueError:
            return default
        if minimum is not None and number < minimum:
            return default
        return number

    def _get_bool(self, key: str, default: bool) -> bool:
        """Get boolean environment variable."""
        value = os.getenv(key)
        if value is None:
            return default
        return value.lower() in ('true', '1', 'yes', 'on')

    def __repr__(self) -> str:
        """String representation showing key settings."""
        return (
            f"ConfigLoader("
            f"environment={self._config.get('environment')}, "
            f"rules_path={self._config.get('rules_path')})"
        )


__all__ = ['ConfigLoader']
