from pathlib import Path
from typing import Any, Dict
import logging

from affordances.utils import configure_logging, load_settings

logger = logging.getLogger(__name__)


class Config:
    """Static configuration class - no instances, only class methods"""
    _config: Dict[str, Any] = {}

    DEFAULTS: Dict[str, Any] = {
        'duplicate_properties': 'keep_last',
        'log_level': 'info',
    }

    @classmethod
    def initialize(cls, config_file: str = "") -> Dict[str, Any]:
        """Initialize the config with values from config file and apply its log level"""
        cls._config = cls._load_system_config(config_file)
        configure_logging(cls.get('log_level'))
        return cls._config

    @classmethod
    def reset(cls) -> None:
        cls._config = {}

    @classmethod
    def get(cls, key: str, default: Any = None) -> Any:
        """Get a configuration value by key, falling back to the built-in defaults"""
        if key in cls._config:
            return cls._config[key]
        return cls.DEFAULTS.get(key, default)

    @classmethod
    def duplicate_policy(cls):
        """Get the duplicate property policy used when a type has several property sources.

        Rules:
        - duplicate_properties="keep_last" : later source overwrites earlier (default)
        - duplicate_properties="keep_first" : first declaration wins
        - duplicate_properties="error" : conflicting declarations raise DuplicatePropertyError
        - Any other value: keep_last, with a warning
        """
        from affordances.services.schema import DuplicatePolicy

        value = str(cls.get('duplicate_properties', 'keep_last')).lower()
        try:
            return DuplicatePolicy(value)
        except ValueError:
            logger.warning(f"Unknown duplicate_properties setting '{value}', using keep_last")
            return DuplicatePolicy.KEEP_LAST

    @classmethod
    def _load_system_config(cls, config_file: str) -> Dict[str, Any]:
        """
        Load and return the configuration from a JSON config file.
        If the file is not found, return default configuration values.
        """
        if len(config_file) > 0:
            config_path = Path(config_file)
            if config_path.exists():
                return {**cls.DEFAULTS, **load_settings(config_path)}
        logger.warning(f'Configuration file "{config_file}" not found. Using defaults.')
        return dict(cls.DEFAULTS)
