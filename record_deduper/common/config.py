"""
Configuration management for record_deduper

Only ambient settings live here (output naming, encoding, logging).
Key definitions are always made through the API.
"""
import os
from typing import Any, Dict, Optional

import yaml
from dotenv import load_dotenv

from record_deduper.common.exceptions import ConfigurationError


DEFAULTS: Dict[str, Any] = {
    'output': {
        'unique_suffix': '_uniqs',
        'duplicate_suffix': '_dupes',
        'atomic': True,
    },
    'io': {
        'encoding': 'utf-8',
    },
    'logging': {
        'level': 'INFO',
        'format': 'text',
    },
}


class Config:
    """Configuration manager"""

    def __init__(self, config_file: Optional[str] = None, env_file: Optional[str] = None):
        """
        Initialize configuration

        Args:
            config_file: Path to YAML configuration file
            env_file: Path to .env file
        """
        if env_file:
            load_dotenv(env_file)
        else:
            load_dotenv()

        self._config: Dict[str, Any] = {}
        if config_file:
            self._load_yaml(config_file)

    def _load_yaml(self, config_file: str) -> None:
        """Load configuration from YAML file"""
        try:
            with open(config_file, 'r') as f:
                loaded = yaml.safe_load(f) or {}
        except FileNotFoundError:
            raise ConfigurationError(f"Config file not found: {config_file}")
        except yaml.YAMLError as e:
            raise ConfigurationError(f"Error parsing YAML: {e}")

        if not isinstance(loaded, dict):
            raise ConfigurationError(
                f"Config file must contain a mapping, got {type(loaded).__name__}"
            )
        self._config = loaded

    def get(self, key: str, default: Any = None) -> Any:
        """
        Get configuration value

        Supports dot notation for nested values (e.g., 'output.unique_suffix').
        Checks environment variables first, then YAML config, then the
        built-in defaults.

        Args:
            key: Configuration key
            default: Default value if key not found anywhere

        Returns:
            Configuration value
        """
        env_key = key.upper().replace('.', '_')
        env_value = os.getenv(env_key)
        if env_value is not None:
            return env_value

        for source in (self._config, DEFAULTS):
            value = _lookup(source, key)
            if value is not None:
                return value

        return default

    def get_bool(self, key: str, default: bool = False) -> bool:
        """Get boolean configuration value"""
        value = self.get(key, default)
        if isinstance(value, bool):
            return value
        if isinstance(value, str):
            return value.lower() in ('true', '1', 'yes', 'on')
        return default


def _lookup(source: Dict[str, Any], key: str) -> Any:
    value: Any = source
    for k in key.split('.'):
        if isinstance(value, dict) and k in value:
            value = value[k]
        else:
            return None
    return value


# Global configuration instance
_global_config: Optional[Config] = None


def init_config(config_file: Optional[str] = None, env_file: Optional[str] = None) -> Config:
    """
    Initialize global configuration

    Args:
        config_file: Path to YAML configuration file
        env_file: Path to .env file

    Returns:
        Config instance
    """
    global _global_config
    _global_config = Config(config_file, env_file)
    return _global_config


def get_config() -> Config:
    """
    Get global configuration instance, initializing with defaults if needed

    Returns:
        Config instance
    """
    if _global_config is None:
        return init_config()
    return _global_config
