"""
Configuration management for discrete_bayes
"""

import os
import yaml
from typing import Dict, Any, Optional
from pathlib import Path
from .exceptions import ConfigurationError

class Config:
    """Configuration manager with environment-specific settings"""

    def __init__(self, config_path: Optional[str] = None, environment: str = "default"):
        self.environment = environment
        self._config = self._load_config(config_path)

    def _load_config(self, config_path: Optional[str] = None) -> Dict[str, Any]:
        """Load configuration from YAML files"""

        # Default configuration
        default_config = {
            'classifier': {
                # 0.0 means sums must equal 1.0 exactly
                'tolerance': 0.0
            },
            'logging': {
                'level': 'WARNING',
                'format': '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
            }
        }

        if config_path:
            config_file = Path(config_path)
            if not config_file.exists():
                raise ConfigurationError(f"Config file not found: {config_file}")
        else:
            # Look for config files in standard locations
            possible_paths = [
                Path('config') / f'{self.environment}.yaml',
                Path('config') / 'default.yaml'
            ]

            config_file = None
            for path in possible_paths:
                if path.exists():
                    config_file = path
                    break

        if config_file is not None:
            try:
                with open(config_file, 'r', encoding='utf-8') as f:
                    file_config = yaml.safe_load(f)
            except (OSError, yaml.YAMLError) as e:
                raise ConfigurationError(f"Failed to load config from {config_file}: {e}") from e
            if file_config:
                if not isinstance(file_config, dict):
                    raise ConfigurationError(f"Config file {config_file} must contain a mapping")
                default_config = self._deep_merge(default_config, file_config)

        for section in ('classifier', 'logging'):
            if not isinstance(default_config.get(section), dict):
                raise ConfigurationError(
                    f"Config section '{section}' must be a mapping, got {default_config.get(section)!r}")

        # Environment overrides win over files
        env_tolerance = os.getenv('DISCRETE_BAYES_TOLERANCE')
        if env_tolerance:
            default_config['classifier']['tolerance'] = env_tolerance
        env_level = os.getenv('DISCRETE_BAYES_LOG_LEVEL')
        if env_level:
            default_config['logging']['level'] = env_level

        default_config['classifier']['tolerance'] = self._parse_tolerance(
            default_config['classifier'].get('tolerance', 0.0))

        return default_config

    @staticmethod
    def _parse_tolerance(value: Any) -> float:
        try:
            tolerance = float(value)
        except (TypeError, ValueError) as e:
            raise ConfigurationError(f"classifier.tolerance must be a number, got {value!r}") from e
        if not tolerance >= 0.0:
            raise ConfigurationError(f"classifier.tolerance must be >= 0, got {tolerance}")
        return tolerance

    def _deep_merge(self, base: Dict[str, Any], override: Dict[str, Any]) -> Dict[str, Any]:
        """Deep merge two dictionaries"""
        result = base.copy()

        for key, value in override.items():
            if key in result and isinstance(result[key], dict) and isinstance(value, dict):
                result[key] = self._deep_merge(result[key], value)
            else:
                result[key] = value

        return result

    def get(self, path: str, default: Any = None) -> Any:
        """Get config value using dot notation (e.g., 'classifier.tolerance')"""
        keys = path.split('.')
        value = self._config

        try:
            for key in keys:
                value = value[key]
            return value
        except (KeyError, TypeError):
            return default

    def set(self, path: str, value: Any) -> None:
        """Set config value using dot notation"""
        keys = path.split('.')
        config = self._config

        for key in keys[:-1]:
            if key not in config:
                config[key] = {}
            config = config[key]

        if path == 'classifier.tolerance':
            value = self._parse_tolerance(value)
        config[keys[-1]] = value

    @property
    def classifier(self) -> Dict[str, Any]:
        """Classifier configuration"""
        return self.get('classifier', {})

    @property
    def tolerance(self) -> float:
        """Allowed distance of a probability sum from 1.0"""
        return self.get('classifier.tolerance', 0.0)

    @property
    def logging(self) -> Dict[str, str]:
        """Logging configuration"""
        return self.get('logging', {})

    def to_dict(self) -> Dict[str, Any]:
        """Return full configuration as dictionary"""
        return self._config.copy()
