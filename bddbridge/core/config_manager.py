"""Configuration management"""
import copy
import logging
import os
import yaml
from pathlib import Path
from typing import Dict, Any, Optional

from dotenv import find_dotenv, load_dotenv

from bddbridge.core.exceptions import ConfigError
from bddbridge.utils.helpers import deep_get

logger = logging.getLogger(__name__)

DEFAULT_CONFIG: Dict[str, Any] = {
    'output': {
        'directory': 'features',
        'format': 'gherkin',
    },
    'parser': {
        'patterns': ['**/*.spec.ts', '**/*.spec.js', '**/*.test.ts', '**/*.test.js'],
    },
    'logging': {
        'level': 'INFO',
        'file': None,
    },
    'watch': {
        'interval': 1.0,
    },
}


class ConfigManager:
    """Manages configuration loading and merging"""

    def __init__(self, config_path: str, environment: Optional[str] = None, env_file: Optional[str] = None):
        self.config_path = Path(config_path)
        self.environment = environment
        self.env_file = env_file
        self.config: Dict[str, Any] = {}

    def load_config(self) -> Dict[str, Any]:
        """Load and merge configuration files"""
        load_dotenv(self.env_file or find_dotenv(usecwd=True))

        self.config = copy.deepcopy(DEFAULT_CONFIG)

        # Load main config
        if self.config_path.exists():
            self.config = self._merge_configs(self.config, self._read_yaml(self.config_path))

        # Load environment specific config
        if self.environment:
            env_config_path = self.config_path.parent / 'environments' / f'{self.environment}.yaml'
            if env_config_path.exists():
                env_config = self._read_yaml(env_config_path)

                # Handle overrides section specially
                if 'overrides' in env_config:
                    overrides = env_config.pop('overrides')
                    # Apply overrides to base config first
                    self._apply_overrides(self.config, overrides)

                # Then merge the rest of env config
                self.config = self._merge_configs(self.config, env_config)
            else:
                logger.warning(f"Environment config not found: {env_config_path}")

        # Process environment variables
        self.config = self._process_env_vars(self.config)

        logger.info(f"Configuration loaded for environment: {self.environment or 'default'}")

        return self.config

    def _read_yaml(self, path: Path) -> Dict[str, Any]:
        try:
            with open(path, 'r', encoding='utf-8') as f:
                data = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise ConfigError(f"Invalid YAML in {path}: {e}") from e

        if data is None:
            return {}
        if not isinstance(data, dict):
            raise ConfigError(f"Expected a mapping at the top of {path}")
        return data

    def _merge_configs(self, base: Dict, override: Dict) -> Dict:
        """Deep merge two dictionaries"""
        result = base.copy()

        for key, value in override.items():
            if key in result and isinstance(result[key], dict) and isinstance(value, dict):
                result[key] = self._merge_configs(result[key], value)
            else:
                result[key] = value

        return result

    def _apply_overrides(self, base: Dict, overrides: Dict) -> None:
        """Apply overrides from environment config to base config"""
        for section, values in overrides.items():
            if section in base and isinstance(values, dict) and isinstance(base[section], dict):
                base[section].update(values)
            else:
                base[section] = values

    def _process_env_vars(self, config: Any) -> Any:
        """Replace ${VAR} with environment variables"""
        if isinstance(config, dict):
            return {k: self._process_env_vars(v) for k, v in config.items()}
        elif isinstance(config, list):
            return [self._process_env_vars(item) for item in config]
        elif isinstance(config, str) and config.startswith('${') and config.endswith('}'):
            var_name = config[2:-1]
            return os.environ.get(var_name, config)
        else:
            return config

    def get(self, key: str, default: Any = None) -> Any:
        """Get configuration value by key (supports dot notation)"""
        return deep_get(self.config, key, default)
