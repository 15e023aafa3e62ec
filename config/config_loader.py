"""
Configuration Loader

Loads suite settings from YAML files with per-environment overrides.
"""

from pathlib import Path
from typing import Any, Dict, Optional

import yaml

from .env_config import ConfigError

CONFIG_DIR = Path(__file__).resolve().parent


class ConfigLoader:
    """Load and merge configuration from YAML files."""

    def __init__(self, config_dir: Optional[Path] = None, environment: str = "dev"):
        self.config_dir = Path(config_dir) if config_dir else CONFIG_DIR
        self.environment = environment
        self._cache = {}

    def load(self, config_name: str) -> Dict[str, Any]:
        """
        Load configuration from YAML files with environment overrides.

        Loading order:
        1. config/base/{config_name}.yaml
        2. config/environments/{environment}.yaml (overrides)
        3. config/local/overrides.yaml (overrides, gitignored)

        Args:
            config_name: Name of config file (without .yaml extension)

        Returns:
            Merged configuration dictionary
        """
        if config_name in self._cache:
            return self._cache[config_name]

        base_path = self.config_dir / "base" / f"{config_name}.yaml"
        if not base_path.exists():
            raise ConfigError(f"Base config not found: {base_path}")

        config = self._read(base_path)

        # The selected environment file must exist
        env_path = self.config_dir / "environments" / f"{self.environment}.yaml"
        if not env_path.exists():
            raise ConfigError(f"No config file for ENV={self.environment}: {env_path}")
        config = self._merge_config(config, self._read(env_path).get(config_name) or {})

        local_path = self.config_dir / "local" / "overrides.yaml"
        if local_path.exists():
            config = self._merge_config(config, self._read(local_path).get(config_name) or {})

        self._cache[config_name] = config
        return config

    def _read(self, path: Path) -> Dict[str, Any]:
        with open(path) as f:
            return yaml.safe_load(f) or {}

    def _merge_config(self, base: Dict, override: Dict) -> Dict:
        """Deep merge override config into base config."""
        result = base.copy()
        for key, value in override.items():
            if key in result and isinstance(result[key], dict) and isinstance(value, dict):
                result[key] = self._merge_config(result[key], value)
            else:
                result[key] = value
        return result
