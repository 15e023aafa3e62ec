# Configuration module
from .config_loader import ConfigLoader
from .env_config import ENV_VARS, ConfigError, EnvVar, read_environment
from .settings import SuiteSettings, load_settings

__all__ = [
    "ConfigError",
    "ConfigLoader",
    "EnvVar",
    "ENV_VARS",
    "SuiteSettings",
    "load_settings",
    "read_environment",
]
