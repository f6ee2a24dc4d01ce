"""Loading of machine configuration."""

from mealy.config.model import Config, LoggingPluginConfig
from mealy.config.loader import yaml_load, load_config
from mealy.config.exceptions import ConfigError

__all__ = (
    'Config',
    'yaml_load',
    'ConfigError',
    'load_config',
    'LoggingPluginConfig',
)
