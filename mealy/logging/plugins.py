"""Plugin loading and configuration."""
import importlib
from typing import List, Iterable, Optional

from mealy.config import Config, LoggingPluginConfig
from mealy.logging.base import BaseLogger


class PluginConfigurationException(Exception):
    """Raised to signal an invalid plugin that was loaded."""


def register_loggers(
    config: Config,
    logging_plugins: Optional[Iterable[LoggingPluginConfig]] = None,
) -> List[BaseLogger]:
    """
    Iterate through all plugins in the config file and instatiate them.
    """
    if logging_plugins is None:
        logging_plugins = config.logging_plugins
    return [_import_logger(config, x) for x in logging_plugins]


def _import_logger(
    config: Config,
    logger_config: LoggingPluginConfig,
) -> BaseLogger:
    dotted_path = logger_config.dotted_path

    try:
        module_path, klass_name = dotted_path.rsplit(':', 1)
    except ValueError:
        raise PluginConfigurationException(
            f"{dotted_path} must be in the form <module-path>:<class-name>",
        )

    try:
        module = importlib.import_module(module_path)
    except ImportError:
        raise PluginConfigurationException(
            f"{module_path} does not exist on the PYTHONPATH",
        )

    try:
        klass = getattr(module, klass_name)
    except AttributeError:
        raise PluginConfigurationException(
            f"{klass_name} does not exist in module {module_path}",
        )

    if not callable(klass):
        raise PluginConfigurationException(
            f"{dotted_path} must be callable",
        )

    try:
        logger = klass(config, **logger_config.kwargs)
    except TypeError:
        raise PluginConfigurationException(
            f"Could not instantiate logger, {klass_name} must take a config "
            f"argument and any kwargs specified in the plugin configuration.",
        )

    if not isinstance(logger, BaseLogger):
        raise PluginConfigurationException(
            f"{dotted_path} must inherit from mealy.logging.BaseLogger",
        )

    return logger
