"""Logging plugin subsystem."""

from mealy.logging.base import BaseLogger
from mealy.logging.plugins import (
    PluginConfigurationException,
    register_loggers,
)
from mealy.logging.split_logger import SplitLogger
from mealy.logging.python_logger import PythonLogger

__all__ = (
    'BaseLogger',
    'SplitLogger',
    'PythonLogger',
    'register_loggers',
    'PluginConfigurationException',
)
