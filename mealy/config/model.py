"""Data model for configuration format."""

from typing import Dict, List, Mapping, NamedTuple

from mealy.machine import MachineDefinition


class LoggingPluginConfig(NamedTuple):
    """The configuration for a single logging plugin."""
    dotted_path: str
    kwargs: Dict[str, str]


class Config(NamedTuple):
    """
    The top-level configuration object.

    Stores the configured machine definitions, and other system-level
    configuration.
    """
    machines: Mapping[str, MachineDefinition]
    logging_plugins: List[LoggingPluginConfig]
