"""Core App object that holds loaded machines and logging."""
import types
from typing import Any, Iterable, Iterator

from mealy.config import Config
from mealy.logging import BaseLogger, SplitLogger, register_loggers
from mealy.machine import MachineDefinition, run, execute


class UnknownMachine(ValueError):
    """Represents a machine not in the configuration."""


class App:
    """Core application state."""

    config: Config
    logger: BaseLogger

    def __init__(self, config: Config) -> None:
        """Initialisation of the app state."""
        self.config = config
        self.logger = SplitLogger(
            self.config,
            loggers=register_loggers(self.config),
        )

    def get_machine(self, name: str) -> MachineDefinition:
        """Get a configured machine definition by name."""
        try:
            return self.config.machines[name]
        except KeyError:
            raise UnknownMachine(name) from None

    def run(self, name: str, tokens: Iterable[Any]) -> Iterator[Any]:
        """
        Stream the emits of the named machine over `tokens`.

        Configured actions are called with a fresh, empty namespace as their
        context for each run.
        """
        return run(
            self.get_machine(name),
            tokens,
            context=types.SimpleNamespace(),
            logger=self.logger,
        )

    def execute(self, name: str, tokens: Iterable[Any]) -> Any:
        """Execute the named machine over `tokens`, returning its result."""
        return execute(
            self.get_machine(name),
            tokens,
            context=types.SimpleNamespace(),
            logger=self.logger,
        )
