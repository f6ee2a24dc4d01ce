"""Base class for logging plugins."""

import contextlib
from typing import Any, Callable, Iterator, Optional

from mealy.config import Config
from mealy.machine import UnexpectedToken, MachineDefinition


class BaseLogger:
    """Base class for logging plugins."""

    def __init__(self, config: Optional[Config], *args, **kwargs) -> None:
        self.config = config

    @contextlib.contextmanager
    def process_run(
        self,
        definition: MachineDefinition,
        mode: str,
    ) -> Iterator[None]:
        """
        Wraps a whole run of a machine for logging purposes.

        `mode` is either `'run'` or `'execute'`. A streaming run which is
        abandoned by its consumer exits this context with `GeneratorExit`.
        """
        yield

    def transition(
        self,
        definition: MachineDefinition,
        token: Any,
        from_state: Any,
        to_state: Any,
    ) -> None:
        """Logs a rule firing, before its action is invoked."""
        pass

    def unexpected_token(
        self,
        definition: MachineDefinition,
        error: UnexpectedToken,
    ) -> None:
        """Logs a run aborting because no rule matched."""
        pass

    def __getattr__(self, name: str) -> Callable[[str], None]:
        """Implement the Python logger API."""
        if name in (
            'debug',
            'info',
            'warning',
            'error',
            'critical',
            'exception',
        ):
            return self._log_handler

        raise AttributeError(name)

    def _log_handler(self, *args, **kwargs) -> None:
        pass
