"""Mealy logging interface for Python's logging library."""

import time
import logging
import contextlib

from mealy.logging.base import BaseLogger


class PythonLogger(BaseLogger):
    """Mealy logging interface for Python's logging library."""

    def __init__(self, *args, log_level: str) -> None:
        super().__init__(*args)

        logging.basicConfig(
            format=(
                "[%(asctime)s] [%(process)d] [%(levelname)s] "
                "[%(name)s] %(message)s"
            ),
            datefmt="%Y-%m-%d %H:%M:%S %z",
            level=getattr(logging, log_level),
        )
        self.logger = logging.getLogger('mealy')
        self.logger.setLevel(getattr(logging, log_level))
        self.logger.info(f"Started logger with level {log_level}")

    @contextlib.contextmanager
    def process_run(self, definition, mode):
        """Process a machine run, logging information to the Python logger."""
        self.logger.info(f"Started {mode} of {definition.name}")
        try:
            time_start = time.time()
            yield
            duration = time.time() - time_start
        except Exception:
            self.logger.exception(
                f"Error during {mode} of {definition.name}",
            )
            raise

        self.logger.info(
            f"Completed {mode} of {definition.name} in {duration:.2f} seconds",
        )

    def transition(self, definition, token, from_state, to_state):
        """Log each transition at debug level."""
        self.logger.debug(
            f"{definition.name}: {from_state!r} -> {to_state!r} "
            f"on {token!r}",
        )

    def unexpected_token(self, definition, error):
        """Log the state and token that stopped the machine."""
        self.logger.warning(f"{definition.name}: {error}")

    def __getattr__(self, name):
        """Fall back to the logger API."""
        return getattr(self.logger, name)
