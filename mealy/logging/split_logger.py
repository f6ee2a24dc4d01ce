"""Logger for multiple backends."""

import functools
import contextlib
from typing import TYPE_CHECKING, List

from mealy.logging.base import BaseLogger

if TYPE_CHECKING:
    from mealy.config import Config  # noqa


class SplitLogger(BaseLogger):
    """Proxies logging calls to all loggers in a list."""

    def __init__(self, config: 'Config', loggers: List[BaseLogger]) -> None:
        super().__init__(config)

        self.loggers = loggers

        for fn in (
            'debug',
            'info',
            'warning',
            'error',
            'critical',
            'exception',

            'transition',
            'unexpected_token',
        ):
            setattr(self, fn, functools.partial(self._log_all, fn))

        self.process_run = functools.partial(self._log_all_ctx, 'process_run')

    def _log_all(self, name, *args, **kwargs):
        for logger in self.loggers:
            getattr(logger, name)(*args, **kwargs)

    @contextlib.contextmanager
    def _log_all_ctx(self, name, *args, **kwargs):
        with contextlib.ExitStack() as stack:
            for logger in self.loggers:
                logger_ctx = getattr(logger, name)
                stack.enter_context(logger_ctx(*args, **kwargs))
            yield
