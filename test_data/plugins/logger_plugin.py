"""Test logger."""

import contextlib

from mealy.logging import BaseLogger


class TestLogger(BaseLogger):
    """This logger is loaded during tests."""
    def __init__(self, config, *args, **kwargs):
        super().__init__(config, *args, **kwargs)
        self.kwargs = kwargs


class RecordingLogger(BaseLogger):
    """Keeps every hook call, in order, for later inspection."""
    def __init__(self, config, *args, **kwargs):
        super().__init__(config, *args, **kwargs)
        self.calls = []

    @contextlib.contextmanager
    def process_run(self, definition, mode):
        self.calls.append(('start', definition.name, mode))
        try:
            yield
        finally:
            self.calls.append(('end', definition.name, mode))

    def transition(self, definition, token, from_state, to_state):
        self.calls.append(('transition', token, from_state, to_state))

    def unexpected_token(self, definition, error):
        self.calls.append(('unexpected', error.state, error.token))


class InvalidLogger(object):
    """
    This logger cannot be loaded.

    It does not inherit from `mealy.logging.BaseLogger`.
    """
    def __init__(self, *args, **kwargs):
        # Note: args/kwargs needed to not trigger the invalid constructor check
        pass


class NoArgsLogger(BaseLogger):
    """This logger has an invalid constructor."""
    def __init__(self):
        pass


def dynamic_logger(config):
    """This is a callable rather than a class."""
    return BaseLogger(config)


NOT_CALLABLE = 'not callable'
