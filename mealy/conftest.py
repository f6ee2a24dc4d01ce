"""Global test setup and fixtures."""

import pytest

from mealy.app import App
from mealy.config import Config, LoggingPluginConfig
from mealy.machine import MachineBuilder


def _counter_definition():
    # Reads ones until a zero, then swallows the rest of the input.
    builder = MachineBuilder('counter')

    @builder.on_start('start')
    def reset(context, emit):
        context.count = 0

    @builder.on_read('start', on=1)
    def count(context, emit, token, from_state, to_state):
        context.count += 1

    builder.transition('start', 'end', on=0)
    builder.read('end')

    @builder.on_finish()
    def total(context, emit):
        emit(context.count)
        return context.count

    return builder.build()


TEST_MACHINES = {
    'counter': _counter_definition(),
}


@pytest.fixture()
def counter_definition():
    """A definition counting leading ones, using a context object."""
    return TEST_MACHINES['counter']


def _make_app(**kwargs):
    return App(Config(
        machines=kwargs.get('machines', TEST_MACHINES),
        logging_plugins=kwargs.get('logging_plugins', [
            LoggingPluginConfig(
                dotted_path='logger_plugin:RecordingLogger',
                kwargs={},
            ),
        ]),
    ))


@pytest.fixture()
def app():
    """Create an `App` for testing."""
    return _make_app()


@pytest.fixture()
def custom_app():
    """Return the app factory directly so that we can modify config."""
    return _make_app
