import pytest

from mealy.app import App, UnknownMachine
from mealy.config import Config
from mealy.logging import SplitLogger


def test_app_runs_machine_by_name(app):
    assert list(app.run('counter', [1, 1, 0, 1])) == [2]


def test_app_executes_machine_by_name(app):
    assert app.execute('counter', [1, 0]) == 1


def test_each_run_gets_fresh_context(app):
    assert app.execute('counter', [1, 1]) == 2
    assert app.execute('counter', [1]) == 1


def test_app_logs_runs(app):
    app.execute('counter', [0])

    [recording_logger] = app.logger.loggers
    assert recording_logger.calls == [
        ('start', 'counter', 'execute'),
        ('transition', 0, 'start', 'end'),
        ('end', 'counter', 'execute'),
    ]


def test_unknown_machine(app):
    with pytest.raises(UnknownMachine):
        app.execute('nope', [])

    with pytest.raises(UnknownMachine):
        app.run('nope', [])


def test_app_without_plugins_has_split_logger():
    app = App(Config(machines={}, logging_plugins=[]))
    assert isinstance(app.logger, SplitLogger)
    assert app.logger.loggers == []
