import re
import types
import contextlib

import yaml
import pytest

from mealy.config import (
    Config,
    ConfigError,
    LoggingPluginConfig,
    load_config,
)
from mealy.machine import ANY, Rule, Exact, Start, run, execute


def yaml_data(name: str):
    with open(f'test_data/{name}.yaml') as f:
        return yaml.safe_load(f)


@contextlib.contextmanager
def assert_config_error(message: str):
    with pytest.raises(ConfigError) as excinfo:
        yield
    assert str(excinfo.value).startswith(message)


def test_trivial_config():
    config = load_config(yaml_data('trivial'))

    assert config == Config(
        machines={'example': config.machines['example']},
        logging_plugins=[],
    )
    definition = config.machines['example']
    assert definition.name == 'example'
    assert definition.start == Start(state='start', action=None)
    assert dict(definition.transitions) == {}
    assert definition.finish is None


def test_counter_config():
    import counter_actions

    config = load_config(yaml_data('counter'))
    definition = config.machines['counter']

    assert definition.start == Start('start', counter_actions.reset)
    assert definition.rules_for('start') == (
        Rule(label=Exact('0'), target='end', action=None),
        Rule(label=Exact('1'), target='start', action=counter_actions.count),
    )
    assert definition.rules_for('end') == (
        Rule(label=ANY, target='end', action=None),
    )
    assert definition.finish is counter_actions.total
    assert config.logging_plugins == [
        LoggingPluginConfig(
            dotted_path='mealy.logging:PythonLogger',
            kwargs={'log_level': 'DEBUG'},
        ),
    ]


def test_loaded_machine_runs():
    config = load_config(yaml_data('counter'))

    counter = config.machines['counter']
    assert execute(counter, '11101', context=types.SimpleNamespace()) == 3

    echo = config.machines['echo']
    assert list(run(echo, 'abc', context=types.SimpleNamespace())) == [
        'a',
        'b',
        'c',
    ]


def test_bare_on_key_is_read_as_label():
    # PyYAML loads an unquoted `on` key as `True`
    data = yaml.safe_load("""
machines:
  example:
    initial_state:
      state: start
    transitions:
      - from: start
        to: end
        on: 1
    reads:
      - state: end
        on: 2
""")
    definition = load_config(data).machines['example']

    assert definition.rules_for('start')[0].label == Exact(1)
    assert definition.rules_for('end')[0].label == Exact(2)


@pytest.mark.parametrize('yaml_label, label', [
    (5, Exact(5)),
    ('a', Exact('a')),
    (None, Exact(None)),
    ({'pattern': '[a-z]+'}, Exact(re.compile('[a-z]+'))),
    ({'range': [0, 10]}, Exact(range(0, 10))),
    ({'one_of': [1, 2, 3]}, Exact((1, 2, 3))),
    ({'any': True}, ANY),
])
def test_label_formats(yaml_label, label):
    config = load_config({'machines': {'example': {
        'initial_state': {'state': 'start'},
        'reads': [{'state': 'start', 'on': yaml_label}],
    }}})

    assert config.machines['example'].rules_for('start')[0].label == label


def test_several_source_states():
    config = load_config({'machines': {'example': {
        'initial_state': {'state': 'a'},
        'transitions': [{'from': ['a', 'b'], 'to': 'c'}],
    }}})
    definition = config.machines['example']

    assert definition.rules_for('a') == definition.rules_for('b')


def test_missing_machines_is_invalid():
    with assert_config_error(
        "Could not validate config file against schema",
    ):
        load_config({})


def test_unknown_key_is_invalid():
    with assert_config_error(
        "Could not validate config file against schema",
    ):
        load_config({'machines': {'example': {
            'initial_state': {'state': 'start'},
            'gates': [],
        }}})


def test_invalid_dotted_path_is_invalid():
    with assert_config_error(
        "Could not validate config file against schema",
    ):
        load_config({'machines': {'example': {
            'initial_state': {'state': 'start', 'action': 'no colon'},
        }}})


def test_invalid_pattern():
    with assert_config_error("Invalid pattern at machines.example.reads.0"):
        load_config({'machines': {'example': {
            'initial_state': {'state': 'start'},
            'reads': [{'state': 'start', 'on': {'pattern': '('}}],
        }}})


def test_missing_action_module():
    with assert_config_error("does_not_exist does not exist on the PYTHONPATH"):
        load_config({'machines': {'example': {
            'initial_state': {
                'state': 'start',
                'action': 'does_not_exist:action',
            },
        }}})


def test_missing_action_attribute():
    with assert_config_error(
        "does_not_exist does not exist in module counter_actions",
    ):
        load_config(yaml_data('missing_action'))


def test_action_not_callable():
    with assert_config_error("counter_actions:NOT_CALLABLE must be callable"):
        load_config({'machines': {'example': {
            'initial_state': {
                'state': 'start',
                'action': 'counter_actions:NOT_CALLABLE',
            },
        }}})


def test_strict_machine_rejects_duplicate_labels():
    with assert_config_error("Label 1 is declared twice"):
        load_config(yaml_data('duplicate_strict'))


def test_non_strict_machine_accepts_duplicate_labels():
    data = yaml_data('duplicate_strict')
    data['machines']['duplicate']['strict'] = False

    definition = load_config(data).machines['duplicate']

    assert len(definition.rules_for('start')) == 2
