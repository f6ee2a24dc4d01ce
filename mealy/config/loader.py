"""Unpacking of parsed YAML into machine definitions."""

import re
import importlib
import importlib.resources
from typing import IO, Any, Dict, List, Union, Callable

import yaml
import jsonschema
import jsonschema.exceptions

from mealy.machine import (
    ANY,
    Exact,
    Label,
    MachineBuilder,
    DuplicateLabel,
    MachineDefinition,
)
from mealy.config.model import Config, LoggingPluginConfig
from mealy.config.exceptions import ConfigError

Yaml = Dict[str, Any]
Path = List[str]


def yaml_load(stream: Union[IO[str], str]) -> Any:
    """Parse the first YAML document from the given stream."""
    return yaml.load(stream, getattr(yaml, 'CSafeLoader', yaml.SafeLoader))


def load_config(yaml: Yaml) -> Config:
    """Unpack a parsed YAML file into a `Config` object."""
    yaml = _normalise_on_keys(yaml)
    _schema_validate(yaml)

    yaml_logging_plugins = yaml.get('plugins', {}).get('logging', [])

    return Config(
        machines={
            name: _load_machine(['machines', name], name, yaml_machine)
            for name, yaml_machine in yaml['machines'].items()
        },
        logging_plugins=_load_logging_plugins(yaml_logging_plugins),
    )


def _normalise_on_keys(yaml: Yaml) -> Yaml:
    # YAML 1.1 reads a bare `on` key as the boolean `True`.
    if not isinstance(yaml, dict):
        return yaml

    machines = yaml.get('machines')
    if not isinstance(machines, dict):
        return yaml

    def fix(rule: Any) -> Any:
        if isinstance(rule, dict) and True in rule:
            rule = dict(rule)
            rule['on'] = rule.pop(True)
        return rule

    new_machines = {}
    for name, machine in machines.items():
        if isinstance(machine, dict):
            machine = dict(machine)
            for key in ('transitions', 'reads'):
                if isinstance(machine.get(key), list):
                    machine[key] = [fix(x) for x in machine[key]]
        new_machines[name] = machine

    return {**yaml, 'machines': new_machines}


def _schema_validate(config: Yaml) -> None:
    schema_raw = importlib.resources.files(
        'mealy.config',
    ).joinpath('schema.yaml').read_text(encoding='utf-8')
    schema_yaml = yaml_load(schema_raw)

    try:
        jsonschema.validate(config, schema_yaml)
    except jsonschema.exceptions.ValidationError as e:
        path = '.'.join(str(x) for x in e.absolute_path) or '<root>'
        raise ConfigError(
            f"Could not validate config file against schema: {e.message} "
            f"at {path}",
        ) from None


def _load_machine(
    path: Path,
    name: str,
    yaml_machine: Yaml,
) -> MachineDefinition:
    builder = MachineBuilder(name, strict=yaml_machine.get('strict', False))

    yaml_initial_state = yaml_machine['initial_state']
    builder.initial_state(
        yaml_initial_state['state'],
        _load_action(
            path + ['initial_state', 'action'],
            yaml_initial_state.get('action'),
        ),
    )

    try:
        for idx, yaml_transition in enumerate(
            yaml_machine.get('transitions', []),
        ):
            transition_path = path + ['transitions', str(idx)]
            builder.transition(
                yaml_transition['from'],
                yaml_transition['to'],
                on=_load_label(
                    transition_path + ['on'],
                    yaml_transition.get('on', {'any': True}),
                ),
                action=_load_action(
                    transition_path + ['action'],
                    yaml_transition.get('action'),
                ),
            )

        for idx, yaml_read in enumerate(yaml_machine.get('reads', [])):
            read_path = path + ['reads', str(idx)]
            builder.read(
                yaml_read['state'],
                on=_load_label(
                    read_path + ['on'],
                    yaml_read.get('on', {'any': True}),
                ),
                action=_load_action(
                    read_path + ['action'],
                    yaml_read.get('action'),
                ),
            )
    except DuplicateLabel as e:
        raise ConfigError(f"{e} (at {'.'.join(path)})") from None

    builder.finish(_load_action(
        path + ['finish'],
        yaml_machine.get('finish'),
    ))

    return builder.build()


def _load_label(path: Path, yaml_label: Any) -> Label:
    if not isinstance(yaml_label, dict):
        return Exact(yaml_label)

    if 'any' in yaml_label:
        return ANY

    if 'pattern' in yaml_label:
        try:
            return Exact(re.compile(yaml_label['pattern']))
        except re.error as e:
            raise ConfigError(
                f"Invalid pattern at {'.'.join(path)}: {e}",
            ) from None

    if 'range' in yaml_label:
        start, stop = yaml_label['range']
        return Exact(range(start, stop))

    if 'one_of' in yaml_label:
        return Exact(tuple(yaml_label['one_of']))

    raise ConfigError(  # pragma: no cover
        f"Unknown label at {'.'.join(path)}",
    )


def _load_action(path: Path, dotted_path: Any) -> Union[Callable, None]:
    if dotted_path is None:
        return None

    module_path, attr_path = dotted_path.split(':', 1)
    location = '.'.join(path)

    try:
        module = importlib.import_module(module_path)
    except ImportError:
        raise ConfigError(
            f"{module_path} does not exist on the PYTHONPATH (at {location})",
        ) from None

    action = module
    try:
        for attr in attr_path.split('.'):
            action = getattr(action, attr)
    except AttributeError:
        raise ConfigError(
            f"{attr_path} does not exist in module {module_path} "
            f"(at {location})",
        ) from None

    if not callable(action):
        raise ConfigError(f"{dotted_path} must be callable (at {location})")

    return action


def _load_logging_plugins(
    yaml_logging_plugins: List[Yaml],
) -> List[LoggingPluginConfig]:
    return [
        LoggingPluginConfig(
            dotted_path=x['class'],
            kwargs=x.get('kwargs', {}),
        )
        for x in yaml_logging_plugins
    ]
