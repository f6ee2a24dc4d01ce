"""CLI handling for `mealy`."""
import json
import logging

import yaml
import click
import layer_loader

from mealy.app import App, UnknownMachine
from mealy.config import ConfigError, yaml_load, load_config
from mealy.logging import PluginConfigurationException
from mealy.machine import UnexpectedToken
from mealy.validation import ValidationError, validate_config
from mealy.visualisation import nodes_for_cytoscape

logger = logging.getLogger(__name__)


@click.group()
@click.option(
    '-c',
    '--config-file',
    'config_files',
    help="Path to a machine config file.",
    type=click.File(encoding='utf-8'),
    required=True,
    multiple=True,
)
@click.pass_context
def main(ctx, config_files):
    """Shared entrypoint configuration."""
    try:
        config_data = layer_loader.load_files(
            config_files,
            loader=yaml_load,
        )
        config = load_config(config_data)
        ctx.obj = App(config)
    except (ConfigError, PluginConfigurationException, yaml.YAMLError):
        logger.exception("Configuration Error")
        click.get_current_context().exit(1)


@main.command()
@click.pass_context
def validate(ctx):
    """Entrypoint for validation of configuration files."""
    app = ctx.obj

    try:
        validate_config(app.config)
    except ValidationError as e:
        msg = f"Validation Error: {e}"
        logger.exception(msg)
        click.get_current_context().exit(1)


def _input_options(fn):
    fn = click.option(
        '-i',
        '--input',
        'input_file',
        help="File to read input from, defaults to stdin.",
        type=click.File(encoding='utf-8'),
        default='-',
    )(fn)
    fn = click.option(
        '--lines/--characters',
        help="Feed the machine whole lines rather than single characters.",
        default=False,
    )(fn)
    return click.argument('machine')(fn)


def _read_tokens(input_file, lines):
    if lines:
        return (line.rstrip('\n') for line in input_file)
    return iter(input_file.read())


@main.command()
@_input_options
@click.pass_context
def run(ctx, machine, input_file, lines):
    """Run a machine over the input, printing each emitted token."""
    app = ctx.obj

    try:
        for token in app.run(machine, _read_tokens(input_file, lines)):
            click.echo(token)
    except (UnknownMachine, UnexpectedToken) as e:
        _fail(e)


@main.command()
@_input_options
@click.pass_context
def execute(ctx, machine, input_file, lines):
    """Execute a machine over the input, printing the final result."""
    app = ctx.obj

    try:
        result = app.execute(machine, _read_tokens(input_file, lines))
    except (UnknownMachine, UnexpectedToken) as e:
        _fail(e)

    if result is not None:
        click.echo(result)


@main.command()
@click.argument('machine')
@click.pass_context
def graph(ctx, machine):
    """Print Cytoscape.js elements describing a machine."""
    app = ctx.obj

    try:
        definition = app.get_machine(machine)
    except UnknownMachine as e:
        _fail(e)

    click.echo(json.dumps(nodes_for_cytoscape(definition), indent=2))


def _fail(error):
    if isinstance(error, UnknownMachine):
        message = f"Unknown machine: {error}"
    else:
        message = str(error)
    click.echo(message, err=True)
    click.get_current_context().exit(1)
