"""Public API for Mealy machines."""

from mealy.machine.api import Mealy
from mealy.machine.types import (
    Rule,
    Start,
    Transitions,
    MachineDefinition,
)
from mealy.machine.engine import Runner, run, execute
from mealy.machine.labels import ANY, Exact, Label, Wildcard, as_label, matches
from mealy.machine.lookup import lookup
from mealy.machine.builder import MachineBuilder
from mealy.machine.exceptions import (
    DuplicateLabel,
    UnexpectedToken,
    InvalidDefinition,
)

__all__ = (
    'ANY',
    'run',
    'Rule',
    'Exact',
    'Label',
    'Mealy',
    'Start',
    'lookup',
    'Runner',
    'execute',
    'matches',
    'as_label',
    'Wildcard',
    'Transitions',
    'DuplicateLabel',
    'MachineBuilder',
    'UnexpectedToken',
    'InvalidDefinition',
    'MachineDefinition',
)
