"""Mealy machines for lexers and protocol decoders."""

from mealy.machine import (
    ANY,
    Exact,
    Mealy,
    Wildcard,
    MachineBuilder,
    UnexpectedToken,
    MachineDefinition,
    run,
    execute,
)

__all__ = (
    'ANY',
    'run',
    'Exact',
    'Mealy',
    'execute',
    'Wildcard',
    'MachineBuilder',
    'UnexpectedToken',
    'MachineDefinition',
)
