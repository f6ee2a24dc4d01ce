"""Shared types for state machine definitions and execution."""

from typing import Any, Tuple, Mapping, Callable, Hashable, Optional, NamedTuple

from mealy.machine.labels import Label

State = Hashable
Emit = Callable[[Any], None]
Action = Callable[..., Any]


class Rule(NamedTuple):
    """A single transition arrow out of a state."""
    label: Label
    target: State
    action: Optional[Action] = None


class Start(NamedTuple):
    """The state a run begins in, and the action fired on start up."""
    state: State
    action: Optional[Action] = None


Transitions = Mapping[State, Tuple[Rule, ...]]


class MachineDefinition(NamedTuple):
    """
    An immutable Mealy machine definition.

    Safe to share between any number of concurrent runs; all per-run state
    lives in the engine.
    """
    transitions: Transitions
    start: Start
    finish: Optional[Action] = None
    name: str = 'machine'

    def rules_for(self, state: State) -> Tuple[Rule, ...]:
        """The rules leaving `state`, in declaration order."""
        return self.transitions.get(state, ())

    def all_states(self) -> Tuple[State, ...]:
        """Every state mentioned as a source, target or the start state."""
        seen = {self.start.state: None}
        for source, rules in self.transitions.items():
            seen.setdefault(source, None)
            for rule in rules:
                seen.setdefault(rule.target, None)
        return tuple(seen)
