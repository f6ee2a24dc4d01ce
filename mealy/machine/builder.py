"""Declaration of machine definitions."""

import types
from typing import Any, Dict, List, Union, Callable, Optional, Sequence

from mealy.machine.types import (
    Rule,
    Start,
    State,
    Action,
    MachineDefinition,
)
from mealy.machine.labels import ANY, as_label
from mealy.machine.exceptions import DuplicateLabel, InvalidDefinition

States = Union[State, Sequence[State]]


def _as_states(states: States) -> List[State]:
    # Tuples are hashable and so valid states in their own right; only lists
    # fan out to several states.
    if isinstance(states, list):
        return states
    return [states]


class MachineBuilder:
    """
    Accumulates rules and produces an immutable `MachineDefinition`.

    With `strict` set, declaring the same label twice for one state is an
    error rather than a silently shadowed rule.
    """

    def __init__(self, name: str = 'machine', *, strict: bool = False) -> None:
        self.name = name
        self.strict = strict
        self._start: Optional[Start] = None
        self._finish: Optional[Action] = None
        self._transitions: Dict[State, List[Rule]] = {}

    def initial_state(
        self,
        state: State,
        action: Optional[Action] = None,
    ) -> 'MachineBuilder':
        """Declare the state a run starts in."""
        self._start = Start(state=state, action=action)
        return self

    def transition(
        self,
        from_: States,
        to: State,
        on: Any = ANY,
        action: Optional[Action] = None,
    ) -> 'MachineBuilder':
        """
        Declare a transition out of one state, or a list of states.

        `on` is converted with `as_label`; leaving it out matches any token.
        """
        label = as_label(on)
        for origin in _as_states(from_):
            rules = self._transitions.setdefault(origin, [])
            if self.strict and any(x.label == label for x in rules):
                raise DuplicateLabel(
                    f"Label {label} is declared twice for state {origin!r} "
                    f"in {self.name}",
                )
            rules.append(Rule(label=label, target=to, action=action))
        return self

    def read(
        self,
        state: States,
        on: Any = ANY,
        action: Optional[Action] = None,
    ) -> 'MachineBuilder':
        """Declare a loop consuming tokens without leaving `state`."""
        for one_state in _as_states(state):
            self.transition(one_state, one_state, on=on, action=action)
        return self

    def finish(self, action: Optional[Action]) -> 'MachineBuilder':
        """Declare the action fired once the input is exhausted."""
        self._finish = action
        return self

    def on_start(self, state: State) -> Callable[[Action], Action]:
        """Decorator form of `initial_state`."""
        def decorator(fn: Action) -> Action:
            self.initial_state(state, fn)
            return fn
        return decorator

    def on_transition(
        self,
        from_: States,
        to: State,
        on: Any = ANY,
    ) -> Callable[[Action], Action]:
        """Decorator form of `transition`."""
        def decorator(fn: Action) -> Action:
            self.transition(from_, to, on=on, action=fn)
            return fn
        return decorator

    def on_read(
        self,
        state: States,
        on: Any = ANY,
    ) -> Callable[[Action], Action]:
        """Decorator form of `read`."""
        def decorator(fn: Action) -> Action:
            self.read(state, on=on, action=fn)
            return fn
        return decorator

    def on_finish(self) -> Callable[[Action], Action]:
        """Decorator form of `finish`."""
        def decorator(fn: Action) -> Action:
            self.finish(fn)
            return fn
        return decorator

    def build(self) -> MachineDefinition:
        """Freeze the declarations into a definition."""
        if self._start is None:
            raise InvalidDefinition(
                f"No initial state declared for {self.name}",
            )

        return MachineDefinition(
            name=self.name,
            transitions=types.MappingProxyType({
                state: tuple(rules)
                for state, rules in self._transitions.items()
            }),
            start=self._start,
            finish=self._finish,
        )
