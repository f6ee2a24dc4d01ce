"""Selection of the rule that fires for an input token."""

from typing import Any

from mealy.machine.types import Rule, State, Transitions
from mealy.machine.exceptions import UnexpectedToken


def lookup(transitions: Transitions, state: State, token: Any) -> Rule:
    """
    Find the first rule out of `state` whose label matches `token`.

    Rules are scanned in declaration order, so a wildcard declared early
    shadows anything after it. Raises `UnexpectedToken` if nothing matches,
    including when `state` has no rules at all.
    """
    for rule in transitions.get(state, ()):
        if rule.label.matches(token):
            return rule
    raise UnexpectedToken(state, token)
