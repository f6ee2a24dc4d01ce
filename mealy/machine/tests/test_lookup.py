import copy
import pickle

import pytest

from mealy.machine import ANY, Rule, Exact, lookup, UnexpectedToken

TRANSITIONS = {
    'start': (
        Rule(label=Exact(1), target='one'),
        Rule(label=Exact(range(0, 5)), target='small'),
        Rule(label=ANY, target='other'),
    ),
    'end': (),
}


@pytest.mark.parametrize('token, target', [
    (1, 'one'),
    (3, 'small'),
    (7, 'other'),
])
def test_first_matching_rule_wins(token, target):
    assert lookup(TRANSITIONS, 'start', token).target == target


def test_wildcard_shadows_later_rules():
    transitions = {'start': (
        Rule(label=ANY, target='any'),
        Rule(label=Exact(1), target='one'),
    )}
    assert lookup(transitions, 'start', 1).target == 'any'


def test_no_matching_rule_raises():
    with pytest.raises(UnexpectedToken) as excinfo:
        lookup(TRANSITIONS, 'end', 1)
    assert excinfo.value.state == 'end'
    assert excinfo.value.token == 1


def test_unknown_state_raises():
    with pytest.raises(UnexpectedToken):
        lookup(TRANSITIONS, 'nowhere', 1)


def test_unexpected_token_message():
    error = UnexpectedToken('start', 2)
    assert str(error) == "Unexpected token 2 in state 'start'"
    assert error == UnexpectedToken('start', 2)
    assert isinstance(error, ValueError)


def test_unexpected_token_survives_pickling_and_copying():
    error = UnexpectedToken('start', 2)

    for clone in (pickle.loads(pickle.dumps(error)), copy.copy(error)):
        assert clone == error
        assert clone.state == 'start'
        assert clone.token == 2
        assert str(clone) == "Unexpected token 2 in state 'start'"
