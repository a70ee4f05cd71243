import pytest
from frozendict import frozendict

from dfakit.state import State

def test_new_state_defaults() -> None:
    q = State('q0')
    assert q.name == 'q0'
    assert not q.is_final
    assert not q.is_starting
    assert q.transitions == {}
    assert q.transition('a') is None

def test_flags_are_independent() -> None:
    q = State('q0')
    q.is_final = True
    assert q.is_final
    assert not q.is_starting
    q.is_starting = True
    q.is_final = False
    assert q.is_starting
    assert not q.is_final

def test_set_transition_overwrites() -> None:
    q = State('q0')
    q.set_transition('a', 'q1')
    q.set_transition('a', 'q2')
    assert q.transition('a') == 'q2'
    assert q.transition('b') is None

def test_clear_transition() -> None:
    q = State('q0')
    q.set_transition('a', 'q1')
    q.clear_transition('a')
    q.clear_transition('b')
    assert q.transition('a') is None

def test_transitions_is_read_only_snapshot() -> None:
    q = State('q0')
    q.set_transition('a', 'q1')
    snapshot = q.transitions
    assert isinstance(snapshot, frozendict)
    assert snapshot == {'a': 'q1'}
    q.set_transition('b', 'q0')
    assert snapshot == {'a': 'q1'}
    with pytest.raises(TypeError):
        snapshot['c'] = 'q0'

def test_clone_transitions_into_is_independent() -> None:
    p = State('p')
    p.set_transition('a', 'p')
    p.set_transition('b', 'q')
    q = State('q')
    q.set_transition('c', 'q')
    p.clone_transitions_into(q)
    assert q.transitions == {'a': 'p', 'b': 'q'}
    q.set_transition('a', 'q')
    assert p.transition('a') == 'p'

def test_name_must_be_str() -> None:
    with pytest.raises(TypeError):
        State(0)

def test_repr_and_str() -> None:
    q = State('q0', is_starting=True, is_final=True)
    assert repr(q) == "State('q0') [starting, final]"
    assert repr(State('q1')) == "State('q1')"
    assert str(q) == 'q0'
