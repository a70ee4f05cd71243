import pytest

from dfakit.automaton import DFA

def build_scenario() -> DFA:
    M = DFA()
    M.add_symbol('a')
    M.add_symbol('b')
    M.add_state('q0')
    M.add_state('q1')
    M.set_start('q0')
    M.set_final('q1')
    M.add_transition('q0', 'q1', 'a')
    M.add_transition('q0', 'q0', 'b')
    M.add_transition('q1', 'q0', 'a')
    M.add_transition('q1', 'q1', 'b')
    return M

@pytest.fixture
def scenario() -> DFA:
    """Odd number of a's over {a, b}."""
    return build_scenario()
