import numpy as np

from .automaton import DFA, InvalidSymbolError

def _state_index(dfa: DFA) -> dict[str, int]:
    return { q.name: i for i, q in enumerate(dfa.states) }

def transition_matrix(dfa: DFA, symbol: str) -> np.ndarray:
    """Returns the boolean transition matrix of ``symbol``.

    The matrix is indexed by state position in insertion order. Entry
    [i, j] is True iff state i moves to state j on ``symbol``.

    A transition to a name that is not a state of ``dfa`` leaves its row
    empty, so it rejects like an undefined transition.

    Raises:
        InvalidSymbolError: If ``symbol`` is not in the alphabet.
    """
    if symbol not in dfa.alphabet:
        raise InvalidSymbolError(symbol)
    index = _state_index(dfa)
    n = len(index)
    M = np.zeros((n, n), dtype=bool)
    for i, q in enumerate(dfa.states):
        j = index.get(q.transition(symbol))
        if j is not None:
            M[i, j] = True
    return M

def transition_matrices(dfa: DFA) -> dict[str, np.ndarray]:
    """Returns a dictionary of symbols to transition matrices."""
    return { a: transition_matrix(dfa, a) for a in dfa.alphabet }

def init_vector(dfa: DFA) -> np.ndarray:
    λ = np.zeros(len(dfa), dtype=bool)
    for i, q in enumerate(dfa.states):
        λ[i] = q.name == dfa.start_state
    return λ

def final_vector(dfa: DFA) -> np.ndarray:
    ρ = np.zeros(len(dfa), dtype=bool)
    for i, q in enumerate(dfa.states):
        ρ[i] = q.is_final
    return ρ

def accepts_by_matrices(dfa: DFA, string: str) -> bool:
    """Decides acceptance by pushing the initial vector through one
    transition matrix per symbol of ``string``."""
    for i, a in enumerate(string):
        if a not in dfa.alphabet:
            raise InvalidSymbolError(a, i)
    T = transition_matrices(dfa)
    v = init_vector(dfa)
    for a in string:
        # Boolean semiring: or over and.
        v = (v[:, None] & T[a]).any(axis=0)
    return bool((v & final_vector(dfa)).any())
