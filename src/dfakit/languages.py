import re

from .automaton import DFA

def _build(
    alphabet: str,
    states: list[str],
    transitions: list[tuple[str, str, str]],
    start: str,
    finals: list[str]
) -> DFA:
    M = DFA()
    for a in alphabet:
        M.add_symbol(a)
    for q in states:
        M.add_state(q)
    for q, a, r in transitions:
        M.add_transition(q, r, a)
    M.set_start(start)
    for q in finals:
        M.set_final(q)
    return M

def even_symbol_count_dfa(symbol: str='a', other: str='b') -> DFA:
    """Strings over {symbol, other} with an even number of ``symbol``."""
    if symbol == other:
        raise ValueError('the two symbols must be different')
    return _build(
        symbol + other,
        ['even', 'odd'],
        [
            ('even', symbol, 'odd'),
            ('even', other, 'even'),
            ('odd', symbol, 'even'),
            ('odd', other, 'odd')
        ],
        'even',
        ['even']
    )

def parity_dfa() -> DFA:
    """The language of binary strings with an odd number of 1s."""
    return _build(
        '01',
        ['q_even', 'q_odd'],
        [
            ('q_even', '0', 'q_even'),
            ('q_even', '1', 'q_odd'),
            ('q_odd', '0', 'q_odd'),
            ('q_odd', '1', 'q_even')
        ],
        'q_even',
        ['q_odd']
    )

def first_dfa() -> DFA:
    """Binary strings whose first symbol is 1. Reading 0 first gets stuck."""
    return _build(
        '01',
        ['q0', 'q1'],
        [
            ('q0', '1', 'q1'),
            ('q1', '0', 'q1'),
            ('q1', '1', 'q1')
        ],
        'q0',
        ['q1']
    )

def repeat_01_dfa() -> DFA:
    return _build(
        '01',
        ['q0', 'q1'],
        [
            ('q0', '0', 'q1'),
            ('q1', '1', 'q0')
        ],
        'q0',
        ['q0']
    )

def all_strings_dfa(alphabet: str='01') -> DFA:
    return _build(
        alphabet,
        ['q0'],
        [('q0', a, 'q0') for a in alphabet],
        'q0',
        ['q0']
    )

def empty_set_dfa(alphabet: str='01') -> DFA:
    return _build(alphabet, ['q0'], [], 'q0', [])

def ends_with_dfa(symbol: str, alphabet: str) -> DFA:
    """Strings over ``alphabet`` whose last symbol is ``symbol``."""
    if symbol not in alphabet:
        raise ValueError(f'symbol {symbol!r} is not in alphabet {alphabet!r}')
    return _build(
        alphabet,
        ['q0', 'q1'],
        [
            (q, a, 'q1' if a == symbol else 'q0')
            for q in ('q0', 'q1')
            for a in alphabet
        ],
        'q0',
        ['q1']
    )

def get_automaton(name: str) -> DFA:
    match name:
        case 'even-a':
            return even_symbol_count_dfa('a', 'b')
        case 'even-b':
            return even_symbol_count_dfa('b', 'a')
        case 'parity':
            return parity_dfa()
        case 'first':
            return first_dfa()
        case 'repeat-01':
            return repeat_01_dfa()
        case 'all-strings':
            return all_strings_dfa()
        case 'empty-set':
            return empty_set_dfa()
        case _ if (match := re.match(r'^ends-with-(.)$', name)):
            return ends_with_dfa(match.group(1), '01')
        case _:
            raise ValueError(f'invalid language name: {name}')
