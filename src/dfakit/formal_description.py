from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .automaton import DFA

# Stands in for an undefined transition in the delta table.
EMPTY_TRANSITION = '-'

def _set_line(label: str, items) -> str:
    return ' '.join([label, '=', '{', *items, '}'])

def formal_description(dfa: 'DFA') -> str:
    """Renders the 5-tuple (Q, Sigma, delta, q0, F) of a DFA.

    States and symbols are listed in the order they were added. The delta
    table has one column per symbol and one row per state, separated by
    tabs.
    """
    alphabet = dfa.alphabet
    lines = [
        _set_line('Q', (q.name for q in dfa.states)),
        _set_line('Sigma', alphabet),
        'delta =',
        ''.join(f'\t{a}' for a in alphabet)
    ]
    for q in dfa.states:
        cells = [q.transition(a) for a in alphabet]
        lines.append('\t'.join([
            q.name,
            *(EMPTY_TRANSITION if r is None else r for r in cells)
        ]))
    start = dfa.start_state
    lines.append('q0 =' if start is None else f'q0 = {start}')
    lines.append(_set_line('F', dfa.final_states))
    return '\n'.join(lines) + '\n'
