from collections.abc import Sequence

import torch

from .automaton import DFA, InvalidSymbolError

class CompiledDFA:
    """A DFA lowered to dense tensors so that a whole batch of strings can be
    recognized with one table lookup per time step.

    States and symbols are numbered in insertion order. The table has one
    extra row, ``reject_state``, which absorbs every undefined transition and
    is never accepting. When the source automaton has no start state, the
    walk begins in ``reject_state``.
    """

    alphabet: tuple[str, ...]
    transitions: torch.Tensor
    accept_mask: torch.Tensor
    start_state: int
    reject_state: int
    device: torch.device

    def __init__(self,
        *,
        alphabet: tuple[str, ...],
        transitions: torch.Tensor,
        accept_mask: torch.Tensor,
        start_state: int,
        device: torch.device
    ):
        super().__init__()
        num_rows = transitions.size(0)
        if transitions.size() != (num_rows, len(alphabet)):
            raise ValueError(
                f'transition table of size {tuple(transitions.size())} does not '
                f'match alphabet of size {len(alphabet)}'
            )
        if accept_mask.size() != (num_rows,):
            raise ValueError('accept mask must have one entry per table row')
        if not 0 <= start_state < num_rows:
            raise ValueError
        self.alphabet = alphabet
        self.transitions = transitions
        self.accept_mask = accept_mask
        self.start_state = start_state
        self.reject_state = num_rows - 1
        self.device = device
        self._symbol_to_int = { a: i for i, a in enumerate(alphabet) }

    @staticmethod
    def from_dfa(dfa: DFA, device: torch.device | None=None) -> 'CompiledDFA':
        if device is None:
            device = torch.device('cpu')
        alphabet = dfa.alphabet
        state_to_int = { q.name: i for i, q in enumerate(dfa.states) }
        reject_state = len(state_to_int)
        transitions = torch.full(
            (reject_state + 1, len(alphabet)),
            reject_state,
            dtype=torch.long,
            device=device
        )
        accept_mask = torch.zeros(reject_state + 1, dtype=torch.bool, device=device)
        symbol_to_int = { a: i for i, a in enumerate(alphabet) }
        for q, a, r in dfa.arcs():
            # Transitions to unknown names stay on the reject row.
            if r in state_to_int:
                transitions[state_to_int[q], symbol_to_int[a]] = state_to_int[r]
        for q in dfa.final_states:
            accept_mask[state_to_int[q]] = True
        start = dfa.start_state
        return CompiledDFA(
            alphabet=alphabet,
            transitions=transitions,
            accept_mask=accept_mask,
            start_state=reject_state if start is None else state_to_int[start],
            device=device
        )

    def encode(self, strings: Sequence[str]) -> tuple[torch.Tensor, torch.Tensor]:
        """Converts strings to a padded tensor of symbol indices.

        Returns:
            A tensor of size (batch_size, max_length) and a tensor of lengths
            of size (batch_size,). Padding positions hold 0.

        Raises:
            InvalidSymbolError: If a string contains a symbol that is not in
            the alphabet.
        """
        max_length = max((len(s) for s in strings), default=0)
        symbols = torch.zeros((len(strings), max_length), dtype=torch.long)
        for i, s in enumerate(strings):
            for j, a in enumerate(s):
                index = self._symbol_to_int.get(a)
                if index is None:
                    raise InvalidSymbolError(a, j)
                symbols[i, j] = index
        lengths = torch.tensor([len(s) for s in strings], dtype=torch.long)
        return symbols.to(self.device), lengths.to(self.device)

    def accepts_batch(self, strings: Sequence[str]) -> torch.Tensor:
        """Returns a boolean tensor of size (batch_size,) telling which of
        ``strings`` are accepted."""
        symbols, lengths = self.encode(strings)
        current = torch.full(
            (len(strings),),
            self.start_state,
            dtype=torch.long,
            device=self.device
        )
        for t in range(symbols.size(1)):
            next_state = self.transitions[current, symbols[:, t]]
            # Strings that have already ended keep their state.
            current = torch.where(t < lengths, next_state, current)
        return self.accept_mask[current]
