import copy
from collections.abc import Generator, Iterator

from .formal_description import formal_description
from .state import State

class InvalidSymbolError(ValueError):
    """Raised when a symbol outside the alphabet is given where an alphabet
    symbol is required. ``position`` is its index in the input string, if any."""

    def __init__(self, symbol: str, position: int | None=None):
        if position is None:
            message = f'symbol {symbol!r} is not in the alphabet'
        else:
            message = f'symbol {symbol!r} at position {position} is not in the alphabet'
        super().__init__(message)
        self.symbol = symbol
        self.position = position

class DFA:
    """A deterministic finite automaton with a partial transition function.

    The automaton is built incrementally. Every mutating method validates
    its arguments against the current states and alphabet and returns
    ``False`` without changing anything when they are not satisfied.

    States and symbols keep the order in which they were added, which is
    the order used when the automaton is rendered.
    """

    _states: dict[str, State]
    _alphabet: dict[str, None]
    _start_state: str | None

    def __init__(self):
        super().__init__()
        self._states = {}
        self._alphabet = {}
        self._start_state = None

    # Construction

    def add_state(self, name: str) -> bool:
        """Adds a state that is neither starting nor final.

        Args:
            name (str): The name of the new state.

        Returns:
            bool: False if a state with this name already exists.
        """
        if name in self._states:
            return False
        self._states[name] = State(name)
        return True

    def add_symbol(self, symbol: str) -> None:
        """Adds a symbol to the alphabet. Adding a known symbol does nothing."""
        if not isinstance(symbol, str) or len(symbol) != 1:
            raise ValueError(f'symbol must be a single character, got {symbol!r}')
        self._alphabet[symbol] = None

    def set_final(self, name: str) -> bool:
        state = self._states.get(name)
        if state is None:
            return False
        state.is_final = True
        return True

    def set_start(self, name: str) -> bool:
        """Makes ``name`` the only starting state. The most recent call wins."""
        if name not in self._states:
            return False
        for state in self._states.values():
            state.is_starting = state.name == name
        self._start_state = name
        return True

    def add_transition(self, state_from: str, state_to: str, symbol: str) -> bool:
        """Sets the transition out of ``state_from`` on ``symbol``.

        Any transition previously defined for ``(state_from, symbol)`` is
        replaced.

        Args:
            state_from (str): Name of the source state.
            state_to (str): Name of the destination state.
            symbol (str): A symbol of the alphabet.

        Returns:
            bool: False unless both states exist and the symbol is in the
            alphabet.
        """
        source = self._states.get(state_from)
        if source is None or state_to not in self._states or not self._is_valid_symbol(symbol):
            return False
        source.set_transition(symbol, state_to)
        return True

    # Queries

    def state(self, name: str) -> State | None:
        return self._states.get(name)

    def is_final(self, name: str) -> bool:
        state = self._states.get(name)
        return state is not None and state.is_final

    def is_start(self, name: str) -> bool:
        return self._start_state is not None and name == self._start_state

    @property
    def start_state(self) -> str | None:
        return self._start_state

    @property
    def states(self) -> tuple[State, ...]:
        return tuple(self._states.values())

    @property
    def alphabet(self) -> tuple[str, ...]:
        return tuple(self._alphabet)

    @property
    def sigma(self) -> tuple[str, ...]:
        return self.alphabet

    @property
    def final_states(self) -> tuple[str, ...]:
        return tuple(q.name for q in self._states.values() if q.is_final)

    def arcs(self) -> Generator[tuple[str, str, str], None, None]:
        """Yields ``(source, symbol, destination)`` for every defined
        transition, row by row in state order and symbol order."""
        for q in self._states.values():
            for a in self._alphabet:
                r = q.transition(a)
                if r is not None:
                    yield q.name, a, r

    @property
    def is_complete(self) -> bool:
        return all(
            q.transition(a) is not None
            for q in self._states.values()
            for a in self._alphabet
        )

    # Simulation

    def _step(self, state: State | None, symbol: str) -> State | None:
        # None means the walk is rejected.
        if state is None:
            return None
        destination = state.transition(symbol)
        if destination is None:
            return None
        return self._states.get(destination)

    def _check_string(self, string: str) -> None:
        for i, a in enumerate(string):
            if a not in self._alphabet:
                raise InvalidSymbolError(a, i)

    def run(self, string: str) -> list[str] | None:
        """Returns the names of the states visited while reading ``string``,
        starting with the start state, or None if the walk gets stuck.

        Raises:
            InvalidSymbolError: If ``string`` contains a symbol that is not in
            the alphabet.
        """
        self._check_string(string)
        if self._start_state is None:
            return None
        current = self._states[self._start_state]
        path = [current.name]
        for a in string:
            current = self._step(current, a)
            if current is None:
                return None
            path.append(current.name)
        return path

    def accepts(self, string: str) -> bool:
        """Decides whether ``string`` is in the language of the automaton.

        A missing start state or a missing transition rejects the string.

        Raises:
            InvalidSymbolError: If ``string`` contains a symbol that is not in
            the alphabet.
        """
        self._check_string(string)
        current = None if self._start_state is None else self._states[self._start_state]
        for a in string:
            current = self._step(current, a)
            if current is None:
                return False
        return current is not None and current.is_final

    # Transformations

    def _is_valid_symbol(self, symbol: str) -> bool:
        return symbol in self._alphabet

    def swap(self, symbol_a: str, symbol_b: str) -> 'DFA | None':
        """Returns a new automaton in which every state's transitions on
        ``symbol_a`` and ``symbol_b`` are exchanged.

        The alphabet, state names, start state and final states are carried
        over unchanged. The result shares no state with this automaton.

        Returns:
            DFA | None: None if either symbol is not in the alphabet.
        """
        if not self._is_valid_symbol(symbol_a) or not self._is_valid_symbol(symbol_b):
            return None

        result = DFA()
        for a in self._alphabet:
            result.add_symbol(a)

        for old in self._states.values():
            result.add_state(old.name)
            new = result._states[old.name]
            old.clone_transitions_into(new)
            for a, destination in (
                (symbol_a, old.transition(symbol_b)),
                (symbol_b, old.transition(symbol_a))
            ):
                if destination is None:
                    new.clear_transition(a)
                else:
                    new.set_transition(a, destination)

        if self._start_state is not None:
            result.set_start(self._start_state)
        for name in self.final_states:
            result.set_final(name)

        return result

    def copy(self) -> 'DFA':
        """deep copies the machine"""
        return copy.deepcopy(self)

    # Rendering

    def to_formal_description(self) -> str:
        return formal_description(self)

    def __str__(self) -> str:
        return self.to_formal_description()

    def __repr__(self) -> str:
        return f'DFA({len(self._states)} states, {len(self._alphabet)} symbols)'

    def __len__(self) -> int:
        return len(self._states)

    def __contains__(self, name: object) -> bool:
        return name in self._states

    def __iter__(self) -> Iterator[State]:
        return iter(self.states)
