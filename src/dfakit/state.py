from frozendict import frozendict

class State:
    """A named state of a DFA together with its row of the transition
    function.

    Transitions point to destination states by name. Whether a symbol or a
    destination is legal is decided by the owning automaton, not here.
    """

    name: str
    is_final: bool
    is_starting: bool
    _transitions: dict[str, str]

    def __init__(self,
        name: str,
        *,
        is_final: bool=False,
        is_starting: bool=False
    ):
        super().__init__()
        if not isinstance(name, str):
            raise TypeError(f'state name must be a str, got {type(name).__name__}')
        self.name = name
        self.is_final = is_final
        self.is_starting = is_starting
        self._transitions = {}

    @property
    def transitions(self) -> frozendict:
        return frozendict(self._transitions)

    def transition(self, symbol: str) -> str | None:
        return self._transitions.get(symbol)

    def set_transition(self, symbol: str, destination: str) -> None:
        self._transitions[symbol] = destination

    def clear_transition(self, symbol: str) -> None:
        self._transitions.pop(symbol, None)

    def clone_transitions_into(self, other: 'State') -> None:
        other._transitions = dict(self._transitions)

    def __repr__(self) -> str:
        flags = []
        if self.is_starting:
            flags.append('starting')
        if self.is_final:
            flags.append('final')
        suffix = f' [{", ".join(flags)}]' if flags else ''
        return f'State({self.name!r}){suffix}'

    def __str__(self) -> str:
        return self.name
