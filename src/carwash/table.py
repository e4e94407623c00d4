"""Transition table of the car-wash automaton."""

from collections.abc import Iterator, Mapping, Sequence
from types import MappingProxyType

from carwash.models import Coin

DELTA_CHARACTER = "δ"
ACCEPTING_STATE = 20
REJECTING_STATE = 21


class UndefinedTransition(KeyError):
    """Raised when a (state, symbol) pair has no entry in the table."""

    def __init__(self, state: int, symbol: object) -> None:
        super().__init__(f"no transition from q{state} on symbol {symbol!r}")
        self.state = state
        self.symbol = symbol


class TransitionTable:
    """Immutable (state, symbol) -> state mapping.

    ``rows`` maps each source state to its destinations, one per symbol of
    ``alphabet`` in the same order. Row order is the declaration order used
    by ``entries`` and ``as_matrix``.
    """

    def __init__(
        self,
        rows: Mapping[int, Sequence[int]],
        alphabet: Sequence[int],
        accepting_state: int,
        rejecting_state: int,
    ) -> None:
        if not alphabet:
            raise ValueError("alphabet must not be empty")
        if len(set(alphabet)) != len(alphabet):
            raise ValueError("alphabet symbols must be unique")

        states = tuple(rows)
        state_set = set(states)
        for name, state in (
            ("accepting_state", accepting_state),
            ("rejecting_state", rejecting_state),
        ):
            if state not in state_set:
                raise ValueError(f"{name} q{state} is not a declared state")

        transitions: dict[tuple[int, int], int] = {}
        for state, targets in rows.items():
            if len(targets) != len(alphabet):
                raise ValueError(
                    f"q{state}: expected {len(alphabet)} destinations, "
                    f"got {len(targets)}"
                )
            for symbol, target in zip(alphabet, targets, strict=True):
                if target not in state_set:
                    raise ValueError(
                        f"q{state} on {symbol}: destination q{target} "
                        "is not a declared state"
                    )
                transitions[(state, symbol)] = target

        for terminal in (accepting_state, rejecting_state):
            for symbol in alphabet:
                target = transitions[(terminal, symbol)]
                if target not in (accepting_state, rejecting_state):
                    raise ValueError(
                        f"terminal state q{terminal} must stay terminal, "
                        f"but moves to q{target} on {symbol}"
                    )

        self._states = states
        self._alphabet = tuple(int(symbol) for symbol in alphabet)
        self._accepting_state = accepting_state
        self._rejecting_state = rejecting_state
        self._transitions = MappingProxyType(transitions)

    @property
    def states(self) -> tuple[int, ...]:
        return self._states

    @property
    def alphabet(self) -> tuple[int, ...]:
        return self._alphabet

    @property
    def accepting_state(self) -> int:
        return self._accepting_state

    @property
    def rejecting_state(self) -> int:
        return self._rejecting_state

    def is_terminal(self, state: int) -> bool:
        return state >= self._accepting_state

    def lookup(self, state: int, symbol: int) -> int:
        if isinstance(symbol, Coin):
            symbol = symbol.value
        if isinstance(symbol, bool) or not isinstance(symbol, int):
            raise UndefinedTransition(state, symbol)
        try:
            return self._transitions[(state, symbol)]
        except KeyError as err:
            raise UndefinedTransition(state, symbol) from err

    def entries(self) -> Iterator[tuple[tuple[int, int], int]]:
        return iter(self._transitions.items())

    def as_matrix(self) -> list[list[str]]:
        """Header of symbols, then one ``q<n>`` row per source state."""
        header = [DELTA_CHARACTER] + [str(symbol) for symbol in self._alphabet]
        entries = list(self._transitions.items())
        width = len(self._alphabet)
        rows = []
        for start in range(0, len(entries), width):
            chunk = entries[start : start + width]
            source = chunk[0][0][0]
            rows.append(
                [f"q{source}"] + [f"q{target}" for _, target in chunk]
            )
        return [header, *rows]

    def __len__(self) -> int:
        return len(self._transitions)

    def __iter__(self) -> Iterator[tuple[int, int]]:
        return iter(self._transitions)

    def __contains__(self, key: object) -> bool:
        return key in self._transitions

    def __repr__(self) -> str:
        return (
            f"TransitionTable(states={len(self._states)}, "
            f"alphabet={self._alphabet}, "
            f"accepting_state={self._accepting_state}, "
            f"rejecting_state={self._rejecting_state})"
        )


_CAR_WASH_ROWS: dict[int, tuple[int, int, int]] = {
    0: (1, 2, 5),
    1: (2, 3, 6),
    2: (3, 4, 7),
    3: (4, 5, 8),
    4: (5, 6, 9),
    5: (6, 7, 10),
    6: (7, 8, 11),
    7: (8, 9, 12),
    8: (9, 10, 13),
    9: (10, 11, 14),
    10: (11, 12, 15),
    11: (12, 13, 16),
    12: (13, 14, 17),
    13: (14, 15, 18),
    14: (15, 16, 19),
    15: (16, 17, 20),
    16: (17, 18, 21),
    17: (18, 19, 21),
    18: (19, 20, 21),
    19: (20, 21, 21),
    20: (20, 20, 20),  # accepting
    21: (21, 21, 21),  # rejecting
}


def build_car_wash_table() -> TransitionTable:
    return TransitionTable(
        rows=_CAR_WASH_ROWS,
        alphabet=[coin.value for coin in Coin],
        accepting_state=ACCEPTING_STATE,
        rejecting_state=REJECTING_STATE,
    )


CAR_WASH_TABLE = build_car_wash_table()
