import logging
from collections.abc import Callable
from datetime import datetime, timezone

from carwash.models import (
    Coin,
    Continuing,
    Refund,
    StateRecord,
    Ticket,
)
from carwash.render import format_state_path
from carwash.table import CAR_WASH_TABLE, TransitionTable

_LOGGER = logging.getLogger(__name__)

INITIAL_STATE = 0


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


class CarWashAutomaton:
    """Coin-operated car-wash DFA.

    Holds the current run: the state reached so far and every state visited
    since the last reset. A run ends when a terminal state is entered; the
    history is then cleared back to the initial state and the same instance
    keeps accepting coins.
    """

    def __init__(
        self,
        table: TransitionTable = CAR_WASH_TABLE,
        on_transition: Callable[[StateRecord], None] | None = None,
        clock: Callable[[], datetime] | None = None,
    ) -> None:
        self._table = table
        self._on_transition = on_transition
        self._clock = clock if clock is not None else _utc_now
        self._history: list[int] = [INITIAL_STATE]
        self._tickets_issued = 0
        self.last_record: StateRecord | None = None

    @property
    def table(self) -> TransitionTable:
        return self._table

    @property
    def state(self) -> int:
        return self._history[-1]

    @property
    def history(self) -> tuple[int, ...]:
        return tuple(self._history)

    @property
    def tickets_issued(self) -> int:
        return self._tickets_issued

    def reset(self) -> None:
        self._history = [INITIAL_STATE]

    def insert(self, coin: Coin) -> Continuing | Ticket | Refund:
        if not isinstance(coin, Coin):
            raise TypeError(
                f"insert() expects a Coin, got {type(coin).__name__}; "
                "use Coin.of() to validate raw face values"
            )

        next_state = self._table.lookup(self.state, coin.value)
        self._history.append(next_state)

        record = StateRecord(
            coin=coin, state=next_state, history=tuple(self._history)
        )
        self.last_record = record
        _LOGGER.debug(
            "Current automaton state: q%d, current total value: %d",
            next_state,
            next_state,
        )
        if self._on_transition is not None:
            self._on_transition(record)

        if not self._table.is_terminal(next_state):
            return Continuing(state=next_state)

        if next_state == self._table.accepting_state:
            self._tickets_issued += 1
            outcome: Ticket | Refund = Ticket(
                ticket_id=self._tickets_issued, issued_at=self._clock()
            )
        else:
            outcome = Refund(total=next_state)

        self._finish_run()
        return outcome

    def _finish_run(self) -> None:
        _LOGGER.info(
            "Final automaton state: q%d, total value inserted: %d, "
            "state change path: %s",
            self.state,
            self.state,
            format_state_path(self._history),
        )
        self.reset()
