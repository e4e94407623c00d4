"""carwash: deterministic finite automaton of a coin-operated car wash."""

from carwash.engine import CarWashAutomaton
from carwash.models import (
    Coin,
    Continuing,
    InvalidSymbol,
    Outcome,
    OutcomeAdapter,
    Refund,
    StateRecord,
    Ticket,
)
from carwash.render import format_state_path, render_table
from carwash.session import MalformedInput, run_session
from carwash.table import (
    CAR_WASH_TABLE,
    TransitionTable,
    UndefinedTransition,
    build_car_wash_table,
)

__all__ = [
    "CAR_WASH_TABLE",
    "CarWashAutomaton",
    "Coin",
    "Continuing",
    "InvalidSymbol",
    "MalformedInput",
    "Outcome",
    "OutcomeAdapter",
    "Refund",
    "StateRecord",
    "Ticket",
    "TransitionTable",
    "UndefinedTransition",
    "build_car_wash_table",
    "format_state_path",
    "render_table",
    "run_session",
]
