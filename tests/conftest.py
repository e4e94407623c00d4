from __future__ import annotations

import pytest
from helpers import FIXED_TIME

from carwash.engine import CarWashAutomaton
from carwash.models import StateRecord


@pytest.fixture
def records() -> list[StateRecord]:
    return []


@pytest.fixture
def automaton(records: list[StateRecord]) -> CarWashAutomaton:
    return CarWashAutomaton(
        on_transition=records.append, clock=lambda: FIXED_TIME
    )
