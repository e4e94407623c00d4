from datetime import datetime
from enum import Enum
from typing import Annotated, Any, Literal

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter


class InvalidSymbol(ValueError):
    """Raised when a face value is not part of the automaton alphabet."""

    def __init__(self, value: Any) -> None:
        super().__init__(f"Automaton doesn't accept face value of {value}")
        self.value = value


class Coin(int, Enum):
    ONE = 1
    TWO = 2
    FIVE = 5

    @classmethod
    def of(cls, value: Any) -> "Coin":
        """Return the coin with face value ``value`` or raise InvalidSymbol."""
        if isinstance(value, Coin):
            return value
        if isinstance(value, bool) or not isinstance(value, int):
            raise InvalidSymbol(value)
        try:
            return cls(value)
        except ValueError as err:
            raise InvalidSymbol(value) from err


class Continuing(BaseModel):
    model_config = ConfigDict(frozen=True)

    kind: Literal["continuing"] = "continuing"
    state: int = Field(ge=0, description="State reached by the last coin")

    @property
    def is_terminal(self) -> bool:
        return False

    @property
    def message(self) -> str:
        return f"Current total value: {self.state}"


class Ticket(BaseModel):
    model_config = ConfigDict(frozen=True)

    kind: Literal["ticket"] = "ticket"
    ticket_id: int = Field(ge=1, description="Per-machine ticket counter")
    issued_at: datetime = Field(description="Generation timestamp")

    @property
    def is_terminal(self) -> bool:
        return True

    @property
    def message(self) -> str:
        return f"Ticket generated, timestamp: {self.issued_at.isoformat()}"


class Refund(BaseModel):
    model_config = ConfigDict(frozen=True)

    kind: Literal["refund"] = "refund"
    total: int = Field(ge=0, description="Amount handed back to the customer")

    @property
    def is_terminal(self) -> bool:
        return True

    @property
    def message(self) -> str:
        return f"Full amount refunded, total: {self.total}"


Outcome = Annotated[
    Continuing | Ticket | Refund,
    Field(discriminator="kind"),
]

OutcomeAdapter: TypeAdapter[Continuing | Ticket | Refund] = TypeAdapter(
    Outcome
)


class StateRecord(BaseModel):
    """Snapshot emitted after every coin insertion."""

    model_config = ConfigDict(frozen=True)

    coin: Coin
    state: int
    history: tuple[int, ...] = Field(
        description="States visited since the last reset, ending at state"
    )
