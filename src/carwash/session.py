"""Interactive coin-insertion loop around a CarWashAutomaton."""

import logging
from collections.abc import Callable, Iterable, Iterator
from typing import TextIO

import typer

from carwash.engine import CarWashAutomaton
from carwash.models import Coin, InvalidSymbol, Refund, Ticket

_LOGGER = logging.getLogger(__name__)

DEFAULT_PROMPT = "Insert coin: "


class MalformedInput(ValueError):
    """Raised for input tokens that are not integers."""

    def __init__(self, token: str) -> None:
        super().__init__(f"not an integer: {token!r}")
        self.token = token


def iter_tokens(stream: TextIO) -> Iterator[str]:
    for line in stream:
        yield from line.split()


def parse_token(token: str) -> int:
    try:
        return int(token)
    except ValueError as err:
        raise MalformedInput(token) from err


def run_session(
    automaton: CarWashAutomaton,
    tokens: Iterable[str],
    echo: Callable[..., None] = typer.echo,
    prompt: str = DEFAULT_PROMPT,
) -> Ticket | Refund | None:
    """Feed tokens to ``automaton`` until a ticket or refund is produced.

    Non-integer tokens are skipped silently and face values outside the
    alphabet are reported through ``echo``; neither ends the session.
    Returns None when ``tokens`` runs out before a terminal outcome.
    """
    iterator = iter(tokens)
    while True:
        echo(prompt, nl=False)
        token = next(iterator, None)
        if token is None:
            echo("")
            return None

        try:
            coin = Coin.of(parse_token(token))
        except MalformedInput as err:
            _LOGGER.debug("Discarding input token: %s", err)
            continue
        except InvalidSymbol as err:
            echo(str(err))
            continue

        outcome = automaton.insert(coin)
        if isinstance(outcome, Ticket | Refund):
            echo(outcome.message)
            return outcome
