import logging
import sys
from pathlib import Path
from typing import Annotated

import srsly
import typer

from carwash.engine import CarWashAutomaton
from carwash.models import Coin, InvalidSymbol, Refund, Ticket
from carwash.render import render_table
from carwash.session import iter_tokens, run_session
from carwash.table import CAR_WASH_TABLE

app = typer.Typer(help="Simulate the coin-operated car-wash automaton.")

_LOG_LEVELS = ("debug", "info", "warning", "error")

LogLevelOption = Annotated[
    str,
    typer.Option(
        "--log-level",
        help="Logging verbosity: debug, info, warning, or error.",
    ),
]


def _configure_logging(level: str) -> None:
    normalized = level.strip().lower()
    if normalized not in _LOG_LEVELS:
        raise typer.BadParameter(
            f"Invalid log level '{level}': expected one of "
            + ", ".join(_LOG_LEVELS)
        )
    logging.basicConfig(
        level=getattr(logging, normalized.upper()),
        stream=sys.stderr,
        format="%(levelname)s %(name)s: %(message)s",
    )


def _echo_table() -> None:
    typer.echo("Transition table:")
    typer.echo(render_table(CAR_WASH_TABLE.as_matrix()))


@app.command()
def table(
    as_json: Annotated[
        bool, typer.Option("--json", help="Print the table as a JSON matrix")
    ] = False,
) -> None:
    """Print the transition table."""
    if as_json:
        typer.echo(srsly.json_dumps(CAR_WASH_TABLE.as_matrix()))
        return
    _echo_table()


@app.command()
def run(
    sessions: Annotated[
        int,
        typer.Option(
            "--sessions", "-n", help="Number of sessions to serve", min=1
        ),
    ] = 1,
    quiet_table: Annotated[
        bool,
        typer.Option("--quiet-table", help="Do not print the table first"),
    ] = False,
    log_level: LogLevelOption = "warning",
) -> None:
    """Insert coins read from standard input until a ticket or refund."""
    _configure_logging(log_level)
    if not quiet_table:
        _echo_table()

    automaton = CarWashAutomaton()
    tokens = iter_tokens(sys.stdin)
    for _ in range(sessions):
        if run_session(automaton, tokens) is None:
            typer.echo("Input closed before the session finished.", err=True)
            raise typer.Exit(1)


@app.command(context_settings={"ignore_unknown_options": True})
def feed(
    coins: Annotated[
        list[int], typer.Argument(help="Face values to insert, in order")
    ],
    output: Annotated[
        Path | None,
        typer.Option(
            "--output", "-o", help="Write terminal outcomes as JSONL"
        ),
    ] = None,
    log_level: LogLevelOption = "warning",
) -> None:
    """Insert the given coins and print every ticket or refund."""
    _configure_logging(log_level)

    automaton = CarWashAutomaton()
    outcomes: list[Ticket | Refund] = []
    for value in coins:
        try:
            coin = Coin.of(value)
        except InvalidSymbol as err:
            typer.echo(str(err), err=True)
            continue
        outcome = automaton.insert(coin)
        if isinstance(outcome, Ticket | Refund):
            typer.echo(outcome.message)
            outcomes.append(outcome)

    if automaton.state != 0:
        typer.echo(
            f"Unfinished run, current total value: {automaton.state}"
        )

    if output is not None:
        srsly.write_jsonl(
            output, [outcome.model_dump(mode="json") for outcome in outcomes]
        )
        typer.echo(f"Wrote {len(outcomes)} outcomes to {output}")


def main() -> None:
    app()


if __name__ == "__main__":
    main()
