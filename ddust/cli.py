"""CLI entry point."""

from __future__ import annotations

from typing import Optional

import typer
from dotenv import load_dotenv

from ddust.engine import Card, Color, DdustError, PlayCard, Suit, get_shape, init_game, transition
from ddust.logging_utils import DEFAULT_LOG_LEVEL, setup_logging
from ddust.render import render_debug

# Load environment variables from .env file
load_dotenv()

app = typer.Typer(help="ddust rules engine: debug tools")


@app.command()
def demo(
    seed: Optional[int] = typer.Option(None, "--seed", "-s", envvar="DDUST_SEED", help="Random seed"),
    first_player: int = typer.Option(0, "--first-player", "-f", help="Player who starts: 0 or 1"),
    x: int = typer.Option(1, "--x", help="Target column for the sample play"),
    y: int = typer.Option(2, "--y", help="Target row for the sample play"),
    log_level: str = typer.Option(
        DEFAULT_LOG_LEVEL,
        "--log-level",
        "-l",
        envvar="DDUST_LOG_LEVEL",
        help="DEBUG, INFO, WARNING or ERROR",
    ),
) -> None:
    """Deal a game, play the first card of the starting hand, and print both states."""
    setup_logging(log_level)
    try:
        state = init_game(first_player, (Color.RED, Color.BLACK), seed=seed)
        typer.echo(render_debug(state))
        typer.echo()
        action = PlayCard(player=state.turn, card=state.hands[state.turn][0], x=x, y=y)
        state = transition(state, action)
    except DdustError as err:
        typer.echo(f"Error: {err}", err=True)
        raise typer.Exit(code=1)
    typer.echo(render_debug(state))


@app.command()
def shape(
    suit: str = typer.Argument(..., help="heart, spade, diamond or clover"),
    number: int = typer.Argument(..., help="Card number, 2-5 for playable cards"),
) -> None:
    """Print the area a card turns over; the centre is the target cell."""
    try:
        card = Card(suit=Suit(suit.lower()), number=number)
    except ValueError:
        raise typer.BadParameter(f"Unknown suit: {suit}", param_hint="SUIT")
    for row in get_shape(card):
        typer.echo("".join("x" if cell else "." for cell in row))


if __name__ == "__main__":
    app()
