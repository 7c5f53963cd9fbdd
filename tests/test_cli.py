"""Tests for the debug renderer, player views and the CLI."""

from typer.testing import CliRunner

from ddust.cli import app
from ddust.engine import Card, Color, PlayCard, PlayerView, Suit, init_game, transition
from ddust.render import render_debug

runner = CliRunner()


def test_card_str() -> None:
    assert str(Card(Suit.HEART, 1)) == "hA"
    assert str(Card(Suit.SPADE, 3)) == "s3"
    assert str(Card(Suit.DIAMOND, 12)) == "dQ"
    assert str(Card(Suit.CLOVER, 13)) == "cK"
    assert Card(Suit.DIAMOND, 2).color == Color.RED
    assert Card(Suit.CLOVER, 2).color == Color.BLACK


def test_render_debug() -> None:
    state = init_game(0, [Color.RED, Color.BLACK], seed=21)
    text = render_debug(state)
    lines = text.splitlines()
    assert lines[0].startswith("Board: ")
    assert len(lines) == 8
    assert f"[{state.deck[-1]}]" in lines[4].split(": ")[1].split(" ")[0]
    assert "Player 1 (red) (to play)" in text
    assert "Player 2 (black):" in text
    # Everything starts face down
    assert text.count("[") - text.count("[", text.index("Deck")) == 16


def test_render_debug_face_up() -> None:
    state = init_game(0, [Color.RED, Color.BLACK], seed=22)
    card = state.hands[0][0]
    nxt = transition(state, PlayCard(0, card, 1, 2))
    board_text = "\n".join(render_debug(nxt).splitlines()[:4])
    face_up = sum(fc.face_up for row in nxt.board for fc in row)
    assert face_up > 0
    assert board_text.count("[") == 16 - face_up


def test_player_view_hides_face_down_and_opponent() -> None:
    state = init_game(0, [Color.RED, Color.BLACK], seed=23)
    nxt = transition(state, PlayCard(0, state.hands[0][0], 1, 1))
    view = PlayerView.from_state(nxt, 0)
    assert view.my_hand == nxt.hands[0]
    assert view.my_color == Color.RED
    assert view.opponent_hand_size == 2
    assert view.deck_size == 12
    assert not view.is_my_turn
    for y in range(4):
        for x in range(4):
            fc = nxt.board[y][x]
            assert view.board[y][x] == (fc.card if fc.face_up else None)


def test_cli_demo() -> None:
    result = runner.invoke(app, ["demo", "--seed", "42"])
    assert result.exit_code == 0
    assert result.output.count("Board: ") == 2
    assert "Player 2 (black) (to play)" in result.output


def test_cli_demo_seed_from_env() -> None:
    r1 = runner.invoke(app, ["demo"], env={"DDUST_SEED": "5"})
    r2 = runner.invoke(app, ["demo", "--seed", "5"])
    assert r1.exit_code == 0
    assert r1.output == r2.output


def test_cli_demo_rejects_bad_target() -> None:
    result = runner.invoke(app, ["demo", "--seed", "1", "--x", "9"])
    assert result.exit_code == 1
    assert "invalid action" in result.output


def test_cli_demo_rejects_bad_first_player() -> None:
    result = runner.invoke(app, ["demo", "--first-player", "3"])
    assert result.exit_code == 1
    assert "invalid first player" in result.output


def test_cli_shape() -> None:
    result = runner.invoke(app, ["shape", "diamond", "3"])
    assert result.exit_code == 0
    assert result.output.splitlines() == ["x.x", ".x.", "x.x"]


def test_cli_shape_unknown_suit() -> None:
    result = runner.invoke(app, ["shape", "star", "3"])
    assert result.exit_code != 0
