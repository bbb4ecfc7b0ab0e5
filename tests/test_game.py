import pytest

from py_n_in_a_row.board import Move
from py_n_in_a_row.exception import ConfigurationError, InvalidMoveError
from py_n_in_a_row.game import Game, TurnState
from py_n_in_a_row.move_engine import GameOutcome


class TestTurnStates:
    """Test the turn-taking state machine."""

    def test_human_begins_by_default(self) -> None:
        game = Game(3, "X")
        assert game.state == TurnState.AWAITING_HUMAN_MOVE
        assert game.current_player_symbol == "X"
        assert game.outcome is None
        assert not game.computer_begins

    def test_computer_begins(self) -> None:
        game = Game(3, "O", computer_begins=True)
        assert game.state == TurnState.AWAITING_COMPUTER_MOVE
        assert game.current_player_symbol == "X"
        assert game.computer_begins

    def test_turns_alternate(self) -> None:
        game = Game(3, "X")
        assert game.apply_move(Move("X", 0, 0)) is None
        assert game.state == TurnState.AWAITING_COMPUTER_MOVE
        assert game.current_player_symbol == "O"
        assert game.apply_move(Move("O", 1, 1)) is None
        assert game.state == TurnState.AWAITING_HUMAN_MOVE
        assert game.board.moves == 2

    def test_not_your_turn(self) -> None:
        game = Game(3, "X")
        with pytest.raises(InvalidMoveError, match="Not your turn"):
            game.apply_move(Move("O", 0, 0))
        assert game.board.moves == 0

    def test_occupied_cell_keeps_turn(self) -> None:
        game = Game(3, "X")
        game.apply_move(Move("X", 0, 0))
        with pytest.raises(InvalidMoveError, match="Cell already taken"):
            game.apply_move(Move("O", 0, 0))
        assert game.state == TurnState.AWAITING_COMPUTER_MOVE
        assert game.board.moves == 1

    def test_invalid_configuration(self) -> None:
        with pytest.raises(ConfigurationError):
            Game(1, "X")


class TestGameOver:
    def test_human_wins(self) -> None:
        game = Game(3, "X")
        for x, y, player in [(0, 0, "X"), (0, 1, "O"), (1, 0, "X"), (1, 1, "O")]:
            game.apply_move(Move(player, x, y))  # type: ignore[arg-type]
        assert game.apply_move(Move("X", 2, 0)) == GameOutcome.HUMAN_WON
        assert game.state == TurnState.GAME_OVER
        assert game.outcome == GameOutcome.HUMAN_WON
        assert game.is_over()

    def test_computer_wins(self) -> None:
        game = Game(2, "O", computer_begins=True)
        game.apply_move(Move("X", 0, 0))
        game.apply_move(Move("O", 1, 1))
        assert game.apply_move(Move("X", 1, 0)) == GameOutcome.COMPUTER_WON
        assert game.outcome == GameOutcome.COMPUTER_WON

    def test_tie(self) -> None:
        game = Game(3, "X")
        moves = [(0, 0), (1, 0), (2, 0), (1, 1), (0, 1), (0, 2), (2, 1), (2, 2), (1, 2)]
        for i, (x, y) in enumerate(moves[:-1]):
            assert game.apply_move(Move("X" if i % 2 == 0 else "O", x, y)) is None
        assert game.apply_move(Move("X", *moves[-1])) == GameOutcome.TIE
        assert game.outcome == GameOutcome.TIE

    def test_no_moves_after_game_over(self) -> None:
        game = Game(2, "X")
        game.apply_move(Move("X", 0, 0))
        game.apply_move(Move("O", 0, 1))
        game.apply_move(Move("X", 1, 0))
        with pytest.raises(InvalidMoveError, match="Game over"):
            game.apply_move(Move("O", 1, 1))
