from enum import Enum, auto

from py_n_in_a_row.board import DEFAULT_DIMENSION, Board, Move, PlayerSymbol
from py_n_in_a_row.exception import InvalidMoveError
from py_n_in_a_row.move_engine import GameOutcome, check_game_over


class TurnState(Enum):
    AWAITING_HUMAN_MOVE = auto()
    AWAITING_COMPUTER_MOVE = auto()
    GAME_OVER = auto()


class Game:
    def __init__(
        self,
        dimension: int = DEFAULT_DIMENSION,
        human_symbol: PlayerSymbol = "X",
        *,
        computer_begins: bool = False,
    ) -> None:
        self._board = Board(dimension, human_symbol)
        self._computer_begins = computer_begins
        self._state = TurnState.AWAITING_COMPUTER_MOVE if computer_begins else TurnState.AWAITING_HUMAN_MOVE
        self._outcome: GameOutcome | None = None

    @property
    def board(self) -> Board:
        return self._board

    @property
    def state(self) -> TurnState:
        return self._state

    @property
    def outcome(self) -> GameOutcome | None:
        return self._outcome

    @property
    def computer_begins(self) -> bool:
        return self._computer_begins

    @property
    def current_player_symbol(self) -> PlayerSymbol:
        if self._state == TurnState.AWAITING_COMPUTER_MOVE:
            return self._board.computer_symbol
        return self._board.human_symbol

    def is_over(self) -> bool:
        return self._state == TurnState.GAME_OVER

    def apply_move(self, move: Move) -> GameOutcome | None:
        if self.is_over():
            raise InvalidMoveError("Game over.")
        if move.player != self.current_player_symbol:
            raise InvalidMoveError("Not your turn.")

        self._board.set_cell(move.x, move.y, move.player)

        outcome = check_game_over(self._board, move.x, move.y, move.player)
        if outcome is not None:
            self._outcome = outcome
            self._state = TurnState.GAME_OVER
        elif self._state == TurnState.AWAITING_HUMAN_MOVE:
            self._state = TurnState.AWAITING_COMPUTER_MOVE
        else:
            self._state = TurnState.AWAITING_HUMAN_MOVE
        return outcome
