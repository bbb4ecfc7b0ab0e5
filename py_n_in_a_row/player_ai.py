from py_n_in_a_row.board import Board, PlayerSymbol
from py_n_in_a_row.move_engine import best_move
from py_n_in_a_row.player import Player


class AiPlayer(Player):
    """Computer opponent, moves as soon as its turn starts."""

    def __init__(self, symbol: PlayerSymbol, board: Board) -> None:
        super().__init__(symbol)
        self._board = board

    @property
    def is_human(self) -> bool:
        return False

    def start_turn(self) -> None:
        x, y = best_move(self._board, self._symbol)
        self.queue_move(x, y)
