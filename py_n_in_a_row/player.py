from abc import ABC, abstractmethod

from py_n_in_a_row.board import PlayerSymbol
from py_n_in_a_row.exception import LogicError


class Player(ABC):
    def __init__(self, symbol: PlayerSymbol) -> None:
        self._symbol = symbol
        self._pending_move: tuple[int, int] | None = None

    @property
    def symbol(self) -> PlayerSymbol:
        return self._symbol

    @property
    @abstractmethod
    def is_human(self) -> bool:
        pass

    @abstractmethod
    def start_turn(self) -> None:
        pass

    def get_pending_move(self) -> tuple[int, int] | None:
        """Take the pending move, if there is one."""
        move, self._pending_move = self._pending_move, None
        return move

    def queue_move(self, x: int, y: int) -> None:
        """Hold a move until the game engine applies it.

        Only one move can be pending, the engine applies it before the turn passes.
        """
        if self._pending_move is not None:
            msg = f"Player {self._symbol} already has a pending move {self._pending_move}."
            raise LogicError(msg)
        self._pending_move = (x, y)
