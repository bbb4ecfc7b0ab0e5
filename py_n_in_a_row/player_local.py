from collections.abc import Callable

from py_n_in_a_row.board import PlayerSymbol
from py_n_in_a_row.player import Player


class LocalPlayer(Player):
    def __init__(self, symbol: PlayerSymbol) -> None:
        super().__init__(symbol)
        self._enable_input_cbs: list[Callable[[], None]] = []

    @property
    def is_human(self) -> bool:
        return True

    def add_enable_input_cb(self, callback: Callable[[], None]) -> None:
        self._enable_input_cbs.append(callback)

    def start_turn(self) -> None:
        for callback in list(self._enable_input_cbs):
            callback()
