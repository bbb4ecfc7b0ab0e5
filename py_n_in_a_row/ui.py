from abc import ABC, abstractmethod

from py_n_in_a_row.game_engine import GameEngine


class Ui(ABC):
    def __init__(self, game_engine: GameEngine) -> None:
        self._game_engine = game_engine
        self._running = False
        self._input_enabled = False

    @property
    def running(self) -> bool:
        return self._running

    def run(self) -> None:
        self._running = True

    def _stop(self) -> None:
        self._running = False

    def _queue_move(self, x: int, y: int) -> None:
        # Disable own input first, the engine enables it again if the move is rejected.
        self._disable_input()
        self._game_engine.queue_move(x, y)
        self._game_engine.tick()

    def enable_input(self) -> None:
        if not self._running:
            return
        self._input_enabled = True

    def _disable_input(self) -> None:
        self._input_enabled = False

    def on_board_updated(self) -> None:
        if not self._running:
            return
        self._disable_input()
        self._render_board()
        outcome = self._game_engine.game.outcome
        if outcome is not None:
            self._show_end_message(str(outcome))

    def on_error(self, exception: Exception) -> None:
        if not self._running:
            return
        self._on_input_error(exception)

    @abstractmethod
    def _render_board(self) -> None:
        pass

    @abstractmethod
    def _show_end_message(self, message: str) -> None:
        pass

    @abstractmethod
    def _on_input_error(self, exception: Exception) -> None:
        pass
