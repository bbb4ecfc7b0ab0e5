# ruff: noqa: T201

import re
from typing import Final

from py_n_in_a_row.game_engine import GameEngine
from py_n_in_a_row.ui import Ui


class TerminalUi(Ui):
    PROMPT: Final = "Enter x and y separated by a space: "
    INPUT_PATTERN: Final = re.compile(r"^(\d+) (\d+)")

    def __init__(self, game_engine: GameEngine) -> None:
        super().__init__(game_engine)

    def run(self) -> None:
        super().run()
        if self._game_engine.game.computer_begins:
            print("Computer has the first move.", flush=True)
        self._game_engine.start()
        while self._running:
            self._get_input()

    def enable_input(self) -> None:
        super().enable_input()
        if not self._running:
            return
        self._ask_for_move()

    def _ask_for_move(self) -> None:
        print(self.PROMPT, flush=True)

    def _get_input(self) -> None:
        if not self._input_enabled:
            self._stop()
            return

        try:
            input_str = input()
        except (KeyboardInterrupt, EOFError):
            self._stop()
            return

        if input_str.strip() == "exit":
            self._stop()
            return

        coords = self._parse_coords(input_str)
        if coords is None:
            self._ask_for_move()
            return

        self._queue_move(*coords)

    def _parse_coords(self, input_str: str) -> tuple[int, int] | None:
        """Convert 1-based "x y" user input to 0-based board coordinates."""
        match = self.INPUT_PATTERN.match(input_str)
        if match is None:
            self._on_input_error(ValueError(f"Invalid input: {input_str}"))
            return None

        dimension = self._game_engine.game.board.dimension
        x, y = int(match[1]), int(match[2])
        if not (1 <= x <= dimension) or not (1 <= y <= dimension):
            self._on_input_error(ValueError("Invalid coordinates"))
            return None
        return x - 1, y - 1

    def _render_board(self) -> None:
        print(f"\n{self._game_engine.game.board}\n", flush=True)

    def _show_end_message(self, msg: str) -> None:
        print(msg, flush=True)
        self._stop()

    def _on_input_error(self, exception: Exception) -> None:
        if not self._running:
            return
        print(str(exception), flush=True)
