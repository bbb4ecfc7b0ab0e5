from typing import Final

import pygame

from py_n_in_a_row.game_engine import GameEngine
from py_n_in_a_row.ui import Ui


class PygameUi(Ui):
    TITLE: Final = "N-in-a-row (Pygame)"
    WINDOW_SIZE: Final = 600
    LINE_WIDTH: Final = 2

    BG_COLOR: Final = (0, 0, 0)
    LINE_COLOR: Final = (127, 127, 127)
    X_COLOR: Final = (191, 63, 63)
    O_COLOR: Final = (63, 63, 191)
    TEXT_COLOR: Final = (255, 255, 255)

    def __init__(self, game_engine: GameEngine) -> None:
        super().__init__(game_engine)
        board = self._game_engine.game.board
        self._dimension = board.dimension
        self._cell_size = self.WINDOW_SIZE // self._dimension
        self._board = board.clone()
        self._title = self.TITLE
        self._error_msg = ""
        self._end_message = ""

    def run(self) -> None:
        pygame.init()
        self._screen = pygame.display.set_mode((self.WINDOW_SIZE, self.WINDOW_SIZE))
        pygame.display.set_caption(self.TITLE)

        self._font = pygame.font.SysFont(None, max(self._cell_size, 12))
        self._small_font = pygame.font.SysFont(None, 48)
        self._click_font = pygame.font.SysFont(None, 24)

        super().run()
        self._game_engine.start()
        self._main_loop()

    def enable_input(self) -> None:
        super().enable_input()
        if not self._running:
            return
        self._title = f"{self.TITLE} - Your move ({self._game_engine.game.board.human_symbol})"
        if self._error_msg:
            self._title = f"{self._title} - {self._error_msg}"

    def _disable_input(self) -> None:
        super()._disable_input()
        self._title = self.TITLE
        self._error_msg = ""

    def _main_loop(self) -> None:
        clock = pygame.time.Clock()
        while self._running:
            clock.tick(30)
            self._handle_events()
            self._render()
        pygame.quit()

    def _handle_events(self) -> None:
        for event in pygame.event.get():
            match event.type:
                case pygame.QUIT:
                    self._stop()
                case pygame.MOUSEBUTTONDOWN:
                    if self._end_message:
                        pygame.event.post(pygame.event.Event(pygame.QUIT))
                    elif self._input_enabled:
                        self._on_click(event.pos)

    def _render(self) -> None:
        pygame.display.set_caption(self._title)
        self._screen.fill(self.BG_COLOR)
        self._draw_grid()
        self._draw_marks()
        self._draw_end_message()
        pygame.display.flip()

    def _on_click(self, pos: tuple[int, int]) -> None:
        px, py = pos
        x = px // self._cell_size
        y = py // self._cell_size
        if not (0 <= x < self._dimension) or not (0 <= y < self._dimension):
            return
        self._queue_move(x, y)

    def _render_board(self) -> None:
        self._board = self._game_engine.game.board.clone()

    def _show_end_message(self, msg: str) -> None:
        self._end_message = msg

    def _on_input_error(self, exception: Exception) -> None:
        self._error_msg = str(exception)

    def _draw_grid(self) -> None:
        extent = self._cell_size * self._dimension
        for i in range(1, self._dimension):
            offset = i * self._cell_size
            pygame.draw.line(self._screen, self.LINE_COLOR, (0, offset), (extent, offset), self.LINE_WIDTH)
            pygame.draw.line(self._screen, self.LINE_COLOR, (offset, 0), (offset, extent), self.LINE_WIDTH)

    def _draw_marks(self) -> None:
        half = self._cell_size // 2
        for y in range(self._dimension):
            for x in range(self._dimension):
                value = self._board.get_cell(x, y)
                if value is None:
                    continue
                text = self._font.render(value, True, self.X_COLOR if value == "X" else self.O_COLOR)  # noqa: FBT003
                rect = text.get_rect(center=(x * self._cell_size + half, y * self._cell_size + half))
                self._screen.blit(text, rect)

    def _draw_end_message(self) -> None:
        if not self._end_message:
            return
        main_text = self._small_font.render(self._end_message, True, self.TEXT_COLOR)  # noqa: FBT003
        click_text = self._click_font.render("Click anywhere to exit", True, self.TEXT_COLOR)  # noqa: FBT003
        main_rect = main_text.get_rect(center=(self.WINDOW_SIZE // 2, self.WINDOW_SIZE // 2 - 20))
        click_rect = click_text.get_rect(center=(self.WINDOW_SIZE // 2, self.WINDOW_SIZE // 2 + 20))
        self._screen.blit(main_text, main_rect)
        self._screen.blit(click_text, click_rect)
