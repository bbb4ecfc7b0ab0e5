from py_n_in_a_row.factories import create_game
from py_n_in_a_row.ui_pygame import PygameUi


def start_without_window(dimension: int = 3) -> PygameUi:
    game_engine, ui = create_game(dimension, "X", "pygame")
    assert isinstance(ui, PygameUi)
    # Skip the display setup of run() and only start the game.
    ui._running = True
    game_engine.start()
    return ui


class TestPygameUi:
    """Test click handling of the pygame window without opening it."""

    def test_click_maps_to_cell(self) -> None:
        ui = start_without_window()

        ui._on_click((250, 50))

        board = ui._game_engine.game.board
        assert board.get_cell(1, 0) == "X"
        assert board.get_cell(1, 1) == "O"
        assert ui._board.cells == board.cells
        assert ui._title.endswith("Your move (X)")

    def test_click_outside_grid_is_ignored(self) -> None:
        ui = start_without_window(7)

        # 600 // 7 leaves a margin on the right and bottom
        ui._on_click((599, 599))

        assert ui._game_engine.game.board.moves == 0

    def test_occupied_cell_shows_error(self) -> None:
        ui = start_without_window()

        ui._on_click((10, 10))
        ui._on_click((300, 300))

        assert ui._game_engine.game.board.moves == 2
        assert ui._title.endswith("Cell already taken.")

    def test_end_message(self) -> None:
        ui = start_without_window(2)

        ui._on_click((10, 10))
        ui._on_click((590, 10))

        assert ui._end_message == "You won!"
