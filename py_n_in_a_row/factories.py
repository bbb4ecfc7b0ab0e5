"""Factory functions for wiring the game components together."""

from typing import Literal, TypeAlias

from py_n_in_a_row.board import PlayerSymbol
from py_n_in_a_row.game_engine import GameEngine
from py_n_in_a_row.player_ai import AiPlayer
from py_n_in_a_row.player_local import LocalPlayer
from py_n_in_a_row.ui import Ui

UiType: TypeAlias = Literal["terminal", "pygame"]


def create_ui(ui_type: UiType, game_engine: GameEngine) -> Ui:
    match ui_type:
        case "terminal":
            from py_n_in_a_row.ui_terminal import TerminalUi  # noqa: PLC0415

            return TerminalUi(game_engine)
        case "pygame":
            # pygame is only imported when its window is requested.
            from py_n_in_a_row.ui_pygame import PygameUi  # noqa: PLC0415

            return PygameUi(game_engine)
        case _:
            msg = f"Unknown UI type: {ui_type}. Choose from 'terminal', 'pygame'."
            raise ValueError(msg)


def create_players(game_engine: GameEngine, uis: list[Ui]) -> tuple[LocalPlayer, AiPlayer]:
    board = game_engine.game.board
    human = LocalPlayer(board.human_symbol)
    for ui in uis:
        human.add_enable_input_cb(ui.enable_input)
    computer = AiPlayer(board.computer_symbol, board)
    return human, computer


def config_game_engine(game_engine: GameEngine, players: tuple[LocalPlayer, AiPlayer], uis: list[Ui]) -> GameEngine:
    game_engine.set_players(*players)
    for ui in uis:
        game_engine.add_board_updated_cb(ui.on_board_updated)
        game_engine.add_on_error_cb(ui.on_error)

    return game_engine


def create_game(
    dimension: int,
    human_symbol: PlayerSymbol,
    ui_type: UiType,
    *,
    computer_begins: bool = False,
) -> tuple[GameEngine, Ui]:
    game_engine = GameEngine(dimension, human_symbol, computer_begins=computer_begins)
    ui = create_ui(ui_type, game_engine)
    players = create_players(game_engine, [ui])
    config_game_engine(game_engine, players, [ui])
    return game_engine, ui
