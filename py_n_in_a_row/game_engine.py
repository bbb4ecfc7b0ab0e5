from collections.abc import Callable

from py_n_in_a_row.board import DEFAULT_DIMENSION, Move, PlayerSymbol
from py_n_in_a_row.exception import InvalidMoveError, LogicError
from py_n_in_a_row.game import Game
from py_n_in_a_row.player import Player


class GameEngine:
    def __init__(
        self,
        dimension: int = DEFAULT_DIMENSION,
        human_symbol: PlayerSymbol = "X",
        *,
        computer_begins: bool = False,
    ) -> None:
        self._game = Game(dimension, human_symbol, computer_begins=computer_begins)
        self._players: dict[PlayerSymbol, Player] = {}
        self._board_updated_cbs: list[Callable[[], None]] = []
        self._on_error_cbs: list[Callable[[Exception], None]] = []

    @property
    def game(self) -> Game:
        return self._game

    @property
    def current_player(self) -> Player:
        return self._players[self._game.current_player_symbol]

    def set_players(self, human: Player, computer: Player) -> None:
        board = self._game.board
        if human.symbol != board.human_symbol or computer.symbol != board.computer_symbol:
            msg = (
                f"Players {human.symbol}/{computer.symbol} don't match "
                f"the board {board.human_symbol}/{board.computer_symbol}."
            )
            raise LogicError(msg)
        self._players = {human.symbol: human, computer.symbol: computer}

    def add_board_updated_cb(self, callback: Callable[[], None]) -> None:
        self._board_updated_cbs.append(callback)

    def add_on_error_cb(self, callback: Callable[[Exception], None]) -> None:
        self._on_error_cbs.append(callback)

    def start(self) -> None:
        """Show the initial board and start the first turn."""
        self._notify_board_updated()
        self.current_player.start_turn()
        self.tick()

    def queue_move(self, x: int, y: int) -> None:
        """Submit a move from the UI for the current player.

        The move is applied by the next tick().
        """
        self.current_player.queue_move(x, y)

    def tick(self) -> None:
        """Apply pending moves until a player has to wait for input or the game is over."""
        while not self._game.is_over():
            player = self.current_player
            move = player.get_pending_move()
            if move is None:
                return

            x, y = move
            try:
                self._game.apply_move(Move(player.symbol, x, y))
            except InvalidMoveError as e:
                if not player.is_human:
                    # The computer only picks blank cells.
                    raise LogicError(str(e)) from e
                self._notify_on_error(e)
                player.start_turn()
                continue
            except IndexError as e:
                # Coordinates are validated before they reach the engine.
                raise LogicError(str(e)) from e

            self._notify_board_updated()
            if not self._game.is_over():
                self.current_player.start_turn()

    def _notify_board_updated(self) -> None:
        for callback in list(self._board_updated_cbs):
            callback()

    def _notify_on_error(self, exception: Exception) -> None:
        for callback in list(self._on_error_cbs):
            callback(exception)
