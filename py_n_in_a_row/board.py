from dataclasses import dataclass
from typing import Final, Literal, TypeAlias

from py_n_in_a_row.exception import CellTakenError, ConfigurationError, LogicError

MIN_DIMENSION: Final = 2
MAX_DIMENSION: Final = 30
DEFAULT_DIMENSION: Final = 3

PlayerSymbol: TypeAlias = Literal["X", "O"]
Cell: TypeAlias = PlayerSymbol | None
WinLine: TypeAlias = tuple[int, ...]

PLAYER_SYMBOLS: Final[tuple[PlayerSymbol, PlayerSymbol]] = ("X", "O")


def opponent(symbol: Cell) -> PlayerSymbol:
    match symbol:
        case "X":
            return "O"
        case "O":
            return "X"
        case _:
            msg = f"No opponent for {symbol!r}."
            raise LogicError(msg)


def build_win_lines(dimension: int) -> tuple[WinLine, ...]:
    """Flat indices of every column, row and both diagonals of a square board.

    The order matters: the move engine takes the first line that can be won or blocked.
    """
    lines: list[WinLine] = []
    lines.extend(tuple(x + y * dimension for y in range(dimension)) for x in range(dimension))  # Columns
    lines.extend(tuple(x + y * dimension for x in range(dimension)) for y in range(dimension))  # Rows
    lines.append(tuple(x + x * dimension for x in range(dimension)))  # Main diagonal
    lines.append(tuple(x + (dimension - 1 - x) * dimension for x in range(dimension)))  # Anti-diagonal
    return tuple(lines)


@dataclass(frozen=True, slots=True)
class Move:
    player: PlayerSymbol
    x: int
    y: int


class Board:
    """Square board of D x D cells, stored row-major as ``x + y * D``."""

    def __init__(self, dimension: int = DEFAULT_DIMENSION, human_symbol: PlayerSymbol = "X") -> None:
        if isinstance(dimension, bool) or not isinstance(dimension, int):
            msg = f"Invalid board dimension {dimension!r}, must be an integer."
            raise ConfigurationError(msg)
        if not (MIN_DIMENSION <= dimension <= MAX_DIMENSION):
            msg = f"Invalid board dimension, must be between {MIN_DIMENSION} and {MAX_DIMENSION}"
            raise ConfigurationError(msg)
        if human_symbol not in PLAYER_SYMBOLS:
            msg = f"Invalid symbol for the human player: {human_symbol!r}."
            raise ConfigurationError(msg)

        self._dimension = dimension
        self._cells: list[Cell] = [None] * (dimension * dimension)
        self._win_lines = build_win_lines(dimension)
        self._human_symbol: PlayerSymbol = human_symbol
        self._moves = 0

    @property
    def dimension(self) -> int:
        return self._dimension

    @property
    def cells(self) -> tuple[Cell, ...]:
        return tuple(self._cells)

    @property
    def win_lines(self) -> tuple[WinLine, ...]:
        return self._win_lines

    @property
    def human_symbol(self) -> PlayerSymbol:
        return self._human_symbol

    @property
    def computer_symbol(self) -> PlayerSymbol:
        return opponent(self._human_symbol)

    @property
    def moves(self) -> int:
        return self._moves

    def clone(self) -> "Board":
        copied = Board(self._dimension, self._human_symbol)
        copied._cells = self._cells[:]
        copied._moves = self._moves
        return copied

    def index(self, x: int, y: int) -> int:
        if not (0 <= x < self._dimension) or not (0 <= y < self._dimension):
            raise IndexError("Move out of bounds.")
        return x + y * self._dimension

    def coords(self, index: int) -> tuple[int, int]:
        y, x = divmod(index, self._dimension)
        return x, y

    def get_cell(self, x: int, y: int) -> Cell:
        return self._cells[self.index(x, y)]

    def set_cell(self, x: int, y: int, symbol: PlayerSymbol) -> None:
        index = self.index(x, y)
        if symbol not in PLAYER_SYMBOLS:
            msg = f"Cannot place {symbol!r} on the board."
            raise LogicError(msg)
        if self._cells[index] is not None:
            raise CellTakenError(x, y)

        self._cells[index] = symbol
        self._moves += 1

    def lines_through(self, index: int) -> list[WinLine]:
        return [line for line in self._win_lines if index in line]

    def get_available_positions(self) -> list[tuple[int, int]]:
        return [self.coords(i) for i, cell in enumerate(self._cells) if cell is None]

    def is_full(self) -> bool:
        return self._moves == self._dimension * self._dimension

    def __str__(self) -> str:
        separator = "+---" * self._dimension + "+"
        rows = [separator]
        for y in range(self._dimension):
            row = "".join(f"| {self.get_cell(x, y) or ' '} " for x in range(self._dimension))
            rows.append(f"{row}|")
            rows.append(separator)
        return "\n".join(rows)
