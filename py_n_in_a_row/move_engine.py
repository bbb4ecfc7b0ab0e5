from collections.abc import Iterable, Sequence
from enum import Enum

from py_n_in_a_row.board import Board, Cell, PlayerSymbol, WinLine, opponent
from py_n_in_a_row.exception import LogicError


class GameOutcome(Enum):
    HUMAN_WON = "You won!"
    COMPUTER_WON = "Computer won!"
    TIE = "It's a tie!"

    def __str__(self) -> str:
        return self.value


def check_game_over(board: Board, x: int, y: int, symbol: PlayerSymbol) -> GameOutcome | None:
    """Return the outcome after ``symbol`` was played at (x, y), or None if the game goes on.

    Only the last move can complete a line, so only the lines through (x, y) are checked.
    """
    cells = board.cells
    for line in board.lines_through(board.index(x, y)):
        if all(cells[i] == symbol for i in line):
            return GameOutcome.HUMAN_WON if symbol == board.human_symbol else GameOutcome.COMPUTER_WON
    if board.is_full():
        return GameOutcome.TIE
    return None


def best_move(board: Board, symbol: PlayerSymbol) -> tuple[int, int]:
    """Pick the next move for ``symbol`` without searching the game tree.

    In order of priority:
    1. complete a line that only misses one cell,
    2. block a line the opponent only misses one cell on,
    3. take the blank cell with the highest score.

    Every blank cell scores 1, plus ``D + 1 - blanks`` for each line through it
    that the opponent has not entered yet, so lines closer to completion weigh more.
    Ties go to the lowest index.
    """
    if board.is_full():
        raise LogicError("No moves available on a full board.")

    cells = board.cells
    move = _winning_index(board.win_lines, cells, symbol)
    if move is None:
        move = _blocking_index(board.win_lines, cells, symbol)
    if move is None:
        move = _highest_scoring_index(board, cells, symbol)

    if cells[move] is not None:
        msg = f"Move engine picked occupied cell {board.coords(move)}."
        raise LogicError(msg)
    return board.coords(move)


def _blanks(cells: Sequence[Cell], line: WinLine) -> list[int]:
    return [i for i in line if cells[i] is None]


def _winning_index(lines: Iterable[WinLine], cells: Sequence[Cell], symbol: PlayerSymbol) -> int | None:
    other = opponent(symbol)
    for line in lines:
        if any(cells[i] == other for i in line):
            continue
        blanks = _blanks(cells, line)
        if len(blanks) == 1:
            return blanks[0]
    return None


def _blocking_index(lines: Iterable[WinLine], cells: Sequence[Cell], symbol: PlayerSymbol) -> int | None:
    for line in lines:
        if any(cells[i] == symbol for i in line):
            continue
        blanks = _blanks(cells, line)
        if len(blanks) == 1:
            return blanks[0]
    return None


def _highest_scoring_index(board: Board, cells: Sequence[Cell], symbol: PlayerSymbol) -> int:
    other = opponent(symbol)
    scores = [1 if cell is None else 0 for cell in cells]
    for line in board.win_lines:
        if any(cells[i] == other for i in line):
            continue
        blanks = _blanks(cells, line)
        weight = board.dimension + 1 - len(blanks)
        for i in blanks:
            scores[i] += weight
    # max() keeps the first index among equal scores
    return max(range(len(scores)), key=scores.__getitem__)
