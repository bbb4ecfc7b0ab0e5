from py_n_in_a_row.board import Board, Cell, PlayerSymbol

_SYMBOLS: dict[str, Cell] = {"X": "X", "O": "O", "-": None, "": None}


def _rows(text: str) -> list[list[str]]:
    lines = [line.strip() for line in text.replace("/", "\n").splitlines()]
    if any(line.startswith("+") for line in lines):
        # Rendered board: "| X |   | O |"
        return [[cell.strip() for cell in line.strip("|").split("|")] for line in lines if line.startswith("|")]
    return [list(line.replace(" ", "")) for line in lines if line]


def board_from_string(text: str, human_symbol: PlayerSymbol = "X") -> Board:
    """Build a board from compact rows ("X--/XO-/---") or from a rendered board."""
    rows = _rows(text)
    board = Board(len(rows), human_symbol)
    for y, row in enumerate(rows):
        if len(row) != board.dimension:
            msg = f"Row {y} has {len(row)} cells, expected {board.dimension}"
            raise ValueError(msg)
        for x, char in enumerate(row):
            symbol = _SYMBOLS[char]
            if symbol is not None:
                board.set_cell(x, y, symbol)
    return board
